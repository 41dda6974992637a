"""Fruit symbols and their position along a reel."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from . import constants


class SymbolType(enum.IntEnum):
    """The kinds of fruit a reel can show."""

    CHERRY = 0
    BANANA = 1
    ORANGE = 2


def symbol_offset(order: int) -> float:
    """Starting offset, in percent of reel height, of the symbol at ``order``."""
    raw = constants.REEL_CENTER_PERCENT + (order - 1) * constants.SYMBOLS_DISTANCE_PERCENT
    return float(int(raw))


@dataclass
class Symbol:
    """A fruit on a reel; ``offset`` is its centre in percent of reel height."""

    type: SymbolType
    offset: float

    def increase_offset(self, distance: float) -> None:
        """Move the symbol down, wrapping to the top once it leaves the reel."""
        self.offset += distance
        if self.offset - constants.SYMBOL_HEIGHT_PERCENT / 2.0 > constants.REEL_HEIGHT_PERCENT:
            self.offset -= constants.REEL_HEIGHT_PERCENT