"""A spinning reel of fruit symbols."""

from __future__ import annotations

import math
import random

from . import constants
from .constants import Rect
from .rng import get_engine
from .symbol import Symbol, SymbolType, symbol_offset


class Reel:
    """One reel: speeds up, spins, slows down and settles on a symbol."""

    def __init__(
        self,
        position: Rect,
        max_speed: float = constants.BASIC_MAX_SPEED,
        acceleration: float = constants.BASIC_ACCELERATION,
        rng: random.Random | None = None,
    ) -> None:
        self.position = position
        self._rng = rng if rng is not None else get_engine()

        self._spinning = False
        self._max_speed = max_speed
        self._current_speed = 0.0
        self._acceleration = acceleration
        self._deceleration = 0.0
        self._central: Symbol | None = None
        self._finishing = False
        self._at_max_speed = False

        kinds = list(range(constants.SYMBOLS_COUNT))
        self._rng.shuffle(kinds)
        self.symbols = [
            Symbol(SymbolType(kind), symbol_offset(order))
            for order, kind in enumerate(kinds)
        ]

    @property
    def x(self) -> int:
        return self.position.x

    @property
    def y(self) -> int:
        return self.position.y

    @property
    def width(self) -> int:
        return self.position.width

    @property
    def height(self) -> int:
        return self.position.height

    @property
    def result(self) -> Symbol | None:
        """The symbol the reel is stopping on, once a stop was requested."""
        return self._central

    @property
    def speed(self) -> float:
        return self._current_speed

    def is_in_place(self) -> bool:
        """True when the reel is neither spinning nor settling."""
        return not (self._spinning or self._finishing)

    def is_max_speed(self) -> bool:
        """True once acceleration has been capped at the top speed."""
        return self._at_max_speed

    def start_spinning(self) -> None:
        self._spinning = True

    def increase_speed(self, dt: float) -> None:
        """Accelerate for ``dt`` seconds, capped at the reel's top speed."""
        if self._current_speed < self._max_speed:
            self._current_speed += self._acceleration * dt
            if self._current_speed > self._max_speed:
                self._current_speed = self._max_speed
                self._at_max_speed = True

    def stop_spinning(self) -> Symbol:
        """Pick the symbol to land on and work out the braking rate."""
        self._at_max_speed = False

        result = self.symbols[self._rng.randint(0, len(self.symbols) - 1)]
        self._central = result

        x0 = result.offset
        v = self._current_speed
        t = constants.SPEED_UP_TIME
        a = self._acceleration

        xa = x0 + v * t - (a * t**2) / 2.0
        xb = 100.0 * math.ceil((xa - 50.0) / 100.0) + 50.0

        distance = xb - x0
        self._deceleration = v**2 / (2.0 * distance) if distance else math.inf
        return result

    def decrease_speed(self, dt: float) -> None:
        """Brake for ``dt`` seconds; hand over to settling once stopped."""
        if self._central is None:
            raise RuntimeError("reel must be stopped before it can slow down")
        if not self._finishing and self._current_speed >= 0.0:
            self._current_speed -= self._deceleration * dt
        elif (
            not self._finishing
            and self._current_speed < 0.0
            and self._central.offset != constants.REEL_CENTER_PERCENT
        ):
            self._current_speed = 0.0
            self._spinning = False
            self._finishing = True

    def update(self, dt: float) -> None:
        """Advance the symbols by ``dt`` seconds of motion."""
        if self._spinning:
            for s in self.symbols:
                s.increase_offset(self._current_speed * dt)
        if self._finishing:
            self._settle(dt)

    def _settle(self, dt: float) -> None:
        target = constants.REEL_CENTER_PERCENT
        off = self._central.offset
        if abs(target - off) < 0.1:
            self._snap_to_target()
            self._finishing = False
        else:
            for s in self.symbols:
                s.increase_offset((target - off) * 6.0 * dt)

    def _snap_to_target(self) -> None:
        d = constants.REEL_CENTER_PERCENT - self._central.offset
        for s in self.symbols:
            s.increase_offset(d)