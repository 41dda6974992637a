"""The slot machine: its reels, buttons and prize calculation."""

from __future__ import annotations

import abc
import itertools
from collections.abc import Sequence

from . import constants
from .constants import Rect
from .reel import Reel
from .symbol import SymbolType
from .widgets import Button, MessageBox


class GameController(abc.ABC):
    """The operations the state machine drives the game through."""

    @abc.abstractmethod
    def start_spinning(self) -> None:
        """Set every reel in motion."""

    @abc.abstractmethod
    def increase_spinning_speed(self, dt: float) -> None:
        """Accelerate the reels for ``dt`` seconds."""

    @abc.abstractmethod
    def stop_spinning(self) -> None:
        """Choose the results and start braking."""

    @abc.abstractmethod
    def decrease_spinning_speed(self, dt: float) -> None:
        """Brake the reels for ``dt`` seconds."""

    @abc.abstractmethod
    def update(self, dt: float) -> None:
        """Advance the reels by ``dt`` seconds of motion."""

    @abc.abstractmethod
    def are_reels_stopped(self) -> bool:
        """True when every reel has come to rest."""

    @abc.abstractmethod
    def start_showing_prize(self) -> None:
        """Work out the prize and show it."""

    @abc.abstractmethod
    def stop_showing_prize(self) -> None:
        """Hide the prize."""


def generate_reels(count: int) -> list[Reel]:
    """Lay out ``count`` reels left to right; reels further left spin faster."""
    step = constants.REEL_WIDTH + constants.REELS_SPACER
    return [
        Reel(
            Rect(
                constants.FIRST_REEL_X + i * step,
                constants.REELS_Y,
                constants.REEL_WIDTH,
                constants.REEL_HEIGHT,
            ),
            constants.BASIC_MAX_SPEED + constants.MAX_SPEED_INCR_COEFF ** (count - i),
            constants.BASIC_ACCELERATION
            + constants.ACCELERATION_INCR_COEFF ** (count - i),
        )
        for i in range(count)
    ]


def calculate_prize(result_line: Sequence[SymbolType]) -> int:
    """Ten to the power of the longest run of equal adjacent symbols."""
    if not result_line:
        raise ValueError("result line is empty")
    longest = max(sum(1 for _ in group) for _, group in itertools.groupby(result_line))
    return 10**longest


class Game(GameController):
    """The whole machine: reels, the Start/Stop buttons and the prize box."""

    def __init__(self) -> None:
        self.start_button = Button(constants.START_BUTTON_POSITION, "Start")
        self.stop_button = Button(constants.STOP_BUTTON_POSITION, "Stop")
        self.prize_message_box = MessageBox()
        self.reels = generate_reels(constants.REELS_COUNT)
        self._result_line = [SymbolType.CHERRY] * constants.REELS_COUNT
        self._prize = 0
        self._showing_prize = False

    @property
    def result_line(self) -> list[SymbolType]:
        """The symbols the reels were last told to stop on, left to right."""
        return list(self._result_line)

    @property
    def prize(self) -> int:
        return self._prize

    @property
    def showing_prize(self) -> bool:
        return self._showing_prize

    def start_spinning(self) -> None:
        for reel in self.reels:
            reel.start_spinning()

    def increase_spinning_speed(self, dt: float) -> None:
        for reel in self.reels:
            reel.increase_speed(dt)

    def stop_spinning(self) -> None:
        self._result_line = [reel.stop_spinning().type for reel in self.reels]

    def decrease_spinning_speed(self, dt: float) -> None:
        for reel in self.reels:
            reel.decrease_speed(dt)

    def update(self, dt: float) -> None:
        for reel in self.reels:
            reel.update(dt)

    def are_reels_stopped(self) -> bool:
        return all(reel.is_in_place() for reel in self.reels)

    def start_showing_prize(self) -> None:
        self._prize = calculate_prize(self._result_line)
        self.prize_message_box.text = f"YOU WON {self._prize}$!!!"
        self._showing_prize = True

    def stop_showing_prize(self) -> None:
        self._showing_prize = False