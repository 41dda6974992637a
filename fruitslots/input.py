"""Turns button clicks into the questions the state machine asks."""

from __future__ import annotations

import abc

from .widgets import Button


class InputManager(abc.ABC):
    """Reads the game's buttons; front ends supply ``should_exit``."""

    def __init__(self, start_button: Button, stop_button: Button, prize_ok_button: Button) -> None:
        self._start_button = start_button
        self._stop_button = stop_button
        self._prize_ok_button = prize_ok_button

    def clear_input(self) -> None:
        """Forget every recorded click."""
        for button in (self._start_button, self._stop_button, self._prize_ok_button):
            button.unregister_click()

    def should_start(self) -> bool:
        return self._start_button.was_clicked

    def should_stop(self) -> bool:
        return self._stop_button.was_clicked

    def should_hide_prize_message_box(self) -> bool:
        return self._prize_ok_button.was_clicked

    @abc.abstractmethod
    def should_exit(self) -> bool:
        """True when the player wants to quit."""