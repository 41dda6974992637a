"""Clickable buttons and the prize message box."""

from __future__ import annotations

from dataclasses import dataclass, field

from . import constants
from .constants import Rect


@dataclass
class Button:
    """A labelled button that remembers whether it has been clicked."""

    position: Rect
    label: str
    was_clicked: bool = field(default=False, init=False)

    def register_click(self) -> None:
        """Record a click."""
        self.was_clicked = True

    def unregister_click(self) -> None:
        """Forget any recorded click."""
        self.was_clicked = False

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


class MessageBox:
    """A panel showing a line of text and an "Ok" button."""

    def __init__(
        self,
        position: Rect = constants.DEFAULT_MESSAGE_BOX_POSITION,
        button_position: Rect = constants.DEFAULT_OK_BUTTON_POSITION,
    ) -> None:
        self.position = position
        self.ok_button = Button(button_position, "Ok")
        self.text = ""

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