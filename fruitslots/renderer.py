"""Drawing the slot machine with pygame and reading its window events."""

from __future__ import annotations

import abc
from collections.abc import Callable, Iterable
from typing import Optional

import pygame

from . import constants
from .constants import Rect
from .game import Game
from .input import InputManager
from .reel import Reel
from .symbol import Symbol, SymbolType
from .widgets import Button, MessageBox

WINDOW_WIDTH = 1500
WINDOW_HEIGHT = WINDOW_WIDTH // 2
TARGET_FPS = 60
FONT_SIZE = 40
TITLE = "Slots"

Color = tuple[int, int, int]

BACKGROUND_COLOR: Color = (245, 245, 245)
REEL_COLOR: Color = (200, 200, 200)
TEXT_COLOR: Color = (80, 80, 80)
BUTTON_COLOR: Color = (201, 201, 201)
BUTTON_BORDER_COLOR: Color = (131, 131, 131)
BUTTON_TEXT_COLOR: Color = (104, 104, 104)
PANEL_COLOR: Color = (245, 245, 245)
PANEL_BORDER_COLOR: Color = (144, 171, 181)

SYMBOL_COLORS: dict[SymbolType, Color] = {
    SymbolType.CHERRY: (230, 41, 55),
    SymbolType.BANANA: (253, 249, 0),
    SymbolType.ORANGE: (255, 161, 0),
}


class Renderer(abc.ABC):
    """A front end that owns the window and draws the game each frame."""

    @abc.abstractmethod
    def init(self) -> None:
        """Open the window."""

    @abc.abstractmethod
    def deinit(self) -> None:
        """Close the window."""

    @abc.abstractmethod
    def get_dt(self) -> float:
        """Seconds the previous frame took."""

    @abc.abstractmethod
    def draw(self, game: Game) -> None:
        """Draw one frame of ``game``."""


class PygameRenderer(Renderer):
    """Draws the virtual canvas scaled up to a pygame window."""

    def __init__(self) -> None:
        self.window_width = WINDOW_WIDTH
        self.window_height = WINDOW_HEIGHT
        self.scale = WINDOW_WIDTH / constants.CANVAS_WIDTH
        self._screen: Optional[pygame.Surface] = None
        self._clock: Optional[pygame.time.Clock] = None
        self._font: Optional[pygame.font.Font] = None
        self._dt = 0.0
        self._mouse_down = False

    def init(self) -> None:
        pygame.init()
        self._screen = pygame.display.set_mode((self.window_width, self.window_height))
        pygame.display.set_caption(TITLE)
        self._clock = pygame.time.Clock()
        self._get_font()

    def deinit(self) -> None:
        pygame.quit()
        self._screen = None
        self._clock = None
        self._font = None

    def get_dt(self) -> float:
        return self._dt

    def draw(self, game: Game) -> None:
        if self._screen is None or self._clock is None:
            raise RuntimeError("renderer is not initialised")
        pressed = bool(pygame.mouse.get_pressed()[0])
        if self._mouse_down and not pressed:
            self.click_at(game, pygame.mouse.get_pos())
        self._mouse_down = pressed
        self.render(self._screen, game)
        pygame.display.flip()
        self._dt = self._clock.tick(TARGET_FPS) / 1000.0

    def screen_rect(self, rect: Rect) -> pygame.Rect:
        """Scale a canvas rectangle to window pixels."""
        s = self.scale
        return pygame.Rect(
            round(rect.x * s), round(rect.y * s), round(rect.width * s), round(rect.height * s)
        )

    def symbol_rects(self, reel_bounds: pygame.Rect, symbol: Symbol) -> list[pygame.Rect]:
        """Window rectangles a symbol covers; two when it wraps past the bottom."""
        w = constants.SYMBOL_WIDTH * self.scale
        h = constants.SYMBOL_HEIGHT * self.scale
        x = reel_bounds.x + reel_bounds.width / 2 - w / 2

        offsets = [symbol.offset]
        if symbol.offset + constants.SYMBOL_HEIGHT_PERCENT / 2.0 > constants.REEL_HEIGHT_PERCENT:
            offsets.append(symbol.offset - constants.REEL_HEIGHT_PERCENT)

        return [
            pygame.Rect(
                round(x),
                round(reel_bounds.y + reel_bounds.height * (off / 100.0) - w / 2),
                round(w),
                round(h),
            )
            for off in offsets
        ]

    def click_at(self, game: Game, pos: tuple[int, int]) -> None:
        """Register a click on every visible button under ``pos``."""
        for button in self._visible_buttons(game):
            if self.screen_rect(button.position).collidepoint(pos):
                button.register_click()

    def render(self, surface: pygame.Surface, game: Game) -> None:
        """Paint the whole scene onto ``surface``."""
        surface.fill(BACKGROUND_COLOR)

        self._draw_button(surface, game.start_button)
        self._draw_button(surface, game.stop_button)

        for reel in game.reels:
            self._draw_reel(surface, reel)

        s = self.scale
        first = game.reels[0]
        upper = pygame.Rect(
            0,
            0,
            round((game.start_button.x - constants.MARGIN) * s),
            round(first.y * s),
        )
        surface.fill(BACKGROUND_COLOR, upper)

        bottom = pygame.Rect(
            round(first.x * s),
            round((first.y + first.height) * s),
            round(game.stop_button.x * s),
            round(constants.CANVAS_HEIGHT * s),
        )
        surface.fill(BACKGROUND_COLOR, bottom)

        if game.showing_prize:
            self._draw_message_box(surface, game.prize_message_box)

    def _visible_buttons(self, game: Game) -> Iterable[Button]:
        yield game.start_button
        yield game.stop_button
        if game.showing_prize:
            yield game.prize_message_box.ok_button

    def _get_font(self) -> pygame.font.Font:
        if self._font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            self._font = pygame.font.Font(None, FONT_SIZE)
        return self._font

    def _draw_button(self, surface: pygame.Surface, button: Button) -> None:
        bounds = self.screen_rect(button.position)
        pygame.draw.rect(surface, BUTTON_COLOR, bounds)
        pygame.draw.rect(surface, BUTTON_BORDER_COLOR, bounds, 2)
        label = self._get_font().render(button.label, True, BUTTON_TEXT_COLOR)
        surface.blit(label, label.get_rect(center=bounds.center))

    def _draw_reel(self, surface: pygame.Surface, reel: Reel) -> None:
        bounds = self.screen_rect(reel.position)
        pygame.draw.rect(surface, REEL_COLOR, bounds)
        for symbol in reel.symbols:
            color = SYMBOL_COLORS[symbol.type]
            for rect in self.symbol_rects(bounds, symbol):
                pygame.draw.rect(surface, color, rect)

    def _draw_message_box(self, surface: pygame.Surface, box: MessageBox) -> None:
        bounds = self.screen_rect(box.position)
        pygame.draw.rect(surface, PANEL_COLOR, bounds)
        pygame.draw.rect(surface, PANEL_BORDER_COLOR, bounds, 1)
        self._draw_button(surface, box.ok_button)

        text = self._get_font().render(box.text, True, TEXT_COLOR)
        text_x = int((box.x + box.width // 2) * self.scale - text.get_width() / 2)
        text_y = int((box.y + box.height // 2 - constants.MARGIN) * self.scale)
        surface.blit(text, (text_x, text_y))


class PygameInputHandler(InputManager):
    """Button input plus window events: closing the window or pressing Escape."""

    def __init__(
        self,
        start_button: Button,
        stop_button: Button,
        prize_ok_button: Button,
        event_source: Optional[Callable[[], Iterable[pygame.event.Event]]] = None,
    ) -> None:
        super().__init__(start_button, stop_button, prize_ok_button)
        self._event_source = event_source if event_source is not None else pygame.event.get
        self._closed = False

    def should_exit(self) -> bool:
        for event in self._event_source():
            if event.type == pygame.QUIT or (
                event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE
            ):
                self._closed = True
        return self._closed