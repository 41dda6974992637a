"""Layout, timing and speed settings shared by the whole game."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle on the virtual canvas."""

    x: int
    y: int
    width: int
    height: int


# How many symbols sit on one reel.
SYMBOLS_COUNT = 3

# How many reels the machine has.
REELS_COUNT = 5

# Virtual canvas size; the renderer scales it to the window.
CANVAS_WIDTH = 1000
CANVAS_HEIGHT = CANVAS_WIDTH // 2

# Margin between the canvas edges and the UI elements.
MARGIN = CANVAS_WIDTH // 20

# Size shared by the "Start" and "Stop" buttons.
BUTTON_WIDTH = CANVAS_WIDTH // 5
BUTTON_HEIGHT = CANVAS_HEIGHT // 10

# Both buttons share one column on the right.
BUTTON_X = CANVAS_WIDTH - BUTTON_WIDTH - MARGIN
START_BUTTON_Y = MARGIN
STOP_BUTTON_Y = CANVAS_HEIGHT - BUTTON_HEIGHT - MARGIN

START_BUTTON_POSITION = Rect(BUTTON_X, START_BUTTON_Y, BUTTON_WIDTH, BUTTON_HEIGHT)
STOP_BUTTON_POSITION = Rect(BUTTON_X, STOP_BUTTON_Y, BUTTON_WIDTH, BUTTON_HEIGHT)

# Horizontal gap between neighbouring reels.
REELS_SPACER = CANVAS_WIDTH // 100

REEL_WIDTH = (BUTTON_X - 2 * MARGIN - (REELS_COUNT - 1) * REELS_SPACER) // REELS_COUNT
REEL_HEIGHT = CANVAS_HEIGHT - 2 * MARGIN

FIRST_REEL_X = MARGIN
REELS_Y = MARGIN

# Gap between a symbol and the edges of its reel.
SYMBOL_MARGIN = CANVAS_WIDTH // 100

SYMBOL_WIDTH = min(REEL_WIDTH, REEL_HEIGHT // SYMBOLS_COUNT) - SYMBOL_MARGIN * 2
SYMBOL_HEIGHT = SYMBOL_WIDTH

# Positions along a reel are measured in percent of its height.
REEL_HEIGHT_PERCENT = 100.0
REEL_CENTER_PERCENT = REEL_HEIGHT_PERCENT / 2.0
SYMBOL_HEIGHT_PERCENT = SYMBOL_HEIGHT / REEL_HEIGHT * 100.0
SYMBOLS_DISTANCE_PERCENT = REEL_HEIGHT_PERCENT / SYMBOLS_COUNT

# Seconds the reels take to reach full speed.
SPEED_UP_TIME = 1.0

# Top speed and acceleration of the slowest (right-most) reel; every reel to
# the left gets a bonus that grows by these coefficients.
BASIC_MAX_SPEED = 300.0
MAX_SPEED_INCR_COEFF = 2.5
BASIC_ACCELERATION = BASIC_MAX_SPEED / SPEED_UP_TIME
ACCELERATION_INCR_COEFF = MAX_SPEED_INCR_COEFF

# How eagerly symbols snap into place at the end of a spin.
LERP_COEFF = 4.0

# Seconds after which spinning reels stop by themselves.
AUTO_STOP_TIME = 10.0

MESSAGE_BOX_WIDTH = CANVAS_WIDTH // 2
MESSAGE_BOX_HEIGHT = CANVAS_HEIGHT // 2
MESSAGE_BOX_X = CANVAS_WIDTH // 2 - MESSAGE_BOX_WIDTH // 2
MESSAGE_BOX_Y = CANVAS_HEIGHT // 2 - MESSAGE_BOX_HEIGHT // 2

DEFAULT_MESSAGE_BOX_POSITION = Rect(
    MESSAGE_BOX_X, MESSAGE_BOX_Y, MESSAGE_BOX_WIDTH, MESSAGE_BOX_HEIGHT
)

OK_BUTTON_WIDTH = MESSAGE_BOX_WIDTH // 5
OK_BUTTON_HEIGHT = MESSAGE_BOX_HEIGHT // 5
OK_BUTTON_X = MESSAGE_BOX_X + MESSAGE_BOX_WIDTH // 2 - OK_BUTTON_WIDTH // 2
OK_BUTTON_Y = MESSAGE_BOX_Y + MESSAGE_BOX_HEIGHT - OK_BUTTON_HEIGHT // 2 - MARGIN

DEFAULT_OK_BUTTON_POSITION = Rect(
    OK_BUTTON_X, OK_BUTTON_Y, OK_BUTTON_WIDTH, OK_BUTTON_HEIGHT
)