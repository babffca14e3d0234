"""Game-wide settings and screen identifiers."""

from __future__ import annotations

from enum import IntEnum

WINDOW_WIDTH = 1024
WINDOW_HEIGHT = 768
WINDOW_TITLE = "Arkanoid Game"

BORDER_SIZE = 10.0
LEVEL_RATIO = 2.0 / 3.0
UI_RATIO = 1.0 / 3.0

ANCIENT_FONT = "Assets/Ancient Medium.ttf"
OPEN_SANS_FONT = "Assets/Open Sans.ttf"

COL_NUM = 11
ROW_NUM = 28
CELL_COUNT = COL_NUM * ROW_NUM


class ScreenType(IntEnum):
    """Identifiers of the game's screens."""

    UNKNOWN = 0
    MAIN = 1
    GAME = 2
    PAUSE = 3
    SCORE = 4


class ScreenRequestReason(IntEnum):
    """Why a screen transition was requested."""

    DEFAULT = 0
    FORCE = 1
    ERROR = 2