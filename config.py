"""
Application settings
"""

import logging
import math

GAME_TITLE = "Grid Raycaster"
GAME_VERSION = "0.1.0"

WINDOW_WIDTH = 960
WINDOW_HEIGHT = 600

LOG_LEVEL = logging.INFO
LOG_FILE = None

# Scene rows: '.' is open space, other glyphs map through utils.colors.MARKER_PALETTE
DEFAULT_SCENE = [
    "rrrrrrrrrr",
    "r........r",
    "r..gg....r",
    "r...g..b.r",
    "r......b.r",
    "r.y......r",
    "r.y...pp.r",
    "r.....p..r",
    "r........r",
    "rrrrrrrrrr",
]

PLAYER_START = (1.5, 8.5)
PLAYER_START_DIRECTION = -math.pi / 4
