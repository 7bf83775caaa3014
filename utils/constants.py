"""
Global constants for the grid raycaster
"""

import math
from enum import Enum, auto


class DisplayMode(Enum):
    """Window display modes"""
    WINDOWED = auto()
    FULLSCREEN = auto()


# Window settings
MIN_WINDOW_WIDTH = 320
MIN_WINDOW_HEIGHT = 240

# Camera / projection
FOV = math.pi * (60 / 180)
NEAR_CLIPPING_PLANE = 1.25
FAR_CLIPPING_PLANE = 20.0
SCREEN_WIDTH = 240  # Number of screen columns (rays per frame)

# Player settings
PLAYER_STEP_LEN = 0.5
PLAYER_TURN_STEP = math.pi / 16

# Ray stepping
EPSILON = 1e-6
MAX_STEPS_PADDING = 4  # Added to width + height for the stepping bound

# Minimap (scene units)
POINT_RADIUS = 0.12
LINE_WIDTH = 0.05
GRID_LINE_WIDTH = 0.02
MINIMAP_SCALE = 0.3  # Fraction of the screen height used by the minimap
MINIMAP_MARGIN = 10  # Pixels
