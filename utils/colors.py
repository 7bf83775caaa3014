"""
Color palette for the grid raycaster
"""

# Background colors
COLOR_BG = (59, 59, 59)           # Canvas background (#3b3b3b)
COLOR_CEILING = (40, 42, 50)
COLOR_FLOOR = (70, 66, 60)
COLOR_MINIMAP_BG = (24, 24, 24)

# Minimap colors
COLOR_GRID_LINES = (255, 255, 255)
COLOR_PLAYER = (255, 0, 255)      # Player dot (magenta)
COLOR_FOV = (255, 0, 255)         # FOV cone lines
COLOR_CURSOR_RAY = (255, 165, 0)  # Cursor ray and step points (orange)

# Cell marker colors by glyph for text scenes
MARKER_PALETTE = {
    'r': 'red',
    'g': 'green',
    'b': 'blue',
    'y': 'yellow',
    'p': 'purple',
    'c': 'cyan',
    'o': 'orange',
    'w': 'white',
    '#': 'gray',
}

EMPTY_GLYPHS = ('.', ' ')
