"""
Scene - rectangular (possibly jagged) grid of optional cell markers
"""

from collections import namedtuple

import numpy as np

from utils.colors import EMPTY_GLYPHS
from .vector import Vector2D

EMPTY = -1  # Occupancy value for open cells


class CellMarker(namedtuple('CellMarker', ['color'])):
    """Occupancy tag for one grid cell, carrying the wall color"""

    __slots__ = ()


def _to_marker(value):
    """Unify the accepted cell encodings into CellMarker or None"""
    if value is None or isinstance(value, CellMarker):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        # Numeric flags: 0 is open, anything else is an uncolored wall
        return CellMarker('gray') if value else None
    if not value:
        return None
    if isinstance(value, list):
        # RGB lists (e.g. from JSON) must be hashable
        value = tuple(value)
    return CellMarker(value)


class Scene:
    """
    Read-only tile grid addressed as [y][x].

    Rows may have different lengths: the scene width is the longest row
    and every missing or out-of-range cell reads as empty.
    """

    def __init__(self, rows):
        """
        Initialize scene

        Args:
            rows: Sequence of rows; each cell is a CellMarker, a color
                  (name, hex string or RGB tuple), a numeric flag, or None
        """
        self.rows = tuple(tuple(_to_marker(cell) for cell in row) for row in rows)
        self.height = len(self.rows)
        self.width = max((len(row) for row in self.rows), default=0)

        # Distinct markers in first-seen order; occupancy stores their index
        self.markers = []
        index = {}
        self.occupancy = np.full((self.height, self.width), EMPTY, dtype=np.int32)
        for y, row in enumerate(self.rows):
            for x, marker in enumerate(row):
                if marker is None:
                    continue
                if marker not in index:
                    index[marker] = len(self.markers)
                    self.markers.append(marker)
                self.occupancy[y, x] = index[marker]
        self.markers = tuple(self.markers)

    @classmethod
    def from_text(cls, lines, palette):
        """
        Build a scene from text rows

        Args:
            lines: Iterable of strings, one per row
            palette: Mapping of glyph -> color; '.' and ' ' are open cells

        Raises:
            ValueError: if a glyph is neither open nor in the palette
        """
        rows = []
        for y, line in enumerate(lines):
            row = []
            for x, glyph in enumerate(line.rstrip('\n')):
                if glyph in EMPTY_GLYPHS:
                    row.append(None)
                elif glyph in palette:
                    row.append(CellMarker(palette[glyph]))
                else:
                    raise ValueError(f"Unknown scene glyph {glyph!r} at ({x}, {y})")
            rows.append(row)
        return cls(rows)

    @property
    def size(self):
        """Scene size as Vector2D(width, height)"""
        return Vector2D(self.width, self.height)

    def contains(self, x, y):
        """Check if integer cell coordinates are inside the scene bounds"""
        return 0 <= x < self.width and 0 <= y < self.height

    def get(self, x, y):
        """Marker at cell (x, y), or None for open / out-of-range cells"""
        if y < 0 or y >= self.height or x < 0:
            return None
        row = self.rows[y]
        if x >= len(row):
            return None
        return row[x]

    def is_occupied(self, x, y):
        return self.get(x, y) is not None

    def __repr__(self):
        return f"Scene({self.width}x{self.height}, markers={len(self.markers)})"
