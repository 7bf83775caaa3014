"""Test configuration.

Pytest sometimes runs with the current working directory set to ``tests/``.
Make sure the project root (and thus the ``renderer3d`` package) is importable.
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


class RecordingCanvas:
    """Drawing surface that records primitive calls instead of drawing."""

    def __init__(self, width: float, height: float) -> None:
        self.size = (width, height)
        self.calls: list[tuple] = []
        self.transforms: list[tuple] = []

    def get_size(self):
        return self.size

    def transformed(self, scale, offset):
        self.transforms.append((scale, offset))
        return self

    def fill(self, color) -> None:
        self.calls.append(("fill", color))

    def draw_circle(self, center, radius, color) -> None:
        self.calls.append(("circle", center, radius, color))

    def draw_line(self, start, end, width, color) -> None:
        self.calls.append(("line", start, end, width, color))

    def draw_rect(self, origin, width, height, color) -> None:
        self.calls.append(("rect", origin, width, height, color))

    def of_kind(self, kind: str) -> list[tuple]:
        return [call for call in self.calls if call[0] == kind]


@pytest.fixture
def recording_canvas():
    return RecordingCanvas(240, 120)


@pytest.fixture
def boxed_scene():
    from renderer3d.scene import Scene
    from utils.colors import MARKER_PALETTE

    return Scene.from_text(
        [
            "rrrrrrrrrr",
            "r........r",
            "r........r",
            "r........r",
            "r........r",
            "r........r",
            "r........r",
            "r........r",
            "r........r",
            "rrrrrrrrrr",
        ],
        MARKER_PALETTE,
    )
