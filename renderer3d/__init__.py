"""
3D Renderer Module - grid raycasting first-person view
"""

from .vector import Vector2D
from .scene import Scene, CellMarker
from .raycaster import (
    Raycaster, RayHit, RayStatus,
    snap, ray_step, hitting_cell_corner, cast_ray, trace_ray,
)
from .player3d import Player3D
from .renderer import Renderer3D, Strip
from .minimap import Minimap
from .canvas import PygameCanvas

__all__ = ['Vector2D', 'Scene', 'CellMarker',
           'Raycaster', 'RayHit', 'RayStatus',
           'snap', 'ray_step', 'hitting_cell_corner', 'cast_ray', 'trace_ray',
           'Player3D', 'Renderer3D', 'Strip', 'Minimap', 'PygameCanvas']
