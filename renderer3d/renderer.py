"""
3D Scene Renderer - column projector for the first-person view

For every screen column a ray is cast from the player towards the near
plane, and the hit is turned into a vertically centered wall strip whose
height is inversely proportional to the perpendicular (fisheye-free) depth.
"""

from collections import namedtuple

import numpy as np

from utils.colors import COLOR_CEILING, COLOR_FLOOR
from utils.constants import FAR_CLIPPING_PLANE, SCREEN_WIDTH
from utils.helpers import clamp
from .raycaster import (
    Raycaster, RayStatus,
    COL_HIT_X, COL_HIT_Y, COL_CELL_X, COL_CELL_Y, COL_STATUS,
)

Strip = namedtuple('Strip', ['column', 'height', 'color', 'depth'])


class Renderer3D:
    """
    First-person view renderer
    """

    def __init__(self, raycaster=None, columns=SCREEN_WIDTH, far_clipping_plane=FAR_CLIPPING_PLANE):
        """
        Initialize renderer

        Args:
            raycaster: Raycaster instance (a default one is created if omitted)
            columns: Number of screen columns (one ray each)
            far_clipping_plane: Walls deeper than this are not drawn
        """
        self.raycaster = raycaster if raycaster is not None else Raycaster()
        self.columns = columns
        self.far_clipping_plane = far_clipping_plane

    @staticmethod
    def strip_height(depth, canvas_height):
        """Projected wall height for a perpendicular depth"""
        return canvas_height / depth

    def column_target(self, player, column, fov_range=None):
        """Point on the near plane that column's ray passes through"""
        left, right = fov_range if fov_range is not None else player.fov_range()
        return left.lerp(right, column / self.columns)

    def project_column(self, scene, player, column, canvas_height, fov_range=None):
        """
        Project a single column

        Args:
            scene: Scene to render
            player: Player3D viewpoint
            column: Column index in [0, columns)
            canvas_height: Height of the drawing area
            fov_range: Optional precomputed player.fov_range()

        Returns:
            Strip(column, height, color, depth), or None when nothing is hit
        """
        target = self.column_target(player, column, fov_range)
        hit = self.raycaster.cast(scene, player.position, target)
        if hit.status is not RayStatus.HIT:
            return None

        # Distance to the view plane, not to the player
        depth = hit.point.subtract(player.position).dot(player.view_vector())
        if depth <= 0 or depth > self.far_clipping_plane:
            return None
        return Strip(column, self.strip_height(depth, canvas_height), hit.marker.color, depth)

    def project_frame(self, scene, player, canvas_height):
        """
        Project every column using the JIT batch caster

        Returns:
            list of Strip for the columns that hit a wall, in column order
        """
        left, right = player.fov_range()
        position = player.position
        view = player.view_vector()

        results = self.raycaster.cast_columns(scene, position, left, right, self.columns)

        depths = (results[:, COL_HIT_X] - position.x) * view.x + \
                 (results[:, COL_HIT_Y] - position.y) * view.y
        visible = (
            (results[:, COL_STATUS] == RayStatus.HIT.value)
            & (depths > 0)
            & (depths <= self.far_clipping_plane)
        )

        strips = []
        for column in np.flatnonzero(visible):
            cell_x = int(results[column, COL_CELL_X])
            cell_y = int(results[column, COL_CELL_Y])
            marker = scene.markers[scene.occupancy[cell_y, cell_x]]
            depth = float(depths[column])
            strips.append(Strip(int(column), self.strip_height(depth, canvas_height),
                                marker.color, depth))
        return strips

    def render(self, canvas, scene, player):
        """
        Render the first-person view

        Args:
            canvas: Drawing surface (see renderer3d.canvas)
            scene: Scene to render
            player: Player3D viewpoint

        Returns:
            list of drawn Strip
        """
        width, height = canvas.get_size()

        # Ceiling and floor
        canvas.draw_rect((0, 0), width, height / 2, COLOR_CEILING)
        canvas.draw_rect((0, height / 2), width, height - height / 2, COLOR_FLOOR)

        strip_width = width / self.columns
        strips = self.project_frame(scene, player, height)
        for strip in strips:
            strip_h = clamp(strip.height, 0, height)
            canvas.draw_rect(
                (strip.column * strip_width, (height - strip_h) / 2),
                strip_width, strip_h, strip.color
            )
        return strips
