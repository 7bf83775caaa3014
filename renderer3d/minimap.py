"""
Minimap - top-down view with grid, walls, player, FOV cone and cursor ray
"""

from utils.colors import (
    COLOR_MINIMAP_BG, COLOR_GRID_LINES, COLOR_PLAYER, COLOR_FOV, COLOR_CURSOR_RAY
)
from utils.constants import (
    POINT_RADIUS, LINE_WIDTH, GRID_LINE_WIDTH, MINIMAP_SCALE, MINIMAP_MARGIN
)
from .raycaster import Raycaster
from .vector import Vector2D


class Minimap:
    """
    Minimap overlay drawn in scene units on a scaled canvas
    """

    def __init__(self, raycaster=None, fraction=MINIMAP_SCALE, margin=MINIMAP_MARGIN):
        """
        Initialize minimap

        Args:
            raycaster: Raycaster used for the cursor ray
            fraction: Largest fraction of the screen width or height used by the map
            margin: Distance in pixels from the top-left screen corner
        """
        self.raycaster = raycaster if raycaster is not None else Raycaster()
        self.fraction = fraction
        self.margin = margin

        # Pixels per scene unit, updated by layout()
        self.cell_size = 1.0

    def layout(self, screen_size, scene):
        """
        Compute the pixel size of one scene cell for a screen size

        Returns:
            (cell_size, offset) tuple
        """
        columns = max(1, scene.width)
        rows = max(1, scene.height)
        self.cell_size = min(
            screen_size[0] * self.fraction / columns,
            screen_size[1] * self.fraction / rows,
        )
        return self.cell_size, (self.margin, self.margin)

    def pixel_to_scene(self, pixel):
        """Convert a screen pixel position to scene coordinates"""
        return Vector2D(
            (pixel[0] - self.margin) / self.cell_size,
            (pixel[1] - self.margin) / self.cell_size,
        )

    def render(self, canvas, scene, player, cursor=None):
        """
        Render minimap on a pixel canvas

        Args:
            canvas: PygameCanvas in pixel units
            scene: Scene to draw
            player: Player3D instance
            cursor: Optional Vector2D cursor position in scene coordinates

        Returns:
            list of Vector2D cursor-ray step points (empty without a cursor)
        """
        cell_size, offset = self.layout(canvas.get_size(), scene)
        mini = canvas.transformed((cell_size, cell_size), offset)

        mini.draw_rect((0, 0), scene.width, scene.height, COLOR_MINIMAP_BG)

        self._draw_cells(mini, scene)
        self._draw_grid(mini, scene)
        self._draw_player(mini, player)

        if cursor is None:
            return []
        return self._draw_cursor_ray(mini, scene, player.position, cursor)

    def _draw_cells(self, mini, scene):
        """Draw occupied cells"""
        for y, row in enumerate(scene.rows):
            for x, marker in enumerate(row):
                if marker is not None:
                    mini.draw_rect((x, y), 1, 1, marker.color)

    def _draw_grid(self, mini, scene):
        """Draw vertical and horizontal grid lines"""
        for x in range(scene.width + 1):
            mini.draw_line((x, 0), (x, scene.height), GRID_LINE_WIDTH, COLOR_GRID_LINES)
        for y in range(scene.height + 1):
            mini.draw_line((0, y), (scene.width, y), GRID_LINE_WIDTH, COLOR_GRID_LINES)

    def _draw_player(self, mini, player):
        """Draw player dot and FOV cone"""
        left, right = player.fov_range()
        mini.draw_line(player.position, left, LINE_WIDTH, COLOR_FOV)
        mini.draw_line(player.position, right, LINE_WIDTH, COLOR_FOV)
        mini.draw_line(left, right, LINE_WIDTH, COLOR_FOV)
        mini.draw_circle(player.position, POINT_RADIUS, COLOR_PLAYER)

    def _draw_cursor_ray(self, mini, scene, origin, cursor):
        """Draw the ray from the player through the cursor, marking every step"""
        points, _hit = self.raycaster.trace(scene, origin, cursor)
        for start, end in zip(points, points[1:]):
            mini.draw_line(start, end, LINE_WIDTH, COLOR_CURSOR_RAY)
        for point in points[1:]:
            mini.draw_circle(point, POINT_RADIUS, COLOR_CURSOR_RAY)
        return points
