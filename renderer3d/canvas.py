"""
Canvas - drawing surface capability used by the renderers

The renderers only need three primitives (filled circle, line, filled
rectangle) plus the surface size. PygameCanvas implements them on a
pygame.Surface with an optional scale/offset, so the minimap can draw in
scene units.
"""

import pygame


def to_color(color):
    """Convert a color name, hex string or RGB tuple to pygame.Color"""
    if isinstance(color, pygame.Color):
        return color
    if isinstance(color, str):
        return pygame.Color(color)
    return pygame.Color(*color)


class PygameCanvas:
    """
    Drawing surface backed by a pygame.Surface
    """

    def __init__(self, surface, scale=(1.0, 1.0), offset=(0.0, 0.0)):
        """
        Initialize canvas

        Args:
            surface: pygame.Surface to draw on
            scale: (sx, sy) pixels per canvas unit
            offset: (ox, oy) pixel position of the canvas origin
        """
        self.surface = surface
        self.scale = (float(scale[0]), float(scale[1]))
        self.offset = (float(offset[0]), float(offset[1]))

    def transformed(self, scale, offset):
        """Canvas drawing on the same surface with another scale/offset"""
        return PygameCanvas(self.surface, scale, offset)

    def get_size(self):
        """Size of the drawing area in canvas units"""
        width, height = self.surface.get_size()
        return (width / self.scale[0], height / self.scale[1])

    def to_pixels(self, point):
        """Convert a canvas-space point to integer pixel coordinates"""
        return (
            int(round(point[0] * self.scale[0] + self.offset[0])),
            int(round(point[1] * self.scale[1] + self.offset[1])),
        )

    def _pixel_length(self, length):
        return max(1, int(round(length * (self.scale[0] + self.scale[1]) / 2)))

    def fill(self, color):
        self.surface.fill(to_color(color))

    def draw_circle(self, center, radius, color):
        """Filled circle"""
        pygame.draw.circle(self.surface, to_color(color), self.to_pixels(center),
                           self._pixel_length(radius))

    def draw_line(self, start, end, width, color):
        pygame.draw.line(self.surface, to_color(color), self.to_pixels(start),
                         self.to_pixels(end), self._pixel_length(width))

    def draw_rect(self, origin, width, height, color):
        """Filled rectangle; edges are rounded so adjacent rectangles never leave gaps"""
        x0, y0 = self.to_pixels(origin)
        x1, y1 = self.to_pixels((origin[0] + width, origin[1] + height))
        if x1 <= x0 or y1 <= y0:
            return
        pygame.draw.rect(self.surface, to_color(color), pygame.Rect(x0, y0, x1 - x0, y1 - y0))
