"""
2D Vector - immutable value type used for positions, directions and ray points
"""

import math
from collections import namedtuple


class Vector2D(namedtuple('Vector2D', ['x', 'y'])):
    """
    Immutable 2D vector. Every operation returns a new vector.

    Being a tuple, a vector unpacks as (x, y) and can be handed
    directly to pygame drawing calls.
    """

    __slots__ = ()

    def __new__(cls, x=0.0, y=0.0):
        return super().__new__(cls, float(x), float(y))

    @classmethod
    def from_angle(cls, angle):
        """Unit vector pointing along angle (radians)"""
        return cls(math.cos(angle), math.sin(angle))

    def add(self, that):
        return Vector2D(self.x + that.x, self.y + that.y)

    def subtract(self, that):
        return Vector2D(self.x - that.x, self.y - that.y)

    def multiply(self, that):
        """Element-wise multiplication"""
        return Vector2D(self.x * that.x, self.y * that.y)

    def divide(self, that):
        """Element-wise division"""
        return Vector2D(self.x / that.x, self.y / that.y)

    def length(self):
        return math.hypot(self.x, self.y)

    def normalize(self):
        """Unit vector in the same direction; the zero vector stays zero"""
        length = self.length()
        if length == 0:
            return Vector2D(0.0, 0.0)
        return Vector2D(self.x / length, self.y / length)

    def scale(self, factor):
        return Vector2D(self.x * factor, self.y * factor)

    def distance_to(self, that):
        return self.subtract(that).length()

    def rotate90(self):
        """Rotate by 90 degrees (counter-clockwise in a y-up frame)"""
        return Vector2D(-self.y, self.x)

    def lerp(self, that, t):
        """Linear interpolation from self (t=0) to that (t=1)"""
        return that.subtract(self).scale(t).add(self)

    def dot(self, that):
        return self.x * that.x + self.y * that.y

    # Operator shortcuts for the arithmetic above
    def __add__(self, that):
        return self.add(that)

    def __sub__(self, that):
        return self.subtract(that)

    def __neg__(self):
        return Vector2D(-self.x, -self.y)

    def __mul__(self, factor):
        return self.scale(factor)

    __rmul__ = __mul__

    def __repr__(self):
        return f"Vector2D({self.x:.4f}, {self.y:.4f})"
