"""
3D Player - first-person viewpoint with position, facing angle and FOV cone
"""

import math

from utils.constants import FOV, NEAR_CLIPPING_PLANE, PLAYER_STEP_LEN, PLAYER_TURN_STEP
from .vector import Vector2D


class Player3D:
    """
    First-person player

    The player is owned by the render/input loop and mutated in place by
    the input handler; every mutation is followed by one re-render.
    """

    def __init__(self, position, direction=0.0, fov=FOV, near_clipping_plane=NEAR_CLIPPING_PLANE,
                 step_length=PLAYER_STEP_LEN, turn_step=PLAYER_TURN_STEP):
        """
        Initialize player

        Args:
            position: Vector2D in scene coordinates
            direction: View angle in radians (0 = +x, pi/2 = +y); not normalized
            fov: Field of view in radians
            near_clipping_plane: Distance of the near plane from the player
            step_length: Distance covered by one movement step
            turn_step: Angle covered by one rotation step
        """
        self.position = Vector2D(*position)
        self.direction = direction

        self.fov = fov
        self.near_clipping_plane = near_clipping_plane
        self.step_length = step_length
        self.turn_step = turn_step

    def view_vector(self):
        """Unit vector along the facing direction"""
        return Vector2D.from_angle(self.direction)

    def fov_range(self):
        """
        Boundary points of the viewing cone on the near plane

        Returns:
            (left, right) Vector2D tuple
        """
        near_point = self.position.add(self.view_vector().scale(self.near_clipping_plane))
        perpendicular_distance = self.near_clipping_plane * math.tan(self.fov * 0.5)
        perpendicular = (
            near_point.subtract(self.position)
            .normalize()
            .rotate90()
            .scale(perpendicular_distance)
        )
        return near_point.subtract(perpendicular), near_point.add(perpendicular)

    def move(self, distance, scene=None):
        """
        Translate along the facing vector

        Args:
            distance: Signed distance (negative moves backwards)
            scene: Optional Scene; a move ending in an occupied cell is refused

        Returns:
            True if the player moved
        """
        target = self.position.add(self.view_vector().scale(distance))
        if scene is not None and scene.is_occupied(math.floor(target.x), math.floor(target.y)):
            return False
        self.position = target
        return True

    def move_forward(self, scene=None):
        return self.move(self.step_length, scene)

    def move_backward(self, scene=None):
        return self.move(-self.step_length, scene)

    def rotate(self, delta_angle):
        """
        Rotate player view

        Args:
            delta_angle: Angle change in radians
        """
        self.direction += delta_angle

    def turn_left(self):
        self.rotate(-self.turn_step)

    def turn_right(self):
        self.rotate(self.turn_step)

    def __repr__(self):
        return (f"Player3D(pos=({self.position.x:.2f}, {self.position.y:.2f}), "
                f"angle={math.degrees(self.direction):.1f}°)")
