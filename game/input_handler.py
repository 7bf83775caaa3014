"""
Input Handler - translates keyboard and pointer events into player changes
"""

import pygame

from renderer3d.vector import Vector2D

FORWARD_KEYS = (pygame.K_w, pygame.K_UP)
BACKWARD_KEYS = (pygame.K_s, pygame.K_DOWN)
TURN_LEFT_KEYS = (pygame.K_a, pygame.K_LEFT)
TURN_RIGHT_KEYS = (pygame.K_d, pygame.K_RIGHT)


class InputHandler:
    """
    Mutates the player in response to input events

    Every handled event should be followed by exactly one re-render.
    """

    def __init__(self, player, scene, pixel_to_scene=None, collide=True):
        """
        Initialize input handler

        Args:
            player: Player3D to move and rotate
            scene: Scene the player lives in
            pixel_to_scene: Optional callable(pixel) -> Vector2D; by default the
                            whole surface is mapped onto the scene
            collide: Refuse moves that end inside an occupied cell
        """
        self.player = player
        self.scene = scene
        self.pixel_to_scene = pixel_to_scene
        self.collide = collide

        # Pointer position in scene coordinates
        self.cursor = None

    def handle_event(self, event, surface_size=None):
        """
        Handle a pygame event

        Args:
            event: pygame.event.Event
            surface_size: (width, height) of the surface pointer coordinates refer to

        Returns:
            True if the view must be re-rendered
        """
        if event.type == pygame.KEYDOWN:
            return self.handle_key(event.key)
        if event.type == pygame.MOUSEMOTION:
            self.set_pointer(event.pos, surface_size)
            return True
        return False

    def handle_key(self, key):
        """
        Apply a key press

        Returns:
            True if the key is bound to a player action
        """
        scene = self.scene if self.collide else None

        if key in FORWARD_KEYS:
            self.player.move_forward(scene)
        elif key in BACKWARD_KEYS:
            self.player.move_backward(scene)
        elif key in TURN_LEFT_KEYS:
            self.player.turn_left()
        elif key in TURN_RIGHT_KEYS:
            self.player.turn_right()
        else:
            return False
        return True

    def set_pointer(self, pixel, surface_size=None):
        """
        Store the pointer position converted to scene coordinates

        Raises:
            ValueError: if no converter was given and surface_size is missing
        """
        if self.pixel_to_scene is not None:
            self.cursor = self.pixel_to_scene(pixel)
        else:
            if surface_size is None:
                raise ValueError("surface_size is required without a pixel_to_scene converter")
            self.cursor = (
                Vector2D(*pixel)
                .divide(Vector2D(*surface_size))
                .multiply(self.scene.size)
            )
        return self.cursor
