"""
Display Manager - Handles window creation, fullscreen toggle and resizing
"""

import logging

import pygame
from utils.constants import DisplayMode, MIN_WINDOW_WIDTH, MIN_WINDOW_HEIGHT

logger = logging.getLogger(__name__)


class DisplayManager:
    """
    Owns the pygame display surface
    """
    def __init__(self, width=800, height=600):
        self.mode = DisplayMode.WINDOWED

        # Screen dimensions
        self.screen_width = width
        self.screen_height = height

        # Store windowed size for restoring from fullscreen
        self.windowed_width = width
        self.windowed_height = height

        # Pygame screen surface
        self.screen = None

    def create_screen(self, width, height, mode=None, title=None):
        """
        Create or recreate the display screen

        Args:
            width: Screen width
            height: Screen height
            mode: DisplayMode (optional, uses current mode if not specified)
            title: Window title (optional)

        Returns:
            pygame.Surface: The screen surface
        """
        if mode is not None:
            self.mode = mode

        # Clamp minimum size
        width = max(MIN_WINDOW_WIDTH, width)
        height = max(MIN_WINDOW_HEIGHT, height)

        if self.mode == DisplayMode.FULLSCREEN:
            self.screen = pygame.display.set_mode((0, 0), pygame.FULLSCREEN)
        else:
            self.screen = pygame.display.set_mode((width, height), pygame.RESIZABLE)
            self.windowed_width = width
            self.windowed_height = height

        self.screen_width, self.screen_height = self.screen.get_size()

        if title:
            pygame.display.set_caption(title)

        logger.info("Display %dx%d (%s)", self.screen_width, self.screen_height, self.mode.name)
        return self.screen

    def toggle_fullscreen(self):
        """
        Toggle between fullscreen and windowed mode

        Returns:
            tuple: (new_width, new_height) after toggle
        """
        if self.mode == DisplayMode.FULLSCREEN:
            self.create_screen(self.windowed_width, self.windowed_height, DisplayMode.WINDOWED)
        else:
            self.create_screen(self.screen_width, self.screen_height, DisplayMode.FULLSCREEN)
        return (self.screen_width, self.screen_height)

    def handle_resize(self, event_w, event_h):
        """
        Handle VIDEORESIZE event

        Returns:
            tuple: (new_width, new_height) after resize
        """
        # Ignore resize events in fullscreen mode
        if self.mode == DisplayMode.FULLSCREEN:
            return (self.screen_width, self.screen_height)

        new_width = max(MIN_WINDOW_WIDTH, event_w)
        new_height = max(MIN_WINDOW_HEIGHT, event_h)

        # In pygame 2 the display surface is usually resized automatically.
        surface = pygame.display.get_surface()
        if surface is not None and surface.get_size() == (new_width, new_height):
            self.screen = surface
        else:
            self.screen = pygame.display.set_mode((new_width, new_height), pygame.RESIZABLE)

        self.screen_width, self.screen_height = self.screen.get_size()
        self.windowed_width = self.screen_width
        self.windowed_height = self.screen_height
        return (self.screen_width, self.screen_height)
