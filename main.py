"""
Grid Raycaster - first-person view of a tile grid

Event-driven: the frame is rendered once at startup and once after every
input event that changes the player or the cursor.
"""

import logging

import pygame

from config import (
    GAME_TITLE, GAME_VERSION, WINDOW_WIDTH, WINDOW_HEIGHT, LOG_LEVEL, LOG_FILE,
    DEFAULT_SCENE, PLAYER_START, PLAYER_START_DIRECTION,
)
from game.display_manager import DisplayManager
from game.input_handler import InputHandler
from renderer3d import Raycaster, Player3D, Renderer3D, Minimap, PygameCanvas, Scene, Vector2D
from utils.colors import COLOR_BG, MARKER_PALETTE
from utils.logging_config import setup_logging

logger = logging.getLogger(__name__)


class RaycastApp:
    """
    Main application class
    """
    def __init__(self, scene=None, player=None):
        pygame.init()

        self.scene = scene if scene is not None else Scene.from_text(DEFAULT_SCENE, MARKER_PALETTE)
        self.player = player if player is not None else Player3D(
            Vector2D(*PLAYER_START), PLAYER_START_DIRECTION
        )

        raycaster = Raycaster()
        self.renderer = Renderer3D(raycaster)
        self.minimap = Minimap(raycaster)
        self.input_handler = InputHandler(self.player, self.scene,
                                          pixel_to_scene=self.minimap.pixel_to_scene)

        self.display_manager = DisplayManager(WINDOW_WIDTH, WINDOW_HEIGHT)
        self.screen = self.display_manager.create_screen(
            WINDOW_WIDTH, WINDOW_HEIGHT, title=f"{GAME_TITLE} v{GAME_VERSION}"
        )
        self.running = True

        logger.info("Loaded scene %r, %r", self.scene, self.player)

    def render(self):
        """Render one full frame"""
        canvas = PygameCanvas(self.screen)
        canvas.fill(COLOR_BG)
        self.renderer.render(canvas, self.scene, self.player)
        self.minimap.render(canvas, self.scene, self.player, self.input_handler.cursor)
        pygame.display.flip()

    def handle_event(self, event):
        """
        Handle one event

        Returns:
            True if the frame must be re-rendered
        """
        if event.type == pygame.QUIT:
            self.running = False
            return False

        if event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                self.running = False
                return False
            if event.key == pygame.K_F11:
                self.display_manager.toggle_fullscreen()
                self.screen = self.display_manager.screen
                return True

        if event.type == pygame.VIDEORESIZE:
            self.display_manager.handle_resize(event.w, event.h)
            self.screen = self.display_manager.screen
            return True

        changed = self.input_handler.handle_event(event, self.screen.get_size())
        if changed and event.type == pygame.KEYDOWN:
            logger.debug("%r", self.player)
        return changed

    def run(self):
        """Block on events, re-rendering once per handled event"""
        self.render()
        while self.running:
            event = pygame.event.wait()
            if self.handle_event(event):
                self.render()

        pygame.quit()
        logger.info("Closed.")


def main():
    setup_logging(LOG_LEVEL, LOG_FILE)
    RaycastApp().run()


if __name__ == "__main__":
    main()
