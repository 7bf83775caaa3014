import pygame
import pytest

from game.display_manager import DisplayManager
from utils.constants import DisplayMode, MIN_WINDOW_WIDTH, MIN_WINDOW_HEIGHT


@pytest.fixture
def display(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")
    pygame.display.init()

    manager = DisplayManager(640, 480)
    manager.create_screen(640, 480, title="test")
    yield manager
    pygame.quit()


def test_create_screen_clamps_to_minimum_size(display) -> None:
    display.create_screen(100, 100)

    assert (display.screen_width, display.screen_height) == (MIN_WINDOW_WIDTH, MIN_WINDOW_HEIGHT)


def test_resize_updates_screen_and_windowed_size(display) -> None:
    assert display.handle_resize(500, 400) == (500, 400)
    assert display.screen.get_size() == (500, 400)
    assert (display.windowed_width, display.windowed_height) == (500, 400)


def test_resize_clamps_to_minimum_size(display) -> None:
    assert display.handle_resize(10, 10) == (MIN_WINDOW_WIDTH, MIN_WINDOW_HEIGHT)


def test_fullscreen_ignores_resize_and_restores_window(display) -> None:
    display.handle_resize(500, 400)

    size = display.toggle_fullscreen()
    assert display.mode == DisplayMode.FULLSCREEN
    assert size == display.screen.get_size()
    assert display.handle_resize(700, 500) == size

    assert display.toggle_fullscreen() == (500, 400)
    assert display.mode == DisplayMode.WINDOWED
