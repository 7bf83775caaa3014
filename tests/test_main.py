import pygame
import pytest

from config import PLAYER_START


@pytest.fixture
def app(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")

    from main import RaycastApp

    application = RaycastApp()
    yield application
    pygame.quit()


def test_app_renders_default_scene(app) -> None:
    app.render()

    width, height = app.screen.get_size()
    # Something other than the background was drawn in the view
    assert app.screen.get_at((width // 2, height // 2)) != app.screen.get_at((width - 1, 0))


def test_key_event_moves_player_and_requests_render(app) -> None:
    start = app.player.position

    assert app.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_w))
    assert app.player.position != start
    assert tuple(start) == PLAYER_START


def test_pointer_event_sets_cursor(app) -> None:
    event = pygame.event.Event(pygame.MOUSEMOTION, pos=(40, 40), rel=(0, 0), buttons=(0, 0, 0))

    assert app.handle_event(event)
    assert app.input_handler.cursor is not None
    app.render()


def test_quit_and_escape_stop_the_loop(app) -> None:
    assert not app.handle_event(pygame.event.Event(pygame.QUIT))
    assert not app.running

    app.running = True
    assert not app.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE))
    assert not app.running
