import pygame
import pytest

from game.input_handler import InputHandler
from renderer3d.player3d import Player3D
from renderer3d.scene import Scene
from renderer3d.vector import Vector2D
from utils.constants import PLAYER_STEP_LEN, PLAYER_TURN_STEP


def make_handler(**kwargs) -> InputHandler:
    scene = Scene([[None] * 10 for _ in range(10)])
    player = Player3D(Vector2D(5.0, 5.0), 0.0)
    return InputHandler(player, scene, **kwargs)


@pytest.mark.parametrize("key", [pygame.K_w, pygame.K_UP])
def test_forward_keys_move_player(key) -> None:
    handler = make_handler()

    assert handler.handle_event(pygame.event.Event(pygame.KEYDOWN, key=key))
    assert handler.player.position.x == pytest.approx(5.0 + PLAYER_STEP_LEN)


@pytest.mark.parametrize("key", [pygame.K_s, pygame.K_DOWN])
def test_backward_keys_move_player(key) -> None:
    handler = make_handler()

    assert handler.handle_key(key)
    assert handler.player.position.x == pytest.approx(5.0 - PLAYER_STEP_LEN)


def test_turn_keys_rotate_player() -> None:
    handler = make_handler()

    assert handler.handle_key(pygame.K_d)
    assert handler.player.direction == pytest.approx(PLAYER_TURN_STEP)
    assert handler.handle_key(pygame.K_LEFT)
    assert handler.handle_key(pygame.K_a)
    assert handler.player.direction == pytest.approx(-PLAYER_TURN_STEP)


def test_unbound_key_is_ignored() -> None:
    handler = make_handler()

    assert not handler.handle_key(pygame.K_z)
    assert handler.player.position == Vector2D(5.0, 5.0)
    assert not handler.handle_event(pygame.event.Event(pygame.KEYUP, key=pygame.K_w))


def test_blocked_move_still_requests_render() -> None:
    scene = Scene([[None, "red"]])
    player = Player3D(Vector2D(0.5, 0.5), 0.0)
    handler = InputHandler(player, scene)

    assert handler.handle_key(pygame.K_w)
    assert player.position == Vector2D(0.5, 0.5)


def test_pointer_maps_surface_onto_scene() -> None:
    handler = make_handler()

    event = pygame.event.Event(pygame.MOUSEMOTION, pos=(200, 100), rel=(0, 0), buttons=(0, 0, 0))
    assert handler.handle_event(event, surface_size=(400, 400))
    assert handler.cursor == Vector2D(5.0, 2.5)


def test_pointer_uses_custom_converter() -> None:
    handler = make_handler(pixel_to_scene=lambda pixel: Vector2D(pixel[0] / 10, pixel[1] / 10))

    assert handler.set_pointer((30, 40)) == Vector2D(3.0, 4.0)
    assert handler.cursor == Vector2D(3.0, 4.0)


def test_pointer_without_surface_size_is_rejected() -> None:
    handler = make_handler()

    event = pygame.event.Event(pygame.MOUSEMOTION, pos=(10, 10), rel=(0, 0), buttons=(0, 0, 0))
    with pytest.raises(ValueError, match="surface_size"):
        handler.handle_event(event)
    assert handler.cursor is None
