import math

import pytest

from renderer3d.player3d import Player3D
from renderer3d.scene import Scene
from renderer3d.vector import Vector2D
from utils.constants import FOV, NEAR_CLIPPING_PLANE, PLAYER_STEP_LEN, PLAYER_TURN_STEP


def test_fov_range_is_symmetric_about_view_axis() -> None:
    player = Player3D(Vector2D(0, 0), 0.0)
    left, right = player.fov_range()

    near = Vector2D(NEAR_CLIPPING_PLANE, 0)
    offset = NEAR_CLIPPING_PLANE * math.tan(FOV / 2)

    assert left.distance_to(near) == pytest.approx(right.distance_to(near))
    assert left.distance_to(near) == pytest.approx(offset)
    assert left.x == pytest.approx(NEAR_CLIPPING_PLANE)
    assert right.x == pytest.approx(NEAR_CLIPPING_PLANE)
    assert left.y == pytest.approx(-offset)
    assert right.y == pytest.approx(offset)


def test_fov_range_follows_position_and_direction() -> None:
    player = Player3D(Vector2D(2, 3), math.pi / 2)
    left, right = player.fov_range()

    midpoint = left.lerp(right, 0.5)
    assert midpoint.x == pytest.approx(2.0)
    assert midpoint.y == pytest.approx(3.0 + NEAR_CLIPPING_PLANE)
    # Boundary points stay on the near plane
    assert (left - player.position).dot(player.view_vector()) == pytest.approx(NEAR_CLIPPING_PLANE)
    assert (right - player.position).dot(player.view_vector()) == pytest.approx(NEAR_CLIPPING_PLANE)


def test_move_forward_and_backward() -> None:
    player = Player3D(Vector2D(1.5, 1.5), 0.0)

    assert player.move_forward()
    assert player.position.x == pytest.approx(1.5 + PLAYER_STEP_LEN)
    assert player.position.y == pytest.approx(1.5)

    assert player.move_backward()
    assert player.move_backward()
    assert player.position.x == pytest.approx(1.5 - PLAYER_STEP_LEN)


def test_move_into_occupied_cell_is_refused() -> None:
    scene = Scene([[None, None, None], [None, None, "red"], [None, None, None]])
    player = Player3D(Vector2D(1.5, 1.5), 0.0, step_length=0.6)

    assert not player.move_forward(scene)
    assert player.position == Vector2D(1.5, 1.5)

    # Without a scene the move is unconstrained
    assert player.move_forward()
    assert player.position.x == pytest.approx(2.1)


def test_rotation_is_not_normalized() -> None:
    player = Player3D(Vector2D(0, 0), 0.0)

    player.turn_right()
    assert player.direction == pytest.approx(PLAYER_TURN_STEP)
    player.turn_left()
    player.turn_left()
    assert player.direction == pytest.approx(-PLAYER_TURN_STEP)

    player.rotate(3 * 2 * math.pi)
    assert player.direction > 2 * math.pi


def test_position_is_copied() -> None:
    start = Vector2D(1, 1)
    player = Player3D(start, 0.0)
    player.move(1.0)

    assert start == Vector2D(1, 1)
    assert player.position != start
