"""
Raycaster Engine - grid-line stepping algorithm

A ray is described by two points (p1, p2). Each step moves the ray to the
next point where it crosses a vertical or horizontal grid line, until the
cell being entered is occupied or lies outside the scene.

The reference implementation works on Vector2D values; full frames are cast
by a Numba JIT kernel that applies exactly the same stepping rules to the
scene's numpy occupancy grid.
"""

import logging
import math
from collections import namedtuple
from enum import Enum

import numpy as np
from numba import njit, float64, int32

from utils.constants import EPSILON, MAX_STEPS_PADDING
from utils.helpers import sign
from .vector import Vector2D

logger = logging.getLogger(__name__)

# Status codes as module-level ints for Numba access
_STATUS_OUT_OF_BOUNDS = 0
_STATUS_HIT = 1
_STATUS_STALLED = 2

# Column layout of cast_columns() results
COL_HIT_X = 0
COL_HIT_Y = 1
COL_CELL_X = 2
COL_CELL_Y = 3
COL_STATUS = 4


class RayStatus(Enum):
    """Terminal states of a cast"""
    OUT_OF_BOUNDS = _STATUS_OUT_OF_BOUNDS
    HIT = _STATUS_HIT
    STALLED = _STATUS_STALLED  # No progress or step bound exceeded


RayHit = namedtuple('RayHit', ['point', 'previous', 'cell', 'marker', 'status', 'steps'])


def snap(component, delta_component, epsilon=EPSILON):
    """
    Snap a coordinate to the next grid line in the direction of travel.

    The epsilon nudge moves a coordinate already sitting on a grid line
    past it, so the result is always the *next* line and a step never has
    zero length.

    Args:
        component: x or y coordinate of the current point
        delta_component: Travel direction along the same axis
        epsilon: Nudge applied before rounding

    Returns:
        float grid-line coordinate, or component unchanged when
        delta_component is 0
    """
    if delta_component > 0:
        return float(math.ceil(component + sign(delta_component) * epsilon))
    if delta_component < 0:
        return float(math.floor(component + sign(delta_component) * epsilon))
    return component


def ray_step(p1, p2, epsilon=EPSILON):
    """
    Next point past p2, on the line through p1 and p2, that lies on a grid line

    Args:
        p1, p2: Vector2D points defining the ray (travelling from p1 to p2)
        epsilon: Snap nudge

    Returns:
        Vector2D of the nearest vertical or horizontal grid-line crossing
    """
    delta = p2.subtract(p1)

    # Vertical ray: the line is x = p2.x
    if delta.x == 0:
        return Vector2D(p2.x, snap(p2.y, delta.y, epsilon))

    # y = slope * x + intercept
    slope = delta.y / delta.x
    intercept = p1.y - slope * p1.x

    x3 = snap(p2.x, delta.x, epsilon)
    p3 = Vector2D(x3, slope * x3 + intercept)

    # Horizontal ray never crosses a horizontal grid line
    if slope == 0:
        return p3

    y4 = snap(p2.y, delta.y, epsilon)
    p4 = Vector2D((y4 - intercept) / slope, y4)

    # Ties keep the vertical-line crossing
    if p2.distance_to(p4) < p2.distance_to(p3):
        return p4
    return p3


def hitting_cell_corner(p1, p2, epsilon=EPSILON):
    """
    Integer cell containing p2, biased towards the direction of travel.

    A point sitting exactly on a grid line resolves to the cell the ray
    is entering, not the one it is leaving.

    Returns:
        (cell_x, cell_y) tuple of ints
    """
    delta = p2.subtract(p1)
    return (
        math.floor(p2.x + sign(delta.x) * epsilon),
        math.floor(p2.y + sign(delta.y) * epsilon),
    )


def default_max_steps(scene, padding=MAX_STEPS_PADDING):
    """Upper bound on stepping iterations for a scene"""
    return scene.width + scene.height + padding


def _march(scene, p1, p2, epsilon, max_steps, visit=None):
    """Run the stepping loop; visit(point) is called for every new point"""
    steps = 0
    while True:
        cell = hitting_cell_corner(p1, p2, epsilon)
        if not scene.contains(*cell):
            return RayHit(p2, p1, cell, None, RayStatus.OUT_OF_BOUNDS, steps)

        marker = scene.get(*cell)
        if marker is not None:
            return RayHit(p2, p1, cell, marker, RayStatus.HIT, steps)

        if steps >= max_steps:
            logger.warning(
                "Ray exceeded %d steps without terminating (p1=%r, p2=%r, scene=%r)",
                max_steps, p1, p2, scene
            )
            return RayHit(p2, p1, cell, None, RayStatus.STALLED, steps)

        p3 = ray_step(p1, p2, epsilon)
        if p3 == p2:
            logger.debug("Zero-length ray segment at %r, stopping cast", p2)
            return RayHit(p2, p1, cell, None, RayStatus.STALLED, steps)

        p1, p2 = p2, p3
        steps += 1
        if visit is not None:
            visit(p2)


def cast_ray(scene, p1, p2, epsilon=EPSILON, max_steps=None):
    """
    Step a ray through the scene until it leaves it or enters an occupied cell

    Args:
        scene: Scene to cast against
        p1, p2: Vector2D points defining the starting ray segment
        epsilon: Snap / locator nudge
        max_steps: Iteration bound (defaults to width + height + padding)

    Returns:
        Vector2D final point of the ray
    """
    if max_steps is None:
        max_steps = default_max_steps(scene)
    return _march(scene, p1, p2, epsilon, max_steps).point


def trace_ray(scene, p1, p2, epsilon=EPSILON, max_steps=None):
    """
    Same as cast_ray() but keeps every visited point

    Returns:
        (points, hit): list of Vector2D starting with p1 and p2, and the RayHit
    """
    if max_steps is None:
        max_steps = default_max_steps(scene)
    points = [p1, p2]
    hit = _march(scene, p1, p2, epsilon, max_steps, visit=points.append)
    return points, hit


@njit(cache=True)
def _numba_snap(component, delta_component, epsilon):
    """snap() for the JIT kernels"""
    if delta_component > 0.0:
        return np.ceil(component + epsilon)
    if delta_component < 0.0:
        return np.floor(component - epsilon)
    return component


@njit(cache=True)
def _numba_cast_ray(occupancy, width, height, x1, y1, x2, y2, epsilon, max_steps):
    """
    Cast one ray over the occupancy grid (Numba JIT compiled)

    Args:
        occupancy: 2D numpy int32 array (height, width), -1 for open cells
        width, height: Scene dimensions
        x1, y1, x2, y2: Starting ray segment
        epsilon: Snap / locator nudge
        max_steps: Iteration bound

    Returns:
        (hit_x, hit_y, cell_x, cell_y, status)
    """
    steps = 0
    while True:
        dx = x2 - x1
        dy = y2 - y1

        # Cell locator, biased towards travel direction
        bias_x = 0.0
        if dx > 0.0:
            bias_x = epsilon
        elif dx < 0.0:
            bias_x = -epsilon
        bias_y = 0.0
        if dy > 0.0:
            bias_y = epsilon
        elif dy < 0.0:
            bias_y = -epsilon
        cell_x = int(np.floor(x2 + bias_x))
        cell_y = int(np.floor(y2 + bias_y))

        if cell_x < 0 or cell_x >= width or cell_y < 0 or cell_y >= height:
            return x2, y2, cell_x, cell_y, _STATUS_OUT_OF_BOUNDS
        if occupancy[cell_y, cell_x] >= 0:
            return x2, y2, cell_x, cell_y, _STATUS_HIT
        if steps >= max_steps:
            return x2, y2, cell_x, cell_y, _STATUS_STALLED

        # Ray step
        if dx == 0.0:
            x3 = x2
            y3 = _numba_snap(y2, dy, epsilon)
        else:
            slope = dy / dx
            intercept = y1 - slope * x1
            x3 = _numba_snap(x2, dx, epsilon)
            y3 = slope * x3 + intercept
            if slope != 0.0:
                y4 = _numba_snap(y2, dy, epsilon)
                x4 = (y4 - intercept) / slope
                if math.hypot(x2 - x4, y2 - y4) < math.hypot(x2 - x3, y2 - y3):
                    x3 = x4
                    y3 = y4

        if x3 == x2 and y3 == y2:
            return x2, y2, cell_x, cell_y, _STATUS_STALLED

        x1 = x2
        y1 = y2
        x2 = x3
        y2 = y3
        steps += 1


@njit(cache=True)
def _numba_cast_all_columns(occupancy, width, height, px, py, lx, ly, rx, ry,
                            num_columns, epsilon, max_steps):
    """
    Cast one ray per screen column (Numba JIT compiled)

    Column i casts from the player position towards the point interpolated
    at i / num_columns between the left and right FOV boundary points.

    Returns:
        results: numpy array shape (num_columns, 5)
                 [hit_x, hit_y, cell_x, cell_y, status]
    """
    results = np.empty((num_columns, 5), dtype=np.float64)

    for i in range(num_columns):
        t = i / num_columns
        tx = (rx - lx) * t + lx
        ty = (ry - ly) * t + ly

        hit_x, hit_y, cell_x, cell_y, status = _numba_cast_ray(
            occupancy, width, height, px, py, tx, ty, epsilon, max_steps
        )

        results[i, 0] = hit_x
        results[i, 1] = hit_y
        results[i, 2] = float64(cell_x)
        results[i, 3] = float64(cell_y)
        results[i, 4] = float64(status)

    return results


class Raycaster:
    """
    Grid raycasting engine

    Wraps the stepping functions with a fixed epsilon and step bound and
    provides the JIT-compiled batch caster used for whole frames.
    """

    def __init__(self, epsilon=EPSILON, max_steps_padding=MAX_STEPS_PADDING):
        self.epsilon = epsilon
        self.max_steps_padding = max_steps_padding

    def max_steps(self, scene):
        return default_max_steps(scene, self.max_steps_padding)

    def cast(self, scene, p1, p2):
        """
        Cast a single ray

        Returns:
            RayHit(point, previous, cell, marker, status, steps)
        """
        return _march(scene, p1, p2, self.epsilon, self.max_steps(scene))

    def trace(self, scene, p1, p2):
        """
        Cast a single ray keeping every step point

        Returns:
            (points, RayHit)
        """
        return trace_ray(scene, p1, p2, self.epsilon, self.max_steps(scene))

    def cast_columns(self, scene, position, left, right, num_columns):
        """
        Cast all rays for the screen using Numba JIT

        Args:
            scene: Scene to cast against
            position: Vector2D ray origin (player position)
            left, right: Vector2D FOV boundary points on the near plane
            num_columns: Number of screen columns

        Returns:
            numpy array shape (num_columns, 5):
            [hit_x, hit_y, cell_x, cell_y, status]
        """
        max_steps = self.max_steps(scene)
        results = _numba_cast_all_columns(
            scene.occupancy, int32(scene.width), int32(scene.height),
            float64(position.x), float64(position.y),
            float64(left.x), float64(left.y),
            float64(right.x), float64(right.y),
            int32(num_columns), float64(self.epsilon), int32(max_steps)
        )

        stalled = int(np.count_nonzero(results[:, COL_STATUS] == _STATUS_STALLED))
        if stalled:
            logger.warning("%d of %d column rays stalled (step bound %d)",
                           stalled, num_columns, max_steps)
        return results
