"""Collision checks for moving the player's box through the world."""

from __future__ import annotations

from typing import Sequence

from .aabb import AABB
from .ray import Ray
from .world import World

MOVEMENT_REACH = 3.0


def can_move(start: Sequence[float], end: Sequence[float], world: World) -> bool:
    """Return True if the player's box at end touches no block found by tracing back towards start."""
    player_box = AABB.player_box(end)
    direction = tuple(a - b for a, b in zip(start, end))

    for point in player_box.points:
        ray = Ray(point, direction, world, MOVEMENT_REACH)
        if ray and AABB.from_block_position(ray.hit_target.position).intersects(player_box):
            return False
    return True