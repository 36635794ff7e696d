"""Walking a ray across the integer planes perpendicular to one axis."""

from __future__ import annotations

import math
from typing import Optional, Sequence

Vec3 = tuple[float, float, float]

_MISS: Vec3 = (math.inf, math.inf, math.inf)


def _vec(values: Sequence[float]) -> Vec3:
    x, y, z = values
    return (float(x), float(y), float(z))


def _dot(a: Sequence[float], b: Sequence[float]) -> float:
    return sum(x * y for x, y in zip(a, b))


class AxisPlane:
    """The next integer plane along one axis that a ray crosses."""

    def __init__(
        self,
        plane_normal: Sequence[float],
        ray_position: Sequence[float],
        ray_direction: Sequence[float],
    ) -> None:
        self._normal = _vec(plane_normal)
        self._ray_position = _vec(ray_position)
        self._ray_direction = _vec(ray_direction)

        facing = _dot(self._normal, self._ray_direction)
        self._offset_direction = -1.0 if facing < 0 else 1.0
        self._plane_offset = math.floor(_dot(self._normal, self._ray_position)) + (1.0 if facing > 0 else 0.0)
        self._update_hit()

    @property
    def hit_position(self) -> Vec3:
        return self._hit_position

    @property
    def hit_distance(self) -> float:
        return self._hit_distance

    def __lt__(self, other: AxisPlane) -> bool:
        return self._hit_distance < other._hit_distance

    def advance_offset(self) -> None:
        """Move on to the next plane in the direction of the ray."""
        self._plane_offset += self._offset_direction
        self._update_hit()

    def _intersect(self) -> float:
        denominator = _dot(self._normal, self._ray_direction)
        if denominator == 0:
            return -math.inf
        on_plane = tuple(c * self._plane_offset for c in self._normal)
        numerator = _dot(self._normal, tuple(a - b for a, b in zip(on_plane, self._ray_position)))
        return numerator / denominator

    def _update_hit(self) -> None:
        t = self._intersect()
        if t < 0:
            self._hit_position = _MISS
        else:
            self._hit_position = tuple(p + t * d for p, d in zip(self._ray_position, self._ray_direction))
        self._hit_distance = math.dist(self._ray_position, self._hit_position)


def ray_hits_to_block_position(hit1: Sequence[float], hit2: Sequence[float]) -> Optional[tuple[int, int, int]]:
    """Return the block between two consecutive plane hits, or None if they are too far apart."""
    if not all(math.isfinite(c) for c in (*hit1, *hit2)):
        return None
    if any(abs(a - b) > 1.001 for a, b in zip(hit1, hit2)):
        return None
    x, y, z = (math.floor((a + b) / 2.0) for a, b in zip(hit1, hit2))
    return (x, y, z)