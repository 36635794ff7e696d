"""Axis-aligned bounding boxes described by their eight corners."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence

Vec3 = tuple[float, float, float]

PLAYER_BOX_OFFSETS: tuple[Vec3, ...] = (
    (0.3, 0.3, 0.3),
    (0.3, 0.3, -0.3),
    (-0.3, 0.3, 0.3),
    (-0.3, 0.3, -0.3),
    (0.3, -1.5, 0.3),
    (0.3, -1.5, -0.3),
    (-0.3, -1.5, 0.3),
    (-0.3, -1.5, -0.3),
)

BLOCK_CORNER_OFFSETS: tuple[Vec3, ...] = (
    (0, 0, 0),
    (1, 1, 1),
    (1, 1, 0),
    (1, 0, 1),
    (1, 0, 0),
    (0, 1, 1),
    (0, 1, 0),
    (0, 0, 1),
)


def _translate(offsets: Iterable[Sequence[float]], position: Sequence[float]) -> tuple[Vec3, ...]:
    return tuple(tuple(o + p for o, p in zip(offset, position)) for offset in offsets)


@dataclass(frozen=True)
class AABB:
    """A box given by eight corner points."""

    points: tuple[Vec3, ...]

    def __post_init__(self) -> None:
        points = tuple(tuple(float(c) for c in point) for point in self.points)
        if len(points) != 8 or any(len(point) != 3 for point in points):
            raise ValueError("an AABB needs eight three-dimensional points")
        object.__setattr__(self, "points", points)

    @staticmethod
    def from_block_position(position: Sequence[float]) -> AABB:
        """Return the box of the unit block whose lowest corner is position."""
        return AABB(_translate(BLOCK_CORNER_OFFSETS, position))

    @staticmethod
    def player_box(position: Sequence[float]) -> AABB:
        """Return the player's collision box around the eye position."""
        return AABB(_translate(PLAYER_BOX_OFFSETS, position))

    def min_at(self, index: int) -> float:
        return min(point[index] for point in self.points)

    def max_at(self, index: int) -> float:
        return max(point[index] for point in self.points)

    @property
    def min_x(self) -> float:
        return self.min_at(0)

    @property
    def min_y(self) -> float:
        return self.min_at(1)

    @property
    def min_z(self) -> float:
        return self.min_at(2)

    @property
    def max_x(self) -> float:
        return self.max_at(0)

    @property
    def max_y(self) -> float:
        return self.max_at(1)

    @property
    def max_z(self) -> float:
        return self.max_at(2)

    def intersects(self, other: AABB) -> bool:
        """Return True if the boxes overlap or touch."""
        return all(
            self.min_at(axis) <= other.max_at(axis) and self.max_at(axis) >= other.min_at(axis)
            for axis in range(3)
        )