"""Casting a ray through the block grid to find the first solid block."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from .axis_plane import AxisPlane, ray_hits_to_block_position
from .blocks import BlockData, BlockType
from .world import World

DEFAULT_REACH = 10.0

_NORMALS = ((1.0, 0.0, 0.0), (0.0, 1.0, 0.0), (0.0, 0.0, 1.0))


@dataclass(frozen=True)
class HitTarget:
    """The block a ray hit and the empty cell it passed through just before."""

    position: tuple[int, int, int]
    block: BlockData
    neighbor: Optional[tuple[int, int, int]]
    has_neighbor: bool = False


class Ray:
    """A ray cast once on construction; true when it hit a non-air block within reach."""

    def __init__(
        self,
        position: Sequence[float],
        direction: Sequence[float],
        world: World,
        reach: float = DEFAULT_REACH,
    ) -> None:
        self.hit_target: Optional[HitTarget] = None

        origin = tuple(float(c) for c in position)
        planes = sorted(AxisPlane(normal, origin, direction) for normal in _NORMALS)
        # The ray may start inside a block, so the origin counts as the first hit.
        previous = (origin, origin)
        has_neighbor = False

        while self.hit_target is None and planes[0].hit_distance <= reach:
            closest = planes[0]
            candidate = ray_hits_to_block_position(closest.hit_position, previous[1])

            if candidate is not None and World.is_valid_block_position(candidate):
                block = world.block_at(candidate)
                if block.type is not BlockType.AIR:
                    neighbor = ray_hits_to_block_position(previous[0], previous[1])
                    self.hit_target = HitTarget(
                        candidate, block, neighbor, has_neighbor and neighbor is not None
                    )

            has_neighbor = True
            previous = (previous[1], closest.hit_position)
            closest.advance_offset()
            planes.sort()

    @property
    def has_hit(self) -> bool:
        return self.hit_target is not None

    def __bool__(self) -> bool:
        return self.has_hit