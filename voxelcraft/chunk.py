"""A 16x256x16 column of blocks and the mesh of its visible faces."""

from __future__ import annotations

import enum
from typing import Optional, Sequence

import numpy as np

from .block_vertex import BlockVertex, vertices_from_direction
from .blocks import BlockClass, BlockData, BlockType
from .util import positive_mod

HORIZONTAL_SIZE = 16
VERTICAL_SIZE = 256
BLOCK_COUNT = HORIZONTAL_SIZE * HORIZONTAL_SIZE * VERTICAL_SIZE
MAX_VERTEX_COUNT = BLOCK_COUNT * 8

_AIR = int(BlockType.AIR)
_BLOCKS: tuple[BlockData, ...] = tuple(BlockData(block_type) for block_type in BlockType)

_NEIGHBOUR_OFFSETS: tuple[tuple[int, int, int], ...] = (
    (1, 0, 0),
    (-1, 0, 0),
    (0, 1, 0),
    (0, -1, 0),
    (0, 0, 1),
    (0, 0, -1),
)

_SEE_THROUGH = (BlockClass.SEMI_TRANSPARENT, BlockClass.TRANSPARENT)

Mesh = tuple[tuple[BlockVertex, ...], tuple[BlockVertex, ...]]


class _RenderState(enum.Enum):
    INITIAL = enum.auto()
    READY = enum.auto()
    DIRTY = enum.auto()


def _add(a: Sequence[int], b: Sequence[int]) -> tuple[int, int, int]:
    return (a[0] + b[0], a[1] + b[1], a[2] + b[2])


def _has_non_air_at(position: Sequence[int], chunk: Chunk, world) -> bool:
    block = chunk.block_at_optimized(position, world)
    return block is not None and block.block_class is not BlockClass.AIR


def calculate_occlusion_level(block_pos: Sequence[int], vert_offset: Sequence[int], chunk: Chunk, world) -> int:
    """Return how lit a block corner is: 3 is open, 0 is fully enclosed."""
    direction = tuple(1 if component > 0.5 else -1 for component in vert_offset)
    dx, dy, dz = direction

    side1 = _has_non_air_at(_add(block_pos, (dx, dy, 0)), chunk, world)
    side2 = _has_non_air_at(_add(block_pos, (0, dy, dz)), chunk, world)
    if side1 and side2:
        return 0

    corner = _has_non_air_at(_add(block_pos, (dx, dy, dz)), chunk, world)
    return 3 - (int(side1) + int(side2) + int(corner))


class Chunk:
    """Blocks of one chunk, addressed as blocks[x, y, z] by block type value.

    The world passed to the lookup and meshing methods needs only a
    block_at_if_loaded(position) method returning a BlockData or None.
    """

    HORIZONTAL_SIZE = HORIZONTAL_SIZE
    VERTICAL_SIZE = VERTICAL_SIZE
    BLOCK_COUNT = BLOCK_COUNT
    MAX_VERTEX_COUNT = MAX_VERTEX_COUNT

    def __init__(self, world_position: Sequence[int]) -> None:
        x, z = world_position
        self.position: tuple[int, int] = (int(x), int(z))
        self.blocks = np.full((HORIZONTAL_SIZE, VERTICAL_SIZE, HORIZONTAL_SIZE), _AIR, dtype=np.uint8)
        self.use_ambient_occlusion = True
        self.mesh: Optional[Mesh] = None
        self._state = _RenderState.INITIAL

    def __repr__(self) -> str:
        return f"Chunk(position={self.position})"

    @property
    def needs_mesh(self) -> bool:
        """True when the mesh is missing or out of date."""
        return self.mesh is None or self._state is not _RenderState.READY

    def set_dirty(self) -> None:
        self._state = _RenderState.DIRTY

    def set_use_ambient_occlusion(self, enabled: bool) -> None:
        if enabled == self.use_ambient_occlusion:
            return
        self.set_dirty()
        self.use_ambient_occlusion = enabled

    def place_block(self, block: BlockData | BlockType | int, x: int, y: int, z: int) -> None:
        """Put a block at chunk-local coordinates."""
        if not Chunk.is_in_bounds(x, y, z):
            raise ValueError(f"position {(x, y, z)} is outside the chunk")
        block_type = block.type if isinstance(block, BlockData) else BlockType(block)
        self._state = _RenderState.DIRTY
        self.blocks[x, y, z] = int(block_type)

    def block_at(self, position: Sequence[int]) -> BlockData:
        """Return the block at chunk-local coordinates."""
        x, y, z = position
        if not Chunk.is_in_bounds(x, y, z):
            raise IndexError(f"position {(x, y, z)} is outside the chunk")
        return _BLOCKS[int(self.blocks[x, y, z])]

    def block_at_optimized(self, pos: Sequence[int], world) -> Optional[BlockData]:
        """Return a block by local coordinates, asking the world when they leave the chunk."""
        x, y, z = pos
        if not 0 <= y < VERTICAL_SIZE:
            return None
        if 0 <= x < HORIZONTAL_SIZE and 0 <= z < HORIZONTAL_SIZE:
            return _BLOCKS[int(self.blocks[x, y, z])]
        world_x, world_z = self.position
        return world.block_at_if_loaded((x + world_x, y, z + world_z))

    def build_mesh(self, world) -> Mesh:
        """Build the vertices of all visible faces: (solid, translucent)."""
        solid: list[BlockVertex] = []
        translucent: list[BlockVertex] = []

        occupied = np.argwhere(self.blocks != _AIR)[::-1]
        for x, y, z in occupied.tolist():
            block = _BLOCKS[int(self.blocks[x, y, z])]
            block_pos = (x, y, z)
            target = translucent if block.block_class in _SEE_THROUGH else solid

            for offset in _NEIGHBOUR_OFFSETS:
                neighbour = self.block_at_optimized(_add(block_pos, offset), world)
                if neighbour is not None and neighbour.block_class in (block.block_class, BlockClass.SOLID):
                    continue

                for vertex in vertices_from_direction(*offset):
                    vertex.offset(x, y, z)
                    vertex.set_type(offset, block.type)

                    level = 3
                    if self.use_ambient_occlusion:
                        if offset[1] == -1:
                            level = 0
                        else:
                            corner = tuple(v - b for v, b in zip(vertex.position, block_pos))
                            level = calculate_occlusion_level(block_pos, corner, self, world)
                    vertex.set_occlusion_level(level)
                    target.append(vertex)

        self.mesh = (tuple(solid), tuple(translucent))
        self._state = _RenderState.READY
        return self.mesh

    @staticmethod
    def is_in_bounds(x: int, y: int, z: int) -> bool:
        return 0 <= x < HORIZONTAL_SIZE and 0 <= y < VERTICAL_SIZE and 0 <= z < HORIZONTAL_SIZE

    @staticmethod
    def is_valid_position(position: Sequence[int]) -> bool:
        return 0 <= position[1] < VERTICAL_SIZE

    @staticmethod
    def to_chunk_coordinates(global_position: Sequence[int]) -> tuple[int, int, int]:
        x, y, z = global_position
        return (positive_mod(x, HORIZONTAL_SIZE), y, positive_mod(z, HORIZONTAL_SIZE))