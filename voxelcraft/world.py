"""The loaded part of the world: chunks around the player, block access and edits."""

from __future__ import annotations

import math
from typing import Optional, Protocol, Sequence

from .blocks import BlockData, BlockType
from .chunk import HORIZONTAL_SIZE, Chunk
from .persistence import Persistence
from .util import positive_mod
from .world_generator import WorldGenerator

TEXTURE_ANIMATION_SPEED = 2.0
DEFAULT_VIEW_DISTANCE = 8

# Texture offsets of the animation frames of water and lava.
_ANIMATION_OFFSETS = (0, 1, 2, 17, 18)

_CHUNK_CORNERS = ((0, 0), (0, HORIZONTAL_SIZE), (HORIZONTAL_SIZE, 0), (HORIZONTAL_SIZE, HORIZONTAL_SIZE))
_CHUNKS_AROUND = ((0, HORIZONTAL_SIZE), (HORIZONTAL_SIZE, 0), (0, -HORIZONTAL_SIZE), (-HORIZONTAL_SIZE, 0))
_BLOCKS_AROUND = ((0, 0, 1), (1, 0, 0), (0, 0, -1), (-1, 0, 0))


class ChunkGenerator(Protocol):
    def populate_chunk(self, chunk: Chunk) -> None: ...


def _block_position(position: Sequence[float]) -> tuple[int, int, int]:
    x, y, z = position
    return (int(x), int(y), int(z))


class World:
    """Chunks currently in memory, generated or loaded from the save file on demand."""

    def __init__(
        self,
        persistence: Persistence,
        seed: int = 1337,
        generator: Optional[ChunkGenerator] = None,
    ) -> None:
        self.persistence = persistence
        self.generator: ChunkGenerator = generator if generator is not None else WorldGenerator(seed)
        self.chunks: dict[tuple[int, int], Chunk] = {}
        self.use_ambient_occlusion = True
        self.view_distance = DEFAULT_VIEW_DISTANCE
        self.texture_animation = 0.0

    def _generate_or_load(self, position: tuple[int, int]) -> Chunk:
        chunk = self.persistence.get_chunk(position)
        if chunk is not None:
            return chunk
        chunk = Chunk(position)
        self.generator.populate_chunk(chunk)
        self.persistence.commit_chunk(chunk)
        return chunk

    def get_chunk(self, position: Sequence[int]) -> Chunk:
        """Return the chunk at a chunk position, loading or generating it if needed."""
        x, z = position
        key = (int(x), int(z))
        if not self.is_chunk_loaded(key):
            self.add_chunk(key, self._generate_or_load(key))
        return self.chunks[key]

    def add_chunk(self, position: Sequence[int], chunk: Chunk) -> None:
        """Put a chunk into the world and mark its loaded neighbours for remeshing."""
        x, z = position
        key = (int(x), int(z))
        self.chunks[key] = chunk
        for dx, dz in _CHUNKS_AROUND:
            neighbour = self.chunks.get((key[0] + dx, key[1] + dz))
            if neighbour is not None:
                neighbour.set_dirty()

    @staticmethod
    def chunk_index(position: Sequence[float]) -> tuple[int, int]:
        """Return the position of the chunk holding a block position."""
        x, _y, z = _block_position(position)
        return (x - positive_mod(x, HORIZONTAL_SIZE), z - positive_mod(z, HORIZONTAL_SIZE))

    @staticmethod
    def is_valid_block_position(position: Sequence[int]) -> bool:
        return Chunk.is_valid_position(position)

    def block_at(self, position: Sequence[int]) -> BlockData:
        """Return the block at a world position, loading its chunk if needed."""
        block_position = _block_position(position)
        chunk = self.get_chunk(self.chunk_index(block_position))
        return chunk.block_at(Chunk.to_chunk_coordinates(block_position))

    def block_at_if_loaded(self, position: Sequence[int]) -> Optional[BlockData]:
        """Return the block at a world position, or None if its chunk is not loaded."""
        block_position = _block_position(position)
        chunk = self.chunks.get(self.chunk_index(block_position))
        if chunk is None:
            return None
        return chunk.block_at(Chunk.to_chunk_coordinates(block_position))

    def is_chunk_loaded(self, position: Sequence[int]) -> bool:
        x, z = position
        return (x, z) in self.chunks

    def place_block(self, block: BlockData | BlockType | int, position: Sequence[int]) -> bool:
        """Put a block into the world; returns False when the height is out of range."""
        block_position = _block_position(position)
        if not Chunk.is_valid_position(block_position):
            return False

        local = Chunk.to_chunk_coordinates(block_position)
        self.get_chunk(self.chunk_index(block_position)).place_block(block, *local)

        for offset in _BLOCKS_AROUND:
            neighbour = tuple(a + b for a, b in zip(local, offset))
            if not Chunk.is_in_bounds(*neighbour):
                outside = tuple(a + b for a, b in zip(block_position, offset))
                self.get_chunk(self.chunk_index(outside)).set_dirty()
        return True

    def update(self, player_position: Sequence[float], delta_time: float) -> None:
        """Advance the texture animation and load or drop chunks around the player."""
        self.texture_animation += delta_time * TEXTURE_ANIMATION_SPEED

        chunk_x, chunk_z = self.chunk_index(player_position)
        player_chunk = (float(chunk_x), float(chunk_z))

        unload_distance = (self.view_distance + 1) * HORIZONTAL_SIZE + 8.0
        for position in list(self.chunks):
            if math.dist(position, player_chunk) > unload_distance:
                del self.chunks[position]

        load_distance = self.view_distance * HORIZONTAL_SIZE + 8.0
        for i in range(-self.view_distance, self.view_distance):
            for j in range(-self.view_distance, self.view_distance):
                position = (i * HORIZONTAL_SIZE + chunk_x, j * HORIZONTAL_SIZE + chunk_z)
                if self.is_chunk_loaded(position):
                    continue
                if math.dist(position, player_chunk) <= load_distance:
                    self.add_chunk(position, self._generate_or_load(position))

    def render_order(self, player_position: Sequence[float]) -> list[tuple[int, int]]:
        """Return loaded chunk positions, farthest first, and apply the world's
        ambient-occlusion setting to each chunk."""
        px, _py, pz = player_position
        player = (float(px), float(pz))
        ranked = []
        for key, chunk in self.chunks.items():
            chunk.set_use_ambient_occlusion(self.use_ambient_occlusion)
            farthest = max(math.dist(player, (key[0] + dx, key[1] + dz)) for dx, dz in _CHUNK_CORNERS)
            ranked.append((farthest, key))
        ranked.sort(key=lambda item: item[0], reverse=True)
        return [key for _distance, key in ranked]

    def animation_offset(self) -> int:
        """Texture offset of the current water and lava animation frame."""
        return _ANIMATION_OFFSETS[int(self.texture_animation) % len(_ANIMATION_OFFSETS)]