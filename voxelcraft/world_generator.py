"""Terrain generation from two-dimensional fractal noise."""

from __future__ import annotations

import math
from typing import Callable, Optional

import numpy as np

from .blocks import BlockType
from .chunk import HORIZONTAL_SIZE, VERTICAL_SIZE, Chunk

Noise = Callable[[float, float], float]

_MASK = 0xFFFFFFFF
_F2 = 0.5 * (math.sqrt(3.0) - 1.0)
_G2 = (3.0 - math.sqrt(3.0)) / 6.0
_R = 1.0 / math.sqrt(2.0)
_GRADIENTS = ((1.0, 0.0), (-1.0, 0.0), (0.0, 1.0), (0.0, -1.0), (_R, _R), (-_R, _R), (_R, -_R), (-_R, -_R))

SEA_LEVEL = 64
BASE_HEIGHT = 45


def _hash(seed: int, i: int, j: int) -> int:
    h = (seed ^ (i * 501125321) ^ (j * 1136930381)) & _MASK
    h = (h * 0x27D4EB2D) & _MASK
    h ^= h >> 15
    h = (h * 0x85EBCA6B) & _MASK
    return h ^ (h >> 13)


def _simplex(seed: int, x: float, y: float) -> float:
    skew = (x + y) * _F2
    i = math.floor(x + skew)
    j = math.floor(y + skew)
    unskew = (i + j) * _G2
    x0 = x - (i - unskew)
    y0 = y - (j - unskew)
    i1, j1 = (1, 0) if x0 > y0 else (0, 1)

    corners = (
        (x0, y0, i, j),
        (x0 - i1 + _G2, y0 - j1 + _G2, i + i1, j + j1),
        (x0 - 1.0 + 2.0 * _G2, y0 - 1.0 + 2.0 * _G2, i + 1, j + 1),
    )
    total = 0.0
    for cx, cy, gi, gj in corners:
        falloff = 0.5 - cx * cx - cy * cy
        if falloff > 0:
            gx, gy = _GRADIENTS[_hash(seed, gi, gj) & 7]
            falloff *= falloff
            total += falloff * falloff * (gx * cx + gy * cy)
    return max(-1.0, min(1.0, total * 99.0))


class _FractalNoise:
    """Seeded simplex noise summed over several octaves, in [-1, 1]."""

    def __init__(
        self,
        seed: int,
        octaves: int = 5,
        lacunarity: float = 1.75,
        gain: float = 0.5,
        frequency: float = 0.01,
    ) -> None:
        self._seed = seed & _MASK
        self._octaves = octaves
        self._lacunarity = lacunarity
        self._gain = gain
        self._frequency = frequency

    def __call__(self, x: float, y: float) -> float:
        total = 0.0
        norm = 0.0
        amplitude = 1.0
        frequency = self._frequency
        for octave in range(self._octaves):
            total += amplitude * _simplex((self._seed + octave) & _MASK, x * frequency, y * frequency)
            norm += amplitude
            amplitude *= self._gain
            frequency *= self._lacunarity
        return total / norm


def terrain_height(noise_value: float) -> int:
    """Height of a column for a noise value scaled into [0, 1]."""
    return BASE_HEIGHT + int(noise_value * 45)


def column_block(y: int, height: int) -> BlockType:
    """The block at level y of a column whose terrain reaches height."""
    if y == 0:
        return BlockType.BEDROCK
    if y < height:
        depth = height - y
        if depth == 1:
            if 63 <= y <= SEA_LEVEL:
                return BlockType.SAND
            if y < 63:
                return BlockType.STONE
            return BlockType.GRASS
        if depth < 5:
            return BlockType.STONE if y < SEA_LEVEL else BlockType.DIRT
        return BlockType.STONE
    if y <= SEA_LEVEL:
        return BlockType.WATER
    return BlockType.AIR


class WorldGenerator:
    """Fills chunks with terrain, water and bedrock."""

    def __init__(self, seed: int = 1337, noise: Optional[Noise] = None) -> None:
        self.seed = seed
        self._noise: Noise = noise if noise is not None else _FractalNoise(seed)
        self._columns: dict[int, np.ndarray] = {}

    def _column(self, height: int) -> np.ndarray:
        column = self._columns.get(height)
        if column is None:
            column = np.array([column_block(y, height) for y in range(VERTICAL_SIZE)], dtype=np.uint8)
            self._columns[height] = column
        return column

    def populate_chunk(self, chunk: Chunk) -> None:
        """Generate the terrain of a chunk from its world position."""
        world_x, world_z = chunk.position
        for x in range(HORIZONTAL_SIZE):
            for z in range(HORIZONTAL_SIZE):
                value = self._noise(float(world_x + x), float(world_z + z)) / 2.0 + 0.5
                chunk.blocks[x, :, z] = self._column(terrain_height(value))
        chunk.set_dirty()