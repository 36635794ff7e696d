"""Packed vertices of block faces and the face geometry of a unit block.

Bit layout of the packed value:
  0-8 y, 9-13 x, 14-18 z, 19-20 uv, 20-27 texture index,
  28 animation flag, 29-30 occlusion level, 31 reserved.
"""

from __future__ import annotations

from typing import Sequence

from .blocks import BlockType

_MASK = 0xFFFFFFFF

_TEXTURES: dict[BlockType, tuple[int, int]] = {
    BlockType.BEDROCK: (1, 1),
    BlockType.PLANKS: (4, 0),
    BlockType.WATER: (13, 12),
    BlockType.LAVA: (13, 14),
    BlockType.IRON: (6, 1),
    BlockType.DIAMOND: (8, 1),
    BlockType.GOLD: (7, 1),
    BlockType.OBSIDIAN: (5, 2),
    BlockType.SPONGE: (0, 3),
    BlockType.DIRT: (2, 0),
    BlockType.SAND: (2, 1),
    BlockType.STONE: (1, 0),
    BlockType.COBBLESTONE: (0, 1),
    BlockType.GLASS: (1, 3),
    BlockType.OAK_LEAVES: (4, 3),
}

_ANIMATED = frozenset({BlockType.WATER, BlockType.LAVA})


class BlockVertex:
    """One vertex of a block face packed into 32 bits."""

    __slots__ = ("data",)

    def __init__(self, position: Sequence[int] = (0, 0, 0), uv: Sequence[bool] = (False, False)) -> None:
        self.data = 0
        x, y, z = position
        self.offset(x, y, z)
        self._set_uv(*uv)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BlockVertex):
            return NotImplemented
        return self.data == other.data

    def __hash__(self) -> int:
        return hash(self.data)

    def __repr__(self) -> str:
        return f"BlockVertex(data=0x{self.data:08x})"

    def copy(self) -> BlockVertex:
        vertex = BlockVertex()
        vertex.data = self.data
        return vertex

    @property
    def position(self) -> tuple[int, int, int]:
        return ((self.data >> 9) & 0x1F, self.data & 0x1FF, (self.data >> 14) & 0x1F)

    def offset(self, x: int, y: int, z: int) -> None:
        """Move the vertex by a non-negative offset within one chunk."""
        if x < 0 or y < 0 or z < 0:
            raise ValueError("coordinate offsets must not be negative")
        if ((self.data >> 9) & 0x1F) + x > 16:
            raise ValueError("x coordinate is out of bounds")
        if ((self.data >> 14) & 0x1F) + z > 16:
            raise ValueError("z coordinate is out of bounds")
        if (self.data & 0x1FF) + y > 256:
            raise ValueError("y coordinate is out of bounds")
        self.data = (self.data + y + (x << 9) + (z << 14)) & _MASK

    def set_animated(self) -> None:
        self.data |= 1 << 28

    def set_occlusion_level(self, occlusion_level: int) -> None:
        if not 0 <= occlusion_level < 4:
            raise ValueError("the occlusion level is out of bounds")
        self.data |= occlusion_level << 29

    def set_type(self, offset: Sequence[int], block_type: BlockType) -> None:
        """Choose the texture for a face pointing along offset."""
        block_type = BlockType(block_type)
        face_y = offset[1]
        if block_type is BlockType.GRASS:
            if face_y == 1:
                self._set_texture(0, 0)
            elif face_y == -1:
                self._set_texture(2, 0)
            else:
                self._set_texture(3, 0)
            return
        if block_type is BlockType.OAK_WOOD:
            self._set_texture(5, 1) if face_y in (1, -1) else self._set_texture(4, 1)
            return
        if block_type not in _TEXTURES:
            raise ValueError(f"{block_type.name} has no texture")
        if block_type in _ANIMATED:
            self.set_animated()
        self._set_texture(*_TEXTURES[block_type])

    def _set_uv(self, x: bool, y: bool) -> None:
        uv = int(bool(x)) | (int(bool(y)) << 1)
        if ((self.data >> 19) & 0xFF) + uv > 0xFF:
            raise ValueError("UV coordinates are out of bounds")
        self.data = (self.data + (uv << 19)) & _MASK

    def _set_texture(self, x: int, y: int) -> None:
        if not 0 <= x < 16 or not 0 <= y < 16:
            raise ValueError("texture coordinate is out of bounds")
        index = x | (y << 4)
        self.data = (self.data + (index << 20)) & _MASK


FaceVertex = tuple[tuple[int, int, int], tuple[bool, bool]]

# Faces in the order +y, +x, -x, -z, +z, -y; six vertices (two triangles) each.
FACES: tuple[tuple[FaceVertex, ...], ...] = (
    (
        ((0, 1, 1), (True, False)),
        ((1, 1, 1), (True, True)),
        ((0, 1, 0), (False, False)),
        ((1, 1, 1), (True, True)),
        ((1, 1, 0), (False, True)),
        ((0, 1, 0), (False, False)),
    ),
    (
        ((1, 1, 1), (True, False)),
        ((1, 0, 1), (True, True)),
        ((1, 1, 0), (False, False)),
        ((1, 0, 1), (True, True)),
        ((1, 0, 0), (False, True)),
        ((1, 1, 0), (False, False)),
    ),
    (
        ((0, 1, 0), (True, False)),
        ((0, 0, 0), (True, True)),
        ((0, 1, 1), (False, False)),
        ((0, 0, 0), (True, True)),
        ((0, 0, 1), (False, True)),
        ((0, 1, 1), (False, False)),
    ),
    (
        ((1, 1, 0), (True, False)),
        ((1, 0, 0), (True, True)),
        ((0, 1, 0), (False, False)),
        ((1, 0, 0), (True, True)),
        ((0, 0, 0), (False, True)),
        ((0, 1, 0), (False, False)),
    ),
    (
        ((0, 1, 1), (True, False)),
        ((0, 0, 1), (True, True)),
        ((1, 1, 1), (False, False)),
        ((0, 0, 1), (True, True)),
        ((1, 0, 1), (False, True)),
        ((1, 1, 1), (False, False)),
    ),
    (
        ((1, 0, 1), (True, False)),
        ((0, 0, 1), (True, True)),
        ((1, 0, 0), (False, False)),
        ((0, 0, 1), (True, True)),
        ((0, 0, 0), (False, True)),
        ((1, 0, 0), (False, False)),
    ),
)

_FACE_BY_DIRECTION: dict[tuple[int, int, int], int] = {
    (0, 1, 0): 0,
    (1, 0, 0): 1,
    (-1, 0, 0): 2,
    (0, 0, -1): 3,
    (0, 0, 1): 4,
    (0, -1, 0): 5,
}


def vertices_from_direction(x: int, y: int, z: int) -> tuple[BlockVertex, ...]:
    """Return fresh vertices of the unit-block face pointing along (x, y, z)."""
    face = _FACE_BY_DIRECTION.get((x, y, z))
    if face is None:
        raise ValueError("direction must be a unit axis vector")
    return tuple(BlockVertex(position, uv) for position, uv in FACES[face])


def all_face_vertices() -> tuple[BlockVertex, ...]:
    """Return fresh vertices of all six faces of a unit block."""
    return tuple(BlockVertex(position, uv) for face in FACES for position, uv in face)