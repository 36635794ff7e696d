"""Block types, their render classes and display names."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field


class BlockClass(enum.Enum):
    """How a block takes part in meshing and transparency."""

    AIR = enum.auto()
    SOLID = enum.auto()
    SEMI_TRANSPARENT = enum.auto()
    TRANSPARENT = enum.auto()


class BlockType(enum.IntEnum):
    """Every kind of block; the values are stored in save files."""

    BEDROCK = 0
    PLANKS = 1
    GRASS = 2
    DIRT = 3
    SAND = 4
    STONE = 5
    COBBLESTONE = 6
    GLASS = 7
    OAK_WOOD = 8
    OAK_LEAVES = 9
    WATER = 10
    LAVA = 11
    IRON = 12
    DIAMOND = 13
    GOLD = 14
    OBSIDIAN = 15
    SPONGE = 16
    AIR = 17


def type_to_class(block_type: BlockType | int) -> BlockClass:
    """Return the render class of a block type."""
    block_type = BlockType(block_type)
    if block_type is BlockType.AIR:
        return BlockClass.AIR
    if block_type is BlockType.WATER:
        return BlockClass.SEMI_TRANSPARENT
    if block_type in (BlockType.OAK_LEAVES, BlockType.GLASS):
        return BlockClass.TRANSPARENT
    return BlockClass.SOLID


@dataclass(frozen=True)
class BlockData:
    """A block in the world: its type and the class derived from it."""

    type: BlockType = BlockType.AIR
    block_class: BlockClass = field(init=False)

    def __post_init__(self) -> None:
        block_type = BlockType(self.type)
        object.__setattr__(self, "type", block_type)
        object.__setattr__(self, "block_class", type_to_class(block_type))


BLOCK_NAMES: tuple[tuple[BlockType, str], ...] = (
    (BlockType.GRASS, "Grass"),
    (BlockType.DIRT, "Dirt"),
    (BlockType.STONE, "Stone"),
    (BlockType.COBBLESTONE, "Cobblestone"),
    (BlockType.SAND, "Sand"),
    (BlockType.GLASS, "Glass"),
    (BlockType.OAK_WOOD, "Oak Wood"),
    (BlockType.OAK_LEAVES, "Oak Leaves"),
    (BlockType.BEDROCK, "Bedrock"),
    (BlockType.PLANKS, "Wooden Planks"),
    (BlockType.WATER, "Water"),
    (BlockType.LAVA, "Lava"),
    (BlockType.IRON, "Block of Iron"),
    (BlockType.DIAMOND, "Block of Diamond"),
    (BlockType.GOLD, "Block of Gold"),
    (BlockType.OBSIDIAN, "Obsidian"),
    (BlockType.SPONGE, "Sponge"),
)

BLOCK_COUNT = len(BLOCK_NAMES)


def block_type_to_index(block_type: BlockType | int) -> int | None:
    """Return the position of a block type in the selectable list, or None."""
    for index, (candidate, _name) in enumerate(BLOCK_NAMES):
        if candidate == block_type:
            return index
    return None


def block_type_to_name(block_type: BlockType | int) -> str:
    """Return the display name of a block type, or "unknown"."""
    index = block_type_to_index(block_type)
    if index is None:
        return "unknown"
    return BLOCK_NAMES[index][1]


def block_names() -> tuple[str, ...]:
    """Return the display names of all selectable blocks, in list order."""
    return tuple(name for _type, name in BLOCK_NAMES)