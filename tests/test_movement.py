import pytest

from voxelcraft.blocks import BlockType
from voxelcraft.movement import can_move
from voxelcraft.persistence import Persistence
from voxelcraft.world import World


class _EmptyGenerator:
    def populate_chunk(self, chunk):
        chunk.set_dirty()


@pytest.fixture
def world(tmp_path):
    return World(Persistence(tmp_path / "world.sav"), generator=_EmptyGenerator())


def test_free_movement_in_empty_world(world):
    assert can_move((5.5, 20.0, 5.5), (6.0, 19.5, 5.0), world) is True


def test_falling_into_block_is_blocked(world):
    world.place_block(BlockType.STONE, (5, 10, 5))
    assert can_move((5.5, 12.6, 5.5), (5.5, 12.4, 5.5), world) is False


def test_falling_above_block_is_allowed(world):
    world.place_block(BlockType.STONE, (5, 10, 5))
    assert can_move((5.5, 13.1, 5.5), (5.5, 13.0, 5.5), world) is True


def test_walking_into_wall_is_blocked(world):
    world.place_block(BlockType.COBBLESTONE, (7, 11, 5))
    assert can_move((6.5, 12.5, 5.5), (6.8, 12.5, 5.5), world) is False


def test_walking_away_from_wall_is_allowed(world):
    world.place_block(BlockType.COBBLESTONE, (7, 11, 5))
    assert can_move((6.5, 12.5, 5.5), (6.2, 12.5, 5.5), world) is True


def test_standing_still_is_always_allowed(world):
    world.place_block(BlockType.STONE, (5, 10, 5))
    assert can_move((5.5, 11.5, 5.5), (5.5, 11.5, 5.5), world) is True