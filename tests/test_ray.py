import pytest

from voxelcraft.blocks import BlockData, BlockType
from voxelcraft.persistence import Persistence
from voxelcraft.ray import Ray
from voxelcraft.world import World


class _EmptyGenerator:
    def populate_chunk(self, chunk):
        chunk.set_dirty()


@pytest.fixture
def world(tmp_path):
    world = World(Persistence(tmp_path / "world.sav"), generator=_EmptyGenerator())
    world.place_block(BlockType.STONE, (5, 10, 5))
    return world


def test_ray_hits_block_ahead(world):
    ray = Ray((5.5, 10.5, 0.5), (0.0, 0.0, 1.0), world, 10.0)
    assert ray
    assert ray.hit_target.position == (5, 10, 5)
    assert ray.hit_target.block == BlockData(BlockType.STONE)
    assert ray.hit_target.neighbor == (5, 10, 4)
    assert ray.hit_target.has_neighbor is True


def test_ray_respects_reach(world):
    ray = Ray((5.5, 10.5, 0.5), (0.0, 0.0, 1.0), world, 4.5)
    assert not ray
    assert ray.hit_target is None


def test_ray_misses_block_behind(world):
    ray = Ray((5.5, 10.5, 0.5), (0.0, 0.0, -1.0), world, 10.0)
    assert ray.has_hit is False


def test_ray_in_empty_direction(world):
    ray = Ray((0.5, 200.5, 0.5), (0.0, 1.0, 0.0), world, 10.0)
    assert ray.has_hit is False
    assert ray.hit_target is None


def test_zero_direction_never_hits(world):
    ray = Ray((5.5, 10.5, 5.5), (0.0, 0.0, 0.0), world, 10.0)
    assert ray.hit_target is None


def test_ray_downwards_reports_cell_above(world):
    world.place_block(BlockType.GLASS, (2, 0, 2))
    ray = Ray((2.5, 3.5, 2.5), (0.0, -1.0, 0.0), world)
    assert ray.hit_target.position == (2, 0, 2)
    assert ray.hit_target.block.type is BlockType.GLASS
    assert ray.hit_target.neighbor == (2, 1, 2)


def test_ray_starting_inside_block_has_no_neighbor(world):
    ray = Ray((5.5, 10.5, 5.5), (0.0, 0.0, 1.0), world, 10.0)
    assert ray.hit_target.position == (5, 10, 5)
    assert ray.hit_target.has_neighbor is False


def test_neighbor_is_adjacent_to_hit(world):
    ray = Ray((2.3, 12.7, 1.1), (0.6, -0.4, 0.7), world, 10.0)
    assert ray.hit_target.position == (5, 10, 5)
    neighbor = ray.hit_target.neighbor
    assert sum(abs(a - b) for a, b in zip(neighbor, ray.hit_target.position)) == 1
    assert world.block_at(neighbor).type is BlockType.AIR