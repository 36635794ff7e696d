import pytest

from voxelcraft.aabb import AABB


def test_block_box_extent():
    box = AABB.from_block_position((2, 5, -3))
    assert (box.min_x, box.min_y, box.min_z) == (2, 5, -3)
    assert (box.max_x, box.max_y, box.max_z) == (3, 6, -2)


def test_player_box_extent():
    box = AABB.player_box((10.0, 70.0, -4.0))
    assert box.min_y == pytest.approx(70.0 - 1.5)
    assert box.max_y == pytest.approx(70.0 + 0.3)
    assert box.min_x == pytest.approx(10.0 - 0.3)
    assert box.max_z == pytest.approx(-4.0 + 0.3)


def test_min_never_exceeds_max():
    box = AABB.player_box((1.5, 2.5, 3.5))
    for axis in range(3):
        assert box.min_at(axis) <= box.max_at(axis)


def test_touching_blocks_intersect():
    assert AABB.from_block_position((0, 0, 0)).intersects(AABB.from_block_position((1, 0, 0)))


def test_distant_blocks_do_not_intersect():
    a = AABB.from_block_position((0, 0, 0))
    b = AABB.from_block_position((2, 0, 0))
    assert not a.intersects(b)
    assert not b.intersects(a)


def test_player_inside_block_intersects():
    player = AABB.player_box((0.5, 1.5, 0.5))
    block = AABB.from_block_position((0, 0, 0))
    assert player.intersects(block)
    assert block.intersects(player)


def test_player_above_block_does_not_intersect():
    player = AABB.player_box((0.5, 3.0, 0.5))
    assert not player.intersects(AABB.from_block_position((0, 0, 0)))


def test_wrong_point_count():
    with pytest.raises(ValueError):
        AABB(((0, 0, 0), (1, 1, 1)))


def test_index_out_of_range():
    with pytest.raises(IndexError):
        AABB.from_block_position((0, 0, 0)).min_at(3)