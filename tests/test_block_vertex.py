import pytest

from voxelcraft.block_vertex import BlockVertex, all_face_vertices, vertices_from_direction
from voxelcraft.blocks import BlockType


def texture_index(vertex):
    return (vertex.data >> 20) & 0xFF


def test_position_round_trip():
    assert BlockVertex((1, 1, 0), (True, False)).position == (1, 1, 0)


def test_offset_moves_position():
    vertex = BlockVertex((1, 0, 1), (False, False))
    vertex.offset(3, 10, 5)
    assert vertex.position == (1 + 3, 0 + 10, 1 + 5)


def test_offset_out_of_bounds():
    vertex = BlockVertex((1, 0, 0), (False, False))
    with pytest.raises(ValueError):
        vertex.offset(16, 0, 0)


def test_offset_upper_y_bound():
    vertex = BlockVertex()
    vertex.offset(0, 256, 0)
    assert vertex.position[1] == 256
    with pytest.raises(ValueError):
        vertex.offset(0, 1, 0)


def test_negative_offset_rejected():
    with pytest.raises(ValueError):
        BlockVertex().offset(-1, 0, 0)


def test_set_animated_sets_flag():
    vertex = BlockVertex()
    vertex.set_animated()
    assert (vertex.data >> 28) & 1 == 1


def test_occlusion_level_stored():
    vertex = BlockVertex()
    vertex.set_occlusion_level(3)
    assert (vertex.data >> 29) & 0b11 == 3


def test_occlusion_level_out_of_bounds():
    with pytest.raises(ValueError):
        BlockVertex().set_occlusion_level(4)


def test_grass_textures_by_face():
    top, side, bottom, dirt = BlockVertex(), BlockVertex(), BlockVertex(), BlockVertex()
    top.set_type((0, 1, 0), BlockType.GRASS)
    side.set_type((1, 0, 0), BlockType.GRASS)
    bottom.set_type((0, -1, 0), BlockType.GRASS)
    dirt.set_type((1, 0, 0), BlockType.DIRT)
    assert texture_index(top) == 0
    assert texture_index(side) == 3
    assert bottom == dirt


def test_water_is_animated_stone_is_not():
    water, stone = BlockVertex(), BlockVertex()
    water.set_type((0, 1, 0), BlockType.WATER)
    stone.set_type((0, 1, 0), BlockType.STONE)
    assert (water.data >> 28) & 1 == 1
    assert (stone.data >> 28) & 1 == 0


def test_oak_wood_ends_differ_from_sides():
    top, bottom = BlockVertex(), BlockVertex()
    top.set_type((0, 1, 0), BlockType.OAK_WOOD)
    bottom.set_type((0, -1, 0), BlockType.OAK_WOOD)
    side = BlockVertex()
    side.set_type((0, 0, 1), BlockType.OAK_WOOD)
    assert top == bottom
    assert texture_index(side) + 1 == texture_index(top)


def test_set_type_keeps_position():
    vertex = BlockVertex((1, 1, 1), (True, True))
    vertex.set_type((0, 1, 0), BlockType.LAVA)
    assert vertex.position == (1, 1, 1)


def test_air_has_no_texture():
    with pytest.raises(ValueError):
        BlockVertex().set_type((0, 1, 0), BlockType.AIR)


@pytest.mark.parametrize(
    "direction, axis, value",
    [
        ((1, 0, 0), 0, 1),
        ((-1, 0, 0), 0, 0),
        ((0, 1, 0), 1, 1),
        ((0, -1, 0), 1, 0),
        ((0, 0, 1), 2, 1),
        ((0, 0, -1), 2, 0),
    ],
)
def test_face_vertices_lie_on_face(direction, axis, value):
    vertices = vertices_from_direction(*direction)
    assert len(vertices) == 6
    assert all(v.position[axis] == value for v in vertices)


def test_invalid_direction():
    with pytest.raises(ValueError):
        vertices_from_direction(1, 1, 0)


def test_face_vertices_are_fresh():
    first = vertices_from_direction(0, 1, 0)
    first[0].offset(5, 5, 5)
    second = vertices_from_direction(0, 1, 0)
    assert second[0].position != first[0].position
    assert second[0] == vertices_from_direction(0, 1, 0)[0]


def test_all_face_vertices_count():
    vertices = all_face_vertices()
    assert len(vertices) == 36
    assert vertices[:6] == vertices_from_direction(0, 1, 0)