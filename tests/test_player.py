import pytest

from voxelcraft.blocks import BlockType
from voxelcraft.persistence import Persistence
from voxelcraft.player import Player
from voxelcraft.world import World


class _EmptyGenerator:
    def populate_chunk(self, chunk):
        chunk.set_dirty()


@pytest.fixture
def persistence(tmp_path):
    return Persistence(tmp_path / "world.sav")


@pytest.fixture
def world(persistence):
    return World(persistence, generator=_EmptyGenerator())


@pytest.fixture
def player(world, persistence):
    return Player(world, persistence)


def test_movement_keys_toggle_directions(player):
    player.on_key_event(87, 0, 1, 0)
    assert player.camera.forward.is_moving is True
    player.on_key_event(87, 0, 2, 0)
    assert player.camera.forward.is_moving is True
    player.on_key_event(87, 0, 0, 0)
    assert player.camera.forward.is_moving is False
    player.on_key_event(68, 0, 1, 0)
    assert player.camera.right.is_moving is True


def test_walking_in_free_mode(player):
    start = player.camera.position
    player.on_key_event(87, 0, 1, 0)
    player.update(1.0)
    end = player.camera.position
    assert end[0] == pytest.approx(start[0] + 5.0)
    assert end[1] == pytest.approx(start[1])
    assert end[2] == pytest.approx(start[2])


def test_running_in_free_mode(player):
    start = player.camera.position
    player.on_key_event(340, 0, 1, 0)
    player.on_key_event(87, 0, 1, 0)
    player.update(1.0)
    assert player.camera.position[0] == pytest.approx(start[0] + 8.0)


def test_flying_up_in_free_mode(player):
    start = player.camera.position
    player.on_key_event(32, 0, 1, 0)
    player.update(0.5)
    assert player.camera.up.is_moving is True
    assert player.camera.position[1] > start[1]


def test_survival_falls_in_empty_world(player):
    player.set_survival_movement(True)
    start = player.camera.position
    player.update(0.1)
    assert player.camera.position[1] < start[1]
    assert player.can_jump is False


def test_survival_lands_and_jumps(player, world):
    world.place_block(BlockType.STONE, (5, 10, 5))
    player.camera.set_position((5.5, 12.5, 5.5))
    player.set_survival_movement(True)

    player.update(0.1)
    assert player.camera.position == pytest.approx((5.5, 12.5, 5.5))
    assert player.can_jump is True
    assert player.gravity == (0.0, 0.0, 0.0)

    player.on_key_event(32, 0, 1, 0)
    assert player.gravity[1] > 0
    assert player.camera.up.is_moving is False
    player.update(0.1)
    assert player.camera.position[1] > 12.5


def test_survival_ignores_crouch_key(player):
    player.set_survival_movement(True)
    player.on_key_event(341, 0, 1, 0)
    assert player.camera.down.is_moving is False
    player.set_survival_movement(False)
    player.on_key_event(341, 0, 1, 0)
    assert player.camera.down.is_moving is True


@pytest.fixture
def aiming_player(player, world):
    world.place_block(BlockType.STONE, (5, 10, 5))
    player.camera.look_at((5.5, 10.5, 2.5), (0.0, 0.0, 1.0))
    return player


def test_left_click_breaks_block(aiming_player, world):
    aiming_player.on_mouse_button_event(0, 1, 0)
    assert world.block_at((5, 10, 5)).type is BlockType.AIR


def test_release_does_nothing(aiming_player, world):
    aiming_player.on_mouse_button_event(0, 0, 0)
    assert world.block_at((5, 10, 5)).type is BlockType.STONE


def test_right_click_places_in_front(aiming_player, world):
    aiming_player.block_to_place = BlockType.GLASS
    aiming_player.on_mouse_button_event(1, 1, 0)
    assert world.block_at((5, 10, 4)).type is BlockType.GLASS
    assert world.block_at((5, 10, 5)).type is BlockType.STONE


def test_middle_click_picks_block(aiming_player):
    assert aiming_player.block_to_place is BlockType.GRASS
    aiming_player.on_mouse_button_event(2, 1, 0)
    assert aiming_player.block_to_place is BlockType.STONE


def test_cursor_turns_camera_and_clamps_pitch(player):
    yaw = player.camera.yaw
    pitch = player.camera.pitch
    player.on_cursor_position_event(100.0, 100.0)
    assert player.camera.yaw == pytest.approx(yaw)
    assert player.camera.pitch == pytest.approx(pitch)

    player.on_cursor_position_event(110.0, 90.0)
    assert player.camera.yaw > yaw
    assert player.camera.pitch > pitch

    player.on_cursor_position_event(110.0, -10000.0)
    assert player.camera.pitch == 89.0


def test_reset_mouse_position_skips_jump(player):
    player.on_cursor_position_event(0.0, 0.0)
    yaw = player.camera.yaw
    player.reset_mouse_position()
    player.on_cursor_position_event(500.0, 500.0)
    assert player.camera.yaw == pytest.approx(yaw)


def test_close_commits_camera(player, persistence):
    player.camera.set_position((1.0, 2.0, 3.0))
    player.close()
    assert persistence.camera.position == (1.0, 2.0, 3.0)
    assert persistence.camera is not player.camera