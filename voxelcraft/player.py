"""The player: input handling, movement with optional physics, and block editing."""

from __future__ import annotations

import copy
import math
from typing import Optional, Sequence

from .blocks import BlockType
from .camera import Camera
from .movement import can_move
from .persistence import Persistence
from .ray import Ray
from .world import World

KEY_SPACE = 32
KEY_A = 65
KEY_D = 68
KEY_S = 83
KEY_W = 87
KEY_LEFT_SHIFT = 340
KEY_LEFT_CONTROL = 341

ACTION_RELEASE = 0
ACTION_PRESS = 1
ACTION_REPEAT = 2

MOUSE_LEFT = 0
MOUSE_RIGHT = 1
MOUSE_MIDDLE = 2

REACH = 4.5
GRAVITY_CONSTANT = 46.62
PITCH_LIMIT = 89.0

Vec3 = tuple[float, float, float]


def _add(a: Sequence[float], b: Sequence[float]) -> Vec3:
    return (a[0] + b[0], a[1] + b[1], a[2] + b[2])


class Player:
    """Moves the camera from input and edits the world with the mouse."""

    REACH = REACH
    GRAVITY_CONSTANT = GRAVITY_CONSTANT

    def __init__(self, world: World, persistence: Persistence) -> None:
        self.world = world
        self.persistence = persistence
        self.camera: Camera = copy.deepcopy(persistence.camera)
        self.block_to_place = BlockType.GRASS

        self.gravity: Vec3 = (0.0, 0.0, 0.0)
        self.walking_speed = 5.0
        self.running_speed = 8.0
        self.mouse_sensitivity = 0.5
        self.can_jump = False
        self.is_running = False
        self.is_survival_movement = False
        self._reset_mouse = True
        self._last_cursor: Optional[tuple[float, float]] = None

    def set_survival_movement(self, enabled: bool) -> None:
        """Switch physics on or off; either way the fall speed starts again from zero."""
        self.gravity = (0.0, 0.0, 0.0)
        self.is_survival_movement = bool(enabled)

    def update(self, delta_time: float) -> None:
        """Move the camera by the pressed directions and, with physics, by gravity."""
        gx, gy, gz = self.gravity
        self.gravity = (gx, gy - GRAVITY_CONSTANT * delta_time, gz)

        move = self.camera.move_direction()
        self.can_jump = False
        movement: Vec3 = (0.0, 0.0, 0.0)
        length = math.sqrt(sum(c * c for c in move))
        if length > 0:
            speed = self.running_speed if self.is_running else self.walking_speed
            movement = tuple(c / length * speed * delta_time for c in move)

        position = self.camera.position
        if self.is_survival_movement:
            for axis in range(3):
                step = tuple(movement[i] if i == axis else 0.0 for i in range(3))
                target = _add(position, step)
                if can_move(position, target, self.world):
                    position = target

            falling = _add(position, tuple(c * delta_time for c in self.gravity))
            if can_move(position, falling, self.world):
                position = falling
            else:
                self.can_jump = True
                self.gravity = (0.0, 0.0, 0.0)
        else:
            position = _add(position, movement)

        self.camera.set_position(position)

    def on_key_event(self, key: int, scancode: int, action: int, mode: int) -> None:
        """React to a key press or release; repeats are ignored."""
        if action == ACTION_REPEAT:
            return
        pressed = action == ACTION_PRESS

        if key == KEY_W:
            self.camera.forward.is_moving = pressed
        elif key == KEY_S:
            self.camera.backward.is_moving = pressed
        elif key == KEY_A:
            self.camera.left.is_moving = pressed
        elif key == KEY_D:
            self.camera.right.is_moving = pressed
        elif key == KEY_SPACE:
            if self.is_survival_movement:
                self.camera.up.is_moving = False
                if self.can_jump and pressed:
                    self.gravity = (0.0, GRAVITY_CONSTANT / 4.5, 0.0)
            else:
                self.camera.up.is_moving = pressed
        elif key == KEY_LEFT_CONTROL:
            self.camera.down.is_moving = False if self.is_survival_movement else pressed
        elif key == KEY_LEFT_SHIFT:
            self.is_running = pressed

    def _look_ray(self) -> Ray:
        return Ray(self.camera.position, self.camera.look_direction, self.world, REACH)

    def on_mouse_button_event(self, button: int, action: int, mods: int) -> None:
        """Break, place or pick a block on a button press."""
        if action != ACTION_PRESS:
            return

        if button == MOUSE_LEFT:
            ray = self._look_ray()
            if ray:
                self.world.place_block(BlockType.AIR, ray.hit_target.position)
        elif button == MOUSE_RIGHT:
            ray = self._look_ray()
            if ray and ray.hit_target.has_neighbor:
                self.world.place_block(self.block_to_place, ray.hit_target.neighbor)
        elif button == MOUSE_MIDDLE:
            ray = self._look_ray()
            if ray:
                self.block_to_place = ray.hit_target.block.type

    def on_cursor_position_event(self, x: float, y: float) -> None:
        """Turn the camera by the cursor movement since the last event."""
        if self._reset_mouse or self._last_cursor is None:
            self._reset_mouse = False
            self._last_cursor = (x, y)

        last_x, last_y = self._last_cursor
        yaw = self.camera.yaw + (x - last_x) * self.mouse_sensitivity
        pitch = self.camera.pitch + (last_y - y) * self.mouse_sensitivity
        pitch = min(max(pitch, -PITCH_LIMIT), PITCH_LIMIT)
        self.camera.update_camera_orientation(yaw, pitch)

        self._last_cursor = (x, y)

    def reset_mouse_position(self) -> None:
        """Make the next cursor event a new starting point instead of a movement."""
        self._reset_mouse = True

    def close(self) -> None:
        """Hand the camera back to the save file."""
        self.persistence.commit_camera(self.camera)