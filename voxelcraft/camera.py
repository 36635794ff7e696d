"""A first-person camera with movement flags and a binary snapshot form."""

from __future__ import annotations

import math
import struct
from dataclasses import dataclass
from typing import Sequence

import numpy as np

Vec3 = tuple[float, float, float]

# view matrix (column-major), position, up, six movement directions
# (flag plus padding plus vector), look direction, yaw, pitch
_LAYOUT = struct.Struct("<16f3f3f" + "?3x3f" * 6 + "3f2f")
CAMERA_SIZE = _LAYOUT.size


def _vec(values: Sequence[float]) -> Vec3:
    x, y, z = values
    return (float(x), float(y), float(z))


def _dot(a: Sequence[float], b: Sequence[float]) -> float:
    return a[0] * b[0] + a[1] * b[1] + a[2] * b[2]


def _cross(a: Sequence[float], b: Sequence[float]) -> Vec3:
    return (
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    )


def _normalize(v: Sequence[float]) -> Vec3:
    length = math.sqrt(_dot(v, v))
    if length == 0:
        return (math.nan, math.nan, math.nan)
    return (v[0] / length, v[1] / length, v[2] / length)


def _look_at(eye: Vec3, center: Vec3, up: Vec3) -> np.ndarray:
    f = _normalize(tuple(c - e for c, e in zip(center, eye)))
    s = _normalize(_cross(f, up))
    u = _cross(s, f)
    return np.array(
        [
            [s[0], s[1], s[2], -_dot(s, eye)],
            [u[0], u[1], u[2], -_dot(u, eye)],
            [-f[0], -f[1], -f[2], _dot(f, eye)],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


@dataclass
class MovementDirection:
    """A direction the camera moves in while its flag is set."""

    is_moving: bool = False
    direction: Vec3 = (0.0, 0.0, 0.0)


class Camera:
    """Position, orientation and view matrix of the player's eye."""

    def __init__(self) -> None:
        self.position: Vec3 = (14.0, 100.0, 17.0)
        self.camera_up: Vec3 = (0.0, 1.0, 0.0)

        self.forward = MovementDirection(False, (1.0, 0.0, 0.0))
        self.backward = MovementDirection(False, (-1.0, 0.0, 0.0))
        self.left = MovementDirection(False, (0.0, 0.0, 1.0))
        self.right = MovementDirection(False, (0.0, 0.0, -1.0))
        self.up = MovementDirection(False, (0.0, 1.0, 0.0))
        self.down = MovementDirection(False, (0.0, -1.0, 0.0))
        self.look_direction: Vec3 = self.forward.direction

        self.yaw = 0.0
        self.pitch = 0.5
        self.view = self._calc_view()

    @property
    def directions(self) -> tuple[MovementDirection, ...]:
        return (self.forward, self.backward, self.left, self.right, self.up, self.down)

    def _calc_view(self) -> np.ndarray:
        center = tuple(p + d for p, d in zip(self.position, self.look_direction))
        return _look_at(self.position, center, self.camera_up)

    def _update_view(self) -> np.ndarray:
        self.view = self._calc_view()
        return self.view

    def look_at(self, eye: Sequence[float], center: Sequence[float]) -> np.ndarray:
        """Move to eye and look along center, which is taken as a direction."""
        self.position = _vec(eye)
        self.update_camera_direction(center)
        return self._update_view()

    def set_position(self, eye: Sequence[float]) -> np.ndarray:
        self.position = _vec(eye)
        return self._update_view()

    def update_camera_direction(self, new_forward: Sequence[float]) -> None:
        """Look along new_forward and align the horizontal movement directions."""
        self.look_direction = _vec(new_forward)
        flat = (self.look_direction[0], 0.0, self.look_direction[2])
        self.forward.direction = _normalize(flat)
        self.backward.direction = (-flat[0], -flat[1], -flat[2])
        right = _normalize(_cross(flat, self.camera_up))
        self.right.direction = right
        self.left.direction = (-right[0], -right[1], -right[2])

    def update_camera_orientation(self, yaw: float, pitch: float) -> None:
        """Look in the direction given by yaw and pitch in degrees."""
        self.yaw = float(yaw)
        self.pitch = float(pitch)
        yaw_rad = math.radians(self.yaw)
        pitch_rad = math.radians(self.pitch)
        self.update_camera_direction(
            _normalize(
                (
                    math.cos(yaw_rad) * math.cos(pitch_rad),
                    math.sin(pitch_rad),
                    math.sin(yaw_rad) * math.cos(pitch_rad),
                )
            )
        )
        self._update_view()

    def move_direction(self) -> Vec3:
        """Sum of the directions whose movement flag is set."""
        total = [0.0, 0.0, 0.0]
        for movement in self.directions:
            if movement.is_moving:
                for axis in range(3):
                    total[axis] += movement.direction[axis]
        return (total[0], total[1], total[2])

    def pack(self) -> bytes:
        """Return the camera as the fixed-size record stored in save files."""
        values: list = list(self.view.T.flatten())
        values += self.position
        values += self.camera_up
        for movement in self.directions:
            values.append(movement.is_moving)
            values += movement.direction
        values += self.look_direction
        values += (self.yaw, self.pitch)
        return _LAYOUT.pack(*values)

    @staticmethod
    def unpack(data: bytes) -> Camera:
        """Build a camera from a record written by pack."""
        if len(data) != CAMERA_SIZE:
            raise ValueError(f"a camera record is {CAMERA_SIZE} bytes, got {len(data)}")
        values = _LAYOUT.unpack(data)
        camera = Camera()
        camera.view = np.array(values[:16], dtype=float).reshape(4, 4).T
        camera.position = _vec(values[16:19])
        camera.camera_up = _vec(values[19:22])
        rest = values[22:]
        for index, movement in enumerate(camera.directions):
            record = rest[index * 4 : index * 4 + 4]
            movement.is_moving = bool(record[0])
            movement.direction = _vec(record[1:])
        tail = rest[24:]
        camera.look_direction = _vec(tail[:3])
        camera.yaw = float(tail[3])
        camera.pitch = float(tail[4])
        return camera