"""A free-flying camera driven by movement keys, mouse and scroll wheel."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Iterable

from rigidsim.matrix44 import Matrix44
from rigidsim.vector3d import Vector3d


class CameraMove(Enum):
    """A movement request for one frame."""

    FORWARD = auto()
    BACKWARD = auto()
    LEFT = auto()
    RIGHT = auto()
    UP = auto()
    DOWN = auto()


@dataclass
class Camera:
    """Perspective camera; movements are buffered and applied on update."""

    fov: float = 90.0
    position: Vector3d = field(default_factory=lambda: Vector3d(0.0, 0.0, 10.0))
    front: Vector3d = field(default_factory=lambda: Vector3d(0.0, 0.0, -1.0))
    up: Vector3d = field(default_factory=lambda: Vector3d(0.0, 1.0, 0.0))
    move_speed: float = 4.0
    sensitivity: float = 0.1
    yaw: float = -90.0
    pitch: float = 0.0
    constrain_pitch: bool = True
    movement_buffer: Vector3d = field(default_factory=Vector3d)
    front_buffer: Vector3d = field(default_factory=Vector3d)
    scroll_offset: float = 0.0
    scroll_sensitivity: float = 4.0

    def _right(self) -> Vector3d:
        return self.front.cross(self.up).normalize()

    def move_forward(self) -> None:
        self.movement_buffer = self.movement_buffer + self.front * self.move_speed

    def move_backward(self) -> None:
        self.movement_buffer = self.movement_buffer - self.front * self.move_speed

    def move_left(self) -> None:
        self.movement_buffer = self.movement_buffer - self._right() * self.move_speed

    def move_right(self) -> None:
        self.movement_buffer = self.movement_buffer + self._right() * self.move_speed

    def move_up(self) -> None:
        self.movement_buffer = self.movement_buffer + self.up * self.move_speed

    def move_down(self) -> None:
        self.movement_buffer = self.movement_buffer - self.up * self.move_speed

    def process_mouse_movement(self, x_offset: float, y_offset: float) -> None:
        """Turn the camera; the new direction takes effect on the next update."""
        self.yaw += x_offset * self.sensitivity
        self.pitch += y_offset * self.sensitivity
        if self.constrain_pitch:
            self.pitch = max(-89.0, min(89.0, self.pitch))
        yaw = math.radians(self.yaw)
        pitch = math.radians(self.pitch)
        self.front_buffer = Vector3d(
            math.cos(yaw) * math.cos(pitch),
            math.sin(pitch),
            math.sin(yaw) * math.cos(pitch),
        )

    def view_matrix(self) -> Matrix44:
        """Right-handed look-at view matrix, stored row by row."""
        eye = self.position
        f = self.front.normalize()
        s = f.cross(self.up).normalize()
        u = s.cross(f)
        return Matrix44(
            [
                s.x, s.y, s.z, -s.dot(eye),
                u.x, u.y, u.z, -u.dot(eye),
                -f.x, -f.y, -f.z, f.dot(eye),
                0.0, 0.0, 0.0, 1.0,
            ]
        )

    def update(self, delta_time: float, pressed: Iterable[CameraMove] = ()) -> None:
        """Apply the pressed moves, scroll and turn, then clear the buffers."""
        actions = {
            CameraMove.FORWARD: self.move_forward,
            CameraMove.BACKWARD: self.move_backward,
            CameraMove.LEFT: self.move_left,
            CameraMove.RIGHT: self.move_right,
            CameraMove.UP: self.move_up,
            CameraMove.DOWN: self.move_down,
        }
        held = set(pressed)
        for move in CameraMove:
            if move in held:
                actions[move]()

        self.movement_buffer = (
            self.movement_buffer + self.up * (self.scroll_offset * self.move_speed)
        )
        self.position = self.position + self.movement_buffer * delta_time
        if self.front_buffer != Vector3d(0.0, 0.0, 0.0):
            self.front = self.front_buffer.normalize()

        self.movement_buffer = Vector3d()
        self.front_buffer = Vector3d()
        self.scroll_offset = 0.0

    def set_scroll_offset(self, offset: float) -> None:
        self.scroll_offset = offset * self.scroll_sensitivity