"""A first-person camera driven by keyboard and mouse input."""

from __future__ import annotations

import datetime
import math
from typing import Iterable, Union

import numpy as np

from bonobo.input import (
    KEY_A,
    KEY_D,
    KEY_E,
    KEY_LEFT_CONTROL,
    KEY_LEFT_SHIFT,
    KEY_Q,
    KEY_S,
    KEY_W,
    MOUSE_BUTTON_LEFT,
    InputHandler,
    KeyState,
)
from bonobo.transform import TRSTransform


def perspective(fovy: float, aspect: float, near: float, far: float) -> np.ndarray:
    """Right-handed perspective projection mapping depth to [-1, 1]."""
    if aspect == 0:
        raise ValueError("aspect ratio must not be zero")
    if near == far:
        raise ValueError("near and far planes must differ")
    tan_half = math.tan(fovy / 2.0)
    m = np.zeros((4, 4))
    m[0, 0] = 1.0 / (aspect * tan_half)
    m[1, 1] = 1.0 / tan_half
    m[2, 2] = -(far + near) / (far - near)
    m[3, 2] = -1.0
    m[2, 3] = -(2.0 * far * near) / (far - near)
    return m


class FPSCamera:
    """Perspective camera whose world transform follows WASDQE and mouse drags."""

    def __init__(self, fovy: float, aspect: float, near: float, far: float) -> None:
        self.world = TRSTransform()
        self.movement_speed = 1.0
        self.mouse_sensitivity = 1.0
        self.rotation = np.zeros(2)
        self.mouse_position = np.zeros(2)
        self.set_projection(fovy, aspect, near, far)

    def set_projection(self, fovy: float, aspect: float, near: float, far: float) -> None:
        projection = perspective(fovy, aspect, near, far)
        self.fov = fovy
        self._aspect = aspect
        self.near = near
        self.far = far
        self.projection = projection
        self.projection_inverse = np.linalg.inv(projection)

    @property
    def fov(self) -> float:
        return self._fov

    @fov.setter
    def fov(self, value: float) -> None:
        self._fov = value
        if hasattr(self, "projection"):
            self.set_projection(value, self._aspect, self.near, self.far)

    @property
    def aspect(self) -> float:
        return self._aspect

    @aspect.setter
    def aspect(self, value: float) -> None:
        self.set_projection(self._fov, value, self.near, self.far)

    def update(
        self,
        delta_time: Union[datetime.timedelta, float],
        input_handler: InputHandler,
        ignore_key_events: bool = False,
        ignore_mouse_events: bool = False,
    ) -> None:
        """Apply one frame of input; ``delta_time`` is a timedelta or seconds."""
        ih = input_handler
        new_position = np.array(ih.mouse_position, dtype=float)
        mouse_diff = new_position - self.mouse_position
        mouse_diff[1] = -mouse_diff[1]
        self.mouse_position = new_position
        mouse_diff *= self.mouse_sensitivity

        if (
            not ih.mouse_captured_by_ui
            and not ignore_mouse_events
            and ih.mouse_state(MOUSE_BUTTON_LEFT) & KeyState.PRESSED
        ):
            self.rotation[0] -= mouse_diff[0]
            self.rotation[1] += mouse_diff[1]
            self.world.set_rotate_x(self.rotation[1])
            self.world.rotate_y(self.rotation[0])

        def held(key: int) -> bool:
            return bool(ih.keycode_state(key) & KeyState.PRESSED)

        if held(KEY_LEFT_SHIFT):
            modifier = 0.25
        elif held(KEY_LEFT_CONTROL):
            modifier = 4.0
        else:
            modifier = 1.0
        if isinstance(delta_time, datetime.timedelta):
            seconds = delta_time.total_seconds()
        else:
            seconds = float(delta_time)
        movement = modifier * seconds * self.movement_speed

        move = strafe = levitate = 0.0
        if not ih.keyboard_captured_by_ui and not ignore_key_events:
            if held(KEY_W):
                move += movement
            if held(KEY_S):
                move -= movement
            if held(KEY_A):
                strafe -= movement
            if held(KEY_D):
                strafe += movement
            if held(KEY_Q):
                levitate -= movement
            if held(KEY_E):
                levitate += movement

        self.world.translate(self.world.front() * move)
        self.world.translate(self.world.right() * strafe)
        self.world.translate(self.world.up() * levitate)

    def view_to_world_matrix(self) -> np.ndarray:
        return self.world.matrix()

    def world_to_view_matrix(self) -> np.ndarray:
        return self.world.matrix_inverse()

    def clip_to_world_matrix(self) -> np.ndarray:
        return self.view_to_world_matrix() @ self.projection_inverse

    def world_to_clip_matrix(self) -> np.ndarray:
        return self.projection @ self.world_to_view_matrix()

    def clip_to_view_matrix(self) -> np.ndarray:
        return self.projection_inverse.copy()

    def view_to_clip_matrix(self) -> np.ndarray:
        return self.projection.copy()

    def clip_to_view(self, xyw: Iterable[float]) -> np.ndarray:
        v = np.asarray(xyw, dtype=float)
        factors = np.array(
            [self.projection_inverse[0, 0], self.projection_inverse[1, 1], -1.0]
        )
        return v * factors

    def clip_to_world(self, xyw: Iterable[float]) -> np.ndarray:
        view = np.append(self.clip_to_view(xyw), 1.0)
        return (self.world.matrix() @ view)[:3]

    def dumps(self) -> str:
        """Projection, speeds, rotation and world transform as text."""
        lines = [
            " ".join(repr(float(x)) for x in (self.fov, self.aspect, self.near, self.far)),
            f"{float(self.movement_speed)!r} {float(self.mouse_sensitivity)!r}",
            " ".join(repr(float(x)) for x in self.rotation),
        ]
        return "\n".join(lines) + "\n" + self.world.dumps()

    def loads(self, text: str) -> None:
        """Read back what :meth:`dumps` wrote."""
        tokens = text.split()
        if len(tokens) != 23:
            raise ValueError(f"expected 23 numbers, got {len(tokens)}")
        try:
            head = [float(tok) for tok in tokens[:8]]
        except ValueError as err:
            raise ValueError(f"invalid number in camera text: {err}") from None
        world = TRSTransform()
        world.loads(" ".join(tokens[8:]))
        self.set_projection(*head[:4])
        self.movement_speed, self.mouse_sensitivity = head[4], head[5]
        self.rotation = np.array(head[6:8])
        self.world = world