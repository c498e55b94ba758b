"""Translation, rotation and scale transforms composed as M = T * R * S."""

from __future__ import annotations

import math
from typing import Iterable, Optional, Union

import numpy as np

Vector = Union[Iterable[float], np.ndarray]

_X_AXIS = np.array([1.0, 0.0, 0.0])
_Y_AXIS = np.array([0.0, 1.0, 0.0])
_Z_AXIS = np.array([0.0, 0.0, 1.0])
_DEFAULT_UP = _Y_AXIS


def _vec3(v: Vector) -> np.ndarray:
    arr = np.asarray(v, dtype=float)
    if arr.shape != (3,):
        raise ValueError(f"expected a 3-component vector, got shape {arr.shape}")
    return arr.copy()


def rotation_matrix(angle: float, axis: Vector) -> np.ndarray:
    """Return the 3x3 right-handed rotation of ``angle`` radians about ``axis``."""
    a = _vec3(axis)
    norm = float(np.linalg.norm(a))
    if norm == 0.0:
        raise ValueError("rotation axis must not be the zero vector")
    x, y, z = a / norm
    c = math.cos(angle)
    s = math.sin(angle)
    t = 1.0 - c
    return np.array(
        [
            [c + t * x * x, t * x * y - s * z, t * x * z + s * y],
            [t * x * y + s * z, c + t * y * y, t * y * z - s * x],
            [t * x * z - s * y, t * y * z + s * x, c + t * z * z],
        ]
    )


def _embed(upper: np.ndarray, column: Optional[np.ndarray] = None) -> np.ndarray:
    m = np.eye(4)
    m[:3, :3] = upper
    if column is not None:
        m[:3, 3] = column
    return m


class TRSTransform:
    """A transform made of a translation, a rotation and a per-axis scale.

    ``translation`` and ``scaling`` are 3-vectors, ``rotation`` is a 3x3
    matrix whose columns are the local right, up and back axes.
    """

    def __init__(self) -> None:
        self.translation = np.zeros(3)
        self.rotation = np.eye(3)
        self.scaling = np.ones(3)

    def __repr__(self) -> str:
        return (
            f"TRSTransform(translation={self.translation.tolist()}, "
            f"rotation={self.rotation.tolist()}, scaling={self.scaling.tolist()})"
        )

    def reset(self) -> None:
        """Return to the identity transform."""
        self.translation = np.zeros(3)
        self.rotation = np.eye(3)
        self.scaling = np.ones(3)

    # Relative transformations

    def translate(self, v: Vector) -> None:
        self.translation = self.translation + _vec3(v)

    def scale(self, v: Union[float, Vector]) -> None:
        """Multiply the scale by a vector or by a uniform factor."""
        if np.ndim(v) == 0:
            self.scaling = self.scaling * float(v)
        else:
            self.scaling = self.scaling * _vec3(v)

    def rotate(self, angle: float, axis: Vector) -> None:
        self.rotation = self.rotation @ rotation_matrix(angle, axis)

    def rotate_x(self, angle: float) -> None:
        self.rotation = rotation_matrix(angle, _X_AXIS) @ self.rotation

    def rotate_y(self, angle: float) -> None:
        self.rotation = rotation_matrix(angle, _Y_AXIS) @ self.rotation

    def rotate_z(self, angle: float) -> None:
        self.rotation = rotation_matrix(angle, _Z_AXIS) @ self.rotation

    def pre_rotate(self, angle: float, axis: Vector) -> None:
        self.rotation = rotation_matrix(angle, axis) @ self.rotation

    def pre_rotate_x(self, angle: float) -> None:
        self.rotation = self.rotation @ rotation_matrix(angle, _X_AXIS)

    def pre_rotate_y(self, angle: float) -> None:
        self.rotation = self.rotation @ rotation_matrix(angle, _Y_AXIS)

    def pre_rotate_z(self, angle: float) -> None:
        self.rotation = self.rotation @ rotation_matrix(angle, _Z_AXIS)

    # Absolute transformations

    def set_translate(self, v: Vector) -> None:
        self.translation = _vec3(v)

    def set_scale(self, v: Union[float, Vector]) -> None:
        """Set the scale to a vector or to a uniform factor."""
        if np.ndim(v) == 0:
            self.scaling = np.full(3, float(v))
        else:
            self.scaling = _vec3(v)

    def set_rotate(self, angle: float, axis: Vector) -> None:
        self.rotation = rotation_matrix(angle, axis)

    def set_rotate_x(self, angle: float) -> None:
        self.rotation = rotation_matrix(angle, _X_AXIS)

    def set_rotate_y(self, angle: float) -> None:
        self.rotation = rotation_matrix(angle, _Y_AXIS)

    def set_rotate_z(self, angle: float) -> None:
        self.rotation = rotation_matrix(angle, _Z_AXIS)

    def look_towards(self, front: Vector, up: Optional[Vector] = None) -> None:
        """Orient so the front axis points along ``front``.

        Nothing changes when ``front`` and ``up`` are (nearly) parallel.
        """
        front_vec = _vec3(front)
        up_vec = _vec3(_DEFAULT_UP if up is None else up)
        front_vec = front_vec / np.linalg.norm(front_vec)
        up_vec = up_vec / np.linalg.norm(up_vec)

        if abs(float(np.dot(up_vec, front_vec))) > 0.99999:
            return

        right = np.cross(front_vec, up_vec)
        new_up = np.cross(right, front_vec)
        right = right / np.linalg.norm(right)
        new_up = new_up / np.linalg.norm(new_up)

        rotation = np.empty((3, 3))
        rotation[:, 0] = right
        rotation[:, 1] = new_up
        rotation[:, 2] = -front_vec
        self.rotation = rotation

    def look_at(self, point: Vector, up: Optional[Vector] = None) -> None:
        """Orient so the front axis points from the translation towards ``point``."""
        self.look_towards(_vec3(point) - self.translation, up)

    # Matrices

    def matrix(self) -> np.ndarray:
        """The 4x4 model matrix T * R * S."""
        return _embed(self.rotation * self.scaling, self.translation)

    def matrix_inverse(self) -> np.ndarray:
        """Inverse of :meth:`matrix`, assuming an orthonormal rotation."""
        inverse = (self.rotation.T) / self.scaling[:, None]
        return _embed(inverse, -(inverse @ self.translation))

    def translation_matrix(self) -> np.ndarray:
        return _embed(np.eye(3), self.translation)

    def rotation_matrix(self) -> np.ndarray:
        return _embed(self.rotation)

    def scale_matrix(self) -> np.ndarray:
        return _embed(np.diag(self.scaling))

    def translation_matrix_inverse(self) -> np.ndarray:
        return _embed(np.eye(3), -self.translation)

    def rotation_matrix_inverse(self) -> np.ndarray:
        return _embed(self.rotation.T)

    def scale_matrix_inverse(self) -> np.ndarray:
        return _embed(np.diag(1.0 / self.scaling))

    def translation_rotation_matrix(self) -> np.ndarray:
        return _embed(self.rotation, self.translation)

    # Directions

    def up(self) -> np.ndarray:
        return self.rotation[:, 1] * self.scaling[1]

    def down(self) -> np.ndarray:
        return -self.up()

    def right(self) -> np.ndarray:
        return self.rotation[:, 0] * self.scaling[0]

    def left(self) -> np.ndarray:
        return -self.right()

    def back(self) -> np.ndarray:
        return self.rotation[:, 2] * self.scaling[2]

    def front(self) -> np.ndarray:
        return -self.back()

    # Text form

    def dumps(self) -> str:
        """Translation, rotation rows and scale on five lines."""

        def row(values: np.ndarray) -> str:
            return " ".join(repr(float(x)) for x in values)

        lines = [row(self.translation)]
        lines.extend(row(r) for r in self.rotation)
        lines.append(row(self.scaling))
        return "\n".join(lines) + "\n"

    def loads(self, text: str) -> None:
        """Read back what :meth:`dumps` wrote."""
        tokens = text.split()
        if len(tokens) != 15:
            raise ValueError(f"expected 15 numbers, got {len(tokens)}")
        try:
            values = [float(tok) for tok in tokens]
        except ValueError as err:
            raise ValueError(f"invalid number in transform text: {err}") from None
        self.translation = np.array(values[0:3])
        self.rotation = np.array(values[3:12]).reshape(3, 3)
        self.scaling = np.array(values[12:15])