"""Orthographic projection and a 2D camera."""

from __future__ import annotations

import math

import numpy as np


def ortho(
    left: float,
    right: float,
    bottom: float,
    top: float,
    near: float = -1.0,
    far: float = 1.0,
) -> np.ndarray:
    """A 4x4 orthographic projection matrix mapping the box onto [-1, 1]."""
    matrix = np.identity(4)
    matrix[0, 0] = 2.0 / (right - left)
    matrix[1, 1] = 2.0 / (top - bottom)
    matrix[2, 2] = -2.0 / (far - near)
    matrix[0, 3] = -(right + left) / (right - left)
    matrix[1, 3] = -(top + bottom) / (top - bottom)
    matrix[2, 3] = -(far + near) / (far - near)
    return matrix


def _translation(position: np.ndarray) -> np.ndarray:
    matrix = np.identity(4)
    matrix[:3, 3] = position
    return matrix


def _rotation_z(radians: float) -> np.ndarray:
    c, s = math.cos(radians), math.sin(radians)
    matrix = np.identity(4)
    matrix[0, 0], matrix[0, 1] = c, -s
    matrix[1, 0], matrix[1, 1] = s, c
    return matrix


class OrthographicCamera:
    """A camera with a position and a rotation about the z axis in degrees."""

    def __init__(self, left: float, right: float, bottom: float, top: float) -> None:
        self.projection_matrix = ortho(left, right, bottom, top, -1.0, 1.0)
        self.view_matrix = np.identity(4)
        self._position = np.zeros(3)
        self._rotation = 0.0
        self.view_projection_matrix = self.projection_matrix @ self.view_matrix

    @property
    def position(self) -> np.ndarray:
        return self._position.copy()

    @position.setter
    def position(self, value) -> None:
        position = np.asarray(value, dtype=float)
        if position.shape != (3,):
            raise ValueError("position must have three components")
        self._position = position.copy()
        self._recalculate_view_matrix()

    @property
    def rotation(self) -> float:
        return self._rotation

    @rotation.setter
    def rotation(self, degrees: float) -> None:
        self._rotation = float(degrees)
        self._recalculate_view_matrix()

    def _recalculate_view_matrix(self) -> None:
        transform = _translation(self._position) @ _rotation_z(
            math.radians(self._rotation)
        )
        self.view_matrix = np.linalg.inv(transform)
        self.view_projection_matrix = self.projection_matrix @ self.view_matrix