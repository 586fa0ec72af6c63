"""Rotations, translations and rigid transformations in two and three dimensions."""

from __future__ import annotations

import math
from collections.abc import Iterable
from enum import Enum

from .matrix import Matrix
from .vector import Vector

__all__ = [
    "RotationAxis",
    "rotation_matrix_2d",
    "rotate_about_axis",
    "translate_2d",
    "translate_3d",
    "rotation_matrix_3d_xyz",
    "rotate_3d_per_axis",
    "rotate_3d",
    "transform_3d_with_matrix",
    "transform_3d",
    "inverse_transformation_3d",
    "compose_transformations",
    "rigid_transform_about_axis",
]

_AXIS_EPSILON = 1e-9


class RotationAxis(Enum):
    """A principal axis of rotation."""

    X = 0
    Y = 1
    Z = 2


def _require_size(vector: Vector, size: int, name: str) -> None:
    if len(vector) != size:
        raise ValueError(f"{name} must have {size} elements, got {len(vector)}")


def _require_shape(matrix: Matrix, shape: tuple[int, int], name: str) -> None:
    if matrix.shape != shape:
        raise ValueError(f"{name} must have shape {shape}, got {matrix.shape}")


def _axis_rotation(axis: Vector, theta: float) -> Matrix:
    """Return the 3x3 rotation by ``theta`` about ``axis`` (Rodrigues' formula)."""
    ux, uy, uz = axis
    norm = math.sqrt(ux * ux + uy * uy + uz * uz)
    if norm < _AXIS_EPSILON:
        raise ValueError("rotation axis must not be the zero vector")
    ux, uy, uz = ux / norm, uy / norm, uz / norm
    c = math.cos(theta)
    s = math.sin(theta)
    t = 1 - c
    return Matrix(
        3,
        3,
        [
            t * ux * ux + c, t * ux * uy - s * uz, t * ux * uz + s * uy,
            t * ux * uy + s * uz, t * uy * uy + c, t * uy * uz - s * ux,
            t * ux * uz - s * uy, t * uy * uz + s * ux, t * uz * uz + c,
        ],
    )


def _homogeneous(rotation: Matrix, translation: Iterable[float]) -> Matrix:
    """Return the 4x4 matrix with ``rotation`` top-left and ``translation`` on the right."""
    values: list[float] = []
    for row, t in zip(rotation.rows(), translation):
        values.extend(row)
        values.append(t)
    values.extend([0.0, 0.0, 0.0, 1.0])
    return Matrix(4, 4, values)


def _apply_homogeneous(transform: Matrix, vector: Vector) -> Vector:
    point = Vector([*vector, 1.0])
    return transform.multiply_column_vector(point).to_vector()[:3]


def rotation_matrix_2d(vector: Vector, theta: float) -> Matrix:
    """Rotate a 2D vector by ``theta`` radians; the result is a 2x1 column matrix."""
    _require_size(vector, 2, "vector")
    c = math.cos(theta)
    s = math.sin(theta)
    return Matrix(2, 2, [c, -s, s, c]).multiply_column_vector(vector)


def rotate_about_axis(vector: Vector, axis: Vector, theta: float) -> Matrix:
    """Rotate a 3D vector about ``axis``; the result is a 3x1 column matrix."""
    _require_size(vector, 3, "vector")
    _require_size(axis, 3, "axis")
    return _axis_rotation(axis, theta).multiply_column_vector(vector)


def translate_2d(point: Vector, translation: Vector) -> Vector:
    """Translate a 2D point; the result is homogeneous ``[x, y, 1]``."""
    _require_size(point, 2, "point")
    _require_size(translation, 2, "translation")
    tx, ty = translation
    transform = Matrix(3, 3, [1, 0, tx, 0, 1, ty, 0, 0, 1])
    return transform.multiply_column_vector(Vector([*point, 1.0])).to_vector()


def translate_3d(point: Vector, translation: Vector) -> Vector:
    """Translate a 3D point; the result is homogeneous ``[x, y, z, 1]``."""
    _require_size(point, 3, "point")
    _require_size(translation, 3, "translation")
    transform = _homogeneous(Matrix.identity(3), translation)
    return transform.multiply_column_vector(Vector([*point, 1.0])).to_vector()


def rotation_matrix_3d_xyz(theta_x: float, theta_y: float, theta_z: float) -> Matrix:
    """Return ``Rz @ Ry @ Rx`` for the given Euler angles in radians."""
    cx, sx = math.cos(theta_x), math.sin(theta_x)
    cy, sy = math.cos(theta_y), math.sin(theta_y)
    cz, sz = math.cos(theta_z), math.sin(theta_z)
    rx = Matrix(3, 3, [1, 0, 0, 0, cx, -sx, 0, sx, cx])
    ry = Matrix(3, 3, [cy, 0, sy, 0, 1, 0, -sy, 0, cy])
    rz = Matrix(3, 3, [cz, -sz, 0, sz, cz, 0, 0, 0, 1])
    return (rz @ ry) @ rx


def rotate_3d_per_axis(vector: Vector, theta: float, axis: RotationAxis) -> Vector:
    """Rotate a 3D vector by ``theta`` radians about one principal axis."""
    _require_size(vector, 3, "vector")
    axis = RotationAxis(axis)
    angles = [0.0, 0.0, 0.0]
    angles[axis.value] = theta
    rotation = rotation_matrix_3d_xyz(*angles)
    return rotation.multiply_column_vector(vector).to_vector()


def rotate_3d(vector: Vector, theta_x: float, theta_y: float, theta_z: float) -> Vector:
    """Rotate a 3D vector about X, then Y, then Z."""
    _require_size(vector, 3, "vector")
    rotation = rotation_matrix_3d_xyz(theta_x, theta_y, theta_z)
    return rotation.multiply_column_vector(vector).to_vector()


def transform_3d_with_matrix(vector: Vector, transform: Matrix) -> Vector:
    """Apply a 4x4 homogeneous transform to a 3D point."""
    _require_size(vector, 3, "vector")
    _require_shape(transform, (4, 4), "transform")
    return _apply_homogeneous(transform, vector)


def transform_3d(
    vector: Vector,
    theta_x: float,
    theta_y: float,
    theta_z: float,
    translation: Vector,
) -> Vector:
    """Rotate a 3D point by the Euler angles, then translate it."""
    _require_size(vector, 3, "vector")
    _require_size(translation, 3, "translation")
    rotation = rotation_matrix_3d_xyz(theta_x, theta_y, theta_z)
    return _apply_homogeneous(_homogeneous(rotation, translation), vector)


def inverse_transformation_3d(
    vector: Vector,
    theta_x: float,
    theta_y: float,
    theta_z: float,
    translation: Vector,
) -> Vector:
    """Undo :func:`transform_3d`: return ``R.T @ (vector - translation)``."""
    _require_size(vector, 3, "vector")
    _require_size(translation, 3, "translation")
    rotation_t = rotation_matrix_3d_xyz(theta_x, theta_y, theta_z).transpose()
    offset = rotation_t.multiply_column_vector(translation).to_vector()
    transform = _homogeneous(rotation_t, (-x for x in offset))
    return _apply_homogeneous(transform, vector)


def compose_transformations(
    r_ab: Matrix, p_ab: Vector, r_bc: Matrix, p_bc: Vector
) -> Matrix:
    """Compose A->B and B->C rigid transforms into the 4x4 transform A->C."""
    _require_shape(r_ab, (3, 3), "r_ab")
    _require_shape(r_bc, (3, 3), "r_bc")
    _require_size(p_ab, 3, "p_ab")
    _require_size(p_bc, 3, "p_bc")
    r_ac = r_ab @ r_bc
    p_ac = r_ab.multiply_column_vector(p_bc).to_vector() + p_ab
    return _homogeneous(r_ac, p_ac)


def rigid_transform_about_axis(
    axis_point: Vector, axis_dir: Vector, theta: float
) -> Matrix:
    """Return the 4x4 rotation by ``theta`` about the line through ``axis_point``."""
    _require_size(axis_point, 3, "axis_point")
    _require_size(axis_dir, 3, "axis_dir")
    rotation = _axis_rotation(axis_dir, theta)
    rotated = rotation.multiply_column_vector(axis_point).to_vector()
    translation = [p - r for p, r in zip(axis_point, rotated)]
    return _homogeneous(rotation, translation)