import math

import pytest

from zephyrgebra.matrix import Matrix
from zephyrgebra.transforms import (
    RotationAxis,
    compose_transformations,
    inverse_transformation_3d,
    rigid_transform_about_axis,
    rotate_3d,
    rotate_3d_per_axis,
    rotate_about_axis,
    rotation_matrix_2d,
    rotation_matrix_3d_xyz,
    transform_3d,
    transform_3d_with_matrix,
    translate_2d,
    translate_3d,
)
from zephyrgebra.vector import Vector


def assert_matrix_close(actual: Matrix, expected: Matrix) -> None:
    assert actual.shape == expected.shape
    for row_a, row_e in zip(actual.rows(), expected.rows()):
        assert row_a == pytest.approx(row_e, abs=1e-9)


def test_rotation_2d_preserves_length_and_reverses():
    v = Vector([3.0, -2.0])
    rotated = rotation_matrix_2d(v, 0.7)
    assert rotated.shape == (2, 1)
    back = rotation_matrix_2d(rotated.to_vector(), -0.7).to_vector()
    assert rotated.to_vector().magnitude() == pytest.approx(v.magnitude())
    assert back.equals(v, 1e-9)


def test_rotation_2d_rejects_wrong_size():
    with pytest.raises(ValueError):
        rotation_matrix_2d(Vector([1.0, 2.0, 3.0]), 0.5)


def test_rotate_about_axis_keeps_axis_component_fixed():
    v = Vector([1.0, 2.0, 3.0])
    axis = Vector([0.0, 0.0, 5.0])
    rotated = rotate_about_axis(v, axis, 1.1).to_vector()
    assert rotated[2] == pytest.approx(3.0)
    assert rotated.magnitude() == pytest.approx(v.magnitude())


def test_rotate_about_axis_matches_per_axis_rotation():
    v = Vector([1.0, -1.0, 2.0])
    a = rotate_about_axis(v, Vector([1.0, 0.0, 0.0]), 0.4).to_vector()
    b = rotate_3d_per_axis(v, 0.4, RotationAxis.X)
    assert a.equals(b, 1e-9)


def test_rotate_about_zero_axis_raises():
    with pytest.raises(ValueError):
        rotate_about_axis(Vector([1.0, 0.0, 0.0]), Vector([0.0, 0.0, 0.0]), 1.0)


def test_translate_2d_is_homogeneous():
    result = translate_2d(Vector([1.5, -2.0]), Vector([4.0, 0.5]))
    assert list(result) == pytest.approx([5.5, -1.5, 1.0])


def test_translate_3d_is_homogeneous():
    result = translate_3d(Vector([1.0, 2.0, 3.0]), Vector([-1.0, 0.5, 2.0]))
    assert list(result) == pytest.approx([0.0, 2.5, 5.0, 1.0])


def test_translate_rejects_wrong_sizes():
    with pytest.raises(ValueError):
        translate_2d(Vector([1.0, 2.0, 3.0]), Vector([1.0, 2.0]))
    with pytest.raises(ValueError):
        translate_3d(Vector([1.0, 2.0, 3.0]), Vector([1.0, 2.0]))


def test_rotation_3d_zero_angles_is_identity():
    assert_matrix_close(rotation_matrix_3d_xyz(0.0, 0.0, 0.0), Matrix.identity(3))


def test_rotation_3d_is_orthogonal():
    r = rotation_matrix_3d_xyz(0.3, -1.2, 2.5)
    assert_matrix_close(r @ r.transpose(), Matrix.identity(3))


def test_rotation_3d_is_composition_of_single_axes():
    rx = rotation_matrix_3d_xyz(0.3, 0.0, 0.0)
    ry = rotation_matrix_3d_xyz(0.0, 0.5, 0.0)
    rz = rotation_matrix_3d_xyz(0.0, 0.0, 0.7)
    assert_matrix_close(rotation_matrix_3d_xyz(0.3, 0.5, 0.7), rz @ ry @ rx)


def test_rotate_per_axis_keeps_that_coordinate():
    v = Vector([1.0, 2.0, 3.0])
    assert rotate_3d_per_axis(v, 0.9, RotationAxis.Y)[1] == pytest.approx(2.0)
    assert rotate_3d_per_axis(v, 0.9, RotationAxis.Z)[2] == pytest.approx(3.0)


def test_rotate_per_axis_rejects_unknown_axis():
    with pytest.raises(ValueError):
        rotate_3d_per_axis(Vector([1.0, 2.0, 3.0]), 0.5, 7)


def test_rotate_3d_round_trip_with_transpose():
    v = Vector([0.5, -1.5, 2.0])
    rotated = rotate_3d(v, 0.2, 0.4, -0.6)
    r_t = rotation_matrix_3d_xyz(0.2, 0.4, -0.6).transpose()
    back = r_t.multiply_column_vector(rotated).to_vector()
    assert back.equals(v, 1e-9)


def test_transform_then_inverse_returns_original():
    v = Vector([1.0, -2.0, 0.5])
    t = Vector([3.0, 1.0, -4.0])
    moved = transform_3d(v, 0.3, 1.0, -0.8, t)
    back = inverse_transformation_3d(moved, 0.3, 1.0, -0.8, t)
    assert len(moved) == 3
    assert back.equals(v, 1e-9)


def test_transform_3d_without_rotation_translates():
    v = Vector([1.0, 2.0, 3.0])
    t = Vector([0.5, -0.5, 1.0])
    assert transform_3d(v, 0.0, 0.0, 0.0, t).equals(v + t, 1e-12)


def test_transform_with_matrix_identity():
    v = Vector([4.0, 5.0, 6.0])
    assert transform_3d_with_matrix(v, Matrix.identity(4)).equals(v, 0.0)


def test_transform_with_matrix_rejects_wrong_shape():
    with pytest.raises(ValueError):
        transform_3d_with_matrix(Vector([1.0, 2.0, 3.0]), Matrix.identity(3))


def test_compose_with_identity_gives_second_transform():
    r_bc = rotation_matrix_3d_xyz(0.1, 0.2, 0.3)
    p_bc = Vector([1.0, 2.0, 3.0])
    composed = compose_transformations(
        Matrix.identity(3), Vector([0.0, 0.0, 0.0]), r_bc, p_bc
    )
    v = Vector([0.5, 0.5, -1.0])
    assert transform_3d_with_matrix(v, composed).equals(
        transform_3d(v, 0.1, 0.2, 0.3, p_bc), 1e-9
    )


def test_compose_matches_sequential_application():
    r_ab = rotation_matrix_3d_xyz(0.5, 0.0, 0.2)
    p_ab = Vector([1.0, 0.0, -1.0])
    r_bc = rotation_matrix_3d_xyz(0.0, -0.3, 0.9)
    p_bc = Vector([0.0, 2.0, 1.0])
    composed = compose_transformations(r_ab, p_ab, r_bc, p_bc)
    v = Vector([1.0, 1.0, 1.0])
    step = transform_3d(v, 0.0, -0.3, 0.9, p_bc)
    expected = transform_3d(step, 0.5, 0.0, 0.2, p_ab)
    assert transform_3d_with_matrix(v, composed).equals(expected, 1e-9)
    assert composed.row(3).rows() == [[0.0, 0.0, 0.0, 1.0]]


def test_compose_rejects_bad_shapes():
    with pytest.raises(ValueError):
        compose_transformations(
            Matrix.identity(4), Vector([0.0, 0.0, 0.0]),
            Matrix.identity(3), Vector([0.0, 0.0, 0.0]),
        )


def test_rigid_transform_fixes_axis_points():
    point = Vector([1.0, 2.0, 3.0])
    direction = Vector([0.0, 1.0, 1.0])
    transform = rigid_transform_about_axis(point, direction, 1.3)
    assert transform_3d_with_matrix(point, transform).equals(point, 1e-9)
    other = point + direction * 2.0
    assert transform_3d_with_matrix(other, transform).equals(other, 1e-9)


def test_rigid_transform_full_turn_is_identity():
    transform = rigid_transform_about_axis(
        Vector([4.0, -1.0, 0.0]), Vector([1.0, 1.0, 0.0]), 2 * math.pi
    )
    assert_matrix_close(transform, Matrix.identity(4))


def test_rigid_transform_zero_direction_raises():
    with pytest.raises(ValueError):
        rigid_transform_about_axis(
            Vector([0.0, 0.0, 0.0]), Vector([0.0, 0.0, 0.0]), 1.0
        )