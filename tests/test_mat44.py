"""Tests for Mat4.

Tests cover:
- Construction from translations, rotations, quaternions and TRS parts
- Projection matrices (frustum, perspective, ortho)
- Camera matrices (look_at, target_to)
- Inverse, adjoint, determinant and products
- Post-multiplied transforms and degenerate-axis reporting
- Decomposition and string formatting
"""

import math

import numpy as np
import pytest

from xformkit import COMPUTED, DEGENERATE, DualQuat, FieldOfView, Mat4, Quat, Vec3

IDENTITY = [1, 0, 0, 0, 0, 1, 0, 0, 0, 0, 1, 0, 0, 0, 0, 1]


def transform(m, point):
    """Transform a point by a matrix, returning the new point."""
    return Vec3(*point).transform_mat4(m)


class TestMat4Construction:
    """Test Mat4 factories."""

    def test_default_is_identity(self):
        """Test the default constructor is the identity."""
        assert list(Mat4()) == IDENTITY
        assert Mat4.identity() == Mat4()

    def test_from_translation(self):
        """Test translation lands in the last column."""
        m = Mat4.from_translation(Vec3(1, 2, 3))
        assert m[12:15] == [1.0, 2.0, 3.0]
        assert list(m.translation) == [1.0, 2.0, 3.0]

    def test_from_scaling(self):
        """Test scaling on the diagonal."""
        m = Mat4.from_scaling(Vec3(2, 3, 4))
        assert (m[0], m[5], m[10], m[15]) == (2.0, 3.0, 4.0, 1.0)

    def test_axis_rotations(self):
        """Test quarter turns around each axis follow the right-hand rule."""
        quarter = math.pi / 2
        rx = Mat4.from_x_rotation(quarter)
        ry = Mat4.from_y_rotation(quarter)
        rz = Mat4.from_z_rotation(quarter)
        assert np.allclose(transform(rx, (0, 1, 0)), [0, 0, 1], atol=1e-6)
        assert np.allclose(transform(ry, (0, 0, 1)), [1, 0, 0], atol=1e-6)
        assert np.allclose(transform(rz, (1, 0, 0)), [0, 1, 0], atol=1e-6)

    def test_from_rotation_matches_axis_rotations(self):
        """Test the general axis rotation agrees with the axis-specific ones."""
        for axis, factory in (
            (Vec3(1, 0, 0), Mat4.from_x_rotation),
            (Vec3(0, 2, 0), Mat4.from_y_rotation),
            (Vec3(0, 0, 1), Mat4.from_z_rotation),
        ):
            assert np.allclose(Mat4.from_rotation(axis, 0.7), factory(0.7), atol=1e-6)

    def test_from_rotation_zero_axis(self):
        """Test a zero axis gives the identity."""
        assert list(Mat4.from_rotation(Vec3(), 1.0)) == IDENTITY

    def test_from_quat_matches_from_rotation(self):
        """Test quaternion and axis-angle rotation matrices agree."""
        axis = Vec3(1, 2, 3).normalize()
        q = Quat.from_axis_angle(axis, 0.9)
        assert np.allclose(Mat4.from_quat(q), Mat4.from_rotation(axis, 0.9), atol=1e-6)

    def test_from_translation_rotation(self):
        """Test rotation is applied before translation."""
        q = Quat.from_axis_angle(Vec3(0, 0, 1), math.pi / 2)
        m = Mat4.from_translation_rotation(q, Vec3(1, 2, 3))
        assert np.allclose(transform(m, (1, 0, 0)), [1, 3, 3], atol=1e-6)

    def test_from_quat2(self):
        """Test the matrix of a dual quaternion."""
        q = Quat(1, 2, 3, 4).normalize()
        t = Vec3(1, -5, 3)
        m = Mat4.from_quat2(DualQuat.from_translation_rotation(q, t))
        assert np.allclose(m, Mat4.from_translation_rotation(q, t), atol=1e-5)

    def test_from_quat2_unnormalized(self):
        """Test the translation survives an unnormalized dual quaternion."""
        dq = DualQuat.from_translation_rotation(Quat(0, 0, 0, 1), Vec3(1, 2, 3)).scale(2)
        assert np.allclose(Mat4.from_quat2(dq).translation, [1, 2, 3], atol=1e-5)

    @pytest.mark.parametrize(
        "axis, rad",
        [
            ((1, 0, 0), 3.1),
            ((0, 1, 0), 3.1),
            ((0, 0, 1), 3.1),
            ((1, 0, 0), math.pi),
            ((1, 2, 3), 0.7),
        ],
    )
    def test_rigid_round_trip_through_quat2(self, axis, rad):
        """Test a rigid matrix survives conversion to a dual quaternion and back."""
        q = Quat.from_axis_angle(Vec3(*axis).normalize(), rad)
        m = Mat4.from_translation_rotation(q, Vec3(1, -5, 3))
        assert np.allclose(Mat4.from_quat2(DualQuat.from_mat4(m)), m, atol=1e-5)

    def test_non_finite_angles_give_nan(self):
        """Test infinite angles produce NaN components instead of raising."""
        assert np.isnan(Mat4.from_rotation(Vec3(0, 0, 1), math.inf)).any()
        assert np.isnan(Mat4().rotate_y(math.inf)).any()
        assert np.isnan(Mat4.perspective(math.inf, 1, 0.1, 10)).any()

    def test_from_translation_rotation_scale(self):
        """Test scale, then rotate, then translate."""
        q = Quat.from_axis_angle(Vec3(0, 0, 1), math.pi / 2)
        m = Mat4.from_translation_rotation_scale(Vec3(1, 2, 3), q, Vec3(2, 2, 2))
        assert np.allclose(transform(m, (1, 0, 0)), [1, 4, 3], atol=1e-6)

    def test_from_rotation_translation_scale_origin(self):
        """Test the pivot point only receives the translation."""
        q = Quat.from_axis_angle(Vec3(0, 1, 0), 0.8)
        origin = Vec3(4, 5, 6)
        m = Mat4.from_rotation_translation_scale_origin(Vec3(1, 2, 3), q, Vec3(2, 3, 4), origin)
        assert np.allclose(transform(m, origin), [5, 7, 9], atol=1e-5)


class TestProjections:
    """Test projection matrices."""

    def test_frustum(self):
        """Test a symmetric frustum."""
        m = Mat4.frustum(-1, 1, -1, 1, -1, 1)
        assert np.allclose(m, [-1, 0, 0, 0, 0, -1, 0, 0, 0, 0, 0, -1, 0, 0, 1, 0])

    def test_perspective(self):
        """Test a finite perspective projection."""
        m = Mat4.perspective(math.pi / 4, 640 / 480, 0.1, 200)
        expected = [
            1.81066, 0, 0, 0,
            0, 2.414213, 0, 0,
            0, 0, -1.001, -1,
            0, 0, -0.2001, 0,
        ]  # fmt: skip
        assert np.allclose(m, expected, atol=1e-5)

    @pytest.mark.parametrize("far", [None, 0, math.inf])
    def test_perspective_infinite_far(self, far):
        """Test None, 0 and infinity all give an infinite far plane."""
        m = Mat4.perspective(math.pi / 4, 640 / 480, 0.1, far)
        assert m[10] == -1.0
        assert m[11] == -1.0
        assert m[14] == pytest.approx(-0.2)

    def test_perspective_from_field_of_view(self):
        """Test a symmetric 90 degree field of view."""
        m = Mat4.perspective_from_field_of_view(FieldOfView(45.0, 45.0, 45.0, 45.0), 0.1, 100.0)
        expected = [
            1, 0, 0, 0,
            0, 1, 0, 0,
            0, 0, -1.001001, -1,
            0, 0, -0.1001001, 0,
        ]  # fmt: skip
        assert np.allclose(m, expected, atol=1e-5)

    def test_ortho(self):
        """Test a unit orthographic projection."""
        m = Mat4.ortho(-1, 1, -1, 1, -1, 1)
        assert np.allclose(m, [1, 0, 0, 0, 0, 1, 0, 0, 0, 0, -1, 0, 0, 0, 0, 1])

    def test_ortho_degenerate_box(self):
        """Test a zero-width box gives infinities instead of raising."""
        m = Mat4.ortho(1, 1, -1, 1, -1, 1)
        assert math.isinf(m[0])


class TestLookAt:
    """Test the view matrix."""

    def test_straight_ahead(self):
        """Test a camera at z = 1 looking down -z."""
        m = Mat4.look_at(Vec3(0, 0, 1), Vec3(0, 0, -1), Vec3(0, 1, 0))
        expected = list(IDENTITY)
        expected[14] = -1
        assert np.allclose(m, expected)

    def test_looking_down(self):
        """Test world axes map into camera space."""
        m = Mat4.look_at(Vec3(0, 0, 0), Vec3(0, -1, 0), Vec3(0, 0, -1))
        assert np.allclose(transform(m, (0, -1, 0)), [0, 0, -1], atol=1e-6)
        assert np.allclose(transform(m, (0, 0, -1)), [0, 1, 0], atol=1e-6)
        assert np.allclose(transform(m, (1, 0, 0)), [1, 0, 0], atol=1e-6)

    def test_offset_eye(self):
        """Test points relative to an eye away from the origin."""
        m = Mat4.look_at(Vec3(0, 2, 0), Vec3(0, 0.6, 0), Vec3(0, 0, -1))
        assert np.allclose(transform(m, (0, 2, -1)), [0, 1, 0], atol=1e-6)
        assert np.allclose(transform(m, (1, 2, 0)), [1, 0, 0], atol=1e-6)
        assert np.allclose(transform(m, (0, 1, 0)), [0, 0, -1], atol=1e-6)

    def test_eye_equals_center(self):
        """Test coincident eye and center give the identity."""
        m = Mat4.look_at(Vec3(1, 2, 3), Vec3(1, 2, 3), Vec3(0, 1, 0))
        assert list(m) == IDENTITY

    def test_rows_are_orthonormal(self):
        """Test an up vector that is not perpendicular to the view."""
        m = Mat4.look_at(Vec3(1, 2, 3), Vec3(-2, 0, 1), Vec3(0.3, 1, 0.2))
        rows = [Vec3(m[i], m[4 + i], m[8 + i]) for i in range(3)]
        for i, row in enumerate(rows):
            assert row.length == pytest.approx(1.0, abs=1e-5)
            for other in rows[i + 1 :]:
                assert row.dot(other) == pytest.approx(0.0, abs=1e-5)


class TestTargetTo:
    """Test the model matrix facing a target."""

    def test_looking_down(self):
        """Test the object axes."""
        m = Mat4.target_to(Vec3(0, 0, 0), Vec3(0, -1, 0), Vec3(0, 0, -1))
        assert np.allclose(transform(m, (0, -1, 0)), [0, 0, 1], atol=1e-6)
        assert np.allclose(transform(m, (0, 0, -1)), [0, -1, 0], atol=1e-6)
        assert np.allclose(transform(m, (1, 0, 0)), [1, 0, 0], atol=1e-6)
        assert np.allclose(m.scaling, [1, 1, 1], atol=1e-6)

    def test_offset_eye(self):
        """Test the object is placed at the eye."""
        m = Mat4.target_to(Vec3(0, 2, 0), Vec3(0, 0.6, 0), Vec3(0, 0, -1))
        assert np.allclose(transform(m, (0, 2, -1)), [0, 1, -2], atol=1e-6)
        assert np.allclose(transform(m, (1, 2, 0)), [1, 2, -2], atol=1e-6)
        assert np.allclose(transform(m, (0, 1, 0)), [0, 2, -1], atol=1e-6)

    def test_oblique_up_keeps_unit_scale(self):
        """Test the right axis is normalized for an oblique up vector."""
        m = Mat4.target_to(Vec3(0, 1, 0), Vec3(0, 0, 1), Vec3(0, 0, -1))
        assert np.allclose(m.scaling, [1, 1, 1], atol=1e-6)

    def test_eye_equals_target_is_nan(self):
        """Test coincident eye and target are not guarded."""
        m = Mat4.target_to(Vec3(1, 2, 3), Vec3(1, 2, 3), Vec3(0, 1, 0))
        assert math.isnan(m[8])


class TestLinearAlgebra:
    """Test inverse, adjoint, determinant and products."""

    def test_determinant(self):
        """Test the determinant of a scaling matrix."""
        assert Mat4.from_scaling(Vec3(2, 3, 4)).determinant == 24.0

    def test_invert(self):
        """Test M * M^-1 is the identity."""
        q = Quat(1, 2, 3, 4).normalize()
        m = Mat4.from_translation_rotation_scale(Vec3(1, 2, 3), q, Vec3(2, 0.5, 3))
        product = m @ m.clone().invert()
        assert np.allclose(product, IDENTITY, atol=1e-5)

    def test_invert_singular_left_unchanged(self):
        """Test a singular matrix is reported and kept."""
        m = Mat4.from_scaling(Vec3(1, 0, 1))
        before = list(m)
        result, outcome = m.invert_with_status()
        assert result is m
        assert outcome == DEGENERATE
        assert list(m) == before

    def test_invert_with_status_computed(self):
        """Test a regular matrix reports a computed inverse."""
        m, outcome = Mat4.from_translation(Vec3(1, 2, 3)).invert_with_status()
        assert outcome == COMPUTED
        assert list(m.translation) == [-1.0, -2.0, -3.0]

    def test_adjoint(self):
        """Test the adjoint equals det * inverse."""
        m = Mat4.from_scaling(Vec3(2, 3, 4)).adjoint()
        assert np.allclose(m, [12, 0, 0, 0, 0, 8, 0, 0, 0, 0, 6, 0, 0, 0, 0, 24])

    def test_transpose(self):
        """Test transposition."""
        m = Mat4(*range(16)).transpose()
        assert list(m) == [0, 4, 8, 12, 1, 5, 9, 13, 2, 6, 10, 14, 3, 7, 11, 15]

    def test_multiply(self):
        """Test composition applies the right operand first."""
        t = Mat4.from_translation(Vec3(1, 2, 3))
        s = Mat4.from_scaling(Vec3(2, 2, 2))
        assert np.allclose(transform(t @ s, (1, 1, 1)), [3, 4, 5])
        assert np.allclose(transform(s @ t, (1, 1, 1)), [4, 6, 8])

    def test_matmul_requires_same_type(self):
        """Test @ with another type is not supported."""
        with pytest.raises(TypeError):
            Mat4() @ Vec3()

    def test_elementwise(self):
        """Test addition, subtraction and scalar products."""
        m = Mat4().add(Mat4()).multiply_scalar(0.5)
        assert list(m) == IDENTITY
        assert list(Mat4().subtract(Mat4())) == [0.0] * 16
        assert Mat4().frobenius_norm() == 2.0


class TestTransforms:
    """Test post-multiplied transforms."""

    def test_translate_scale_match_factories(self):
        """Test in-place transforms on the identity equal the factories."""
        assert Mat4().translate(Vec3(1, 2, 3)) == Mat4.from_translation(Vec3(1, 2, 3))
        assert Mat4().scale(Vec3(2, 3, 4)) == Mat4.from_scaling(Vec3(2, 3, 4))

    def test_translate_is_post_multiplied(self):
        """Test the new translation is applied before the existing transform."""
        m = Mat4.from_scaling(Vec3(2, 2, 2)).translate(Vec3(1, 0, 0))
        assert np.allclose(m.translation, [2, 0, 0])

    def test_rotate_matches_factories(self):
        """Test in-place rotations on the identity equal the factories."""
        axis = Vec3(1, 1, 0)
        assert np.allclose(Mat4().rotate(axis, 0.5), Mat4.from_rotation(axis, 0.5), atol=1e-6)
        assert np.allclose(Mat4().rotate_x(0.5), Mat4.from_x_rotation(0.5), atol=1e-6)
        assert np.allclose(Mat4().rotate_y(0.5), Mat4.from_y_rotation(0.5), atol=1e-6)
        assert np.allclose(Mat4().rotate_z(0.5), Mat4.from_z_rotation(0.5), atol=1e-6)

    def test_rotate_composes(self):
        """Test rotate equals multiplying by the rotation matrix."""
        base = Mat4.from_translation(Vec3(1, 2, 3)).scale(Vec3(1, 2, 3))
        expected = base @ Mat4.from_rotation(Vec3(0, 1, 1), 1.2)
        assert np.allclose(base.clone().rotate(Vec3(0, 1, 1), 1.2), expected, atol=1e-5)

    def test_rotate_zero_axis(self):
        """Test a zero axis leaves the matrix unchanged and reports it."""
        m = Mat4.from_translation(Vec3(1, 2, 3))
        result, outcome = m.rotate_with_status(Vec3(), 1.0)
        assert outcome == DEGENERATE
        assert result == Mat4.from_translation(Vec3(1, 2, 3))

        _, outcome = m.rotate_with_status(Vec3(0, 0, 1), 1.0)
        assert outcome == COMPUTED


class TestDecomposition:
    """Test readback of translation, rotation and scaling."""

    def test_rotation_of_pure_rotation(self):
        """Test the rotation of an unscaled matrix."""
        q = Quat(1, 2, 3, 4).normalize()
        assert abs(Mat4.from_quat(q).rotation.dot(q)) == pytest.approx(1.0, abs=1e-5)

    @pytest.mark.parametrize("rad", [0.3, 2.0, math.pi * 0.99])
    @pytest.mark.parametrize("axis", [(1, 0, 0), (0, 1, 0), (0, 0, 1), (1, 1, 1)])
    def test_rotation_branches(self, axis, rad):
        """Test every trace branch of the matrix-to-quaternion conversion."""
        q = Quat.from_axis_angle(Vec3(*axis).normalize(), rad)
        assert abs(Mat4.from_quat(q).rotation.dot(q)) == pytest.approx(1.0, abs=1e-5)

    def test_decompose(self):
        """Test TRS parts are recovered."""
        q = Quat.from_axis_angle(Vec3(0, 1, 0), 0.6)
        m = Mat4.from_translation_rotation_scale(Vec3(1, 2, 3), q, Vec3(2, 3, 4))
        translation, rotation, scaling = m.decompose()
        assert np.allclose(translation, [1, 2, 3])
        assert np.allclose(scaling, [2, 3, 4], atol=1e-5)
        assert abs(rotation.dot(q)) == pytest.approx(1.0, abs=1e-5)


class TestFormatting:
    """Test string formatting."""

    def test_str(self):
        """Test the multi-line layout."""
        m = Mat4.from_translation(Vec3(1, 2, 3))
        assert str(m) == "mat4(\n  1,0,0,0\n  0,1,0,0\n  0,0,1,0\n  1,2,3,1\n)"
