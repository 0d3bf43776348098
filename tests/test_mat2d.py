"""Tests for the 2D matrices Mat2 and Mat23."""

import math

import numpy as np

from xformkit import COMPUTED, DEGENERATE, Mat2, Mat3, Mat23, Vec2


class TestMat2:
    """Test the 2x2 matrix."""

    def test_default_is_identity(self):
        """Test the default constructor."""
        assert list(Mat2()) == [1.0, 0.0, 0.0, 1.0]
        assert str(Mat2()) == "mat2(1, 0, 0, 1)"

    def test_determinant(self):
        """Test the determinant."""
        assert Mat2(1, 2, 3, 4).determinant == -2.0

    def test_invert(self):
        """Test the inverse."""
        assert list(Mat2(1, 2, 3, 4).invert()) == [-2.0, 1.0, 1.5, -0.5]

    def test_invert_singular(self):
        """Test a singular matrix is left unchanged and reported."""
        m, outcome = Mat2(1, 2, 2, 4).invert_with_status()
        assert outcome == DEGENERATE
        assert list(m) == [1.0, 2.0, 2.0, 4.0]

        _, outcome = Mat2(1, 2, 3, 4).invert_with_status()
        assert outcome == COMPUTED

    def test_adjoint_transpose(self):
        """Test adjoint and transpose."""
        assert list(Mat2(1, 2, 3, 4).adjoint()) == [4.0, -2.0, -3.0, 1.0]
        assert list(Mat2(1, 2, 3, 4).transpose()) == [1.0, 3.0, 2.0, 4.0]

    def test_multiply(self):
        """Test the matrix product."""
        assert list(Mat2(1, 2, 3, 4).multiply(Mat2(5, 6, 7, 8))) == [23.0, 34.0, 31.0, 46.0]
        assert list(Mat2(1, 2, 3, 4) @ Mat2(5, 6, 7, 8)) == [23.0, 34.0, 31.0, 46.0]

    def test_rotate(self):
        """Test a post-multiplied quarter turn."""
        assert np.allclose(Mat2(1, 2, 3, 4).rotate(math.pi / 2), [3, 4, -1, -2], atol=1e-6)

    def test_scale(self):
        """Test post-multiplied scaling."""
        assert list(Mat2(1, 2, 3, 4).scale(Vec2(2, 3))) == [2.0, 4.0, 9.0, 12.0]

    def test_factories(self):
        """Test rotation and scaling factories."""
        assert np.allclose(Vec2(1, 0).transform_mat2(Mat2.from_rotation(math.pi / 2)), [0, 1])
        assert list(Mat2.from_scaling(Vec2(2, 3))) == [2.0, 0.0, 0.0, 3.0]

    def test_ldu(self):
        """Test the LU factorization."""
        lower, upper = Mat2(4, 3, 6, 3).ldu()
        assert list(lower) == [1.0, 0.0, 1.5, 1.0]
        assert list(upper) == [4.0, 3.0, 0.0, -1.5]

    def test_frobenius_norm(self):
        """Test the Frobenius norm."""
        assert np.isclose(Mat2(1, 2, 3, 4).frobenius_norm(), math.sqrt(30))


class TestMat23:
    """Test the 2D affine matrix."""

    def test_default_is_identity(self):
        """Test the default constructor."""
        assert list(Mat23()) == [1.0, 0.0, 0.0, 1.0, 0.0, 0.0]
        assert str(Mat23(1, 2, 3, 4, 5, 6)) == "mat2d(1, 2, 3, 4, 5, 6)"

    def test_determinant(self):
        """Test the determinant of the linear part."""
        assert Mat23(1, 2, 3, 4, 5, 6).determinant == -2.0

    def test_invert(self):
        """Test the affine inverse."""
        assert list(Mat23(1, 2, 3, 4, 5, 6).invert()) == [-2.0, 1.0, 1.5, -0.5, 1.0, -2.0]

    def test_invert_singular(self):
        """Test a singular matrix is left unchanged."""
        m, outcome = Mat23(1, 2, 2, 4, 5, 6).invert_with_status()
        assert outcome == DEGENERATE
        assert list(m) == [1.0, 2.0, 2.0, 4.0, 5.0, 6.0]

    def test_multiply(self):
        """Test the affine product."""
        m = Mat23(1, 2, 3, 4, 5, 6).multiply(Mat23(7, 8, 9, 10, 11, 12))
        assert list(m) == [31.0, 46.0, 39.0, 58.0, 52.0, 76.0]

    def test_rotate(self):
        """Test rotation keeps the translation."""
        m = Mat23(1, 2, 3, 4, 5, 6).rotate(math.pi / 2)
        assert np.allclose(m, [3, 4, -1, -2, 5, 6], atol=1e-6)

    def test_scale(self):
        """Test scaling keeps the translation."""
        assert list(Mat23(1, 2, 3, 4, 5, 6).scale(Vec2(2, 3))) == [2.0, 4.0, 9.0, 12.0, 5.0, 6.0]

    def test_translate(self):
        """Test post-multiplied translation."""
        m = Mat23(1, 2, 3, 4, 5, 6).translate(Vec2(2, 3))
        assert list(m) == [1.0, 2.0, 3.0, 4.0, 16.0, 22.0]

    def test_factories(self):
        """Test rotation, scaling and translation factories."""
        assert np.allclose(Vec2(1, 0).transform_mat23(Mat23.from_rotation(math.pi / 2)), [0, 1])
        assert list(Mat23.from_scaling(Vec2(2, 3))) == [2.0, 0.0, 0.0, 3.0, 0.0, 0.0]
        assert list(Mat23.from_translation(Vec2(2, 3))) == [1.0, 0.0, 0.0, 1.0, 2.0, 3.0]

    def test_frobenius_norm_includes_homogeneous_one(self):
        """Test the norm counts the implicit 1 of the third row."""
        assert np.isclose(Mat23(1, 2, 3, 4, 5, 6).frobenius_norm(), math.sqrt(92))

    def test_expands_to_mat3(self):
        """Test Mat3.from_mat23 transforms points the same way."""
        affine = Mat23(1, 2, 3, 4, 5, 6)
        full = Mat3.from_mat23(affine)
        assert list(full) == [1.0, 2.0, 0.0, 3.0, 4.0, 0.0, 5.0, 6.0, 1.0]
        assert Vec2(7, 8).transform_mat23(affine) == Vec2(7, 8).transform_mat3(full)
