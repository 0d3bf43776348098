"""3x3 matrix for 2D homogeneous transforms and 3D rotations.

Storage is column-major: ``m[col * 3 + row]``.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from xformkit.base import Matrix
from xformkit.common import cos, sin

if TYPE_CHECKING:
    from xformkit.mat23 import Mat23
    from xformkit.mat44 import Mat4
    from xformkit.quat import Quat
    from xformkit.vec2 import Vec2

logger = logging.getLogger(__name__)


class Mat3(Matrix):
    """3x3 column-major matrix stored as float32."""

    __slots__ = ()

    SIZE = 9
    TAG = "mat3"
    IDENTITY = (1.0, 0.0, 0.0, 0.0, 1.0, 0.0, 0.0, 0.0, 1.0)

    def __init__(
        self,
        m00: float = 1.0, m01: float = 0.0, m02: float = 0.0,
        m10: float = 0.0, m11: float = 1.0, m12: float = 0.0,
        m20: float = 0.0, m21: float = 0.0, m22: float = 1.0,
    ) -> None:  # fmt: skip
        super().__init__(m00, m01, m02, m10, m11, m12, m20, m21, m22)

    # ------------------------------------------------------------------
    # Factories
    # ------------------------------------------------------------------

    @classmethod
    def from_mat4(cls, a: Mat4) -> Mat3:
        """Upper-left 3x3 block of a 4x4 matrix."""
        return cls(a[0], a[1], a[2], a[4], a[5], a[6], a[8], a[9], a[10])

    @classmethod
    def from_translation(cls, v: Vec2) -> Mat3:
        x, y = v
        return cls(1.0, 0.0, 0.0, 0.0, 1.0, 0.0, x, y, 1.0)

    @classmethod
    def from_rotation(cls, rad: float) -> Mat3:
        c, s = cos(rad), sin(rad)
        return cls(c, s, 0.0, -s, c, 0.0, 0.0, 0.0, 1.0)

    @classmethod
    def from_scaling(cls, v: Vec2) -> Mat3:
        x, y = v
        return cls(x, 0.0, 0.0, 0.0, y, 0.0, 0.0, 0.0, 1.0)

    @classmethod
    def from_mat23(cls, a: Mat23) -> Mat3:
        """Expand a 2x3 affine matrix to homogeneous 3x3 form."""
        a0, a1, a2, a3, a4, a5 = a
        return cls(a0, a1, 0.0, a2, a3, 0.0, a4, a5, 1.0)

    @classmethod
    def from_quat(cls, q: Quat) -> Mat3:
        """Rotation matrix of a unit quaternion."""
        x, y, z, w = q
        x2, y2, z2 = x + x, y + y, z + z
        xx, yx, yy = x * x2, y * x2, y * y2
        zx, zy, zz = z * x2, z * y2, z * z2
        wx, wy, wz = w * x2, w * y2, w * z2
        return cls(
            1 - yy - zz, yx + wz, zx - wy,
            yx - wz, 1 - xx - zz, zy + wx,
            zx + wy, zy - wx, 1 - xx - yy,
        )  # fmt: skip

    @classmethod
    def normal_from_mat4(cls, a: Mat4) -> Mat3:
        """Inverse-transpose of the upper-left 3x3 block, for transforming normals.

        :param a: Model(-view) matrix
        :returns: New matrix, identity when ``a`` is singular
        """
        (
            a00, a01, a02, a03,
            a10, a11, a12, a13,
            a20, a21, a22, a23,
            a30, a31, a32, a33,
        ) = a  # fmt: skip
        b00 = a00 * a11 - a01 * a10
        b01 = a00 * a12 - a02 * a10
        b02 = a00 * a13 - a03 * a10
        b03 = a01 * a12 - a02 * a11
        b04 = a01 * a13 - a03 * a11
        b05 = a02 * a13 - a03 * a12
        b06 = a20 * a31 - a21 * a30
        b07 = a20 * a32 - a22 * a30
        b08 = a20 * a33 - a23 * a30
        b09 = a21 * a32 - a22 * a31
        b10 = a21 * a33 - a23 * a31
        b11 = a22 * a33 - a23 * a32

        det = b00 * b11 - b01 * b10 + b02 * b09 + b03 * b08 - b04 * b07 + b05 * b06
        if not det:
            logger.debug("[Mat3] Singular matrix in normal_from_mat4, using identity")
            return cls.identity()
        det = 1.0 / det

        return cls(
            (a11 * b11 - a12 * b10 + a13 * b09) * det,
            (a12 * b08 - a10 * b11 - a13 * b07) * det,
            (a10 * b10 - a11 * b08 + a13 * b06) * det,
            (a02 * b10 - a01 * b11 - a03 * b09) * det,
            (a00 * b11 - a02 * b08 + a03 * b07) * det,
            (a01 * b08 - a00 * b10 - a03 * b06) * det,
            (a31 * b05 - a32 * b04 + a33 * b03) * det,
            (a32 * b02 - a30 * b05 - a33 * b01) * det,
            (a30 * b04 - a31 * b02 + a33 * b00) * det,
        )

    @classmethod
    def projection(cls, width: float, height: float) -> Mat3:
        """2D projection mapping pixel coordinates to clip space, y pointing down."""
        return cls(2 / width, 0.0, 0.0, 0.0, -2 / height, 0.0, -1.0, 1.0, 1.0)

    # ------------------------------------------------------------------
    # Linear algebra
    # ------------------------------------------------------------------

    @property
    def determinant(self) -> float:
        a00, a01, a02, a10, a11, a12, a20, a21, a22 = self
        return (
            a00 * (a22 * a11 - a12 * a21)
            + a01 * (-a22 * a10 + a12 * a20)
            + a02 * (a21 * a10 - a11 * a20)
        )

    def transpose(self) -> Mat3:
        a00, a01, a02, a10, a11, a12, a20, a21, a22 = self
        return self._assign(a00, a10, a20, a01, a11, a21, a02, a12, a22)

    def invert(self) -> Mat3:
        """Invert in place; a singular matrix is left unchanged."""
        a00, a01, a02, a10, a11, a12, a20, a21, a22 = self
        b01 = a22 * a11 - a12 * a21
        b11 = -a22 * a10 + a12 * a20
        b21 = a21 * a10 - a11 * a20

        det = a00 * b01 + a01 * b11 + a02 * b21
        if not det:
            logger.debug("[Mat3] Singular matrix, left unchanged")
            return self
        det = 1.0 / det

        return self._assign(
            b01 * det,
            (-a22 * a01 + a02 * a21) * det,
            (a12 * a01 - a02 * a11) * det,
            b11 * det,
            (a22 * a00 - a02 * a20) * det,
            (-a12 * a00 + a02 * a10) * det,
            b21 * det,
            (-a21 * a00 + a01 * a20) * det,
            (a11 * a00 - a01 * a10) * det,
        )

    def adjoint(self) -> Mat3:
        a00, a01, a02, a10, a11, a12, a20, a21, a22 = self
        return self._assign(
            a11 * a22 - a12 * a21,
            a02 * a21 - a01 * a22,
            a01 * a12 - a02 * a11,
            a12 * a20 - a10 * a22,
            a00 * a22 - a02 * a20,
            a02 * a10 - a00 * a12,
            a10 * a21 - a11 * a20,
            a01 * a20 - a00 * a21,
            a00 * a11 - a01 * a10,
        )

    def multiply(self, b: Mat3) -> Mat3:
        """Matrix product self * b."""
        a00, a01, a02, a10, a11, a12, a20, a21, a22 = self
        b00, b01, b02, b10, b11, b12, b20, b21, b22 = b
        return self._assign(
            b00 * a00 + b01 * a10 + b02 * a20,
            b00 * a01 + b01 * a11 + b02 * a21,
            b00 * a02 + b01 * a12 + b02 * a22,
            b10 * a00 + b11 * a10 + b12 * a20,
            b10 * a01 + b11 * a11 + b12 * a21,
            b10 * a02 + b11 * a12 + b12 * a22,
            b20 * a00 + b21 * a10 + b22 * a20,
            b20 * a01 + b21 * a11 + b22 * a21,
            b20 * a02 + b21 * a12 + b22 * a22,
        )

    # ------------------------------------------------------------------
    # 2D transforms (post-multiplied)
    # ------------------------------------------------------------------

    def translate(self, v: Vec2) -> Mat3:
        a00, a01, a02, a10, a11, a12, a20, a21, a22 = self
        x, y = v
        self[6] = x * a00 + y * a10 + a20
        self[7] = x * a01 + y * a11 + a21
        self[8] = x * a02 + y * a12 + a22
        return self

    def rotate(self, rad: float) -> Mat3:
        a00, a01, a02, a10, a11, a12, a20, a21, a22 = self
        c, s = cos(rad), sin(rad)
        return self._assign(
            c * a00 + s * a10,
            c * a01 + s * a11,
            c * a02 + s * a12,
            c * a10 - s * a00,
            c * a11 - s * a01,
            c * a12 - s * a02,
            a20,
            a21,
            a22,
        )

    def scale(self, v: Vec2) -> Mat3:
        x, y = v
        a00, a01, a02, a10, a11, a12, a20, a21, a22 = self
        return self._assign(
            a00 * x, a01 * x, a02 * x,
            a10 * y, a11 * y, a12 * y,
            a20, a21, a22,
        )  # fmt: skip
