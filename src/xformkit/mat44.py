"""4x4 matrix for 3D affine and projective transforms.

Storage is column-major (``m[col * 4 + row]``); written out as sixteen
arguments it reads like a row-major listing. Matrices are
post-multiplied: ``m.translate(v)`` applies the translation before the
existing transform.
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING, NamedTuple

from xformkit.base import COMPUTED, DEGENERATE, Matrix, Outcome
from xformkit.common import (
    DEGREE_TO_RAD,
    EPSILON,
    cos,
    divide,
    format_number,
    inverse_sqrt,
    sin,
    sqrt,
    tan,
)
from xformkit.quat import Quat
from xformkit.vec3 import Vec3

if TYPE_CHECKING:
    from xformkit.quat2 import DualQuat

logger = logging.getLogger(__name__)


class FieldOfView(NamedTuple):
    """Asymmetric field of view, each half-angle in degrees."""

    up: float
    down: float
    left: float
    right: float


class Decomposition(NamedTuple):
    """Translation, rotation and scaling of a TRS matrix."""

    translation: Vec3
    rotation: Quat
    scaling: Vec3


def _rotation_entries(q: Quat) -> tuple[float, ...]:
    """Upper-left 3x3 rotation block of a unit quaternion, column-major."""
    x, y, z, w = q
    x2, y2, z2 = x + x, y + y, z + z
    xx, xy, xz = x * x2, x * y2, x * z2
    yy, yz, zz = y * y2, y * z2, z * z2
    wx, wy, wz = w * x2, w * y2, w * z2
    return (
        1 - (yy + zz), xy + wz, xz - wy,
        xy - wz, 1 - (xx + zz), yz + wx,
        xz + wy, yz - wx, 1 - (xx + yy),
    )  # fmt: skip


def _quat_from_rotation_block(
    m00: float, m01: float, m02: float,
    m10: float, m11: float, m12: float,
    m20: float, m21: float, m22: float,
) -> Quat:  # fmt: skip
    """Quaternion from a column-major rotation block.

    Branches on the trace as described at euclideanspace.com
    (maths/geometry/rotations/conversions/matrixToQuaternion).
    """
    trace = m00 + m11 + m22
    if trace > 0:
        s = sqrt(trace + 1.0) * 2
        return Quat((m12 - m21) / s, (m20 - m02) / s, (m01 - m10) / s, 0.25 * s)
    if m00 > m11 and m00 > m22:
        s = sqrt(1.0 + m00 - m11 - m22) * 2
        return Quat(0.25 * s, (m01 + m10) / s, (m20 + m02) / s, (m12 - m21) / s)
    if m11 > m22:
        s = sqrt(1.0 + m11 - m00 - m22) * 2
        return Quat((m01 + m10) / s, 0.25 * s, (m12 + m21) / s, (m20 - m02) / s)
    s = sqrt(1.0 + m22 - m00 - m11) * 2
    return Quat((m20 + m02) / s, (m12 + m21) / s, 0.25 * s, (m01 - m10) / s)


class Mat4(Matrix):
    """4x4 column-major matrix stored as float32."""

    __slots__ = ()

    SIZE = 16
    TAG = "mat4"
    IDENTITY = (
        1.0, 0.0, 0.0, 0.0,
        0.0, 1.0, 0.0, 0.0,
        0.0, 0.0, 1.0, 0.0,
        0.0, 0.0, 0.0, 1.0,
    )  # fmt: skip

    def __init__(
        self,
        m00: float = 1.0, m01: float = 0.0, m02: float = 0.0, m03: float = 0.0,
        m10: float = 0.0, m11: float = 1.0, m12: float = 0.0, m13: float = 0.0,
        m20: float = 0.0, m21: float = 0.0, m22: float = 1.0, m23: float = 0.0,
        m30: float = 0.0, m31: float = 0.0, m32: float = 0.0, m33: float = 1.0,
    ) -> None:  # fmt: skip
        super().__init__(
            m00, m01, m02, m03, m10, m11, m12, m13, m20, m21, m22, m23, m30, m31, m32, m33
        )

    def __str__(self) -> str:
        rows = (
            ",".join(format_number(v) for v in self._data[i : i + 4]) for i in range(0, 16, 4)
        )
        return "mat4(\n" + "".join(f"  {row}\n" for row in rows) + ")"

    # ------------------------------------------------------------------
    # Factories
    # ------------------------------------------------------------------

    @classmethod
    def from_translation(cls, v: Vec3) -> Mat4:
        x, y, z = v
        return cls(1, 0, 0, 0, 0, 1, 0, 0, 0, 0, 1, 0, x, y, z, 1)

    @classmethod
    def from_scaling(cls, v: Vec3) -> Mat4:
        x, y, z = v
        return cls(x, 0, 0, 0, 0, y, 0, 0, 0, 0, z, 0, 0, 0, 0, 1)

    @classmethod
    def from_rotation(cls, axis: Vec3, rad: float) -> Mat4:
        """Rotation of ``rad`` radians around ``axis``.

        :param axis: Rotation axis, normalized here
        :param rad: Angle in radians
        :returns: New matrix, identity when the axis is shorter than EPSILON
        """
        length = axis.length
        if length < EPSILON:
            logger.debug("[Mat4] Zero rotation axis, using identity")
            return cls.identity()
        x, y, z = (a / length for a in axis)
        c, s = cos(rad), sin(rad)
        t = 1 - c
        return cls(
            x * x * t + c, y * x * t + z * s, z * x * t - y * s, 0,
            x * y * t - z * s, y * y * t + c, z * y * t + x * s, 0,
            x * z * t + y * s, y * z * t - x * s, z * z * t + c, 0,
            0, 0, 0, 1,
        )  # fmt: skip

    @classmethod
    def from_x_rotation(cls, rad: float) -> Mat4:
        c, s = cos(rad), sin(rad)
        return cls(1, 0, 0, 0, 0, c, s, 0, 0, -s, c, 0, 0, 0, 0, 1)

    @classmethod
    def from_y_rotation(cls, rad: float) -> Mat4:
        c, s = cos(rad), sin(rad)
        return cls(c, 0, -s, 0, 0, 1, 0, 0, s, 0, c, 0, 0, 0, 0, 1)

    @classmethod
    def from_z_rotation(cls, rad: float) -> Mat4:
        c, s = cos(rad), sin(rad)
        return cls(c, s, 0, 0, -s, c, 0, 0, 0, 0, 1, 0, 0, 0, 0, 1)

    @classmethod
    def from_quat(cls, q: Quat) -> Mat4:
        """Rotation matrix of a unit quaternion."""
        r0, r1, r2, r4, r5, r6, r8, r9, r10 = _rotation_entries(q)
        return cls(r0, r1, r2, 0, r4, r5, r6, 0, r8, r9, r10, 0, 0, 0, 0, 1)

    @classmethod
    def from_translation_rotation(cls, q: Quat, v: Vec3) -> Mat4:
        """Rigid transform: rotate by ``q``, then translate by ``v``."""
        return cls.from_translation_rotation_scale(v, q, (1.0, 1.0, 1.0))

    @classmethod
    def from_quat2(cls, a: DualQuat) -> Mat4:
        """Rigid transform of a dual quaternion.

        The translation is divided by the squared magnitude of the real
        part, so unnormalized input still yields the intended offset.
        """
        bx, by, bz, bw, ax, ay, az, aw = a
        bx, by, bz = -bx, -by, -bz
        tx = (ax * bw + aw * bx + ay * bz - az * by) * 2
        ty = (ay * bw + aw * by + az * bx - ax * bz) * 2
        tz = (az * bw + aw * bz + ax * by - ay * bx) * 2
        magnitude = bx * bx + by * by + bz * bz + bw * bw
        if magnitude > 0:
            tx, ty, tz = tx / magnitude, ty / magnitude, tz / magnitude
        return cls.from_translation_rotation(a.real, Vec3(tx, ty, tz))

    @classmethod
    def from_translation_rotation_scale(
        cls, translation: Vec3, rotation: Quat, scaling: Vec3
    ) -> Mat4:
        """TRS composition: scale, then rotate, then translate.

        :param translation: Translation vector
        :param rotation: Unit rotation quaternion
        :param scaling: Per-axis scale factors
        :returns: New matrix
        """
        r0, r1, r2, r4, r5, r6, r8, r9, r10 = _rotation_entries(rotation)
        sx, sy, sz = scaling
        vx, vy, vz = translation
        return cls(
            r0 * sx, r1 * sx, r2 * sx, 0,
            r4 * sy, r5 * sy, r6 * sy, 0,
            r8 * sz, r9 * sz, r10 * sz, 0,
            vx, vy, vz, 1,
        )  # fmt: skip

    @classmethod
    def from_rotation_translation_scale_origin(
        cls, translation: Vec3, rotation: Quat, scaling: Vec3, origin: Vec3
    ) -> Mat4:
        """TRS composition with rotation and scaling applied around ``origin``.

        :param translation: Translation vector
        :param rotation: Unit rotation quaternion
        :param scaling: Per-axis scale factors
        :param origin: Pivot for rotation and scaling
        :returns: New matrix
        """
        r0, r1, r2, r4, r5, r6, r8, r9, r10 = _rotation_entries(rotation)
        sx, sy, sz = scaling
        ox, oy, oz = origin
        vx, vy, vz = translation
        o0, o1, o2 = r0 * sx, r1 * sx, r2 * sx
        o4, o5, o6 = r4 * sy, r5 * sy, r6 * sy
        o8, o9, o10 = r8 * sz, r9 * sz, r10 * sz
        return cls(
            o0, o1, o2, 0,
            o4, o5, o6, 0,
            o8, o9, o10, 0,
            vx + ox - (o0 * ox + o4 * oy + o8 * oz),
            vy + oy - (o1 * ox + o5 * oy + o9 * oz),
            vz + oz - (o2 * ox + o6 * oy + o10 * oz),
            1,
        )  # fmt: skip

    # ------------------------------------------------------------------
    # Projections and cameras
    # ------------------------------------------------------------------

    @classmethod
    def frustum(
        cls, left: float, right: float, bottom: float, top: float, near: float, far: float
    ) -> Mat4:
        rl = divide(1.0, right - left)
        tb = divide(1.0, top - bottom)
        nf = divide(1.0, near - far)
        return cls(
            near * 2 * rl, 0, 0, 0,
            0, near * 2 * tb, 0, 0,
            (right + left) * rl, (top + bottom) * tb, (far + near) * nf, -1,
            0, 0, far * near * 2 * nf, 0,
        )  # fmt: skip

    @classmethod
    def perspective(
        cls, fovy: float, aspect: float, near: float, far: float | None = None
    ) -> Mat4:
        """Perspective projection with a vertical field of view.

        :param fovy: Vertical field of view in radians
        :param aspect: Width / height
        :param near: Near clip distance
        :param far: Far clip distance; None, 0 or infinity gives an infinite far plane
        :returns: New matrix
        """
        f = divide(1.0, tan(fovy / 2))
        m10 = -1.0
        m14 = -2.0 * near
        if far and math.isfinite(far):
            nf = divide(1.0, near - far)
            m10 = (far + near) * nf
            m14 = 2 * far * near * nf
        return cls(divide(f, aspect), 0, 0, 0, 0, f, 0, 0, 0, 0, m10, -1, 0, 0, m14, 0)

    @classmethod
    def perspective_from_field_of_view(cls, fov: FieldOfView, near: float, far: float) -> Mat4:
        """Perspective projection from four half-angles in degrees, as used by VR headsets."""
        up_tan = tan(fov.up * DEGREE_TO_RAD)
        down_tan = tan(fov.down * DEGREE_TO_RAD)
        left_tan = tan(fov.left * DEGREE_TO_RAD)
        right_tan = tan(fov.right * DEGREE_TO_RAD)
        x_scale = divide(2.0, left_tan + right_tan)
        y_scale = divide(2.0, up_tan + down_tan)
        return cls(
            x_scale, 0, 0, 0,
            0, y_scale, 0, 0,
            -((left_tan - right_tan) * x_scale * 0.5),
            (up_tan - down_tan) * y_scale * 0.5,
            divide(far, near - far),
            -1,
            0, 0, divide(far * near, near - far), 0,
        )  # fmt: skip

    @classmethod
    def ortho(
        cls, left: float, right: float, bottom: float, top: float, near: float, far: float
    ) -> Mat4:
        lr = divide(1.0, left - right)
        bt = divide(1.0, bottom - top)
        nf = divide(1.0, near - far)
        return cls(
            -2 * lr, 0, 0, 0,
            0, -2 * bt, 0, 0,
            0, 0, 2 * nf, 0,
            (left + right) * lr, (top + bottom) * bt, (far + near) * nf, 1,
        )  # fmt: skip

    @classmethod
    def look_at(cls, eye: Vec3, center: Vec3, up: Vec3) -> Mat4:
        """View matrix of a camera at ``eye`` looking at ``center``.

        The result maps world space into camera space (camera looks down -z).
        Use :meth:`target_to` to orient an object towards a target instead.

        :param eye: Camera position
        :param center: Point the camera looks at
        :param up: Approximate up direction
        :returns: New matrix, identity when eye and center coincide
        """
        ex, ey, ez = eye
        cx, cy, cz = center
        ux, uy, uz = up
        if abs(ex - cx) < EPSILON and abs(ey - cy) < EPSILON and abs(ez - cz) < EPSILON:
            logger.debug("[Mat4] look_at with eye == center, using identity")
            return cls.identity()

        z0, z1, z2 = ex - cx, ey - cy, ez - cz
        length = inverse_sqrt(z0 * z0 + z1 * z1 + z2 * z2)
        z0, z1, z2 = z0 * length, z1 * length, z2 * length

        x0 = uy * z2 - uz * z1
        x1 = uz * z0 - ux * z2
        x2 = ux * z1 - uy * z0
        length = sqrt(x0 * x0 + x1 * x1 + x2 * x2)
        if not length:
            x0 = x1 = x2 = 0.0
        else:
            x0, x1, x2 = x0 / length, x1 / length, x2 / length

        y0 = z1 * x2 - z2 * x1
        y1 = z2 * x0 - z0 * x2
        y2 = z0 * x1 - z1 * x0
        length = sqrt(y0 * y0 + y1 * y1 + y2 * y2)
        if not length:
            y0 = y1 = y2 = 0.0
        else:
            y0, y1, y2 = y0 / length, y1 / length, y2 / length

        return cls(
            x0, y0, z0, 0,
            x1, y1, z1, 0,
            x2, y2, z2, 0,
            -(x0 * ex + x1 * ey + x2 * ez),
            -(y0 * ex + y1 * ey + y2 * ez),
            -(z0 * ex + z1 * ey + z2 * ez),
            1,
        )  # fmt: skip

    @classmethod
    def target_to(cls, eye: Vec3, target: Vec3, up: Vec3) -> Mat4:
        """Model matrix placing an object at ``eye`` with its +z facing away from ``target``.

        Coincident eye and target are not guarded and produce NaN.

        :param eye: Object position
        :param target: Point to face
        :param up: Approximate up direction
        :returns: New matrix
        """
        ex, ey, ez = eye
        tx, ty, tz = target
        ux, uy, uz = up
        z0, z1, z2 = ex - tx, ey - ty, ez - tz
        length = inverse_sqrt(z0 * z0 + z1 * z1 + z2 * z2)
        z0, z1, z2 = z0 * length, z1 * length, z2 * length

        x0 = uy * z2 - uz * z1
        x1 = uz * z0 - ux * z2
        x2 = ux * z1 - uy * z0
        squared = x0 * x0 + x1 * x1 + x2 * x2
        if squared > 0:
            length = inverse_sqrt(squared)
            x0, x1, x2 = x0 * length, x1 * length, x2 * length

        return cls(
            x0, x1, x2, 0,
            z1 * x2 - z2 * x1, z2 * x0 - z0 * x2, z0 * x1 - z1 * x0, 0,
            z0, z1, z2, 0,
            ex, ey, ez, 1,
        )  # fmt: skip

    # ------------------------------------------------------------------
    # Decomposition
    # ------------------------------------------------------------------

    @property
    def translation(self) -> Vec3:
        return Vec3(self[12], self[13], self[14])

    @property
    def scaling(self) -> Vec3:
        """Length of each of the first three columns."""
        m = self._data.tolist()
        return Vec3(
            math.hypot(m[0], m[1], m[2]),
            math.hypot(m[4], m[5], m[6]),
            math.hypot(m[8], m[9], m[10]),
        )

    @property
    def rotation(self) -> Quat:
        """Rotation of the upper-left 3x3 block, read as-is.

        Only meaningful for matrices without scaling; see :meth:`decompose`.
        """
        m = self._data.tolist()
        return _quat_from_rotation_block(m[0], m[1], m[2], m[4], m[5], m[6], m[8], m[9], m[10])

    def decompose(self) -> Decomposition:
        """Split a TRS matrix into translation, rotation and scaling.

        Scaling is divided out of the columns before the rotation is read.

        :returns: Decomposition(translation, rotation, scaling)
        """
        m = self._data.tolist()
        scaling = self.scaling
        sx, sy, sz = (divide(1.0, s) for s in scaling)
        rotation = _quat_from_rotation_block(
            m[0] * sx, m[1] * sx, m[2] * sx,
            m[4] * sy, m[5] * sy, m[6] * sy,
            m[8] * sz, m[9] * sz, m[10] * sz,
        )  # fmt: skip
        return Decomposition(self.translation, rotation, scaling)

    # ------------------------------------------------------------------
    # Linear algebra
    # ------------------------------------------------------------------

    @property
    def determinant(self) -> float:
        (
            a00, a01, a02, a03,
            a10, a11, a12, a13,
            a20, a21, a22, a23,
            a30, a31, a32, a33,
        ) = self  # fmt: skip
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
        return b00 * b11 - b01 * b10 + b02 * b09 + b03 * b08 - b04 * b07 + b05 * b06

    def transpose(self) -> Mat4:
        m = self._data.tolist()
        return self._assign(*(m[row * 4 + col] for col in range(4) for row in range(4)))

    def invert(self) -> Mat4:
        """Invert in place; a singular matrix is left unchanged."""
        (
            a00, a01, a02, a03,
            a10, a11, a12, a13,
            a20, a21, a22, a23,
            a30, a31, a32, a33,
        ) = self  # fmt: skip
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
            logger.debug("[Mat4] Singular matrix, left unchanged")
            return self
        det = 1.0 / det

        return self._assign(
            (a11 * b11 - a12 * b10 + a13 * b09) * det,
            (a02 * b10 - a01 * b11 - a03 * b09) * det,
            (a31 * b05 - a32 * b04 + a33 * b03) * det,
            (a22 * b04 - a21 * b05 - a23 * b03) * det,
            (a12 * b08 - a10 * b11 - a13 * b07) * det,
            (a00 * b11 - a02 * b08 + a03 * b07) * det,
            (a32 * b02 - a30 * b05 - a33 * b01) * det,
            (a20 * b05 - a22 * b02 + a23 * b01) * det,
            (a10 * b10 - a11 * b08 + a13 * b06) * det,
            (a01 * b08 - a00 * b10 - a03 * b06) * det,
            (a30 * b04 - a31 * b02 + a33 * b00) * det,
            (a21 * b02 - a20 * b04 - a23 * b00) * det,
            (a11 * b07 - a10 * b09 - a12 * b06) * det,
            (a00 * b09 - a01 * b07 + a02 * b06) * det,
            (a31 * b01 - a30 * b03 - a32 * b00) * det,
            (a20 * b03 - a21 * b01 + a22 * b00) * det,
        )

    def adjoint(self) -> Mat4:
        """Classical adjoint (transpose of the cofactor matrix)."""
        (
            a00, a01, a02, a03,
            a10, a11, a12, a13,
            a20, a21, a22, a23,
            a30, a31, a32, a33,
        ) = self  # fmt: skip
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
        # Same cofactors as invert() without the 1/det factor
        return self._assign(
            a11 * b11 - a12 * b10 + a13 * b09,
            a02 * b10 - a01 * b11 - a03 * b09,
            a31 * b05 - a32 * b04 + a33 * b03,
            a22 * b04 - a21 * b05 - a23 * b03,
            a12 * b08 - a10 * b11 - a13 * b07,
            a00 * b11 - a02 * b08 + a03 * b07,
            a32 * b02 - a30 * b05 - a33 * b01,
            a20 * b05 - a22 * b02 + a23 * b01,
            a10 * b10 - a11 * b08 + a13 * b06,
            a01 * b08 - a00 * b10 - a03 * b06,
            a30 * b04 - a31 * b02 + a33 * b00,
            a21 * b02 - a20 * b04 - a23 * b00,
            a11 * b07 - a10 * b09 - a12 * b06,
            a00 * b09 - a01 * b07 + a02 * b06,
            a31 * b01 - a30 * b03 - a32 * b00,
            a20 * b03 - a21 * b01 + a22 * b00,
        )

    def multiply(self, b: Mat4) -> Mat4:
        """Matrix product self * b."""
        a = self._data.tolist()
        b = list(b)
        return self._assign(
            *(
                sum(b[col * 4 + k] * a[k * 4 + row] for k in range(4))
                for col in range(4)
                for row in range(4)
            )
        )

    # ------------------------------------------------------------------
    # Transforms (post-multiplied)
    # ------------------------------------------------------------------

    def translate(self, v: Vec3) -> Mat4:
        x, y, z = v
        m = self._data.tolist()
        for row in range(4):
            self[12 + row] = m[row] * x + m[4 + row] * y + m[8 + row] * z + m[12 + row]
        return self

    def scale(self, v: Vec3) -> Mat4:
        x, y, z = v
        m = self._data.tolist()
        return self._assign(
            *(value * x for value in m[0:4]),
            *(value * y for value in m[4:8]),
            *(value * z for value in m[8:12]),
            *m[12:16],
        )

    def rotate(self, axis: Vec3, rad: float) -> Mat4:
        """Rotate by ``rad`` radians around ``axis``; a zero axis leaves the matrix unchanged."""
        return self.rotate_with_status(axis, rad)[0]

    def rotate_with_status(self, axis: Vec3, rad: float) -> tuple[Mat4, Outcome]:
        """Rotate around ``axis`` and report whether the axis was degenerate.

        :param axis: Rotation axis, normalized here
        :param rad: Angle in radians
        :returns: (self, "computed") or (self unchanged, "degenerate")
        """
        x, y, z = axis
        length = sqrt(x * x + y * y + z * z)
        if length < EPSILON:
            logger.debug("[Mat4] Zero rotation axis, left unchanged")
            return self, DEGENERATE
        x, y, z = x / length, y / length, z / length

        c, s = cos(rad), sin(rad)
        t = 1 - c
        m = self._data.tolist()
        a0, a1, a2 = m[0:4], m[4:8], m[8:12]

        b00, b01, b02 = x * x * t + c, y * x * t + z * s, z * x * t - y * s
        b10, b11, b12 = x * y * t - z * s, y * y * t + c, z * y * t + x * s
        b20, b21, b22 = x * z * t + y * s, y * z * t - x * s, z * z * t + c

        self._assign(
            *(p * b00 + q * b01 + r * b02 for p, q, r in zip(a0, a1, a2)),
            *(p * b10 + q * b11 + r * b12 for p, q, r in zip(a0, a1, a2)),
            *(p * b20 + q * b21 + r * b22 for p, q, r in zip(a0, a1, a2)),
            *m[12:16],
        )
        return self, COMPUTED

    def rotate_x(self, rad: float) -> Mat4:
        c, s = cos(rad), sin(rad)
        m = self._data.tolist()
        a1, a2 = m[4:8], m[8:12]
        return self._assign(
            *m[0:4],
            *(p * c + q * s for p, q in zip(a1, a2)),
            *(q * c - p * s for p, q in zip(a1, a2)),
            *m[12:16],
        )

    def rotate_y(self, rad: float) -> Mat4:
        c, s = cos(rad), sin(rad)
        m = self._data.tolist()
        a0, a2 = m[0:4], m[8:12]
        return self._assign(
            *(p * c - q * s for p, q in zip(a0, a2)),
            *m[4:8],
            *(p * s + q * c for p, q in zip(a0, a2)),
            *m[12:16],
        )

    def rotate_z(self, rad: float) -> Mat4:
        c, s = cos(rad), sin(rad)
        m = self._data.tolist()
        a0, a1 = m[0:4], m[4:8]
        return self._assign(
            *(p * c + q * s for p, q in zip(a0, a1)),
            *(q * c - p * s for p, q in zip(a0, a1)),
            *m[8:16],
        )
