"""Dual quaternion rigid transforms.

Layout: (real x, y, z, w, dual x, y, z, w). A dual quaternion encodes
rotation ``r`` followed by translation ``t`` as ``real = r`` and
``dual = 0.5 * t * r`` with ``t`` a pure quaternion.

It is a valid rigid transform when the real part has unit length and is
orthogonal to the dual part. ``lerp``, ``add`` and ``scale`` do not keep
that invariant; ``normalize`` restores it. Most operations assume
normalized input and do not check it.
"""

from __future__ import annotations

import logging
import math

from xformkit.base import Float32Values
from xformkit.common import EPSILON, cos, divide, sin
from xformkit.mat44 import Mat4
from xformkit.quat import Quat, hamilton_product
from xformkit.vec3 import Vec3

logger = logging.getLogger(__name__)


def _conjugate(q: tuple[float, ...]) -> tuple[float, float, float, float]:
    x, y, z, w = q
    return -x, -y, -z, w


class DualQuat(Float32Values):
    """Dual quaternion (real, dual) stored as eight float32 values."""

    __slots__ = ()

    SIZE = 8
    TAG = "quat2"

    def __init__(
        self,
        real_x: float = 0.0,
        real_y: float = 0.0,
        real_z: float = 0.0,
        real_w: float = 1.0,
        dual_x: float = 0.0,
        dual_y: float = 0.0,
        dual_z: float = 0.0,
        dual_w: float = 0.0,
    ) -> None:
        super().__init__(real_x, real_y, real_z, real_w, dual_x, dual_y, dual_z, dual_w)

    # ------------------------------------------------------------------
    # Factories
    # ------------------------------------------------------------------

    @classmethod
    def identity(cls) -> DualQuat:
        return cls()

    @classmethod
    def from_rotation_translation_values(
        cls, x1: float, y1: float, z1: float, w1: float, x2: float, y2: float, z2: float
    ) -> DualQuat:
        """Rigid transform from raw rotation (x1..w1) and translation (x2..z2) components."""
        return cls.from_translation_rotation(Quat(x1, y1, z1, w1), Vec3(x2, y2, z2))

    @classmethod
    def from_translation_rotation(cls, q: Quat, t: Vec3) -> DualQuat:
        """Rigid transform rotating by ``q`` and then translating by ``t``.

        :param q: Rotation (expected unit length)
        :param t: Translation
        :returns: New dual quaternion
        """
        ax, ay, az = (v * 0.5 for v in t)
        bx, by, bz, bw = q
        return cls(
            bx,
            by,
            bz,
            bw,
            ax * bw + ay * bz - az * by,
            ay * bw + az * bx - ax * bz,
            az * bw + ax * by - ay * bx,
            -ax * bx - ay * by - az * bz,
        )

    @classmethod
    def from_translation(cls, t: Vec3) -> DualQuat:
        x, y, z = t
        return cls(0.0, 0.0, 0.0, 1.0, x * 0.5, y * 0.5, z * 0.5, 0.0)

    @classmethod
    def from_rotation(cls, q: Quat) -> DualQuat:
        return cls(*q, 0.0, 0.0, 0.0, 0.0)

    @classmethod
    def from_mat4(cls, m: Mat4) -> DualQuat:
        """Rigid transform from a rotation + translation matrix (no scaling)."""
        return cls.from_translation_rotation(m.rotation, m.translation)

    @classmethod
    def from_lerp(cls, a: DualQuat, b: DualQuat, t: float) -> DualQuat:
        """Linear interpolation returning a new, unnormalized dual quaternion."""
        return cls().lerp(a, b, t)

    # ------------------------------------------------------------------
    # Parts
    # ------------------------------------------------------------------

    @property
    def real(self) -> Quat:
        """Copy of the rotation part."""
        return Quat(*self._data[0:4].tolist())

    @real.setter
    def real(self, q: Quat) -> None:
        self._data[0:4] = list(q)

    @property
    def dual(self) -> Quat:
        """Copy of the dual part."""
        return Quat(*self._data[4:8].tolist())

    @dual.setter
    def dual(self, q: Quat) -> None:
        self._data[4:8] = list(q)

    @property
    def translation(self) -> Vec3:
        """Translation ``2 * dual * conjugate(real)``; exact only for a unit real part."""
        values = self._data.tolist()
        tx, ty, tz, _ = hamilton_product(values[4:8], _conjugate(values[0:4]))
        return Vec3(tx * 2, ty * 2, tz * 2)

    @property
    def length(self) -> float:
        """Length of the real part."""
        return math.hypot(*self._data[0:4].tolist())

    @property
    def squared_length(self) -> float:
        """Squared length of the real part."""
        x, y, z, w = self._data[0:4].tolist()
        return x * x + y * y + z * z + w * w

    def dot(self, b: DualQuat) -> float:
        """Dot product of the real parts."""
        ax, ay, az, aw = self._data[0:4].tolist()
        bx, by, bz, bw = list(b)[0:4]
        return ax * bx + ay * by + az * bz + aw * bw

    # ------------------------------------------------------------------
    # In-place operations
    # ------------------------------------------------------------------

    def set_identity(self) -> DualQuat:
        return self._assign(0.0, 0.0, 0.0, 1.0, 0.0, 0.0, 0.0, 0.0)

    def translate(self, v: Vec3) -> DualQuat:
        """Apply a translation in local space (post-multiply); the real part is unchanged."""
        ax1, ay1, az1, aw1, ax2, ay2, az2, aw2 = self
        bx1, by1, bz1 = (c * 0.5 for c in v)
        return self._assign(
            ax1,
            ay1,
            az1,
            aw1,
            aw1 * bx1 + ay1 * bz1 - az1 * by1 + ax2,
            aw1 * by1 + az1 * bx1 - ax1 * bz1 + ay2,
            aw1 * bz1 + ax1 * by1 - ay1 * bx1 + az2,
            -ax1 * bx1 - ay1 * by1 - az1 * bz1 + aw2,
        )

    def _rotate_real(self, rotated: Quat) -> DualQuat:
        # Keep the world-space translation, replace the rotation
        values = self._data.tolist()
        t = hamilton_product(values[4:8], _conjugate(values[0:4]))
        real = tuple(rotated)
        return self._assign(*real, *hamilton_product(t, real))

    def rotate_x(self, rad: float) -> DualQuat:
        """Rotate around the local x axis, keeping the translation."""
        return self._rotate_real(self.real.rotate_x(rad))

    def rotate_y(self, rad: float) -> DualQuat:
        """Rotate around the local y axis, keeping the translation."""
        return self._rotate_real(self.real.rotate_y(rad))

    def rotate_z(self, rad: float) -> DualQuat:
        """Rotate around the local z axis, keeping the translation."""
        return self._rotate_real(self.real.rotate_z(rad))

    def rotate_by_quat_append(self, q: Quat) -> DualQuat:
        """Post-multiply both parts by ``q`` (rotation in local space)."""
        values = self._data.tolist()
        q = tuple(q)
        return self._assign(
            *hamilton_product(values[0:4], q), *hamilton_product(values[4:8], q)
        )

    def rotate_by_quat_prepend(self, q: Quat) -> DualQuat:
        """Pre-multiply both parts by ``q`` (rotation in world space)."""
        values = self._data.tolist()
        q = tuple(q)
        return self._assign(
            *hamilton_product(q, values[0:4]), *hamilton_product(q, values[4:8])
        )

    def rotate_around_axis(self, axis: Vec3, rad: float) -> DualQuat:
        """Rotate around ``axis`` in local space.

        :param axis: Rotation axis, normalized here
        :param rad: Angle in radians; angles below EPSILON leave the value unchanged
        :returns: self
        """
        if abs(rad) < EPSILON:
            return self
        axis_length = axis.length
        rad *= 0.5
        s = sin(rad)
        ax, ay, az = axis
        q = Quat(
            divide(s * ax, axis_length),
            divide(s * ay, axis_length),
            divide(s * az, axis_length),
            cos(rad),
        )
        return self.rotate_by_quat_append(q)

    def add(self, b: DualQuat) -> DualQuat:
        return self._assign(*(p + q for p, q in zip(self, b, strict=True)))

    def scale(self, b: float) -> DualQuat:
        return self._assign(*(p * b for p in self))

    def multiply(self, b: DualQuat) -> DualQuat:
        """Composition self * b: apply ``b`` first, then self.

        real = ra * rb, dual = ra * db + da * rb
        """
        a = self._data.tolist()
        b = list(b)
        ra, da = a[0:4], a[4:8]
        rb, db = b[0:4], b[4:8]
        left = hamilton_product(ra, db)
        right = hamilton_product(da, rb)
        return self._assign(
            *hamilton_product(ra, rb), *(p + q for p, q in zip(left, right, strict=True))
        )

    def lerp(self, a: DualQuat, b: DualQuat, t: float) -> DualQuat:
        """Blend all eight components along the shorter path.

        The result is not normalized; the error is largest at t = 0.5.
        """
        mt = 1 - t
        if a.dot(b) < 0:
            t = -t
        return self._assign(*(p * mt + q * t for p, q in zip(a, b, strict=True)))

    def invert(self) -> DualQuat:
        """Inverse, dividing by the squared length of the real part.

        For normalized input this equals :meth:`conjugate`.
        """
        sqlen = self.squared_length
        rx, ry, rz, rw, dx, dy, dz, dw = self
        return self._assign(
            *(divide(v, sqlen) for v in (-rx, -ry, -rz, rw, -dx, -dy, -dz, dw))
        )

    def conjugate(self) -> DualQuat:
        rx, ry, rz, rw, dx, dy, dz, dw = self
        return self._assign(-rx, -ry, -rz, rw, -dx, -dy, -dz, dw)

    def normalize(self) -> DualQuat:
        """Make the real part unit length and the dual part orthogonal to it.

        A zero real part leaves the value unchanged.
        """
        magnitude = self.squared_length
        if magnitude <= 0:
            logger.debug("[DualQuat] Zero real part, left unchanged")
            return self
        magnitude = math.sqrt(magnitude)
        values = self._data.tolist()
        real = [v / magnitude for v in values[0:4]]
        dual = values[4:8]
        real_dot_dual = sum(r * d for r, d in zip(real, dual, strict=True))
        return self._assign(
            *real, *((d - r * real_dot_dual) / magnitude for r, d in zip(real, dual, strict=True))
        )

    # ------------------------------------------------------------------
    # Value-returning operators
    # ------------------------------------------------------------------

    def __mul__(self, other: DualQuat) -> DualQuat:
        if not isinstance(other, DualQuat):
            return NotImplemented
        return self.clone().multiply(other)
