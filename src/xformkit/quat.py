"""Rotation quaternion.

Quaternion Convention: (x, y, z, w) - scalar last, identity (0, 0, 0, 1)

Unit norm is not enforced: ``add``, ``lerp`` and ``scale`` leave
non-unit quaternions behind and callers call ``normalize()`` themselves.
Degenerate inputs produce NaN/Inf or a documented fallback, never an
exception.
"""

from __future__ import annotations

import logging
import math
from typing import NamedTuple

import numpy as np

from xformkit.base import Float32Values, component
from xformkit.common import (
    DEGREE_TO_RAD,
    EPSILON,
    acos,
    cos,
    divide,
    exp,
    inverse_sqrt,
    log,
    sin,
    sqrt,
)
from xformkit.config import CONFIG
from xformkit.mat33 import Mat3
from xformkit.vec3 import Vec3

logger = logging.getLogger(__name__)

PARALLEL_THRESHOLD = CONFIG.numeric.parallel_threshold.value


class AxisAngle(NamedTuple):
    """Rotation axis and angle in radians."""

    axis: Vec3
    rad: float


def hamilton_product(
    a: tuple[float, float, float, float], b: tuple[float, float, float, float]
) -> tuple[float, float, float, float]:
    """Hamilton product a * b on plain tuples."""
    ax, ay, az, aw = a
    bx, by, bz, bw = b
    return (
        ax * bw + aw * bx + ay * bz - az * by,
        ay * bw + aw * by + az * bx - ax * bz,
        az * bw + aw * bz + ax * by - ay * bx,
        aw * bw - ax * bx - ay * by - az * bz,
    )


def _ln(x: float, y: float, z: float, w: float) -> tuple[float, float, float, float]:
    r = math.sqrt(x * x + y * y + z * z)
    t = math.atan2(r, w) / r if r > 0 else 0.0
    return x * t, y * t, z * t, 0.5 * log(x * x + y * y + z * z + w * w)


def _exp(x: float, y: float, z: float, w: float) -> tuple[float, float, float, float]:
    r = math.sqrt(x * x + y * y + z * z)
    et = exp(w)
    s = et * sin(r) / r if r > 0 else 0.0
    return x * s, y * s, z * s, et * cos(r)


class Quat(Float32Values):
    """Quaternion (x, y, z, w) stored as float32."""

    __slots__ = ()

    SIZE = 4
    TAG = "quat"

    x = component(0)
    y = component(1)
    z = component(2)
    w = component(3)

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0, w: float = 1.0) -> None:
        super().__init__(x, y, z, w)

    # ------------------------------------------------------------------
    # Factories
    # ------------------------------------------------------------------

    @classmethod
    def identity(cls) -> Quat:
        return cls()

    @classmethod
    def from_axis_angle(cls, axis: Vec3, rad: float) -> Quat:
        """Create a rotation of ``rad`` radians around a unit ``axis``.

        :param axis: Unit rotation axis
        :param rad: Angle in radians
        :returns: New quaternion
        """
        return cls().set_axis_angle(axis, rad)

    @classmethod
    def from_mat3(cls, m: Mat3) -> Quat:
        """Create a quaternion from a rotation matrix.

        Shoemake's method ("Quaternion Calculus and Fast Animation",
        SIGGRAPH 1987 course notes). The result is not normalized.

        :param m: Column-major rotation matrix
        :returns: New quaternion
        """
        trace = m[0] + m[4] + m[8]
        q = [0.0, 0.0, 0.0, 1.0]
        if trace > 0.0:
            # |w| > 1/2
            root = sqrt(trace + 1.0)  # 2w
            q[3] = 0.5 * root
            root = 0.5 / root  # 1/(4w)
            q[0] = (m[5] - m[7]) * root
            q[1] = (m[6] - m[2]) * root
            q[2] = (m[1] - m[3]) * root
        else:
            # |w| <= 1/2, pivot on the largest diagonal entry
            i = 0
            if m[4] > m[0]:
                i = 1
            if m[8] > m[i * 3 + i]:
                i = 2
            j = (i + 1) % 3
            k = (i + 2) % 3
            root = sqrt(m[i * 3 + i] - m[j * 3 + j] - m[k * 3 + k] + 1.0)
            q[i] = 0.5 * root
            root = divide(0.5, root)
            q[3] = (m[j * 3 + k] - m[k * 3 + j]) * root
            q[j] = (m[j * 3 + i] + m[i * 3 + j]) * root
            q[k] = (m[k * 3 + i] + m[i * 3 + k]) * root
        return cls(*q)

    @classmethod
    def from_euler_degrees(cls, x: float, y: float, z: float) -> Quat:
        """Create a quaternion from Euler angles in degrees."""
        half_to_rad = 0.5 * DEGREE_TO_RAD
        x *= half_to_rad
        y *= half_to_rad
        z *= half_to_rad
        sx, cx = sin(x), cos(x)
        sy, cy = sin(y), cos(y)
        sz, cz = sin(z), cos(z)
        return cls(
            sx * cy * cz - cx * sy * sz,
            cx * sy * cz + sx * cy * sz,
            cx * cy * sz - sx * sy * cz,
            cx * cy * cz + sx * sy * sz,
        )

    @classmethod
    def from_axes(cls, view: Vec3, right: Vec3, up: Vec3) -> Quat:
        """Create the rotation of a camera frame given its view, right and up axes.

        :param view: Viewing direction (the frame looks down -z)
        :param right: Unit right vector
        :param up: Unit up vector
        :returns: New normalized quaternion
        """
        m = Mat3(
            right[0], up[0], -view[0],
            right[1], up[1], -view[1],
            right[2], up[2], -view[2],
        )  # fmt: skip
        return cls.from_mat3(m).normalize()

    @classmethod
    def from_slerp(cls, a: Quat, b: Quat, t: float) -> Quat:
        """Spherical interpolation returning a new quaternion."""
        return cls().slerp(a, b, t)

    @classmethod
    def from_lerp(cls, a: Quat, b: Quat, t: float) -> Quat:
        """Linear interpolation returning a new quaternion."""
        return cls().lerp(a, b, t)

    @classmethod
    def from_rotation_to(cls, a: Vec3, b: Vec3) -> Quat:
        """Shortest rotation from unit vector ``a`` to unit vector ``b``, as a new value."""
        return cls().rotation_to(a, b)

    # ------------------------------------------------------------------
    # Measures
    # ------------------------------------------------------------------

    @property
    def length(self) -> float:
        return math.hypot(*self)

    @property
    def squared_length(self) -> float:
        x, y, z, w = self
        return x * x + y * y + z * z + w * w

    def dot(self, b: Quat) -> float:
        ax, ay, az, aw = self
        bx, by, bz, bw = b
        return ax * bx + ay * by + az * bz + aw * bw

    @property
    def axis_angle(self) -> AxisAngle:
        """Rotation axis and angle of a unit quaternion.

        When the rotation is (close to) zero the axis is arbitrary and
        (1, 0, 0) is returned.
        """
        x, y, z, w = self
        rad = acos(w) * 2.0
        s = sin(rad / 2.0)
        if s > EPSILON:
            axis = Vec3(x / s, y / s, z / s)
        else:
            axis = Vec3(1.0, 0.0, 0.0)
        return AxisAngle(axis, rad)

    def angle_distance(self, b: Quat) -> float:
        """Angular distance between two unit quaternions in radians."""
        d = self.dot(b)
        return acos(2 * d * d - 1)

    # ------------------------------------------------------------------
    # In-place operations
    # ------------------------------------------------------------------

    def set_identity(self) -> Quat:
        return self._assign(0.0, 0.0, 0.0, 1.0)

    def set_axis_angle(self, axis: Vec3, rad: float) -> Quat:
        """Set to a rotation of ``rad`` radians around a unit ``axis``."""
        rad *= 0.5
        s = sin(rad)
        return self._assign(s * axis[0], s * axis[1], s * axis[2], cos(rad))

    def multiply(self, b: Quat) -> Quat:
        """Hamilton product self * b."""
        return self._assign(*hamilton_product(tuple(self), tuple(b)))

    def premultiply(self, a: Quat) -> Quat:
        """Hamilton product a * self."""
        return self._assign(*hamilton_product(tuple(a), tuple(self)))

    def rotate_x(self, rad: float) -> Quat:
        """Rotate around the local x axis."""
        rad *= 0.5
        ax, ay, az, aw = self
        bx, bw = sin(rad), cos(rad)
        return self._assign(
            ax * bw + aw * bx,
            ay * bw + az * bx,
            az * bw - ay * bx,
            aw * bw - ax * bx,
        )

    def rotate_y(self, rad: float) -> Quat:
        """Rotate around the local y axis."""
        rad *= 0.5
        ax, ay, az, aw = self
        by, bw = sin(rad), cos(rad)
        return self._assign(
            ax * bw - az * by,
            ay * bw + aw * by,
            az * bw + ax * by,
            aw * bw - ay * by,
        )

    def rotate_z(self, rad: float) -> Quat:
        """Rotate around the local z axis."""
        rad *= 0.5
        ax, ay, az, aw = self
        bz, bw = sin(rad), cos(rad)
        return self._assign(
            ax * bw + ay * bz,
            ay * bw - ax * bz,
            az * bw + aw * bz,
            aw * bw - az * bz,
        )

    def calculate_w(self) -> Quat:
        """Derive w from x, y and z, assuming unit length."""
        x, y, z, _ = self
        return self._assign(x, y, z, sqrt(abs(1.0 - x * x - y * y - z * z)))

    def exp(self) -> Quat:
        """Exponential of the quaternion."""
        return self._assign(*_exp(*self))

    def ln(self) -> Quat:
        """Natural logarithm of the quaternion."""
        return self._assign(*_ln(*self))

    def pow(self, b: float) -> Quat:
        """Scalar power, computed as exp(b * ln(self)).

        Intermediate values stay in double precision; only the result is
        rounded to float32.
        """
        x, y, z, w = _ln(*self)
        return self._assign(*_exp(x * b, y * b, z * b, w * b))

    def slerp(self, a: Quat, b: Quat, t: float) -> Quat:
        """Spherical linear interpolation along the shorter arc.

        :param a: Start rotation
        :param b: End rotation
        :param t: Interpolation amount in [0, 1]
        :returns: self (not renormalized)
        """
        ax, ay, az, aw = a
        bx, by, bz, bw = b
        cosom = ax * bx + ay * by + az * bz + aw * bw
        if cosom < 0.0:
            cosom = -cosom
            bx, by, bz, bw = -bx, -by, -bz, -bw

        if 1.0 - cosom > EPSILON:
            omega = acos(cosom)
            sinom = sin(omega)
            scale0 = sin((1.0 - t) * omega) / sinom
            scale1 = sin(t * omega) / sinom
        else:
            # Nearly identical rotations: linear weights
            scale0 = 1.0 - t
            scale1 = t
        return self._assign(
            scale0 * ax + scale1 * bx,
            scale0 * ay + scale1 * by,
            scale0 * az + scale1 * bz,
            scale0 * aw + scale1 * bw,
        )

    def sqlerp(self, a: Quat, b: Quat, c: Quat, d: Quat, t: float) -> Quat:
        """Spherical quadrangle interpolation with two control points."""
        temp1 = Quat().slerp(a, d, t)
        temp2 = Quat().slerp(b, c, t)
        return self.slerp(temp1, temp2, 2 * t * (1 - t))

    def random(self, rng: np.random.Generator | None = None) -> Quat:
        """Set to a uniformly distributed random rotation.

        Method from LaValle, "Planning Algorithms", section 5.2.2.
        """
        rng = rng if rng is not None else np.random.default_rng()
        u1, u2, u3 = rng.random(3)
        sqrt_1_minus_u1 = sqrt(1.0 - u1)
        sqrt_u1 = sqrt(u1)
        return self._assign(
            sqrt_1_minus_u1 * sin(2.0 * math.pi * u2),
            sqrt_1_minus_u1 * cos(2.0 * math.pi * u2),
            sqrt_u1 * sin(2.0 * math.pi * u3),
            sqrt_u1 * cos(2.0 * math.pi * u3),
        )

    def invert(self) -> Quat:
        """Multiplicative inverse; the zero quaternion stays zero."""
        x, y, z, w = self
        d = x * x + y * y + z * z + w * w
        inv = 1.0 / d if d else 0.0
        return self._assign(-x * inv, -y * inv, -z * inv, w * inv)

    def conjugate(self) -> Quat:
        """Conjugate; equals the inverse for unit quaternions."""
        x, y, z, w = self
        return self._assign(-x, -y, -z, w)

    def add(self, b: Quat) -> Quat:
        return self._assign(*(p + q for p, q in zip(self, b, strict=True)))

    def scale(self, n: float) -> Quat:
        return self._assign(*(p * n for p in self))

    def lerp(self, a: Quat, b: Quat, t: float) -> Quat:
        """Component-wise linear interpolation (not normalized)."""
        return self._assign(*(p + t * (q - p) for p, q in zip(a, b, strict=True)))

    def normalize(self) -> Quat:
        """Scale to unit length; the zero quaternion becomes NaN."""
        inv = inverse_sqrt(self.squared_length)
        return self._assign(*(p * inv for p in self))

    def rotation_to(self, a: Vec3, b: Vec3) -> Quat:
        """Set to the shortest rotation taking unit vector ``a`` onto unit vector ``b``.

        Opposite vectors have no unique shortest rotation; a half turn
        around an axis perpendicular to ``a`` is used.

        :param a: Unit start direction
        :param b: Unit target direction
        :returns: self
        """
        d = a.dot(b)
        if d < -PARALLEL_THRESHOLD:
            axis = Vec3.right().cross(a)
            if axis.length < EPSILON:
                axis = Vec3.up().cross(a)
            logger.debug("[Quat] Antiparallel rotation_to, half turn around %s", axis)
            return self.set_axis_angle(axis.normalize(), math.pi)
        if d > PARALLEL_THRESHOLD:
            return self.set_identity()

        cx, cy, cz = a.clone().cross(b)
        return self._assign(cx, cy, cz, 1.0 + d).normalize()

    # ------------------------------------------------------------------
    # Value-returning operators
    # ------------------------------------------------------------------

    def __mul__(self, other: Quat) -> Quat:
        if not isinstance(other, Quat):
            return NotImplemented
        return self.clone().multiply(other)
