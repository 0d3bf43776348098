"""Three-component vector.

Used for points, directions, rotation axes, translations and scale
factors. Methods mutate in place and return ``self`` so calls chain.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

import numpy as np

from xformkit.base import Vector, component
from xformkit.common import acos, cos, sin, sqrt

if TYPE_CHECKING:
    from xformkit.mat33 import Mat3
    from xformkit.mat44 import Mat4
    from xformkit.quat import Quat
    from xformkit.vec2 import Vec2


class Vec3(Vector):
    """3D vector (x, y, z) stored as float32."""

    __slots__ = ()

    SIZE = 3
    TAG = "vec3"

    x = component(0)
    y = component(1)
    z = component(2)

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0) -> None:
        super().__init__(x, y, z)

    @classmethod
    def from_vec2(cls, v: Vec2) -> Vec3:
        """Lift a 2D vector into the z = 0 plane."""
        x, y = v
        return cls(x, y, 0.0)

    @classmethod
    def right(cls) -> Vec3:
        return cls(1.0, 0.0, 0.0)

    @classmethod
    def up(cls) -> Vec3:
        return cls(0.0, 1.0, 0.0)

    def angle(self, b: Vec3) -> float:
        """Angle between two vectors in radians."""
        cosine = self.clone().normalize().dot(b.clone().normalize())
        if cosine > 1.0:
            return 0.0
        if cosine < -1.0:
            return math.pi
        return acos(cosine)

    def cross(self, b: Vec3) -> Vec3:
        ax, ay, az = self
        bx, by, bz = b
        return self._assign(ay * bz - az * by, az * bx - ax * bz, ax * by - ay * bx)

    # ------------------------------------------------------------------
    # Interpolation
    # ------------------------------------------------------------------

    def hermite(self, a: Vec3, b: Vec3, c: Vec3, d: Vec3, t: float) -> Vec3:
        """Hermite interpolation with two control points.

        :param a: Start point
        :param b: First control point
        :param c: Second control point
        :param d: End point
        :param t: Interpolation amount in [0, 1]
        :returns: self
        """
        t2 = t * t
        f1 = t2 * (2 * t - 3) + 1
        f2 = t2 * (t - 2) + t
        f3 = t2 * (t - 1)
        f4 = t2 * (3 - 2 * t)
        return self._assign(
            *(pa * f1 + pb * f2 + pc * f3 + pd * f4 for pa, pb, pc, pd in zip(a, b, c, d))
        )

    def bezier(self, a: Vec3, b: Vec3, c: Vec3, d: Vec3, t: float) -> Vec3:
        """Cubic Bezier interpolation with two control points."""
        inv = 1 - t
        f1 = inv * inv * inv
        f2 = 3 * t * inv * inv
        f3 = 3 * t * t * inv
        f4 = t * t * t
        return self._assign(
            *(pa * f1 + pb * f2 + pc * f3 + pd * f4 for pa, pb, pc, pd in zip(a, b, c, d))
        )

    def random(self, scale: float = 1.0, rng: np.random.Generator | None = None) -> Vec3:
        """Set to a uniformly distributed direction of length ``scale``."""
        rng = rng if rng is not None else np.random.default_rng()
        r = rng.random() * 2.0 * math.pi
        z = rng.random() * 2.0 - 1.0
        z_scale = sqrt(1.0 - z * z) * scale
        return self._assign(cos(r) * z_scale, sin(r) * z_scale, z * scale)

    # ------------------------------------------------------------------
    # Transforms
    # ------------------------------------------------------------------

    def transform_mat3(self, m: Mat3) -> Vec3:
        x, y, z = self
        return self._assign(
            x * m[0] + y * m[3] + z * m[6],
            x * m[1] + y * m[4] + z * m[7],
            x * m[2] + y * m[5] + z * m[8],
        )

    def transform_mat4(self, m: Mat4) -> Vec3:
        """Transform as a point, dividing by w (a zero w is treated as 1)."""
        x, y, z = self
        w = (m[3] * x + m[7] * y + m[11] * z + m[15]) or 1.0
        return self._assign(
            (m[0] * x + m[4] * y + m[8] * z + m[12]) / w,
            (m[1] * x + m[5] * y + m[9] * z + m[13]) / w,
            (m[2] * x + m[6] * y + m[10] * z + m[14]) / w,
        )

    def transform_quat(self, q: Quat) -> Vec3:
        """Rotate by a quaternion.

        Also works for dual quaternions when given their real part.
        """
        qx, qy, qz, qw = q
        x, y, z = self
        uvx = qy * z - qz * y
        uvy = qz * x - qx * z
        uvz = qx * y - qy * x
        uuvx = qy * uvz - qz * uvy
        uuvy = qz * uvx - qx * uvz
        uuvz = qx * uvy - qy * uvx
        w2 = qw * 2
        return self._assign(
            x + uvx * w2 + uuvx * 2,
            y + uvy * w2 + uuvy * 2,
            z + uvz * w2 + uuvz * 2,
        )

    def rotate_x(self, origin: Vec3, rad: float) -> Vec3:
        """Rotate around the x axis through ``origin``."""
        ox, oy, oz = origin
        px, py, pz = self.x - ox, self.y - oy, self.z - oz
        c, s = cos(rad), sin(rad)
        return self._assign(px + ox, py * c - pz * s + oy, py * s + pz * c + oz)

    def rotate_y(self, origin: Vec3, rad: float) -> Vec3:
        """Rotate around the y axis through ``origin``."""
        ox, oy, oz = origin
        px, py, pz = self.x - ox, self.y - oy, self.z - oz
        c, s = cos(rad), sin(rad)
        return self._assign(pz * s + px * c + ox, py + oy, pz * c - px * s + oz)

    def rotate_z(self, origin: Vec3, rad: float) -> Vec3:
        """Rotate around the z axis through ``origin``."""
        ox, oy, oz = origin
        px, py, pz = self.x - ox, self.y - oy, self.z - oz
        c, s = cos(rad), sin(rad)
        return self._assign(px * c - py * s + ox, px * s + py * c + oy, pz + oz)
