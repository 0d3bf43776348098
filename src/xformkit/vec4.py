"""Four-component vector for homogeneous coordinates."""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from xformkit.base import Vector, component
from xformkit.common import sqrt

if TYPE_CHECKING:
    from xformkit.mat44 import Mat4
    from xformkit.quat import Quat


class Vec4(Vector):
    """4D vector (x, y, z, w) stored as float32."""

    __slots__ = ()

    SIZE = 4
    TAG = "vec4"

    x = component(0)
    y = component(1)
    z = component(2)
    w = component(3)

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0, w: float = 0.0) -> None:
        super().__init__(x, y, z, w)

    def cross(self, u: Vec4, v: Vec4, w: Vec4) -> Vec4:
        """Four-dimensional cross product of three vectors, written into self.

        The result is orthogonal to ``u``, ``v`` and ``w``.
        """
        a = v[0] * w[1] - v[1] * w[0]
        b = v[0] * w[2] - v[2] * w[0]
        c = v[0] * w[3] - v[3] * w[0]
        d = v[1] * w[2] - v[2] * w[1]
        e = v[1] * w[3] - v[3] * w[1]
        f = v[2] * w[3] - v[3] * w[2]
        g, h, i, j = u
        return self._assign(
            h * f - i * e + j * d,
            -(g * f) + i * c - j * b,
            g * e - h * c + j * a,
            -(g * d) + h * b - i * a,
        )

    def random(self, scale: float = 1.0, rng: np.random.Generator | None = None) -> Vec4:
        """Set to a uniformly distributed point on the 4D sphere of radius ``scale``.

        Uses Marsaglia's rejection method (Ann. Math. Statist. 43, 1972).
        """
        rng = rng if rng is not None else np.random.default_rng()
        while True:
            v1, v2 = rng.random(2) * 2 - 1
            s1 = v1 * v1 + v2 * v2
            if s1 < 1:
                break
        while True:
            v3, v4 = rng.random(2) * 2 - 1
            s2 = v3 * v3 + v4 * v4
            if 0 < s2 < 1:
                break
        d = sqrt((1 - s1) / s2)
        return self._assign(scale * v1, scale * v2, scale * v3 * d, scale * v4 * d)

    def transform_mat4(self, m: Mat4) -> Vec4:
        x, y, z, w = self
        return self._assign(
            m[0] * x + m[4] * y + m[8] * z + m[12] * w,
            m[1] * x + m[5] * y + m[9] * z + m[13] * w,
            m[2] * x + m[6] * y + m[10] * z + m[14] * w,
            m[3] * x + m[7] * y + m[11] * z + m[15] * w,
        )

    def transform_quat(self, q: Quat) -> Vec4:
        """Rotate the xyz part by a quaternion; w is kept."""
        x, y, z, w = self
        qx, qy, qz, qw = q
        # q * v
        ix = qw * x + qy * z - qz * y
        iy = qw * y + qz * x - qx * z
        iz = qw * z + qx * y - qy * x
        iw = -qx * x - qy * y - qz * z
        # (q * v) * conj(q)
        return self._assign(
            ix * qw + iw * -qx + iy * -qz - iz * -qy,
            iy * qw + iw * -qy + iz * -qx - ix * -qz,
            iz * qw + iw * -qz + ix * -qy - iy * -qx,
            w,
        )
