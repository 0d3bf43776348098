"""Two-component vector."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

import numpy as np

from xformkit.base import Vector, component
from xformkit.common import acos, cos, sin
from xformkit.vec3 import Vec3

if TYPE_CHECKING:
    from xformkit.mat22 import Mat2
    from xformkit.mat23 import Mat23
    from xformkit.mat33 import Mat3
    from xformkit.mat44 import Mat4


class Vec2(Vector):
    """2D vector (x, y) stored as float32."""

    __slots__ = ()

    SIZE = 2
    TAG = "vec2"

    x = component(0)
    y = component(1)

    def __init__(self, x: float = 0.0, y: float = 0.0) -> None:
        super().__init__(x, y)

    def cross(self, b: Vec2) -> Vec3:
        """Cross product of the vectors lifted to 3D; only z is non-zero.

        :returns: New Vec3 (0, 0, z)
        """
        ax, ay = self
        bx, by = b
        return Vec3(0.0, 0.0, ax * by - ay * bx)

    def angle(self, b: Vec2) -> float:
        """Angle between two vectors in radians (0 when either is zero)."""
        magnitude = self.length * b.length
        cosine = self.dot(b) / magnitude if magnitude > 0 else 1.0
        if cosine > 1.0:
            return 0.0
        if cosine < -1.0:
            return math.pi
        return acos(cosine)

    def random(self, scale: float = 1.0, rng: np.random.Generator | None = None) -> Vec2:
        """Set to a uniformly distributed direction of length ``scale``."""
        rng = rng if rng is not None else np.random.default_rng()
        r = rng.random() * 2.0 * math.pi
        return self._assign(cos(r) * scale, sin(r) * scale)

    def rotate(self, origin: Vec2, rad: float) -> Vec2:
        """Rotate around ``origin`` by ``rad`` radians."""
        ox, oy = origin
        px, py = self.x - ox, self.y - oy
        c, s = cos(rad), sin(rad)
        return self._assign(px * c - py * s + ox, px * s + py * c + oy)

    def transform_mat2(self, m: Mat2) -> Vec2:
        x, y = self
        return self._assign(m[0] * x + m[2] * y, m[1] * x + m[3] * y)

    def transform_mat23(self, m: Mat23) -> Vec2:
        x, y = self
        return self._assign(m[0] * x + m[2] * y + m[4], m[1] * x + m[3] * y + m[5])

    def transform_mat3(self, m: Mat3) -> Vec2:
        x, y = self
        return self._assign(m[0] * x + m[3] * y + m[6], m[1] * x + m[4] * y + m[7])

    def transform_mat4(self, m: Mat4) -> Vec2:
        x, y = self
        return self._assign(m[0] * x + m[4] * y + m[12], m[1] * x + m[5] * y + m[13])
