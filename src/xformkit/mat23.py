"""2x3 affine matrix for 2D transforms.

Components are (a, b, c, d, tx, ty), the compact form of
``[a c tx; b d ty; 0 0 1]``.
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING

from xformkit.base import Matrix
from xformkit.common import cos, sin

if TYPE_CHECKING:
    from xformkit.vec2 import Vec2

logger = logging.getLogger(__name__)


class Mat23(Matrix):
    """2D affine matrix stored as six float32 values."""

    __slots__ = ()

    SIZE = 6
    TAG = "mat2d"
    IDENTITY = (1.0, 0.0, 0.0, 1.0, 0.0, 0.0)

    def __init__(
        self,
        a: float = 1.0,
        b: float = 0.0,
        c: float = 0.0,
        d: float = 1.0,
        tx: float = 0.0,
        ty: float = 0.0,
    ) -> None:
        super().__init__(a, b, c, d, tx, ty)

    @classmethod
    def from_rotation(cls, rad: float) -> Mat23:
        c, s = cos(rad), sin(rad)
        return cls(c, s, -s, c, 0.0, 0.0)

    @classmethod
    def from_scaling(cls, v: Vec2) -> Mat23:
        return cls(v[0], 0.0, 0.0, v[1], 0.0, 0.0)

    @classmethod
    def from_translation(cls, v: Vec2) -> Mat23:
        return cls(1.0, 0.0, 0.0, 1.0, v[0], v[1])

    @property
    def determinant(self) -> float:
        a, b, c, d, _, _ = self
        return a * d - b * c

    def invert(self) -> Mat23:
        """Invert in place; a singular matrix is left unchanged."""
        aa, ab, ac, ad, atx, aty = self
        det = aa * ad - ab * ac
        if not det:
            logger.debug("[Mat23] Singular matrix, left unchanged")
            return self
        det = 1.0 / det
        return self._assign(
            ad * det,
            -ab * det,
            -ac * det,
            aa * det,
            (ac * aty - ad * atx) * det,
            (ab * atx - aa * aty) * det,
        )

    def multiply(self, b: Mat23) -> Mat23:
        """Affine product self * b."""
        a0, a1, a2, a3, a4, a5 = self
        b0, b1, b2, b3, b4, b5 = b
        return self._assign(
            a0 * b0 + a2 * b1,
            a1 * b0 + a3 * b1,
            a0 * b2 + a2 * b3,
            a1 * b2 + a3 * b3,
            a0 * b4 + a2 * b5 + a4,
            a1 * b4 + a3 * b5 + a5,
        )

    def rotate(self, rad: float) -> Mat23:
        a0, a1, a2, a3, a4, a5 = self
        s, c = sin(rad), cos(rad)
        return self._assign(
            a0 * c + a2 * s,
            a1 * c + a3 * s,
            a0 * -s + a2 * c,
            a1 * -s + a3 * c,
            a4,
            a5,
        )

    def scale(self, v: Vec2) -> Mat23:
        a0, a1, a2, a3, a4, a5 = self
        v0, v1 = v
        return self._assign(a0 * v0, a1 * v0, a2 * v1, a3 * v1, a4, a5)

    def translate(self, v: Vec2) -> Mat23:
        a0, a1, a2, a3, a4, a5 = self
        v0, v1 = v
        return self._assign(a0, a1, a2, a3, a0 * v0 + a2 * v1 + a4, a1 * v0 + a3 * v1 + a5)

    def frobenius_norm(self) -> float:
        # Includes the implicit 1 of the homogeneous row
        return math.hypot(*self, 1.0)
