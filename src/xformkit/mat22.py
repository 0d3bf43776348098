"""2x2 matrix for 2D linear transforms.

Storage is column-major: (m00, m01, m10, m11) with ``m[col * 2 + row]``.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from xformkit.base import Matrix
from xformkit.common import cos, divide, sin

if TYPE_CHECKING:
    from xformkit.vec2 import Vec2

logger = logging.getLogger(__name__)


class Mat2(Matrix):
    """2x2 column-major matrix stored as float32."""

    __slots__ = ()

    SIZE = 4
    TAG = "mat2"
    IDENTITY = (1.0, 0.0, 0.0, 1.0)

    def __init__(
        self, m00: float = 1.0, m01: float = 0.0, m10: float = 0.0, m11: float = 1.0
    ) -> None:
        super().__init__(m00, m01, m10, m11)

    @classmethod
    def from_rotation(cls, rad: float) -> Mat2:
        s, c = sin(rad), cos(rad)
        return cls(c, s, -s, c)

    @classmethod
    def from_scaling(cls, v: Vec2) -> Mat2:
        return cls(v[0], 0.0, 0.0, v[1])

    @property
    def determinant(self) -> float:
        a0, a1, a2, a3 = self
        return a0 * a3 - a2 * a1

    def transpose(self) -> Mat2:
        a0, a1, a2, a3 = self
        return self._assign(a0, a2, a1, a3)

    def invert(self) -> Mat2:
        """Invert in place; a singular matrix is left unchanged."""
        a0, a1, a2, a3 = self
        det = a0 * a3 - a2 * a1
        if not det:
            logger.debug("[Mat2] Singular matrix, left unchanged")
            return self
        det = 1.0 / det
        return self._assign(a3 * det, -a1 * det, -a2 * det, a0 * det)

    def adjoint(self) -> Mat2:
        a0, a1, a2, a3 = self
        return self._assign(a3, -a1, -a2, a0)

    def multiply(self, b: Mat2) -> Mat2:
        """Matrix product self * b."""
        a0, a1, a2, a3 = self
        b0, b1, b2, b3 = b
        return self._assign(
            a0 * b0 + a2 * b1,
            a1 * b0 + a3 * b1,
            a0 * b2 + a2 * b3,
            a1 * b2 + a3 * b3,
        )

    def rotate(self, rad: float) -> Mat2:
        a0, a1, a2, a3 = self
        s, c = sin(rad), cos(rad)
        return self._assign(
            a0 * c + a2 * s,
            a1 * c + a3 * s,
            a0 * -s + a2 * c,
            a1 * -s + a3 * c,
        )

    def scale(self, v: Vec2) -> Mat2:
        a0, a1, a2, a3 = self
        v0, v1 = v
        return self._assign(a0 * v0, a1 * v0, a2 * v1, a3 * v1)

    def ldu(self) -> tuple[Mat2, Mat2]:
        """LU factorization without pivoting.

        :returns: (lower, upper) with a unit-diagonal ``lower``
        """
        a0, a1, a2, a3 = self
        lower = Mat2()
        upper = Mat2()
        lower[2] = divide(a2, a0)
        upper[0] = a0
        upper[1] = a1
        upper[3] = a3 - lower[2] * a1
        return lower, upper
