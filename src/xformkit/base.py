"""Fixed-size float32 storage shared by vectors, matrices and quaternions.

Every value type keeps its components in a private float32 array. Reads
go through Python floats, so arithmetic runs in double precision and each
result is rounded to float32 once when written back.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator
from typing import ClassVar, Literal, Self, TypeAlias

import numpy as np

from xformkit.common import divide, equals_approximately, format_number

# Result of an operation that has a silent fallback on degenerate input
Outcome: TypeAlias = Literal["computed", "degenerate"]

COMPUTED: Outcome = "computed"
DEGENERATE: Outcome = "degenerate"


class Float32Values:
    """Base class for fixed-size float32 value types.

    Subclasses set ``SIZE`` (number of components) and ``TAG`` (prefix used
    by ``str()``), and define a constructor taking every component
    positionally with identity defaults.
    """

    __slots__ = ("_data",)

    SIZE: ClassVar[int] = 0
    TAG: ClassVar[str] = ""

    # Mutable values compare by content and are therefore unhashable
    __hash__ = None

    def __init__(self, *values: float) -> None:
        if len(values) != self.SIZE:
            raise ValueError(
                f"{type(self).__name__}: expected {self.SIZE} components, got {len(values)}"
            )
        self._data = np.array(values, dtype=np.float32)

    # ------------------------------------------------------------------
    # Sequence protocol
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return self.SIZE

    def __getitem__(self, index: int | slice) -> float | list[float]:
        if isinstance(index, slice):
            return self._data[index].tolist()
        return float(self._data[index])

    def __setitem__(self, index: int, value: float) -> None:
        self._data[index] = value

    def __iter__(self) -> Iterator[float]:
        return iter(self._data.tolist())

    def __array__(self, dtype=None, copy=None) -> np.ndarray:
        return np.array(self._data, dtype=dtype)

    def _assign(self, *values: float) -> Self:
        self._data[:] = values
        return self

    # ------------------------------------------------------------------
    # Construction helpers
    # ------------------------------------------------------------------

    @classmethod
    def from_values(cls, values: Iterable[float]) -> Self:
        """Create a value from any sequence of components.

        :param values: Components in storage order
        :returns: New value
        :raises ValueError: If the number of components is wrong
        """
        values = list(values)
        if len(values) != cls.SIZE:
            raise ValueError(
                f"{cls.__name__}: expected {cls.SIZE} components, got {len(values)}"
            )
        return cls(*values)

    def set(self, values: Iterable[float]) -> Self:
        """Overwrite all components.

        :param values: Components in storage order
        :returns: self
        :raises ValueError: If the number of components is wrong
        """
        values = list(values)
        if len(values) != self.SIZE:
            raise ValueError(
                f"{type(self).__name__}: expected {self.SIZE} components, got {len(values)}"
            )
        return self._assign(*values)

    def clone(self) -> Self:
        """Return an independent copy."""
        return type(self)(*self)

    def copy(self, other: Iterable[float]) -> Self:
        """Copy the components of ``other`` into this value."""
        return self.set(other)

    def to_numpy(self) -> np.ndarray:
        """Return the components as a new float32 array."""
        return self._data.copy()

    # ------------------------------------------------------------------
    # Comparison and formatting
    # ------------------------------------------------------------------

    def equals_exact(self, other: Iterable[float]) -> bool:
        """Component-wise exact equality."""
        return list(self) == list(other)

    def equals_approximately(self, other: Iterable[float]) -> bool:
        """Component-wise equality within the scaled EPSILON tolerance."""
        other = list(other)
        if len(other) != self.SIZE:
            return False
        return all(equals_approximately(a, b) for a, b in zip(self, other, strict=True))

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.equals_exact(other)

    def __str__(self) -> str:
        return f"{self.TAG}({', '.join(format_number(v) for v in self._data)})"

    def __repr__(self) -> str:
        return str(self)


def component(index: int, doc: str | None = None) -> property:
    """Build a read/write property bound to one storage slot."""

    def getter(self: Float32Values) -> float:
        return float(self._data[index])

    def setter(self: Float32Values, value: float) -> None:
        self._data[index] = value

    return property(getter, setter, doc=doc)


class Vector(Float32Values):
    """Component-wise arithmetic shared by Vec2, Vec3 and Vec4."""

    __slots__ = ()

    @property
    def length(self) -> float:
        return math.hypot(*self)

    @property
    def squared_length(self) -> float:
        return sum(a * a for a in self)

    def distance(self, b: Iterable[float]) -> float:
        return math.hypot(*(q - p for p, q in zip(self, b, strict=True)))

    def squared_distance(self, b: Iterable[float]) -> float:
        return sum((q - p) * (q - p) for p, q in zip(self, b, strict=True))

    def dot(self, b: Iterable[float]) -> float:
        return sum(p * q for p, q in zip(self, b, strict=True))

    def zero(self) -> Self:
        self._data[:] = 0.0
        return self

    def add(self, b: Iterable[float]) -> Self:
        return self._assign(*(p + q for p, q in zip(self, b, strict=True)))

    def subtract(self, b: Iterable[float]) -> Self:
        return self._assign(*(p - q for p, q in zip(self, b, strict=True)))

    def multiply(self, b: Iterable[float]) -> Self:
        return self._assign(*(p * q for p, q in zip(self, b, strict=True)))

    def divide(self, b: Iterable[float]) -> Self:
        return self._assign(*(divide(p, q) for p, q in zip(self, b, strict=True)))

    def min(self, b: Iterable[float]) -> Self:
        return self._assign(*(min(p, q) for p, q in zip(self, b, strict=True)))

    def max(self, b: Iterable[float]) -> Self:
        return self._assign(*(max(p, q) for p, q in zip(self, b, strict=True)))

    def ceil(self) -> Self:
        np.ceil(self._data, out=self._data)
        return self

    def floor(self) -> Self:
        np.floor(self._data, out=self._data)
        return self

    def round(self) -> Self:
        # Halves round toward +inf
        np.floor(self._data + np.float32(0.5), out=self._data)
        return self

    def scale(self, b: float) -> Self:
        return self._assign(*(p * b for p in self))

    def negate(self) -> Self:
        return self._assign(*(-p for p in self))

    def inverse(self) -> Self:
        return self._assign(*(divide(1.0, p) for p in self))

    def normalize(self) -> Self:
        """Scale to unit length; the zero vector is left unchanged."""
        length = self.length
        if length > 0:
            return self.scale(1.0 / length)
        return self

    def lerp(self, a: Iterable[float], b: Iterable[float], t: float) -> Self:
        """Linear interpolation between ``a`` and ``b``, written into self."""
        return self._assign(*(p + t * (q - p) for p, q in zip(a, b, strict=True)))


class Matrix(Float32Values):
    """Column-major matrix storage with the element-wise operations.

    Subclasses define ``IDENTITY``, ``determinant``, ``invert`` and
    ``multiply``.
    """

    __slots__ = ()

    IDENTITY: ClassVar[tuple[float, ...]] = ()

    @classmethod
    def identity(cls) -> Self:
        return cls(*cls.IDENTITY)

    def set_identity(self) -> Self:
        return self._assign(*self.IDENTITY)

    @property
    def determinant(self) -> float:
        raise NotImplementedError

    def invert(self) -> Self:
        raise NotImplementedError

    def multiply(self, b: Self) -> Self:
        raise NotImplementedError

    def invert_with_status(self) -> tuple[Self, Outcome]:
        """Invert in place and report whether the matrix was singular.

        :returns: (self, "computed") or (self unchanged, "degenerate")
        """
        if not self.determinant:
            return self.invert(), DEGENERATE
        return self.invert(), COMPUTED

    def frobenius_norm(self) -> float:
        return math.hypot(*self)

    def add(self, b: Self) -> Self:
        return self._assign(*(p + q for p, q in zip(self, b, strict=True)))

    def subtract(self, b: Self) -> Self:
        return self._assign(*(p - q for p, q in zip(self, b, strict=True)))

    def multiply_scalar(self, b: float) -> Self:
        return self._assign(*(p * b for p in self))

    def __matmul__(self, other: Self) -> Self:
        if type(other) is not type(self):
            return NotImplemented
        return self.clone().multiply(other)
