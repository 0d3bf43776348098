"""Tolerance specifications for numeric comparisons.

This module defines the ToleranceSpec dataclass that names a threshold,
its value, and what it guards.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ToleranceSpec:
    """Specification for a numeric threshold.

    Attributes:
        name: Threshold name (e.g., "epsilon", "parallel_threshold")
        value: Threshold value
        description: Human-readable description
    """

    name: str
    value: float
    description: str = ""

    def __post_init__(self) -> None:
        if not isinstance(self.value, int | float):
            raise ValueError(f"{self.name}: expected number, got {type(self.value).__name__}")
        if self.value < 0:
            raise ValueError(f"{self.name}: tolerance must be non-negative, got {self.value}")

    def is_within(self, delta: float) -> bool:
        """Check if a deviation is inside this tolerance.

        :param delta: Deviation to check (sign is ignored)
        :returns: True if abs(delta) <= value
        """
        return abs(delta) <= self.value

    def __repr__(self) -> str:
        return f"ToleranceSpec({self.name}, value={self.value})"
