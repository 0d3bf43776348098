"""Scalar helpers shared by every vector, matrix and quaternion type.

All helpers follow IEEE-754 semantics: division by zero, ``acos`` outside
[-1, 1], ``log(0)`` and the trigonometry of infinite angles produce Inf/NaN
instead of raising, so degenerate inputs propagate through the numeric core
without exceptions.
"""

from __future__ import annotations

import math

import numpy as np

from xformkit.config import CONFIG

EPSILON: float = CONFIG.numeric.epsilon.value
DEGREE_TO_RAD: float = math.pi / 180.0

# Bit-level constant for the float32 inverse square root approximation
_FAST_INVSQRT_MAGIC = np.uint32(0x5F3759DF)


def degree_to_rad(degrees: float) -> float:
    """Convert degrees to radians."""
    return degrees * DEGREE_TO_RAD


def equals_approximately(a: float, b: float) -> bool:
    """Compare two numbers with a tolerance scaled to their magnitude.

    :param a: First value
    :param b: Second value
    :returns: True if |a - b| <= EPSILON * max(1, |a|, |b|)
    """
    return abs(a - b) <= EPSILON * max(1.0, abs(a), abs(b))


def sqrt(value: float) -> float:
    """Square root; negative input gives NaN."""
    with np.errstate(invalid="ignore"):
        return float(np.sqrt(np.float64(value)))


def inverse_sqrt(value: float) -> float:
    """Exact 1 / sqrt(value); zero gives Inf, negative input gives NaN."""
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(1.0 / np.sqrt(np.float64(value)))


def fast_inverse_sqrt(value: float) -> float:
    """Approximate 1 / sqrt(value) with one Newton step.

    Reinterprets the float32 bit pattern as an unsigned integer, so the
    result is only accurate to about 0.2%. Use :func:`inverse_sqrt` where
    results are compared against EPSILON.

    :param value: Non-negative input
    :returns: Approximate inverse square root
    """
    half = np.float32(0.5) * np.float32(value)
    bits = np.array([value], dtype=np.float32).view(np.uint32)
    bits[0] = _FAST_INVSQRT_MAGIC - (bits[0] >> np.uint32(1))
    y = bits.view(np.float32)[0]
    y = y * (np.float32(1.5) - half * y * y)
    return float(y)


def divide(numerator: float, denominator: float) -> float:
    """Division with IEEE-754 results for a zero denominator."""
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.float64(numerator) / np.float64(denominator))


def acos(value: float) -> float:
    """Arc cosine; values outside [-1, 1] give NaN."""
    with np.errstate(invalid="ignore"):
        return float(np.arccos(np.float64(value)))


def sin(value: float) -> float:
    """Sine; infinite input gives NaN."""
    with np.errstate(invalid="ignore"):
        return float(np.sin(np.float64(value)))


def cos(value: float) -> float:
    """Cosine; infinite input gives NaN."""
    with np.errstate(invalid="ignore"):
        return float(np.cos(np.float64(value)))


def tan(value: float) -> float:
    """Tangent; infinite input gives NaN."""
    with np.errstate(invalid="ignore"):
        return float(np.tan(np.float64(value)))


def log(value: float) -> float:
    """Natural logarithm; zero gives -Inf, negative input gives NaN."""
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.log(np.float64(value)))


def exp(value: float) -> float:
    """Exponential; overflow gives Inf."""
    with np.errstate(over="ignore"):
        return float(np.exp(np.float64(value)))


def format_number(value: float) -> str:
    """Format a stored float32 component the way JavaScript prints a number.

    The value is rounded to float32 and widened to float64, so 0.1 prints as
    0.10000000149011612. Integral values print without a decimal point and
    other values use the shortest digits that round-trip through float64.

    :param value: Value to format
    :returns: Formatted number
    """
    value = np.float64(np.float32(value))
    if np.isnan(value):
        return "NaN"
    if np.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"
    magnitude = abs(value)
    if magnitude < 1e-6 or magnitude >= 1e21:
        return np.format_float_scientific(value, unique=True, trim="-", exp_digits=1)
    return np.format_float_positional(value, unique=True, trim="-")
