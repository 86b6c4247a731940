"""Small numeric helpers: power-of-two rounding and trigonometry."""

from __future__ import annotations

import math

__all__ = [
    "next_pow2",
    "prev_pow2",
    "sin",
    "asin",
    "cos",
    "acos",
    "tan",
    "atan",
]


def _check_size(n: int) -> None:
    if n < 0:
        raise ValueError(f"expected a non-negative size, got {n}")


def next_pow2(n: int) -> int:
    """Return the smallest power of two strictly greater than ``n``.

    ``next_pow2(0)`` is 1. A value that is already a power of two is
    rounded up to the next one.
    """
    _check_size(n)
    return 1 << n.bit_length()


def prev_pow2(n: int) -> int:
    """Return the largest power of two not greater than ``n`` (0 for 0)."""
    return next_pow2(n) >> 1


def sin(x: float) -> float:
    """Sine of ``x`` radians."""
    return math.sin(x)


def asin(x: float) -> float:
    """Arc sine of ``x``, in radians."""
    return math.asin(x)


def cos(x: float) -> float:
    """Cosine of ``x`` radians."""
    return math.cos(x)


def acos(x: float) -> float:
    """Arc cosine of ``x``, in radians."""
    return math.acos(x)


def tan(x: float) -> float:
    """Tangent of ``x`` radians."""
    return math.tan(x)


def atan(x: float) -> float:
    """Arc tangent of ``x``, in radians."""
    return math.atan(x)