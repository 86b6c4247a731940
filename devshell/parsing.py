"""Tokenising and value parsing for console input, plus vector formatting."""

from __future__ import annotations

import math
import re
import struct
from typing import Iterable

__all__ = [
    "split",
    "parse_bool",
    "parse_int",
    "parse_float",
    "parse_vec",
    "parse_vec2",
    "parse_vec3",
    "parse_vec4",
    "format_vec",
]

_INT_RE = re.compile(r"-?[0-9]+")
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1

_HEX_FLOAT_RE = re.compile(
    r"[+-]?0[xX](?:[0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)(?:[pP][+-]?[0-9]+)?"
)
_DEC_FLOAT_RE = re.compile(
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)


def split(s: str) -> list[str]:
    """Split ``s`` on single spaces, dropping tokens made only of newlines.

    Raises ``ValueError`` for an empty string.
    """
    if not s:
        raise ValueError("cannot split empty input")
    return [token for token in s.split(" ") if token.strip("\n")]


def _leading_int(s: str) -> int | None:
    match = _INT_RE.match(s)
    if match is None:
        return None
    return int(match.group())


def parse_int(s: str) -> int:
    """Parse a leading 32-bit signed integer from ``s``.

    Trailing characters after the digits are ignored. Raises ``ValueError``
    when no digits lead the string or the value does not fit.
    """
    value = _leading_int(s)
    if value is None:
        raise ValueError(f"not an integer: {s!r}")
    if not _INT_MIN <= value <= _INT_MAX:
        raise ValueError(f"integer out of range: {s!r}")
    return value


def parse_bool(s: str) -> bool:
    """Parse a boolean.

    A leading integer is true when non-zero; otherwise ``true`` (any case)
    is true and anything else is false. An integer too large for 32 bits
    raises ``ValueError``.
    """
    value = _leading_int(s)
    if value is not None:
        if not _INT_MIN <= value <= _INT_MAX:
            raise ValueError(f"integer out of range: {s!r}")
        return value != 0
    return s.lower() == "true"


def _to_f32(x: float) -> float:
    if math.isnan(x) or math.isinf(x):
        return x
    try:
        return struct.unpack("f", struct.pack("f", x))[0]
    except OverflowError:
        return math.copysign(math.inf, x)


def parse_float(s: str) -> float:
    """Parse a leading floating-point number from ``s`` as single precision.

    Leading whitespace is skipped; text with no number yields 0.0.
    """
    text = s.lstrip(" \t\n\r\f\v")
    match = _HEX_FLOAT_RE.match(text)
    if match is not None:
        return _to_f32(float.fromhex(match.group()))
    match = _DEC_FLOAT_RE.match(text)
    if match is None:
        return 0.0
    return _to_f32(float(match.group()))


def parse_vec(s: str, n: int) -> tuple[float, ...]:
    """Parse the first ``n`` space-separated floats of ``s``.

    Raises ``ValueError`` when fewer than ``n`` tokens are present.
    """
    tokens = split(s)
    if len(tokens) < n:
        raise ValueError(f"expected {n} components, got {len(tokens)}")
    return tuple(parse_float(token) for token in tokens[:n])


def parse_vec2(s: str) -> tuple[float, float]:
    """Parse a two-component vector."""
    return parse_vec(s, 2)  # type: ignore[return-value]


def parse_vec3(s: str) -> tuple[float, float, float]:
    """Parse a three-component vector."""
    return parse_vec(s, 3)  # type: ignore[return-value]


def parse_vec4(s: str) -> tuple[float, float, float, float]:
    """Parse a four-component vector."""
    return parse_vec(s, 4)  # type: ignore[return-value]


def _format_component(x: float) -> str:
    text = repr(float(x))
    if text.endswith(".0"):
        text = text[:-2]
    return text


def format_vec(v: Iterable[float]) -> str:
    """Format vector components separated by single spaces, shortest form."""
    return " ".join(_format_component(x) for x in v)