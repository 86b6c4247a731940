"""String comparison and case helpers with ASCII-only case folding."""

from __future__ import annotations

__all__ = ["equals", "iequals", "contains", "to_lower"]

_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)


def to_lower(s: str) -> str:
    """Return ``s`` with ASCII upper-case letters lowered.

    Characters outside ``A``-``Z`` are left unchanged, so the result always
    has the same length as ``s``.
    """
    return s.translate(_ASCII_LOWER)


def equals(a: str, b: str) -> bool:
    """Return whether ``a`` and ``b`` have the same length and characters."""
    return len(a) == len(b) and a == b


def iequals(a: str, b: str) -> bool:
    """Return whether ``a`` and ``b`` are equal ignoring ASCII case."""
    if len(a) != len(b):
        return False
    return to_lower(a) == to_lower(b)


def contains(s: str, c: str) -> bool:
    """Return whether the single character ``c`` occurs in ``s``.

    Raises ``ValueError`` if ``c`` is not exactly one character.
    """
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    return c in s