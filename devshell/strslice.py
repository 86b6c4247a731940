"""Character access, substrings and delimiter tokenising."""

from __future__ import annotations

__all__ = ["char_at", "substr", "tokenize"]


def char_at(s: str, i: int) -> str:
    """Return the character of ``s`` at index ``i``.

    An index at or past the end yields ``"\\0"``, the terminator that
    follows the last character. Raises ``ValueError`` for a negative index.
    """
    if i < 0:
        raise ValueError(f"index must be non-negative, got {i}")
    if i >= len(s):
        return "\0"
    return s[i]


def substr(s: str, start: int, length: int | None = None) -> str:
    """Return up to ``length`` characters of ``s`` beginning at ``start``.

    A ``start`` at or past the end gives an empty string; a ``length`` of
    ``None`` or one running past the end is truncated to the end of ``s``.
    Raises ``ValueError`` for a negative ``start`` or ``length``.
    """
    if start < 0:
        raise ValueError(f"start must be non-negative, got {start}")
    if length is not None and length < 0:
        raise ValueError(f"length must be non-negative, got {length}")
    if start >= len(s):
        return ""
    if length is None:
        return s[start:]
    return s[start : start + length]


def tokenize(s: str, delim: str, limit: int | None = None) -> list[str]:
    """Split ``s`` around each ``delim``, excluding the delimiter itself.

    Empty tokens between adjacent delimiters are skipped. At most ``limit``
    tokens are returned (all of them when ``limit`` is ``None``). A limit of
    zero or a NUL delimiter yields no tokens. Raises ``ValueError`` when
    ``delim`` is not a single character or ``limit`` is negative.
    """
    if len(delim) != 1:
        raise ValueError(f"expected a single character delimiter, got {delim!r}")
    if limit is not None and limit < 0:
        raise ValueError(f"limit must be non-negative, got {limit}")
    if limit == 0 or delim == "\0":
        return []
    tokens = [token for token in s.split(delim) if token]
    return tokens if limit is None else tokens[:limit]