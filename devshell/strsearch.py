"""Character searches over strings: single characters and character sets."""

from __future__ import annotations

__all__ = ["find_char", "rfind_char", "find_any", "rfind_any", "find_not_any"]


def _check_char(c: str) -> None:
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")


def find_char(s: str, c: str, start: int = 0) -> int | None:
    """Return the index of the first ``c`` in ``s`` at or after ``start``.

    Returns ``None`` when there is no such occurrence, including when
    ``start`` lies past the end of ``s``. Raises ``ValueError`` if ``c`` is
    not a single character or ``start`` is negative.
    """
    _check_char(c)
    if start < 0:
        raise ValueError(f"start must be non-negative, got {start}")
    if start >= len(s):
        return None
    index = s.find(c, start)
    return None if index < 0 else index


def rfind_char(s: str, c: str) -> int | None:
    """Return the index of the last ``c`` in ``s``, or ``None`` if absent.

    Raises ``ValueError`` if ``c`` is not a single character.
    """
    _check_char(c)
    index = s.rfind(c)
    return None if index < 0 else index


def find_any(s: str, chars: str) -> int | None:
    """Return the index of the first character of ``s`` that is in ``chars``."""
    wanted = set(chars)
    return next((i for i, ch in enumerate(s) if ch in wanted), None)


def rfind_any(s: str, chars: str) -> int | None:
    """Return the index of the last character of ``s`` that is in ``chars``."""
    wanted = set(chars)
    return next(
        (i for i in reversed(range(len(s))) if s[i] in wanted),
        None,
    )


def find_not_any(s: str, chars: str) -> int | None:
    """Return the index of the first character of ``s`` not in ``chars``."""
    unwanted = set(chars)
    return next((i for i, ch in enumerate(s) if ch not in unwanted), None)