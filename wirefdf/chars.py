"""ASCII character classification and case conversion."""

from __future__ import annotations

from typing import TypeVar

__all__ = [
    "is_alpha",
    "is_digit",
    "is_alnum",
    "is_ascii",
    "is_print",
    "to_lower",
    "to_upper",
]

Char = TypeVar("Char", int, str)


def _code(c: int | str) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return c


def is_alpha(c: int | str) -> bool:
    """Return True for an ASCII letter."""
    code = _code(c)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def is_digit(c: int | str) -> bool:
    """Return True for an ASCII decimal digit."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: int | str) -> bool:
    """Return True for an ASCII letter or digit."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: int | str) -> bool:
    """Return True for a code in the 7-bit ASCII range."""
    return 0 <= _code(c) <= 127


def is_print(c: int | str) -> bool:
    """Return True for a printable ASCII character, space included."""
    return 31 < _code(c) < 127


def _convert(c: Char, offset: int, low: str, high: str) -> Char:
    code = _code(c)
    if ord(low) <= code <= ord(high):
        code += offset
        return chr(code) if isinstance(c, str) else code
    return c


def to_lower(c: Char) -> Char:
    """Lower-case an ASCII upper-case letter; leave anything else unchanged."""
    return _convert(c, 32, "A", "Z")


def to_upper(c: Char) -> Char:
    """Upper-case an ASCII lower-case letter; leave anything else unchanged."""
    return _convert(c, -32, "a", "z")