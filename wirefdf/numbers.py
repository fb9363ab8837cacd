"""Conversion between decimal text and integers."""

from __future__ import annotations

__all__ = ["NumberError", "atoi", "strict_atoi", "itoa"]

_WHITESPACE = frozenset(" \t\n\v\f\r")
_INT_MIN = -2147483648
_INT_MAX = 2147483647


class NumberError(ValueError):
    """Raised when text is not a valid 32-bit decimal integer."""


def _is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def _skip_space(text: str, i: int = 0) -> int:
    while i < len(text) and text[i] in _WHITESPACE:
        i += 1
    return i


def atoi(text: str) -> int:
    """Leniently read a leading decimal number, ignoring anything after it."""
    i = _skip_space(text)
    sign = 1
    if i < len(text) and text[i] in "+-":
        if text[i] == "-":
            sign = -1
        i += 1
    value = 0
    while i < len(text) and _is_digit(text[i]):
        value = value * 10 + int(text[i])
        i += 1
    return value * sign


def strict_atoi(text: str) -> int:
    """Read a whole string as a 32-bit signed decimal number.

    Leading whitespace is allowed; anything else after the digits, an empty
    string, or a value outside the 32-bit range raises NumberError.
    """
    if not text:
        raise NumberError("empty number")
    i = _skip_space(text)
    sign = 1
    if i + 1 < len(text) and text[i] in "+-":
        if text[i] == "-":
            sign = -1
        i += 1
    value = 0
    while i < len(text) and _is_digit(text[i]):
        value = value * 10 + int(text[i])
        i += 1
        if value > -_INT_MIN:
            raise NumberError(f"number out of range: {text!r}")
    value *= sign
    if i < len(text) or not _INT_MIN <= value <= _INT_MAX:
        raise NumberError(f"invalid number: {text!r}")
    return value


def itoa(n: int) -> str:
    """Return the decimal text of an integer."""
    return str(int(n))