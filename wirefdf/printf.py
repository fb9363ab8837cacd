"""A small printf supporting the %c %s %p %d %i %u %x %X and %% conversions."""

from __future__ import annotations

import sys
from typing import Any, Iterator

__all__ = ["FormatError", "format_decimal", "format_hex", "format_pointer", "render", "printf"]

_UINT_MASK = 0xFFFFFFFF
_POINTER_MASK = 0xFFFFFFFFFFFFFFFF


class FormatError(ValueError):
    """Raised for a malformed format string or missing arguments."""


def format_decimal(n: int) -> str:
    """Return the signed decimal text of n."""
    return str(int(n))


def format_hex(n: int, upper: bool = False) -> str:
    """Return the hexadecimal digits of a non-negative n, without prefix."""
    n = int(n)
    if n < 0:
        raise ValueError(f"cannot format a negative number as hex: {n}")
    return format(n, "X" if upper else "x")


def format_pointer(address: int) -> str:
    """Return an address as 0x-prefixed lower-case hex, or (nil) for zero."""
    address = int(address)
    if address <= 0:
        return "(nil)"
    return "0x" + format_hex(address)


def _to_int32(value: int) -> int:
    value = int(value) & _UINT_MASK
    return value - (1 << 32) if value & 0x80000000 else value


def _next_arg(args: Iterator[Any], spec: str) -> Any:
    try:
        return next(args)
    except StopIteration:
        raise FormatError(f"missing argument for %{spec}") from None


def _format_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise FormatError(f"%c needs a single character, got {value!r}")
        return value
    return chr(int(value) & 0xFF)


def _convert(spec: str, args: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    if spec not in "cspdiuxX":
        return ""
    value = _next_arg(args, spec)
    if spec == "c":
        return _format_char(value)
    if spec == "s":
        return "(null)" if value is None else str(value)
    if spec == "p":
        return format_pointer(int(value) & _POINTER_MASK)
    if spec in "di":
        return format_decimal(_to_int32(value))
    if spec == "u":
        return format_decimal(int(value) & _UINT_MASK)
    return format_hex(int(value) & _UINT_MASK, upper=spec == "X")


def render(fmt: str, *args: Any) -> str:
    """Return fmt with its conversions replaced by the formatted arguments.

    Unknown conversions produce nothing; a lone '%' at the end of the
    format raises FormatError.
    """
    if fmt is None:
        raise FormatError("no format string")
    remaining = iter(args)
    pieces: list[str] = []
    i = 0
    while i < len(fmt):
        ch = fmt[i]
        if ch != "%":
            pieces.append(ch)
            i += 1
            continue
        if i + 1 >= len(fmt):
            raise FormatError("format string ends with a lone '%'")
        pieces.append(_convert(fmt[i + 1], remaining))
        i += 2
    return "".join(pieces)


def printf(fmt: str, *args: Any) -> int:
    """Write the rendered format to standard output; return the characters written."""
    text = render(fmt, *args)
    sys.stdout.write(text)
    return len(text)