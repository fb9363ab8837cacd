"""Writing characters, strings and numbers to text streams."""

from __future__ import annotations

from typing import Optional, TextIO, Union

__all__ = ["put_char", "put_str", "put_endl", "put_nbr"]


def put_char(c: Union[str, int], stream: TextIO) -> None:
    """Write one character (or character code) to stream."""
    if isinstance(c, int):
        c = chr(c)
    elif len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    stream.write(c)


def put_str(s: Optional[str], stream: TextIO) -> None:
    """Write s to stream; a missing string writes nothing."""
    if s is None:
        return
    stream.write(s)


def put_endl(s: Optional[str], stream: TextIO) -> None:
    """Write s followed by a newline; a missing string writes nothing."""
    if s is None:
        return
    stream.write(s + "\n")


def put_nbr(n: int, stream: TextIO) -> None:
    """Write the decimal text of n to stream."""
    stream.write(str(int(n)))