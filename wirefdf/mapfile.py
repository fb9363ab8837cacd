"""Reading and validating height maps: rows of whitespace-separated integers."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Iterable, Sequence, Union

from wirefdf.linereader import LineReader
from wirefdf.numbers import NumberError, strict_atoi

__all__ = [
    "MapError",
    "Point",
    "Row",
    "split_fields",
    "parse_row",
    "check_line",
    "check_chars",
    "check_arguments",
    "read_map",
    "format_map",
]

_PREFIX = "[fdf] ERROR - "
_USAGE = ' | Usage: ./fdf "MAP PATH"'
_SEPARATORS = " \n"

PathLike = Union[str, "os.PathLike[str]"]


class MapError(ValueError):
    """Raised for a bad command line or an unreadable or malformed map."""


@dataclass(frozen=True)
class Point:
    """One grid point: column x, row y and height z."""

    x: int
    y: int
    z: int


@dataclass
class Row:
    """One line of a map with its index and points."""

    index: int
    points: list[Point] = field(default_factory=list)


def split_fields(line: str) -> list[str]:
    """Split a map line on spaces and newlines, dropping empty fields."""
    fields: list[str] = []
    current: list[str] = []
    for ch in line:
        if ch in _SEPARATORS:
            if current:
                fields.append("".join(current))
                current = []
        else:
            current.append(ch)
    if current:
        fields.append("".join(current))
    return fields


def _height(token: str) -> int:
    try:
        return strict_atoi(token)
    except NumberError as exc:
        raise MapError(f"invalid height {token!r}") from exc


def parse_row(line: str, y: int) -> Row:
    """Parse one map line into the row with index y."""
    return Row(y, [Point(x, y, _height(token)) for x, token in enumerate(split_fields(line))])


def check_line(line: str) -> None:
    """Raise MapError unless every field of line is a 32-bit integer."""
    for token in split_fields(line):
        _height(token)


def check_chars(path: PathLike) -> int:
    """Validate every line of the map file; return the line count minus one."""
    try:
        handle = open(path, encoding="utf-8")
    except OSError as exc:
        raise MapError(_PREFIX + "fd not work in parsing") from exc
    count = 0
    with handle:
        for line in LineReader(handle):
            check_line(line)
            count += 1
    return count - 1


def check_arguments(args: Sequence[str]) -> int:
    """Check the command-line arguments (program name excluded) and the map they name."""
    args = list(args)
    if len(args) > 1:
        raise MapError(_PREFIX + "Too many arguments" + _USAGE)
    if not args:
        raise MapError(_PREFIX + "No arguments" + _USAGE)
    path = str(args[0])
    if not path.endswith(".fdf"):
        raise MapError(_PREFIX + "Invalid file extension" + _USAGE)
    return check_chars(path)


def read_map(path: PathLike) -> list[Row]:
    """Read a map file into its rows; an empty file or a line without points is an error."""
    try:
        handle = open(path, encoding="utf-8")
    except OSError as exc:
        raise MapError(_PREFIX + "Invalid map or map path") from exc
    rows: list[Row] = []
    with handle:
        for y, line in enumerate(LineReader(handle)):
            row = parse_row(line, y)
            if not row.points:
                raise MapError("Error when adding lines")
            rows.append(row)
    if not rows:
        raise MapError("map file is empty")
    return rows


def format_map(rows: Iterable[Row]) -> str:
    """Render rows as lines of '(x, y, z) ' groups."""
    return "".join(
        "".join(f"({p.x}, {p.y}, {p.z}) " for p in row.points) + "\n" for row in rows
    )