"""String helpers with the bounds and edge cases of the classic C routines."""

from __future__ import annotations

from typing import Callable, MutableSequence, Optional, Union

__all__ = [
    "strlen",
    "strchr",
    "strrchr",
    "strdup",
    "strjoin",
    "strlcpy",
    "strlcat",
    "strncmp",
    "strnstr",
    "strmapi",
    "striteri",
    "strtrim",
    "substr",
    "split",
]

CharLike = Union[str, int]


def _require_str(value, name: str) -> str:
    if not isinstance(value, str):
        raise TypeError(f"{name} must be a string, got {type(value).__name__}")
    return value


def _char(c: CharLike) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(c)


def _code_at(s, i: int) -> int:
    """Character code at i, or 0 past the end (the terminator)."""
    if i >= len(s):
        return 0
    ch = s[i]
    return ord(ch) if isinstance(ch, str) else ch


def strlen(s: str) -> int:
    """Return the number of characters in s."""
    return len(_require_str(s, "s"))


def strchr(s: str, c: CharLike) -> Optional[int]:
    """Return the index of the first c in s, or None.

    Searching for the NUL character yields the length of s.
    """
    s = _require_str(s, "s")
    ch = _char(c)
    if ch == "\0":
        return len(s)
    index = s.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Return the index of the last c in s, or None.

    Searching for the NUL character yields the length of s.
    """
    s = _require_str(s, "s")
    ch = _char(c)
    if ch == "\0":
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def strdup(s: str) -> str:
    """Return a copy of s."""
    return "".join(_require_str(s, "s"))


def strjoin(first: str, second: str) -> str:
    """Return first followed by second."""
    return _require_str(first, "first") + _require_str(second, "second")


def strlcpy(dest: str, src: str, size: int) -> tuple[str, int]:
    """Copy src into a buffer of size characters (terminator included).

    Returns the new buffer contents and the full length of src. With a
    size of 0 the destination is left untouched.
    """
    src = _require_str(src, "src")
    if size < 0:
        raise ValueError(f"negative size: {size}")
    if size == 0:
        return dest, len(src)
    return src[: size - 1], len(src)


def strlcat(dest: Optional[str], src: Optional[str], size: int) -> tuple[Optional[str], int]:
    """Append src to dest within a buffer of size characters.

    Returns the new buffer contents and the length the result would have
    had without truncation.
    """
    if size < 0:
        raise ValueError(f"negative size: {size}")
    if (dest is None or src is None) and size == 0:
        return dest, 0
    dest = _require_str(dest, "dest")
    src = _require_str(src, "src")
    if size <= len(dest):
        return dest, size + len(src)
    room = size - len(dest) - 1
    return dest + src[:room], len(dest) + len(src)


def strncmp(first, second, n: int) -> int:
    """Compare at most n characters; return the difference of the first mismatch."""
    if n < 0:
        raise ValueError(f"negative length: {n}")
    for i in range(n):
        a = _code_at(first, i)
        b = _code_at(second, i)
        if a != b or a == 0:
            return a - b
    return 0


def strnstr(haystack: Optional[str], needle: str, length: int) -> Optional[int]:
    """Return the index of needle within the first length characters of haystack."""
    if haystack is None and length == 0:
        return None
    haystack = _require_str(haystack, "haystack")
    needle = _require_str(needle, "needle")
    if not needle:
        return 0
    if length < 0:
        raise ValueError(f"negative length: {length}")
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """Return a new string of f(index, char) for every character of s."""
    return "".join(f(i, ch) for i, ch in enumerate(_require_str(s, "s")))


def striteri(chars: MutableSequence[str], f: Callable[[int, str], str]) -> None:
    """Replace every character of chars in place with f(index, char)."""
    for i, ch in enumerate(list(chars)):
        chars[i] = f(i, ch)


def strtrim(s: str, charset: str) -> str:
    """Strip every character of charset from both ends of s."""
    return _require_str(s, "s").strip(_require_str(charset, "charset"))


def substr(s: str, start: int, length: int) -> str:
    """Return at most length characters of s starting at start."""
    s = _require_str(s, "s")
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(s):
        return ""
    return s[start : start + length]


def split(s: str, sep: CharLike) -> list[str]:
    """Split s on the separator character, dropping empty pieces."""
    s = _require_str(s, "s")
    return [word for word in s.split(_char(sep)) if word]