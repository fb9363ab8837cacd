"""Packing and unpacking of 0xTTRRGGBB colour values."""

from __future__ import annotations

__all__ = ["create_trgb", "get_t", "get_r", "get_g", "get_b"]


def create_trgb(t: int, r: int, g: int, b: int) -> int:
    """Pack transparency, red, green and blue channels into one integer."""
    return t << 24 | r << 16 | g << 8 | b


def get_t(trgb: int) -> int:
    """Return the transparency channel of a packed colour."""
    return (trgb >> 24) & 0xFF


def get_r(trgb: int) -> int:
    """Return the red channel of a packed colour."""
    return (trgb >> 16) & 0xFF


def get_g(trgb: int) -> int:
    """Return the green channel of a packed colour."""
    return (trgb >> 8) & 0xFF


def get_b(trgb: int) -> int:
    """Return the blue channel of a packed colour."""
    return trgb & 0xFF