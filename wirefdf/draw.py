"""An in-memory 32-bit pixel image and plotting of map points onto it."""

from __future__ import annotations

from typing import Iterable

from wirefdf.mapfile import Row

__all__ = ["WIN_WIDTH", "WIN_HEIGHT", "ZOOM", "Image", "draw_points"]

WIN_WIDTH = 1920
WIN_HEIGHT = 1080
ZOOM = 20

_BITS_PER_PIXEL = 32
_COLOR_MASK = 0xFFFFFFFF


class Image:
    """A width x height grid of 32-bit little-endian 0xTTRRGGBB pixels."""

    def __init__(self, width: int = WIN_WIDTH, height: int = WIN_HEIGHT) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"image size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.bits_per_pixel = _BITS_PER_PIXEL
        self.line_length = width * (self.bits_per_pixel // 8)
        self.endian = 0
        self._data = bytearray(self.line_length * height)

    def _offset(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(
                f"pixel ({x}, {y}) outside image of {self.width}x{self.height}"
            )
        return y * self.line_length + x * (self.bits_per_pixel // 8)

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Set the pixel at column x, row y to color."""
        offset = self._offset(x, y)
        self._data[offset : offset + 4] = (color & _COLOR_MASK).to_bytes(4, "little")

    def pixel(self, x: int, y: int) -> int:
        """Return the colour of the pixel at column x, row y."""
        offset = self._offset(x, y)
        return int.from_bytes(self._data[offset : offset + 4], "little")

    def to_bytes(self) -> bytes:
        """Return the raw pixel data, row by row."""
        return bytes(self._data)


def draw_points(image: Image, rows: Iterable[Row], color: int) -> None:
    """Plot every point of the map rows at its (x, y) position in color."""
    for row in rows:
        for point in row.points:
            image.put_pixel(point.x, point.y, color)