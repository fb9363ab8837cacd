import pytest

from wirefdf.draw import Image, draw_points
from wirefdf.mapfile import parse_row


def test_new_image_is_blank():
    image = Image(4, 3)
    assert all(image.pixel(x, y) == 0 for x in range(4) for y in range(3))
    assert image.to_bytes() == bytes(4 * 3 * 4)


def test_layout_properties():
    image = Image(5, 2)
    assert image.bits_per_pixel == 32
    assert image.line_length == 5 * 4
    assert len(image.to_bytes()) == image.line_length * 2


def test_put_pixel_round_trip():
    image = Image(10, 10)
    image.put_pixel(3, 7, 0xFF0000)
    assert image.pixel(3, 7) == 0xFF0000
    assert image.pixel(7, 3) == 0


def test_pixel_is_stored_little_endian_at_row_offset():
    image = Image(3, 2)
    image.put_pixel(1, 1, 0x11223344)
    raw = image.to_bytes()
    offset = 1 * image.line_length + 1 * 4
    assert raw[offset : offset + 4] == bytes([0x44, 0x33, 0x22, 0x11])
    assert raw[:offset] == bytes(offset)


def test_out_of_bounds_raises():
    image = Image(2, 2)
    with pytest.raises(IndexError):
        image.put_pixel(2, 0, 1)
    with pytest.raises(IndexError):
        image.pixel(0, -1)


def test_invalid_size_raises():
    with pytest.raises(ValueError):
        Image(0, 5)


def test_draw_points_marks_every_point():
    rows = [parse_row("0 1 2\n", 0), parse_row("3 4 5\n", 1)]
    image = Image(8, 8)
    draw_points(image, rows, 0x00FF00)
    for row in rows:
        for point in row.points:
            assert image.pixel(point.x, point.y) == 0x00FF00
    lit = sum(
        1 for x in range(8) for y in range(8) if image.pixel(x, y) == 0x00FF00
    )
    assert lit == sum(len(row.points) for row in rows)


def test_draw_points_outside_image_raises():
    rows = [parse_row("1 1 1 1\n", 0)]
    with pytest.raises(IndexError):
        draw_points(Image(2, 2), rows, 0xFFFFFF)