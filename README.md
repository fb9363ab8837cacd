# wirefdf

`wirefdf` reads an FdF height map and shows its grid points in a window. A
height map is a `.fdf` text file made up of rows of integer heights separated
by whitespace. Each point is drawn as one red pixel in a 1920×1080 window.

## Installing

```
pip install .
```

## Running the viewer

```
wirefdf path/to/map.fdf
```

Before anything is drawn, the viewer checks that:

- exactly one argument is given,
- the file name ends in `.fdf`,
- every field in the file is a whole number that fits in a signed 32-bit
  integer.

The file must also contain at least one line, and every line must hold at
least one field. If any check fails, the viewer writes a message to standard
error and exits with status 1.

When the checks pass, the viewer:

1. prints every point as `(x, y, z) `, one map row per line;
2. prints the image's bits per pixel and line length;
3. opens a window titled `FdF` and plots each point in red at pixel `(x, y)`.

Every key press is echoed as `Key pressed: <code>`. Press Escape, or close the
window, to quit.

## Map format

```
0 0 0 0
0 5 5 0
0 0 0 0
```

Each line is one row, and its index is `y`. Each field on a line is one
column, and its index is `x`. The field's value is the height `z`. Fields are
separated by spaces.

## What the viewer does not do

The viewer plots only the grid points themselves. It draws no lines between
neighbouring points and applies no projection, scaling or use of the heights.
A map with more than 1920 columns or 1080 rows does not fit the image, and
plotting it raises `IndexError`.

## Using the library

- `wirefdf.mapfile` reads and checks maps. It provides `read_map`,
  `parse_row`, `split_fields`, `check_line`, `check_chars`,
  `check_arguments` and `format_map`, together with the `Point` and `Row`
  dataclasses. Every failure raises `MapError`.
- `wirefdf.draw` provides `Image`, an in-memory grid of 32-bit pixels with
  `put_pixel`, `pixel` and `to_bytes`. It also provides `draw_points` for
  plotting parsed rows, and the constants `WIN_WIDTH`, `WIN_HEIGHT` and
  `ZOOM`.
- `wirefdf.app` holds the viewer: `main`, `render` (builds the window-sized
  image), `show` (displays it with pygame) and `handle_keypress`.
- `wirefdf.rgb` packs and unpacks 0xTTRRGGBB colours with `create_trgb`,
  `get_t`, `get_r`, `get_g` and `get_b`.
- `wirefdf.linereader` provides `LineReader`. It reads a text or binary stream
  in chunks of a fixed buffer size and yields the lines, each with its
  newline.
- `wirefdf.numbers` provides `atoi` (lenient), `strict_atoi` (whole string,
  32-bit range, raises `NumberError`) and `itoa`.
- `wirefdf.printf` provides `render` and `printf`, which handle `%c %s %p %d
  %i %u %x %X %%`, plus `format_decimal`, `format_hex`, `format_pointer` and
  `FormatError`.
- The helper modules `wirefdf.chars`, `wirefdf.strings`, `wirefdf.memory`,
  `wirefdf.linked` and `wirefdf.output` cover character classification,
  bounded string operations, byte-buffer operations, a singly linked list
  (`ListNode`, `lst_*`) and writing to text streams.

```python
from wirefdf.mapfile import read_map, format_map
from wirefdf.draw import Image, draw_points

rows = read_map("map.fdf")
print(format_map(rows))
image = Image(1920, 1080)
draw_points(image, rows, 0xFF0000)
assert image.pixel(0, 0) == 0xFF0000
```

## Running the tests

```
pip install .[test]
pytest
```