"""Command-line viewer: read a map, plot its points and show them in a window."""

from __future__ import annotations

import sys
from typing import Iterable, Optional, Sequence

from wirefdf.draw import WIN_HEIGHT, WIN_WIDTH, Image, draw_points
from wirefdf.mapfile import MapError, Row, check_arguments, format_map, read_map
from wirefdf.printf import printf

__all__ = ["ESCAPE_KEYCODE", "handle_keypress", "render", "show", "main"]

ESCAPE_KEYCODE = 65307
DEFAULT_COLOR = 0xFF0000
WINDOW_TITLE = "FdF"


def handle_keypress(keycode: int) -> bool:
    """Report a key press; return True when it should close the window."""
    printf("Key pressed: %d\n", keycode)
    return keycode == ESCAPE_KEYCODE


def render(rows: Iterable[Row], color: int = DEFAULT_COLOR) -> Image:
    """Return a window-sized image with every map point plotted in color."""
    image = Image(WIN_WIDTH, WIN_HEIGHT)
    printf("bits per pixel %d\n", image.bits_per_pixel)
    printf("line lenght %d\n", image.line_length)
    draw_points(image, rows, color)
    return image


def _rgb_bytes(image: Image) -> bytes:
    raw = image.to_bytes()
    rgb = bytearray(image.width * image.height * 3)
    rgb[0::3] = raw[2::4]
    rgb[1::3] = raw[1::4]
    rgb[2::3] = raw[0::4]
    return bytes(rgb)


def show(image: Image) -> None:
    """Display image in a window until it is closed or Escape is pressed."""
    import pygame

    pygame.init()
    try:
        screen = pygame.display.set_mode((image.width, image.height))
        pygame.display.set_caption(WINDOW_TITLE)
        surface = pygame.image.frombuffer(
            _rgb_bytes(image), (image.width, image.height), "RGB"
        )
        screen.blit(surface, (0, 0))
        pygame.display.flip()
        while True:
            event = pygame.event.wait()
            if event.type == pygame.QUIT:
                break
            if event.type == pygame.KEYDOWN:
                code = ESCAPE_KEYCODE if event.key == pygame.K_ESCAPE else event.key
                if handle_keypress(code):
                    break
            elif event.type == pygame.VIDEOEXPOSE:
                screen.blit(surface, (0, 0))
                pygame.display.flip()
    finally:
        pygame.quit()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the viewer on the map named on the command line."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        check_arguments(args)
        rows = read_map(args[0])
    except MapError as exc:
        sys.stderr.write(f"{exc}\n")
        return 1
    sys.stdout.write(format_map(rows))
    show(render(rows, DEFAULT_COLOR))
    return 0


if __name__ == "__main__":
    sys.exit(main())