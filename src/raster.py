# Pixdraw
# Copyright 2025 - Ricardo Quesada

"""
Integer-only scan conversion.

The generators yield raw pixel coordinates, which may lie outside the canvas.
Clipping is done per pixel by plot() right before writing.
"""

from collections.abc import Iterable, Iterator
from typing import Protocol

from color import Color


class Canvas(Protocol):
    """Anything with a size and a way to set one pixel.

    Implementations don't need to validate coordinates: the rasterizer never
    calls set_pixel() with out-of-range values.
    """

    @property
    def width(self) -> int: ...

    @property
    def height(self) -> int: ...

    def set_pixel(self, x: int, y: int, color: Color) -> None: ...


def in_bounds(image: Canvas, x: int, y: int) -> bool:
    return 0 <= x < image.width and 0 <= y < image.height


def plot(image: Canvas, points: Iterable[tuple[int, int]], color: Color) -> int:
    """Writes the in-bounds points with color. Returns the number of writes."""
    written = 0
    width, height = image.width, image.height
    for x, y in points:
        if 0 <= x < width and 0 <= y < height:
            image.set_pixel(x, y, color)
            written += 1
    return written


def line_points(x0: int, y0: int, x1: int, y1: int) -> Iterator[tuple[int, int]]:
    """Bresenham's line, endpoints included."""
    # Always walk from the smaller endpoint so both directions give the same pixels
    if (x1, y1) < (x0, y0):
        x0, y0, x1, y1 = x1, y1, x0, y0

    dx = abs(x1 - x0)
    dy = -abs(y1 - y0)
    sx = 1 if x0 < x1 else -1
    sy = 1 if y0 < y1 else -1
    err = dx + dy

    x, y = x0, y0
    while True:
        yield x, y
        if x == x1 and y == y1:
            break
        e2 = 2 * err
        if e2 >= dy:
            err += dy
            x += sx
        if e2 <= dx:
            err += dx
            y += sy


def circle_points(cx: int, cy: int, radius: int) -> Iterator[tuple[int, int]]:
    """
    Midpoint circle outline.

    Yields the 8 symmetric points of each octant step. Points on the axes and on the
    diagonals are yielded more than once, writing them twice is harmless.
    """
    if radius < 0:
        raise ValueError(f"Invalid radius {radius}. Must be >= 0")

    x = 0
    y = radius
    d = 3 - 2 * radius
    while y >= x:
        yield cx + x, cy + y
        yield cx - x, cy + y
        yield cx + x, cy - y
        yield cx - x, cy - y
        yield cx + y, cy + x
        yield cx - y, cy + x
        yield cx + y, cy - x
        yield cx - y, cy - x
        if d <= 0:
            d += 4 * x + 6
        else:
            d += 4 * (x - y) + 10
            y -= 1
        x += 1


def draw_line(image: Canvas, x0: int, y0: int, x1: int, y1: int, color: Color) -> None:
    plot(image, line_points(x0, y0, x1, y1), color)


def draw_circle(image: Canvas, cx: int, cy: int, radius: int, color: Color) -> None:
    plot(image, circle_points(cx, cy, radius), color)
