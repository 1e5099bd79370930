# Pixdraw
# Copyright 2025 - Ricardo Quesada

import logging
import random
from abc import ABC, abstractmethod
from dataclasses import InitVar, dataclass, field
from typing import Self

import raster
from color import WHITE, Color, ColorAllocator, get_global_allocator
from raster import Canvas

logger = logging.getLogger(__name__)

_default_rng = random.Random()


def resolve_color(color: Color | None, allocator: ColorAllocator | None = None) -> Color:
    """Allocates a color when none is given, otherwise reserves the given one."""
    if allocator is None:
        allocator = get_global_allocator()
    if color is None:
        return allocator.allocate()
    allocator.reserve(color)
    return color


def resolve_rng(rng: random.Random | None) -> random.Random:
    return rng if rng is not None else _default_rng


class Shape(ABC):
    """An abstract base class for all shape types.

    It defines the common interface that all concrete shapes must implement:
    drawing onto a canvas and being repositioned with display().
    By setting __hash__ = None, we make all subclasses unhashable by default.
    This is the correct behavior for mutable objects. Subclasses that are
    immutable can override this and implement their own __hash__.
    """

    __hash__ = None

    @abstractmethod
    def draw(self, image: Canvas) -> None:
        """Writes the shape's pixels into image. Never modifies the shape."""
        raise NotImplementedError

    @abstractmethod
    def display(self, x: int, y: int, color: Color):
        """Moves the shape so that its anchor sits at (x, y), and recolors it."""
        raise NotImplementedError


@dataclass(frozen=True)
class Point(Shape):
    """Represents a point in 2D space.

    Using a frozen dataclass makes instances immutable, hashable, and
    provides an __eq__ method automatically. Any integer is valid, including
    coordinates outside the canvas.
    """

    x: int
    y: int

    @classmethod
    def random(cls, width: int, height: int, rng: random.Random | None = None) -> Self:
        """Returns a point with x in [0, width) and y in [0, height)."""
        if width <= 0 or height <= 0:
            raise ValueError(f"Invalid range {width}x{height}. Width and height must be > 0")
        rng = resolve_rng(rng)
        return cls(rng.randrange(width), rng.randrange(height))

    def translated(self, dx: int, dy: int) -> "Point":
        return Point(self.x + dx, self.y + dy)

    def draw(self, image: Canvas, color: Color = WHITE) -> None:
        raster.plot(image, [(self.x, self.y)], color)

    def display(self, x: int, y: int, color: Color | None = None) -> "Point":
        # Points are immutable: return the relocated one. Points don't carry a color.
        return Point(x, y)


@dataclass(eq=True)
class Line(Shape):
    first: Point
    second: Point
    color: Color | None = None
    allocator: InitVar[ColorAllocator | None] = None
    _allocator: ColorAllocator | None = field(default=None, init=False, repr=False, compare=False)

    def __post_init__(self, allocator: ColorAllocator | None):
        self._allocator = allocator
        self.color = resolve_color(self.color, allocator)

    @classmethod
    def random(
        cls,
        width: int,
        height: int,
        allocator: ColorAllocator | None = None,
        rng: random.Random | None = None,
    ) -> Self:
        first = Point.random(width, height, rng)
        second = Point.random(width, height, rng)
        line = cls(first, second, allocator=allocator)
        logger.debug(f"Random line: {line}")
        return line

    def draw(self, image: Canvas) -> None:
        raster.draw_line(image, self.first.x, self.first.y, self.second.x, self.second.y, self.color)

    def display(self, x: int, y: int, color: Color) -> None:
        self.first = Point(x, y)
        self.second = self.first.translated(1, 1)
        self.color = resolve_color(color, self._allocator)


@dataclass(eq=True)
class Circle(Shape):
    center: Point
    radius: int
    color: Color | None = None
    allocator: InitVar[ColorAllocator | None] = None
    _allocator: ColorAllocator | None = field(default=None, init=False, repr=False, compare=False)

    def __post_init__(self, allocator: ColorAllocator | None):
        self._allocator = allocator
        if self.radius < 0:
            raise ValueError(f"Invalid radius {self.radius}. Must be >= 0")
        self.color = resolve_color(self.color, allocator)

    @classmethod
    def random(
        cls,
        width: int,
        height: int,
        allocator: ColorAllocator | None = None,
        rng: random.Random | None = None,
    ) -> Self:
        center = Point.random(width, height, rng)
        rng = resolve_rng(rng)
        radius = rng.randrange(max(1, min(width, height) // 2))
        circle = cls(center, radius, allocator=allocator)
        logger.debug(f"Random circle: {circle}")
        return circle

    def draw(self, image: Canvas) -> None:
        raster.draw_circle(image, self.center.x, self.center.y, self.radius, self.color)

    def display(self, x: int, y: int, color: Color) -> None:
        self.center = Point(x, y)
        self.color = resolve_color(color, self._allocator)
