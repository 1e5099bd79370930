# Pixdraw
# Copyright 2025 - Ricardo Quesada

import logging
import math
import random
from abc import abstractmethod
from dataclasses import InitVar, dataclass, field
from typing import Self

from color import Color, ColorAllocator
from raster import Canvas
from shape import Line, Point, Shape, resolve_color, resolve_rng

logger = logging.getLogger(__name__)


class Polygon(Shape):
    """
    A closed outline made of straight edges.

    Drawing a polygon is drawing the Line between each pair of consecutive vertices,
    plus the one closing the last vertex back to the first. Every edge uses the
    polygon's color.
    """

    color: Color
    _allocator: ColorAllocator | None

    @abstractmethod
    def vertices(self) -> list[Point]:
        """Returns the vertices in drawing order."""
        raise NotImplementedError

    def edges(self) -> list[Line]:
        vertices = self.vertices()
        count = len(vertices)
        return [
            Line(vertices[i], vertices[(i + 1) % count], self.color, self._allocator)
            for i in range(count)
        ]

    def draw(self, image: Canvas) -> None:
        for edge in self.edges():
            edge.draw(image)


@dataclass(eq=True)
class Triangle(Polygon):
    first: Point
    second: Point
    third: Point
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
        points = [Point.random(width, height, rng) for _ in range(3)]
        triangle = cls(*points, allocator=allocator)
        logger.debug(f"Random triangle: {triangle}")
        return triangle

    def vertices(self) -> list[Point]:
        return [self.first, self.second, self.third]

    def display(self, x: int, y: int, color: Color) -> None:
        self.first = Point(x, y)
        self.second = self.first.translated(1, 1)
        self.third = self.first.translated(2, 2)
        self.color = resolve_color(color, self._allocator)


@dataclass(eq=True)
class Rectangle(Polygon):
    """Axis-aligned rectangle given by two opposite corners, in any order."""

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
        rectangle = cls(first, second, allocator=allocator)
        logger.debug(f"Random rectangle: {rectangle}")
        return rectangle

    def vertices(self) -> list[Point]:
        return [
            self.first,
            Point(self.second.x, self.first.y),
            self.second,
            Point(self.first.x, self.second.y),
        ]

    def display(self, x: int, y: int, color: Color) -> None:
        self.first = Point(x, y)
        self.second = self.first.translated(1, 1)
        self.color = resolve_color(color, self._allocator)


@dataclass(eq=True)
class Pentagon(Polygon):
    """Regular pentagon pointing up. The vertices are derived from center and radius."""

    SIDES = 5
    MIN_RANDOM_RADIUS = 2

    center: Point
    radius: int
    color: Color | None = None
    allocator: InitVar[ColorAllocator | None] = None
    _allocator: ColorAllocator | None = field(default=None, init=False, repr=False, compare=False)

    def __post_init__(self, allocator: ColorAllocator | None):
        self._allocator = allocator
        if self.radius < 1:
            raise ValueError(f"Invalid radius {self.radius}. Must be >= 1")
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
        max_radius = max(cls.MIN_RANDOM_RADIUS + 1, min(width, height) // 2)
        radius = rng.randrange(cls.MIN_RANDOM_RADIUS, max_radius)
        pentagon = cls(center, radius, allocator=allocator)
        logger.debug(f"Random pentagon: {pentagon}")
        return pentagon

    def vertices(self) -> list[Point]:
        step = 2 * math.pi / self.SIDES
        vertices = []
        for i in range(self.SIDES):
            # Starts at -90 degrees, so the first vertex is on top
            angle = -math.pi / 2 + i * step
            # int() truncates toward zero
            x = int(self.center.x + self.radius * math.cos(angle))
            y = int(self.center.y + self.radius * math.sin(angle))
            vertices.append(Point(x, y))
        return vertices

    def display(self, x: int, y: int, color: Color) -> None:
        self.center = Point(x, y)
        self.color = resolve_color(color, self._allocator)
