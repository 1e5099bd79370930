# Pixdraw
# Copyright 2025 - Ricardo Quesada

import logging
import random
from collections.abc import Iterable
from enum import IntEnum, auto

from color import ColorAllocator, get_global_allocator
from polygon import Pentagon, Rectangle, Triangle
from raster import Canvas
from shape import Circle, Line, Point, Shape

logger = logging.getLogger(__name__)


class ShapeFactory:
    """
    Builds shapes with random geometry inside a width x height area.

    All the shapes created by one factory get their colors from the same allocator,
    so no two of them share an RGB color.
    """

    class Kind(IntEnum):
        POINT = auto()
        LINE = auto()
        TRIANGLE = auto()
        RECTANGLE = auto()
        CIRCLE = auto()
        PENTAGON = auto()

    def __init__(
        self,
        width: int,
        height: int,
        allocator: ColorAllocator | None = None,
        rng: random.Random | None = None,
    ):
        if width <= 0 or height <= 0:
            raise ValueError(f"Invalid range {width}x{height}. Width and height must be > 0")
        self._width = width
        self._height = height
        self._allocator = allocator if allocator is not None else get_global_allocator()
        self._rng = rng if rng is not None else random.Random()

    @property
    def allocator(self) -> ColorAllocator:
        return self._allocator

    def create(self, kind: Kind) -> Shape:
        w, h = self._width, self._height
        if kind == ShapeFactory.Kind.POINT:
            return Point.random(w, h, self._rng)
        if kind == ShapeFactory.Kind.LINE:
            return Line.random(w, h, self._allocator, self._rng)
        if kind == ShapeFactory.Kind.TRIANGLE:
            return Triangle.random(w, h, self._allocator, self._rng)
        if kind == ShapeFactory.Kind.RECTANGLE:
            return Rectangle.random(w, h, self._allocator, self._rng)
        if kind == ShapeFactory.Kind.CIRCLE:
            return Circle.random(w, h, self._allocator, self._rng)
        if kind == ShapeFactory.Kind.PENTAGON:
            return Pentagon.random(w, h, self._allocator, self._rng)
        raise ValueError(f"Unknown shape kind: {kind}")

    def random_shape(self) -> Shape:
        kind = self._rng.choice(list(ShapeFactory.Kind))
        return self.create(kind)

    def random_scene(self, count: int, kinds: Iterable[Kind] | None = None) -> list[Shape]:
        """
        Returns count random shapes.

        Args:
            count: How many shapes to create. Must be >= 0.
            kinds: The kinds to pick from. Defaults to all of them.
        """
        if count < 0:
            raise ValueError(f"Invalid shape count: {count}")
        kinds = list(kinds) if kinds is not None else list(ShapeFactory.Kind)
        if not kinds:
            raise ValueError("At least one shape kind is needed")
        shapes = [self.create(self._rng.choice(kinds)) for _ in range(count)]
        logger.info(f"Created scene with {len(shapes)} shapes in {self._width}x{self._height}")
        return shapes


def draw_shapes(image: Canvas, shapes: Iterable[Shape]) -> None:
    for shape in shapes:
        shape.draw(image)


if __name__ == "__main__":
    import image_utils

    logging.basicConfig(
        level=logging.DEBUG,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    canvas = image_utils.new_canvas(1000, 1000)
    factory = ShapeFactory(canvas.width, canvas.height)
    draw_shapes(canvas, factory.random_scene(50))
    if canvas.image.save("image.png"):
        logger.info("Saved image.png")
    else:
        logger.warning("Failed to save image.png")
