from color import Color


class RecordingCanvas:
    """In-memory canvas that remembers every write and rejects out-of-bounds ones."""

    def __init__(self, width: int, height: int):
        self._width = width
        self._height = height
        self.pixels: dict[tuple[int, int], Color] = {}
        self.writes: list[tuple[int, int]] = []

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def set_pixel(self, x: int, y: int, color: Color) -> None:
        if not (0 <= x < self._width and 0 <= y < self._height):
            raise AssertionError(f"set_pixel out of bounds: ({x}, {y})")
        self.pixels[(x, y)] = color
        self.writes.append((x, y))

    def points(self) -> set[tuple[int, int]]:
        return set(self.pixels)
