# Pixdraw
# Copyright 2025 - Ricardo Quesada

import logging
import random
import threading
from dataclasses import dataclass
from typing import Self

import coloraide
from PySide6.QtGui import QColor

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Color:
    """An RGBA color with 8-bit channels.

    Frozen, so it is hashable and compares by value (alpha included).
    """

    r: int
    g: int
    b: int
    a: int = 255

    def __post_init__(self):
        for name in ("r", "g", "b", "a"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= 255:
                raise ValueError(f"Invalid channel {name}={value!r}. Must be an int in [0, 255]")

    @property
    def rgb(self) -> tuple[int, int, int]:
        return self.r, self.g, self.b

    def to_hex(self) -> str:
        """Returns the color as '#rrggbbaa'."""
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}{self.a:02x}"

    def to_qcolor(self) -> QColor:
        return QColor(self.r, self.g, self.b, self.a)

    @classmethod
    def from_qcolor(cls, color: QColor) -> Self:
        return cls(color.red(), color.green(), color.blue(), color.alpha())

    @classmethod
    def from_string(cls, text: str) -> Self:
        """
        Parses any CSS color string: names ("red"), hex ("#ff0000", "#ff000080") or
        functions ("rgb(255 0 0)").

        Raises:
            ValueError: if the string is not a valid color.
        """
        try:
            c = coloraide.Color(text).convert("srgb").fit("srgb")
            # "none" channels count as 0
            r, g, b = (round(v * 255) for v in c.coords(nans=False))
            a = round(c.alpha(nans=False) * 255)
        except ValueError as e:
            raise ValueError(f"Invalid color string: {text!r}") from e
        return cls(r, g, b, a)


BLACK = Color(0, 0, 0)
WHITE = Color(255, 255, 255)


class ColorSpaceExhaustedError(RuntimeError):
    """Raised when every RGB triple has already been allocated."""


class ColorAllocator:
    """
    Hands out colors whose RGB triple was never handed out before by this allocator.

    Colors are sampled uniformly at random and resampled on collision. The check and the
    insertion happen inside the same critical section, so concurrent callers never get
    the same triple.
    """

    COLOR_SPACE_SIZE = 1 << 24

    def __init__(self, rng: random.Random | None = None, alpha: int = 255):
        if not 0 <= alpha <= 255:
            raise ValueError(f"Invalid alpha {alpha}. Must be in [0, 255]")
        self._rng = rng if rng is not None else random.Random()
        self._alpha = alpha
        self._used: set[tuple[int, int, int]] = set()
        self._lock = threading.Lock()

    @property
    def alpha(self) -> int:
        return self._alpha

    def allocate(self) -> Color:
        """
        Returns a color with a never-before-allocated RGB triple and the allocator's alpha.

        Raises:
            ColorSpaceExhaustedError: if all the RGB triples are already in use.
        """
        with self._lock:
            if len(self._used) >= self.COLOR_SPACE_SIZE:
                logger.error(f"Color space exhausted after {len(self._used)} allocations")
                raise ColorSpaceExhaustedError("No unused RGB color left")
            while True:
                rgb = (
                    self._rng.randrange(256),
                    self._rng.randrange(256),
                    self._rng.randrange(256),
                )
                if rgb not in self._used:
                    break
                logger.debug(f"Color collision on {rgb}, resampling")
            self._used.add(rgb)
        return Color(*rgb, self._alpha)

    def reserve(self, color: Color) -> bool:
        """Marks an explicit color as used. Returns False if it was already taken."""
        with self._lock:
            if color.rgb in self._used:
                return False
            self._used.add(color.rgb)
            return True

    def used_colors(self) -> set[tuple[int, int, int]]:
        with self._lock:
            return set(self._used)

    def __contains__(self, color: Color) -> bool:
        with self._lock:
            return color.rgb in self._used

    def __len__(self) -> int:
        with self._lock:
            return len(self._used)


_global_allocator = None
_global_allocator_lock = threading.Lock()


# Singleton
def get_global_allocator() -> ColorAllocator:
    # Shapes built without an explicit color or allocator share this one.
    # Created lazily so that the preferences are read after the application set them up.
    global _global_allocator
    with _global_allocator_lock:
        if _global_allocator is None:
            from preferences import get_global_preferences

            _global_allocator = ColorAllocator(alpha=get_global_preferences().get_alpha())
        return _global_allocator
