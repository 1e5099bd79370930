# Pixdraw
# Copyright 2025 - Ricardo Quesada

import logging

from PySide6.QtGui import QImage

from color import Color

logger = logging.getLogger(__name__)  # __name__ gets the current module's name


class QImageCanvas:
    """
    Exposes a QImage as a drawing canvas.

    The wrapped image is modified in place. Coordinates passed to set_pixel() are expected
    to be in bounds, which the rasterizer guarantees.
    """

    def __init__(self, image: QImage):
        if image.isNull():
            raise ValueError("Cannot draw on a null QImage")
        self._image = image

    @property
    def image(self) -> QImage:
        return self._image

    @property
    def width(self) -> int:
        return self._image.width()

    @property
    def height(self) -> int:
        return self._image.height()

    def set_pixel(self, x: int, y: int, color: Color) -> None:
        self._image.setPixelColor(x, y, color.to_qcolor())

    def pixel(self, x: int, y: int) -> Color:
        return Color.from_qcolor(self._image.pixelColor(x, y))


def new_canvas(width: int, height: int, background: Color | None = None) -> QImageCanvas:
    """
    Creates an ARGB32 canvas filled with the background color.

    Args:
        width: The width in pixels. Must be > 0.
        height: The height in pixels. Must be > 0.
        background: The fill color. Defaults to the preferred canvas background.

    Returns:
        A QImageCanvas wrapping the new image.
    """
    if width <= 0 or height <= 0:
        raise ValueError(f"Invalid canvas size {width}x{height}")
    if background is None:
        from preferences import get_global_preferences

        background = get_global_preferences().get_canvas_background_color()

    image = QImage(width, height, QImage.Format_ARGB32)
    image.fill(background.to_qcolor())
    logger.debug(f"New canvas {width}x{height}, background {background.to_hex()}")
    return QImageCanvas(image)
