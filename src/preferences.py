# Pixdraw
# Copyright 2025 - Ricardo Quesada
import logging

from PySide6.QtCore import QObject, QSettings, Signal

from color import Color

logger = logging.getLogger(__name__)


class Preferences(QObject):
    DEFAULT_ALPHA = 255
    DEFAULT_BACKGROUND_COLOR = "#000000ff"

    alpha_changed = Signal(int)
    canvas_background_color_changed = Signal(str)

    def __init__(self, settings: QSettings | None = None):
        super().__init__()
        self._settings = settings if settings is not None else QSettings()

    def get_alpha(self) -> int:
        value = self._settings.value("colors/alpha", defaultValue=self.DEFAULT_ALPHA)
        try:
            alpha = int(value)
        except (TypeError, ValueError):
            logger.warning(f"Invalid alpha in settings: {value}. Using {self.DEFAULT_ALPHA}")
            return self.DEFAULT_ALPHA
        if not 0 <= alpha <= 255:
            logger.warning(f"Alpha out of range in settings: {alpha}. Using {self.DEFAULT_ALPHA}")
            return self.DEFAULT_ALPHA
        return alpha

    def set_alpha(self, alpha: int) -> None:
        if not 0 <= alpha <= 255:
            raise ValueError(f"Invalid alpha {alpha}. Must be in [0, 255]")
        current = self.get_alpha()
        if current != alpha:
            self._settings.setValue("colors/alpha", alpha)
            self.alpha_changed.emit(alpha)

    def get_canvas_background_color_name(self) -> str:
        return str(
            self._settings.value(
                "canvas/background_color", defaultValue=self.DEFAULT_BACKGROUND_COLOR
            )
        )

    def set_canvas_background_color_name(self, color: str) -> None:
        Color.from_string(color)
        current = self.get_canvas_background_color_name()
        if current != color:
            self._settings.setValue("canvas/background_color", color)
            self.canvas_background_color_changed.emit(color)

    def get_canvas_background_color(self) -> Color:
        return Color.from_string(self.get_canvas_background_color_name())


_global_preferences = None


# Singleton
def get_global_preferences() -> Preferences:
    # Using a function to return the global instance so that we can delay
    # the creation of QSettings() after QCoreApplication.setOrganizationName() is called
    global _global_preferences
    if _global_preferences is None:
        _global_preferences = Preferences()
    return _global_preferences


if __name__ == "__main__":
    preferences = get_global_preferences()

    print(f"Alpha: {preferences.get_alpha()}")
    print(f"Background color: {preferences.get_canvas_background_color_name()}")
