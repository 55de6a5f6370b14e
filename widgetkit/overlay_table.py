"""A table with a button overlaid in its top right corner."""

from __future__ import annotations

from widgetkit.signal import Signal

_BUTTON_WIDTH = 100
_BUTTON_HEIGHT = 30
_BUTTON_MARGIN = 10


class OverlayTable:
    """Keeps a "Settings" button pinned to the top right of the table."""

    def __init__(self) -> None:
        self.button_text = "Settings"
        self.button_geometry: tuple[int, int, int, int] = (0, 0, 0, 0)
        self.clicked_details = Signal()

    def resize(self, width: int) -> tuple[int, int, int, int]:
        """Place the button for a table ``width`` pixels wide; return its geometry."""
        self.button_geometry = (
            width - _BUTTON_WIDTH - _BUTTON_MARGIN,
            _BUTTON_MARGIN,
            _BUTTON_WIDTH,
            _BUTTON_HEIGHT,
        )
        return self.button_geometry

    def click(self) -> None:
        """Release the button, emitting ``clicked_details``."""
        self.clicked_details.emit()