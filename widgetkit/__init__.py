"""Toolkit-independent state and geometry models of small custom widgets."""

__version__ = "0.1.0"
__all__ = [
    "demo",
    "joystick",
    "overlay_table",
    "progress_indicator",
    "round_progress",
    "scroll_label",
    "signal",
]