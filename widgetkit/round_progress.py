"""A circular progress bar in donut, pie or line style."""

from __future__ import annotations

import math
from enum import Enum, IntFlag
from typing import Any, Sequence

from widgetkit.joystick import Rect

POSITION_LEFT = 180
POSITION_TOP = 90
POSITION_RIGHT = 0
POSITION_BOTTOM = -90

GradientStop = tuple[float, Any]


class BarStyle(Enum):
    DONUT = "donut"
    PIE = "pie"
    LINE = "line"


class _Placeholder(IntFlag):
    NONE = 0
    VALUE = 1
    PERCENT = 2
    MAX = 4


def _divide(numerator: float, denominator: float) -> float:
    """Floating division that yields inf or nan instead of raising."""
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
    return numerator / denominator


def _number(value: float, decimals: int) -> str:
    return f"{value:.{decimals}f}"


class RoundProgressBar:
    """State and geometry of a round progress bar.

    The value is kept inside ``[minimum, maximum]``. The text shown in the
    centre is built from :attr:`format`, where ``%v`` stands for the value,
    ``%p`` for the percentage and ``%m`` for the number of steps.
    """

    MINIMUM_SIZE = (32, 32)

    def __init__(self) -> None:
        self._min = 0.0
        self._max = 100.0
        self._value = 25.0
        self._null_position = float(POSITION_TOP)
        self._bar_style = BarStyle.DONUT
        self._outline_pen_width = 1.0
        self._data_pen_width = 1.0
        self._gradient_data: list[GradientStop] = []
        self._rebuild_brush = False
        self._gradient: tuple[float, list[GradientStop]] | None = None
        self._format = "%p%"
        self._decimals = 1
        self._placeholders = _Placeholder.PERCENT

    # range and value

    @property
    def minimum(self) -> float:
        return self._min

    @minimum.setter
    def minimum(self, minimum: float) -> None:
        self.set_range(minimum, self._max)

    @property
    def maximum(self) -> float:
        return self._max

    @maximum.setter
    def maximum(self, maximum: float) -> None:
        self.set_range(self._min, maximum)

    def set_range(self, minimum: float, maximum: float) -> None:
        """Set both bounds, swapping them if reversed, and clamp the value."""
        self._min = float(minimum)
        self._max = float(maximum)
        if self._max < self._min:
            self._min, self._max = self._max, self._min
        if self._value < self._min:
            self._value = self._min
        elif self._value > self._max:
            self._value = self._max
        if self._gradient_data:
            self._rebuild_brush = True

    @property
    def value(self) -> float:
        return self._value

    @value.setter
    def value(self, value: float) -> None:
        value = float(value)
        if value != self._value:
            if value < self._min:
                self._value = self._min
            elif value > self._max:
                self._value = self._max
            else:
                self._value = value

    # appearance

    @property
    def null_position(self) -> float:
        """Angle in degrees at which the minimum value sits."""
        return self._null_position

    @null_position.setter
    def null_position(self, position: float) -> None:
        position = float(position)
        if position != self._null_position:
            self._null_position = position
            if self._gradient_data:
                self._rebuild_brush = True

    @property
    def bar_style(self) -> BarStyle:
        return self._bar_style

    @bar_style.setter
    def bar_style(self, style: BarStyle) -> None:
        self._bar_style = BarStyle(style)

    @property
    def outline_pen_width(self) -> float:
        return self._outline_pen_width

    @outline_pen_width.setter
    def outline_pen_width(self, width: float) -> None:
        self._outline_pen_width = float(width)

    @property
    def data_pen_width(self) -> float:
        return self._data_pen_width

    @data_pen_width.setter
    def data_pen_width(self, width: float) -> None:
        self._data_pen_width = float(width)

    @property
    def data_colors(self) -> list[GradientStop]:
        """Gradient stops ``(position, colour)`` for the filled area."""
        return list(self._gradient_data)

    @data_colors.setter
    def data_colors(self, stops: Sequence[GradientStop]) -> None:
        stops = [(float(position), color) for position, color in stops]
        if stops != self._gradient_data:
            self._gradient_data = stops
            self._rebuild_brush = True

    @property
    def needs_rebuild(self) -> bool:
        """Whether the data gradient must be rebuilt before the next paint."""
        return self._rebuild_brush

    # text

    @property
    def format(self) -> str:
        return self._format

    @format.setter
    def format(self, text_format: str) -> None:
        if text_format != self._format:
            self._format = text_format
            self._format_changed()

    def reset_format(self) -> None:
        """Clear the format so that no text is shown."""
        self._format = ""
        self._format_changed()

    @property
    def decimals(self) -> int:
        return self._decimals

    @decimals.setter
    def decimals(self, count: int) -> None:
        # Negative counts are ignored, as is setting the current count.
        if count >= 0 and count != self._decimals:
            self._decimals = count
            self._format_changed()

    def _format_changed(self) -> None:
        flags = _Placeholder.NONE
        if "%v" in self._format:
            flags |= _Placeholder.VALUE
        if "%p" in self._format:
            flags |= _Placeholder.PERCENT
        if "%m" in self._format:
            flags |= _Placeholder.MAX
        self._placeholders = flags

    def value_to_text(self, value: float) -> str:
        """Expand the format's placeholders for ``value``."""
        text = self._format
        if self._placeholders & _Placeholder.VALUE:
            text = text.replace("%v", _number(value, self._decimals))
        if self._placeholders & _Placeholder.PERCENT:
            percent = _divide(value - self._min, self._max - self._min) * 100.0
            text = text.replace("%p", _number(percent, self._decimals))
        if self._placeholders & _Placeholder.MAX:
            text = text.replace("%m", _number(self._max - self._min + 1, self._decimals))
        return text

    @property
    def text(self) -> str:
        """The text currently shown, empty when there is no format."""
        if not self._format:
            return ""
        return self.value_to_text(self._value)

    # geometry

    def arc_length(self) -> float:
        """Degrees of the circle covered by the current value."""
        return _divide(360.0, self._max - self._min) * self._value

    def inner_rect(self, outer_radius: float) -> tuple[Rect, float]:
        """Return the central text area and its size for a bar ``outer_radius`` wide."""
        if self._bar_style is BarStyle.LINE:
            inner_radius = outer_radius - self._outline_pen_width
        else:
            inner_radius = outer_radius * 0.75
        delta = (outer_radius - inner_radius) / 2
        return Rect(delta, delta, inner_radius, inner_radius), inner_radius

    def text_pixel_size(self, inner_radius: float) -> int:
        """Font pixel size that fits the text into the inner circle."""
        return int(inner_radius * max(0.05, 0.35 - self._decimals * 0.08))

    def data_gradient(self) -> tuple[float, list[GradientStop]] | None:
        """Return the conical gradient ``(angle, stops)`` of the filled area.

        The stops are inverted so that position 0 lies at the maximum. The
        gradient is rebuilt only when colours, range or null position have
        changed; ``None`` means no gradient has been set.
        """
        if self._rebuild_brush:
            self._rebuild_brush = False
            stops: dict[float, Any] = {}
            for position, color in self._gradient_data:
                if 0.0 <= position <= 1.0:
                    stops[1.0 - position] = color
            self._gradient = (self._null_position, sorted(stops.items(), key=lambda s: s[0]))
        if self._gradient is None:
            return None
        angle, stops_list = self._gradient
        return angle, list(stops_list)