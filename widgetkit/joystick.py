"""A virtual joystick pad: a round base with a knob dragged by the pointer."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import IntFlag
from typing import TypeVar

from widgetkit.signal import Signal

T = TypeVar("T", int, float)

_RETURN_DURATION_MS = 400
_KNOB_RATIO = 0.3
_POINTER_PULL = 0.05


def constrain(value: T, low: T, high: T) -> T:
    """Clamp ``value`` into ``[low, high]``."""
    if value < low:
        return low
    if value > high:
        return high
    return value


class Alignment(IntFlag):
    LEFT = 0x0001
    RIGHT = 0x0002
    H_CENTER = 0x0004
    TOP = 0x0020
    BOTTOM = 0x0040
    V_CENTER = 0x0080
    CENTER = H_CENTER | V_CENTER


@dataclass
class Rect:
    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0

    def center(self) -> tuple[float, float]:
        return (self.x + self.width / 2, self.y + self.height / 2)

    def move_center(self, x: float, y: float) -> None:
        """Move the rectangle so that its centre is at ``(x, y)``."""
        self.x = x - self.width / 2
        self.y = y - self.height / 2

    def contains(self, x: float, y: float) -> bool:
        return (
            self.x <= x <= self.x + self.width
            and self.y <= y <= self.y + self.height
        )


def _out_sine(progress: float) -> float:
    return math.sin(progress * math.pi / 2)


class JoystickPad:
    """Joystick state with axes in ``[-1, 1]`` and a knob that springs back.

    ``x_changed`` and ``y_changed`` are emitted with the new axis value.
    Releasing the knob starts a 400 ms return animation that is advanced by
    :meth:`step_animation`.
    """

    def __init__(self, alignment: Alignment = Alignment.CENTER) -> None:
        self._x = 0.0
        self._y = 0.0
        self.alignment = alignment
        self.bounds = Rect()
        self.knob_bounds = Rect()
        self.x_changed = Signal()
        self.y_changed = Signal()
        self._last_pos: tuple[float, float] = (0, 0)
        self._knob_pressed = False
        self._animated_axes: list[str] = ["x", "y"]
        self._animation_running = False
        self._animation_elapsed = 0.0
        self._animation_start: dict[str, float] = {}

    @property
    def knob_pressed(self) -> bool:
        return self._knob_pressed

    @property
    def animation_running(self) -> bool:
        return self._animation_running

    @property
    def animated_axes(self) -> tuple[str, ...]:
        """Axes whose return animation is part of the release animation."""
        return tuple(self._animated_axes)

    def _radius(self) -> float:
        return (self.bounds.width - self.knob_bounds.width) / 2

    @property
    def x(self) -> float:
        return self._x

    @x.setter
    def x(self, value: float) -> None:
        self._x = constrain(float(value), -1.0, 1.0)
        bounds_cx, _ = self.bounds.center()
        _, knob_cy = self.knob_bounds.center()
        self.knob_bounds.move_center(bounds_cx + self._x * self._radius(), knob_cy)
        self.x_changed.emit(self._x)

    @property
    def y(self) -> float:
        return self._y

    @y.setter
    def y(self, value: float) -> None:
        self._y = constrain(float(value), -1.0, 1.0)
        knob_cx, _ = self.knob_bounds.center()
        _, bounds_cy = self.bounds.center()
        self.knob_bounds.move_center(knob_cx, bounds_cy + self._y * self._radius())
        self.y_changed.emit(self._y)

    def resize(self, width: int, height: int) -> None:
        """Fit a square base into ``width`` x ``height`` following the alignment."""
        size = float(min(width, height))
        left = top = 0.0

        if self.alignment & Alignment.TOP:
            top = 0.0
        elif self.alignment & Alignment.V_CENTER:
            top = (height - size) / 2
        elif self.alignment & Alignment.BOTTOM:
            top = height - size

        if self.alignment & Alignment.LEFT:
            left = 0.0
        elif self.alignment & Alignment.H_CENTER:
            left = (width - size) / 2
        elif self.alignment & Alignment.RIGHT:
            left = width - size

        self.bounds = Rect(left, top, size, size)
        self.knob_bounds.width = size * _KNOB_RATIO
        self.knob_bounds.height = size * _KNOB_RATIO

        radius = self._radius()
        cx, cy = self.bounds.center()
        self.knob_bounds.move_center(cx + self._x * radius, cy - self._y * radius)

    def press(self, x: float, y: float) -> bool:
        """Grab the knob if ``(x, y)`` is on it; return whether it was grabbed."""
        if not self.knob_bounds.contains(x, y):
            return False
        self._stop_animation()
        self._last_pos = (x, y)
        self._knob_pressed = True
        return True

    def release(self) -> None:
        """Let go of the knob and start the return animation."""
        self._knob_pressed = False
        self._start_animation()

    def move(self, x: float, y: float) -> None:
        """Drag the grabbed knob towards the pointer at ``(x, y)``."""
        if not self._knob_pressed:
            return

        knob_cx, knob_cy = self.knob_bounds.center()
        bounds_cx, bounds_cy = self.bounds.center()
        last_x, last_y = self._last_pos

        # Pull slightly towards the pointer so knob and pointer keep overlapping.
        dx = (x - last_x) + _POINTER_PULL * (x - knob_cx)
        dy = (y - last_y) + _POINTER_PULL * (y - knob_cy)

        radius = self._radius()
        offset_x = constrain(knob_cx + dx - bounds_cx, -radius, radius)
        offset_y = constrain(knob_cy + dy - bounds_cy, -radius, radius)

        self.knob_bounds.move_center(offset_x + bounds_cx, offset_y + bounds_cy)
        self._last_pos = (x, y)

        if radius == 0:
            return
        knob_cx, knob_cy = self.knob_bounds.center()
        new_x = (knob_cx - bounds_cx) / radius
        new_y = (knob_cy - bounds_cy) / radius

        if self._x != new_x:
            self._x = new_x
            self.x_changed.emit(self._x)
        if self._y != new_y:
            self._y = new_y
            self.y_changed.emit(self._y)

    def _start_animation(self) -> None:
        if self._animation_running:
            return
        self._animation_running = True
        self._animation_elapsed = 0.0
        self._animation_start = {axis: getattr(self, axis) for axis in self._animated_axes}

    def _stop_animation(self) -> None:
        self._animation_running = False

    def step_animation(self, elapsed_ms: float) -> bool:
        """Advance the return animation; return whether it is still running."""
        if not self._animation_running:
            return False
        self._animation_elapsed += elapsed_ms
        progress = min(self._animation_elapsed / _RETURN_DURATION_MS, 1.0)
        eased = _out_sine(progress)
        for axis in self._animated_axes:
            start = self._animation_start.get(axis, getattr(self, axis))
            setattr(self, axis, start + (0.0 - start) * eased)
        if progress >= 1.0:
            self._stop_animation()
        return self._animation_running

    def remove_x_animation(self) -> None:
        if "x" in self._animated_axes:
            self._animated_axes.remove("x")

    def add_x_animation(self) -> None:
        if "x" not in self._animated_axes:
            self._animated_axes.append("x")

    def remove_y_animation(self) -> None:
        if "y" in self._animated_axes:
            self._animated_axes.remove("y")

    def add_y_animation(self) -> None:
        if "y" not in self._animated_axes:
            self._animated_axes.append("y")