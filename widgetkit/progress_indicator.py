"""A spinning busy indicator made of twelve fading capsules."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

_STEP_DEGREES = 30
_CAPSULE_COUNT = 12


@dataclass(frozen=True)
class Capsule:
    """One rounded bar of the indicator, drawn rotated about the centre.

    ``x``, ``y``, ``width`` and ``height`` describe the rectangle in the
    rotated coordinate system whose origin is ``(center_x, center_y)``.
    """

    center_x: int
    center_y: int
    rotation: float
    alpha: float
    x: float
    y: float
    width: int
    height: int
    radius: int


class ProgressIndicator:
    """An indeterminate progress indicator that spins while a task runs.

    ``tick`` is driven by a timer every :attr:`animation_delay` milliseconds
    while the indicator is animated.
    """

    SIZE_HINT = (20, 20)

    def __init__(self, color: Any = "black") -> None:
        self.angle = 0
        self._animated = False
        self._delay = 40
        self._displayed_when_stopped = False
        self.color = color

    @property
    def is_animated(self) -> bool:
        return self._animated

    @property
    def animation_delay(self) -> int:
        """Milliseconds between two animation steps."""
        return self._delay

    @animation_delay.setter
    def animation_delay(self, delay: int) -> None:
        self._delay = delay

    @property
    def displayed_when_stopped(self) -> bool:
        """Whether the indicator is drawn even when it is not spinning."""
        return self._displayed_when_stopped

    @displayed_when_stopped.setter
    def displayed_when_stopped(self, state: bool) -> None:
        self._displayed_when_stopped = bool(state)

    @property
    def size_hint(self) -> tuple[int, int]:
        return self.SIZE_HINT

    def start_animation(self) -> None:
        """Restart the spin from angle 0."""
        self.angle = 0
        self._animated = True

    def stop_animation(self) -> None:
        self._animated = False

    def tick(self) -> int:
        """Advance the spin by one step and return the new angle."""
        self.angle = (self.angle + _STEP_DEGREES) % 360
        return self.angle

    def height_for_width(self, w: int) -> int:
        return w

    def capsules(self, width: int, height: int) -> list[Capsule]:
        """Return the capsules to draw in a ``width`` x ``height`` area.

        Nothing is drawn while stopped unless :attr:`displayed_when_stopped`.
        """
        if not self._displayed_when_stopped and not self._animated:
            return []

        side = min(width, height)
        outer_radius = int((side - 1) * 0.5)
        inner_radius = int((side - 1) * 0.5 * 0.38)

        capsule_height = outer_radius - inner_radius
        ratio = 0.23 if side > 32 else 0.35
        capsule_width = int(capsule_height * ratio)
        capsule_radius = int(capsule_width / 2)

        center_x = int((width - 1) / 2)
        center_y = int((height - 1) / 2)

        return [
            Capsule(
                center_x=center_x,
                center_y=center_y,
                rotation=self.angle - index * float(_STEP_DEGREES),
                alpha=1.0 - index / float(_CAPSULE_COUNT),
                x=-capsule_width * 0.5,
                y=-(inner_radius + capsule_height),
                width=capsule_width,
                height=capsule_height,
                radius=capsule_radius,
            )
            for index in range(_CAPSULE_COUNT)
        ]