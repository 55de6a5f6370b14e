"""A label whose text scrolls horizontally, one pixel per timer tick."""

from __future__ import annotations

from enum import IntEnum


class ScrollDirection(IntEnum):
    RIGHT_TO_LEFT = 1
    LEFT_TO_RIGHT = 2


class ScrollLabel:
    """Scrolling state of a marquee label.

    ``tick`` is driven by a timer every ``interval`` milliseconds, ``resize``
    by size changes and ``text_x`` by painting.
    """

    def __init__(
        self,
        text: str = "",
        direction: ScrollDirection = ScrollDirection.RIGHT_TO_LEFT,
        interval: int = 20,
    ) -> None:
        self.text = text
        self._direction = ScrollDirection(direction)
        self._interval = interval
        self.offset = 0
        self.text_width = 0
        self.label_width = 0

    @property
    def direction(self) -> ScrollDirection:
        return self._direction

    @direction.setter
    def direction(self, direction: ScrollDirection) -> None:
        direction = ScrollDirection(direction)
        if direction != self._direction:
            self._direction = direction
            self.offset = 0

    @property
    def interval(self) -> int:
        """Milliseconds between two scroll steps."""
        return self._interval

    @interval.setter
    def interval(self, interval: int) -> None:
        self._interval = interval

    def tick(self) -> int:
        """Advance the text by one pixel, wrapping once it has fully passed."""
        self.offset += 1
        if self.offset > self.text_width + self.label_width:
            self.offset = 0
        return self.offset

    def resize(self, old_width: int, new_width: int) -> None:
        """Track the label width; shrinking restarts the scroll."""
        if new_width > 10:
            self.label_width = new_width
            if new_width < old_width:
                self.offset = 0

    def text_x(self, text_width: int) -> int | None:
        """Return the x position to draw text of ``text_width`` pixels.

        When the measured width differs from the known one, the scroll
        restarts and nothing is drawn this time, so ``None`` is returned.
        """
        if self.text_width != text_width and text_width > 0:
            self.text_width = text_width
            self.offset = 0
            return None
        if self._direction is ScrollDirection.RIGHT_TO_LEFT:
            return self.label_width - self.offset
        return self.offset - self.text_width