"""A minimal signal that calls connected slots in connection order."""

from __future__ import annotations

from typing import Any, Callable

Slot = Callable[..., Any]


class Signal:
    """A list of callables that are invoked together by :meth:`emit`."""

    def __init__(self) -> None:
        self._slots: list[Slot] = []

    def __len__(self) -> int:
        return len(self._slots)

    def connect(self, slot: Slot) -> None:
        """Connect ``slot``; connecting it twice makes it run twice."""
        if not callable(slot):
            raise TypeError(f"slot must be callable, not {type(slot).__name__}")
        self._slots.append(slot)

    def disconnect(self, slot: Slot) -> None:
        """Remove every connection of ``slot``."""
        remaining = [connected for connected in self._slots if connected != slot]
        if len(remaining) == len(self._slots):
            raise ValueError("slot is not connected")
        self._slots = remaining

    def emit(self, *args: Any) -> None:
        """Call every connected slot with ``args``."""
        for slot in list(self._slots):
            slot(*args)