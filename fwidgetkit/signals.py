"""A minimal synchronous signal/slot mechanism."""

from __future__ import annotations

from typing import Any, Callable


class Signal:
    """Holds a list of callables and calls each of them on emit."""

    def __init__(self) -> None:
        self._slots: list[Callable[..., Any]] = []

    def connect(self, slot: Callable[..., Any]) -> None:
        """Register ``slot``; connecting the same slot twice calls it twice."""
        if not callable(slot):
            raise TypeError(f"slot must be callable, not {type(slot).__name__}")
        self._slots.append(slot)

    def disconnect(self, slot: Callable[..., Any]) -> None:
        """Remove one connection of ``slot``; raise ValueError if it has none."""
        try:
            self._slots.remove(slot)
        except ValueError:
            raise ValueError("slot is not connected to this signal") from None

    def emit(self, *args: Any) -> None:
        """Call every connected slot with ``args`` in connection order."""
        for slot in list(self._slots):
            slot(*args)

    def __len__(self) -> int:
        return len(self._slots)

    def __contains__(self, slot: object) -> bool:
        return slot in self._slots