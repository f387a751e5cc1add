"""Lifecycle events emitted by view file operations.

Each view owns an ``EventEmitter``. Listeners are plain callables invoked
synchronously, in registration order, after an operation succeeds.
"""

from enum import Enum
from typing import Any, Callable, Union

Listener = Callable[..., Any]


class FsEvent(str, Enum):
    """Events fired by the file operations."""

    WRITE = "write"
    DEL = "del"
    MOVE = "move"


def _coerce(event: Union[FsEvent, str]) -> FsEvent:
    try:
        return FsEvent(event)
    except ValueError:
        valid = ", ".join(e.value for e in FsEvent)
        raise ValueError(f"Unknown event '{event}'. Use one of: {valid}") from None


class EventEmitter:
    """Per-view listener list."""

    def __init__(self):
        self._listeners: list[tuple[FsEvent, Listener]] = []

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    def on(self, event: Union[FsEvent, str], listener: Listener) -> Listener:
        """Subscribe *listener* to *event*. Returns the listener so it can be used as a decorator."""
        self._listeners.append((_coerce(event), listener))
        return listener

    def off(self, event: Union[FsEvent, str], listener: Listener) -> None:
        """Remove every subscription of *listener* to *event*."""
        event = _coerce(event)
        self._listeners = [
            (e, fn) for e, fn in self._listeners
            if not (e == event and fn is listener)
        ]

    def listeners_for_event(self, event: Union[FsEvent, str]) -> tuple[Listener, ...]:
        """Return the listeners subscribed to a given event."""
        event = _coerce(event)
        return tuple(fn for e, fn in self._listeners if e == event)

    def emit(self, event: Union[FsEvent, str], *args: Any) -> int:
        """Call every listener for *event* with *args*.

        Returns:
            Number of listeners called.
        """
        listeners = self.listeners_for_event(event)
        for listener in listeners:
            listener(*args)
        return len(listeners)

    def describe(self) -> list[dict]:
        """Return a summary of all subscriptions for display."""
        return [
            {
                "event": e.value,
                "listener": getattr(fn, "__qualname__", repr(fn)),
            }
            for e, fn in self._listeners
        ]
