"""Input events and the sources the render scheduler waits on.

An event source exposes three operations:

- `wait(timeout)` blocks on the source's waitable descriptor until events
  are pending or the timeout expires
- `pending()` returns how many events can be read without blocking
- `next_event()` removes and returns the oldest pending event
"""

import os
import selectors
import threading
import time
from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import Protocol, runtime_checkable


class EventKind(Enum):
    """Kinds of input events the clock distinguishes."""

    CLOSE = "close"  # window manager asked the window to close
    KEY_PRESS = "key_press"
    KEY_RELEASE = "key_release"
    BUTTON_PRESS = "button_press"
    BUTTON_RELEASE = "button_release"
    MOTION = "motion"
    OTHER = "other"


@dataclass(frozen=True)
class InputEvent:
    """One input event.

    Attributes:
        kind: Event classification
        detail: Key name or button number, when the kind has one
        repeat: True for auto-repeated key presses
    """

    kind: EventKind
    detail: str | int | None = None
    repeat: bool = False

    @classmethod
    def close(cls) -> "InputEvent":
        return cls(EventKind.CLOSE)

    @classmethod
    def key_press(cls, key: str, repeat: bool = False) -> "InputEvent":
        return cls(EventKind.KEY_PRESS, key, repeat)


@runtime_checkable
class EventSource(Protocol):
    """Waitable producer of input events."""

    def wait(self, timeout: float) -> bool: ...

    def pending(self) -> int: ...

    def next_event(self) -> InputEvent: ...


class QueueEventSource:
    """Thread-safe event queue backed by a pipe.

    Every posted event writes a wake-up byte to the pipe, which makes the
    queue waitable with a selector like any other descriptor. Used by the
    headless surface and to feed simulated input in tests.

    Usage:
        source = QueueEventSource()
        source.post(InputEvent.key_press("escape"))
        if source.wait(1.0):
            event = source.next_event()
        source.close()
    """

    def __init__(self) -> None:
        self._events: deque[InputEvent] = deque()
        self._lock = threading.Lock()
        self._read_fd, self._write_fd = os.pipe()
        os.set_blocking(self._read_fd, False)
        os.set_blocking(self._write_fd, False)
        self._selector = selectors.DefaultSelector()
        self._selector.register(self._read_fd, selectors.EVENT_READ)
        self._closed = False

    def fileno(self) -> int:
        """The waitable descriptor."""
        return self._read_fd

    def post(self, event: InputEvent) -> None:
        """Queue an event and wake any waiter. Safe from any thread."""
        with self._lock:
            self._events.append(event)
        try:
            os.write(self._write_fd, b"\0")
        except BlockingIOError:
            # Pipe full: the descriptor is already readable
            pass

    def wait(self, timeout: float) -> bool:
        """Block until an event is pending or the timeout expires.

        The pipe only signals that the queue may have changed; the queue
        itself is the source of truth, so a wake-up with nothing pending
        drains the pipe and keeps waiting for the remaining time.
        """
        deadline = time.monotonic() + timeout
        while True:
            if self.pending():
                return True
            remaining = deadline - time.monotonic()
            if remaining <= 0:
                return False
            if self._selector.select(remaining):
                self._drain_wakeups()

    def pending(self) -> int:
        with self._lock:
            return len(self._events)

    def next_event(self) -> InputEvent:
        """Pop the oldest event.

        Raises:
            IndexError: If no event is pending
        """
        with self._lock:
            return self._events.popleft()

    def _drain_wakeups(self) -> None:
        try:
            while os.read(self._read_fd, 4096):
                pass
        except BlockingIOError:
            pass

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        self._selector.close()
        os.close(self._read_fd)
        os.close(self._write_fd)

    def __enter__(self) -> "QueueEventSource":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
