"""Input and headless display abstractions.

Provides:
- Input events and the event source protocol
- A pipe-backed event queue
- A mock surface for development without a window
"""

from .events import EventKind, EventSource, InputEvent, QueueEventSource
from .mock import MockSurface

__all__ = [
    "EventKind",
    "EventSource",
    "InputEvent",
    "MockSurface",
    "QueueEventSource",
]
