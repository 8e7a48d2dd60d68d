"""Status input: shared store, line protocol and socket listener."""

from .listener import StatusListener
from .protocol import Command, StatusField, is_sentinel, parse_line
from .store import PLACEHOLDER, StatusSnapshot, StatusStore

__all__ = [
    "Command",
    "PLACEHOLDER",
    "StatusField",
    "StatusListener",
    "StatusSnapshot",
    "StatusStore",
    "is_sentinel",
    "parse_line",
]
