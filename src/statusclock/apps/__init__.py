"""Clock application: face contents and the render scheduler."""

from .clock import ClockFace, handle_input
from .scheduler import EventHandler, RenderScheduler, StopReason

__all__ = [
    "ClockFace",
    "EventHandler",
    "RenderScheduler",
    "StopReason",
    "handle_input",
]
