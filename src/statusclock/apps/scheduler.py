"""Render scheduler: one loop for redraw ticks and input events.

The loop waits on the event source with a one-second timeout. A timeout is
a redraw tick; events are drained to exhaustion before waiting again, so a
sustained burst of input delays redraws until it subsides.
"""

import logging
from datetime import datetime
from enum import Enum
from typing import Callable, Protocol

from ..display.renderer import Labels
from ..display.themes import Theme
from ..hardware.events import EventKind, EventSource, InputEvent
from ..status.store import StatusStore
from .clock import ClockFace

logger = logging.getLogger(__name__)

EventHandler = Callable[[InputEvent], bool]


class FrameSink(Protocol):
    """Receives each frame to draw."""

    def render(self, theme: Theme, labels: Labels) -> object: ...


class StopReason(Enum):
    """Why the scheduler returned."""

    CLOSED = "closed"  # window manager close request
    HANDLER = "handler"  # event handler asked to stop


class RenderScheduler:
    """Multiplexes the redraw timer against the input event source.

    Runs on a single thread; `run()` returns only when a close event
    arrives or the handler returns False.

    Usage:
        scheduler = RenderScheduler(store, face, renderer, surface.events, handle_input)
        reason = scheduler.run()
    """

    REDRAW_INTERVAL = 1.0

    def __init__(
        self,
        store: StatusStore,
        face: ClockFace,
        renderer: FrameSink,
        events: EventSource,
        handler: EventHandler,
        interval: float = REDRAW_INTERVAL,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        """Initialize the scheduler.

        Args:
            store: Status record read once per redraw
            face: Picks the theme and labels for a moment in time
            renderer: Draws and presents frames
            events: Waitable input event source
            handler: Called with every non-close event; False stops the loop
            interval: Redraw interval in seconds
            clock: Source of local wall-clock time
        """
        self._store = store
        self._face = face
        self._renderer = renderer
        self._events = events
        self._handler = handler
        self._interval = interval
        self._clock = clock

        self._redraws = 0
        self._events_dispatched = 0

    @property
    def redraws(self) -> int:
        """Number of redraws performed."""
        return self._redraws

    @property
    def events_dispatched(self) -> int:
        """Number of events passed to the handler."""
        return self._events_dispatched

    def redraw(self) -> None:
        """Draw one frame from the current status and time."""
        now = self._clock()
        status = self._store.snapshot()
        theme = self._face.theme_for(now, status)
        labels = self._face.labels_for(now, status)
        self._renderer.render(theme, labels)
        self._redraws += 1

    def run(self) -> StopReason:
        """Run until a close event or a handler stop.

        Returns:
            The reason the loop ended
        """
        logger.info("Render loop started (interval %.1fs)", self._interval)

        while True:
            if not self._events.wait(self._interval):
                self.redraw()

            reason = self._drain()
            if reason is not None:
                logger.info(
                    "Render loop stopped: %s (%d redraws, %d events)",
                    reason.value,
                    self._redraws,
                    self._events_dispatched,
                )
                return reason

    def _drain(self) -> StopReason | None:
        """Handle every pending event, stopping early on request."""
        while self._events.pending() > 0:
            event = self._events.next_event()

            if event.kind is EventKind.CLOSE:
                return StopReason.CLOSED

            self._events_dispatched += 1
            if not self._handler(event):
                return StopReason.HANDLER

        return None
