"""Headless surface for development and testing.

Runs the clock without a window: frames are kept in memory and input is
whatever gets posted to the surface's queue.
"""

import logging

from PIL import Image

from .events import QueueEventSource

logger = logging.getLogger(__name__)


class MockSurface:
    """Surface with the window's interface but no display.

    Usage:
        with MockSurface(480, 320) as surface:
            surface.events.post(InputEvent.close())
            ...
            frame = surface.last_frame
    """

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self.events = QueueEventSource()
        self.frames_presented = 0
        self._last_frame: Image.Image | None = None
        self._open = False

    @property
    def is_open(self) -> bool:
        return self._open

    @property
    def last_frame(self) -> Image.Image | None:
        """The most recently presented frame (for testing)."""
        return self._last_frame

    def open(self) -> None:
        self._open = True
        logger.info("Mock surface opened: %dx%d", self.width, self.height)

    def close(self) -> None:
        if not self._open:
            return
        self._open = False
        self.events.close()
        logger.info("Mock surface closed after %d frames", self.frames_presented)

    def present(self, image: Image.Image) -> None:
        self._last_frame = image
        self.frames_presented += 1
        logger.debug("Mock present: %dx%d frame", image.width, image.height)

    def __enter__(self) -> "MockSurface":
        self.open()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
