"""Desktop window surface backed by pygame.

The surface owns the window and its input queue. It is used as a context
manager so the window is released on every exit path of the clock.
"""

import logging
import os
from collections import deque

from PIL import Image

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
import pygame  # noqa: E402

from ..core.errors import SurfaceError
from ..hardware.events import EventKind, InputEvent

logger = logging.getLogger(__name__)

TITLE = "Status Clock"


def translate_event(event: pygame.event.Event) -> InputEvent:
    """Map a pygame event onto the clock's event kinds."""
    if event.type in (pygame.QUIT, pygame.WINDOWCLOSE):
        return InputEvent(EventKind.CLOSE)
    if event.type == pygame.KEYDOWN:
        return InputEvent(EventKind.KEY_PRESS, pygame.key.name(event.key))
    if event.type == pygame.KEYUP:
        return InputEvent(EventKind.KEY_RELEASE, pygame.key.name(event.key))
    if event.type == pygame.MOUSEBUTTONDOWN:
        return InputEvent(EventKind.BUTTON_PRESS, event.button)
    if event.type == pygame.MOUSEBUTTONUP:
        return InputEvent(EventKind.BUTTON_RELEASE, event.button)
    if event.type == pygame.MOUSEMOTION:
        return InputEvent(EventKind.MOTION)
    return InputEvent(EventKind.OTHER, pygame.event.event_name(event.type))


class PygameEventSource:
    """Event source over the pygame event queue.

    pygame hides the display connection's descriptor, so `wait` blocks in
    `pygame.event.wait` with a timeout instead. An event returned by that
    call is buffered until it is drained.
    """

    def __init__(self) -> None:
        self._buffer: deque[pygame.event.Event] = deque()

    def wait(self, timeout: float) -> bool:
        if self._buffer:
            return True
        # A zero timeout would block forever
        event = pygame.event.wait(max(1, int(timeout * 1000)))
        if event.type == pygame.NOEVENT:
            return False
        self._buffer.append(event)
        return True

    def pending(self) -> int:
        self._buffer.extend(pygame.event.get())
        return len(self._buffer)

    def next_event(self) -> InputEvent:
        return translate_event(self._buffer.popleft())


class PygameSurface:
    """A desktop window the clock frames are presented in.

    Usage:
        with PygameSurface(480, 320, fullscreen=True) as surface:
            surface.present(image)
            surface.events.wait(1.0)

    Raises:
        SurfaceError: If the window cannot be created
    """

    def __init__(self, width: int, height: int, title: str = TITLE, fullscreen: bool = False) -> None:
        self.width = width
        self.height = height
        self._title = title
        self._fullscreen = fullscreen
        self._screen: pygame.Surface | None = None
        self.events = PygameEventSource()

    @property
    def is_open(self) -> bool:
        return self._screen is not None

    def open(self) -> None:
        if self._screen is not None:
            return

        flags = pygame.FULLSCREEN if self._fullscreen else 0
        try:
            pygame.display.init()
            self._screen = pygame.display.set_mode((self.width, self.height), flags)
            pygame.display.set_caption(self._title)
        except pygame.error as e:
            pygame.display.quit()
            raise SurfaceError(
                "Cannot open display window",
                details={"size": f"{self.width}x{self.height}", "error": str(e)},
                cause=e,
            ) from e

        logger.info(
            "Window opened: %dx%d (fullscreen=%s, driver=%s)",
            self.width,
            self.height,
            self._fullscreen,
            pygame.display.get_driver(),
        )

    def close(self) -> None:
        if self._screen is None:
            return
        self._screen = None
        pygame.display.quit()
        logger.info("Window closed")

    def present(self, image: Image.Image) -> None:
        """Copy a composed frame to the window and flip it on screen."""
        if self._screen is None:
            return
        if image.mode != "RGB":
            image = image.convert("RGB")
        frame = pygame.image.frombytes(image.tobytes(), image.size, "RGB")
        self._screen.blit(frame, (0, 0))
        pygame.display.flip()

    def __enter__(self) -> "PygameSurface":
        self.open()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
