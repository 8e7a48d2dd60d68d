"""Thread primitives shared by the listener and its connection handlers."""

import logging
import threading
from typing import Any, Callable

logger = logging.getLogger(__name__)


class StoppableThread(threading.Thread):
    """Daemon thread with a stop flag and an optional interrupt hook.

    Threads blocked in I/O cannot observe a flag, so `interrupt` is called
    after the flag is set to release the blocking call (for instance by
    closing the socket the thread is blocked on).

    Usage:
        def worker(thread: StoppableThread):
            while not thread.should_stop():
                conn, _ = sock.accept()
                ...

        thread = StoppableThread(target=worker, interrupt=sock.close)
        thread.start()
        # Later:
        thread.stop()  # Signals stop, interrupts and waits
    """

    def __init__(
        self,
        target: Callable[..., Any] | None = None,
        name: str | None = None,
        args: tuple[Any, ...] = (),
        kwargs: dict[str, Any] | None = None,
        daemon: bool = True,
        interrupt: Callable[[], None] | None = None,
    ) -> None:
        # The target receives the thread itself as its first argument
        if target is not None:
            original_target = target

            def wrapped_target(*a: Any, **kw: Any) -> Any:
                return original_target(self, *a, **kw)

            super().__init__(target=wrapped_target, name=name, args=args, kwargs=kwargs or {})
        else:
            super().__init__(name=name)

        self.daemon = daemon
        self._stop_event = threading.Event()
        self._interrupt = interrupt

    def stop(self, timeout: float = 5.0) -> bool:
        """Request stop, interrupt any blocking call and wait.

        Args:
            timeout: Maximum time to wait for thread to finish

        Returns:
            True if thread stopped, False if still running
        """
        logger.debug("Stopping thread: %s", self.name)
        self._stop_event.set()
        if self._interrupt is not None:
            self._interrupt()
        if self.ident is None or threading.current_thread() is self:
            return True
        self.join(timeout=timeout)
        stopped = not self.is_alive()
        if not stopped:
            logger.warning("Thread %s did not stop within timeout", self.name)
        return stopped

    def should_stop(self) -> bool:
        """Check if stop was requested."""
        return self._stop_event.is_set()


class AtomicCounter:
    """Thread-safe counter with atomic increment/decrement.

    Usage:
        counter = AtomicCounter()
        counter.increment()
        counter.decrement()
        value = counter.value
    """

    def __init__(self, initial: int = 0) -> None:
        self._value = initial
        self._lock = threading.Lock()

    @property
    def value(self) -> int:
        """Get current counter value."""
        with self._lock:
            return self._value

    def increment(self, delta: int = 1) -> int:
        """Atomically increment counter.

        Returns:
            New value after increment
        """
        with self._lock:
            self._value += delta
            return self._value

    def decrement(self, delta: int = 1) -> int:
        """Atomically decrement counter.

        Returns:
            New value after decrement
        """
        with self._lock:
            self._value -= delta
            return self._value
