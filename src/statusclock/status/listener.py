"""Local socket listener feeding the status store.

One thread accepts connections; every accepted connection is served by its
own daemon thread until the publisher sends a sentinel line, disconnects or
the read fails. Connections are not bounded.
"""

import itertools
import logging
import socket
import threading
from pathlib import Path

from ..core.errors import SocketSetupError
from ..core.threading import AtomicCounter, StoppableThread
from .protocol import is_sentinel, parse_line
from .store import StatusStore

logger = logging.getLogger(__name__)

ACCEPT_POLL_INTERVAL = 0.5
PROBE_TIMEOUT = 0.5
ECHO_APPLIED = b"applied: "


class StatusListener:
    """Accepts status publishers on an AF_UNIX stream socket.

    Usage:
        store = StatusStore()
        with StatusListener("/run/user/1000/clock.sock", store) as listener:
            ...  # publishers may now connect

    Args:
        path: Filesystem path of the socket
        store: Store that receives the parsed commands
        echo: Write each processed line back to its publisher
    """

    def __init__(self, path: str | Path, store: StatusStore, echo: bool = False) -> None:
        self._path = Path(path)
        self._store = store
        self._echo = echo

        self._sock: socket.socket | None = None
        self._bound = False
        self._accept_thread: StoppableThread | None = None
        self._connections = AtomicCounter()
        self._connection_ids = itertools.count(1)

    @property
    def path(self) -> Path:
        return self._path

    @property
    def is_running(self) -> bool:
        """True while the accept loop is alive."""
        return self._accept_thread is not None and self._accept_thread.is_alive()

    @property
    def connection_count(self) -> int:
        """Number of connections currently being served."""
        return self._connections.value

    def start(self) -> None:
        """Bind the socket and start accepting publishers.

        Raises:
            SocketSetupError: If another instance owns the path, a stale
                file cannot be removed, or binding fails
        """
        if self._sock is not None:
            logger.warning("Listener already started")
            return

        self._sock = self._bind()
        self._accept_thread = StoppableThread(
            target=self._accept_loop,
            name="StatusAccept",
            interrupt=self._close_socket,
        )
        self._accept_thread.start()
        logger.info("Listening for status updates on %s", self._path)

    def close(self) -> None:
        """Stop accepting and remove the socket file.

        The file is only removed if this listener bound it. Connections
        already being served run until their publishers leave.
        """
        if self._accept_thread is not None:
            self._accept_thread.stop(timeout=2.0)
            self._accept_thread = None
        else:
            self._close_socket()

        if not self._bound:
            return
        self._bound = False
        try:
            self._path.unlink()
        except FileNotFoundError:
            pass
        except OSError as e:
            logger.warning("Could not remove socket file %s: %s", self._path, e)

    def __enter__(self) -> "StatusListener":
        self.start()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    # -------------------------------------------------------------------------
    # Setup
    # -------------------------------------------------------------------------

    def _bind(self) -> socket.socket:
        if self._is_served():
            raise SocketSetupError(
                "Another instance is already listening on the socket",
                details={"path": str(self._path)},
            )

        try:
            self._path.unlink()
            logger.debug("Removed stale socket file %s", self._path)
        except FileNotFoundError:
            pass
        except OSError as e:
            raise SocketSetupError(
                "Cannot remove existing socket file",
                details={"path": str(self._path), "error": e.strerror or str(e)},
                cause=e,
            ) from e

        sock = socket.socket(socket.AF_UNIX, socket.SOCK_STREAM)
        try:
            sock.bind(str(self._path))
            sock.listen()
            sock.settimeout(ACCEPT_POLL_INTERVAL)
        except OSError as e:
            sock.close()
            raise SocketSetupError(
                "Cannot bind status socket",
                details={"path": str(self._path), "error": e.strerror or str(e)},
                cause=e,
            ) from e
        self._bound = True
        return sock

    def _is_served(self) -> bool:
        """Check whether a live process accepts connections on the path."""
        if not self._path.exists():
            return False
        with socket.socket(socket.AF_UNIX, socket.SOCK_STREAM) as probe:
            probe.settimeout(PROBE_TIMEOUT)
            try:
                probe.connect(str(self._path))
            except OSError:
                return False
        return True

    def _close_socket(self) -> None:
        if self._sock is not None:
            self._sock.close()

    # -------------------------------------------------------------------------
    # Threads
    # -------------------------------------------------------------------------

    def _accept_loop(self, thread: StoppableThread) -> None:
        logger.debug("Accept loop started")

        while not thread.should_stop():
            try:
                conn, _ = self._sock.accept()
            except TimeoutError:
                continue
            except OSError as e:
                if not thread.should_stop():
                    logger.error("Accept failed, no longer listening on %s: %s", self._path, e)
                break

            conn.settimeout(None)
            conn_id = next(self._connection_ids)
            active = self._connections.increment()
            logger.debug("Publisher %d connected (%d active)", conn_id, active)
            threading.Thread(
                target=self._serve_connection,
                args=(conn, conn_id),
                name=f"StatusConn-{conn_id}",
                daemon=True,
            ).start()

        logger.debug("Accept loop stopped")

    def _serve_connection(self, conn: socket.socket, conn_id: int) -> None:
        try:
            with conn, conn.makefile("rb") as reader:
                while True:
                    raw = reader.readline()
                    line = raw.decode("utf-8")
                    if is_sentinel(line):
                        break

                    command = parse_line(line)
                    applied = command is not None and self._store.apply(command)
                    if applied:
                        logger.debug("Publisher %d set %s", conn_id, command.field.name.lower())

                    if self._echo:
                        conn.sendall(ECHO_APPLIED + raw if applied else raw)
        except (OSError, UnicodeDecodeError) as e:
            logger.debug("Publisher %d dropped: %s", conn_id, e)
        finally:
            active = self._connections.decrement()
            logger.debug("Publisher %d disconnected (%d active)", conn_id, active)
