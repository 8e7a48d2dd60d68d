"""Shared fixtures for status clock tests."""

from __future__ import annotations

import logging
import shutil
import socket
import tempfile
import time
from collections.abc import Callable, Iterator
from pathlib import Path
from typing import Any

import pytest

from statusclock.status import StatusListener, StatusStore


def wait_for(predicate: Callable[[], bool], timeout: float = 3.0) -> bool:
    """Poll until predicate is true or the timeout expires."""
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if predicate():
            return True
        time.sleep(0.01)
    return predicate()


@pytest.fixture
def short_tmp() -> Iterator[Path]:
    # AF_UNIX paths are limited to ~100 bytes, pytest's tmp_path can exceed that
    path = Path(tempfile.mkdtemp(prefix="sclk-"))
    yield path
    shutil.rmtree(path, ignore_errors=True)


@pytest.fixture
def socket_path(short_tmp: Path) -> Path:
    return short_tmp / "clock.sock"


@pytest.fixture
def store() -> StatusStore:
    return StatusStore()


@pytest.fixture
def listener(socket_path: Path, store: StatusStore) -> Iterator[StatusListener]:
    with StatusListener(socket_path, store) as running:
        yield running


@pytest.fixture
def connect(socket_path: Path) -> Iterator[Callable[[], socket.socket]]:
    """Open client connections to the listener; all are closed on teardown."""
    clients: list[socket.socket] = []

    def _connect() -> socket.socket:
        client = socket.socket(socket.AF_UNIX, socket.SOCK_STREAM)
        client.settimeout(3.0)
        client.connect(str(socket_path))
        clients.append(client)
        return client

    yield _connect
    for client in clients:
        client.close()


@pytest.fixture
def config_data(short_tmp: Path) -> dict[str, Any]:
    """Smallest valid configuration."""
    return {
        "socket": str(short_tmp / "clock.sock"),
        "days": ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"],
    }


@pytest.fixture(autouse=True)
def restore_root_logger() -> Iterator[None]:
    """setup_logging replaces the root handlers; put pytest's back afterwards."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)
