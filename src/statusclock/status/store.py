"""Shared status record written by publishers and read by the renderer.

One lock covers the whole record, so a snapshot never pairs a new weather
label with an old temperature.
"""

import threading
from dataclasses import dataclass

from .protocol import Command, StatusField

PLACEHOLDER = "----"


@dataclass(frozen=True)
class StatusSnapshot:
    """Consistent copy of the status record."""

    sync: bool
    weather: str
    temperature: str


class StatusStore:
    """Lock-protected status record.

    Usage:
        store = StatusStore()
        store.apply(Command(StatusField.SYNC, True))
        snapshot = store.snapshot()
    """

    def __init__(
        self,
        sync: bool = False,
        weather: str = PLACEHOLDER,
        temperature: str = PLACEHOLDER,
    ) -> None:
        self._lock = threading.Lock()
        self._sync = sync
        self._weather = weather
        self._temperature = temperature

    def snapshot(self) -> StatusSnapshot:
        """Copy all three fields in one critical section."""
        with self._lock:
            return StatusSnapshot(self._sync, self._weather, self._temperature)

    def apply(self, command: Command) -> bool:
        """Write the single field named by the command.

        Returns:
            True if a field was written
        """
        with self._lock:
            if command.field is StatusField.SYNC:
                self._sync = bool(command.value)
            elif command.field is StatusField.WEATHER:
                self._weather = str(command.value)
            elif command.field is StatusField.TEMPERATURE:
                self._temperature = str(command.value)
            else:
                return False
        return True

    def set_sync(self, value: bool) -> None:
        self.apply(Command(StatusField.SYNC, value))

    def set_weather(self, text: str) -> None:
        self.apply(Command(StatusField.WEATHER, text))

    def set_temperature(self, text: str) -> None:
        self.apply(Command(StatusField.TEMPERATURE, text))

    def __repr__(self) -> str:
        snap = self.snapshot()
        return (
            f"StatusStore(sync={snap.sync!r}, weather={snap.weather!r}, "
            f"temperature={snap.temperature!r})"
        )
