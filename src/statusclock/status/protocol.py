"""Line protocol spoken by status publishers.

Each newline-terminated UTF-8 line carries one command:

    s=1     sync on  (1, y or Y)
    s=0     sync off (0, n or N)
    w=Fog   weather label, verbatim after the prefix
    t=9C    temperature label, verbatim after the prefix

Lines with any other prefix are ignored. A line shorter than three
characters (terminator included) or a bare terminator ends the connection.
"""

from dataclasses import dataclass
from enum import Enum

SENTINEL_LENGTH = 3
TERMINATORS = ("\r\n", "\n")

SYNC_ON = frozenset("1yY")
SYNC_OFF = frozenset("0nN")


class StatusField(Enum):
    """Fields of the status record a command can write."""

    SYNC = "s="
    WEATHER = "w="
    TEMPERATURE = "t="


@dataclass(frozen=True)
class Command:
    """A parsed protocol line: the field to write and its new value."""

    field: StatusField
    value: bool | str


def strip_terminator(line: str) -> str:
    """Remove one trailing line terminator, leaving other whitespace alone."""
    for terminator in TERMINATORS:
        if line.endswith(terminator):
            return line[: -len(terminator)]
    return line


def is_sentinel(line: str) -> bool:
    """Check whether a raw line (terminator included) ends the connection.

    An empty string, which is what a read at end of stream returns, is a
    sentinel too.
    """
    return len(line) < SENTINEL_LENGTH or line in TERMINATORS


def parse_line(line: str) -> Command | None:
    """Parse one raw protocol line.

    Args:
        line: Line as read from the stream, terminator included

    Returns:
        The command, or None for unrecognized or no-op lines
    """
    text = strip_terminator(line)
    prefix, value = text[:2], text[2:]

    try:
        field = StatusField(prefix)
    except ValueError:
        return None

    if field is StatusField.SYNC:
        flag = value[:1]
        if flag in SYNC_ON:
            return Command(field, True)
        if flag in SYNC_OFF:
            return Command(field, False)
        return None

    return Command(field, value)
