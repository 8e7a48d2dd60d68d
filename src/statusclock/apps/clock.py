"""Clock face contents and default input handling.

Turns the current time and a status snapshot into the theme and the four
label strings the renderer draws.
"""

import logging
from datetime import datetime
from typing import Sequence

from ..display.renderer import Labels
from ..display.themes import Theme, ThemeSet, select_bucket, weather_strip
from ..hardware.events import EventKind, InputEvent
from ..status.store import StatusSnapshot

logger = logging.getLogger(__name__)

TIME_FORMAT = "%H:%M:%S"
DATE_FORMAT = "%m-%d"
QUIT_KEY = "escape"


class ClockFace:
    """Chooses what the clock shows for a moment in time.

    Args:
        themes: Resolved themes for every bucket
        days: Seven day names, Sunday first
    """

    def __init__(self, themes: ThemeSet, days: Sequence[str]) -> None:
        if len(days) != 7:
            raise ValueError(f"need seven day names, got {len(days)}")
        self._themes = themes
        self._days = tuple(days)

    def theme_for(self, now: datetime, status: StatusSnapshot) -> Theme:
        return self._themes[select_bucket(now.hour, status.sync)]

    def labels_for(self, now: datetime, status: StatusSnapshot) -> Labels:
        return Labels(
            time=now.strftime(TIME_FORMAT),
            day=self._days[now.isoweekday() % 7],
            date=now.strftime(DATE_FORMAT),
            weather=weather_strip(status.weather, status.temperature, now.second),
        )


def handle_input(event: InputEvent) -> bool:
    """Default input handler: log keys and buttons, stop on Escape.

    Returns:
        False to stop the clock, True to keep running
    """
    if event.kind is EventKind.KEY_PRESS:
        if not event.repeat:
            logger.info("Key %s pressed", event.detail)
        return event.detail != QUIT_KEY
    if event.kind is EventKind.KEY_RELEASE:
        logger.info("Key %s released", event.detail)
    elif event.kind is EventKind.BUTTON_PRESS:
        logger.info("Button %s pressed", event.detail)
    elif event.kind is EventKind.BUTTON_RELEASE:
        logger.info("Button %s released", event.detail)
    elif event.kind is EventKind.MOTION:
        logger.debug("Motion event")
    else:
        logger.debug("Unhandled event: %s", event.detail)
    return True
