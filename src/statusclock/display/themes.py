"""Theme selection for the clock face.

The bucket follows the hour of day while the clock is in sync; an unsynced
clock always uses the `unsync` theme. Colors are resolved once, when the
ThemeSet is built, so redraws only pick a bucket.
"""

import logging
from dataclasses import dataclass
from enum import Enum

from ..core.config import ThemeColors, ThemesConfig
from ..core.errors import ConfigurationError
from .graphics import Color

logger = logging.getLogger(__name__)

# Weather and temperature are shown together only when this short
WEATHER_STRIP_WIDTH = 8
WEATHER_ALTERNATE_SECONDS = 2


class ThemeBucket(Enum):
    """Named color sets selected by time of day and sync status."""

    EARLY = "early"
    MORNING = "morning"
    AFTERNOON = "afternoon"
    EVENING = "evening"
    UNSYNC = "unsync"


# (foreground, background) per bucket; foreground covers the four labels
DEFAULT_COLORS: dict[ThemeBucket, tuple[str, str]] = {
    ThemeBucket.EARLY: ("SteelBlue", "grey5"),
    ThemeBucket.MORNING: ("gold", "black"),
    ThemeBucket.AFTERNOON: ("pink", "black"),
    ThemeBucket.EVENING: ("SpringGreen", "grey4"),
    ThemeBucket.UNSYNC: ("black", "red"),
}


@dataclass(frozen=True)
class Theme:
    """Resolved colors for the five roles on the clock face."""

    time: Color
    day: Color
    date: Color
    weather: Color
    background: Color

    @classmethod
    def resolve(cls, overrides: ThemeColors, foreground: str, background: str) -> "Theme":
        """Resolve color names, falling back to the bucket defaults.

        Raises:
            ConfigurationError: If a color name is unknown
        """
        names = {
            "time": overrides.time or foreground,
            "day": overrides.day or foreground,
            "date": overrides.date or foreground,
            "weather": overrides.weather or foreground,
            "background": overrides.background or background,
        }
        colors = {}
        for role, name in names.items():
            try:
                colors[role] = Color.from_name(name)
            except ValueError as e:
                raise ConfigurationError(
                    "Unknown color name",
                    details={"role": role, "color": name},
                    cause=e,
                ) from e
        return cls(**colors)


class ThemeSet:
    """The five resolved themes, indexed by bucket."""

    def __init__(self, themes: dict[ThemeBucket, Theme]) -> None:
        missing = set(ThemeBucket) - set(themes)
        if missing:
            raise ValueError(f"missing themes: {sorted(b.value for b in missing)}")
        self._themes = dict(themes)

    @classmethod
    def from_config(cls, config: ThemesConfig | None = None) -> "ThemeSet":
        """Resolve every bucket from configuration overrides.

        Raises:
            ConfigurationError: If any configured color name is unknown
        """
        if config is None:
            config = ThemesConfig()
        themes = {}
        for bucket, (foreground, background) in DEFAULT_COLORS.items():
            overrides: ThemeColors = getattr(config, bucket.value)
            try:
                themes[bucket] = Theme.resolve(overrides, foreground, background)
            except ConfigurationError as e:
                e.details["theme"] = bucket.value
                raise
        logger.debug("Resolved %d themes", len(themes))
        return cls(themes)

    def __getitem__(self, bucket: ThemeBucket) -> Theme:
        return self._themes[bucket]


def select_bucket(hour: int, sync: bool) -> ThemeBucket:
    """Pick the theme bucket for a local hour (0-23) and sync status."""
    if not 0 <= hour <= 23:
        raise ValueError(f"hour out of range: {hour}")
    if not sync:
        return ThemeBucket.UNSYNC
    if hour < 6:
        return ThemeBucket.EARLY
    if hour < 12:
        return ThemeBucket.MORNING
    if hour < 18:
        return ThemeBucket.AFTERNOON
    return ThemeBucket.EVENING


def weather_strip(weather: str, temperature: str, second: int) -> str:
    """Text for the weather line.

    Short pairs are shown side by side. Longer ones alternate every two
    seconds between weather and temperature so neither gets truncated.
    """
    if len(weather) + len(temperature) + 1 < WEATHER_STRIP_WIDTH:
        return f"{weather} {temperature}"
    if (second // WEATHER_ALTERNATE_SECONDS) % 2 == 0:
        return weather
    return temperature
