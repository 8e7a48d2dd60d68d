"""Tests for theme selection, the weather strip and color names."""

from __future__ import annotations

import pytest

from statusclock.core.config import ThemeColors, ThemesConfig
from statusclock.core.errors import ConfigurationError
from statusclock.display import Color, ThemeBucket, ThemeSet, select_bucket, weather_strip

# ------------------------------------------------------------------
# Bucket selection
# ------------------------------------------------------------------


class TestSelectBucket:
    @pytest.mark.parametrize(
        ("hours", "bucket"),
        [
            (range(0, 6), ThemeBucket.EARLY),
            (range(6, 12), ThemeBucket.MORNING),
            (range(12, 18), ThemeBucket.AFTERNOON),
            (range(18, 24), ThemeBucket.EVENING),
        ],
    )
    def test_synced_hours(self, hours: range, bucket: ThemeBucket) -> None:
        assert {select_bucket(hour, True) for hour in hours} == {bucket}

    def test_unsynced_always_unsync(self) -> None:
        assert {select_bucket(hour, False) for hour in range(24)} == {ThemeBucket.UNSYNC}

    @pytest.mark.parametrize("hour", [-1, 24])
    def test_out_of_range(self, hour: int) -> None:
        with pytest.raises(ValueError):
            select_bucket(hour, True)


# ------------------------------------------------------------------
# Weather strip
# ------------------------------------------------------------------


class TestWeatherStrip:
    @pytest.mark.parametrize("second", [0, 1, 2, 3, 59])
    def test_short_pair_side_by_side(self, second: int) -> None:
        assert weather_strip("Fog", "9C", second) == "Fog 9C"

    def test_placeholders_fit_together(self) -> None:
        # 4 + 4 + 1 is too wide
        assert weather_strip("----", "----", 0) == "----"

    def test_boundary(self) -> None:
        assert weather_strip("Rain", "5C", 2) == "Rain 5C"
        assert weather_strip("Rain", "15C", 2) == "15C"

    @pytest.mark.parametrize(
        ("second", "expected"),
        [(0, "Thunderstorm"), (1, "Thunderstorm"), (2, "20C"), (3, "20C"), (4, "Thunderstorm"), (59, "20C")],
    )
    def test_long_pair_alternates(self, second: int, expected: str) -> None:
        assert weather_strip("Thunderstorm", "20C", second) == expected

    def test_empty_weather(self) -> None:
        assert weather_strip("", "9C", 0) == " 9C"


# ------------------------------------------------------------------
# Colors
# ------------------------------------------------------------------


class TestColorNames:
    @pytest.mark.parametrize(
        ("name", "rgb"),
        [
            ("grey5", (13, 13, 13)),
            ("grey4", (10, 10, 10)),
            ("gray100", (255, 255, 255)),
            ("grey0", (0, 0, 0)),
            ("SteelBlue", (70, 130, 180)),
            ("gold", (255, 215, 0)),
            ("red", (255, 0, 0)),
            ("#ff5500", (255, 85, 0)),
        ],
    )
    def test_known(self, name: str, rgb: tuple[int, int, int]) -> None:
        assert Color.from_name(name).to_tuple() == rgb

    @pytest.mark.parametrize("name", ["notacolor", "grey101", ""])
    def test_unknown(self, name: str) -> None:
        with pytest.raises(ValueError):
            Color.from_name(name)

    def test_clamped(self) -> None:
        assert Color(300, -5, 12).to_tuple() == (255, 0, 12)

    def test_to_hex(self) -> None:
        assert Color(70, 130, 180).to_hex() == "#4682b4"


# ------------------------------------------------------------------
# Theme sets
# ------------------------------------------------------------------


class TestThemeSet:
    def test_defaults(self) -> None:
        themes = ThemeSet.from_config()

        early = themes[ThemeBucket.EARLY]
        assert early.time == Color(70, 130, 180)
        assert early.background == Color(13, 13, 13)

        unsync = themes[ThemeBucket.UNSYNC]
        assert unsync.weather == Color(0, 0, 0)
        assert unsync.background == Color(255, 0, 0)

    def test_role_override_keeps_other_defaults(self) -> None:
        config = ThemesConfig(morning=ThemeColors(weather="white", background="navy"))
        morning = ThemeSet.from_config(config)[ThemeBucket.MORNING]

        assert morning.weather == Color(255, 255, 255)
        assert morning.background == Color(0, 0, 128)
        assert morning.time == Color(255, 215, 0)

    def test_unknown_color_is_configuration_error(self) -> None:
        config = ThemesConfig(evening=ThemeColors(date="plaid"))

        with pytest.raises(ConfigurationError) as exc_info:
            ThemeSet.from_config(config)

        details = exc_info.value.details
        assert details == {"role": "date", "color": "plaid", "theme": "evening"}

    def test_every_bucket_present(self) -> None:
        themes = ThemeSet.from_config()
        for bucket in ThemeBucket:
            assert themes[bucket] is not None
