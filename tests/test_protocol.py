"""Tests for the status line protocol."""

from __future__ import annotations

import pytest

from statusclock.status.protocol import (
    Command,
    StatusField,
    is_sentinel,
    parse_line,
    strip_terminator,
)

# ------------------------------------------------------------------
# Sync
# ------------------------------------------------------------------


class TestSync:
    @pytest.mark.parametrize("flag", ["1", "y", "Y"])
    def test_on_flags(self, flag: str) -> None:
        assert parse_line(f"s={flag}\n") == Command(StatusField.SYNC, True)

    @pytest.mark.parametrize("flag", ["0", "n", "N"])
    def test_off_flags(self, flag: str) -> None:
        assert parse_line(f"s={flag}\n") == Command(StatusField.SYNC, False)

    def test_only_first_character_counts(self) -> None:
        assert parse_line("s=yes please\n") == Command(StatusField.SYNC, True)
        assert parse_line("s=no\r\n") == Command(StatusField.SYNC, False)

    @pytest.mark.parametrize("line", ["s=x\n", "s=t\n", "s= 1\n", "s=\n"])
    def test_other_flags_are_no_ops(self, line: str) -> None:
        assert parse_line(line) is None


# ------------------------------------------------------------------
# Weather / temperature
# ------------------------------------------------------------------


class TestLabels:
    def test_weather_verbatim(self) -> None:
        assert parse_line("w=Light rain\n") == Command(StatusField.WEATHER, "Light rain")

    def test_interior_and_leading_whitespace_kept(self) -> None:
        assert parse_line("w=  Fog  \n").value == "  Fog  "

    def test_empty_weather(self) -> None:
        assert parse_line("w=\n") == Command(StatusField.WEATHER, "")

    def test_temperature_crlf(self) -> None:
        assert parse_line("t=-3C\r\n") == Command(StatusField.TEMPERATURE, "-3C")

    def test_unicode_value(self) -> None:
        assert parse_line("t=21°C\n").value == "21°C"

    def test_line_without_terminator(self) -> None:
        assert parse_line("w=Sun") == Command(StatusField.WEATHER, "Sun")


class TestUnrecognized:
    @pytest.mark.parametrize("line", ["x=1\n", "S=1\n", "hello\n", "ww=Fog\n", "#comment\n"])
    def test_ignored(self, line: str) -> None:
        assert parse_line(line) is None


# ------------------------------------------------------------------
# Sentinel
# ------------------------------------------------------------------


class TestSentinel:
    @pytest.mark.parametrize("line", ["", "\n", "\r\n", "x\n", "ab", "s="])
    def test_sentinels(self, line: str) -> None:
        assert is_sentinel(line)

    @pytest.mark.parametrize("line", ["ab\n", "s=1", "w=\n", "s=\n"])
    def test_not_sentinels(self, line: str) -> None:
        assert not is_sentinel(line)


def test_strip_terminator_removes_one_terminator_only() -> None:
    assert strip_terminator("abc\n\n") == "abc\n"
    assert strip_terminator("abc\r\n") == "abc"
    assert strip_terminator("abc \t") == "abc \t"
