"""Tests for pygame event translation and logging setup."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import pygame
import pytest

from statusclock.core.logging import JSONFormatter, SimpleFormatter, setup_logging
from statusclock.display.surface import PygameSurface, translate_event
from statusclock.hardware import EventKind


class TestTranslateEvent:
    def test_quit_is_close(self) -> None:
        assert translate_event(pygame.event.Event(pygame.QUIT)).kind is EventKind.CLOSE

    def test_window_close_is_close(self) -> None:
        assert translate_event(pygame.event.Event(pygame.WINDOWCLOSE)).kind is EventKind.CLOSE

    @pytest.mark.parametrize(
        ("event_type", "kind"),
        [
            (pygame.MOUSEBUTTONDOWN, EventKind.BUTTON_PRESS),
            (pygame.MOUSEBUTTONUP, EventKind.BUTTON_RELEASE),
        ],
    )
    def test_buttons(self, event_type: int, kind: EventKind) -> None:
        event = translate_event(pygame.event.Event(event_type, button=3, pos=(0, 0)))
        assert event.kind is kind
        assert event.detail == 3

    def test_motion(self) -> None:
        event = pygame.event.Event(pygame.MOUSEMOTION, pos=(1, 1), rel=(1, 1), buttons=(0, 0, 0))
        assert translate_event(event).kind is EventKind.MOTION

    def test_other(self) -> None:
        assert translate_event(pygame.event.Event(pygame.VIDEOEXPOSE)).kind is EventKind.OTHER


def test_closed_surface_ignores_frames() -> None:
    surface = PygameSurface(10, 10)
    assert not surface.is_open
    surface.present(None)
    surface.close()


class TestLogging:
    def make_record(self, **extra: object) -> logging.LogRecord:
        record = logging.LogRecord(
            "statusclock.status.listener", logging.INFO, __file__, 1, "hello %s", ("there",), None
        )
        record.__dict__.update(extra)
        return record

    def test_json_formatter(self) -> None:
        data = json.loads(JSONFormatter().format(self.make_record(publisher=4)))
        assert data["message"] == "hello there"
        assert data["level"] == "INFO"
        assert data["publisher"] == 4

    def test_simple_formatter(self) -> None:
        line = SimpleFormatter(use_colors=False).format(self.make_record())
        assert "INFO" in line
        assert "[listener/MainThread] hello there" in line

    def test_setup_with_file(self, short_tmp: Path) -> None:
        log_file = short_tmp / "logs" / "clock.log"
        setup_logging(level="DEBUG", log_format="structured", log_file=log_file)

        logging.getLogger("statusclock.test").debug("written")
        for handler in logging.getLogger().handlers:
            handler.flush()

        assert json.loads(log_file.read_text().splitlines()[-1])["message"] == "written"
