"""Tests for structured log events emitted by the walkers and loaders."""

from __future__ import annotations

import pytest
from structlog.testing import capture_logs

from conftest import agenda


@pytest.fixture
def debug_logging():
    from agenda_timeline.logging import setup_logging

    setup_logging(log_level="DEBUG")
    yield
    setup_logging(log_level="WARNING")


class TestEvents:

    def test_direct_overflow_event(self, debug_logging):
        from agenda_timeline.direct import compute_schedule

        ag = agenda("overrun")
        with capture_logs() as logs:
            compute_schedule(ag.config, ag.sections, ag.activities)
        overflow = [e for e in logs if e["event"] == "overflow"]
        assert overflow == [{
            "event": "overflow",
            "log_level": "debug",
            "walker": "direct",
            "clock": 610,
            "day_end": 600,
            "activity_id": "x2",
        }]

    def test_planner_summary_event(self, debug_logging, lunch_day):
        from agenda_timeline.planner import plan_injections

        with capture_logs() as logs:
            plan_injections(lunch_day.config, lunch_day.sections, lunch_day.activities)
        summary = [e for e in logs if e["event"] == "injections_planned"]
        assert summary[0]["count"] == 5
        assert summary[0]["days_used"] == 1

    def test_timeline_event(self, debug_logging, workshop):
        from agenda_timeline.timeline import build_timeline

        with capture_logs() as logs:
            build_timeline(workshop.config, workshop.sections, workshop.activities, "inline")
        assert {"event": "timeline_built", "log_level": "debug", "strategy": "inline", "rows": 5} in logs

    def test_load_event(self, debug_logging, tmp_path):
        from agenda_timeline.loaders import dump_agenda_json, load_agenda_json

        path = tmp_path / "a.json"
        dump_agenda_json(agenda("workshop"), path)
        with capture_logs() as logs:
            load_agenda_json(path)
        loaded = [e for e in logs if e["event"] == "agenda_loaded"][0]
        assert (loaded["log_level"], loaded["activities"], loaded["version"]) == ("info", 3, 2)

    def test_level_from_settings(self, monkeypatch, workshop):
        from agenda_timeline.logging import setup_from_settings, setup_logging
        from agenda_timeline.settings import reset_settings
        from agenda_timeline.timeline import build_timeline

        monkeypatch.setenv("AGENDA_LOG_LEVEL", "debug")
        reset_settings()
        try:
            setup_from_settings()
            with capture_logs() as logs:
                build_timeline(workshop.config, workshop.sections, workshop.activities, "inline")
        finally:
            reset_settings()
            setup_logging(log_level="WARNING")
        assert [e["event"] for e in logs] == ["timeline_built"]

    def test_get_logger_follows_configuration(self, debug_logging):
        """Loggers resolve through the filtering wrapper at call time."""
        from agenda_timeline.logging import get_logger, setup_logging

        log = get_logger("agenda_timeline.tests")
        with capture_logs() as logs:
            log.debug("walk_started", n=1)
        assert logs == [{"event": "walk_started", "log_level": "debug", "n": 1}]

        setup_logging(log_level="ERROR")
        with capture_logs() as logs:
            log.warning("dropped")
        assert logs == []

    def test_warning_level_filters_debug(self, workshop):
        """conftest configures WARNING: walker debug events are dropped."""
        from agenda_timeline.timeline import build_timeline

        with capture_logs() as logs:
            build_timeline(workshop.config, workshop.sections, workshop.activities, "inline")
        assert logs == []
