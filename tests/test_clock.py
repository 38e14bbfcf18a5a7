"""Tests for the time codec: parse_time, format_time, format_time_24.

Test data loaded from: data/fixtures/scenarios/clock.json
"""

from __future__ import annotations

import pytest

from conftest import load_scenarios

_data = load_scenarios("clock")


class TestParseTime:
    """Wall-clock text -> minutes since midnight."""

    @pytest.mark.parametrize("case", _data["parse"], ids=lambda s: s["id"])
    def test_parse(self, case):
        from agenda_timeline.clock import parse_time

        assert parse_time(case["text"]) == case["expected"]

    @pytest.mark.parametrize("case", _data["parse_invalid"], ids=lambda s: s["id"])
    def test_malformed_returns_none(self, case):
        """Malformed text yields None rather than raising."""
        from agenda_timeline.clock import parse_time

        assert parse_time(case["text"]) is None


class TestFormatTime:

    @pytest.mark.parametrize("case", _data["format_12h"], ids=lambda s: s["id"])
    def test_format_12h(self, case):
        from agenda_timeline.clock import format_time

        assert format_time(case["minutes"]) == case["expected"]

    @pytest.mark.parametrize("case", _data["format_24h"], ids=lambda s: s["id"])
    def test_format_24h(self, case):
        from agenda_timeline.clock import format_time_24

        assert format_time_24(case["minutes"]) == case["expected"]

    def test_format_range(self):
        from agenda_timeline.clock import format_range

        assert format_range(540, 585) == "9:00 AM - 9:45 AM"

    def test_24h_output_parses_back(self):
        """Every minute of the day survives format_time_24 -> parse_time."""
        from agenda_timeline.clock import format_time_24, parse_time

        for minute in range(0, 1440):
            assert parse_time(format_time_24(minute)) == minute
