"""Tests for the day-partitioned walk.

Test data loaded from: data/fixtures/scenarios/partitioned.json
"""

from __future__ import annotations

import copy

import pytest

from conftest import agenda, load_scenarios, make_activities, make_config, make_section

_data = load_scenarios("partitioned")


def _summary(row, state):
    return {
        "id": row.id,
        "section": row.section_id,
        "day": row.day,
        "start": row.start_min,
        "end": row.end_min,
        "since_break": state.minutes_since_break,
    }


class TestScenarios:

    @pytest.mark.parametrize("case", _data["cases"], ids=lambda c: c["id"])
    def test_walk(self, case):
        from agenda_timeline.partitioned import walk_days

        ag = agenda(case["agenda"])
        steps = list(walk_days(ag.config, ag.sections, ag.activities))
        assert [_summary(row, state) for row, state in steps] == case["expected"]

    @pytest.mark.parametrize("case", _data["cases"], ids=lambda c: c["id"])
    def test_rows_match_walk(self, case):
        from agenda_timeline.partitioned import build_schedule_from_activities, walk_days

        ag = agenda(case["agenda"])
        rows = build_schedule_from_activities(ag.config, ag.sections, ag.activities)
        assert rows == [row for row, _ in walk_days(ag.config, ag.sections, ag.activities)]
        assert all(r.kind == "activity" for r in rows)

    @pytest.mark.parametrize("case", _data["cases"], ids=lambda c: c["id"])
    def test_overtime(self, case):
        from agenda_timeline.partitioned import build_schedule_from_activities, is_overtime

        ag = agenda(case["agenda"])
        rows = build_schedule_from_activities(ag.config, ag.sections, ag.activities)
        assert [r.id for r in rows if is_overtime(r, ag.config)] == case["overtime"]


class TestDays:

    def test_first_day_need_not_be_one(self):
        """Days without sections are skipped, not rendered empty."""
        from agenda_timeline.partitioned import build_schedule_from_activities

        sections = [make_section("s3", 1, day_number=3)]
        rows = build_schedule_from_activities(make_config(), sections, make_activities("s3", [30]))
        assert [(r.day, r.start_min) for r in rows] == [(3, 540)]

    def test_same_day_sections_share_clock(self):
        from agenda_timeline.partitioned import build_schedule_from_activities

        sections = [make_section("s1", 1, day_number=2), make_section("s2", 2, day_number=2)]
        acts = make_activities("s1", [30]) + make_activities("s2", [20], prefix="b")
        rows = build_schedule_from_activities(make_config(), sections, acts)
        assert [(r.id, r.day, r.start_min) for r in rows] == [("a1", 2, 540), ("b1", 2, 570)]

    def test_unknown_section_activities_skipped(self):
        from agenda_timeline.partitioned import build_schedule_from_activities

        acts = make_activities("s1", [30]) + make_activities("ghost", [30], prefix="g")
        rows = build_schedule_from_activities(make_config(), [make_section()], acts)
        assert [r.id for r in rows] == ["a1"]


class TestInputs:

    def test_inputs_not_mutated(self, multi_day_sections):
        from agenda_timeline.partitioned import build_schedule_from_activities

        before = copy.deepcopy(multi_day_sections)
        build_schedule_from_activities(
            multi_day_sections.config, multi_day_sections.sections, multi_day_sections.activities,
        )
        assert multi_day_sections == before

    def test_is_overtime_boundary(self):
        from agenda_timeline.partitioned import build_schedule_from_activities, is_overtime

        cfg = make_config(day_end_min=600)
        rows = build_schedule_from_activities(cfg, [make_section()], make_activities("s1", [60, 1]))
        assert [is_overtime(r, cfg) for r in rows] == [False, True]
