#!/usr/bin/env python
"""Visual verification report for agenda-timeline.

Run:  python scripts/verify.py   (with the package installed, e.g. pip install -e .)

Produces a formatted report showing:
  1. Fixture agendas (config + sections/activities as tables)
  2. Scenario checks per walker  -- expected vs actual, OK/FAIL per case
  3. Planned injections per agenda
  4. ASCII timelines for every agenda under every strategy
"""

from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path

from agenda_timeline.clock import format_time_24
from agenda_timeline.debug import show_timeline
from agenda_timeline.direct import compute_schedule
from agenda_timeline.loaders import agenda_from_dict
from agenda_timeline.logging import setup_from_settings
from agenda_timeline.partitioned import build_schedule_from_activities
from agenda_timeline.planner import plan_injections
from agenda_timeline.render import build_schedule_with_injections
from agenda_timeline.timeline import Strategy, build_timeline

# ---------------------------------------------------------------------------
# Paths and data loading
# ---------------------------------------------------------------------------
ROOT = Path(__file__).resolve().parent.parent
FIXTURES = ROOT / "data" / "fixtures"
SCENARIOS = FIXTURES / "scenarios"


def _load(path: Path):
    with open(path) as f:
        return json.load(f)


_agendas = _load(FIXTURES / "agendas.json")


def _agenda(name: str):
    return agenda_from_dict(_agendas[name], source=f"agendas.json:{name}")


# ---------------------------------------------------------------------------
# Formatting helpers
# ---------------------------------------------------------------------------
WIDTH = 90


def banner(title: str):
    print()
    print("=" * WIDTH)
    print(f"  {title}")
    print("=" * WIDTH)


def heading(title: str):
    print()
    print(f"  {title}")
    print(f"  {'-' * (len(title) + 2)}")


def table(headers: list[str], rows: list[list[str]], indent: int = 4):
    """Print a formatted table with auto-sized columns."""
    col_widths = [len(h) for h in headers]
    for row in rows:
        for i, cell in enumerate(row):
            col_widths[i] = max(col_widths[i], len(cell))

    pad = " " * indent
    fmt = pad + "  ".join(f"{{:<{w}}}" for w in col_widths)
    sep = pad + "  ".join("-" * w for w in col_widths)

    print(fmt.format(*headers))
    print(sep)
    for row in rows:
        padded = row + [""] * (len(headers) - len(row))
        print(fmt.format(*padded))


def _opt(value) -> str:
    return "-" if value is None else str(value)


def _clock(value) -> str:
    return "-" if value is None else format_time_24(value)


def _row_cells(row) -> list[str]:
    return [
        row.kind, row.id, _opt(row.section_id), str(row.day),
        format_time_24(row.start_min), format_time_24(row.end_min),
    ]


# ---------------------------------------------------------------------------
# Section 1: Fixture agendas
# ---------------------------------------------------------------------------
def section_agendas():
    banner("FIXTURE AGENDAS")

    for name, raw in _agendas.items():
        ag = _agenda(name)
        cfg = ag.config
        heading(f"Agenda: {name}  (version {raw['version']})")
        print(f"    {raw.get('notes', '')}\n")
        print(f"    Day:     {_clock(cfg.day_start_min)}-{_clock(cfg.day_end_min)} x {cfg.days}")
        print(f"    Breaks:  every {_opt(cfg.break_interval_min)} min for {_opt(cfg.break_duration_min)}")
        print(f"    Lunch:   at {_clock(cfg.lunch_target_min)} for {_opt(cfg.lunch_duration_min)}")
        print()

        name_of = {s.id: s.name for s in ag.sections}
        rows = [
            [s.id, s.name, str(s.order), _opt(s.day_number)]
            for s in ag.sections
        ]
        if rows:
            table(["Section", "Name", "Order", "Day"], rows)
            print()
        rows = [
            [a.id, a.title, name_of.get(a.section_id, "?"), str(a.duration_min), _opt(a.system_key)]
            for a in ag.activities
        ]
        if rows:
            table(["Activity", "Title", "Section", "Min", "System key"], rows)


# ---------------------------------------------------------------------------
# Section 2: Scenario checks
# ---------------------------------------------------------------------------
def _summary(row, with_day: bool) -> dict:
    out = {
        "kind": row.kind, "id": row.id, "section": row.section_id,
        "start": row.start_min, "end": row.end_min,
    }
    if with_day:
        out["day"] = row.day
    return out


def _check_rows(title: str, scenario: str, walk, with_day: bool = False):
    heading(title)
    data = _load(SCENARIOS / f"{scenario}.json")
    rows = []
    for case in data["cases"]:
        ag = _agenda(case["agenda"])
        actual = [_summary(r, with_day) for r in walk(ag)]
        match = "OK" if actual == case["expected"] else "FAIL"
        rows.append([case["id"], str(len(actual)), match, case.get("notes", "")])
    table(["Case", "Rows", "", "Notes"], rows)


def _render(ag):
    injections = plan_injections(ag.config, ag.sections, ag.activities)
    return build_schedule_with_injections(ag.config, ag.sections, ag.activities, injections)


def section_scenarios():
    banner("SCENARIO CHECKS")

    _check_rows(
        "Walker: compute_schedule (inline)", "direct",
        lambda ag: compute_schedule(ag.config, ag.sections, ag.activities),
    )
    _check_rows("Walker: plan_injections + build_schedule_with_injections", "render",
                _render, with_day=True)

    heading("Walker: build_schedule_from_activities (day partitioned)")
    data = _load(SCENARIOS / "partitioned.json")
    rows = []
    for case in data["cases"]:
        ag = _agenda(case["agenda"])
        actual = build_schedule_from_activities(ag.config, ag.sections, ag.activities)
        got = [(r.id, r.day, r.start_min, r.end_min) for r in actual]
        want = [(e["id"], e["day"], e["start"], e["end"]) for e in case["expected"]]
        rows.append([case["id"], str(len(got)), "OK" if got == want else "FAIL", case.get("notes", "")])
    table(["Case", "Rows", "", "Notes"], rows)


# ---------------------------------------------------------------------------
# Section 3: Planned injections
# ---------------------------------------------------------------------------
def section_injections():
    banner("PLANNED INJECTIONS")

    data = _load(SCENARIOS / "planner.json")
    for case in data["cases"]:
        ag = _agenda(case["agenda"])
        injections = plan_injections(ag.config, ag.sections, ag.activities)
        actual = [
            {"id": i.id, "kind": i.kind, "section": i.section_id,
             "duration": i.duration_min, "anchor": i.anchor_activity_id}
            for i in injections
        ]
        match = "OK" if actual == case["expected"] else "FAIL"
        heading(f"Agenda: {case['agenda']}  [{match}]")
        print(f"    {case.get('notes', '')}\n")
        if injections:
            table(
                ["Injection", "Kind", "Section", "Min", "Before"],
                [[i.id, i.kind, i.section_id, str(i.duration_min), i.anchor_activity_id]
                 for i in injections],
            )
        else:
            print("    (none)")


# ---------------------------------------------------------------------------
# Section 4: Timelines
# ---------------------------------------------------------------------------
def section_timelines():
    banner("TIMELINES")

    for name in _agendas:
        ag = _agenda(name)
        for strategy in Strategy:
            heading(f"{name}  --  {strategy.value}")
            rows = build_timeline(ag.config, ag.sections, ag.activities, strategy)
            if not rows:
                print("    (empty)")
                continue
            table(["Kind", "ID", "Section", "Day", "Start", "End"], [_row_cells(r) for r in rows])
            print()
            show_timeline(rows, ag.config)


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------
def main():
    setup_from_settings()

    banner("AGENDA-TIMELINE   --  VISUAL VERIFICATION REPORT")
    print(f"    Generated: {datetime.now().strftime('%Y-%m-%d %H:%M')}")
    print(f"    Fixture data: {FIXTURES.relative_to(ROOT)}/")

    section_agendas()
    section_scenarios()
    section_injections()
    section_timelines()

    banner("END OF REPORT")
    print()


if __name__ == "__main__":
    main()
