"""Shared test fixtures and data loading for agenda-timeline.

All test data lives in data/fixtures/ as JSON files. agendas.json holds named
agendas in the persisted-state format; scenarios/*.json hold the expected
results per walker. This module loads that data and exposes helper
functions + pytest fixtures for the tests.

Times are minutes since midnight: 540 = 09:00, 720 = 12:00, 960 = 16:00.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from agenda_timeline.logging import setup_logging

# ---------------------------------------------------------------------------
# Paths
# ---------------------------------------------------------------------------
FIXTURES_DIR = Path(__file__).resolve().parent.parent / "data" / "fixtures"
SCENARIOS_DIR = FIXTURES_DIR / "scenarios"

# Keep debug events out of test output
setup_logging(log_level="WARNING")


# ---------------------------------------------------------------------------
# Data loaders
# ---------------------------------------------------------------------------
def _load_json(path: Path):
    with open(path) as f:
        return json.load(f)


_agendas = _load_json(FIXTURES_DIR / "agendas.json")
AGENDA_NAMES = sorted(_agendas)


def load_scenarios(name: str):
    """Load a scenario file from data/fixtures/scenarios/{name}.json."""
    return _load_json(SCENARIOS_DIR / f"{name}.json")


def raw_agenda(name: str) -> dict:
    """The persisted-state dict for a named agenda (a fresh copy)."""
    return json.loads(json.dumps(_agendas[name]))


def agenda(name: str):
    """Build an Agenda from agendas.json by name."""
    from agenda_timeline.loaders import agenda_from_dict

    return agenda_from_dict(raw_agenda(name), source=f"agendas.json:{name}")


# ---------------------------------------------------------------------------
# Builders for inline cases
# ---------------------------------------------------------------------------
def make_config(**overrides):
    """09:00-16:00 single day with no breaks or lunch, unless overridden."""
    from agenda_timeline.types import DayConfig

    values = {"day_start_min": 540, "day_end_min": 960}
    values.update(overrides)
    return DayConfig(**values)


def make_activities(section_id: str, durations: list[int], prefix: str = "a"):
    """Activities a1..aN in one section with the given durations."""
    from agenda_timeline.types import Activity

    return [
        Activity(
            id=f"{prefix}{i}",
            title=f"Item {i}",
            duration_min=d,
            section_id=section_id,
        )
        for i, d in enumerate(durations, start=1)
    ]


def make_section(section_id: str = "s1", order: float = 1, day_number: int | None = None):
    from agenda_timeline.types import Section

    return Section(id=section_id, name=section_id.upper(), order=order, day_number=day_number)


# ---------------------------------------------------------------------------
# Row comparison helpers
# ---------------------------------------------------------------------------
def row_summary(row, with_day: bool = False) -> dict:
    """Reduce a computed row to the keys used by scenario files."""
    out = {
        "kind": row.kind,
        "id": row.id,
        "section": row.section_id,
        "start": row.start_min,
        "end": row.end_min,
    }
    if with_day:
        out["day"] = row.day
    return out


def injection_summary(inj) -> dict:
    return {
        "id": inj.id,
        "kind": inj.kind,
        "section": inj.section_id,
        "duration": inj.duration_min,
        "anchor": inj.anchor_activity_id,
    }


# ---------------------------------------------------------------------------
# pytest fixtures
# ---------------------------------------------------------------------------
@pytest.fixture
def workshop():
    return agenda("workshop")


@pytest.fixture
def lunch_day():
    return agenda("lunch_day")


@pytest.fixture
def multi_day_sections():
    return agenda("multi_day_sections")
