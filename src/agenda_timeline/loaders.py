"""Persisted agenda state: JSON load/dump and CSV import/export.

The JSON format is the host app's saved state:
{
    "version": 2,
    "sections":   [ {"id", "name", "order", "dayNumber"?}, ... ],
    "activities": [ {"id", "title", "owner", "durationMin", "sectionId", ...}, ... ],
    "config":     { "dayStartMin", "dayEndMin", "numberOfDays"?, ... },
    "injections": [ {"id", "type", "label", "sectionId", "durationMin",
                     "anchorBeforeActivityId"}, ... ]
}
Version 1 documents carry no injections.
"""

from __future__ import annotations

import csv
import io
import json
import uuid
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Sequence

from agenda_timeline.logging import get_logger
from agenda_timeline.schema import validate_state
from agenda_timeline.types import Activity, DayConfig, Injection, Section

logger = get_logger(__name__)

CURRENT_VERSION = 2

CSV_HEADER = ["Section", "Title", "Owner", "SlideNumber", "DurationMin", "Files", "Details", "Notes"]
DEFAULT_IMPORT_SECTION = "Imported"

# dataclass attribute -> JSON key
_ACTIVITY_KEYS = {
    "id": "id",
    "title": "title",
    "owner": "owner",
    "slide_number": "slideNumber",
    "duration_min": "durationMin",
    "files": "files",
    "details": "details",
    "notes": "notes",
    "section_id": "sectionId",
    "is_system": "isSystem",
    "system_key": "systemKey",
    "completed": "completed",
}
_SECTION_KEYS = {"id": "id", "name": "name", "order": "order", "day_number": "dayNumber"}
_CONFIG_KEYS = {
    "day_start_min": "dayStartMin",
    "day_end_min": "dayEndMin",
    "number_of_days": "numberOfDays",
    "break_interval_min": "breakIntervalMin",
    "break_duration_min": "breakDurationMin",
    "lunch_target_min": "lunchTargetMin",
    "lunch_duration_min": "lunchDurationMin",
}
_INJECTION_KEYS = {
    "id": "id",
    "kind": "type",
    "label": "label",
    "section_id": "sectionId",
    "duration_min": "durationMin",
    "anchor_activity_id": "anchorBeforeActivityId",
}


@dataclass
class Agenda:
    """Everything the host persists: the three walker inputs plus injections."""

    config: DayConfig
    sections: list[Section] = field(default_factory=list)
    activities: list[Activity] = field(default_factory=list)
    injections: list[Injection] = field(default_factory=list)


def _from_json(cls, keys: dict[str, str], data: dict):
    return cls(**{attr: data[key] for attr, key in keys.items() if key in data})


def _to_json(obj, keys: dict[str, str], defaults: dict[str, Any]) -> dict:
    out: dict[str, Any] = {}
    for attr, key in keys.items():
        value = getattr(obj, attr)
        if value is None or (attr in defaults and value == defaults[attr]):
            continue
        out[key] = value
    return out


_ACTIVITY_DEFAULTS = {"is_system": False, "completed": False}


def agenda_from_dict(data: dict, source: str = "<dict>") -> Agenda:
    """Build an Agenda from a persisted state dict.

    Raises ValueError listing every validation problem.
    """
    errors = validate_state(data)
    if errors:
        raise ValueError(
            f"Validation errors in {source}:\n"
            + "\n".join(f"  - {e}" for e in errors)
        )

    # Version 1 predates injections: a stray key there is ignored, not parsed
    stored = data.get("injections", []) if data["version"] == 2 else []

    return Agenda(
        config=_from_json(DayConfig, _CONFIG_KEYS, data["config"]),
        sections=[_from_json(Section, _SECTION_KEYS, s) for s in data["sections"]],
        activities=[_from_json(Activity, _ACTIVITY_KEYS, a) for a in data["activities"]],
        injections=[_from_json(Injection, _INJECTION_KEYS, i) for i in stored],
    )


def agenda_to_dict(agenda: Agenda) -> dict:
    """Serialise to the current (version 2) persisted format.

    Optional fields that are unset are omitted; loading the result gives back
    an equal Agenda.
    """
    return {
        "version": CURRENT_VERSION,
        "sections": [_to_json(s, _SECTION_KEYS, {}) for s in agenda.sections],
        "activities": [_to_json(a, _ACTIVITY_KEYS, _ACTIVITY_DEFAULTS) for a in agenda.activities],
        "config": _to_json(agenda.config, _CONFIG_KEYS, {}),
        "injections": [_to_json(i, _INJECTION_KEYS, {}) for i in agenda.injections],
    }


def load_agenda_json(path: str | Path) -> Agenda:
    """Load a persisted agenda from a JSON file.

    Raises ValueError if validation fails.
    """
    path = Path(path)
    with open(path) as f:
        data = json.load(f)

    agenda = agenda_from_dict(data, source=path.name)
    logger.info(
        "agenda_loaded",
        path=str(path),
        version=data.get("version"),
        sections=len(agenda.sections),
        activities=len(agenda.activities),
        injections=len(agenda.injections),
    )
    return agenda


def dump_agenda_json(agenda: Agenda, path: str | Path) -> None:
    """Write the agenda as pretty-printed version 2 JSON."""
    path = Path(path)
    with open(path, "w") as f:
        json.dump(agenda_to_dict(agenda), f, indent=2)
    logger.info("agenda_saved", path=str(path))


# ---------------------------------------------------------------------------
# CSV
# ---------------------------------------------------------------------------
def export_activities_csv(activities: Sequence[Activity], sections: Sequence[Section]) -> str:
    """Activities as CSV, one row each, section given by name.

    CSV carries no ids, config or injections.
    """
    name_of = {s.id: s.name for s in sections}
    buf = io.StringIO()
    writer = csv.writer(buf, lineterminator="\n")
    writer.writerow(CSV_HEADER)
    for a in activities:
        writer.writerow([
            name_of.get(a.section_id, ""),
            a.title,
            a.owner,
            a.slide_number or "",
            a.duration_min,
            a.files or "",
            a.details or "",
            a.notes or "",
        ])
    return buf.getvalue().rstrip("\n")


def _new_id() -> str:
    return uuid.uuid4().hex[:8]


def _duration(text: str) -> int:
    try:
        return int(float(text))
    except (ValueError, OverflowError):
        return 0


def import_activities_csv(
    text: str,
    id_factory: Callable[[], str] = _new_id,
) -> tuple[list[Section], list[Activity]]:
    """Parse CSV into fresh sections and activities.

    Columns are matched by header name, case-insensitively. Sections are
    created by name in first-seen order (order 1, 2, ...); a blank section
    name goes to 'Imported'. Unparseable durations become 0. Blank lines
    are skipped.
    """
    rows = [row for row in csv.reader(io.StringIO(text)) if any(c.strip() for c in row)]
    if len(rows) <= 1:
        return [], []

    header = [h.strip().lower() for h in rows[0]]

    def col(row: list[str], name: str) -> str:
        try:
            return row[header.index(name)].strip()
        except (ValueError, IndexError):
            return ""

    sections: dict[str, Section] = {}
    activities: list[Activity] = []
    for row in rows[1:]:
        name = col(row, "section") or DEFAULT_IMPORT_SECTION
        if name not in sections:
            sections[name] = Section(id=id_factory(), name=name, order=len(sections) + 1)
        activities.append(Activity(
            id=id_factory(),
            title=col(row, "title"),
            owner=col(row, "owner"),
            slide_number=col(row, "slidenumber") or None,
            duration_min=_duration(col(row, "durationmin") or "0"),
            files=col(row, "files") or None,
            details=col(row, "details") or None,
            notes=col(row, "notes") or None,
            section_id=sections[name].id,
        ))

    logger.debug("csv_imported", sections=len(sections), activities=len(activities))
    return list(sections.values()), activities
