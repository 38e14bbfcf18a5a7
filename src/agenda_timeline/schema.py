"""Input validation for persisted agenda state (raw JSON dicts)."""

from __future__ import annotations

from typing import Any

SUPPORTED_VERSIONS = (1, 2)

_CONFIG_REQUIRED = ("dayStartMin", "dayEndMin")
_CONFIG_OPTIONAL = (
    "numberOfDays",
    "breakIntervalMin",
    "breakDurationMin",
    "lunchTargetMin",
    "lunchDurationMin",
)
_ACTIVITY_TEXT = ("owner", "slideNumber", "files", "details", "notes", "systemKey")
_ACTIVITY_FLAGS = ("isSystem", "completed")


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def validate_config(config: Any) -> list[str]:
    """Validate a day config dict. Returns list of error messages (empty = valid).

    Checks:
    - dayStartMin / dayEndMin present and integers
    - optional thresholds are integers or null

    A dayEndMin not after dayStartMin is accepted: the walkers clamp the day
    length to one minute rather than fail. Likewise numberOfDays below 1 is
    floored to a single day.
    """
    if not isinstance(config, dict):
        return [f"config: expected object, got {type(config).__name__}"]

    errors: list[str] = []
    for key in _CONFIG_REQUIRED:
        if key not in config:
            errors.append(f"config: missing '{key}'")
        elif not _is_int(config[key]):
            errors.append(f"config: '{key}' must be an integer, got {config[key]!r}")

    for key in _CONFIG_OPTIONAL:
        value = config.get(key)
        if value is not None and not _is_int(value):
            errors.append(f"config: '{key}' must be an integer or null, got {value!r}")

    return errors


def validate_sections(sections: Any) -> list[str]:
    """Validate the section list.

    Checks:
    - each entry has string id/name and a numeric order
    - dayNumber, when given, is a positive integer
    - ids are unique
    """
    if not isinstance(sections, list):
        return ["sections: expected a list"]

    errors: list[str] = []
    seen: set[str] = set()
    for i, sec in enumerate(sections):
        if not isinstance(sec, dict):
            errors.append(f"Section {i}: expected object, got {sec!r}")
            continue
        sid = sec.get("id")
        if not isinstance(sid, str) or not sid:
            errors.append(f"Section {i}: missing or invalid 'id'")
        elif sid in seen:
            errors.append(f"Section {i}: duplicate id {sid!r}")
        else:
            seen.add(sid)
        if not isinstance(sec.get("name"), str):
            errors.append(f"Section {i}: 'name' must be a string")
        if not _is_number(sec.get("order")):
            errors.append(f"Section {i}: 'order' must be a number, got {sec.get('order')!r}")
        day = sec.get("dayNumber")
        if day is not None and (not _is_int(day) or day < 1):
            errors.append(f"Section {i}: 'dayNumber' must be a positive integer, got {day!r}")

    return errors


def validate_activities(activities: Any, section_ids: set[str] | None = None) -> list[str]:
    """Validate the activity list.

    Checks:
    - id, title, sectionId are strings; durationMin is an integer
    - optional text fields are strings, flags are booleans
    - ids are unique
    - sectionId refers to a known section (when section_ids is given)

    Non-positive durations are allowed; the walkers handle them.
    """
    if not isinstance(activities, list):
        return ["activities: expected a list"]

    errors: list[str] = []
    seen: set[str] = set()
    for i, act in enumerate(activities):
        if not isinstance(act, dict):
            errors.append(f"Activity {i}: expected object, got {act!r}")
            continue
        aid = act.get("id")
        if not isinstance(aid, str) or not aid:
            errors.append(f"Activity {i}: missing or invalid 'id'")
        elif aid in seen:
            errors.append(f"Activity {i}: duplicate id {aid!r}")
        else:
            seen.add(aid)
        if not isinstance(act.get("title"), str):
            errors.append(f"Activity {i}: 'title' must be a string")
        if not _is_int(act.get("durationMin")):
            errors.append(
                f"Activity {i}: 'durationMin' must be an integer, got {act.get('durationMin')!r}"
            )
        sid = act.get("sectionId")
        if not isinstance(sid, str):
            errors.append(f"Activity {i}: 'sectionId' must be a string")
        elif section_ids is not None and sid not in section_ids:
            errors.append(f"Activity {i}: unknown section {sid!r}")
        for key in _ACTIVITY_TEXT:
            value = act.get(key)
            if value is not None and not isinstance(value, str):
                errors.append(f"Activity {i}: '{key}' must be a string, got {value!r}")
        for key in _ACTIVITY_FLAGS:
            value = act.get(key)
            if value is not None and not isinstance(value, bool):
                errors.append(f"Activity {i}: '{key}' must be boolean")

    return errors


def validate_injections(injections: Any) -> list[str]:
    """Validate persisted injections.

    Anchors are not checked against the activity list: a dangling anchor is
    legal and simply renders nothing.
    """
    if not isinstance(injections, list):
        return ["injections: expected a list"]

    errors: list[str] = []
    for i, inj in enumerate(injections):
        if not isinstance(inj, dict):
            errors.append(f"Injection {i}: expected object, got {inj!r}")
            continue
        if inj.get("type") not in ("break", "lunch"):
            errors.append(f"Injection {i}: 'type' must be 'break' or 'lunch', got {inj.get('type')!r}")
        for key in ("id", "label", "sectionId", "anchorBeforeActivityId"):
            if not isinstance(inj.get(key), str):
                errors.append(f"Injection {i}: '{key}' must be a string")
        if not _is_int(inj.get("durationMin")):
            errors.append(f"Injection {i}: 'durationMin' must be an integer")

    return errors


def validate_state(data: Any) -> list[str]:
    """Validate a whole persisted state document (version 1 or 2)."""
    if not isinstance(data, dict):
        return [f"state: expected object, got {type(data).__name__}"]

    version = data.get("version")
    if version not in SUPPORTED_VERSIONS:
        return [f"state: unsupported version {version!r} (expected 1 or 2)"]

    errors = validate_config(data.get("config"))
    errors.extend(validate_sections(data.get("sections")))
    section_ids = {
        s["id"] for s in data.get("sections") or []
        if isinstance(s, dict) and isinstance(s.get("id"), str)
    }
    errors.extend(validate_activities(data.get("activities"), section_ids))
    if version == 2:
        errors.extend(validate_injections(data.get("injections", [])))
    return errors
