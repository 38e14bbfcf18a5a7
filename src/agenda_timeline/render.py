"""Render a timeline from activities plus previously planned injections.

Injections are weak references: each is looked up by (section, anchor
activity) while walking, and one whose anchor no longer exists is simply
never matched. Nothing is reported for it.
"""

from __future__ import annotations

from typing import Iterable, Sequence

from agenda_timeline.logging import get_logger
from agenda_timeline.ordering import walk_order
from agenda_timeline.state import WalkState
from agenda_timeline.types import (
    BREAK_KEY_PREFIX,
    LUNCH_KEY_PREFIX,
    Activity,
    ActivityRow,
    ComputedRow,
    DayConfig,
    Injection,
    OverflowRow,
    PauseRow,
    Section,
)

logger = get_logger(__name__)

OVERFLOW_LABEL = "Runs past end of schedule"


def index_injections(
    injections: Iterable[Injection],
) -> dict[tuple[str, str], list[Injection]]:
    """Group injections by (section_id, anchor_activity_id), keeping input order."""
    index: dict[tuple[str, str], list[Injection]] = {}
    for inj in injections:
        index.setdefault((inj.section_id, inj.anchor_activity_id), []).append(inj)
    return index


def build_schedule_with_injections(
    config: DayConfig,
    sections: Sequence[Section],
    activities: Sequence[Activity],
    injections: Sequence[Injection],
) -> list[ComputedRow]:
    """Replay activities with their anchored breaks/lunch.

    Only day_start_min, day_end_min and number_of_days are read from config:
    the thresholds were already applied when the injections were planned.

    Before each activity, and again before each injection anchored to it, the
    item is checked against day end. If it would not fit, the clock rolls to
    the next day's start; on the last day an OverflowRow closes the list.
    """
    index = index_injections(injections)
    days = config.days
    state = WalkState(clock=config.day_start_min)
    rows: list[ComputedRow] = []

    def fits(minutes: int) -> bool:
        return state.clock + minutes <= config.day_end_min

    def overflow(section_id: str, minutes: int) -> OverflowRow:
        logger.debug("overflow", walker="render", clock=state.clock, day=state.day)
        return OverflowRow(
            id=f"overflow-{state.clock}",
            section_id=section_id,
            day=state.day,
            start_min=config.day_end_min,
            end_min=state.clock + minutes,
            label=OVERFLOW_LABEL,
        )

    for section, section_activities in walk_order(sections, activities):
        for activity in section_activities:
            duration = activity.duration_min
            if not fits(duration):
                if state.day_index + 1 >= days:
                    rows.append(overflow(section.id, duration))
                    return rows
                state = state.next_day(config.day_start_min)
                logger.debug("day_rollover", walker="render", day=state.day, activity_id=activity.id)

            for inj in index.get((section.id, activity.id), ()):
                if not fits(inj.duration_min):
                    if state.day_index + 1 >= days:
                        rows.append(overflow(section.id, inj.duration_min))
                        return rows
                    state = state.next_day(config.day_start_min)
                rows.append(PauseRow(
                    id=inj.id,
                    section_id=section.id,
                    day=state.day,
                    start_min=state.clock,
                    end_min=state.clock + inj.duration_min,
                    kind=inj.kind,
                    label=inj.label,
                ))
                state = state.take_break(inj.duration_min)

            rows.append(ActivityRow(
                id=activity.id,
                section_id=section.id,
                day=state.day,
                start_min=state.clock,
                end_min=state.clock + duration,
                activity=activity,
            ))
            state = state.advance(duration)

    return rows


def materialize_injections(
    sections: Sequence[Section],
    activities: Sequence[Activity],
    injections: Sequence[Injection],
) -> list[Activity]:
    """Turn matched injections into system activities placed before their anchors.

    Returns a new list; the inputs are untouched. Keys are
    '<kind>:day<N>:<injection id>', N being the anchor section's day, so lunch
    entries carry the 'lunch:day' prefix the day-partitioned walk recognises.
    Orphaned injections are dropped.
    """
    index = index_injections(injections)
    day_of = {s.id: s.day for s in sections}
    result: list[Activity] = []

    for activity in activities:
        for inj in index.get((activity.section_id, activity.id), ()):
            prefix = LUNCH_KEY_PREFIX if inj.kind == "lunch" else BREAK_KEY_PREFIX
            day = day_of.get(activity.section_id, 1)
            result.append(Activity(
                id=inj.id,
                title=inj.label,
                duration_min=inj.duration_min,
                section_id=activity.section_id,
                is_system=True,
                system_key=f"{prefix}{day}:{inj.id}",
            ))
        result.append(activity)

    return result
