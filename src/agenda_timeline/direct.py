"""Direct walk: one day, breaks and lunch synthesised inline as rows.

Nothing is persisted. Lunch fires at most once per call, and the first
activity to run past day end ends the walk with an overflow marker.
"""

from __future__ import annotations

from typing import Sequence

from agenda_timeline.logging import get_logger
from agenda_timeline.ordering import walk_order
from agenda_timeline.state import BreakPolicy, WalkState
from agenda_timeline.types import (
    BREAK_LABEL,
    LUNCH_LABEL,
    Activity,
    ActivityRow,
    ComputedRow,
    DayConfig,
    OverflowRow,
    PauseKind,
    PauseRow,
    Section,
)

logger = get_logger(__name__)

OVERFLOW_LABEL = "Runs past end of day"


def _pause(kind: PauseKind, section_id: str | None, state: WalkState, minutes: int) -> PauseRow:
    label = LUNCH_LABEL if kind == "lunch" else BREAK_LABEL
    return PauseRow(
        id=f"{label}-{state.clock}",
        section_id=section_id,
        day=state.day,
        start_min=state.clock,
        end_min=state.clock + minutes,
        kind=kind,
        label=label,
    )


def compute_schedule(
    config: DayConfig,
    sections: Sequence[Section],
    activities: Sequence[Activity],
) -> list[ComputedRow]:
    """Walk sections (by order) and their activities, inlining breaks and lunch.

    Before each activity, lunch is placed if the activity would straddle the
    lunch target; otherwise a break is placed if the activity would push the
    break timer past the interval. Lunch wins when both are due.

    Returns:
        Rows in walk order. If the clock passes day end the list ends with a
        single OverflowRow and later activities are absent.
    """
    policy = BreakPolicy.from_config(config)
    state = WalkState(clock=config.day_start_min)
    rows: list[ComputedRow] = []
    ordered = walk_order(sections, activities)

    for section, section_activities in ordered:
        for activity in section_activities:
            duration = activity.duration_min

            if not state.lunch_placed and policy.crosses_lunch(state.clock, duration):
                rows.append(_pause("lunch", section.id, state, policy.lunch_min))
                state = state.take_lunch(policy.lunch_min)
            elif policy.break_due(state.minutes_since_break, duration):
                rows.append(_pause("break", section.id, state, policy.break_min))
                state = state.take_break(policy.break_min)

            rows.append(ActivityRow(
                id=activity.id,
                section_id=section.id,
                day=state.day,
                start_min=state.clock,
                end_min=state.clock + duration,
                activity=activity,
            ))
            state = state.advance(duration)

            if state.clock > config.day_end_min:
                logger.debug(
                    "overflow",
                    walker="direct",
                    clock=state.clock,
                    day_end=config.day_end_min,
                    activity_id=activity.id,
                )
                rows.append(OverflowRow(
                    id=f"overflow-{state.clock}",
                    section_id=section.id,
                    day=state.day,
                    start_min=config.day_end_min,
                    end_min=state.clock,
                    label=OVERFLOW_LABEL,
                ))
                return rows

    # Lunch never crossed: append it after the last row if it still fits the day
    if (
        policy.lunch_enabled
        and not state.lunch_placed
        and state.clock <= config.day_end_min
        and config.lunch_target_min >= config.day_start_min  # type: ignore[operator]
    ):
        last_section_id = ordered[-1][0].id if ordered else None
        rows.append(_pause("lunch", last_section_id, state, policy.lunch_min))

    return rows
