"""Injection planner: decide where breaks and lunch go, across days.

Rather than emitting rows, the planner records Injection anchors ("put a
break before activity X") that the host persists and later hands to the
renderer. Each day gets at most one lunch, bracketed by a break before it
and, if the afternoon has activities, one after it.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Sequence

from agenda_timeline.logging import get_logger
from agenda_timeline.ordering import walk_order
from agenda_timeline.state import BreakPolicy, PlanState
from agenda_timeline.types import (
    BREAK_LABEL,
    LUNCH_LABEL,
    Activity,
    DayConfig,
    Injection,
    Section,
)

logger = get_logger(__name__)


def _break(injection_id: str, section_id: str, minutes: int, anchor: str) -> Injection:
    return Injection(
        id=injection_id,
        kind="break",
        label=BREAK_LABEL,
        section_id=section_id,
        duration_min=minutes,
        anchor_activity_id=anchor,
    )


def _lunch(section_id: str, minutes: int, anchor: str) -> Injection:
    return Injection(
        id=f"inj-lunch-{anchor}",
        kind="lunch",
        label=LUNCH_LABEL,
        section_id=section_id,
        duration_min=minutes,
        anchor_activity_id=anchor,
    )


def plan_injections(
    config: DayConfig,
    sections: Sequence[Section],
    activities: Sequence[Activity],
) -> list[Injection]:
    """Simulate the agenda day by day and anchor breaks/lunch to activities.

    The clock is day-relative (0 = day start). An activity that would run past
    the day length moves to the next day; on the last day planning stops and
    the remaining activities get no injections.

    Returns:
        Injections in the order they were planned.
    """
    policy = BreakPolicy.from_config(config, day_relative=True)
    days = config.days
    day_length = config.day_length
    ordered = walk_order(sections, activities)

    injections: list[Injection] = []
    state = PlanState(clock=0)

    for section, section_activities in ordered:
        for activity in section_activities:
            duration = activity.duration_min

            if state.clock + duration > day_length:
                if state.owes_post_lunch_break and policy.breaks_enabled:
                    anchor = state.last_after_lunch_id
                    injections.append(_break(
                        f"inj-break-post-{anchor}", section.id, policy.break_min, anchor,  # type: ignore[arg-type]
                    ))
                    state = replace(state, post_lunch_break=True)
                if state.day_index + 1 >= days:
                    logger.debug(
                        "planning_stopped",
                        day=state.day,
                        activity_id=activity.id,
                        planned=len(injections),
                    )
                    return injections
                state = state.next_day()
                logger.debug("day_rollover", walker="planner", day=state.day, activity_id=activity.id)

            if not state.lunch_placed and policy.crosses_lunch(state.clock, duration):
                if not state.pre_lunch_break and policy.breaks_enabled:
                    injections.append(_break(
                        f"inj-break-pre-{activity.id}", section.id, policy.break_min, activity.id,
                    ))
                    state = replace(state, pre_lunch_break=True)
                injections.append(_lunch(section.id, policy.lunch_min, activity.id))
                state = state.take_lunch(policy.lunch_min)
            elif policy.break_due(state.minutes_since_break, duration):
                injections.append(_break(
                    f"inj-break-{activity.id}", section.id, policy.break_min, activity.id,
                ))
                state = state.take_break(policy.break_min)

            state = state.run(activity.id, duration)

    # Final day never reached lunch: anchor it before the last section's first activity
    if policy.lunch_enabled and not state.lunch_placed and ordered and state.day_index < days:
        last_section, last_activities = ordered[-1]
        if last_activities:
            injections.append(_lunch(last_section.id, policy.lunch_min, last_activities[0].id))

    if state.owes_post_lunch_break and policy.breaks_enabled:
        anchor = state.last_after_lunch_id
        section_id = ordered[-1][0].id if ordered else activities[0].section_id
        injections.append(_break(
            f"inj-break-post-{anchor}", section_id, policy.break_min, anchor,  # type: ignore[arg-type]
        ))

    logger.debug("injections_planned", count=len(injections), days_used=state.day)
    return injections
