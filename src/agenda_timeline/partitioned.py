"""Day-partitioned walk: the production timeline.

Breaks and lunch are already materialised as system activities, so this walk
only lays activities end to end. Sections are grouped by their day number
and each new day restarts the clock at day start. Within a day there is no
rollover and no overflow row: running late shows up as overtime
(is_overtime), not as a truncated timeline.
"""

from __future__ import annotations

from typing import Iterator, Sequence

from agenda_timeline.ordering import walk_order
from agenda_timeline.state import WalkState
from agenda_timeline.types import (
    Activity,
    ActivityRow,
    ComputedRow,
    DayConfig,
    Section,
)


def walk_days(
    config: DayConfig,
    sections: Sequence[Section],
    activities: Sequence[Activity],
) -> Iterator[tuple[ActivityRow, WalkState]]:
    """Yield each placed activity with the walk state after placing it.

    The break timer resets on lunch system entries and otherwise accumulates
    every duration, system breaks included.
    """
    ordered = walk_order(sections, activities, by_day=True)
    current_day = ordered[0][0].day if ordered else 1
    state = WalkState(clock=config.day_start_min, day_index=current_day - 1)

    for section, section_activities in ordered:
        if section.day != current_day:
            current_day = section.day
            state = state.start_day(current_day - 1, config.day_start_min)

        for activity in section_activities:
            row = ActivityRow(
                id=activity.id,
                section_id=section.id,
                day=current_day,
                start_min=state.clock,
                end_min=state.clock + activity.duration_min,
                activity=activity,
            )
            state = state.advance(activity.duration_min)
            if activity.is_lunch_entry:
                state = state.reset_break_timer()
            yield row, state


def build_schedule_from_activities(
    config: DayConfig,
    sections: Sequence[Section],
    activities: Sequence[Activity],
) -> list[ComputedRow]:
    """Rows for every activity whose section exists, in (day, order) order."""
    return [row for row, _ in walk_days(config, sections, activities)]


def is_overtime(row: ComputedRow, config: DayConfig) -> bool:
    """True if the row ends after the configured day end."""
    return row.end_min > config.day_end_min
