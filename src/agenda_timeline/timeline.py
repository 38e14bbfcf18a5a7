"""One entry point over the walkers.

The walkers share the same break policy and walk-state record; this module
only picks which construction strategy runs:

    inline           breaks/lunch synthesised as rows, single day  (direct)
    anchored         planned injections replayed across days       (planner + render)
    day_partitioned  materialised system activities, per-day clock (partitioned)
"""

from __future__ import annotations

from enum import Enum
from typing import Sequence

from agenda_timeline.direct import compute_schedule
from agenda_timeline.logging import get_logger
from agenda_timeline.partitioned import build_schedule_from_activities
from agenda_timeline.planner import plan_injections
from agenda_timeline.render import build_schedule_with_injections
from agenda_timeline.types import Activity, ComputedRow, DayConfig, Injection, Section

logger = get_logger(__name__)


class Strategy(str, Enum):
    INLINE = "inline"
    ANCHORED = "anchored"
    DAY_PARTITIONED = "day_partitioned"


def build_timeline(
    config: DayConfig,
    sections: Sequence[Section],
    activities: Sequence[Activity],
    strategy: Strategy | str | None = None,
    injections: Sequence[Injection] | None = None,
) -> list[ComputedRow]:
    """Compute the timeline with the chosen strategy.

    Args:
        strategy: Strategy member or its value. None uses the AGENDA_STRATEGY
            setting (day_partitioned by default).
        injections: Only read by the anchored strategy. When None, injections
            are planned from config on the fly.

    Raises:
        ValueError: If strategy names no known strategy.
    """
    if strategy is None:
        from agenda_timeline.settings import get_settings

        strategy = get_settings().strategy
    strategy = Strategy(strategy)

    if strategy is Strategy.INLINE:
        rows = compute_schedule(config, sections, activities)
    elif strategy is Strategy.ANCHORED:
        if injections is None:
            injections = plan_injections(config, sections, activities)
        rows = build_schedule_with_injections(config, sections, activities, injections)
    else:
        rows = build_schedule_from_activities(config, sections, activities)

    logger.debug("timeline_built", strategy=strategy.value, rows=len(rows))
    return rows
