"""agenda-timeline: deterministic agenda timelines with breaks, lunch and day rollover."""

from agenda_timeline.clock import format_range, format_time, format_time_24, parse_time
from agenda_timeline.direct import compute_schedule
from agenda_timeline.loaders import (
    Agenda,
    dump_agenda_json,
    export_activities_csv,
    import_activities_csv,
    load_agenda_json,
)
from agenda_timeline.ordering import group_activities, order_sections
from agenda_timeline.partitioned import (
    build_schedule_from_activities,
    is_overtime,
    walk_days,
)
from agenda_timeline.planner import plan_injections
from agenda_timeline.render import build_schedule_with_injections, materialize_injections
from agenda_timeline.state import BreakPolicy, WalkState
from agenda_timeline.timeline import Strategy, build_timeline
from agenda_timeline.types import (
    Activity,
    ActivityRow,
    ComputedRow,
    DayConfig,
    Injection,
    OverflowRow,
    PauseRow,
    Section,
)

__all__ = [
    "Activity",
    "ActivityRow",
    "Agenda",
    "BreakPolicy",
    "ComputedRow",
    "DayConfig",
    "Injection",
    "OverflowRow",
    "PauseRow",
    "Section",
    "Strategy",
    "WalkState",
    "build_schedule_from_activities",
    "build_schedule_with_injections",
    "build_timeline",
    "compute_schedule",
    "dump_agenda_json",
    "export_activities_csv",
    "format_range",
    "format_time",
    "format_time_24",
    "group_activities",
    "import_activities_csv",
    "is_overtime",
    "load_agenda_json",
    "materialize_injections",
    "order_sections",
    "parse_time",
    "plan_injections",
    "walk_days",
]
