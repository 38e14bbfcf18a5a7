"""Shared types: inputs (Activity, Section, DayConfig), outputs (rows) and Injection."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Union

PauseKind = Literal["break", "lunch"]
RowKind = Literal["activity", "break", "lunch", "overflow"]

LUNCH_KEY_PREFIX = "lunch:day"
BREAK_KEY_PREFIX = "break:day"

BREAK_LABEL = "Break"
LUNCH_LABEL = "Lunch"


@dataclass
class Activity:
    """A unit of agenda work. Owned and mutated by the host; the engine only reads it."""

    id: str
    title: str
    duration_min: int
    section_id: str
    owner: str = ""
    slide_number: str | None = None
    files: str | None = None
    details: str | None = None
    notes: str | None = None
    is_system: bool = False
    system_key: str | None = None
    completed: bool = False

    @property
    def is_lunch_entry(self) -> bool:
        """Materialised lunch: a system activity keyed 'lunch:day...'."""
        return self.is_system and (self.system_key or "").startswith(LUNCH_KEY_PREFIX)


@dataclass
class Section:
    """Named group of activities. Ordering key is (day, order), ties by insertion."""

    id: str
    name: str
    order: float
    day_number: int | None = None

    @property
    def day(self) -> int:
        return self.day_number if self.day_number is not None else 1


@dataclass
class DayConfig:
    """Day bounds and break/lunch thresholds, all in minutes since midnight.

    A missing (or zero) break field disables breaks; likewise for lunch.
    """

    day_start_min: int
    day_end_min: int
    number_of_days: int | None = None
    break_interval_min: int | None = None
    break_duration_min: int | None = None
    lunch_target_min: int | None = None
    lunch_duration_min: int | None = None

    @property
    def days(self) -> int:
        """Number of simulated days, never below one."""
        return max(1, self.number_of_days or 1)

    @property
    def day_length(self) -> int:
        """Usable minutes per day, never below one."""
        return max(1, self.day_end_min - self.day_start_min)

    @property
    def breaks_enabled(self) -> bool:
        return bool(self.break_interval_min) and bool(self.break_duration_min)

    @property
    def lunch_enabled(self) -> bool:
        return bool(self.lunch_target_min) and bool(self.lunch_duration_min)


# ---------------------------------------------------------------------------
# Computed rows
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class _RowBase:
    """Fields every computed row carries.

    Invariants:
        - end_min - start_min == duration for activity rows
        - day is 1-based; rows are ordered by (day, start_min)
    """

    id: str
    section_id: str | None
    day: int
    start_min: int
    end_min: int

    @property
    def duration(self) -> int:
        return self.end_min - self.start_min


@dataclass(frozen=True)
class ActivityRow(_RowBase):
    """A real activity placed on the timeline."""

    activity: Activity

    @property
    def kind(self) -> RowKind:
        return "activity"

    @property
    def computed(self) -> bool:
        return False


@dataclass(frozen=True)
class PauseRow(_RowBase):
    """A synthesised break or lunch."""

    kind: PauseKind
    label: str

    @property
    def computed(self) -> bool:
        return True


@dataclass(frozen=True)
class OverflowRow(_RowBase):
    """Marker: the plan runs past the configured end of day/schedule."""

    label: str

    @property
    def kind(self) -> RowKind:
        return "overflow"

    @property
    def computed(self) -> bool:
        return True


ComputedRow = Union[ActivityRow, PauseRow, OverflowRow]


# ---------------------------------------------------------------------------
# Injections
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class Injection:
    """Persisted plan for a break or lunch, anchored before an activity.

    The anchor is a weak reference: if no activity with anchor_activity_id
    exists the injection is inert and renders nothing.
    """

    id: str
    kind: PauseKind
    label: str
    section_id: str
    duration_min: int
    anchor_activity_id: str
