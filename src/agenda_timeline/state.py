"""Immutable walk state and the break/lunch policy shared by every walker.

Each walker threads a state record through its loop. Transitions return a
new record and never mutate the old one, so every step can be checked in
isolation.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from agenda_timeline.types import DayConfig


@dataclass(frozen=True)
class BreakPolicy:
    """Threshold rules deciding when a break or lunch is due.

    lunch_at is expressed in the same units as the clock it is compared
    against: absolute minutes for the direct walk, minutes since day start
    for the planner.
    """

    interval_min: int = 0
    break_min: int = 0
    lunch_at: int | None = None
    lunch_min: int = 0

    @classmethod
    def from_config(cls, config: DayConfig, day_relative: bool = False) -> BreakPolicy:
        lunch_at = config.lunch_target_min
        if lunch_at and day_relative:
            lunch_at -= config.day_start_min
        return cls(
            interval_min=config.break_interval_min or 0,
            break_min=config.break_duration_min or 0,
            lunch_at=lunch_at if config.lunch_target_min else None,
            lunch_min=config.lunch_duration_min or 0,
        )

    @property
    def breaks_enabled(self) -> bool:
        return bool(self.interval_min) and bool(self.break_min)

    @property
    def lunch_enabled(self) -> bool:
        return self.lunch_at is not None and bool(self.lunch_min)

    def break_due(self, minutes_since_break: int, duration: int) -> bool:
        """True if running `duration` more minutes would exceed the interval."""
        if not self.breaks_enabled:
            return False
        return minutes_since_break + duration > self.interval_min

    def crosses_lunch(self, clock: int, duration: int) -> bool:
        """True if [clock, clock + duration) strictly straddles the lunch target."""
        if self.lunch_at is None or not self.lunch_min or self.lunch_at <= 0:
            return False
        return clock < self.lunch_at < clock + duration


@dataclass(frozen=True)
class WalkState:
    """Clock plus break bookkeeping for a forward walk."""

    clock: int
    minutes_since_break: int = 0
    lunch_placed: bool = False
    day_index: int = 0

    @property
    def day(self) -> int:
        """1-based day number."""
        return self.day_index + 1

    def advance(self, minutes: int) -> WalkState:
        """Run an activity: clock and break timer both move."""
        return replace(
            self,
            clock=self.clock + minutes,
            minutes_since_break=self.minutes_since_break + minutes,
        )

    def take_break(self, minutes: int) -> WalkState:
        return replace(self, clock=self.clock + minutes, minutes_since_break=0)

    def take_lunch(self, minutes: int) -> WalkState:
        return replace(
            self,
            clock=self.clock + minutes,
            minutes_since_break=0,
            lunch_placed=True,
        )

    def reset_break_timer(self) -> WalkState:
        return replace(self, minutes_since_break=0)

    def next_day(self, clock: int) -> WalkState:
        """Fresh day: clock back to `clock`, all per-day bookkeeping cleared."""
        return WalkState(clock=clock, day_index=self.day_index + 1)

    def start_day(self, day_index: int, clock: int) -> WalkState:
        """Jump straight to an explicit day (used by the day-partitioned walk)."""
        return WalkState(clock=clock, day_index=day_index)


@dataclass(frozen=True)
class PlanState(WalkState):
    """WalkState extended with the planner's per-day lunch bracketing flags."""

    pre_lunch_break: bool = False
    after_lunch: bool = False
    post_lunch_break: bool = False
    last_after_lunch_id: str | None = None

    @property
    def owes_post_lunch_break(self) -> bool:
        return (
            self.after_lunch
            and not self.post_lunch_break
            and self.last_after_lunch_id is not None
        )

    def next_day(self, clock: int = 0) -> PlanState:
        return PlanState(clock=clock, day_index=self.day_index + 1)

    def take_lunch(self, minutes: int) -> PlanState:
        return replace(
            self,
            clock=self.clock + minutes,
            minutes_since_break=0,
            lunch_placed=True,
            after_lunch=True,
            last_after_lunch_id=None,
        )

    def take_break(self, minutes: int) -> PlanState:
        return replace(
            self,
            clock=self.clock + minutes,
            minutes_since_break=0,
            post_lunch_break=self.post_lunch_break or self.after_lunch,
        )

    def run(self, activity_id: str, minutes: int) -> PlanState:
        """Advance past an activity, remembering it if lunch already happened."""
        state = self.advance(minutes)
        if self.after_lunch:
            state = replace(state, last_after_lunch_id=activity_id)
        return state
