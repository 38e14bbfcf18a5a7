"""Stable iteration order over sections and their activities."""

from __future__ import annotations

from typing import Iterable, Sequence

from agenda_timeline.types import Activity, Section


def order_sections(sections: Iterable[Section], by_day: bool = False) -> list[Section]:
    """Return sections sorted for walking. Does not mutate the input.

    by_day=False sorts by order alone; by_day=True sorts by (day, order),
    with a missing day number treated as day 1. The sort is stable, so
    sections with equal keys keep their insertion order.
    """
    if by_day:
        return sorted(sections, key=lambda s: (s.day, s.order))
    return sorted(sections, key=lambda s: s.order)


def group_activities(
    sections: Sequence[Section],
    activities: Iterable[Activity],
) -> dict[str, list[Activity]]:
    """Map section id -> activities in input order.

    Every section gets an entry, empty if it has no activities. Activities
    referencing an unknown section belong to no group and are never walked.
    """
    groups: dict[str, list[Activity]] = {s.id: [] for s in sections}
    for activity in activities:
        bucket = groups.get(activity.section_id)
        if bucket is not None:
            bucket.append(activity)
    return groups


def walk_order(
    sections: Sequence[Section],
    activities: Iterable[Activity],
    by_day: bool = False,
) -> list[tuple[Section, list[Activity]]]:
    """Ordered (section, activities) pairs, the shape every walker iterates."""
    ordered = order_sections(sections, by_day=by_day)
    groups = group_activities(ordered, activities)
    return [(section, groups[section.id]) for section in ordered]
