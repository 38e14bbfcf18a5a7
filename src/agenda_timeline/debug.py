"""ASCII visualisation for development-time verification.

This module is dev-only and not imported by production code.
"""

from __future__ import annotations

from typing import Sequence

from agenda_timeline.clock import MINUTES_PER_HOUR, format_range
from agenda_timeline.types import ActivityRow, ComputedRow, DayConfig

_ROW_CHARS = {"activity": "#", "break": "=", "lunch": "L", "overflow": "!"}


def row_title(row: ComputedRow) -> str:
    """Display title: the activity's title, or the synthetic row's label."""
    if isinstance(row, ActivityRow):
        return row.activity.title
    return row.label


def show_timeline(
    rows: Sequence[ComputedRow],
    config: DayConfig,
    minutes_per_char: int = 15,
) -> str:
    """Print an ASCII Gantt view of computed rows.

    One line per row. The bar axis starts at day start and extends to day end
    or the latest row end, whichever is later; '|' marks day end.
    Legend: '#' = activity, '=' = break, 'L' = lunch, '!' = overflow.
    Returns the string and also prints to stdout.
    """
    start = config.day_start_min
    axis_end = max([config.day_end_min] + [r.end_min for r in rows])
    width = max(1, -(-(axis_end - start) // minutes_per_char))
    day_end_char = (config.day_end_min - start) // minutes_per_char

    header = [" "] * width
    for minute in range(start, axis_end, MINUTES_PER_HOUR):
        pos = (minute - start) // minutes_per_char
        text = f"{(minute // MINUTES_PER_HOUR) % 24:02d}"
        for k, ch in enumerate(text):
            if pos + k < width:
                header[pos + k] = ch

    lines = [f"{'':>40s}  {''.join(header)}"]
    for row in rows:
        bar = ["."] * width
        if 0 <= day_end_char < width:
            bar[day_end_char] = "|"
        first = max(0, (row.start_min - start) // minutes_per_char)
        last = min(width, -(-(row.end_min - start) // minutes_per_char))
        for i in range(first, last):
            bar[i] = _ROW_CHARS[row.kind]
        label = f"D{row.day} {format_range(row.start_min, row.end_min)} {row_title(row)}"
        lines.append(f"{label[:40]:>40s}  {''.join(bar)}")

    result = "\n".join(lines)
    print(result)
    return result
