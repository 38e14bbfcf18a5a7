"""Boundary: wall-clock text ↔ integer minutes since midnight.

All engine arithmetic uses integer minutes. Text only exists at the edges
(form inputs, print output), so conversion lives here and nowhere else.
"""

from __future__ import annotations

MINUTES_PER_HOUR = 60
HOURS_PER_DAY = 24
MINUTES_PER_DAY = MINUTES_PER_HOUR * HOURS_PER_DAY


def parse_time(text: str | None) -> int | None:
    """Parse 'H:MM' or 'HH:MM' (24-hour) to minutes since midnight.

    A trailing seconds part ('08:30:00') is ignored. Returns None for
    malformed input instead of raising.

    >>> parse_time("8:30")
    510
    >>> parse_time("0830") is None
    True
    """
    if not text:
        return None
    parts = text.strip().split(":")
    if len(parts) < 2:
        return None
    hours, minutes = parts[0].strip(), parts[1].strip()
    if not hours.isdecimal() or not minutes.isdecimal():
        return None
    return int(hours) * MINUTES_PER_HOUR + int(minutes)


def format_time(minutes: int) -> str:
    """Format minutes since midnight as 'h:mm AM|PM'.

    Negative input is clamped to midnight. Hours wrap at 24.
    """
    m = max(0, minutes)
    h24 = (m // MINUTES_PER_HOUR) % HOURS_PER_DAY
    mm = m % MINUTES_PER_HOUR
    h12 = 12 if h24 % 12 == 0 else h24 % 12
    suffix = "AM" if h24 < 12 else "PM"
    return f"{h12}:{mm:02d} {suffix}"


def format_time_24(minutes: int) -> str:
    """Format minutes since midnight as zero-padded 'HH:MM'.

    No clamping: negative values wrap backwards (floor division), so callers
    must validate before handing the text to an editable input.
    """
    h24 = (minutes // MINUTES_PER_HOUR) % HOURS_PER_DAY
    mm = minutes % MINUTES_PER_HOUR
    return f"{h24:02d}:{mm:02d}"


def format_range(start: int, end: int) -> str:
    """Printable span, e.g. '9:00 AM - 9:45 AM'."""
    return f"{format_time(start)} - {format_time(end)}"
