"""Relative time formatting ("3 hours ago")."""

from __future__ import annotations

from datetime import timedelta

# (unit name, seconds per unit), largest first
_UNITS: list[tuple[str, int]] = [
    ("year", 365 * 24 * 3600),
    ("month", 30 * 24 * 3600),
    ("week", 7 * 24 * 3600),
    ("day", 24 * 3600),
    ("hour", 3600),
    ("minute", 60),
    ("second", 1),
]


def humanize(elapsed: timedelta) -> str:
    """Render an elapsed duration as a relative, human-readable string.

    Uses the largest unit that fits and drops the remainder, so 90 minutes
    becomes "1 hour ago". Negative durations (clock skew, files from the
    future) read as "in ...".
    """
    seconds = int(elapsed.total_seconds())
    future = seconds < 0
    seconds = abs(seconds)

    for unit, size in _UNITS:
        if seconds >= size:
            count = seconds // size
            text = f"{count} {unit}" if count == 1 else f"{count} {unit}s"
            return f"in {text}" if future else f"{text} ago"

    return "now"
