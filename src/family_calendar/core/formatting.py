"""Danish long-form date rendering used by prompts and presentation."""

from __future__ import annotations

from datetime import date, datetime, tzinfo

WEEKDAYS = ("mandag", "tirsdag", "onsdag", "torsdag", "fredag", "lørdag", "søndag")
MONTHS = (
    "januar",
    "februar",
    "marts",
    "april",
    "maj",
    "juni",
    "juli",
    "august",
    "september",
    "oktober",
    "november",
    "december",
)


def format_long_date(day: date) -> str:
    """``lørdag den 18. oktober 2026``"""

    return f"{WEEKDAYS[day.weekday()]} den {day.day}. {MONTHS[day.month - 1]} {day.year}"


def format_event_time(start: datetime, end: datetime, tz: tzinfo) -> str:
    start = start.astimezone(tz)
    end = end.astimezone(tz)
    span = f"{start:%H:%M} - {end:%H:%M}"
    if start.date() != end.date():
        span = f"{start:%H:%M} - {end.day}. {MONTHS[end.month - 1][:3]} {end:%H:%M}"
    return f"{start.day}. {MONTHS[start.month - 1][:3]}, {span}"
