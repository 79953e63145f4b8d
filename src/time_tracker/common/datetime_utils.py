from __future__ import annotations

from datetime import date, datetime, time
from typing import Optional

CLOCK_FORMAT = "%I:%M:%S %p"


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def now_local() -> datetime:
    """Current local time; services take an explicit `now` to override it."""
    return datetime.now()


def today_iso(now: Optional[datetime] = None) -> str:
    return (now or now_local()).date().isoformat()


def format_clock(moment: datetime) -> str:
    """12-hour clock string stored on time logs, e.g. '09:05:03 AM'."""
    return moment.strftime(CLOCK_FORMAT)


def parse_clock(value: str) -> Optional[time]:
    """Read a clock string written by :func:`format_clock` back into a time.

    Accepts 'h:mm[:ss] AM|PM' and, without a period, a 24-hour clock.
    Returns None for anything it cannot read.
    """
    if not value:
        return None

    parts = value.split()
    if not parts or len(parts) > 2:
        return None
    period = parts[1].upper() if len(parts) == 2 else None
    if period not in (None, "AM", "PM"):
        return None

    fields = parts[0].split(":")
    if len(fields) not in (2, 3):
        return None
    try:
        hours, minutes = int(fields[0]), int(fields[1])
        seconds = int(fields[2]) if len(fields) == 3 else 0
    except ValueError:
        return None

    if period is not None and not 1 <= hours <= 12:
        return None
    if period == "PM" and hours != 12:
        hours += 12
    if period == "AM" and hours == 12:
        hours = 0

    try:
        return time(hour=hours, minute=minutes, second=seconds)
    except ValueError:
        return None


def format_report_date(value: str) -> str:
    """'2026-10-17' -> 'Sat, Oct 17, 2026'. Unparseable input is returned as-is."""
    try:
        d = parse_iso_date(value)
    except ValueError:
        return value
    return f"{d:%a}, {d:%b} {d.day}, {d.year}"
