"""
shared_utils/dates/date_utils.py

Common date/time helpers.

Every helper accepts a ``datetime`` or an ISO-8601 string. Naive values are
interpreted as UTC so that date-only strings such as ``"2026-01-01"`` mean
midnight UTC. Helpers never modify their inputs; they return new values.
"""

from __future__ import annotations

import math
from datetime import datetime, timedelta, timezone, tzinfo
from typing import Optional, Union

from dateutil import tz
from dateutil.parser import isoparse

from shared_utils.core.config import settings
from shared_utils.core.constants import (
    MONTH_ABBREVIATIONS,
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
)
from shared_utils.core.exceptions import InvalidDateError

DateInput = Union[datetime, str]


# ── Internals ──────────────────────────────────────────────────────────────────

def _to_datetime(value: DateInput) -> datetime:
    """Coerce a datetime or ISO-8601 string into an aware datetime."""
    if isinstance(value, str):
        try:
            value = isoparse(value)
        except ValueError as exc:
            raise InvalidDateError(f"'{value}' is not a valid ISO-8601 date: {exc}") from exc
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value


def _to_utc(value: DateInput) -> datetime:
    return _to_datetime(value).astimezone(timezone.utc)


def _as_datetime(value: DateInput) -> datetime:
    """Parse strings; datetimes pass through with their own tzinfo (or none)."""
    return _to_datetime(value) if isinstance(value, str) else value


def _local_timezone() -> Optional[tzinfo]:
    """Configured display timezone; None means the system's local zone."""
    if settings.local_timezone:
        return tz.gettz(settings.local_timezone)
    return None


def _plural(count: int, unit: str) -> str:
    return f"{count} {unit}{'' if count == 1 else 's'}"


# ── Formatting ─────────────────────────────────────────────────────────────────

def to_date_string(date: DateInput) -> str:
    """Format a date as an ISO 8601 date string (YYYY-MM-DD) in UTC."""
    return _to_utc(date).date().isoformat()


def now_iso() -> str:
    """Current UTC timestamp, e.g. ``2026-02-16T15:45:12.345Z``."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def to_display_date(date: Optional[DateInput]) -> str:
    """
    Format a date as a short, human-readable UTC date for UI labels,
    activity logs and default titles.

    Output example: ``"Feb 16, 2026"``. Returns "" for None.
    """
    if date is None:
        return ""
    d = _to_utc(date)
    return f"{MONTH_ABBREVIATIONS[d.month]} {d.day}, {d.year}"


def format_date(date: Optional[DateInput]) -> str:
    """
    Format a date as date + time in the configured local timezone, for
    timestamps and audit trails.

    Output example: ``"2/16/2026, 3:45:12 PM"``. Returns "" for None.
    """
    if date is None:
        return ""
    d = _to_datetime(date).astimezone(_local_timezone())
    hour = d.hour % 12 or 12
    meridiem = "AM" if d.hour < 12 else "PM"
    return f"{d.month}/{d.day}/{d.year}, {hour}:{d.minute:02d}:{d.second:02d} {meridiem}"


def to_relative_string(date: DateInput, now: Optional[datetime] = None) -> str:
    """
    Describe a date relative to now, e.g. "3 days ago" or "in 2 hours".

    Anything within a minute either way is "just now". Units are floored.

    Args:
        date : The moment to describe.
        now  : Reference moment. Defaults to the current UTC time.
    """
    reference = _to_utc(now) if now is not None else datetime.now(timezone.utc)
    diff = (_to_utc(date) - reference).total_seconds()
    elapsed = abs(diff)

    if elapsed < SECONDS_PER_MINUTE:
        return "just now"
    if elapsed < SECONDS_PER_HOUR:
        label = _plural(math.floor(elapsed / SECONDS_PER_MINUTE), "minute")
    elif elapsed < SECONDS_PER_DAY:
        label = _plural(math.floor(elapsed / SECONDS_PER_HOUR), "hour")
    else:
        label = _plural(math.floor(elapsed / SECONDS_PER_DAY), "day")

    return f"in {label}" if diff > 0 else f"{label} ago"


# ── Comparison ─────────────────────────────────────────────────────────────────

def is_past(date: DateInput) -> bool:
    return _to_datetime(date) < datetime.now(timezone.utc)


def is_future(date: DateInput) -> bool:
    return _to_datetime(date) > datetime.now(timezone.utc)


def is_same_day(a: DateInput, b: DateInput) -> bool:
    """True if both dates fall on the same UTC calendar day."""
    return to_date_string(a) == to_date_string(b)


def is_within_range(date: DateInput, start: DateInput, end: DateInput) -> bool:
    """True if ``start <= date <= end`` (inclusive at both ends)."""
    moment = _to_datetime(date)
    return _to_datetime(start) <= moment <= _to_datetime(end)


def diff_in_days(a: DateInput, b: DateInput) -> float:
    """Absolute difference between two dates in days; fractional for partial days."""
    return abs((_to_utc(a) - _to_utc(b)).total_seconds()) / SECONDS_PER_DAY


def max_date(a: DateInput, b: DateInput) -> DateInput:
    """Return the later of two dates; ``a`` wins a tie."""
    return a if _to_datetime(a) >= _to_datetime(b) else b


def min_date(a: DateInput, b: DateInput) -> DateInput:
    """Return the earlier of two dates; ``a`` wins a tie."""
    return a if _to_datetime(a) <= _to_datetime(b) else b


# ── Arithmetic ─────────────────────────────────────────────────────────────────

def add_days(date: DateInput, days: int) -> datetime:
    """
    Return a new datetime ``days`` calendar days later (earlier if negative).

    Arithmetic is on the wall clock of ``date``'s own timezone, so the time of
    day is kept across DST changes. Strings are parsed first (naive means UTC).
    """
    return _as_datetime(date) + timedelta(days=days)


def subtract_days(date: DateInput, days: int) -> datetime:
    return add_days(date, -days)


def start_of_day(date: DateInput) -> datetime:
    """00:00:00.000000 on the same day, timezone unchanged."""
    return _as_datetime(date).replace(hour=0, minute=0, second=0, microsecond=0)


def end_of_day(date: DateInput) -> datetime:
    """23:59:59.999999 on the same day, timezone unchanged."""
    return _as_datetime(date).replace(hour=23, minute=59, second=59, microsecond=999_999)
