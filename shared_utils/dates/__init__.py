"""shared_utils/dates/__init__.py — public API of the dates package."""

from shared_utils.dates.date_utils import (
    DateInput,
    add_days,
    diff_in_days,
    end_of_day,
    format_date,
    is_future,
    is_past,
    is_same_day,
    is_within_range,
    max_date,
    min_date,
    now_iso,
    start_of_day,
    subtract_days,
    to_date_string,
    to_display_date,
    to_relative_string,
)

__all__ = [
    "DateInput",
    "to_date_string",
    "now_iso",
    "is_past",
    "is_future",
    "add_days",
    "subtract_days",
    "diff_in_days",
    "start_of_day",
    "end_of_day",
    "is_same_day",
    "max_date",
    "min_date",
    "is_within_range",
    "to_display_date",
    "format_date",
    "to_relative_string",
]
