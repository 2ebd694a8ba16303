"""Utility helpers for reusable functionality."""

from .datetime import (
    ensure_app_naive_datetime,
    ensure_app_timezone,
    format_calendar_date,
    format_short_date,
    format_time_of_day,
    get_app_timezone,
    now_in_app_naive_datetime,
    now_in_app_timezone,
    parse_timestamp,
)

__all__ = [
    "ensure_app_naive_datetime",
    "ensure_app_timezone",
    "format_calendar_date",
    "format_short_date",
    "format_time_of_day",
    "get_app_timezone",
    "now_in_app_naive_datetime",
    "now_in_app_timezone",
    "parse_timestamp",
]
