"""
Calendar month arithmetic for monthly series.
"""

from datetime import date, datetime

import pandas as pd

from dealerdesk.common.exceptions import InvalidInputError


def parse_date(value: str | date | datetime) -> date:
    """Parse an ISO date (or datetime) string into a calendar date."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        ts = pd.Timestamp(value)
    except (TypeError, ValueError) as e:
        raise InvalidInputError(f"Invalid date {value!r}") from e
    if pd.isna(ts):
        raise InvalidInputError(f"Invalid date {value!r}")
    return ts.date()


def add_months(day: date, months: int) -> date:
    """Shift by whole calendar months, clamping the day to the target month's end."""
    return (pd.Timestamp(day) + pd.DateOffset(months=months)).date()


def future_month_dates(last_date: str | date, periods: int) -> list[date]:
    """The `periods` dates that follow `last_date` at one-month steps."""
    start = parse_date(last_date)
    return [add_months(start, i + 1) for i in range(periods)]


def month_index(day: date) -> int:
    """0-indexed month (January = 0, December = 11)."""
    return day.month - 1
