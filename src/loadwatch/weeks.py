"""Week windows: seven consecutive dates starting on a Monday."""

from datetime import date, datetime, timedelta
from typing import List, Union

DateLike = Union[date, datetime, str]

DAYS_PER_WEEK = 7


def to_date(value: DateLike) -> date:
    """Normalise a date, datetime or ISO ``YYYY-MM-DD`` string to a date."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return datetime.strptime(value, "%Y-%m-%d").date()


def week_start(anchor: DateLike) -> date:
    """Round a date down to the Monday of its week (Monday = day 0)."""
    day = to_date(anchor)
    return day - timedelta(days=day.weekday())


def add_days(day: DateLike, days: int) -> date:
    return to_date(day) + timedelta(days=days)


def week_dates(start: DateLike) -> List[date]:
    """Return the seven dates of the week beginning at ``start``.

    The last week of the calendar is cut short at ``date.max``.
    """
    first = to_date(start)
    days = min(DAYS_PER_WEEK, (date.max - first).days + 1)
    return [first + timedelta(days=i) for i in range(days)]


def previous_week_starts(start: DateLike, weeks: int) -> List[date]:
    """Mondays of the ``weeks`` weeks strictly before the week of ``start``.

    Ordered from the most recent week to the oldest. Weeks before
    ``date.min`` do not exist and are not returned.
    """
    monday = week_start(start)
    available = (monday - date.min).days // DAYS_PER_WEEK
    return [
        monday - timedelta(days=DAYS_PER_WEEK * k)
        for k in range(1, min(weeks, available) + 1)
    ]
