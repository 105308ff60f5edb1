"""Names of the days of the week."""

from __future__ import annotations

import datetime

_DAY_NAMES = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)


def day_name(day: int) -> str:
    """Return the English name of an ISO weekday (1 is Monday, 7 is Sunday)."""
    if not 1 <= day <= 7:
        raise ValueError(f"weekday must be between 1 and 7, got {day}")
    return _DAY_NAMES[day - 1]


def current_day_of_week(today: datetime.date | None = None) -> str:
    """Return the weekday name of ``today``, or of the current date if omitted."""
    if today is None:
        today = datetime.date.today()
    return day_name(today.isoweekday())