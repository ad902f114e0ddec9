"""Time utilities for the domain layer.

Dates in this domain are naive local wall-clock datetimes. Aware values are
converted to local time once, at the entity boundary.
"""

from datetime import date, datetime, time, timedelta
from typing import Any

END_OF_DAY = time(23, 59, 59, 999999)


def local_now() -> datetime:
    """Return current local datetime (naive)."""
    return datetime.now()


def to_local_naive(value: datetime | date) -> datetime:
    """Normalize a date or datetime to a naive local datetime."""
    if not isinstance(value, datetime):
        return datetime.combine(value, time.min)
    if value.tzinfo is not None:
        return value.astimezone().replace(tzinfo=None)
    return value


def start_of_day(dt: datetime) -> datetime:
    return datetime.combine(dt.date(), time.min)


def end_of_day(dt: datetime) -> datetime:
    return datetime.combine(dt.date(), END_OF_DAY)


def start_of_week(dt: datetime) -> datetime:
    """Return midnight of the Monday on or before ``dt``."""
    return start_of_day(dt) - timedelta(days=dt.weekday())


def first_day_of_month(dt: datetime) -> datetime:
    return datetime(dt.year, dt.month, 1)


def next_month_start(dt: datetime) -> datetime:
    if dt.month == 12:
        return datetime(dt.year + 1, 1, 1)
    return datetime(dt.year, dt.month + 1, 1)


def coerce_datetime(value: Any) -> Any:
    """Pydantic ``before`` hook: accept ISO strings, dates and aware datetimes.

    ISO strings may carry a trailing ``Z`` (JavaScript ``toISOString``).
    Anything else is handed back to pydantic untouched.
    """
    if isinstance(value, str):
        text = value.strip()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        return to_local_naive(datetime.fromisoformat(text))
    if isinstance(value, (date, datetime)):
        return to_local_naive(value)
    return value
