"""Date range helpers and the period filter."""

from __future__ import annotations

import calendar
from datetime import datetime, timedelta
from typing import Optional, Sequence

from pennywise.domain.shared.exceptions import ErrorCode, ValidationError
from pennywise.domain.shared.time import (
    END_OF_DAY,
    end_of_day,
    local_now,
    start_of_day,
    start_of_week,
)
from pennywise.domain.tracking.entities import Transaction
from pennywise.domain.tracking.value_objects import DateFilter, DateRange


def get_month_date_range(month: int, year: int) -> DateRange:
    """Return the first instant to the last instant of a calendar month.

    Months outside 1..12 are rejected rather than rolled into a neighbouring
    year.
    """
    if not 1 <= month <= 12:
        msg = f"Month must be between 1 and 12, got {month}"
        raise ValidationError(
            msg,
            code=ErrorCode.INVALID_DATE,
            details={"month": month, "year": year},
        )
    if year < datetime.min.year or year > datetime.max.year:
        msg = f"Year out of range: {year}"
        raise ValidationError(msg, code=ErrorCode.INVALID_DATE, details={"year": year})

    last_day = calendar.monthrange(year, month)[1]
    return DateRange(
        start=datetime(year, month, 1),
        end=datetime.combine(datetime(year, month, last_day).date(), END_OF_DAY),
    )


def get_preset_date_range(
    date_filter: DateFilter,
    now: Optional[datetime] = None,
) -> Optional[DateRange]:
    """Resolve a preset to a concrete range; all-time and custom have none."""
    now = now or local_now()

    if date_filter == DateFilter.TODAY:
        return DateRange(start=start_of_day(now), end=end_of_day(now))

    if date_filter == DateFilter.THIS_WEEK:
        monday = start_of_week(now)
        return DateRange(start=monday, end=end_of_day(monday + timedelta(days=6)))

    if date_filter == DateFilter.THIS_MONTH:
        return get_month_date_range(now.month, now.year)

    if date_filter == DateFilter.THIS_YEAR:
        return DateRange(
            start=datetime(now.year, 1, 1),
            end=end_of_day(datetime(now.year, 12, 31)),
        )

    return None


def filter_transactions_by_period(
    transactions: Sequence[Transaction],
    date_range: DateRange,
) -> list[Transaction]:
    return [t for t in transactions if date_range.contains(t.date)]
