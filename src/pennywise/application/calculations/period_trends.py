"""Income and expense series bucketed by day, week or month."""

from __future__ import annotations

import logging
from datetime import datetime, timedelta
from typing import Optional, Sequence

from pennywise.application.calculations.filters import (
    filter_transactions_by_period,
    filter_transactions_by_status,
    filter_transactions_by_type_and_currency,
    get_month_date_range,
    get_preset_date_range,
)
from pennywise.application.calculations.percentages import ZERO
from pennywise.application.dtos.analytics import PeriodTrend
from pennywise.domain.shared.months import MONTH_ABBREVIATIONS, month_label
from pennywise.domain.shared.time import (
    first_day_of_month,
    local_now,
    next_month_start,
    start_of_day,
    start_of_week,
)
from pennywise.domain.tracking.entities import Transaction
from pennywise.domain.tracking.value_objects import (
    Currency,
    DateFilter,
    DateRange,
    Granularity,
    PeriodType,
    TransactionStatus,
    TransactionType,
)

logger = logging.getLogger(__name__)

LARGE_SERIES_THRESHOLD = 366

_PERIOD_GRANULARITY = {
    PeriodType.THIS_WEEK: Granularity.DAY,
    PeriodType.THIS_MONTH: Granularity.DAY,
    PeriodType.THIS_YEAR: Granularity.MONTH,
    PeriodType.CUSTOM: Granularity.DAY,
}

_PERIOD_PRESET = {
    PeriodType.THIS_WEEK: DateFilter.THIS_WEEK,
    PeriodType.THIS_MONTH: DateFilter.THIS_MONTH,
    PeriodType.THIS_YEAR: DateFilter.THIS_YEAR,
}


def get_granularity_for_period(period_type: PeriodType) -> Granularity:
    """Custom periods stay per-day regardless of their length."""
    return _PERIOD_GRANULARITY.get(period_type, Granularity.DAY)


def get_period_date_range(
    period_type: PeriodType,
    custom_range: Optional[DateRange] = None,
    now: Optional[datetime] = None,
) -> DateRange:
    if period_type == PeriodType.CUSTOM and custom_range is not None:
        return custom_range

    preset = _PERIOD_PRESET.get(period_type, DateFilter.THIS_MONTH)
    date_range = get_preset_date_range(preset, now)
    if date_range is None:
        now = now or local_now()
        return get_month_date_range(now.month, now.year)
    return date_range


def _bucket_start(moment: datetime, granularity: Granularity) -> datetime:
    if granularity == Granularity.WEEK:
        return start_of_week(moment)
    if granularity == Granularity.MONTH:
        return first_day_of_month(moment)
    return start_of_day(moment)


def _bucket_after(start: datetime, granularity: Granularity) -> datetime:
    if granularity == Granularity.WEEK:
        return start + timedelta(days=7)
    if granularity == Granularity.MONTH:
        return next_month_start(start)
    return start + timedelta(days=1)


def _bucket_label(start: datetime, granularity: Granularity) -> str:
    day_label = f"{MONTH_ABBREVIATIONS[start.month - 1]} {start.day:02d}"
    if granularity == Granularity.WEEK:
        return f"Week of {day_label}"
    if granularity == Granularity.MONTH:
        return month_label(start.month, start.year)
    return day_label


def _bucket_bounds(
    date_range: DateRange,
    granularity: Granularity,
) -> list[tuple[datetime, datetime]]:
    bounds: list[tuple[datetime, datetime]] = []
    start = _bucket_start(date_range.start, granularity)

    while start <= date_range.end:
        after = _bucket_after(start, granularity)
        bounds.append((start, after - timedelta(microseconds=1)))
        start = after

    return bounds


def calculate_period_trends(
    transactions: Sequence[Transaction],
    date_range: DateRange,
    granularity: Granularity,
    base_currency: Currency | str,
) -> list[PeriodTrend]:
    """One point per bucket from the bucket holding ``date_range.start``.

    The first and last buckets are aligned to their calendar boundaries but
    only transactions inside ``date_range`` are counted.
    """
    in_range = filter_transactions_by_period(transactions, date_range)
    completed = filter_transactions_by_status(in_range, TransactionStatus.COMPLETED)
    valid = filter_transactions_by_type_and_currency(completed, base_currency)

    bounds = _bucket_bounds(date_range, granularity)
    if len(bounds) > LARGE_SERIES_THRESHOLD:
        logger.warning(
            "Period trend with %s granularity has %d points (%s to %s)",
            granularity.value,
            len(bounds),
            date_range.start.date(),
            date_range.end.date(),
        )

    index = {start: position for position, (start, _) in enumerate(bounds)}
    income = [ZERO] * len(bounds)
    expenses = [ZERO] * len(bounds)

    for t in valid:
        position = index[_bucket_start(t.date, granularity)]
        if t.type.is_inflow():
            income[position] += t.amount
        elif t.type == TransactionType.EXPENSE:
            expenses[position] += t.amount

    return [
        PeriodTrend(
            start=start,
            end=end,
            label=_bucket_label(start, granularity),
            income=income[position],
            expenses=expenses[position],
            savings=income[position] - expenses[position],
        )
        for position, (start, end) in enumerate(bounds)
    ]
