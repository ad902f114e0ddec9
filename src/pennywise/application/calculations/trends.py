"""Month-over-month trend series and comparisons."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional, Sequence

from pennywise.application.calculations.filters import (
    filter_transactions_by_period,
    filter_transactions_by_status,
    filter_transactions_by_type_and_currency,
    get_month_date_range,
    sum_by_type,
)
from pennywise.application.calculations.monthly_summary import (
    DEFAULT_BASE_CURRENCY,
    calculate_monthly_summary,
    calculate_savings_rate,
)
from pennywise.application.calculations.percentages import ZERO, percentage_change
from pennywise.application.dtos.analytics import (
    MonthlySummary,
    MonthlyTrend,
    TrendChange,
    TrendComparison,
)
from pennywise.domain.shared.months import current_month, month_label, shift_month
from pennywise.domain.tracking.entities import Category, Transaction
from pennywise.domain.tracking.services import CategoryTree
from pennywise.domain.tracking.value_objects import (
    Currency,
    TransactionStatus,
    TransactionType,
)

logger = logging.getLogger(__name__)

TREND_MONTHS = 6


def calculate_month_trend(
    month: int,
    year: int,
    transactions: Sequence[Transaction],
    base_currency: Currency | str = DEFAULT_BASE_CURRENCY,
) -> MonthlyTrend:
    """Income, expenses and savings for one month, counted like the summary."""
    period = get_month_date_range(month, year)
    in_month = filter_transactions_by_period(transactions, period)
    completed = filter_transactions_by_status(in_month, TransactionStatus.COMPLETED)
    valid = filter_transactions_by_type_and_currency(completed, base_currency)

    income = sum_by_type(valid, TransactionType.INCOME) + sum_by_type(
        valid,
        TransactionType.REFUND,
    )
    expenses = sum_by_type(valid, TransactionType.EXPENSE)

    return MonthlyTrend(
        month=month,
        year=year,
        period_label=month_label(month, year),
        income=income,
        expenses=expenses,
        savings=income - expenses,
        savings_rate=calculate_savings_rate(income, expenses),
    )


def trend_from_summary(summary: MonthlySummary) -> MonthlyTrend:
    period = summary.period
    return MonthlyTrend(
        month=period.month,
        year=period.year,
        period_label=month_label(period.month, period.year),
        income=summary.monthly_income,
        expenses=summary.monthly_expenses,
        savings=summary.net_savings,
        savings_rate=summary.savings_rate,
    )


def calculate_monthly_trends(
    transactions: Sequence[Transaction],
    categories: Sequence[Category] | CategoryTree,
    months: int = TREND_MONTHS,
    base_currency: Currency | str = DEFAULT_BASE_CURRENCY,
    now: Optional[datetime] = None,
) -> list[MonthlyTrend]:
    """Trailing ``months`` calendar months ending at the month of ``now``.

    Each point is the projection of that month's summary. Oldest month first.
    """
    end_month, end_year = current_month(now)
    tree = CategoryTree.coerce(categories)
    trends: list[MonthlyTrend] = []

    for offset in range(months - 1, -1, -1):
        month, year = shift_month(end_month, end_year, -offset)
        summary = calculate_monthly_summary(
            month, year, transactions, tree, base_currency, now,
        )
        trends.append(trend_from_summary(summary))

    logger.debug(
        "Computed %d trend points ending %s",
        len(trends),
        month_label(end_month, end_year),
    )
    return trends


def calculate_trend_comparison(
    current: MonthlyTrend,
    previous: Optional[MonthlyTrend] = None,
) -> TrendComparison:
    """Deltas from ``previous`` to ``current``.

    Without a previous point the deltas are the current values themselves and
    the percentage deltas are 0.
    """
    if previous is None:
        change = TrendChange(
            income=current.income,
            income_percentage=ZERO,
            expenses=current.expenses,
            expenses_percentage=ZERO,
            savings=current.savings,
            savings_rate=current.savings_rate,
        )
    else:
        change = TrendChange(
            income=current.income - previous.income,
            income_percentage=percentage_change(current.income, previous.income),
            expenses=current.expenses - previous.expenses,
            expenses_percentage=percentage_change(
                current.expenses,
                previous.expenses,
            ),
            savings=current.savings - previous.savings,
            savings_rate=current.savings_rate - previous.savings_rate,
        )

    return TrendComparison(current=current, previous=previous, change=change)
