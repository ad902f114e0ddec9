"""Monthly summary: totals, breakdowns, statistics and budgets for one month."""

from __future__ import annotations

import logging
from datetime import datetime
from decimal import Decimal
from typing import Optional, Sequence

from pennywise.application.calculations.breakdown import (
    TOP_TRANSACTIONS_LIMIT,
    MissingCategoryPolicy,
    calculate_category_breakdown,
    calculate_subcategory_breakdown,
    calculate_top_transactions,
)
from pennywise.application.calculations.budget import calculate_budget_progress
from pennywise.application.calculations.filters import (
    filter_transactions_by_period,
    filter_transactions_by_status,
    filter_transactions_by_type_and_currency,
    get_month_date_range,
    sum_amounts,
    sum_by_type,
)
from pennywise.application.calculations.percentages import ZERO, HUNDRED
from pennywise.application.dtos.analytics import (
    ExpenseBreakdown,
    IncomeBreakdown,
    MonthlySummary,
    MonthlyTransactionStats,
    SummaryPeriod,
    TypeStats,
)
from pennywise.domain.shared.time import local_now
from pennywise.domain.tracking.entities import Category, Transaction
from pennywise.domain.tracking.services import CategoryTree
from pennywise.domain.tracking.value_objects import (
    Currency,
    TransactionStatus,
    TransactionType,
)

logger = logging.getLogger(__name__)

DEFAULT_BASE_CURRENCY = "USD"


def calculate_savings_rate(income: Decimal, expenses: Decimal) -> Decimal:
    """Share of income kept, in percent; 0 when there is no income.

    Not clamped: spending more than earned gives a negative rate.
    """
    if income <= 0:
        return ZERO
    return (income - expenses) / income * HUNDRED


def calculate_total_balance(
    transactions: Sequence[Transaction],
    base_currency: Currency | str,
    now: Optional[datetime] = None,
) -> Decimal:
    """Running balance over the whole history up to ``now``.

    Income and refunds add, expenses subtract, transfers and recurring
    templates are ignored. Only completed transactions in the base currency
    count.
    """
    now = now or local_now()
    balance = ZERO

    for t in transactions:
        if not t.is_completed() or t.currency != base_currency or t.date > now:
            continue
        if t.type.is_inflow():
            balance += t.amount
        elif t.type == TransactionType.EXPENSE:
            balance -= t.amount

    return balance


def calculate_transaction_stats(
    transactions: Sequence[Transaction],
) -> MonthlyTransactionStats:
    total_transactions = len(transactions)
    total_amount = sum_amounts(transactions)
    average = total_amount / total_transactions if total_transactions else ZERO

    by_type = {kind.value: TypeStats() for kind in TransactionType}
    for t in transactions:
        stats = by_type[t.type.value]
        stats.count += 1
        stats.total += t.amount

    for stats in by_type.values():
        if stats.count > 0:
            stats.average = stats.total / stats.count

    return MonthlyTransactionStats(
        total_transactions=total_transactions,
        average_transaction_amount=average,
        by_type=by_type,
    )


def calculate_monthly_summary(  # NOQA: PLR0913
    month: int,
    year: int,
    transactions: Sequence[Transaction],
    categories: Sequence[Category] | CategoryTree,
    base_currency: Currency | str = DEFAULT_BASE_CURRENCY,
    now: Optional[datetime] = None,
    top_limit: int = TOP_TRANSACTIONS_LIMIT,
    missing_category_policy: MissingCategoryPolicy = MissingCategoryPolicy.DROP,
) -> MonthlySummary:
    """Build the dashboard summary for ``month``/``year``.

    Raises
    ------
    ValidationError
        If ``month`` is not between 1 and 12.
    """
    period = get_month_date_range(month, year)
    tree = CategoryTree.coerce(categories)

    in_month = filter_transactions_by_period(transactions, period)
    completed = filter_transactions_by_status(in_month, TransactionStatus.COMPLETED)
    valid = filter_transactions_by_type_and_currency(completed, base_currency)

    monthly_income = sum_by_type(valid, TransactionType.INCOME) + sum_by_type(
        valid,
        TransactionType.REFUND,
    )
    monthly_expenses = sum_by_type(valid, TransactionType.EXPENSE)

    expense_breakdown = ExpenseBreakdown(
        total=monthly_expenses,
        by_category=calculate_category_breakdown(
            valid,
            tree,
            TransactionType.EXPENSE,
            missing_category_policy,
        ),
        by_subcategory=calculate_subcategory_breakdown(
            valid,
            tree,
            TransactionType.EXPENSE,
        ),
        top_expenses=calculate_top_transactions(
            valid,
            tree,
            TransactionType.EXPENSE,
            top_limit,
        ),
    )
    income_breakdown = IncomeBreakdown(
        total=monthly_income,
        by_category=calculate_category_breakdown(
            valid,
            tree,
            TransactionType.INCOME,
            missing_category_policy,
        ),
        by_subcategory=calculate_subcategory_breakdown(
            valid,
            tree,
            TransactionType.INCOME,
        ),
        top_income=calculate_top_transactions(
            valid,
            tree,
            TransactionType.INCOME,
            top_limit,
        ),
    )

    logger.debug(
        "Summary %02d/%d: %d of %d transactions counted",
        month,
        year,
        len(valid),
        len(transactions),
    )

    return MonthlySummary(
        period=SummaryPeriod(
            month=month,
            year=year,
            start_date=period.start,
            end_date=period.end,
        ),
        total_balance=calculate_total_balance(transactions, base_currency, now),
        monthly_income=monthly_income,
        monthly_expenses=monthly_expenses,
        net_savings=monthly_income - monthly_expenses,
        savings_rate=calculate_savings_rate(monthly_income, monthly_expenses),
        expense_breakdown=expense_breakdown,
        income_breakdown=income_breakdown,
        transaction_stats=calculate_transaction_stats(valid),
        budget_progress=calculate_budget_progress(
            transactions,
            tree,
            period,
            base_currency,
        ),
    )
