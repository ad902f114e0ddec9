"""Budget progress per category for a date range."""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Sequence

from pennywise.application.calculations.filters import (
    filter_transactions_by_period,
    sum_amounts,
)
from pennywise.application.calculations.percentages import percentage_of
from pennywise.application.dtos.analytics import BudgetProgress, BudgetStatus
from pennywise.domain.tracking.entities import Category, Transaction
from pennywise.domain.tracking.services import CategoryTree
from pennywise.domain.tracking.value_objects import (
    Currency,
    DateRange,
    TransactionType,
)

logger = logging.getLogger(__name__)

BUDGET_WARNING_THRESHOLD = Decimal("80")
BUDGET_OVER_THRESHOLD = Decimal("100")


def classify_budget_status(
    percentage: Decimal,
    warning_threshold: Decimal = BUDGET_WARNING_THRESHOLD,
    over_threshold: Decimal = BUDGET_OVER_THRESHOLD,
) -> BudgetStatus:
    """Exactly at the over threshold is still a warning, not over budget."""
    if percentage > over_threshold:
        return BudgetStatus.OVER_BUDGET
    if percentage >= warning_threshold:
        return BudgetStatus.WARNING
    return BudgetStatus.ON_TRACK


def calculate_budget_progress(
    transactions: Sequence[Transaction],
    categories: Sequence[Category] | CategoryTree,
    date_range: DateRange,
    base_currency: Currency | str,
    warning_threshold: Decimal = BUDGET_WARNING_THRESHOLD,
    over_threshold: Decimal = BUDGET_OVER_THRESHOLD,
) -> list[BudgetProgress]:
    """Spend against limit for every category with a positive budget.

    Only completed expenses in ``base_currency`` inside ``date_range`` count.
    Spend is matched on the transaction's own category; a parent's budget
    does not absorb its children's spending. Worst percentage first.
    """
    in_range = filter_transactions_by_period(transactions, date_range)
    expenses = [
        t
        for t in in_range
        if t.is_completed()
        and t.type == TransactionType.EXPENSE
        and t.currency == base_currency
    ]

    progress: list[BudgetProgress] = []
    for category in CategoryTree.coerce(categories):
        if not category.has_budget:
            continue

        budget_limit = category.budget_limit or Decimal("0")
        spent = sum_amounts([t for t in expenses if t.category_id == category.id])
        percentage = percentage_of(spent, budget_limit)

        progress.append(
            BudgetProgress(
                category_id=category.id,
                category_name=category.name,
                budget_limit=budget_limit,
                spent=spent,
                remaining=budget_limit - spent,
                percentage=percentage,
                status=classify_budget_status(
                    percentage,
                    warning_threshold,
                    over_threshold,
                ),
            ),
        )

    progress.sort(key=lambda p: p.percentage, reverse=True)
    logger.debug(
        "Budget progress for %d categories between %s and %s",
        len(progress),
        date_range.start,
        date_range.end,
    )
    return progress
