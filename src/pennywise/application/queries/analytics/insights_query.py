"""Insights query."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Optional

from pennywise.application.calculations import (
    calculate_monthly_summary,
    generate_insights,
)
from pennywise.application.dtos.analytics import Insight
from pennywise.domain.shared.months import current_month, previous_month
from pennywise.domain.tracking.repositories import (
    CategoryRepository,
    TransactionRepository,
)
from pennywise.domain.tracking.services import CategoryTree

if TYPE_CHECKING:
    from pennywise.application.factories import RepositoryFactory


class InsightsQuery:
    """Observations about a month compared with the month before."""

    def __init__(
        self,
        transaction_repository: TransactionRepository,
        category_repository: CategoryRepository,
    ):
        self._transactions = transaction_repository
        self._categories = category_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> InsightsQuery:
        return cls(
            transaction_repository=factory.transaction_repository(),
            category_repository=factory.category_repository(),
        )

    def execute(
        self,
        month: Optional[int] = None,
        year: Optional[int] = None,
        base_currency: str = "USD",
        now: Optional[datetime] = None,
    ) -> list[Insight]:
        default_month, default_year = current_month(now)
        month = month if month is not None else default_month
        year = year if year is not None else default_year
        prev_month, prev_year = previous_month(month, year)

        transactions = self._transactions.find_all()
        tree = CategoryTree.from_categories(self._categories.find_all())

        current = calculate_monthly_summary(
            month, year, transactions, tree, base_currency, now,
        )
        previous = calculate_monthly_summary(
            prev_month, prev_year, transactions, tree, base_currency, now,
        )

        return generate_insights(
            current=current,
            previous=previous,
            expense_breakdown=current.expense_breakdown.by_category,
            budget_progress=current.budget_progress,
            currency=base_currency,
        )
