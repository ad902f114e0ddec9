"""Budget progress query."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Optional

from pennywise.application.calculations import calculate_budget_progress
from pennywise.application.calculations.filters import get_month_date_range
from pennywise.application.dtos.analytics import BudgetProgress
from pennywise.domain.shared.months import current_month
from pennywise.domain.tracking.repositories import (
    CategoryRepository,
    TransactionRepository,
)

if TYPE_CHECKING:
    from pennywise.application.factories import RepositoryFactory


class BudgetProgressQuery:
    """Spend against budget for every budgeted category in a month."""

    def __init__(
        self,
        transaction_repository: TransactionRepository,
        category_repository: CategoryRepository,
    ):
        self._transactions = transaction_repository
        self._categories = category_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> BudgetProgressQuery:
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
    ) -> list[BudgetProgress]:
        default_month, default_year = current_month(now)
        return calculate_budget_progress(
            transactions=self._transactions.find_all(),
            categories=self._categories.find_all(),
            date_range=get_month_date_range(
                month if month is not None else default_month,
                year if year is not None else default_year,
            ),
            base_currency=base_currency,
        )
