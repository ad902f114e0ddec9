"""Monthly summary query."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Optional

from pennywise.application.calculations import (
    TOP_TRANSACTIONS_LIMIT,
    MissingCategoryPolicy,
    calculate_monthly_summary,
)
from pennywise.application.dtos.analytics import MonthlySummary
from pennywise.domain.shared.months import current_month
from pennywise.domain.tracking.repositories import (
    CategoryRepository,
    TransactionRepository,
)

if TYPE_CHECKING:
    from pennywise.application.factories import RepositoryFactory


class MonthlySummaryQuery:
    """Dashboard summary for one calendar month."""

    def __init__(
        self,
        transaction_repository: TransactionRepository,
        category_repository: CategoryRepository,
    ):
        self._transactions = transaction_repository
        self._categories = category_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> MonthlySummaryQuery:
        return cls(
            transaction_repository=factory.transaction_repository(),
            category_repository=factory.category_repository(),
        )

    def execute(  # NOQA: PLR0913
        self,
        month: Optional[int] = None,
        year: Optional[int] = None,
        base_currency: str = "USD",
        now: Optional[datetime] = None,
        top_limit: int = TOP_TRANSACTIONS_LIMIT,
        missing_category_policy: MissingCategoryPolicy = MissingCategoryPolicy.DROP,
    ) -> MonthlySummary:
        """Summarize ``month``/``year``, defaulting to the month of ``now``."""
        default_month, default_year = current_month(now)
        return calculate_monthly_summary(
            month=month if month is not None else default_month,
            year=year if year is not None else default_year,
            transactions=self._transactions.find_all(),
            categories=self._categories.find_all(),
            base_currency=base_currency,
            now=now,
            top_limit=top_limit,
            missing_category_policy=missing_category_policy,
        )
