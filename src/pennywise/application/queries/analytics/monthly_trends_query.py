"""Monthly trends query."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Optional

from pennywise.application.calculations import TREND_MONTHS, calculate_monthly_trends
from pennywise.application.dtos.analytics import MonthlyTrend
from pennywise.domain.tracking.repositories import (
    CategoryRepository,
    TransactionRepository,
)

if TYPE_CHECKING:
    from pennywise.application.factories import RepositoryFactory


class MonthlyTrendsQuery:
    """Income, expenses and savings for the trailing months."""

    def __init__(
        self,
        transaction_repository: TransactionRepository,
        category_repository: CategoryRepository,
    ):
        self._transactions = transaction_repository
        self._categories = category_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> MonthlyTrendsQuery:
        return cls(
            transaction_repository=factory.transaction_repository(),
            category_repository=factory.category_repository(),
        )

    def execute(
        self,
        months: int = TREND_MONTHS,
        base_currency: str = "USD",
        now: Optional[datetime] = None,
    ) -> list[MonthlyTrend]:
        return calculate_monthly_trends(
            transactions=self._transactions.find_all(),
            categories=self._categories.find_all(),
            months=months,
            base_currency=base_currency,
            now=now,
        )
