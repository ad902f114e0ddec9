"""Trend comparison query."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Optional

from pennywise.application.calculations import (
    calculate_month_trend,
    calculate_trend_comparison,
)
from pennywise.application.dtos.analytics import TrendComparison
from pennywise.domain.shared.months import current_month, previous_month
from pennywise.domain.tracking.repositories import TransactionRepository

if TYPE_CHECKING:
    from pennywise.application.factories import RepositoryFactory


class TrendComparisonQuery:
    """Compare a month with the month before it."""

    def __init__(self, transaction_repository: TransactionRepository):
        self._transactions = transaction_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> TrendComparisonQuery:
        return cls(transaction_repository=factory.transaction_repository())

    def execute(
        self,
        month: Optional[int] = None,
        year: Optional[int] = None,
        base_currency: str = "USD",
        now: Optional[datetime] = None,
    ) -> TrendComparison:
        default_month, default_year = current_month(now)
        month = month if month is not None else default_month
        year = year if year is not None else default_year
        prev_month, prev_year = previous_month(month, year)

        transactions = self._transactions.find_all()
        return calculate_trend_comparison(
            current=calculate_month_trend(month, year, transactions, base_currency),
            previous=calculate_month_trend(
                prev_month,
                prev_year,
                transactions,
                base_currency,
            ),
        )
