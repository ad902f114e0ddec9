"""Period trends query."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Optional

from pennywise.application.calculations import (
    calculate_period_trends,
    get_granularity_for_period,
    get_period_date_range,
)
from pennywise.application.dtos.analytics import PeriodTrend
from pennywise.domain.tracking.repositories import TransactionRepository
from pennywise.domain.tracking.value_objects import DateRange, Granularity, PeriodType

if TYPE_CHECKING:
    from pennywise.application.factories import RepositoryFactory


class PeriodTrendsQuery:
    """Bucketed income and expenses for an insights period."""

    def __init__(self, transaction_repository: TransactionRepository):
        self._transactions = transaction_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> PeriodTrendsQuery:
        return cls(transaction_repository=factory.transaction_repository())

    def execute(
        self,
        period_type: PeriodType = PeriodType.THIS_MONTH,
        custom_range: Optional[DateRange] = None,
        granularity: Optional[Granularity] = None,
        base_currency: str = "USD",
        now: Optional[datetime] = None,
    ) -> list[PeriodTrend]:
        """Granularity defaults to the one the period type implies."""
        return calculate_period_trends(
            transactions=self._transactions.find_all(),
            date_range=get_period_date_range(period_type, custom_range, now),
            granularity=granularity or get_granularity_for_period(period_type),
            base_currency=base_currency,
        )
