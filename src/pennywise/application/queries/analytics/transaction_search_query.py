"""Transaction search query."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pennywise.application.calculations.filters import (
    TransactionFilter,
    filter_transactions,
)
from pennywise.domain.tracking.entities import Transaction
from pennywise.domain.tracking.repositories import (
    CategoryRepository,
    TransactionRepository,
)

if TYPE_CHECKING:
    from pennywise.application.factories import RepositoryFactory


class TransactionSearchQuery:
    """List transactions matching the filter panel criteria."""

    def __init__(
        self,
        transaction_repository: TransactionRepository,
        category_repository: CategoryRepository,
    ):
        self._transactions = transaction_repository
        self._categories = category_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> TransactionSearchQuery:
        return cls(
            transaction_repository=factory.transaction_repository(),
            category_repository=factory.category_repository(),
        )

    def execute(self, transaction_filter: TransactionFilter) -> list[Transaction]:
        return filter_transactions(
            self._transactions.find_all(),
            transaction_filter,
            self._categories.find_all(),
        )
