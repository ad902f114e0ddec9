"""Repository factory protocol for application layer."""

from __future__ import annotations

from typing import Protocol

from pennywise.domain.tracking.repositories import (
    CategoryRepository,
    SavingsGoalRepository,
    TransactionRepository,
)


class RepositoryFactory(Protocol):
    """Protocol for creating repositories over one data source."""

    def transaction_repository(self) -> TransactionRepository:
        """Get transaction repository."""
        ...

    def category_repository(self) -> CategoryRepository:
        """Get category repository."""
        ...

    def savings_goal_repository(self) -> SavingsGoalRepository:
        """Get savings goal repository."""
        ...
