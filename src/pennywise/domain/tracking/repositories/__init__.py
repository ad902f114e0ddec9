"""Repository interfaces for the tracking domain."""

from pennywise.domain.tracking.repositories.category_repository import (
    CategoryRepository,
)
from pennywise.domain.tracking.repositories.savings_goal_repository import (
    SavingsGoalRepository,
)
from pennywise.domain.tracking.repositories.transaction_repository import (
    TransactionRepository,
)

__all__ = [
    "CategoryRepository",
    "SavingsGoalRepository",
    "TransactionRepository",
]
