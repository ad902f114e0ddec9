"""Tracking domain entities."""

from pennywise.domain.tracking.entities.category import Category
from pennywise.domain.tracking.entities.savings_goal import SavingsGoal
from pennywise.domain.tracking.entities.transaction import Transaction

__all__ = [
    "Category",
    "SavingsGoal",
    "Transaction",
]
