"""Savings goal repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from pennywise.domain.tracking.entities import SavingsGoal


class SavingsGoalRepository(ABC):
    """Read access to savings goals."""

    @abstractmethod
    def find_all(self) -> List[SavingsGoal]:
        """Return every savings goal, in stored order."""

    @abstractmethod
    def find_by_id(self, goal_id: str) -> Optional[SavingsGoal]:
        """Find savings goal by ID."""
