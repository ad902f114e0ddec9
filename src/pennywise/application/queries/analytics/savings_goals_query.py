"""Savings goals query."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Optional

from pennywise.application.calculations import (
    get_active_goals,
    sort_goals_by_priority,
    update_goals_progress,
)
from pennywise.application.dtos.analytics import SavingsGoalProgress
from pennywise.domain.shared.time import local_now
from pennywise.domain.tracking.repositories import SavingsGoalRepository

if TYPE_CHECKING:
    from pennywise.application.factories import RepositoryFactory


class SavingsGoalsQuery:
    """Savings goals with derived progress, most urgent first."""

    def __init__(self, savings_goal_repository: SavingsGoalRepository):
        self._goals = savings_goal_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> SavingsGoalsQuery:
        return cls(savings_goal_repository=factory.savings_goal_repository())

    def execute(
        self,
        active_only: bool = False,
        now: Optional[datetime] = None,
    ) -> list[SavingsGoalProgress]:
        now = now or local_now()
        progress = update_goals_progress(self._goals.find_all(), now)
        if active_only:
            progress = get_active_goals(progress)
        return sort_goals_by_priority(progress, now)
