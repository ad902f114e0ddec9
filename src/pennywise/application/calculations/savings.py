"""Savings goal progress, status and ordering."""

from __future__ import annotations

import math
from datetime import datetime
from decimal import Decimal
from typing import Optional, Sequence

from pennywise.application.calculations.percentages import HUNDRED, percentage_of
from pennywise.application.dtos.analytics import GoalStatus, SavingsGoalProgress
from pennywise.domain.shared.time import local_now
from pennywise.domain.tracking.entities import SavingsGoal

_SECONDS_PER_DAY = 24 * 60 * 60


def _goal_status(
    percentage: Decimal,
    deadline: Optional[datetime],
    now: datetime,
) -> GoalStatus:
    # Completion wins over a missed deadline
    if percentage >= HUNDRED:
        return GoalStatus.COMPLETED

    past_deadline = deadline is not None and now > deadline
    if past_deadline:
        return GoalStatus.OVERDUE
    if percentage > 0:
        return GoalStatus.IN_PROGRESS
    return GoalStatus.NOT_STARTED


def calculate_savings_goal_progress(
    goal: SavingsGoal,
    now: Optional[datetime] = None,
) -> SavingsGoalProgress:
    now = now or local_now()
    percentage = percentage_of(goal.current_amount, goal.target_amount)

    return SavingsGoalProgress(
        goal=goal,
        percentage=percentage,
        remaining=goal.target_amount - goal.current_amount,
        status=_goal_status(percentage, goal.deadline, now),
    )


def update_goals_progress(
    goals: Sequence[SavingsGoal],
    now: Optional[datetime] = None,
) -> list[SavingsGoalProgress]:
    now = now or local_now()
    return [calculate_savings_goal_progress(goal, now) for goal in goals]


def get_active_goals(
    progress: Sequence[SavingsGoalProgress],
) -> list[SavingsGoalProgress]:
    return [p for p in progress if p.status != GoalStatus.COMPLETED]


def get_completed_goals(
    progress: Sequence[SavingsGoalProgress],
) -> list[SavingsGoalProgress]:
    return [p for p in progress if p.status == GoalStatus.COMPLETED]


def get_overdue_goals(
    progress: Sequence[SavingsGoalProgress],
) -> list[SavingsGoalProgress]:
    return [p for p in progress if p.status == GoalStatus.OVERDUE]


def days_until_deadline(deadline: datetime, now: datetime) -> int:
    """Whole days left, rounded up; a deadline later today counts as 1."""
    return math.ceil((deadline - now).total_seconds() / _SECONDS_PER_DAY)


def sort_goals_by_priority(
    progress: Sequence[SavingsGoalProgress],
    now: Optional[datetime] = None,
) -> list[SavingsGoalProgress]:
    """Most urgent first.

    Overdue goals lead, then deadlines within a week, then within a month,
    then everything else; completed goals go last. Ties keep input order.
    """
    now = now or local_now()

    def priority(item: SavingsGoalProgress) -> int:
        if item.status == GoalStatus.OVERDUE:
            return 0
        if item.status == GoalStatus.COMPLETED:
            return 4
        if item.goal.deadline is not None:
            days = days_until_deadline(item.goal.deadline, now)
            if days <= 7:
                return 1
            if days <= 30:
                return 2
        return 3

    return sorted(progress, key=priority)
