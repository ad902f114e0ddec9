"""Unit tests for savings goal progress."""

from datetime import datetime, timedelta
from decimal import Decimal

from pennywise.application.calculations.savings import (
    calculate_savings_goal_progress,
    get_active_goals,
    get_completed_goals,
    get_overdue_goals,
    sort_goals_by_priority,
    update_goals_progress,
)
from pennywise.application.dtos.analytics import GoalStatus

from tests.shared.fixtures.factories import NOW, make_goal

PAST = NOW - timedelta(days=1)
FUTURE = NOW + timedelta(days=90)


class TestGoalStatus:
    def test_completed_even_after_deadline(self):
        progress = calculate_savings_goal_progress(
            make_goal(target="1000", current="1200", deadline=PAST),
            NOW,
        )

        assert progress.status == GoalStatus.COMPLETED
        assert progress.percentage == Decimal("120")
        assert progress.remaining == Decimal("-200")

    def test_in_progress(self):
        progress = calculate_savings_goal_progress(
            make_goal(target="1000", current="250", deadline=FUTURE),
            NOW,
        )

        assert progress.status == GoalStatus.IN_PROGRESS
        assert progress.percentage == Decimal("25")
        assert progress.remaining == Decimal("750")

    def test_overdue_with_or_without_progress(self):
        started = make_goal(current="10", deadline=PAST)
        untouched = make_goal(current="0", deadline=PAST)

        assert calculate_savings_goal_progress(started, NOW).status == GoalStatus.OVERDUE
        assert calculate_savings_goal_progress(untouched, NOW).status == GoalStatus.OVERDUE

    def test_not_started_without_deadline(self):
        progress = calculate_savings_goal_progress(make_goal(current="0"), NOW)
        assert progress.status == GoalStatus.NOT_STARTED

    def test_zero_target(self):
        progress = calculate_savings_goal_progress(make_goal(target="0"), NOW)

        assert progress.percentage == Decimal("0")
        assert progress.status == GoalStatus.NOT_STARTED


class TestGoalSelection:
    def test_active_completed_overdue(self):
        done = make_goal(current="1000")
        late = make_goal(current="5", deadline=PAST)
        running = make_goal(current="5")

        progress = update_goals_progress([done, late, running], NOW)

        assert [p.goal for p in get_completed_goals(progress)] == [done]
        assert [p.goal for p in get_overdue_goals(progress)] == [late]
        assert [p.goal for p in get_active_goals(progress)] == [late, running]


class TestSortGoalsByPriority:
    def test_priority_order(self):
        completed = make_goal(current="1000", name="completed")
        no_deadline = make_goal(name="no deadline")
        month = make_goal(deadline=NOW + timedelta(days=20), name="month")
        week = make_goal(deadline=NOW + timedelta(days=3), name="week")
        overdue = make_goal(deadline=PAST, name="overdue")

        progress = update_goals_progress(
            [completed, no_deadline, month, week, overdue],
            NOW,
        )
        ordered = sort_goals_by_priority(progress, NOW)

        assert [p.goal.name for p in ordered] == [
            "overdue",
            "week",
            "month",
            "no deadline",
            "completed",
        ]

    def test_ties_keep_input_order(self):
        first = make_goal(name="first")
        second = make_goal(name="second")

        ordered = sort_goals_by_priority(update_goals_progress([first, second], NOW), NOW)

        assert [p.goal.name for p in ordered] == ["first", "second"]
