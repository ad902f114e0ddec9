"""Rule-based observations comparing a month with the one before it."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Optional, Sequence

from pennywise.application.calculations.percentages import HUNDRED
from pennywise.application.dtos.analytics import (
    BudgetProgress,
    BudgetStatus,
    CategoryBreakdown,
    Insight,
    InsightType,
    MonthlySummary,
)
from pennywise.domain.tracking.value_objects import Currency

SAVINGS_UP_THRESHOLD = Decimal("10")
SAVINGS_DOWN_THRESHOLD = Decimal("-10")
INCOME_UP_THRESHOLD = Decimal("10")
EXPENSES_UP_THRESHOLD = Decimal("15")
EXPENSES_DOWN_THRESHOLD = Decimal("-10")
MAX_APPROACHING_BUDGETS = 2
TOP_CATEGORY_SHARE_THRESHOLD = Decimal("30")
EXCELLENT_SAVINGS_RATE = Decimal("20")
LOW_SAVINGS_RATE = Decimal("10")


def _change(current: Decimal, previous: Optional[Decimal]) -> Optional[Decimal]:
    """Relative change, or None when there is nothing to compare against."""
    if not previous:
        return None
    return (current - previous) / previous * HUNDRED


def _whole(value: Decimal) -> str:
    return str(value.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def _savings_insight(
    current: MonthlySummary,
    savings_change: Optional[Decimal],
    currency: Currency,
) -> Optional[Insight]:
    if savings_change is None:
        return None
    if savings_change >= SAVINGS_UP_THRESHOLD:
        return Insight(
            id="savings-up",
            type=InsightType.POSITIVE,
            title="Great Savings!",
            description=(
                f"You saved {currency.format_amount(current.net_savings)} this "
                f"month - {_whole(savings_change)}% more than last month."
            ),
        )
    if savings_change < SAVINGS_DOWN_THRESHOLD:
        return Insight(
            id="savings-down",
            type=InsightType.NEGATIVE,
            title="Savings Decreased",
            description=(
                f"Your savings decreased by {_whole(abs(savings_change))}% "
                "compared to last month."
            ),
        )
    return None


def _expenses_insight(
    expenses_change: Optional[Decimal],
    expense_breakdown: Sequence[CategoryBreakdown],
) -> Optional[Insight]:
    if expenses_change is None:
        return None
    if expenses_change > EXPENSES_UP_THRESHOLD:
        top_name = expense_breakdown[0].category_name if expense_breakdown else "N/A"
        return Insight(
            id="expenses-up",
            type=InsightType.NEGATIVE,
            title="Spending Increased",
            description=(
                f"Your expenses increased by {_whole(expenses_change)}% compared "
                f"to last month. Top category: {top_name}."
            ),
        )
    if expenses_change < EXPENSES_DOWN_THRESHOLD:
        return Insight(
            id="expenses-down",
            type=InsightType.POSITIVE,
            title="Reduced Spending",
            description=(
                f"Great job! Your expenses decreased by "
                f"{_whole(abs(expenses_change))}% compared to last month."
            ),
        )
    return None


def _budget_insights(budget_progress: Sequence[BudgetProgress]) -> list[Insight]:
    insights: list[Insight] = []

    over_count = sum(1 for b in budget_progress if b.status == BudgetStatus.OVER_BUDGET)
    if over_count > 0:
        subject = "category is" if over_count == 1 else "categories are"
        insights.append(
            Insight(
                id="over-budget",
                type=InsightType.NEGATIVE,
                title="Over Budget",
                description=(
                    f"{over_count} {subject} over budget this month. "
                    "Review your spending in the Budgets page."
                ),
            ),
        )

    warnings = [b for b in budget_progress if b.status == BudgetStatus.WARNING]
    if 0 < len(warnings) <= MAX_APPROACHING_BUDGETS:
        names = ", ".join(b.category_name for b in warnings)
        subject = "These categories are" if len(warnings) > 1 else "This category is"
        insights.append(
            Insight(
                id="approaching-budget",
                type=InsightType.INFO,
                title="Approaching Budget",
                description=(
                    f"Watch your spending in {names}. {subject} approaching "
                    "the budget limit."
                ),
            ),
        )

    return insights


def _savings_rate_insight(savings_rate: Decimal) -> Optional[Insight]:
    if savings_rate >= EXCELLENT_SAVINGS_RATE:
        return Insight(
            id="savings-rate-excellent",
            type=InsightType.POSITIVE,
            title="Excellent Savings Rate",
            description=(
                f"Your savings rate is {_whole(savings_rate)}%, which is above "
                "the recommended 20%. Keep up the great work!"
            ),
        )
    if 0 < savings_rate < LOW_SAVINGS_RATE:
        return Insight(
            id="savings-rate-low",
            type=InsightType.INFO,
            title="Low Savings Rate",
            description=(
                f"Your savings rate is {_whole(savings_rate)}%. Consider reducing "
                "expenses or increasing income to reach 20%."
            ),
        )
    return None


def generate_insights(
    current: MonthlySummary,
    previous: Optional[MonthlySummary],
    expense_breakdown: Sequence[CategoryBreakdown],
    budget_progress: Sequence[BudgetProgress],
    currency: Currency | str = "USD",
) -> list[Insight]:
    """Evaluate every rule in a fixed order and return the ones that fire.

    Month-over-month rules are skipped when there is no previous month or its
    value is 0. If no rule fires a single ``no-insights`` hint is returned.
    """
    if isinstance(currency, str):
        currency = Currency(currency)

    income_change = _change(
        current.monthly_income,
        previous and previous.monthly_income,
    )
    expenses_change = _change(
        current.monthly_expenses,
        previous and previous.monthly_expenses,
    )
    savings_change = _change(current.net_savings, previous and previous.net_savings)

    insights: list[Insight] = []

    savings = _savings_insight(current, savings_change, currency)
    if savings:
        insights.append(savings)

    if income_change is not None and income_change > INCOME_UP_THRESHOLD:
        insights.append(
            Insight(
                id="income-up",
                type=InsightType.POSITIVE,
                title="Income Increased",
                description=(
                    f"Your income increased by {_whole(income_change)}% compared "
                    "to last month."
                ),
            ),
        )

    expenses = _expenses_insight(expenses_change, expense_breakdown)
    if expenses:
        insights.append(expenses)

    insights.extend(_budget_insights(budget_progress))

    top = expense_breakdown[0] if expense_breakdown else None
    if top is not None and top.percentage > TOP_CATEGORY_SHARE_THRESHOLD:
        insights.append(
            Insight(
                id="top-category",
                type=InsightType.INFO,
                title=f"High Spending in {top.category_name}",
                description=(
                    f"{top.category_name} accounts for {_whole(top.percentage)}% "
                    "of your expenses this month."
                ),
            ),
        )

    rate = _savings_rate_insight(current.savings_rate)
    if rate:
        insights.append(rate)

    if not insights:
        insights.append(
            Insight(
                id="no-insights",
                type=InsightType.INFO,
                title="Add More Transactions",
                description=(
                    "Continue tracking your transactions to receive personalized "
                    "insights about your spending patterns."
                ),
            ),
        )

    return insights
