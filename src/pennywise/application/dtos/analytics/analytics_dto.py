"""Analytics DTOs for dashboards and reports.

These DTOs are freshly built on every calculation and never persisted.
Amounts are Decimals in the base currency; percentages use a 0-100 scale.
Enum values keep the tracker's wire spelling (``overBudget``) so a UI built
against the stored format can consume them unchanged.
"""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Optional

from pennywise.domain.tracking.entities import SavingsGoal


class BudgetStatus(str, Enum):
    ON_TRACK = "onTrack"
    WARNING = "warning"
    OVER_BUDGET = "overBudget"


class GoalStatus(str, Enum):
    NOT_STARTED = "notStarted"
    IN_PROGRESS = "inProgress"
    COMPLETED = "completed"
    OVERDUE = "overdue"


class InsightType(str, Enum):
    POSITIVE = "positive"
    NEGATIVE = "negative"
    INFO = "info"


@dataclass
class CategoryBreakdown:
    """One slice of a category pie chart."""

    category_id: str
    category_name: str
    amount: Decimal
    percentage: Decimal
    transaction_count: int
    color: str


@dataclass
class SubcategoryBreakdown:
    subcategory_id: str
    subcategory_name: str
    parent_id: str
    parent_name: str
    amount: Decimal
    percentage: Decimal
    transaction_count: int


@dataclass
class TopTransaction:
    id: str
    description: str
    amount: Decimal
    category_id: str
    category_name: str
    date: datetime


@dataclass
class BudgetProgress:
    """Spend against a category's budget limit for one period.

    ``remaining`` goes negative once the limit is exceeded.
    """

    category_id: str
    category_name: str
    budget_limit: Decimal
    spent: Decimal
    remaining: Decimal
    percentage: Decimal
    status: BudgetStatus


@dataclass
class ExpenseBreakdown:
    total: Decimal
    by_category: list[CategoryBreakdown]
    by_subcategory: list[SubcategoryBreakdown]
    top_expenses: list[TopTransaction]


@dataclass
class IncomeBreakdown:
    total: Decimal
    by_category: list[CategoryBreakdown]
    by_subcategory: list[SubcategoryBreakdown]
    top_income: list[TopTransaction]


@dataclass
class TypeStats:
    count: int = 0
    total: Decimal = Decimal("0")
    average: Decimal = Decimal("0")


@dataclass
class MonthlyTransactionStats:
    total_transactions: int
    average_transaction_amount: Decimal
    by_type: dict[str, TypeStats] = field(default_factory=dict)


@dataclass
class SummaryPeriod:
    month: int
    year: int
    start_date: datetime
    end_date: datetime


@dataclass
class MonthlySummary:
    """Everything the dashboard shows for one calendar month.

    ``total_balance`` is the running balance over the whole history up to
    the reference time, not just this month.
    """

    period: SummaryPeriod
    total_balance: Decimal
    monthly_income: Decimal
    monthly_expenses: Decimal
    net_savings: Decimal
    savings_rate: Decimal
    expense_breakdown: ExpenseBreakdown
    income_breakdown: IncomeBreakdown
    transaction_stats: MonthlyTransactionStats
    budget_progress: list[BudgetProgress]


@dataclass
class MonthlyTrend:
    month: int
    year: int
    period_label: str  # "Jan 2025"
    income: Decimal
    expenses: Decimal
    savings: Decimal
    savings_rate: Decimal


@dataclass
class TrendChange:
    income: Decimal
    income_percentage: Decimal
    expenses: Decimal
    expenses_percentage: Decimal
    savings: Decimal
    savings_rate: Decimal


@dataclass
class TrendComparison:
    current: MonthlyTrend
    previous: Optional[MonthlyTrend]
    change: TrendChange


@dataclass
class PeriodTrend:
    """One bucket (day, week or month) of a sub-monthly trend series."""

    start: datetime
    end: datetime
    label: str
    income: Decimal
    expenses: Decimal
    savings: Decimal


@dataclass
class SavingsGoalProgress:
    """A savings goal together with its freshly derived progress."""

    goal: SavingsGoal
    percentage: Decimal
    remaining: Decimal
    status: GoalStatus


@dataclass
class Insight:
    id: str
    type: InsightType
    title: str
    description: str
