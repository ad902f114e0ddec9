"""Analytics DTOs."""

from pennywise.application.dtos.analytics.analytics_dto import (
    BudgetProgress,
    BudgetStatus,
    CategoryBreakdown,
    ExpenseBreakdown,
    GoalStatus,
    IncomeBreakdown,
    Insight,
    InsightType,
    MonthlySummary,
    MonthlyTransactionStats,
    MonthlyTrend,
    PeriodTrend,
    SavingsGoalProgress,
    SubcategoryBreakdown,
    SummaryPeriod,
    TopTransaction,
    TrendChange,
    TrendComparison,
    TypeStats,
)

__all__ = [
    "BudgetProgress",
    "BudgetStatus",
    "CategoryBreakdown",
    "ExpenseBreakdown",
    "GoalStatus",
    "IncomeBreakdown",
    "Insight",
    "InsightType",
    "MonthlySummary",
    "MonthlyTransactionStats",
    "MonthlyTrend",
    "PeriodTrend",
    "SavingsGoalProgress",
    "SubcategoryBreakdown",
    "SummaryPeriod",
    "TopTransaction",
    "TrendChange",
    "TrendComparison",
    "TypeStats",
]
