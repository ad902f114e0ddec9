"""Analytics queries for dashboards, trends, budgets and goals."""

from pennywise.application.queries.analytics.budget_progress_query import (
    BudgetProgressQuery,
)
from pennywise.application.queries.analytics.insights_query import (
    InsightsQuery,
)
from pennywise.application.queries.analytics.monthly_summary_query import (
    MonthlySummaryQuery,
)
from pennywise.application.queries.analytics.monthly_trends_query import (
    MonthlyTrendsQuery,
)
from pennywise.application.queries.analytics.period_trends_query import (
    PeriodTrendsQuery,
)
from pennywise.application.queries.analytics.savings_goals_query import (
    SavingsGoalsQuery,
)
from pennywise.application.queries.analytics.transaction_search_query import (
    TransactionSearchQuery,
)
from pennywise.application.queries.analytics.trend_comparison_query import (
    TrendComparisonQuery,
)

__all__ = [
    "BudgetProgressQuery",
    "InsightsQuery",
    "MonthlySummaryQuery",
    "MonthlyTrendsQuery",
    "PeriodTrendsQuery",
    "SavingsGoalsQuery",
    "TransactionSearchQuery",
    "TrendComparisonQuery",
]
