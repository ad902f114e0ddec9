"""Pure analytics calculations over transactions, categories and goals."""

from pennywise.application.calculations.breakdown import (
    TOP_TRANSACTIONS_LIMIT,
    MissingCategoryPolicy,
    calculate_category_breakdown,
    calculate_subcategory_breakdown,
    calculate_top_transactions,
)
from pennywise.application.calculations.budget import (
    BUDGET_OVER_THRESHOLD,
    BUDGET_WARNING_THRESHOLD,
    calculate_budget_progress,
    classify_budget_status,
)
from pennywise.application.calculations.insights import generate_insights
from pennywise.application.calculations.monthly_summary import (
    calculate_monthly_summary,
    calculate_savings_rate,
    calculate_total_balance,
    calculate_transaction_stats,
)
from pennywise.application.calculations.period_trends import (
    LARGE_SERIES_THRESHOLD,
    calculate_period_trends,
    get_granularity_for_period,
    get_period_date_range,
)
from pennywise.application.calculations.savings import (
    calculate_savings_goal_progress,
    get_active_goals,
    get_completed_goals,
    get_overdue_goals,
    sort_goals_by_priority,
    update_goals_progress,
)
from pennywise.application.calculations.trends import (
    TREND_MONTHS,
    calculate_month_trend,
    calculate_monthly_trends,
    calculate_trend_comparison,
    trend_from_summary,
)

__all__ = [
    "BUDGET_OVER_THRESHOLD",
    "BUDGET_WARNING_THRESHOLD",
    "LARGE_SERIES_THRESHOLD",
    "TOP_TRANSACTIONS_LIMIT",
    "TREND_MONTHS",
    "MissingCategoryPolicy",
    "calculate_budget_progress",
    "calculate_category_breakdown",
    "calculate_month_trend",
    "calculate_monthly_summary",
    "calculate_monthly_trends",
    "calculate_period_trends",
    "calculate_savings_goal_progress",
    "calculate_savings_rate",
    "calculate_subcategory_breakdown",
    "calculate_top_transactions",
    "calculate_total_balance",
    "calculate_transaction_stats",
    "calculate_trend_comparison",
    "classify_budget_status",
    "generate_insights",
    "get_active_goals",
    "get_completed_goals",
    "get_granularity_for_period",
    "get_overdue_goals",
    "get_period_date_range",
    "sort_goals_by_priority",
    "trend_from_summary",
    "update_goals_progress",
]
