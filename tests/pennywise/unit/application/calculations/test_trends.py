"""Unit tests for monthly trends and trend comparison."""

from datetime import datetime
from decimal import Decimal

from pennywise.application.calculations.monthly_summary import calculate_monthly_summary
from pennywise.application.calculations.trends import (
    calculate_month_trend,
    calculate_monthly_trends,
    calculate_trend_comparison,
    trend_from_summary,
)
from pennywise.application.dtos.analytics import MonthlyTrend
from pennywise.domain.tracking.value_objects import TransactionType

from tests.shared.fixtures.factories import NOW, default_categories, make_transaction


def _trend(income, expenses, month=3, year=2024):
    income = Decimal(income)
    expenses = Decimal(expenses)
    rate = (income - expenses) / income * 100 if income else Decimal("0")
    return MonthlyTrend(
        month=month,
        year=year,
        period_label="",
        income=income,
        expenses=expenses,
        savings=income - expenses,
        savings_rate=rate,
    )


class TestMonthlyTrends:
    def test_trailing_months_oldest_first(self):
        trends = calculate_monthly_trends([], default_categories(), months=6, now=NOW)

        assert [t.period_label for t in trends] == [
            "Oct 2023",
            "Nov 2023",
            "Dec 2023",
            "Jan 2024",
            "Feb 2024",
            "Mar 2024",
        ]

    def test_values_per_month(self):
        transactions = [
            make_transaction(
                amount="2000",
                type=TransactionType.INCOME,
                category_id="salary",
                date=datetime(2024, 2, 1),
            ),
            make_transaction(amount="500", date=datetime(2024, 2, 10)),
            make_transaction(amount="100", date=datetime(2024, 3, 10)),
        ]

        trends = calculate_monthly_trends(
            transactions,
            default_categories(),
            months=2,
            base_currency="USD",
            now=NOW,
        )

        february, march = trends
        assert february.income == Decimal("2000")
        assert february.savings == Decimal("1500")
        assert february.savings_rate == Decimal("75")
        assert march.expenses == Decimal("100")
        assert march.savings_rate == Decimal("0")

    def test_points_match_monthly_summary(self):
        transactions = [
            make_transaction(
                amount="1800",
                type=TransactionType.INCOME,
                category_id="salary",
                date=datetime(2024, 3, 1),
            ),
            make_transaction(
                amount="30",
                type=TransactionType.REFUND,
                category_id="refunds",
                date=datetime(2024, 3, 2),
            ),
            make_transaction(amount="640", category_id="rent", date=datetime(2024, 3, 3)),
        ]
        categories = default_categories()

        (march,) = calculate_monthly_trends(transactions, categories, months=1, now=NOW)
        summary = calculate_monthly_summary(3, 2024, transactions, categories, now=NOW)

        assert march == trend_from_summary(summary)
        assert march == calculate_month_trend(3, 2024, transactions)

    def test_month_trend_label(self):
        trend = calculate_month_trend(1, 2025, [])
        assert trend.period_label == "Jan 2025"


class TestTrendComparison:
    def test_without_previous_uses_current_values(self):
        current = _trend("1000", "400")

        comparison = calculate_trend_comparison(current)

        assert comparison.previous is None
        assert comparison.change.income == current.income
        assert comparison.change.income_percentage == Decimal("0")
        assert comparison.change.expenses == current.expenses
        assert comparison.change.expenses_percentage == Decimal("0")
        assert comparison.change.savings_rate == current.savings_rate

    def test_deltas_against_previous(self):
        current = _trend("1200", "600")
        previous = _trend("1000", "400", month=2)

        change = calculate_trend_comparison(current, previous).change

        assert change.income == Decimal("200")
        assert change.income_percentage == Decimal("20")
        assert change.expenses_percentage == Decimal("50")
        assert change.savings == Decimal("0")
        assert change.savings_rate == Decimal("-10")

    def test_zero_previous_gives_zero_percentage(self):
        change = calculate_trend_comparison(_trend("500", "100"), _trend("0", "0")).change

        assert change.income == Decimal("500")
        assert change.income_percentage == Decimal("0")
