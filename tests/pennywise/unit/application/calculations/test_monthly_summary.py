"""Unit tests for the monthly summary calculator."""

from datetime import datetime
from decimal import Decimal

import pytest

from pennywise.application.calculations.monthly_summary import (
    calculate_monthly_summary,
    calculate_savings_rate,
    calculate_total_balance,
    calculate_transaction_stats,
)
from pennywise.domain.shared.exceptions import ValidationError
from pennywise.domain.tracking.value_objects import TransactionStatus, TransactionType

from tests.shared.fixtures.factories import NOW, default_categories, make_transaction


def _march_transactions():
    return [
        make_transaction(
            amount="1000",
            type=TransactionType.INCOME,
            category_id="salary",
            date=datetime(2024, 3, 15),
        ),
        make_transaction(amount="400", category_id="food", date=datetime(2024, 3, 15)),
    ]


class TestSavingsRate:
    def test_rate_from_income_and_expenses(self):
        assert calculate_savings_rate(Decimal("1000"), Decimal("400")) == Decimal("60")

    def test_zero_income_gives_zero(self):
        assert calculate_savings_rate(Decimal("0"), Decimal("250")) == Decimal("0")

    def test_overspending_is_negative(self):
        assert calculate_savings_rate(Decimal("100"), Decimal("150")) == Decimal("-50")


class TestMonthlySummary:
    def test_march_scenario(self):
        summary = calculate_monthly_summary(
            3,
            2024,
            _march_transactions(),
            default_categories(),
            "USD",
            now=NOW,
        )

        assert summary.monthly_income == Decimal("1000")
        assert summary.monthly_expenses == Decimal("400")
        assert summary.net_savings == Decimal("600")
        assert summary.savings_rate == Decimal("60")
        assert summary.period.start_date == datetime(2024, 3, 1)
        assert summary.period.end_date.day == 31

    def test_refunds_count_as_income(self):
        transactions = [
            *_march_transactions(),
            make_transaction(
                amount="50",
                type=TransactionType.REFUND,
                category_id="refunds",
                date=datetime(2024, 3, 16),
            ),
        ]

        summary = calculate_monthly_summary(
            3, 2024, transactions, default_categories(), "USD", now=NOW,
        )

        assert summary.monthly_income == Decimal("1050")
        assert summary.income_breakdown.total == Decimal("1050")

    def test_excludes_pending_foreign_and_transfers(self):
        transactions = [
            *_march_transactions(),
            make_transaction(amount="75", status=TransactionStatus.PENDING),
            make_transaction(amount="75", currency="EUR"),
            make_transaction(amount="75", type=TransactionType.TRANSFER),
            make_transaction(amount="75", date=datetime(2024, 4, 1)),
        ]

        summary = calculate_monthly_summary(
            3, 2024, transactions, default_categories(), "USD", now=NOW,
        )

        assert summary.monthly_expenses == Decimal("400")
        assert summary.transaction_stats.total_transactions == 2

    def test_breakdowns_and_budgets(self):
        summary = calculate_monthly_summary(
            3, 2024, _march_transactions(), default_categories(), "USD", now=NOW,
        )

        expense = summary.expense_breakdown
        assert expense.total == Decimal("400")
        assert [b.category_id for b in expense.by_category] == ["food"]
        assert expense.top_expenses[0].amount == Decimal("400")

        food_budget = next(b for b in summary.budget_progress if b.category_id == "food")
        assert food_budget.percentage == Decimal("80")

    def test_idempotent(self):
        transactions = _march_transactions()
        categories = default_categories()

        first = calculate_monthly_summary(3, 2024, transactions, categories, "USD", now=NOW)
        second = calculate_monthly_summary(3, 2024, transactions, categories, "USD", now=NOW)

        assert first == second

    def test_invalid_month_rejected(self):
        with pytest.raises(ValidationError):
            calculate_monthly_summary(13, 2024, [], default_categories(), "USD", now=NOW)

    def test_empty_month(self):
        summary = calculate_monthly_summary(1, 2020, [], default_categories(), now=NOW)

        assert summary.monthly_income == Decimal("0")
        assert summary.savings_rate == Decimal("0")
        assert summary.expense_breakdown.by_category == []


class TestTotalBalance:
    def test_running_balance_up_to_now(self):
        transactions = [
            make_transaction(
                amount="1000",
                type=TransactionType.INCOME,
                category_id="salary",
                date=datetime(2023, 12, 1),
            ),
            make_transaction(amount="300", date=datetime(2024, 2, 1)),
            make_transaction(
                amount="20",
                type=TransactionType.REFUND,
                category_id="refunds",
                date=datetime(2024, 3, 1),
            ),
            make_transaction(amount="999", date=datetime(2024, 4, 1)),
            make_transaction(amount="50", type=TransactionType.TRANSFER),
            make_transaction(amount="50", status=TransactionStatus.CANCELLED),
            make_transaction(amount="50", currency="EUR"),
        ]

        assert calculate_total_balance(transactions, "USD", NOW) == Decimal("720")


class TestTransactionStats:
    def test_per_type_counts_and_averages(self):
        transactions = [
            make_transaction(amount="10"),
            make_transaction(amount="30"),
            make_transaction(amount="100", type=TransactionType.INCOME, category_id="salary"),
        ]

        stats = calculate_transaction_stats(transactions)

        assert stats.total_transactions == 3
        assert stats.average_transaction_amount == Decimal("140") / 3
        assert stats.by_type["expense"].count == 2
        assert stats.by_type["expense"].average == Decimal("20")
        assert stats.by_type["income"].total == Decimal("100")
        assert set(stats.by_type) == {"income", "expense", "transfer", "refund", "recurring"}
        assert stats.by_type["transfer"].average == Decimal("0")

    def test_empty(self):
        stats = calculate_transaction_stats([])

        assert stats.total_transactions == 0
        assert stats.average_transaction_amount == Decimal("0")
