"""Unit tests for budget progress."""

from datetime import datetime
from decimal import Decimal

import pytest

from pennywise.application.calculations.budget import (
    calculate_budget_progress,
    classify_budget_status,
)
from pennywise.application.calculations.filters import get_month_date_range
from pennywise.application.dtos.analytics import BudgetStatus
from pennywise.domain.tracking.value_objects import TransactionStatus, TransactionType

from tests.shared.fixtures.factories import default_categories, make_transaction

MARCH = get_month_date_range(3, 2024)


class TestClassifyBudgetStatus:
    @pytest.mark.parametrize(
        ("percentage", "expected"),
        [
            ("0", BudgetStatus.ON_TRACK),
            ("79.99", BudgetStatus.ON_TRACK),
            ("80", BudgetStatus.WARNING),
            ("100", BudgetStatus.WARNING),
            ("100.01", BudgetStatus.OVER_BUDGET),
        ],
    )
    def test_thresholds(self, percentage, expected):
        assert classify_budget_status(Decimal(percentage)) == expected


class TestCalculateBudgetProgress:
    def test_spend_against_limit(self):
        transactions = [
            make_transaction(amount="400", category_id="food"),
            make_transaction(amount="600", category_id="rent"),
        ]

        result = calculate_budget_progress(
            transactions,
            default_categories(),
            MARCH,
            "USD",
        )

        by_id = {b.category_id: b for b in result}
        assert by_id["food"].spent == Decimal("400")
        assert by_id["food"].remaining == Decimal("100")
        assert by_id["food"].percentage == Decimal("80")
        assert by_id["food"].status == BudgetStatus.WARNING
        assert by_id["rent"].status == BudgetStatus.ON_TRACK

    def test_sorted_by_percentage_descending(self):
        transactions = [
            make_transaction(amount="100", category_id="food"),
            make_transaction(amount="900", category_id="rent"),
        ]

        result = calculate_budget_progress(transactions, default_categories(), MARCH, "USD")

        assert [b.category_id for b in result] == ["rent", "food"]

    def test_over_budget_has_negative_remaining(self):
        transactions = [make_transaction(amount="500.05", category_id="food")]

        result = calculate_budget_progress(transactions, default_categories(), MARCH, "USD")

        food = next(b for b in result if b.category_id == "food")
        assert food.status == BudgetStatus.OVER_BUDGET
        assert food.remaining == Decimal("-0.05")

    def test_only_categories_with_budget(self):
        result = calculate_budget_progress([], default_categories(), MARCH, "USD")

        assert {b.category_id for b in result} == {"food", "rent"}
        assert all(b.spent == 0 for b in result)

    def test_ignores_other_months_currencies_statuses_and_types(self):
        transactions = [
            make_transaction(amount="100", date=datetime(2024, 2, 28)),
            make_transaction(amount="100", currency="EUR"),
            make_transaction(amount="100", status=TransactionStatus.PENDING),
            make_transaction(amount="100", type=TransactionType.REFUND),
        ]

        result = calculate_budget_progress(transactions, default_categories(), MARCH, "USD")

        food = next(b for b in result if b.category_id == "food")
        assert food.spent == Decimal("0")

    def test_child_spend_does_not_count_for_parent(self):
        transactions = [make_transaction(amount="100", category_id="groceries")]

        result = calculate_budget_progress(transactions, default_categories(), MARCH, "USD")

        food = next(b for b in result if b.category_id == "food")
        assert food.spent == Decimal("0")
