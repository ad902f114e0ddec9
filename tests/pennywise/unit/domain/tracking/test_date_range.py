"""Unit tests for date and amount ranges."""

from datetime import datetime
from decimal import Decimal

import pytest
from pydantic import ValidationError

from pennywise.domain.tracking.value_objects import AmountRange, DateRange


class TestDateRange:
    def test_bounds_are_inclusive(self):
        date_range = DateRange(
            start=datetime(2024, 3, 1),
            end=datetime(2024, 3, 31, 23, 59, 59),
        )

        assert date_range.contains(datetime(2024, 3, 1))
        assert date_range.contains(datetime(2024, 3, 31, 23, 59, 59))
        assert not date_range.contains(datetime(2024, 4, 1))

    def test_rejects_start_after_end(self):
        with pytest.raises(ValidationError, match="after end"):
            DateRange(start=datetime(2024, 3, 2), end=datetime(2024, 3, 1))

    def test_accepts_iso_strings(self):
        date_range = DateRange(start="2024-03-01", end="2024-03-02T12:00:00")
        assert date_range.start == datetime(2024, 3, 1)


class TestAmountRange:
    def test_open_bounds(self):
        assert AmountRange(min=10).contains(Decimal("1000"))
        assert AmountRange(max=10).contains(Decimal("0"))
        assert not AmountRange(min=10).contains(Decimal("9.99"))

    def test_inclusive_bounds(self):
        amount_range = AmountRange(min="10", max="20")

        assert amount_range.contains(Decimal("10"))
        assert amount_range.contains(Decimal("20"))
        assert not amount_range.contains(Decimal("20.01"))
