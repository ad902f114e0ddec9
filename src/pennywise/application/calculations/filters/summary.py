"""Summation helpers."""

from __future__ import annotations

from decimal import Decimal
from typing import Sequence

from pennywise.domain.tracking.entities import Transaction
from pennywise.domain.tracking.value_objects import TransactionType


def sum_amounts(transactions: Sequence[Transaction]) -> Decimal:
    return sum((t.amount for t in transactions), Decimal("0"))


def sum_by_type(
    transactions: Sequence[Transaction],
    transaction_type: TransactionType,
) -> Decimal:
    return sum_amounts([t for t in transactions if t.type == transaction_type])
