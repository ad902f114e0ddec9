"""Inclusive amount range filter."""

from __future__ import annotations

from typing import Optional, Sequence

from pennywise.domain.tracking.entities import Transaction
from pennywise.domain.tracking.value_objects import AmountRange


def filter_transactions_by_amount(
    transactions: Sequence[Transaction],
    amount_range: Optional[AmountRange],
) -> list[Transaction]:
    if amount_range is None:
        return list(transactions)
    return [t for t in transactions if amount_range.contains(t.amount)]
