"""Base-currency filter for monetary transaction types."""

from __future__ import annotations

from typing import Sequence

from pennywise.domain.tracking.entities import Transaction
from pennywise.domain.tracking.value_objects import MONETARY_TYPES, Currency


def filter_transactions_by_type_and_currency(
    transactions: Sequence[Transaction],
    base_currency: Currency | str,
) -> list[Transaction]:
    """Keep income, expense and refund transactions in ``base_currency``.

    Other currencies are dropped, never converted.
    """
    return [
        t
        for t in transactions
        if t.currency == base_currency and t.type in MONETARY_TYPES
    ]
