"""Status filter."""

from __future__ import annotations

from typing import Sequence

from pennywise.domain.tracking.entities import Transaction
from pennywise.domain.tracking.value_objects import TransactionStatus


def filter_transactions_by_status(
    transactions: Sequence[Transaction],
    status: TransactionStatus,
) -> list[Transaction]:
    return [t for t in transactions if t.status == status]
