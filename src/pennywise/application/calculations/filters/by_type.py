"""Transaction type filter."""

from __future__ import annotations

from typing import Iterable, Sequence

from pennywise.domain.tracking.entities import Transaction
from pennywise.domain.tracking.value_objects import TransactionType


def filter_transactions_by_types(
    transactions: Sequence[Transaction],
    types: Iterable[TransactionType],
) -> list[Transaction]:
    """Keep the given types; an empty type list keeps everything."""
    wanted = set(types)
    if not wanted:
        return list(transactions)
    return [t for t in transactions if t.type in wanted]
