"""Free-text search over description and notes."""

from __future__ import annotations

from typing import Sequence

from pennywise.domain.tracking.entities import Transaction


def filter_transactions_by_search(
    transactions: Sequence[Transaction],
    query: str,
) -> list[Transaction]:
    if not query or not query.strip():
        return list(transactions)

    term = query.lower()

    def _matches(t: Transaction) -> bool:
        if term in t.description.lower():
            return True
        return bool(t.notes) and term in t.notes.lower()

    return [t for t in transactions if _matches(t)]
