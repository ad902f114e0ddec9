"""Tag intersection filter."""

from __future__ import annotations

from typing import Iterable, Sequence

from pennywise.domain.tracking.entities import Transaction


def filter_transactions_by_tags(
    transactions: Sequence[Transaction],
    tags: Iterable[str],
) -> list[Transaction]:
    wanted = set(tags)
    if not wanted:
        return list(transactions)
    return [t for t in transactions if t.metadata.has_any_tag(wanted)]
