"""Category filter with descendant expansion."""

from __future__ import annotations

from typing import Iterable, Sequence

from pennywise.domain.tracking.entities import Category, Transaction
from pennywise.domain.tracking.services import CategoryTree


def filter_transactions_by_category(
    transactions: Sequence[Transaction],
    category_ids: Iterable[str],
    categories: Sequence[Category] | CategoryTree,
) -> list[Transaction]:
    """Keep transactions filed under any selected category or its subtree.

    An empty selection means "no category filter" and returns every
    transaction.
    """
    selected = list(category_ids)
    if not selected:
        return list(transactions)

    allowed = CategoryTree.coerce(categories).expand(selected)

    return [t for t in transactions if t.category_id in allowed]
