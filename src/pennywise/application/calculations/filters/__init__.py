"""Transaction filters and the composed filter pipeline.

Every primitive returns a new list in input order. Empty selections (no
categories, no types, no tags, blank search) mean "no restriction".
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional, Sequence

from pennywise.application.calculations.filters.by_amount import (
    filter_transactions_by_amount,
)
from pennywise.application.calculations.filters.by_category import (
    filter_transactions_by_category,
)
from pennywise.application.calculations.filters.by_currency import (
    filter_transactions_by_type_and_currency,
)
from pennywise.application.calculations.filters.by_date import (
    filter_transactions_by_period,
    get_month_date_range,
    get_preset_date_range,
)
from pennywise.application.calculations.filters.by_search import (
    filter_transactions_by_search,
)
from pennywise.application.calculations.filters.by_status import (
    filter_transactions_by_status,
)
from pennywise.application.calculations.filters.by_tags import (
    filter_transactions_by_tags,
)
from pennywise.application.calculations.filters.by_type import (
    filter_transactions_by_types,
)
from pennywise.application.calculations.filters.summary import (
    sum_amounts,
    sum_by_type,
)
from pennywise.domain.tracking.entities import Category, Transaction
from pennywise.domain.tracking.services import CategoryTree
from pennywise.domain.tracking.value_objects import (
    AmountRange,
    DateRange,
    TransactionType,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TransactionFilter:
    """Criteria from the transaction list's filter panel."""

    types: tuple[TransactionType, ...] = ()
    categories: tuple[str, ...] = ()
    date_range: Optional[DateRange] = None
    amount_range: Optional[AmountRange] = None
    search_query: str = ""
    tags: tuple[str, ...] = field(default=())


def filter_transactions(
    transactions: Sequence[Transaction],
    transaction_filter: TransactionFilter,
    categories: Sequence[Category] | CategoryTree,
) -> list[Transaction]:
    """Apply period, category, search, type, amount and tag stages in order."""
    filtered = list(transactions)

    if transaction_filter.date_range is not None:
        filtered = filter_transactions_by_period(
            filtered,
            transaction_filter.date_range,
        )

    filtered = filter_transactions_by_category(
        filtered,
        transaction_filter.categories,
        categories,
    )
    filtered = filter_transactions_by_search(filtered, transaction_filter.search_query)
    filtered = filter_transactions_by_types(filtered, transaction_filter.types)
    filtered = filter_transactions_by_amount(filtered, transaction_filter.amount_range)
    filtered = filter_transactions_by_tags(filtered, transaction_filter.tags)

    logger.debug(
        "Filtered %d of %d transactions",
        len(filtered),
        len(transactions),
    )
    return filtered


__all__ = [
    "TransactionFilter",
    "filter_transactions",
    "filter_transactions_by_amount",
    "filter_transactions_by_category",
    "filter_transactions_by_period",
    "filter_transactions_by_search",
    "filter_transactions_by_status",
    "filter_transactions_by_tags",
    "filter_transactions_by_type_and_currency",
    "filter_transactions_by_types",
    "get_month_date_range",
    "get_preset_date_range",
    "sum_amounts",
    "sum_by_type",
]
