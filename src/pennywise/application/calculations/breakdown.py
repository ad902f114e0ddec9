"""Category, subcategory and top-transaction breakdowns."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Sequence

from pennywise.application.calculations.percentages import ZERO, percentage_of
from pennywise.application.dtos.analytics import (
    CategoryBreakdown,
    SubcategoryBreakdown,
    TopTransaction,
)
from pennywise.domain.tracking.entities import Category, Transaction
from pennywise.domain.tracking.services import CategoryTree
from pennywise.domain.tracking.value_objects import TransactionType

TOP_TRANSACTIONS_LIMIT = 5

UNCATEGORIZED_ID = "uncategorized"
UNCATEGORIZED_NAME = "Uncategorized"
UNCATEGORIZED_COLOR = "#9ca3af"
UNKNOWN_CATEGORY_NAME = "Unknown Category"
UNKNOWN_SUBCATEGORY_NAME = "Unknown Subcategory"


class MissingCategoryPolicy(str, Enum):
    """What to do with transactions whose category no longer exists."""

    DROP = "drop"  # Leave them out of the breakdown
    BUCKET = "bucket"  # Collect them under "Uncategorized"


@dataclass
class _Group:
    amount: Decimal = ZERO
    count: int = 0

    def add(self, amount: Decimal) -> None:
        self.amount += amount
        self.count += 1


def calculate_category_breakdown(
    transactions: Sequence[Transaction],
    categories: Sequence[Category] | CategoryTree,
    transaction_type: TransactionType,
    missing_category_policy: MissingCategoryPolicy = MissingCategoryPolicy.DROP,
) -> list[CategoryBreakdown]:
    """Group one transaction type by category, largest amount first.

    Percentages are shares of the grouped total, so the slices of a
    non-empty breakdown always add up to 100.
    """
    tree = CategoryTree.coerce(categories)
    grouped: dict[str, _Group] = {}

    for t in transactions:
        if t.type != transaction_type:
            continue
        key = t.category_id
        if key not in tree:
            if missing_category_policy == MissingCategoryPolicy.DROP:
                continue
            key = UNCATEGORIZED_ID
        grouped.setdefault(key, _Group()).add(t.amount)

    total = sum((g.amount for g in grouped.values()), ZERO)
    breakdown: list[CategoryBreakdown] = []

    for category_id, group in grouped.items():
        category = tree.get(category_id)
        breakdown.append(
            CategoryBreakdown(
                category_id=category_id,
                category_name=category.name if category else UNCATEGORIZED_NAME,
                amount=group.amount,
                percentage=percentage_of(group.amount, total),
                transaction_count=group.count,
                color=category.color if category else UNCATEGORIZED_COLOR,
            ),
        )

    breakdown.sort(key=lambda b: b.amount, reverse=True)
    return breakdown


def calculate_subcategory_breakdown(
    transactions: Sequence[Transaction],
    categories: Sequence[Category] | CategoryTree,
    transaction_type: TransactionType,
) -> list[SubcategoryBreakdown]:
    """Group transactions that carry a subcategory, largest amount first.

    The parent of a group is the category of its first transaction. Groups
    whose parent is unknown are left out.
    """
    tree = CategoryTree.coerce(categories)
    grouped: dict[str, _Group] = {}
    parents: dict[str, str] = {}

    for t in transactions:
        if t.type != transaction_type or not t.subcategory_id:
            continue
        parents.setdefault(t.subcategory_id, t.category_id)
        grouped.setdefault(t.subcategory_id, _Group()).add(t.amount)

    known = {
        sub_id: group
        for sub_id, group in grouped.items()
        if parents[sub_id] in tree
    }
    total = sum((g.amount for g in known.values()), ZERO)
    breakdown: list[SubcategoryBreakdown] = []

    for subcategory_id, group in known.items():
        parent_id = parents[subcategory_id]
        parent = tree.get(parent_id)
        child = tree.find_child(parent_id, subcategory_id)
        breakdown.append(
            SubcategoryBreakdown(
                subcategory_id=subcategory_id,
                subcategory_name=child.name if child else UNKNOWN_SUBCATEGORY_NAME,
                parent_id=parent_id,
                parent_name=parent.name if parent else UNKNOWN_CATEGORY_NAME,
                amount=group.amount,
                percentage=percentage_of(group.amount, total),
                transaction_count=group.count,
            ),
        )

    breakdown.sort(key=lambda b: b.amount, reverse=True)
    return breakdown


def calculate_top_transactions(
    transactions: Sequence[Transaction],
    categories: Sequence[Category] | CategoryTree,
    transaction_type: TransactionType,
    limit: int = TOP_TRANSACTIONS_LIMIT,
) -> list[TopTransaction]:
    tree = CategoryTree.coerce(categories)
    ranked = sorted(
        (t for t in transactions if t.type == transaction_type),
        key=lambda t: t.amount,
        reverse=True,
    )

    top: list[TopTransaction] = []
    for t in ranked[: max(limit, 0)]:
        category = tree.get(t.category_id)
        top.append(
            TopTransaction(
                id=t.id,
                description=t.description,
                amount=t.amount,
                category_id=t.category_id,
                category_name=category.name if category else UNKNOWN_CATEGORY_NAME,
                date=t.date,
            ),
        )
    return top
