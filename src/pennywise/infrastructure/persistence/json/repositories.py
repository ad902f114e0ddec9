"""Repository implementations over a JSON backup."""

from __future__ import annotations

from typing import List, Optional

from pennywise.domain.tracking.entities import Category, SavingsGoal, Transaction
from pennywise.domain.tracking.repositories import (
    CategoryRepository,
    SavingsGoalRepository,
    TransactionRepository,
)
from pennywise.infrastructure.persistence.json.backup_store import JsonBackupStore


class JsonTransactionRepository(TransactionRepository):
    def __init__(self, store: JsonBackupStore):
        self._store = store

    def find_all(self) -> List[Transaction]:
        return list(self._store.transactions())

    def find_by_id(self, transaction_id: str) -> Optional[Transaction]:
        return next(
            (t for t in self._store.transactions() if t.id == transaction_id),
            None,
        )


class JsonCategoryRepository(CategoryRepository):
    def __init__(self, store: JsonBackupStore):
        self._store = store

    def find_all(self) -> List[Category]:
        return list(self._store.categories())

    def find_by_id(self, category_id: str) -> Optional[Category]:
        return next(
            (c for c in self._store.categories() if c.id == category_id),
            None,
        )


class JsonSavingsGoalRepository(SavingsGoalRepository):
    def __init__(self, store: JsonBackupStore):
        self._store = store

    def find_all(self) -> List[SavingsGoal]:
        return list(self._store.savings_goals())

    def find_by_id(self, goal_id: str) -> Optional[SavingsGoal]:
        return next(
            (g for g in self._store.savings_goals() if g.id == goal_id),
            None,
        )
