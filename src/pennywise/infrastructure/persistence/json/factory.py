"""JSON repository factory."""

from __future__ import annotations

from pathlib import Path

from pennywise.infrastructure.persistence.json.backup_store import JsonBackupStore
from pennywise.infrastructure.persistence.json.repositories import (
    JsonCategoryRepository,
    JsonSavingsGoalRepository,
    JsonTransactionRepository,
)


class JsonRepositoryFactory:
    """JSON backup implementation of the RepositoryFactory Protocol."""

    def __init__(self, store: JsonBackupStore):
        self._store = store

        # Cached instances (created on demand)
        self._transaction_repo: JsonTransactionRepository | None = None
        self._category_repo: JsonCategoryRepository | None = None
        self._savings_goal_repo: JsonSavingsGoalRepository | None = None

    @classmethod
    def from_path(cls, path: Path | str) -> JsonRepositoryFactory:
        return cls(JsonBackupStore(path))

    @property
    def store(self) -> JsonBackupStore:
        return self._store

    def transaction_repository(self) -> JsonTransactionRepository:
        if self._transaction_repo is None:
            self._transaction_repo = JsonTransactionRepository(self._store)
        return self._transaction_repo

    def category_repository(self) -> JsonCategoryRepository:
        if self._category_repo is None:
            self._category_repo = JsonCategoryRepository(self._store)
        return self._category_repo

    def savings_goal_repository(self) -> JsonSavingsGoalRepository:
        if self._savings_goal_repo is None:
            self._savings_goal_repo = JsonSavingsGoalRepository(self._store)
        return self._savings_goal_repo
