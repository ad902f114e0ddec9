"""JSON backup persistence."""

from pennywise.infrastructure.persistence.json.backup_store import JsonBackupStore
from pennywise.infrastructure.persistence.json.factory import JsonRepositoryFactory
from pennywise.infrastructure.persistence.json.repositories import (
    JsonCategoryRepository,
    JsonSavingsGoalRepository,
    JsonTransactionRepository,
)

__all__ = [
    "JsonBackupStore",
    "JsonCategoryRepository",
    "JsonRepositoryFactory",
    "JsonSavingsGoalRepository",
    "JsonTransactionRepository",
]
