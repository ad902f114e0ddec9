"""Read access to a tracker backup file.

A backup is the JSON document the tracker exports from its settings page::

    {
      "version": "3.0",
      "exportedAt": "2025-01-31T10:00:00.000Z",
      "data": {
        "transactions": [...],
        "categories": [...],
        "accounts": [...],
        "savingsGoals": [...]
      }
    }

Keys are camelCase; entities map them onto their snake_case fields.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Optional, Type, TypeVar

import pydantic
from pydantic import BaseModel

from pennywise.domain.shared.exceptions import (
    EntityNotFoundError,
    ErrorCode,
    ValidationError,
)
from pennywise.domain.tracking.entities import Category, SavingsGoal, Transaction

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

TRANSACTIONS_KEY = "transactions"
CATEGORIES_KEY = "categories"
SAVINGS_GOALS_KEY = "savingsGoals"


class JsonBackupStore:
    """Lazily parses a backup file once and serves its collections."""

    def __init__(self, path: Path | str):
        self._path = Path(path)
        self._data: Optional[dict[str, Any]] = None
        self._transactions: Optional[list[Transaction]] = None
        self._categories: Optional[list[Category]] = None
        self._savings_goals: Optional[list[SavingsGoal]] = None

    @property
    def path(self) -> Path:
        return self._path

    def transactions(self) -> list[Transaction]:
        if self._transactions is None:
            self._transactions = self._parse(TRANSACTIONS_KEY, Transaction)
        return self._transactions

    def categories(self) -> list[Category]:
        if self._categories is None:
            self._categories = self._parse(CATEGORIES_KEY, Category)
        return self._categories

    def savings_goals(self) -> list[SavingsGoal]:
        if self._savings_goals is None:
            self._savings_goals = self._parse(SAVINGS_GOALS_KEY, SavingsGoal)
        return self._savings_goals

    def _load(self) -> dict[str, Any]:
        if self._data is not None:
            return self._data

        if not self._path.is_file():
            msg = f"Backup file not found: {self._path}"
            raise EntityNotFoundError(
                msg,
                code=ErrorCode.DATA_FILE_NOT_FOUND,
                details={"path": str(self._path)},
            )

        try:
            with self._path.open(encoding="utf-8") as f:
                document = json.load(f)
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            msg = f"Invalid backup file {self._path}: {e}"
            raise ValidationError(
                msg,
                code=ErrorCode.INVALID_FORMAT,
                details={"path": str(self._path)},
            ) from e

        if not isinstance(document, dict) or not isinstance(document.get("data"), dict):
            msg = f"Invalid backup file {self._path}: Missing data field"
            raise ValidationError(
                msg,
                code=ErrorCode.INVALID_FORMAT,
                details={"path": str(self._path)},
            )

        logger.info(
            "Loaded backup %s (version %s)",
            self._path,
            document.get("version", "unknown"),
        )
        self._data = document["data"]
        return self._data

    def _parse(self, key: str, model: Type[ModelT]) -> list[ModelT]:
        records = self._load().get(key) or []
        if not isinstance(records, list):
            msg = f"Invalid backup file {self._path}: '{key}' is not a list"
            raise ValidationError(msg, code=ErrorCode.INVALID_FORMAT)

        parsed: list[ModelT] = []
        for position, record in enumerate(records):
            if not isinstance(record, dict) or not record.get("id"):
                logger.debug("Skipping %s record %d without id", key, position)
                continue
            try:
                parsed.append(model.model_validate(record))
            except pydantic.ValidationError as e:
                msg = f"Invalid {key} record {record['id']!r}: {e}"
                raise ValidationError(
                    msg,
                    code=ErrorCode.INVALID_FORMAT,
                    details={"collection": key, "id": record["id"]},
                ) from e

        logger.debug("Parsed %d %s from %s", len(parsed), key, self._path)
        return parsed
