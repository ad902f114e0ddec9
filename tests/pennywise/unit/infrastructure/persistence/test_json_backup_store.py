"""Unit tests for the JSON backup store and repositories."""

import json
import logging
from decimal import Decimal

import pytest

from pennywise.application.calculations import calculate_monthly_summary
from pennywise.domain.shared.exceptions import (
    EntityNotFoundError,
    ErrorCode,
    ValidationError,
)
from pennywise.domain.tracking.repositories import (
    CategoryRepository,
    SavingsGoalRepository,
    TransactionRepository,
)
from pennywise.infrastructure.persistence.json import (
    JsonBackupStore,
    JsonRepositoryFactory,
)


def _backup(**data):
    document = {
        "version": "3.0",
        "exportedAt": "2024-03-20T12:00:00.000Z",
        "data": {
            "transactions": [
                {
                    "id": "t1",
                    "type": "expense",
                    "status": "completed",
                    "amount": 12.5,
                    "currency": "USD",
                    "date": "2024-03-05T10:30:00",
                    "description": "Coffee",
                    "categoryId": "food",
                },
                {"type": "expense", "amount": 1, "currency": "USD"},
            ],
            "categories": [
                {"id": "food", "name": "Food", "type": "expense", "budgetLimit": 300},
            ],
            "accounts": [],
            "savingsGoals": [
                {
                    "id": "g1",
                    "name": "Bike",
                    "targetAmount": 800,
                    "currentAmount": 200,
                    "currency": "USD",
                },
            ],
        },
    }
    document["data"].update(data)
    return document


@pytest.fixture
def backup_file(tmp_path):
    path = tmp_path / "backup.json"
    path.write_text(json.dumps(_backup()), encoding="utf-8")
    return path


class TestJsonBackupStore:
    def test_parses_collections(self, backup_file):
        store = JsonBackupStore(backup_file)

        assert [t.id for t in store.transactions()] == ["t1"]
        assert store.transactions()[0].amount == Decimal("12.5")
        assert store.categories()[0].budget_limit == Decimal("300")
        assert store.savings_goals()[0].current_amount == Decimal("200")

    def test_records_without_id_are_skipped(self, backup_file, caplog):
        with caplog.at_level(logging.DEBUG):
            JsonBackupStore(backup_file).transactions()

        assert "without id" in caplog.text

    def test_reads_file_once(self, backup_file):
        store = JsonBackupStore(backup_file)
        first = store.transactions()

        backup_file.write_text("{}", encoding="utf-8")

        assert store.transactions() is first
        assert store.categories()[0].id == "food"

    def test_missing_collection_is_empty(self, tmp_path):
        path = tmp_path / "backup.json"
        path.write_text(json.dumps({"version": "3.0", "data": {}}), encoding="utf-8")

        assert JsonBackupStore(path).savings_goals() == []

    def test_missing_file(self, tmp_path):
        store = JsonBackupStore(tmp_path / "nope.json")

        with pytest.raises(EntityNotFoundError) as exc_info:
            store.transactions()

        assert exc_info.value.code == ErrorCode.DATA_FILE_NOT_FOUND

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "backup.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(ValidationError) as exc_info:
            JsonBackupStore(path).transactions()

        assert exc_info.value.code == ErrorCode.INVALID_FORMAT

    def test_missing_data_field(self, tmp_path):
        path = tmp_path / "backup.json"
        path.write_text(json.dumps({"version": "3.0"}), encoding="utf-8")

        with pytest.raises(ValidationError, match="Missing data field"):
            JsonBackupStore(path).categories()

    def test_invalid_record(self, tmp_path):
        path = tmp_path / "backup.json"
        document = _backup(
            transactions=[
                {
                    "id": "bad",
                    "type": "expense",
                    "amount": -5,
                    "currency": "USD",
                    "date": "2024-03-05",
                    "categoryId": "food",
                },
            ],
        )
        path.write_text(json.dumps(document), encoding="utf-8")

        with pytest.raises(ValidationError) as exc_info:
            JsonBackupStore(path).transactions()

        assert exc_info.value.details["id"] == "bad"

    def test_foreign_currency_records_load_and_are_excluded(self, tmp_path):
        path = tmp_path / "backup.json"
        record = {
            "type": "expense",
            "status": "completed",
            "date": "2024-03-06T08:00:00",
            "categoryId": "food",
        }
        document = _backup(
            transactions=[
                {**record, "id": "usd", "amount": 40, "currency": "USD"},
                {**record, "id": "sek", "amount": 300, "currency": "SEK"},
            ],
        )
        path.write_text(json.dumps(document), encoding="utf-8")
        store = JsonBackupStore(path)

        summary = calculate_monthly_summary(
            3,
            2024,
            store.transactions(),
            store.categories(),
            base_currency="USD",
        )

        assert [t.currency.code for t in store.transactions()] == ["USD", "SEK"]
        assert summary.monthly_expenses == Decimal("40")


class TestJsonRepositoryFactory:
    def test_repositories_implement_domain_interfaces(self, backup_file):
        factory = JsonRepositoryFactory.from_path(backup_file)

        assert isinstance(factory.transaction_repository(), TransactionRepository)
        assert isinstance(factory.category_repository(), CategoryRepository)
        assert isinstance(factory.savings_goal_repository(), SavingsGoalRepository)

    def test_repositories_are_cached(self, backup_file):
        factory = JsonRepositoryFactory.from_path(backup_file)
        assert factory.transaction_repository() is factory.transaction_repository()

    def test_find_by_id(self, backup_file):
        factory = JsonRepositoryFactory.from_path(backup_file)

        assert factory.transaction_repository().find_by_id("t1").description == "Coffee"
        assert factory.category_repository().find_by_id("food").name == "Food"
        assert factory.savings_goal_repository().find_by_id("g1").name == "Bike"
        assert factory.transaction_repository().find_by_id("missing") is None
