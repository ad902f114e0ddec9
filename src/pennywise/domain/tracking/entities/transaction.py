"""Transaction entity."""

from datetime import datetime
from decimal import Decimal
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator

from pennywise.domain.shared.time import coerce_datetime
from pennywise.domain.tracking.entities._fields import ENTITY_CONFIG, coerce_decimal
from pennywise.domain.tracking.value_objects import (
    Currency,
    TransactionMetadata,
    TransactionStatus,
    TransactionType,
)


class Transaction(BaseModel):
    """
    A single recorded money movement.

    The amount is never negative: direction comes from ``type``. Only
    completed income, expense and refund transactions feed monetary
    aggregates; everything else is filtered out before summing.
    """

    model_config = ENTITY_CONFIG

    id: str
    type: TransactionType
    status: TransactionStatus = TransactionStatus.COMPLETED
    amount: Decimal
    currency: Currency
    date: datetime
    description: str = ""
    category_id: str
    subcategory_id: Optional[str] = None
    account_id: Optional[str] = None
    transfer_to_account_id: Optional[str] = None
    metadata: TransactionMetadata = Field(default_factory=TransactionMetadata)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @field_validator("amount", mode="before")
    @classmethod
    def _validate_amount(cls, v: Any) -> Decimal:
        amount = coerce_decimal(v)
        if amount is None:
            msg = "Transaction amount is required"
            raise ValueError(msg)
        if amount < 0:
            msg = "Transaction amount cannot be negative; use the type for direction"
            raise ValueError(msg)
        return amount

    @field_validator("currency", mode="before")
    @classmethod
    def _validate_currency(cls, v: Any) -> Any:
        if isinstance(v, str):
            return Currency(v)
        return v

    @field_validator("date", "created_at", "updated_at", mode="before")
    @classmethod
    def _coerce_dates(cls, v: Any) -> Any:
        return coerce_datetime(v)

    @field_validator("metadata", mode="before")
    @classmethod
    def _default_metadata(cls, v: Any) -> Any:
        return TransactionMetadata() if v is None else v

    @property
    def notes(self) -> Optional[str]:
        return self.metadata.notes

    @property
    def tags(self) -> tuple[str, ...]:
        return self.metadata.tags

    def is_completed(self) -> bool:
        return self.status == TransactionStatus.COMPLETED
