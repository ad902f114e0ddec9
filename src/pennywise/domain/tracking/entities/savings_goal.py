"""Savings goal entity."""

from datetime import datetime
from decimal import Decimal
from typing import Any, Optional

from pydantic import BaseModel, field_validator

from pennywise.domain.shared.time import coerce_datetime
from pennywise.domain.tracking.entities._fields import ENTITY_CONFIG, coerce_decimal
from pennywise.domain.tracking.value_objects import Currency


class SavingsGoal(BaseModel):
    """
    Stored fields of a savings goal.

    Status, percentage and remaining amount are deliberately absent: they
    depend on the current date and are recomputed on every read by the
    savings calculations.
    """

    model_config = ENTITY_CONFIG

    id: str
    name: str
    target_amount: Decimal
    current_amount: Decimal = Decimal("0")
    currency: Currency
    deadline: Optional[datetime] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    processed_transaction_ids: tuple[str, ...] = ()

    @field_validator("target_amount", "current_amount", mode="before")
    @classmethod
    def _to_decimal(cls, v: Any) -> Any:
        return coerce_decimal(v)

    @field_validator("currency", mode="before")
    @classmethod
    def _validate_currency(cls, v: Any) -> Any:
        if isinstance(v, str):
            return Currency(v)
        return v

    @field_validator("deadline", "created_at", "updated_at", mode="before")
    @classmethod
    def _coerce_dates(cls, v: Any) -> Any:
        return coerce_datetime(v)
