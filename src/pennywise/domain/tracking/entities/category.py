"""Category entity."""

from datetime import datetime
from decimal import Decimal
from typing import Any, Optional

from pydantic import BaseModel, field_validator

from pennywise.domain.shared.time import coerce_datetime
from pennywise.domain.tracking.entities._fields import ENTITY_CONFIG, coerce_decimal
from pennywise.domain.tracking.value_objects import CategoryType


class Category(BaseModel):
    """
    A transaction category, optionally nested under a parent.

    ``budget_limit`` only means something for expense categories; a limit of
    zero or less is treated as "no budget". Color and icon are carried for
    display and take no part in calculations.
    """

    model_config = ENTITY_CONFIG

    id: str
    name: str
    type: CategoryType
    parent_id: Optional[str] = None
    budget_limit: Optional[Decimal] = None
    color: str = ""
    icon: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @field_validator("budget_limit", mode="before")
    @classmethod
    def _to_decimal(cls, v: Any) -> Any:
        return coerce_decimal(v)

    @field_validator("created_at", "updated_at", mode="before")
    @classmethod
    def _coerce_dates(cls, v: Any) -> Any:
        return coerce_datetime(v)

    @property
    def has_budget(self) -> bool:
        return self.budget_limit is not None and self.budget_limit > 0

    @property
    def is_root(self) -> bool:
        return self.parent_id is None
