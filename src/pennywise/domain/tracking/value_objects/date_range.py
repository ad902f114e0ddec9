"""Closed date and amount intervals used by filters and reports."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

from pennywise.domain.shared.time import coerce_datetime


class DateRange(BaseModel):
    """Inclusive ``[start, end]`` interval of local datetimes."""

    start: datetime
    end: datetime

    model_config = ConfigDict(frozen=True)

    @field_validator("start", "end", mode="before")
    @classmethod
    def _coerce(cls, v: Any) -> Any:
        return coerce_datetime(v)

    @model_validator(mode="after")
    def _check_order(self) -> "DateRange":
        if self.start > self.end:
            msg = f"Date range start {self.start} is after end {self.end}"
            raise ValueError(msg)
        return self

    def contains(self, moment: datetime) -> bool:
        return self.start <= moment <= self.end


class AmountRange(BaseModel):
    """Inclusive amount bounds; a missing bound leaves that side open."""

    min: Optional[Decimal] = None
    max: Optional[Decimal] = None

    model_config = ConfigDict(frozen=True)

    @field_validator("min", "max", mode="before")
    @classmethod
    def _to_decimal(cls, v: Any) -> Any:
        if v is None or isinstance(v, Decimal):
            return v
        return Decimal(str(v))

    def contains(self, amount: Decimal) -> bool:
        if self.min is not None and amount < self.min:
            return False
        if self.max is not None and amount > self.max:
            return False
        return True
