"""Shared pydantic configuration and coercions for tracking entities."""

from decimal import Decimal, InvalidOperation
from typing import Any

from pydantic import ConfigDict
from pydantic.alias_generators import to_camel

# Stored records use camelCase keys (``categoryId``); Python code uses
# snake_case. Unknown keys (attachments, UI state) are ignored.
ENTITY_CONFIG = ConfigDict(
    frozen=True,
    extra="ignore",
    populate_by_name=True,
    alias_generator=to_camel,
)


def coerce_decimal(value: Any) -> Any:
    if value is None or isinstance(value, Decimal):
        return value
    if isinstance(value, bool):
        msg = "Amount must be numeric"
        raise ValueError(msg)
    try:
        return Decimal(str(value))
    except InvalidOperation as e:
        msg = f"Amount must be numeric, got {value!r}"
        raise ValueError(msg) from e
