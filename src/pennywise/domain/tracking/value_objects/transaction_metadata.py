"""Free-form metadata attached to a transaction."""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class TransactionMetadata(BaseModel):
    """Notes, tags and an optional place name.

    The stored form nests the place under ``location.name``; it is flattened
    here since nothing downstream needs the address or coordinates.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    notes: Optional[str] = None
    tags: tuple[str, ...] = Field(default=())
    location_name: Optional[str] = None

    @model_validator(mode="before")
    @classmethod
    def _flatten_location(cls, data: Any) -> Any:
        if isinstance(data, dict) and "location" in data:
            data = dict(data)
            location = data.pop("location") or {}
            data.setdefault("location_name", location.get("name"))
        return data

    def has_any_tag(self, tags: set[str]) -> bool:
        return not tags.isdisjoint(self.tags)
