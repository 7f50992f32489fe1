"""Base model for YooKassa SDK."""
from __future__ import annotations

from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, PlainSerializer

MAX_DESCRIPTION_LENGTH = 128


def truncate_description(value: str) -> str:
    """Cut a description to MAX_DESCRIPTION_LENGTH characters (code points)."""
    if len(value) > MAX_DESCRIPTION_LENGTH:
        return value[:MAX_DESCRIPTION_LENGTH]
    return value


# Truncated on the way out only; decoded values are kept intact.
Description = Annotated[str, PlainSerializer(truncate_description, return_type=str)]


class YooKassaModel(BaseModel):
    """Base model with common configuration."""

    model_config = ConfigDict(
        populate_by_name=True,
        use_enum_values=True,
        extra="ignore",
    )

    def to_dict(self) -> dict[str, Any]:
        """Convert model to dictionary."""
        return self.model_dump(mode="json", exclude_none=True, by_alias=True)

    def to_json(self) -> bytes:
        """Encode model as a JSON request body."""
        return self.model_dump_json(exclude_none=True, by_alias=True).encode("utf-8")

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "YooKassaModel":
        """Create model from dictionary."""
        return cls.model_validate(data)
