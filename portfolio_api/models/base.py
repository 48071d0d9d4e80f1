"""Base model for MongoDB documents."""

from datetime import UTC, datetime
from typing import Any, Self

from bson import ObjectId
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


def utcnow() -> datetime:
    return datetime.now(UTC)


class CamelModel(BaseModel):
    """Model whose wire and storage keys are camelCase."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        use_enum_values=True,
        validate_default=True,
    )


class MongoDocument(CamelModel):
    """A stored document identified by ``_id``."""

    id: str | None = Field(None, alias="_id")

    def to_mongo(self) -> dict[str, Any]:
        """Convert to MongoDB document format."""
        data = self.model_dump(by_alias=True, exclude_none=True)
        if data.get("_id") is None:
            data.pop("_id", None)
        else:
            data["_id"] = ObjectId(data["_id"])
        return data

    @classmethod
    def from_mongo(cls, data: dict[str, Any]) -> Self:
        """Create from MongoDB document."""
        data = dict(data)
        if data.get("_id") is not None:
            data["_id"] = str(data["_id"])
        return cls.model_validate(data)


class TimestampedDocument(MongoDocument):
    """Document carrying server-assigned creation and update times."""

    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)
