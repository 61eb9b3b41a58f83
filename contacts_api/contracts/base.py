"""
This module contains the base contracts for the application.
"""

from datetime import datetime, timezone
from typing import Optional

from beanie import PydanticObjectId
from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


class BaseContract(BaseModel):
    """
    A base contract for all contracts.
    """
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)


class DocumentContract(BaseContract):
    """
    A base contract for stored documents, rendered with their ``_id``.
    """
    id: PydanticObjectId = Field(
        validation_alias=AliasChoices("id", "_id"),
        serialization_alias="_id",
    )


class TimestampedContract(DocumentContract):
    """
    A base contract for all contracts that have a created_at and updated_at field.
    """
    created_at: datetime
    updated_at: Optional[datetime] = None

    @field_validator("created_at", "updated_at")
    @classmethod
    def normalize_timestamp(cls, v: Optional[datetime]) -> Optional[datetime]:
        # the store keeps millisecond precision and may hand back naive UTC
        if v is None:
            return v
        if v.tzinfo is None:
            v = v.replace(tzinfo=timezone.utc)
        else:
            v = v.astimezone(timezone.utc)
        return v.replace(microsecond=v.microsecond // 1000 * 1000)
