"""
Contracts for contacts.
"""

from typing import Optional

from beanie import PydanticObjectId
from pydantic import Field

from .base import BaseContract, TimestampedContract


class ContactCreate(BaseContract):
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None


class ContactUpdate(BaseContract):
    """
    Partial update; a supplied field may not be empty.
    """
    name: Optional[str] = Field(default=None, min_length=1)
    email: Optional[str] = Field(default=None, min_length=1)
    phone: Optional[str] = Field(default=None, min_length=1)


class ContactResponse(TimestampedContract):
    user_id: PydanticObjectId
    name: str
    email: str
    phone: str
