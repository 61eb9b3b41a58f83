"""
Contact model: maps to the contacts collection.
"""

from beanie import PydanticObjectId
from pydantic import Field
from pymongo import IndexModel

from .base import TimestampedDocument


class Contact(TimestampedDocument):
    user_id: PydanticObjectId
    name: str = Field(min_length=1)
    email: str = Field(min_length=1)
    phone: str = Field(min_length=1)

    class Settings:
        name = "contacts"
        indexes = [IndexModel([("user_id", 1)], name="contact_user_id")]
