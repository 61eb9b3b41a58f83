"""
User model: maps to the users collection.
"""

from pydantic import Field
from pymongo import IndexModel

from .base import TimestampedDocument


class User(TimestampedDocument):
    username: str = Field(min_length=1)
    email: str = Field(min_length=1)
    # bcrypt hash, never the plaintext
    password: str = Field(min_length=1)

    class Settings:
        name = "users"
        indexes = [IndexModel([("email", 1)], name="user_email_uq", unique=True)]
