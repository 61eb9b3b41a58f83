"""
This module contains the contracts for the user.
"""

from typing import Optional

from pydantic import AliasChoices, Field

from .base import BaseContract, DocumentContract


class UserRegister(BaseContract):
    """
    A contract for registering a user. Presence is checked by the service so
    missing fields surface as a single validation error.
    """
    username: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None


class UserLogin(BaseContract):
    """
    A contract for logging in.
    """
    email: Optional[str] = None
    password: Optional[str] = None


class UserRegistered(DocumentContract):
    """
    A contract for a freshly registered user.
    """
    email: str
    # Note: password is intentionally excluded from response


class AccessToken(BaseContract):
    access_token: str = Field(
        validation_alias=AliasChoices("access_token", "accessToken"),
        serialization_alias="accessToken",
    )


class CurrentUser(BaseContract):
    """
    The authenticated caller, as decoded from the bearer token.
    """
    id: str
    username: str
    email: str
