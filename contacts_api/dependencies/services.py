"""
Service providers for the route handlers.
"""

from fastapi import Depends

from contacts_api.core.security import PasswordHasher, TokenService
from contacts_api.dependencies.auth import get_password_hasher, get_token_service
from contacts_api.services.contacts import ContactService
from contacts_api.services.users import UserService


def get_user_service(
    hasher: PasswordHasher = Depends(get_password_hasher),
    tokens: TokenService = Depends(get_token_service),
) -> UserService:
    return UserService(hasher, tokens)


def get_contact_service() -> ContactService:
    return ContactService()
