"""
User registration, login and current-user logic.
"""

import logging

from pymongo.errors import DuplicateKeyError

from contacts_api.contracts import UserLogin, UserRegister
from contacts_api.core.errors import Conflict, Unauthorized, ValidationFailed
from contacts_api.core.security import PasswordHasher, TokenIdentity, TokenService
from contacts_api.models import User
from contacts_api.services.crud import CRUDBase

logger = logging.getLogger(__name__)


class UserService:
    def __init__(self, hasher: PasswordHasher, tokens: TokenService) -> None:
        self.hasher = hasher
        self.tokens = tokens
        self.crud = CRUDBase(User)

    async def register(self, payload: UserRegister) -> User:
        """
        Create a user with a hashed password.

        Raises:
            ValidationFailed: If any of username, email or password is empty.
            Conflict: If the email is already registered.
        """
        if not all([payload.username, payload.email, payload.password]):
            raise ValidationFailed("All fields are mandatory!")

        if await self.crud.find_one({"email": payload.email}):
            raise Conflict("User already registered!")

        try:
            user = await self.crud.create(
                {
                    "username": payload.username,
                    "email": payload.email,
                    "password": self.hasher.hash(payload.password),
                }
            )
        except DuplicateKeyError:
            # lost a race with a concurrent registration
            raise Conflict("User already registered!")

        logger.info("Registered user %s", user.id)
        return user

    async def login(self, payload: UserLogin) -> str:
        """
        Check the credentials and issue an access token.

        Unknown email and wrong password fail identically.
        """
        if not all([payload.email, payload.password]):
            raise ValidationFailed("All fields are mandatory!")

        user = await self.crud.find_one({"email": payload.email})
        if not user or not self.hasher.verify(payload.password, user.password):
            raise Unauthorized("email or password is not valid")

        return self.tokens.issue(
            TokenIdentity(id=str(user.id), username=user.username, email=user.email)
        )
