"""
Password hashing and HS256 access tokens.

Tokens carry the caller's identity under a ``user`` claim and expire after a
fixed lifetime; there is no refresh or revocation.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

from jose import ExpiredSignatureError, JWTError, jwt
from passlib.context import CryptContext
from pydantic import BaseModel, ValidationError

from contacts_api.config import Settings


class PasswordHasher:
    """bcrypt with a random per-password salt at a fixed cost factor."""

    def __init__(self, rounds: int = 10) -> None:
        self._context = CryptContext(
            schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=rounds
        )

    def hash(self, password: str) -> str:
        return self._context.hash(password)

    def verify(self, password: str, hashed: str) -> bool:
        try:
            return self._context.verify(password, hashed)
        except ValueError:
            # stored value is not a recognisable hash
            return False


class TokenIdentity(BaseModel):
    """
    Identity embedded in an access token.
    """
    id: str
    username: str
    email: str


class InvalidTokenError(Exception):
    pass


@dataclass(frozen=True)
class TokenConfig:
    secret: str
    algorithm: str = "HS256"
    expire_minutes: int = 15

    @classmethod
    def from_settings(cls, settings: Settings) -> "TokenConfig":
        return cls(
            secret=settings.access_token_secret,
            algorithm=settings.jwt_algorithm,
            expire_minutes=settings.access_token_expire_minutes,
        )


class TokenService:
    """
    Issues and verifies signed access tokens for a single ``TokenConfig``.
    """

    def __init__(self, config: TokenConfig) -> None:
        self.config = config

    def issue(self, identity: TokenIdentity, now: Optional[datetime] = None) -> str:
        now = now or datetime.now(timezone.utc)
        payload: Dict[str, Any] = {
            "user": identity.model_dump(),
            "iat": int(now.timestamp()),
            "exp": int((now + timedelta(minutes=self.config.expire_minutes)).timestamp()),
        }
        return jwt.encode(payload, self.config.secret, algorithm=self.config.algorithm)

    def verify(self, token: str) -> TokenIdentity:
        """
        Verify ``token`` and return the identity it carries.

        Raises:
            InvalidTokenError: If the signature, expiry or claims are invalid.
        """
        try:
            payload = jwt.decode(
                token, self.config.secret, algorithms=[self.config.algorithm]
            )
        except ExpiredSignatureError as e:
            raise InvalidTokenError("Token has expired") from e
        except JWTError as e:
            raise InvalidTokenError(f"Token verification failed: {e}") from e

        try:
            return TokenIdentity.model_validate(payload.get("user"))
        except ValidationError as e:
            raise InvalidTokenError("Token is missing the user claim") from e
