"""
Authentication dependencies: bearer token verification.
"""

import logging
from typing import Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from contacts_api.config import Settings
from contacts_api.contracts import CurrentUser
from contacts_api.core.errors import Unauthorized
from contacts_api.core.security import (
    InvalidTokenError,
    PasswordHasher,
    TokenConfig,
    TokenService,
)

logger = logging.getLogger(__name__)

BEARER_PREFIX = "Bearer "

# Declares the scheme in the OpenAPI docs; the header itself is checked below
security = HTTPBearer(auto_error=False)


def get_app_settings(request: Request) -> Settings:
    """Settings the running application was created with."""
    return request.app.state.settings


def get_token_service(settings: Settings = Depends(get_app_settings)) -> TokenService:
    return TokenService(TokenConfig.from_settings(settings))


def get_password_hasher(settings: Settings = Depends(get_app_settings)) -> PasswordHasher:
    return PasswordHasher(rounds=settings.bcrypt_rounds)


async def get_current_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    tokens: TokenService = Depends(get_token_service),
) -> CurrentUser:
    """
    Verify the ``Authorization: Bearer <token>`` header and return the caller.

    Raises:
        Unauthorized: If the header is missing or malformed, or the token
            does not verify.
    """
    header = request.headers.get("Authorization")
    if credentials is None or not header or not header.startswith(BEARER_PREFIX):
        raise Unauthorized("User is not authorized or token is missing")

    token = header[len(BEARER_PREFIX):]
    if not token or token != token.strip() or " " in token:
        raise Unauthorized("User is not authorized or token is missing")

    try:
        identity = tokens.verify(token)
    except InvalidTokenError as e:
        logger.info("Access token rejected: %s", e)
        raise Unauthorized("User is not authorized")

    return CurrentUser(**identity.model_dump())
