"""
User routes: POST /register, POST /login, GET /current
"""

from fastapi import APIRouter, Depends

from contacts_api.contracts import (
    AccessToken,
    CurrentUser,
    UserLogin,
    UserRegister,
    UserRegistered,
)
from contacts_api.dependencies.auth import get_current_user
from contacts_api.dependencies.services import get_user_service
from contacts_api.services.users import UserService

router = APIRouter()


@router.post("/register", response_model=UserRegistered, status_code=201)
async def register_user(
    payload: UserRegister,
    service: UserService = Depends(get_user_service),
):
    """Register a user; only the id and email are returned."""
    return await service.register(payload)


@router.post("/login", response_model=AccessToken)
async def login_user(
    payload: UserLogin,
    service: UserService = Depends(get_user_service),
):
    token = await service.login(payload)
    return AccessToken(access_token=token)


@router.get("/current", response_model=CurrentUser)
async def current_user(user: CurrentUser = Depends(get_current_user)):
    return user
