"""
Pytest fixtures for backend tests.
"""

import pytest
import pytest_asyncio
from typing import AsyncGenerator, Dict, Generator

from fastapi import FastAPI
from fastapi.testclient import TestClient
from httpx import ASGITransport, AsyncClient
from mongomock_motor import AsyncMongoMockClient

from contacts_api.config import Settings
from contacts_api.core.security import PasswordHasher, TokenConfig, TokenService
from contacts_api.db.connection import init_models
from contacts_api.main import create_app

TEST_SECRET = "test-secret"


# --- Fixtures ---

@pytest.fixture(scope="session")
def settings() -> Settings:
    """Application settings for tests; bcrypt at its minimum cost."""
    return Settings(
        mongo_uri="mongodb://localhost:27017",
        mongo_db_name="contacts_test",
        access_token_secret=TEST_SECRET,
        access_token_expire_minutes=15,
        bcrypt_rounds=4,
        _env_file=None,
    )


@pytest.fixture
def token_service(settings: Settings) -> TokenService:
    return TokenService(TokenConfig.from_settings(settings))


@pytest.fixture
def password_hasher(settings: Settings) -> PasswordHasher:
    return PasswordHasher(rounds=settings.bcrypt_rounds)


@pytest_asyncio.fixture(scope="function")
async def mongo_db():
    """
    In-memory MongoDB with the document models registered.
    """
    client = AsyncMongoMockClient()
    db = client["contacts_test"]
    await init_models(db)
    yield db


@pytest.fixture(scope="function")
def app(settings: Settings) -> FastAPI:
    return create_app(settings)


@pytest.fixture(scope="function")
def client(app: FastAPI) -> Generator[TestClient, None, None]:
    """
    Synchronous test client. Not entered as a context manager so the
    lifespan (and its real database connection) never runs.
    """
    yield TestClient(app, raise_server_exceptions=False)
    app.dependency_overrides.clear()


@pytest_asyncio.fixture(scope="function")
async def async_client(app: FastAPI, mongo_db) -> AsyncGenerator[AsyncClient, None]:
    """
    Async test client for FastAPI backed by the in-memory database.
    """
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


async def register_and_login(
    client: AsyncClient, username: str, email: str, password: str
) -> Dict[str, str]:
    """Register a user, log in, and return the auth headers."""
    response = await client.post(
        "/api/users/register",
        json={"username": username, "email": email, "password": password},
    )
    assert response.status_code == 201, response.text
    response = await client.post(
        "/api/users/login", json={"email": email, "password": password}
    )
    assert response.status_code == 200, response.text
    return {"Authorization": f"Bearer {response.json()['accessToken']}"}


@pytest_asyncio.fixture
async def alice_headers(async_client: AsyncClient) -> Dict[str, str]:
    return await register_and_login(async_client, "alice", "alice@x.com", "pw1")


@pytest_asyncio.fixture
async def bob_headers(async_client: AsyncClient) -> Dict[str, str]:
    return await register_and_login(async_client, "bob", "bob@x.com", "pw2")
