"""
This module contains the document store connection.
"""
import logging
from typing import Optional

from beanie import init_beanie
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase

from contacts_api.config import Settings
from contacts_api.models import DOCUMENT_MODELS

logger = logging.getLogger(__name__)

_client: Optional[AsyncIOMotorClient] = None


async def init_models(database: AsyncIOMotorDatabase) -> None:
    """
    Register the document models (and their indexes) against ``database``.
    """
    await init_beanie(database=database, document_models=DOCUMENT_MODELS)


async def connect(settings: Settings) -> AsyncIOMotorDatabase:
    """
    Open the single client used for the lifetime of the process.

    Raises:
        RuntimeError: If the server cannot be reached or the models
            cannot be initialised.
    """
    global _client

    client = AsyncIOMotorClient(settings.mongo_uri, tz_aware=True)
    try:
        await client.admin.command("ping")
        database = client[settings.mongo_db_name]
        await init_models(database)
    except Exception as e:
        client.close()
        logger.error("Database connection failed: %s", e)
        raise RuntimeError("Failed to connect to the database") from e

    _client = client
    logger.info("Database connected: %s", settings.mongo_db_name)
    return database


def close() -> None:
    global _client
    if _client is not None:
        _client.close()
        logger.info("Database connection closed.")
    _client = None
