"""
Main application file
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from contacts_api.api.routes.contacts import router as contacts_router
from contacts_api.api.routes.users import router as users_router
from contacts_api.config import Settings, get_settings
from contacts_api.contracts import ErrorResponse
from contacts_api.core.errors import register_exception_handlers
from contacts_api.db import connection

# Load environment variables from .env file
load_dotenv()

logger = logging.getLogger(__name__)

ERROR_RESPONSES = {
    code: {"model": ErrorResponse} for code in (400, 401, 403, 404, 409, 500)
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings
    logger.info("Connecting to the database…")
    # a failure here aborts startup and the process exits
    await connection.connect(settings)
    try:
        yield
    finally:
        connection.close()


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    logging.basicConfig(level=settings.log_level.upper())

    app = FastAPI(title="Contacts API", lifespan=lifespan)
    app.state.settings = settings

    allowed_origins = [
        "http://localhost:3000",
        "http://localhost:5173",
    ]
    if settings.frontend_url and settings.frontend_url not in allowed_origins:
        allowed_origins.append(settings.frontend_url)
    if settings.allow_all_origins:
        allowed_origins = ["*"]

    app.add_middleware(
        CORSMiddleware,
        allow_origins=allowed_origins,
        allow_credentials=allowed_origins != ["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app, settings)

    @app.get("/")
    def root():
        return {"status": "ok"}

    app.include_router(
        users_router,
        prefix="/api/users",
        tags=["users"],
        responses=ERROR_RESPONSES,
    )

    app.include_router(
        contacts_router,
        prefix="/api/contacts",
        tags=["contacts"],
        responses=ERROR_RESPONSES,
    )

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=get_settings().port)
