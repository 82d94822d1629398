"""User Registry API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map UserRegistryError → plain-text responses
    - Store, credential verifier, and DB manager built once in the lifespan and
      kept on app.state; handlers receive them through Depends providers
    - Schema creation failure aborts startup

Design Decisions:
    - create_app() factory: tests build an app per fixture and populate app.state
      themselves; `app` below serves `uvicorn app.main:app`
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from app.api.error_handlers import register_error_handlers
from app.api.routes import auth, health, users
from app.config import Settings, get_settings
from app.core.errors import StoreError
from app.infrastructure.credentials import ConfiguredCredentialVerifier
from app.infrastructure.database import DatabaseSessionManager
from app.infrastructure.observability import setup_logging
from app.infrastructure.user_store import SqlAlchemyUserStore

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings: Settings = app.state.settings
    setup_logging(settings.log_level, settings.log_format)

    db_manager = DatabaseSessionManager(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    try:
        await db_manager.ensure_schema()
    except StoreError as e:
        logger.critical(
            f"Failed to prepare database: {e}",
            extra={"error_code": e.code, "operation": e.operation},
        )
        await db_manager.dispose()
        raise

    app.state.db_manager = db_manager
    app.state.user_store = SqlAlchemyUserStore(db_manager)
    app.state.credential_verifier = ConfiguredCredentialVerifier(
        settings.auth_username, settings.auth_password,
    )
    logger.info(f"User Registry API started on {settings.host}:{settings.port}")
    yield
    logger.info("User Registry API shutting down")
    await db_manager.dispose()


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the application. Dependencies are attached by the lifespan."""
    application = FastAPI(
        title="User Registry API", version="1.0.0", lifespan=lifespan,
    )
    application.state.settings = settings or get_settings()

    application.include_router(health.router)
    application.include_router(auth.router)
    application.include_router(users.router)

    register_error_handlers(application)
    return application


app = create_app()
