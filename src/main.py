"""Greeting Service — FastAPI application entry point."""

from __future__ import annotations

import logging

import sentry_sdk
from fastapi import FastAPI

from src.api.greetings import router as greetings_router
from src.api.health import router as health_router
from src.api.languages import router as languages_router
from src.config import AppConfig
from src.db.connection import init_db

logger = logging.getLogger(__name__)


def _init_sentry(dsn: str, environment: str) -> None:
    """Initialize Sentry SDK if a DSN is configured and not in development."""
    if not dsn or environment == "development":
        return
    sentry_sdk.init(
        dsn,
        environment=environment,
        traces_sample_rate=0,
        send_client_reports=False,
        auto_session_tracking=False,
    )


def create_app(config: AppConfig | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    if config is None:
        config = AppConfig.from_yaml()

    _init_sentry(config.sentry_dsn, config.environment)

    # Configure logging
    logging.basicConfig(
        level=getattr(logging, config.server.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = FastAPI(
        title="Greeting Service",
        version="1.0.0",
        description="Languages and their greetings",
        debug=config.environment == "development",
    )

    # One Database per app; handlers reach it through request.app.state
    db = init_db(config)
    app.state.config = config
    app.state.db = db

    app.include_router(health_router)
    app.include_router(languages_router)
    app.include_router(greetings_router)

    logger.info("Database ready at %s", config.database.sqlite_path)
    return app


def cli_entry() -> None:
    """CLI entry point for running the server."""
    import uvicorn

    config = AppConfig.from_yaml()
    app = create_app(config)

    uvicorn.run(
        app,
        host=config.server.host,
        port=config.server.port,
        log_level=config.server.log_level,
    )
