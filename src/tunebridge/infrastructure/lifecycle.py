"""Application lifecycle management for startup and shutdown tasks.

This module handles the FastAPI lifespan context manager. There are no workers
or databases here: startup configures logging and reports the enrichment
strategy, shutdown releases the shared HTTP resources.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from tunebridge.config import get_settings
from tunebridge.infrastructure.integrations.http_pool import HttpClientPool
from tunebridge.infrastructure.integrations.spotify_url_info import SpotifyUrlInfoPool
from tunebridge.infrastructure.observability import configure_logging

logger = logging.getLogger(__name__)


# Listen future me, everything before `yield` runs at STARTUP, everything after at SHUTDOWN.
# The HTTP client and the Spotify extractor are NOT created here: both pools build lazily on
# the first request that needs them, so an idle instance never opens a connection.
@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager.

    Handles:
    - Logging configuration
    - HTTP client pool and Spotify extractor cleanup
    """
    settings = get_settings()

    configure_logging(
        log_level=settings.log_level,
        json_format=settings.observability.log_json_format,
        app_name=settings.app_name,
    )
    logger.info("Starting application: %s", settings.app_name)

    logger.info(
        "Enrichment strategy: %s (authoritative platform: %s)",
        settings.spotify.enrichment_strategy,
        settings.spotify.authoritative_platform,
    )
    app.state.started = True

    try:
        yield
    finally:
        logger.info("Shutting down application")
        app.state.started = False

        try:
            await SpotifyUrlInfoPool.reset()
            await HttpClientPool.close()
        except Exception as e:
            logger.exception("Error closing HTTP client pool: %s", e)
