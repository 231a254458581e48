"""FastAPI application entry point."""

import uvicorn
from fastapi import FastAPI

from tunebridge import __version__
from tunebridge.api.exception_handlers import register_exception_handlers
from tunebridge.api.routers import api_router
from tunebridge.config import Settings, get_settings
from tunebridge.infrastructure.lifecycle import lifespan
from tunebridge.infrastructure.observability import RequestLoggingMiddleware


# Hey future me, create_app() is a factory so tests can build a fresh app with their own
# dependency_overrides. Exception handlers MUST be registered before the first request.
def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = settings or get_settings()

    app = FastAPI(
        title="Tunebridge",
        description=(
            "Resolves a Spotify or Apple Music URL into track/album metadata "
            "and links to the same item on every other streaming platform"
        ),
        version=__version__,
        lifespan=lifespan,
    )

    app.add_middleware(
        RequestLoggingMiddleware,
        log_request_body=settings.observability.log_request_body,
    )
    register_exception_handlers(app)
    app.include_router(api_router)

    return app


app = create_app()


def run() -> None:
    """Run the API server (console script entry point)."""
    settings = get_settings()
    uvicorn.run(
        "tunebridge.main:app",
        host=settings.api.host,
        port=settings.api.port,
        log_config=None,
    )


if __name__ == "__main__":
    run()
