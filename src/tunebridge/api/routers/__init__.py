"""API router initialization."""

# Hey future me, this aggregates the sub-routers. Each router carries its own prefix
# (/music, /health), so they're included here without one.

from fastapi import APIRouter

from tunebridge.api.routers import health, music

api_router = APIRouter()

api_router.include_router(music.router)
api_router.include_router(health.router)

__all__ = [
    "api_router",
    "health",
    "music",
]
