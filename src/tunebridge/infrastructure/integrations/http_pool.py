"""Shared HTTP client pool for connection reuse across requests.

Hey future me - this is the CENTRAL http client! Odesli calls, Spotify embed fetches and the
secondary page scrapes all go through ONE httpx.AsyncClient, so keep-alive connections to
api.song.link and open.spotify.com get reused across requests instead of re-handshaking TLS
every time.

Usage:
    from tunebridge.infrastructure.integrations.http_pool import HttpClientPool

    client = await HttpClientPool.get_client()
    response = await client.get("https://api.song.link/v1-alpha.1/links", params=...)

HttpClientPool.close() runs at app shutdown (see lifecycle.py).
"""

import asyncio
import logging
from typing import ClassVar

import httpx

from tunebridge.config import HttpSettings

logger = logging.getLogger(__name__)

# Some Spotify pages serve a stripped document to clients without a browser-ish UA.
DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (compatible; tunebridge/0.1; +https://github.com/tunebridge/tunebridge)"
)


class HttpClientPool:
    """Process-wide singleton httpx.AsyncClient.

    - Lazy initialization (created on first use)
    - Concurrency-safe via asyncio.Lock: concurrent first callers await the
      same lock and all receive the one client
    - Proper cleanup at shutdown
    """

    # Hey future me, these are CLASS VARIABLES (shared across all calls)!
    _client: ClassVar[httpx.AsyncClient | None] = None
    _lock: ClassVar[asyncio.Lock | None] = None

    @classmethod
    def _ensure_lock(cls) -> asyncio.Lock:
        """Create the lock lazily so it's never built outside a running event loop."""
        if cls._lock is None:
            cls._lock = asyncio.Lock()
        return cls._lock

    @classmethod
    async def get_client(cls, settings: HttpSettings | None = None) -> httpx.AsyncClient:
        """Get the shared HTTP client instance.

        Args:
            settings: Pool settings, only applied on the FIRST call

        Returns:
            Shared httpx.AsyncClient instance
        """
        async with cls._ensure_lock():
            if cls._client is None:
                settings = settings or HttpSettings()
                cls._client = httpx.AsyncClient(
                    timeout=httpx.Timeout(settings.timeout),
                    limits=httpx.Limits(
                        max_keepalive_connections=settings.max_keepalive,
                        max_connections=settings.max_connections,
                    ),
                    headers={"User-Agent": DEFAULT_USER_AGENT},
                    http2=True,
                    # Spotify short links and intl- paths redirect
                    follow_redirects=True,
                )
                logger.info(
                    "HTTP client pool initialized (timeout=%.1fs, keepalive=%d, max_conn=%d)",
                    settings.timeout,
                    settings.max_keepalive,
                    settings.max_connections,
                )
            return cls._client

    @classmethod
    async def close(cls) -> None:
        """Close the shared client. The next get_client() builds a fresh one."""
        async with cls._ensure_lock():
            if cls._client is not None:
                await cls._client.aclose()
                cls._client = None
                logger.info("HTTP client pool closed")

    @classmethod
    def is_initialized(cls) -> bool:
        """Check if the shared client exists (used by the readiness probe)."""
        return cls._client is not None
