"""Tests for the shared HTTP client pool."""

import asyncio

import httpx

from tunebridge.config import HttpSettings
from tunebridge.infrastructure.integrations.http_pool import (
    DEFAULT_USER_AGENT,
    HttpClientPool,
)


class TestHttpClientPool:
    """Test lazy, single initialization of the shared client."""

    async def test_not_initialized_until_first_use(self) -> None:
        assert HttpClientPool.is_initialized() is False

        client = await HttpClientPool.get_client()

        assert isinstance(client, httpx.AsyncClient)
        assert HttpClientPool.is_initialized() is True
        await HttpClientPool.close()

    async def test_concurrent_first_calls_share_one_client(self) -> None:
        """Concurrent first callers wait for the one initialization."""
        clients = await asyncio.gather(
            *(HttpClientPool.get_client() for _ in range(10))
        )

        assert all(client is clients[0] for client in clients)
        await HttpClientPool.close()

    async def test_settings_applied_on_first_call(self) -> None:
        client = await HttpClientPool.get_client(HttpSettings(timeout=5.0))

        assert client.timeout.read == 5.0
        assert client.headers["User-Agent"] == DEFAULT_USER_AGENT
        assert client.follow_redirects is True
        await HttpClientPool.close()

    async def test_close_then_get_builds_new_client(self) -> None:
        first = await HttpClientPool.get_client()
        await HttpClientPool.close()

        assert HttpClientPool.is_initialized() is False
        assert first.is_closed

        second = await HttpClientPool.get_client()
        assert second is not first
        await HttpClientPool.close()

    async def test_close_without_client_is_noop(self) -> None:
        await HttpClientPool.close()
        assert HttpClientPool.is_initialized() is False
