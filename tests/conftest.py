"""Shared test fixtures."""

import pytest

from tunebridge.config import get_settings
from tunebridge.infrastructure.integrations.http_pool import HttpClientPool
from tunebridge.infrastructure.integrations.spotify_url_info import SpotifyUrlInfoPool


# Hey future me - the pools are class-level singletons and pytest-asyncio gives every test
# its own event loop. Drop the client AND the lock after each test so nothing bound to a
# dead loop leaks into the next one.
@pytest.fixture(autouse=True)
def reset_process_singletons():
    get_settings.cache_clear()
    yield
    HttpClientPool._client = None
    HttpClientPool._lock = None
    SpotifyUrlInfoPool._instance = None
    SpotifyUrlInfoPool._lock = None
    get_settings.cache_clear()
