"""External integration client implementations."""

from tunebridge.infrastructure.integrations.http_pool import HttpClientPool
from tunebridge.infrastructure.integrations.odesli_client import OdesliClient
from tunebridge.infrastructure.integrations.spotify_page_scraper import (
    SpotifyPageScraper,
)
from tunebridge.infrastructure.integrations.spotify_url_info import (
    SpotifyUrlInfo,
    SpotifyUrlInfoPool,
)

__all__ = [
    "HttpClientPool",
    "OdesliClient",
    "SpotifyPageScraper",
    "SpotifyUrlInfo",
    "SpotifyUrlInfoPool",
]
