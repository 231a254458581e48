"""Odesli (song.link) HTTP client.

Hey future me - Odesli takes ONE streaming URL and tells us where the same song/album lives on
every other platform. Response shape (trimmed):

    {
      "entityUniqueId": "SPOTIFY_SONG::4cOdK2wGLETKBW3PvgPWqT",
      "pageUrl": "https://song.link/s/4cOdK2wGLETKBW3PvgPWqT",
      "linksByPlatform": {"spotify": {"url": "...", "entityUniqueId": "..."}, ...},
      "entitiesByUniqueId": {"SPOTIFY_SONG::...": {"title": "...", "artistName": "...",
                                                  "thumbnailUrl": "...", ...}}
    }

No API key needed for low volume. Every failure here is FATAL for the request - without
Odesli we have no platform links and no fallback entity - so everything is turned into
ResolutionError.
"""

import logging
from typing import Any
from urllib.parse import quote

import httpx

from tunebridge.config import OdesliSettings
from tunebridge.domain.exceptions import ResolutionError
from tunebridge.domain.ports import ILinkResolutionClient
from tunebridge.infrastructure.integrations.http_pool import HttpClientPool

logger = logging.getLogger(__name__)

# Characters JavaScript's encodeURIComponent leaves alone (besides alphanumerics and -_.~).
_URI_COMPONENT_SAFE = "!*'()"


def encode_uri_component(value: str) -> str:
    """Percent-encode a query value exactly like JavaScript's encodeURIComponent."""
    return quote(value, safe=_URI_COMPONENT_SAFE)


class OdesliClient(ILinkResolutionClient):
    """HTTP client for the Odesli links endpoint."""

    def __init__(
        self,
        settings: OdesliSettings,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize Odesli client.

        Args:
            settings: Odesli configuration
            http_client: Explicit client (tests); defaults to the shared pool
        """
        self.settings = settings
        self._http_client = http_client

    async def _get_client(self) -> httpx.AsyncClient:
        if self._http_client is not None:
            return self._http_client
        return await HttpClientPool.get_client()

    def build_links_url(self, url: str) -> str:
        """Build the /links request URL for an input URL."""
        links_url = f"{self.settings.base_url}/links?url={encode_uri_component(url)}"
        if self.settings.user_country:
            links_url += f"&userCountry={encode_uri_component(self.settings.user_country)}"
        return links_url

    async def get_links(self, url: str) -> dict[str, Any]:
        """Fetch cross-platform links for a URL.

        Args:
            url: Any streaming platform URL

        Returns:
            Raw Odesli JSON body

        Raises:
            ResolutionError: On transport error, non-2xx status or non-object JSON body
        """
        api_url = self.build_links_url(url)
        client = await self._get_client()

        try:
            response = await client.get(api_url)
        except httpx.HTTPError as e:
            logger.warning("Odesli request failed for %s: %s", url, e)
            raise ResolutionError(f"Failed to fetch links from Odesli: {e}") from e

        if not response.is_success:
            logger.info(
                "Odesli returned %d for %s", response.status_code, url,
                extra={"status_code": response.status_code, "url": url},
            )
            raise ResolutionError(
                f"Failed to fetch links from Odesli: {response.reason_phrase}",
                status_code=response.status_code,
            )

        try:
            data = response.json()
        except ValueError as e:
            raise ResolutionError("Odesli returned a malformed response") from e

        if not isinstance(data, dict):
            raise ResolutionError("Odesli returned a malformed response")

        return data
