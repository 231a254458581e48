"""Spotify metadata extraction from public embed pages (no OAuth).

Hey future me - this is our take on the `spotify-url-info` approach: Spotify's embed page
(https://open.spotify.com/embed/<type>/<id>) ships the whole entity as JSON inside a
<script id="__NEXT_DATA__"> tag. No client credentials, no token refresh, no rate limit
headaches. The catch: it's an UNDOCUMENTED page format. If Spotify changes it, get_data()
raises DataExtractionError and the enricher quietly falls back to Odesli's data, so the API
keeps working with less metadata.

Three operations are consumed by the enrichment layer:
- get_data(url)    → full, type-discriminated entity dict
- get_preview(url) → flat SpotifyPreview record
- fetch_page(url)  → raw HTML of any URL (album-link / JSON-LD scraping)

SpotifyUrlInfoPool hands out the process-wide instance (lazy, created once).
"""

import asyncio
import base64
import binascii
import json
import logging
import re
from typing import Any, ClassVar

import httpx
from bs4 import BeautifulSoup

from tunebridge.config import SpotifySettings
from tunebridge.domain.exceptions import DataExtractionError
from tunebridge.domain.ports import ISpotifyDataSource
from tunebridge.domain.value_objects import (
    SpotifyEntityType,
    SpotifyPreview,
    dig,
    first_non_empty,
)
from tunebridge.infrastructure.integrations.http_pool import HttpClientPool

logger = logging.getLogger(__name__)

OPEN_BASE_URL = "https://open.spotify.com"
LEGACY_EMBED_URL = "https://embed.spotify.com/?uri={uri}"

_TYPES_PATTERN = "|".join(t.value for t in SpotifyEntityType)

# open.spotify.com/track/ID, open.spotify.com/intl-de/album/ID, open.spotify.com/embed/track/ID
_OPEN_URL_RE = re.compile(
    r"^https?://(?:open|play)\.spotify\.com/"
    r"(?:intl-[a-zA-Z]{2}(?:-[a-zA-Z]{2})?/)?"
    r"(?:embed(?:-podcast)?/)?"
    rf"({_TYPES_PATTERN})/([A-Za-z0-9]+)"
)
# spotify:track:ID
_URI_RE = re.compile(rf"^spotify:({_TYPES_PATTERN}):([A-Za-z0-9]+)$")


def parse_spotify_url(url: str) -> tuple[SpotifyEntityType, str]:
    """Split a Spotify open URL or URI into (entity type, id).

    Raises:
        DataExtractionError: If the URL isn't a supported Spotify entity link
    """
    candidate = url.strip()
    match = _OPEN_URL_RE.match(candidate) or _URI_RE.match(candidate)
    if not match:
        raise DataExtractionError(f"Not a supported Spotify URL: {url}")
    return SpotifyEntityType.from_string(match.group(1)), match.group(2)


def open_url_from_uri(uri: str | None) -> str | None:
    """spotify:track:ID → https://open.spotify.com/track/ID."""
    if not uri:
        return None
    match = _URI_RE.match(uri)
    if not match:
        return None
    return f"{OPEN_BASE_URL}/{match.group(1)}/{match.group(2)}"


def parse_embed_data(html: str) -> dict[str, Any]:
    """Extract the entity dict from an embed page.

    Raises:
        DataExtractionError: If no known data block is present or it can't be decoded
    """
    soup = BeautifulSoup(html, "html.parser")

    next_data = soup.find("script", id="__NEXT_DATA__")
    if next_data is not None and next_data.string:
        try:
            payload = json.loads(next_data.string)
        except ValueError as e:
            raise DataExtractionError("Malformed __NEXT_DATA__ block in embed page") from e
        entity = dig(payload, "props", "pageProps", "state", "data", "entity")
        if isinstance(entity, dict):
            return entity

    # Older embed pages carried the entity base64-encoded in <script id="resource">
    resource = soup.find("script", id="resource")
    if resource is not None and resource.string:
        try:
            entity = json.loads(base64.b64decode(resource.string.strip()))
        except (binascii.Error, ValueError) as e:
            raise DataExtractionError("Malformed resource block in embed page") from e
        if isinstance(entity, dict):
            return entity

    raise DataExtractionError(
        "Couldn't find any data in embed page that we know how to parse."
    )


def _join_artist_names(artists: Any) -> str | None:
    # "A", "A & B", "A, B & C"
    if not isinstance(artists, list):
        return None
    names = [a["name"] for a in artists if isinstance(a, dict) and a.get("name")]
    if not names:
        return None
    if len(names) == 1:
        return names[0]
    return ", ".join(names[:-1]) + " & " + names[-1]


def _to_track(item: dict[str, Any]) -> dict[str, Any]:
    """Normalize a track-list item (or a track entity) to one shape."""
    return {
        "name": first_non_empty(item.get("name"), item.get("title")),
        "artist": first_non_empty(
            _join_artist_names(item.get("artists")),
            item.get("subtitle"),
            item.get("artist"),
        ),
        "duration": item.get("duration"),
        "preview_url": first_non_empty(
            dig(item, "audioPreview", "url"),
            dig(item, "audio_preview", "url"),
            item.get("preview_url"),
        ),
        "uri": item.get("uri"),
    }


def extract_tracks(data: dict[str, Any]) -> list[dict[str, Any]]:
    """Track list of a collection, or the entity itself for single tracks."""
    track_list = data.get("trackList")
    if isinstance(track_list, list):
        return [_to_track(item) for item in track_list if isinstance(item, dict)]
    return [_to_track(data)]


def _widest_image(data: dict[str, Any]) -> str | None:
    for images in (
        dig(data, "coverArt", "sources"),
        data.get("images"),
        dig(data, "visualIdentity", "image"),
        dig(data, "album", "images"),
    ):
        if not isinstance(images, list):
            continue
        candidates = [img for img in images if isinstance(img, dict) and img.get("url")]
        if candidates:
            widest = max(
                candidates, key=lambda img: img.get("width") or img.get("maxWidth") or 0
            )
            return str(widest["url"])
    return first_non_empty(data.get("image"))


def build_preview(data: dict[str, Any]) -> SpotifyPreview:
    """Flatten a full entity payload into a SpotifyPreview."""
    tracks = extract_tracks(data)
    track = tracks[0] if tracks else {}
    uri = data.get("uri")

    return SpotifyPreview(
        title=first_non_empty(data.get("name"), data.get("title")),
        type=data.get("type"),
        track=track.get("name"),
        artist=first_non_empty(
            track.get("artist"), data.get("subtitle"), data.get("artist")
        ),
        image=_widest_image(data),
        audio=track.get("preview_url"),
        link=open_url_from_uri(uri),
        embed=LEGACY_EMBED_URL.format(uri=uri) if uri else None,
        date=first_non_empty(
            dig(data, "releaseDate", "isoString"),
            data.get("release_date"),
            data.get("date"),
            dig(data, "album", "release_date"),
        ),
        description=first_non_empty(
            data.get("description"), data.get("subtitle"), track.get("description")
        ),
    )


class SpotifyUrlInfo(ISpotifyDataSource):
    """Spotify data-extraction client built on embed pages."""

    def __init__(
        self,
        settings: SpotifySettings,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize extractor.

        Args:
            settings: Spotify configuration (embed base URL)
            http_client: Explicit client (tests); defaults to the shared pool
        """
        self.settings = settings
        self._http_client = http_client

    async def _get_client(self) -> httpx.AsyncClient:
        if self._http_client is not None:
            return self._http_client
        return await HttpClientPool.get_client()

    def embed_url(self, url: str) -> str:
        """Embed page URL for a Spotify open URL or URI."""
        entity_type, entity_id = parse_spotify_url(url)
        return f"{self.settings.embed_base_url.rstrip('/')}/{entity_type.value}/{entity_id}"

    async def fetch_page(self, url: str) -> str:
        """Fetch raw HTML of a page.

        Raises:
            httpx.HTTPError: On transport errors or non-2xx status
        """
        client = await self._get_client()
        response = await client.get(url)
        response.raise_for_status()
        return response.text

    async def get_data(self, url: str) -> dict[str, Any]:
        """Fetch the full entity payload for a Spotify URL.

        Raises:
            DataExtractionError: If the URL or the embed page can't be understood
            httpx.HTTPError: If the embed page request fails
        """
        html = await self.fetch_page(self.embed_url(url))
        data = parse_embed_data(html)
        logger.debug("Spotify embed data for %s: type=%s", url, data.get("type"))
        return data

    async def get_preview(self, url: str) -> SpotifyPreview:
        """Fetch the flat preview record for a Spotify URL."""
        return build_preview(await self.get_data(url))

    async def get_tracks(self, url: str) -> list[dict[str, Any]]:
        """Fetch the (normalized) track list of a Spotify URL."""
        return extract_tracks(await self.get_data(url))


class SpotifyUrlInfoPool:
    """Lazily-created process-wide SpotifyUrlInfo instance.

    Hey future me - same pattern as HttpClientPool: the asyncio.Lock makes concurrent
    first callers WAIT for the one initialization instead of racing to build duplicates.
    """

    _instance: ClassVar[SpotifyUrlInfo | None] = None
    _lock: ClassVar[asyncio.Lock | None] = None

    @classmethod
    def _ensure_lock(cls) -> asyncio.Lock:
        if cls._lock is None:
            cls._lock = asyncio.Lock()
        return cls._lock

    @classmethod
    async def get_instance(cls, settings: SpotifySettings | None = None) -> SpotifyUrlInfo:
        """Get (and on first call create) the shared extractor."""
        async with cls._ensure_lock():
            if cls._instance is None:
                cls._instance = SpotifyUrlInfo(settings or SpotifySettings())
                logger.info("Spotify data extractor initialized")
            return cls._instance

    @classmethod
    async def reset(cls) -> None:
        """Drop the shared instance (shutdown/tests)."""
        async with cls._ensure_lock():
            cls._instance = None
