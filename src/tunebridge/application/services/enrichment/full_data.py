"""Type-aware Spotify enrichment from the full embed payload.

Hey future me - this is the "data" strategy, the rich one. Per request it makes up to THREE
sequential calls, each depending on the previous one:

  album URL:  get_data(album)  → album page (JSON-LD datePublished)
  track URL:  get_data(track)  → track page (find album link) → get_data(album) (album name)

Only the FIRST call is essential. If it fails we raise EnrichmentFailure and the enricher
falls back to Odesli. The secondary scrapes are best-effort: their failures just leave album
as "" or release date as None.
"""

import logging

import httpx

from tunebridge.domain.dtos import EnrichedMetadata
from tunebridge.domain.exceptions import (
    DataExtractionError,
    EnrichmentFailure,
    SecondaryScrapeFailure,
)
from tunebridge.domain.ports import IEnrichmentStrategy, ISpotifyDataSource
from tunebridge.domain.value_objects import (
    SpotifyAlbumEntity,
    SpotifyEntity,
    SpotifyTrackEntity,
    dig,
    first_non_empty,
    format_release_date,
    parse_spotify_entity,
)
from tunebridge.infrastructure.integrations.spotify_page_scraper import (
    SpotifyPageScraper,
)

logger = logging.getLogger(__name__)


def _required_fields(url: str, entity: SpotifyEntity) -> tuple[str, str, str]:
    """(title, artist, image) of an entity, all three non-empty."""
    title, artist, image = entity.title, entity.artist, entity.image
    if not (title and artist and image):
        missing = [
            name
            for name, value in (("title", title), ("artist", artist), ("image", image))
            if not value
        ]
        raise EnrichmentFailure(
            f"Spotify data for {url} is missing {', '.join(missing)}"
        )
    return title, artist, image


class FullDataEnrichmentStrategy(IEnrichmentStrategy):
    """Enrichment via get_data() with album/track specific rules."""

    name = "data"
    source = "spotify-data"

    def __init__(
        self,
        data_source: ISpotifyDataSource,
        scraper: SpotifyPageScraper | None = None,
    ) -> None:
        self._data_source = data_source
        self._scraper = scraper or SpotifyPageScraper(data_source)

    async def enrich(self, spotify_url: str) -> EnrichedMetadata:
        """Build metadata from the Spotify entity behind spotify_url.

        Raises:
            EnrichmentFailure: If the entity can't be fetched or lacks title/artist/image
        """
        entity = await self._fetch_entity(spotify_url)

        if isinstance(entity, SpotifyAlbumEntity):
            metadata = await self._enrich_album(spotify_url, entity)
        else:
            metadata = await self._enrich_track(spotify_url, entity)

        metadata.release_date = format_release_date(metadata.release_date)
        return metadata

    async def _fetch_entity(self, url: str) -> SpotifyEntity:
        try:
            return parse_spotify_entity(await self._data_source.get_data(url))
        except (httpx.HTTPError, DataExtractionError) as e:
            raise EnrichmentFailure(f"Spotify data fetch failed for {url}: {e}") from e

    async def _enrich_album(
        self, url: str, entity: SpotifyAlbumEntity
    ) -> EnrichedMetadata:
        title, artist, image = _required_fields(url, entity)

        return EnrichedMetadata(
            title=title,
            artist=artist,
            image=image,
            # An album's album is itself
            album=title,
            release_date=await self._scrape_release_date(url),
            source=self.source,
        )

    async def _enrich_track(
        self, url: str, entity: SpotifyTrackEntity
    ) -> EnrichedMetadata:
        title, artist, image = _required_fields(url, entity)

        return EnrichedMetadata(
            title=title,
            artist=artist,
            image=image,
            album=await self._lookup_album_name(url),
            release_date=entity.release_date,
            source=self.source,
        )

    async def _scrape_release_date(self, url: str) -> str | None:
        try:
            return await self._scraper.find_release_date(url)
        except SecondaryScrapeFailure as e:
            logger.debug("Release date scrape failed for %s: %s", url, e.message)
            return None

    async def _lookup_album_name(self, track_url: str) -> str:
        try:
            return await self._find_album_name(track_url)
        except SecondaryScrapeFailure as e:
            logger.debug("Album lookup failed for %s: %s", track_url, e.message)
            return ""

    async def _find_album_name(self, track_url: str) -> str:
        album_url = await self._scraper.find_album_url(track_url)
        if album_url is None:
            return ""

        try:
            album_data = await self._data_source.get_data(album_url)
        except Exception as e:
            raise SecondaryScrapeFailure(
                f"Album fetch failed for {album_url}: {e}"
            ) from e

        return first_non_empty(dig(album_data, "name"), dig(album_data, "title")) or ""
