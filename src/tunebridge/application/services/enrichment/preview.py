"""Lightweight Spotify enrichment from the flat preview record."""

import logging

import httpx

from tunebridge.domain.dtos import EnrichedMetadata
from tunebridge.domain.exceptions import DataExtractionError, EnrichmentFailure
from tunebridge.domain.ports import IEnrichmentStrategy, ISpotifyDataSource
from tunebridge.domain.value_objects import first_non_empty

logger = logging.getLogger(__name__)


class PreviewEnrichmentStrategy(IEnrichmentStrategy):
    """Enrichment via get_preview(): one call, no type awareness.

    For a collection the preview's `title` is the collection name and `track` is its first
    track, so a differing title means "this is the album". The release date is passed
    through as Spotify sends it.
    """

    name = "preview"
    source = "spotify-preview"

    def __init__(self, data_source: ISpotifyDataSource) -> None:
        self._data_source = data_source

    async def enrich(self, spotify_url: str) -> EnrichedMetadata:
        """Build metadata from the preview of spotify_url.

        Raises:
            EnrichmentFailure: If the preview can't be fetched or lacks title/artist/image
        """
        try:
            preview = await self._data_source.get_preview(spotify_url)
        except (httpx.HTTPError, DataExtractionError) as e:
            raise EnrichmentFailure(
                f"Spotify preview fetch failed for {spotify_url}: {e}"
            ) from e

        title = first_non_empty(preview.track, preview.title)
        artist = first_non_empty(preview.artist)
        image = first_non_empty(preview.image)
        if not (title and artist and image):
            raise EnrichmentFailure(f"Spotify preview for {spotify_url} is incomplete")

        album = ""
        if preview.title != preview.track:
            album = preview.title or ""

        return EnrichedMetadata(
            title=title,
            artist=artist,
            image=image,
            album=album,
            release_date=first_non_empty(preview.date),
            source=self.source,
        )
