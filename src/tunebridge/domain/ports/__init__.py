"""Domain ports (interfaces) for dependency inversion."""

from abc import ABC, abstractmethod
from typing import Any

from tunebridge.domain.dtos import EnrichedMetadata
from tunebridge.domain.value_objects import SpotifyPreview


# Hey future me, ILinkResolutionClient is a PORT! The Odesli HTTP client implements it, tests
# swap in a fake. It returns the RAW JSON body - turning that into ResolvedLinks is the
# resolver service's job, so the client stays a thin transport.
class ILinkResolutionClient(ABC):
    """Interface for the cross-platform link-resolution service."""

    @abstractmethod
    async def get_links(self, url: str) -> dict[str, Any]:
        """Fetch the raw link-resolution payload for a URL.

        Raises:
            ResolutionError: If the service fails or answers with non-success
        """
        pass


class ISpotifyDataSource(ABC):
    """Interface for the Spotify data-extraction capability."""

    @abstractmethod
    async def get_data(self, url: str) -> dict[str, Any]:
        """Fetch the full, type-discriminated entity payload for a Spotify URL."""
        pass

    @abstractmethod
    async def get_preview(self, url: str) -> SpotifyPreview:
        """Fetch the lightweight flat preview record for a Spotify URL."""
        pass

    @abstractmethod
    async def fetch_page(self, url: str) -> str:
        """Fetch the raw document body of a URL for secondary scraping."""
        pass


# Listen up, both enrichment strategies ("data" and "preview") implement this. They RAISE
# EnrichmentFailure when they can't produce complete metadata - the enricher is the one that
# catches it and falls back. Keep it that way, strategies must not fall back on their own!
class IEnrichmentStrategy(ABC):
    """Interface for a metadata enrichment strategy."""

    name: str

    @abstractmethod
    async def enrich(self, spotify_url: str) -> EnrichedMetadata:
        """Build metadata for a Spotify URL.

        Raises:
            EnrichmentFailure: If the primary fetch fails or required fields are missing
        """
        pass


__all__ = [
    "IEnrichmentStrategy",
    "ILinkResolutionClient",
    "ISpotifyDataSource",
]
