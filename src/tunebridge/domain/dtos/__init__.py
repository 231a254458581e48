"""Data Transfer Objects passed between the resolver, the enricher and the API.

Flow: Odesli response → ResolvedLinks → (Spotify) → EnrichedMetadata → MusicMetadata

Hey future me - everything here is a dumb data carrier. ResolvedLinks is frozen because
it's built ONCE per request and then only read. EnrichedMetadata is assembled by the
strategies and thrown away after the response is serialized.
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class PlatformLink:
    """A link to the same entity on one streaming platform."""

    platform: str  # Odesli platform key: "spotify", "appleMusic", "youtube", ...
    url: str


@dataclass(frozen=True)
class PrimaryEntity:
    """Minimal entity record returned by the link-resolution service."""

    title: str
    artist: str
    thumbnail_url: str


@dataclass(frozen=True)
class ResolvedLinks:
    """Output of the link resolver."""

    canonical_link: str
    platform_links: tuple[PlatformLink, ...]
    primary_entity: PrimaryEntity

    def link_for(self, platform: str) -> str | None:
        """Return the URL for a platform, or None if Odesli didn't list it."""
        for link in self.platform_links:
            if link.platform == platform:
                return link.url
        return None


@dataclass
class EnrichedMetadata:
    """Metadata assembled by an enrichment strategy (or the fallback)."""

    title: str
    artist: str
    image: str
    album: str = ""
    release_date: str | None = None
    # Which path produced this record ("spotify-data", "spotify-preview", "fallback").
    # Only used for logging - never serialized!
    source: str = field(default="fallback", compare=False)


@dataclass(frozen=True)
class MusicMetadata:
    """Final merged result for one resolved URL."""

    title: str
    artist: str
    album: str
    release_date: str | None
    image: str
    platform_links: tuple[PlatformLink, ...]
    universal_link: str
    # Spotify exposes genres only on artists, never on tracks/albums.
    genres: list[str] | None = None


__all__ = [
    "EnrichedMetadata",
    "MusicMetadata",
    "PlatformLink",
    "PrimaryEntity",
    "ResolvedLinks",
]
