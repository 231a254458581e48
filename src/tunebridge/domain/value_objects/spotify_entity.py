"""Spotify embed payload variants.

Hey future me - the "full data" payload from Spotify's embed page changes SHAPE with its
`type` field. Albums put the artist in `subtitle`, tracks put it in `artists[0].name`.
Albums have no usable release date inline (we scrape JSON-LD for that), tracks carry
`releaseDate.isoString`. Instead of probing optional fields all over the enrichment code,
parse_spotify_entity() picks the variant ONCE and each variant owns its extraction rules.

Anything that isn't an album is treated as a track - that's what the embed page gives us
for track URLs, and episodes/playlists degrade gracefully through the same candidate lists.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any

from tunebridge.domain.exceptions import DataExtractionError
from tunebridge.domain.value_objects.candidates import dig, first_non_empty


class SpotifyEntityType(str, Enum):
    """Entity types Spotify exposes through open/embed URLs."""

    ALBUM = "album"
    ARTIST = "artist"
    EPISODE = "episode"
    PLAYLIST = "playlist"
    SHOW = "show"
    TRACK = "track"

    @classmethod
    def from_string(cls, value: str) -> "SpotifyEntityType":
        """Parse a type string, raising DataExtractionError if unsupported."""
        try:
            return cls(value.lower())
        except ValueError as e:
            raise DataExtractionError(f"Unsupported Spotify entity type: {value}") from e


def _visual_identity_image(data: dict[str, Any]) -> str | None:
    # Background image from the visual identity block first, flat image field second.
    return first_non_empty(
        dig(data, "visualIdentity", "backgroundBase", "backgroundImageUrl"),
        dig(data, "image"),
    )


@dataclass(frozen=True)
class SpotifyAlbumEntity:
    """Album payload (`type == "album"`)."""

    data: dict[str, Any]

    @property
    def title(self) -> str | None:
        return first_non_empty(dig(self.data, "name"), dig(self.data, "title"))

    @property
    def artist(self) -> str | None:
        return first_non_empty(
            dig(self.data, "subtitle"),
            dig(self.data, "artists", 0, "name"),
            dig(self.data, "artist"),
        )

    @property
    def image(self) -> str | None:
        return _visual_identity_image(self.data)


@dataclass(frozen=True)
class SpotifyTrackEntity:
    """Track payload (every non-album type)."""

    data: dict[str, Any]

    @property
    def title(self) -> str | None:
        return first_non_empty(
            dig(self.data, "name"),
            dig(self.data, "title"),
            dig(self.data, "track"),
        )

    @property
    def artist(self) -> str | None:
        return first_non_empty(
            dig(self.data, "artists", 0, "name"),
            dig(self.data, "artist"),
            dig(self.data, "subtitle"),
        )

    @property
    def image(self) -> str | None:
        return _visual_identity_image(self.data)

    @property
    def release_date(self) -> str | None:
        return first_non_empty(dig(self.data, "releaseDate", "isoString"))


SpotifyEntity = SpotifyAlbumEntity | SpotifyTrackEntity


def parse_spotify_entity(data: Any) -> SpotifyEntity:
    """Pick the payload variant from the `type` discriminator.

    Raises:
        DataExtractionError: If the payload isn't a JSON object
    """
    if not isinstance(data, dict):
        raise DataExtractionError(
            f"Expected Spotify entity object, got {type(data).__name__}"
        )
    if data.get("type") == SpotifyEntityType.ALBUM.value:
        return SpotifyAlbumEntity(data)
    return SpotifyTrackEntity(data)


@dataclass(frozen=True)
class SpotifyPreview:
    """Flat preview record for any Spotify URL."""

    title: str | None
    type: str | None
    track: str | None
    artist: str | None
    image: str | None
    audio: str | None
    link: str | None
    embed: str | None
    date: str | None
    description: str | None
