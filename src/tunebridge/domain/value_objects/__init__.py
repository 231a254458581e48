"""Domain value objects."""

from tunebridge.domain.value_objects.candidates import dig, first_non_empty
from tunebridge.domain.value_objects.release_date import (
    format_release_date,
    parse_release_date,
)
from tunebridge.domain.value_objects.spotify_entity import (
    SpotifyAlbumEntity,
    SpotifyEntity,
    SpotifyEntityType,
    SpotifyPreview,
    SpotifyTrackEntity,
    parse_spotify_entity,
)

__all__ = [
    "SpotifyAlbumEntity",
    "SpotifyEntity",
    "SpotifyEntityType",
    "SpotifyPreview",
    "SpotifyTrackEntity",
    "dig",
    "first_non_empty",
    "format_release_date",
    "parse_release_date",
    "parse_spotify_entity",
]
