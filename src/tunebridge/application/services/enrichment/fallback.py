"""Fallback metadata from the link-resolution service's primary entity."""

from tunebridge.domain.dtos import EnrichedMetadata, PrimaryEntity

FALLBACK_SOURCE = "fallback"


def fallback_metadata(entity: PrimaryEntity) -> EnrichedMetadata:
    """Metadata built solely from the resolver's primary entity.

    Odesli knows no album and no release date, so those stay "" and None.
    """
    return EnrichedMetadata(
        title=entity.title,
        artist=entity.artist,
        image=entity.thumbnail_url,
        album="",
        release_date=None,
        source=FALLBACK_SOURCE,
    )
