"""API schemas for music metadata."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from tunebridge.domain.dtos import MusicMetadata


class CamelModel(BaseModel):
    """Base model serialized with camelCase keys (releaseDate, platformLinks, ...)."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PlatformLinkSchema(CamelModel):
    """A link to the entity on one platform."""

    platform: str = Field(..., examples=["spotify"])
    url: str = Field(
        ..., examples=["https://open.spotify.com/track/4cOdK2wGLETKBW3PvgPWqT"]
    )


class MusicMetadataResponse(CamelModel):
    """Response schema for GET /music/getMetadata."""

    title: str = Field(..., examples=["Never Gonna Give You Up"])
    artist: str = Field(..., examples=["Rick Astley"])
    album: str = Field(
        "", description="Album name, empty when unknown", examples=["Whenever You Need Somebody"]
    )
    release_date: str | None = Field(
        None, description="Release date (MM/DD/YYYY with the data strategy)", examples=["11/12/1987"]
    )
    genres: list[str] | None = Field(
        None, description="Always null: track-level genres are not available"
    )
    image: str = Field(..., examples=["https://i.scdn.co/image/..."])
    platform_links: list[PlatformLinkSchema] = Field(default_factory=list)
    universal_link: str = Field(..., examples=["https://song.link/s/4cOdK2wGLETKBW3PvgPWqT"])

    @classmethod
    def from_metadata(cls, metadata: MusicMetadata) -> "MusicMetadataResponse":
        """Build the response from the use case result."""
        return cls(
            title=metadata.title,
            artist=metadata.artist,
            album=metadata.album,
            release_date=metadata.release_date,
            genres=metadata.genres,
            image=metadata.image,
            platform_links=[
                PlatformLinkSchema(platform=link.platform, url=link.url)
                for link in metadata.platform_links
            ],
            universal_link=metadata.universal_link,
        )
