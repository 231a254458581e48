"""API request/response schemas."""

from tunebridge.api.schemas.music import MusicMetadataResponse, PlatformLinkSchema

__all__ = ["MusicMetadataResponse", "PlatformLinkSchema"]
