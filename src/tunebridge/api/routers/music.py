"""Music metadata endpoints."""

import logging

from fastapi import APIRouter, Depends, Query

from tunebridge.api.dependencies import get_music_metadata_use_case
from tunebridge.api.schemas import MusicMetadataResponse
from tunebridge.application.use_cases import (
    GetMusicMetadataRequest,
    GetMusicMetadataUseCase,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/music", tags=["Music"])


@router.get(
    "/getMetadata",
    response_model=MusicMetadataResponse,
    summary="Get music metadata from a Spotify or Apple Music URL",
    description=(
        "Fetches cross-platform links via Odesli and scrapes metadata from Spotify"
    ),
    responses={
        400: {"description": "Unable to resolve the URL"},
        422: {"description": "Missing or invalid URL"},
    },
)
async def get_metadata(
    url: str = Query(
        ...,
        description="A Spotify or Apple Music URL",
        examples=["https://open.spotify.com/track/4cOdK2wGLETKBW3PvgPWqT"],
    ),
    use_case: GetMusicMetadataUseCase = Depends(get_music_metadata_use_case),
) -> MusicMetadataResponse:
    """Resolve a music URL into metadata and cross-platform links.

    Errors:
        400: Odesli could not resolve the URL
        422: url is missing or not an absolute http(s) URL
    """
    metadata = await use_case.execute(GetMusicMetadataRequest(url=url))
    return MusicMetadataResponse.from_metadata(metadata)
