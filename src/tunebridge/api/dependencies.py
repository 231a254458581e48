"""Dependency injection for API endpoints."""

from fastapi import Depends

from tunebridge.application.services.enrichment import (
    MetadataEnricher,
    build_metadata_enricher,
)
from tunebridge.application.services.link_resolver import LinkResolverService
from tunebridge.application.use_cases import GetMusicMetadataUseCase
from tunebridge.config import Settings, get_settings
from tunebridge.domain.ports import ISpotifyDataSource
from tunebridge.infrastructure.integrations.odesli_client import OdesliClient
from tunebridge.infrastructure.integrations.spotify_url_info import SpotifyUrlInfoPool


# Hey future me, these are cheap per-request objects wrapped around PROCESS-WIDE resources:
# OdesliClient and the enricher are rebuilt per request (a few attribute assignments), but
# they all share the single HttpClientPool client, and the Spotify extractor comes from its
# own lazy pool. Tests override get_music_metadata_use_case to skip all of this.
def get_link_resolver(
    settings: Settings = Depends(get_settings),
) -> LinkResolverService:
    """Get link resolver backed by the Odesli client."""
    return LinkResolverService(OdesliClient(settings.odesli))


async def get_spotify_data_source(
    settings: Settings = Depends(get_settings),
) -> ISpotifyDataSource:
    """Get the shared Spotify data extractor."""
    return await SpotifyUrlInfoPool.get_instance(settings.spotify)


def get_metadata_enricher(
    settings: Settings = Depends(get_settings),
    data_source: ISpotifyDataSource = Depends(get_spotify_data_source),
) -> MetadataEnricher:
    """Get metadata enricher with the configured strategy."""
    return build_metadata_enricher(settings.spotify, data_source)


def get_music_metadata_use_case(
    link_resolver: LinkResolverService = Depends(get_link_resolver),
    enricher: MetadataEnricher = Depends(get_metadata_enricher),
) -> GetMusicMetadataUseCase:
    """Get the music metadata use case."""
    return GetMusicMetadataUseCase(link_resolver=link_resolver, enricher=enricher)
