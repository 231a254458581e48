"""Tests for API dependency wiring."""

from tunebridge.api.dependencies import (
    get_link_resolver,
    get_metadata_enricher,
    get_music_metadata_use_case,
    get_spotify_data_source,
)
from tunebridge.application.services.link_resolver import LinkResolverService
from tunebridge.application.use_cases import GetMusicMetadataUseCase
from tunebridge.config import Settings, SpotifySettings
from tunebridge.infrastructure.integrations.spotify_url_info import SpotifyUrlInfo


class TestDependencies:
    def test_link_resolver(self) -> None:
        assert isinstance(get_link_resolver(Settings()), LinkResolverService)

    async def test_spotify_data_source_is_shared(self) -> None:
        first = await get_spotify_data_source(Settings())
        second = await get_spotify_data_source(Settings())

        assert isinstance(first, SpotifyUrlInfo)
        assert first is second

    async def test_enricher_uses_configured_strategy(self) -> None:
        settings = Settings(spotify=SpotifySettings(enrichment_strategy="preview"))
        data_source = await get_spotify_data_source(settings)

        enricher = get_metadata_enricher(settings, data_source)

        assert enricher.strategy.name == "preview"

    async def test_use_case(self) -> None:
        settings = Settings()
        enricher = get_metadata_enricher(
            settings, await get_spotify_data_source(settings)
        )

        use_case = get_music_metadata_use_case(get_link_resolver(settings), enricher)

        assert isinstance(use_case, GetMusicMetadataUseCase)
