"""Metadata enrichment strategies.

Two interchangeable strategies implement IEnrichmentStrategy:
- "data"    → FullDataEnrichmentStrategy (type-aware, secondary scrapes, MM/DD/YYYY dates)
- "preview" → PreviewEnrichmentStrategy  (single flat fetch)

SPOTIFY_ENRICHMENT_STRATEGY picks one per deployment.
"""

from tunebridge.application.services.enrichment.enricher import MetadataEnricher
from tunebridge.application.services.enrichment.fallback import fallback_metadata
from tunebridge.application.services.enrichment.full_data import (
    FullDataEnrichmentStrategy,
)
from tunebridge.application.services.enrichment.preview import (
    PreviewEnrichmentStrategy,
)
from tunebridge.config import SpotifySettings
from tunebridge.domain.exceptions import ConfigurationError
from tunebridge.domain.ports import IEnrichmentStrategy, ISpotifyDataSource

def build_enrichment_strategy(
    name: str, data_source: ISpotifyDataSource
) -> IEnrichmentStrategy:
    """Create the strategy registered under name.

    Raises:
        ConfigurationError: If name is not a known strategy
    """
    if name == FullDataEnrichmentStrategy.name:
        return FullDataEnrichmentStrategy(data_source)
    if name == PreviewEnrichmentStrategy.name:
        return PreviewEnrichmentStrategy(data_source)
    raise ConfigurationError(f"Unknown enrichment strategy: {name!r}")


def build_metadata_enricher(
    settings: SpotifySettings, data_source: ISpotifyDataSource
) -> MetadataEnricher:
    """Create the enricher configured by settings."""
    return MetadataEnricher(
        strategy=build_enrichment_strategy(settings.enrichment_strategy, data_source),
        authoritative_platform=settings.authoritative_platform,
    )


__all__ = [
    "FullDataEnrichmentStrategy",
    "MetadataEnricher",
    "PreviewEnrichmentStrategy",
    "build_enrichment_strategy",
    "build_metadata_enricher",
    "fallback_metadata",
]
