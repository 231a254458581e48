"""Application services."""

from tunebridge.application.services.enrichment import (
    MetadataEnricher,
    build_metadata_enricher,
)
from tunebridge.application.services.link_resolver import LinkResolverService

__all__ = [
    "LinkResolverService",
    "MetadataEnricher",
    "build_metadata_enricher",
]
