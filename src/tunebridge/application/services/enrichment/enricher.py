"""Metadata enricher: strategy + fallback."""

import logging

from tunebridge.application.services.enrichment.fallback import fallback_metadata
from tunebridge.domain.dtos import EnrichedMetadata, ResolvedLinks
from tunebridge.domain.exceptions import EnrichmentFailure
from tunebridge.domain.ports import IEnrichmentStrategy

logger = logging.getLogger(__name__)


class MetadataEnricher:
    """Enriches resolved links with authoritative-platform metadata.

    Hey future me - enrich() NEVER raises. Availability beats completeness here: if Spotify
    is down, changed its page format, or the URL has no Spotify equivalent at all, the caller
    still gets Odesli's title/artist/thumbnail. Check the WARNING logs to notice when the
    fallback starts firing a lot.
    """

    def __init__(
        self,
        strategy: IEnrichmentStrategy,
        authoritative_platform: str = "spotify",
    ) -> None:
        self.strategy = strategy
        self.authoritative_platform = authoritative_platform

    async def enrich(self, resolved_links: ResolvedLinks) -> EnrichedMetadata:
        """Best available metadata for resolved links."""
        url = resolved_links.link_for(self.authoritative_platform)
        if url is None:
            logger.debug(
                "No %s link for %s, using resolver metadata",
                self.authoritative_platform,
                resolved_links.canonical_link,
            )
            return fallback_metadata(resolved_links.primary_entity)

        try:
            metadata = await self.strategy.enrich(url)
        except EnrichmentFailure as e:
            logger.warning(
                "Enrichment failed for %s, using resolver metadata: %s",
                url,
                e.message,
                extra={"strategy": self.strategy.name, "url": url},
            )
            return fallback_metadata(resolved_links.primary_entity)
        except Exception:
            # Unexpected payload shapes end up here - still not the caller's problem
            logger.exception(
                "Unexpected enrichment error for %s, using resolver metadata",
                url,
                extra={"strategy": self.strategy.name, "url": url},
            )
            return fallback_metadata(resolved_links.primary_entity)

        logger.debug("Enriched %s via %s", url, metadata.source)
        return metadata
