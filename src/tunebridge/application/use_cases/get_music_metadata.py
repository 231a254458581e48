"""Get music metadata use case."""

import logging
from dataclasses import dataclass

from tunebridge.application.services.enrichment import MetadataEnricher
from tunebridge.application.services.link_resolver import LinkResolverService
from tunebridge.application.use_cases import UseCase
from tunebridge.domain.dtos import MusicMetadata

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GetMusicMetadataRequest:
    """Request to resolve one music URL."""

    url: str


class GetMusicMetadataUseCase(UseCase[GetMusicMetadataRequest, MusicMetadata]):
    """Use case for resolving a music URL into metadata plus platform links.

    This use case:
    1. Resolves cross-platform links via the link-resolution service (fatal on failure)
    2. Enriches metadata from the authoritative platform (falls back silently)
    3. Merges both into one MusicMetadata record
    """

    # Hey future me: strictly sequential on purpose - enrichment needs the Spotify URL that
    # resolution produces. Same input + same upstream data → identical output, nothing here
    # depends on time or randomness.
    def __init__(
        self,
        link_resolver: LinkResolverService,
        enricher: MetadataEnricher,
    ) -> None:
        """Initialize the use case with required dependencies.

        Args:
            link_resolver: Service resolving cross-platform links
            enricher: Metadata enricher with its configured strategy
        """
        self._link_resolver = link_resolver
        self._enricher = enricher

    async def execute(self, request: GetMusicMetadataRequest) -> MusicMetadata:
        """Resolve and enrich request.url.

        Raises:
            InvalidUrlError: If the URL is not an absolute http(s) URL
            ResolutionError: If link resolution fails
        """
        resolved = await self._link_resolver.resolve_links(request.url)
        metadata = await self._enricher.enrich(resolved)

        logger.info(
            "Resolved %s → %r by %r (source=%s, %d platforms)",
            request.url,
            metadata.title,
            metadata.artist,
            metadata.source,
            len(resolved.platform_links),
        )

        return MusicMetadata(
            title=metadata.title,
            artist=metadata.artist,
            album=metadata.album,
            release_date=metadata.release_date,
            image=metadata.image,
            platform_links=resolved.platform_links,
            universal_link=resolved.canonical_link,
            genres=None,
        )
