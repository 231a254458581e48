"""Link resolution: input URL → ResolvedLinks via the link-resolution service."""

import logging
from typing import Any
from urllib.parse import urlparse

from tunebridge.domain.dtos import PlatformLink, PrimaryEntity, ResolvedLinks
from tunebridge.domain.exceptions import InvalidUrlError, ResolutionError
from tunebridge.domain.ports import ILinkResolutionClient

logger = logging.getLogger(__name__)


def validate_input_url(url: str) -> str:
    """Check that url is an absolute http(s) URL with a host.

    Raises:
        InvalidUrlError: If it isn't
    """
    candidate = url.strip()
    parsed = urlparse(candidate)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise InvalidUrlError(url)
    return candidate


class LinkResolverService:
    """Resolves a streaming URL into cross-platform links plus a primary entity.

    Hey future me - this is the HARD dependency of the pipeline. Whatever goes wrong here
    becomes ResolutionError and aborts the request: without Odesli's entity we'd have nothing
    to fall back to if Spotify enrichment fails later.
    """

    def __init__(self, client: ILinkResolutionClient) -> None:
        self._client = client

    async def resolve_links(self, url: str) -> ResolvedLinks:
        """Resolve a URL through the link-resolution service.

        Args:
            url: Track or album URL on any supported platform

        Returns:
            ResolvedLinks for the URL

        Raises:
            InvalidUrlError: If url isn't an absolute http(s) URL
            ResolutionError: If the service fails or its payload is unusable
        """
        data = await self._client.get_links(validate_input_url(url))

        canonical_link = data.get("pageUrl")
        if not isinstance(canonical_link, str) or not canonical_link:
            raise ResolutionError("Odesli response is missing pageUrl")

        resolved = ResolvedLinks(
            canonical_link=canonical_link,
            platform_links=self._extract_platform_links(data),
            primary_entity=self._get_primary_entity(data),
        )
        logger.debug(
            "Resolved %s to %d platform links", url, len(resolved.platform_links)
        )
        return resolved

    @staticmethod
    def _extract_platform_links(data: dict[str, Any]) -> tuple[PlatformLink, ...]:
        # dicts keep Odesli's JSON order - that order IS the response order, don't sort!
        links_by_platform = data.get("linksByPlatform") or {}
        if not isinstance(links_by_platform, dict):
            raise ResolutionError("Odesli response has malformed linksByPlatform")

        links = []
        for platform, link in links_by_platform.items():
            if isinstance(link, dict) and link.get("url"):
                links.append(PlatformLink(platform=platform, url=str(link["url"])))
        return tuple(links)

    @staticmethod
    def _get_primary_entity(data: dict[str, Any]) -> PrimaryEntity:
        entity_id = data.get("entityUniqueId")
        entities = data.get("entitiesByUniqueId") or {}
        entity = None
        if isinstance(entities, dict) and isinstance(entity_id, str):
            entity = entities.get(entity_id)

        if not isinstance(entity, dict):
            raise ResolutionError("Could not find entity data in Odesli response")

        return PrimaryEntity(
            title=entity.get("title") or "",
            artist=entity.get("artistName") or "",
            thumbnail_url=entity.get("thumbnailUrl") or "",
        )
