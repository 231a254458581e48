"""Secondary scrapes on Spotify's public pages.

The embed payload of a track doesn't name its album, and the album payload has no release
date. Both live in the regular open.spotify.com page:
- track pages link their album (https://open.spotify.com/album/<id>)
- album pages embed a JSON-LD block with `datePublished`

Failures here are NEVER fatal - SecondaryScrapeFailure is raised so the enrichment strategy
can leave the field empty and carry on.
"""

import json
import logging
import re

from tunebridge.domain.exceptions import SecondaryScrapeFailure
from tunebridge.domain.ports import ISpotifyDataSource

logger = logging.getLogger(__name__)

ALBUM_URL_RE = re.compile(r"https://open\.spotify\.com/album/[a-zA-Z0-9]+")
JSON_LD_RE = re.compile(
    r'<script type="application/ld\+json">(.+?)</script>', re.DOTALL
)


def extract_album_url(html: str) -> str | None:
    """First album URL found in a page, or None."""
    match = ALBUM_URL_RE.search(html)
    return match.group(0) if match else None


def extract_date_published(html: str) -> str | None:
    """`datePublished` of the first JSON-LD block in a page.

    Returns:
        The date string, or None if there is no JSON-LD block or no date in it

    Raises:
        SecondaryScrapeFailure: If the JSON-LD block isn't valid JSON
    """
    match = JSON_LD_RE.search(html)
    if not match:
        return None
    try:
        data = json.loads(match.group(1))
    except (ValueError, RecursionError) as e:
        raise SecondaryScrapeFailure(f"Malformed JSON-LD block: {e}") from e
    if not isinstance(data, dict):
        return None
    date_published = data.get("datePublished")
    return str(date_published) if date_published else None


class SpotifyPageScraper:
    """Runs the regex scrapes against pages fetched through the data source."""

    def __init__(self, data_source: ISpotifyDataSource) -> None:
        self._data_source = data_source

    async def _fetch(self, url: str) -> str:
        try:
            return await self._data_source.fetch_page(url)
        except Exception as e:
            raise SecondaryScrapeFailure(f"Failed to fetch {url}: {e}") from e

    async def find_album_url(self, track_url: str) -> str | None:
        """Album URL linked from a track page.

        Raises:
            SecondaryScrapeFailure: If the page can't be fetched
        """
        album_url = extract_album_url(await self._fetch(track_url))
        logger.debug("Album link on %s: %s", track_url, album_url)
        return album_url

    async def find_release_date(self, url: str) -> str | None:
        """JSON-LD release date of a page.

        Raises:
            SecondaryScrapeFailure: If the page can't be fetched or its JSON-LD is broken
        """
        return extract_date_published(await self._fetch(url))
