"""Fakes and payloads shared by application-layer and API tests.

Hey future me - the fakes answer from dicts keyed by URL. A value that is an exception
gets RAISED instead of returned, so a test can make exactly one hop of the enrichment
chain fail. Every call is recorded in `calls` to check which hops ran.
"""

from typing import Any

from tunebridge.domain.ports import ILinkResolutionClient, ISpotifyDataSource
from tunebridge.domain.value_objects import SpotifyPreview

TRACK_URL = "https://open.spotify.com/track/4cOdK2wGLETKBW3PvgPWqT"
ALBUM_URL = "https://open.spotify.com/album/6N9PS4QXF1D0OWPk0Sxtb4"
APPLE_URL = "https://music.apple.com/us/album/never-gonna-give-you-up/1558533900?i=1558534271"


def _answer(table: dict[str, Any], url: str) -> Any:
    if url not in table:
        raise AssertionError(f"Unexpected fetch of {url}")
    value = table[url]
    if isinstance(value, BaseException):
        raise value
    return value


class FakeSpotifyDataSource(ISpotifyDataSource):
    def __init__(
        self,
        data: dict[str, Any] | None = None,
        previews: dict[str, Any] | None = None,
        pages: dict[str, Any] | None = None,
    ) -> None:
        self.data = data or {}
        self.previews = previews or {}
        self.pages = pages or {}
        self.calls: list[tuple[str, str]] = []

    async def get_data(self, url: str) -> dict[str, Any]:
        self.calls.append(("get_data", url))
        return _answer(self.data, url)

    async def get_preview(self, url: str) -> SpotifyPreview:
        self.calls.append(("get_preview", url))
        return _answer(self.previews, url)

    async def fetch_page(self, url: str) -> str:
        self.calls.append(("fetch_page", url))
        return _answer(self.pages, url)


class FakeLinkResolutionClient(ILinkResolutionClient):
    def __init__(self, responses: dict[str, Any]) -> None:
        self.responses = responses
        self.calls: list[str] = []

    async def get_links(self, url: str) -> dict[str, Any]:
        self.calls.append(url)
        return _answer(self.responses, url)


def odesli_payload(
    page_url: str = "https://song.link/s/4cOdK2wGLETKBW3PvgPWqT",
    spotify_url: str | None = TRACK_URL,
    entity_id: str = "SPOTIFY_SONG::4cOdK2wGLETKBW3PvgPWqT",
) -> dict[str, Any]:
    """Trimmed Odesli /links body for Never Gonna Give You Up."""
    links: dict[str, Any] = {}
    if spotify_url is not None:
        links["spotify"] = {"url": spotify_url, "entityUniqueId": entity_id}
    links["appleMusic"] = {"url": APPLE_URL, "entityUniqueId": "ITUNES_SONG::1558534271"}
    links["youtube"] = {
        "url": "https://www.youtube.com/watch?v=dQw4w9WgXcQ",
        "entityUniqueId": "YOUTUBE_VIDEO::dQw4w9WgXcQ",
    }
    return {
        "entityUniqueId": entity_id,
        "pageUrl": page_url,
        "linksByPlatform": links,
        "entitiesByUniqueId": {
            entity_id: {
                "title": "Never Gonna Give You Up (Odesli)",
                "artistName": "Rick Astley (Odesli)",
                "thumbnailUrl": "https://i.scdn.co/image/odesli-thumb",
            }
        },
    }


TRACK_DATA: dict[str, Any] = {
    "type": "track",
    "name": "Never Gonna Give You Up",
    "artists": [{"name": "Rick Astley"}],
    "releaseDate": {"isoString": "1987-11-12T00:00:00Z"},
    "visualIdentity": {
        "backgroundBase": {"backgroundImageUrl": "https://i.scdn.co/image/track"}
    },
}

ALBUM_DATA: dict[str, Any] = {
    "type": "album",
    "name": "Whenever You Need Somebody",
    "subtitle": "Rick Astley",
    "visualIdentity": {
        "backgroundBase": {"backgroundImageUrl": "https://i.scdn.co/image/album"}
    },
}

TRACK_PAGE = f'<html><meta name="music:album" content="{ALBUM_URL}"></html>'
ALBUM_PAGE = (
    '<html><script type="application/ld+json">'
    '{"@type": "MusicAlbum", "datePublished": "1987-11-12"}'
    "</script></html>"
)
