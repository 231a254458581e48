"""Tests for the secondary Spotify page scrapes."""

import httpx
import pytest

from tunebridge.domain.exceptions import SecondaryScrapeFailure
from tunebridge.infrastructure.integrations.spotify_page_scraper import (
    SpotifyPageScraper,
    extract_album_url,
    extract_date_published,
)

TRACK_PAGE = """
<html><head>
<meta property="og:type" content="music.song">
<meta name="music:album" content="https://open.spotify.com/album/6N9PS4QXF1D0OWPk0Sxtb4">
</head><body></body></html>
"""

ALBUM_PAGE = """
<html><head>
<script type="application/ld+json">{"@type": "MusicAlbum", "name": "Whenever You Need Somebody", "datePublished": "1987-11-12"}</script>
</head></html>
"""


class TestExtractAlbumUrl:
    def test_finds_first_album_link(self) -> None:
        assert (
            extract_album_url(TRACK_PAGE)
            == "https://open.spotify.com/album/6N9PS4QXF1D0OWPk0Sxtb4"
        )

    def test_no_album_link(self) -> None:
        assert extract_album_url("<html></html>") is None


class TestExtractDatePublished:
    def test_date_published(self) -> None:
        assert extract_date_published(ALBUM_PAGE) == "1987-11-12"

    def test_no_json_ld_block(self) -> None:
        assert extract_date_published("<html></html>") is None

    def test_json_ld_without_date(self) -> None:
        html = '<script type="application/ld+json">{"@type": "MusicAlbum"}</script>'
        assert extract_date_published(html) is None

    def test_malformed_json_ld(self) -> None:
        html = '<script type="application/ld+json">{broken</script>'
        with pytest.raises(SecondaryScrapeFailure):
            extract_date_published(html)

    def test_deeply_nested_json_ld(self) -> None:
        nested = "[" * 100000 + "]" * 100000
        html = f'<script type="application/ld+json">{nested}</script>'
        with pytest.raises(SecondaryScrapeFailure):
            extract_date_published(html)


class TestSpotifyPageScraper:
    """Test scraping through the data source's fetch_page()."""

    async def test_find_album_url(self, mocker) -> None:
        data_source = mocker.Mock()
        data_source.fetch_page = mocker.AsyncMock(return_value=TRACK_PAGE)
        scraper = SpotifyPageScraper(data_source)

        album_url = await scraper.find_album_url("https://open.spotify.com/track/x")

        assert album_url == "https://open.spotify.com/album/6N9PS4QXF1D0OWPk0Sxtb4"
        data_source.fetch_page.assert_awaited_once_with("https://open.spotify.com/track/x")

    async def test_find_release_date(self, mocker) -> None:
        data_source = mocker.Mock()
        data_source.fetch_page = mocker.AsyncMock(return_value=ALBUM_PAGE)

        assert (
            await SpotifyPageScraper(data_source).find_release_date("https://x")
            == "1987-11-12"
        )

    async def test_fetch_error_becomes_secondary_failure(self, mocker) -> None:
        data_source = mocker.Mock()
        data_source.fetch_page = mocker.AsyncMock(
            side_effect=httpx.ConnectError("boom")
        )

        with pytest.raises(SecondaryScrapeFailure):
            await SpotifyPageScraper(data_source).find_album_url("https://x")

    async def test_any_fetch_error_becomes_secondary_failure(self, mocker) -> None:
        data_source = mocker.Mock()
        data_source.fetch_page = mocker.AsyncMock(side_effect=RuntimeError("boom"))

        with pytest.raises(SecondaryScrapeFailure):
            await SpotifyPageScraper(data_source).find_release_date("https://x")
