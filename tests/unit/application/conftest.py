"""Fixtures for application-layer tests."""

import pytest
from fakes import (
    ALBUM_DATA,
    ALBUM_PAGE,
    ALBUM_URL,
    TRACK_DATA,
    TRACK_PAGE,
    TRACK_URL,
    FakeSpotifyDataSource,
)


@pytest.fixture
def track_data_source() -> FakeSpotifyDataSource:
    """Spotify fake that serves the full track → album chain."""
    return FakeSpotifyDataSource(
        data={TRACK_URL: TRACK_DATA, ALBUM_URL: ALBUM_DATA},
        pages={TRACK_URL: TRACK_PAGE, ALBUM_URL: ALBUM_PAGE},
    )
