"""Tests for the music metadata endpoint.

The use case is swapped out through dependency_overrides, so these only check the HTTP
surface: query validation, camelCase serialization and error mapping.
"""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from tunebridge.api.dependencies import get_music_metadata_use_case
from tunebridge.domain.dtos import MusicMetadata, PlatformLink
from tunebridge.domain.exceptions import InvalidUrlError, ResolutionError
from tunebridge.main import create_app

TRACK_URL = "https://open.spotify.com/track/4cOdK2wGLETKBW3PvgPWqT"

METADATA = MusicMetadata(
    title="Never Gonna Give You Up",
    artist="Rick Astley",
    album="Whenever You Need Somebody",
    release_date="11/12/1987",
    image="https://i.scdn.co/image/track",
    platform_links=(
        PlatformLink("spotify", TRACK_URL),
        PlatformLink("youtube", "https://www.youtube.com/watch?v=dQw4w9WgXcQ"),
    ),
    universal_link="https://song.link/s/4cOdK2wGLETKBW3PvgPWqT",
)


@pytest.fixture
def use_case(mocker):
    use_case = mocker.Mock()
    use_case.execute = mocker.AsyncMock(return_value=METADATA)
    return use_case


@pytest.fixture
def app(use_case) -> FastAPI:
    app = create_app()
    app.dependency_overrides[get_music_metadata_use_case] = lambda: use_case
    return app


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    return TestClient(app)


class TestGetMetadata:
    def test_success_camel_case_body(self, client: TestClient, use_case) -> None:
        response = client.get("/music/getMetadata", params={"url": TRACK_URL})

        assert response.status_code == 200
        assert response.json() == {
            "title": "Never Gonna Give You Up",
            "artist": "Rick Astley",
            "album": "Whenever You Need Somebody",
            "releaseDate": "11/12/1987",
            "genres": None,
            "image": "https://i.scdn.co/image/track",
            "platformLinks": [
                {"platform": "spotify", "url": TRACK_URL},
                {
                    "platform": "youtube",
                    "url": "https://www.youtube.com/watch?v=dQw4w9WgXcQ",
                },
            ],
            "universalLink": "https://song.link/s/4cOdK2wGLETKBW3PvgPWqT",
        }
        request = use_case.execute.await_args[0][0]
        assert request.url == TRACK_URL

    def test_missing_url(self, client: TestClient, use_case) -> None:
        response = client.get("/music/getMetadata")

        assert response.status_code == 422
        assert response.json()["detail"][0]["loc"] == ["query", "url"]
        use_case.execute.assert_not_awaited()

    def test_invalid_url(self, client: TestClient, use_case) -> None:
        use_case.execute.side_effect = InvalidUrlError("not-a-url")

        response = client.get("/music/getMetadata", params={"url": "not-a-url"})

        assert response.status_code == 422
        assert response.json() == {"detail": "Invalid URL: 'not-a-url'"}

    def test_resolution_error(self, client: TestClient, use_case) -> None:
        use_case.execute.side_effect = ResolutionError(
            "Failed to fetch links from Odesli: Not Found", status_code=404
        )

        response = client.get("/music/getMetadata", params={"url": TRACK_URL})

        assert response.status_code == 400
        assert response.json() == {
            "detail": "Failed to fetch links from Odesli: Not Found"
        }

    def test_correlation_id_header(self, client: TestClient) -> None:
        response = client.get(
            "/music/getMetadata",
            params={"url": TRACK_URL},
            headers={"X-Correlation-ID": "req-42"},
        )

        assert response.headers["X-Correlation-ID"] == "req-42"
