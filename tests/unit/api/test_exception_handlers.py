"""Tests for the global exception handlers."""

import pytest
from fastapi import FastAPI, HTTPException
from fastapi.testclient import TestClient

from tunebridge.api.exception_handlers import (
    _sanitize_validation_errors,
    register_exception_handlers,
)
from tunebridge.domain.exceptions import (
    ConfigurationError,
    DataExtractionError,
    ExternalServiceError,
    InvalidUrlError,
    ResolutionError,
)


@pytest.fixture
def client() -> TestClient:
    app = FastAPI()
    register_exception_handlers(app)

    errors = {
        "invalid": InvalidUrlError("x"),
        "resolution": ResolutionError("Odesli returned a malformed response"),
        "http": HTTPException(status_code=418, detail="teapot"),
    }

    @app.get("/raise/{name}")
    async def raise_error(name: str):
        raise errors[name]

    return TestClient(app)


class TestExceptionHandlers:
    @pytest.mark.parametrize(
        ("name", "status_code", "detail"),
        [
            ("invalid", 422, "Invalid URL: 'x'"),
            ("resolution", 400, "Odesli returned a malformed response"),
            ("http", 418, "teapot"),
        ],
    )
    def test_mapping(
        self, client: TestClient, name: str, status_code: int, detail: str
    ) -> None:
        response = client.get(f"/raise/{name}")

        assert response.status_code == status_code
        assert response.json() == {"detail": detail}

    @pytest.mark.parametrize(
        "exc_type", [ExternalServiceError, DataExtractionError, ConfigurationError]
    )
    def test_internal_errors_have_no_handler(self, exc_type: type) -> None:
        app = FastAPI()
        register_exception_handlers(app)

        assert exc_type not in app.exception_handlers


class TestSanitizeValidationErrors:
    def test_bytes_and_exceptions_become_strings(self) -> None:
        errors = [
            {
                "loc": ("body",),
                "input": b"caf\xc3\xa9",
                "ctx": {"error": ValueError("bad")},
            }
        ]

        assert _sanitize_validation_errors(errors) == [
            {"loc": ["body"], "input": "café", "ctx": {"error": "bad"}}
        ]

    def test_latin1_fallback(self) -> None:
        assert _sanitize_validation_errors([{"input": b"\xe9"}]) == [{"input": "é"}]
