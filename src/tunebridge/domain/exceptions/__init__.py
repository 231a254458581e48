"""Domain exceptions."""

from typing import Any


class DomainException(Exception):
    """Base exception for all domain exceptions."""

    # Hey future me, we store message as an attribute so code can inspect it without parsing str(exception).
    # Always raise a specific subclass so callers (and the FastAPI handlers) can catch precisely.
    def __init__(self, message: str, *args: Any) -> None:
        super().__init__(message, *args)
        self.message = message


class ValidationException(DomainException):
    """Raised when input fails validation.

    HTTP Status: 422
    """

    pass


class InvalidUrlError(ValidationException):
    """Raised when the requested URL is not an absolute http(s) URL.

    Example:
        raise InvalidUrlError("not-a-url")
    """

    def __init__(self, url: str) -> None:
        super().__init__(f"Invalid URL: {url!r}")
        self.url = url


class ResolutionError(DomainException):
    """The link-resolution service could not resolve the URL.

    This is the ONLY pipeline failure that reaches the caller. Raised when Odesli
    is unreachable, answers with a non-success status, returns a malformed body,
    or doesn't contain the primary entity it points to.

    HTTP Status: 400

    Example:
        raise ResolutionError("Failed to fetch links from Odesli: Not Found", status_code=404)
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code  # upstream status, None for transport errors


class EnrichmentFailure(DomainException):
    """Primary metadata fetch failed.

    Recoverable: the enricher catches it and falls back to the resolver's entity.
    Never surfaced to API callers.
    """

    pass


class SecondaryScrapeFailure(DomainException):
    """A secondary page scrape failed (album link, JSON-LD date, album lookup).

    Recoverable: the field it was meant to fill stays empty/None.
    """

    pass


class ExternalServiceError(DomainException):
    """External service returned an error or unusable data.

    Never reaches the API layer: callers convert it into an enrichment failure.
    """

    pass


class DataExtractionError(ExternalServiceError):
    """Spotify embed data could not be located or parsed."""

    pass


class ConfigurationError(DomainException):
    """Application misconfiguration, raised when wiring the enrichment strategy.

    Example:
        raise ConfigurationError("Unknown enrichment strategy: 'full'")
    """

    pass


__all__ = [
    "ConfigurationError",
    "DataExtractionError",
    "DomainException",
    "EnrichmentFailure",
    "ExternalServiceError",
    "InvalidUrlError",
    "ResolutionError",
    "SecondaryScrapeFailure",
    "ValidationException",
]
