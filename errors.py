"""Error taxonomy for a scrape run.

Every class except FetchError is fatal: main() logs it and exits non-zero.
FetchError is caught per page by the fetch loop and turned into an omission.
"""

from __future__ import annotations


class ScraperError(RuntimeError):
    """Base class for all scraper failures."""


class ConfigurationError(ScraperError):
    """A required setting is missing or malformed."""


class AuthError(ScraperError):
    """Login or token refresh failed; no protected content is reachable."""

    INVALID_CREDENTIALS = "invalid_credentials"
    REFRESH_REJECTED = "refresh_rejected"
    NETWORK_FAILURE = "network_failure"
    MALFORMED_RESPONSE = "malformed_response"

    def __init__(self, message: str, reason: str) -> None:
        super().__init__(message)
        self.reason = reason


class DiscoveryError(ScraperError):
    """Today's idea slug could not be located on the public index page."""


class FetchError(ScraperError):
    """A single page could not be fetched."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class WriteError(ScraperError):
    """The output record could not be persisted."""
