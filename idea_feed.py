"""Discovery of today's idea slug from the public idea-of-the-day page."""

from __future__ import annotations

import logging
import re

from config import Settings
from errors import DiscoveryError, FetchError
from page_fetcher import INDEX_PATH, fetch_page

LOGGER = logging.getLogger(__name__)

# The slug is everything between /idea/ and the next slash.
_PRIMARY_SLUG_RE = re.compile(r'href="/idea/([^/]+)/')
_FALLBACK_SLUG_RE = re.compile(r"/idea/([a-z0-9-]+)/")


def discover_today_id(settings: Settings) -> str:
    """Fetch the public index page and return today's idea slug.

    Raises:
        DiscoveryError: the page could not be fetched or holds no idea link.
    """
    url = f"{settings.base_url}{INDEX_PATH}"
    try:
        html = fetch_page(url, timeout=settings.request_timeout_seconds)
    except FetchError as exc:
        raise DiscoveryError(f"Failed to fetch idea of the day: {exc}") from exc

    slug = find_slug(html)
    if slug is None:
        raise DiscoveryError("Could not find idea slug in idea-of-the-day HTML")

    LOGGER.info("Found today's idea: %s", slug)
    return slug


def find_slug(html: str) -> str | None:
    """Return the first idea slug linked from the markup, or None."""
    match = _PRIMARY_SLUG_RE.search(html)
    if match:
        return match.group(1)

    match = _FALLBACK_SLUG_RE.search(html)
    if match:
        LOGGER.debug("Slug found with fallback pattern: %s", match.group(1))
        return match.group(1)
    return None
