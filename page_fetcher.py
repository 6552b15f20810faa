"""Fetch orchestration for the fixed set of idea pages."""

from __future__ import annotations

import logging
import time
from pathlib import Path

import requests

from auth_client import TokenManager
from config import Settings
from errors import FetchError
from models import PageSpec

LOGGER = logging.getLogger(__name__)

INDEX_PAGE_KEY = "idea-of-the-day"
INDEX_PATH = "/idea-of-the-day"

# Ordered; the first entry is public, every other one needs a bearer token.
PROTECTED_PAGE_KEYS = (
    "acp",
    "value-equation",
    "value-matrix",
    "value-ladder",
    "build/landing-page",
    "founder-fit",
    "why-now",
    "proof-signals",
    "market-gap",
    "execution-plan",
)

BROWSER_HEADERS = {
    "User-Agent": (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/135.0.0.0 Safari/537.36"
    ),
    "Accept": (
        "text/html,application/xhtml+xml,application/xml;q=0.9,"
        "image/avif,image/webp,*/*;q=0.8"
    ),
    "Accept-Encoding": "gzip, deflate",
    "Accept-Language": "en-GB,en-US;q=0.9,en;q=0.8",
}


def build_page_plan(slug: str) -> list[PageSpec]:
    """Return the ordered page list for one idea slug."""
    plan = [PageSpec(key=INDEX_PAGE_KEY, path=INDEX_PATH, protected=False)]
    plan.extend(
        PageSpec(key=key, path=f"/idea/{slug}/{key}", protected=True)
        for key in PROTECTED_PAGE_KEYS
    )
    return plan


def fetch_page(
    url: str,
    timeout: float,
    access_token: str | None = None,
    referer: str | None = None,
) -> str:
    """GET one page and return its decoded body.

    Raises:
        FetchError: transport failure or any non-200 status.
    """
    headers = dict(BROWSER_HEADERS)
    headers["Cache-Control"] = "max-age=0"
    if referer:
        headers["Referer"] = referer
    if access_token:
        headers["Authorization"] = f"Bearer {access_token}"

    try:
        response = requests.get(url, headers=headers, timeout=timeout)
    except requests.RequestException as exc:
        raise FetchError(f"request to {url} failed: {exc}") from exc

    if response.status_code == 401:
        raise FetchError(
            f"unauthorized access to {url} (token may be expired)", status_code=401
        )
    if response.status_code != 200:
        raise FetchError(
            f"failed to fetch {url}: status {response.status_code}",
            status_code=response.status_code,
        )
    return response.text


def fetch_all(slug: str, token_manager: TokenManager, settings: Settings) -> dict[str, str]:
    """Fetch every page of the plan, keyed by page key.

    A failed page is logged and left out of the result. A failed token refresh
    is not caught here: it raises AuthError and ends the run, since every later
    protected page would fail the same way.
    """
    plan = build_page_plan(slug)
    referer = f"{settings.base_url}{INDEX_PATH}"
    pages: dict[str, str] = {}

    LOGGER.info("Starting to fetch %s pages for slug=%s", len(plan), slug)

    for index, spec in enumerate(plan, start=1):
        if index > 1 and settings.request_delay_seconds > 0:
            time.sleep(settings.request_delay_seconds)

        access_token = None
        if spec.protected:
            access_token = token_manager.ensure_fresh().access_token

        url = f"{settings.base_url}{spec.path}"
        LOGGER.debug("[%s/%s] Fetching %s", index, len(plan), spec.path)
        try:
            content = fetch_page(
                url,
                timeout=settings.request_timeout_seconds,
                access_token=access_token,
                referer=referer,
            )
        except FetchError as exc:
            LOGGER.warning("Failed to fetch page %s (%s): %s", index, spec.key, exc)
            continue

        LOGGER.debug("Page %s fetched (%s bytes)", index, len(content))
        if settings.save_html:
            _save_snapshot(settings.output_dir, index, content)
        pages[spec.key] = content

    LOGGER.info(
        "Fetch complete: fetched=%s failed=%s", len(pages), len(plan) - len(pages)
    )
    return pages


def _save_snapshot(output_dir: Path, index: int, content: str) -> None:
    path = output_dir / f"page_{index}.html"
    try:
        path.write_text(content, encoding="utf-8")
    except OSError as exc:
        LOGGER.warning("Could not save raw HTML snapshot %s: %s", path, exc)
