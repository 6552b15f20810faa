"""CLI entrypoint for the daily idea-of-the-day scrape."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

from auth_client import TokenManager
from config import Settings, load_settings
from errors import ScraperError, WriteError
from idea_feed import discover_today_id
from json_sink import assemble, write_record
from page_fetcher import fetch_all

__version__ = "1.0.0"

LOGGER = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line flags."""
    parser = argparse.ArgumentParser(
        description="Scrape today's idea from IdeaBrowser into a JSON record"
    )
    parser.add_argument(
        "--output",
        default=None,
        help="Output directory for the JSON record and refresh token (default: IDEABROWSER_OUTPUT_DIR or .)",
    )
    parser.add_argument(
        "--save-html",
        action="store_true",
        help="Save raw HTML of every fetched page for debugging",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser.parse_args(argv)


def run(settings: Settings) -> Path:
    """Run one scrape and return the path of the written record.

    Raises:
        ScraperError: any fatal failure (auth, discovery, token refresh, write).
    """
    try:
        settings.output_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise WriteError(f"Failed to create output directory {settings.output_dir}: {exc}") from exc

    token_manager = TokenManager(settings)
    token_manager.bootstrap()

    slug = discover_today_id(settings)
    pages = fetch_all(slug, token_manager, settings)

    LOGGER.info("Parsing %s fetched pages...", len(pages))
    record = assemble(slug, pages)
    return write_record(record, settings.output_dir)


def main(argv: list[str] | None = None) -> int:
    """Initialize config and execute one scrape."""
    load_dotenv()
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(message)s",
    )

    try:
        settings = load_settings(output_dir=args.output, save_html=args.save_html)
        path = run(settings)
    except ScraperError as exc:
        LOGGER.error("%s: %s", type(exc).__name__, exc)
        return 1

    LOGGER.info("Scrape completed successfully: %s", path)
    return 0


if __name__ == "__main__":
    sys.exit(main())
