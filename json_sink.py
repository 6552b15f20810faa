"""Assembly of page fragments into one IdeaRecord and its JSON file sink."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict
from datetime import date
from pathlib import Path
from typing import Any

from errors import WriteError
from extractors import (
    extract_acp_details,
    extract_acp_scores,
    extract_idea_info,
    extract_market_matrix,
    extract_value_equation,
    extract_value_ladder_stages,
)
from html_extract import extract_key_values
from models import IdeaRecord
from page_fetcher import INDEX_PAGE_KEY

LOGGER = logging.getLogger(__name__)

# Pages without a dedicated extractor: page key -> record attribute.
KEY_VALUE_SECTIONS = {
    "value-ladder": "value_ladder",
    "build/landing-page": "build_info",
    "founder-fit": "founder_fit",
    "why-now": "why_now",
    "proof-signals": "proof_signals",
    "market-gap": "market_gap",
    "execution-plan": "execution_plan",
}


def assemble(slug: str, pages: dict[str, str]) -> IdeaRecord:
    """Merge every fetched page into one record.

    A page missing from ``pages`` leaves its fields at their zero value.
    """
    record = IdeaRecord(slug=slug)

    index_html = pages.get(INDEX_PAGE_KEY)
    if index_html is not None:
        info = extract_idea_info(index_html)
        record.title = info.title
        record.description = info.description
        record.date = info.date
        record.tags = info.tags

    framework = record.framework_fit
    if "value-equation" in pages:
        framework.value_equation = extract_value_equation(pages["value-equation"])
    if "value-matrix" in pages:
        framework.market_matrix = extract_market_matrix(pages["value-matrix"])
    if "acp" in pages:
        record.acp = extract_acp_details(pages["acp"])
        framework.acp_framework = extract_acp_scores(pages["acp"])
    if "value-ladder" in pages:
        framework.value_ladder_stages = extract_value_ladder_stages(pages["value-ladder"])

    for page_key, attr in KEY_VALUE_SECTIONS.items():
        if page_key in pages:
            setattr(record, attr, extract_key_values(pages[page_key]))

    expected = (INDEX_PAGE_KEY, "acp", "value-equation", "value-matrix", *KEY_VALUE_SECTIONS)
    missing = [key for key in expected if key not in pages]
    if missing:
        LOGGER.info(
            "Assembled slug=%s with %s missing page(s): %s",
            slug,
            len(missing),
            ", ".join(missing),
        )
    return record


def record_to_dict(record: IdeaRecord) -> dict[str, Any]:
    return asdict(record)


def render_record(record: IdeaRecord) -> str:
    """Serialize a record to indented JSON; identical records give identical text."""
    return json.dumps(record_to_dict(record), indent=2, ensure_ascii=False) + "\n"


def output_filename(slug: str, run_date: date) -> str:
    return f"idea_{slug}_{run_date.isoformat()}.json"


def write_record(record: IdeaRecord, directory: Path, run_date: date | None = None) -> Path:
    """Write the record to ``directory`` and return the file path.

    Raises:
        WriteError: the directory is missing or the file cannot be written.
    """
    run_date = run_date or date.today()
    path = Path(directory) / output_filename(record.slug, run_date)
    try:
        path.write_text(render_record(record), encoding="utf-8")
    except OSError as exc:
        raise WriteError(f"Failed to write {path}: {exc}") from exc

    LOGGER.info("Saved idea data to %s", path)
    return path
