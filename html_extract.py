"""Low-level markup helpers shared by the page extractors.

Everything here works on raw strings with literal delimiters and a few small
regular expressions. There is no DOM: a delimiter that is not unique inside
its enclosing section yields the first match, which is accepted. When the
site markup drifts, only the marker constants in extractors.py should need
to change.
"""

from __future__ import annotations

import re

_SCRIPT_STYLE_RE = re.compile(
    r"<script[^>]*>.*?</script>|<style[^>]*>.*?</style>", re.IGNORECASE | re.DOTALL
)
_TAG_RE = re.compile(r"<[^>]+>")
_WHITESPACE_RE = re.compile(r"\s+")

# Applied in order, so "&amp;lt;" decodes all the way to "<".
_ENTITIES = (
    ("&nbsp;", " "),
    ("&amp;", "&"),
    ("&lt;", "<"),
    ("&gt;", ">"),
    ("&quot;", '"'),
    ("&#39;", "'"),
    ("&#x27;", "'"),
)

_BADGE_RE = re.compile(r"<div[^>]*rounded-full[^>]*>.*?<span[^>]*>([^<]+)</span>")
# Label limits count UTF-8 bytes.
MAX_TAG_LENGTH = 50

_KEY_VALUE_PATTERNS = (
    re.compile(r"<h3[^>]*>([^<]+)</h3>\s*<[^>]+>([^<]+)"),
    re.compile(r"<span[^>]*font-medium[^>]*>([^<]+)</span>\s*<span[^>]*>([^<]+)"),
)
MAX_KEY_LENGTH = 50


def extract_between(doc: str, start: str, end: str) -> str:
    """Return the trimmed text between ``start`` and the next ``end`` after it.

    Returns "" when ``start`` is absent or no ``end`` follows it.
    """
    start_idx = doc.find(start)
    if start_idx == -1:
        return ""
    start_idx += len(start)

    end_idx = doc.find(end, start_idx)
    if end_idx == -1:
        return ""
    return doc[start_idx:end_idx].strip()


def clean_html_text(text: str) -> str:
    """Strip markup and decode the common entities, leaving single-spaced text."""
    text = _SCRIPT_STYLE_RE.sub("", text)
    text = _TAG_RE.sub(" ", text)
    for entity, replacement in _ENTITIES:
        text = text.replace(entity, replacement)
    text = _WHITESPACE_RE.sub(" ", text)
    return text.strip()


def has_heading(doc: str, heading: str) -> bool:
    return heading in doc


def first_group(pattern: re.Pattern[str], doc: str) -> str:
    """Return group 1 of the first match, or ""."""
    match = pattern.search(doc)
    return match.group(1) if match else ""


def parse_score(pattern: re.Pattern[str], doc: str) -> int:
    """Return the first captured digit group as an int; 0 when absent.

    Zero doubles as "not found", matching how scores are stored downstream.
    """
    digits = first_group(pattern, doc)
    return int(digits) if digits.isdigit() else 0


def rating_band(score: int) -> str:
    if score >= 8:
        return "Excellent"
    if score >= 6:
        return "Good"
    if score >= 4:
        return "Fair"
    return "Poor"


def composite_score(*scores: int) -> int:
    """Integer mean of the parts, or 0 unless every part is non-zero."""
    if not scores or any(score == 0 for score in scores):
        return 0
    return sum(scores) // len(scores)


def extract_tags(doc: str) -> list[str]:
    """Collect badge/pill labels, deduplicated in first-seen order."""
    tags: list[str] = []
    seen: set[str] = set()
    for raw in _BADGE_RE.findall(doc):
        tag = clean_html_text(raw)
        if tag and tag not in seen and len(tag.encode()) < MAX_TAG_LENGTH:
            seen.add(tag)
            tags.append(tag)
    return tags


def extract_key_values(doc: str) -> dict[str, str]:
    """Generic heading -> value scan for pages without a dedicated extractor.

    Later duplicates of a heading overwrite earlier ones.
    """
    data: dict[str, str] = {}
    for pattern in _KEY_VALUE_PATTERNS:
        for raw_key, raw_value in pattern.findall(doc):
            key = clean_html_text(raw_key)
            value = clean_html_text(raw_value)
            if key and value and len(key.encode()) < MAX_KEY_LENGTH:
                data[key] = value
    return data
