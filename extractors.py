"""Per-page extractors turning idea page markup into record fragments.

Each extractor sniffs for its page heading first and returns an empty
fragment when the heading is missing; a page that did not render the
expected section is normal, not an error.
"""

from __future__ import annotations

import re
from typing import Any, NamedTuple

from html_extract import (
    clean_html_text,
    composite_score,
    extract_between,
    extract_tags,
    first_group,
    has_heading,
    parse_score,
    rating_band,
)
from models import ACPDetails, ACPScores, MarketMatrix, ValueEquation

ACP_HEADING = "ACP Framework Analysis"
VALUE_EQUATION_HEADING = "Value Equation Analysis"
MARKET_MATRIX_HEADING = "Market Matrix Analysis"
VALUE_LADDER_HEADING = "Value Ladder Strategy"

SECTION_CLOSE = "</div></div></div>"


class IdeaInfo(NamedTuple):
    title: str
    description: str
    date: str
    tags: list[str]


class FieldRule(NamedTuple):
    """Where one labelled paragraph of an ACP section lands.

    ``field`` names an attribute of the target object. For a list attribute
    the value is appended as ``"<key>: <value>"``, for a dict attribute it is
    stored under ``key``, and for a str attribute it replaces the value.
    """

    label: str
    field: str
    key: str = ""


class SectionRules(NamedTuple):
    start: str
    end: str
    target: str
    rules: tuple[FieldRule, ...]


# --- idea-of-the-day ---

_TITLE_RE = re.compile(r"<h1[^>]*tracking-tight[^>]*>([^<]+)</h1>", re.DOTALL)
_DESCRIPTION_RE = re.compile(r"<p[^>]*text-lg text-gray-600[^>]*>([^<]+)</p>", re.DOTALL)
_DATE_RE = re.compile(
    r"(?:Jan|Feb|Mar|Apr|May|Jun|Jul|Aug|Sep|Oct|Nov|Dec)\s+\d{1,2},\s+\d{4}",
    re.ASCII,
)


def extract_idea_info(html: str) -> IdeaInfo:
    """Title, description, date and badge tags from the public idea page."""
    date_match = _DATE_RE.search(html)
    return IdeaInfo(
        title=clean_html_text(first_group(_TITLE_RE, html)),
        description=clean_html_text(first_group(_DESCRIPTION_RE, html)),
        date=date_match.group(0) if date_match else "",
        tags=extract_tags(html),
    )


# --- ACP page: narrative sections ---

ACP_SECTIONS: tuple[SectionRules, ...] = (
    SectionRules(
        start="AUDIENCE ANALYSIS",
        end="COMMUNITY ANALYSIS",
        target="audience",
        rules=(
            FieldRule("Demographics", "demographics", "primary"),
            FieldRule("Psychographics", "demographics", "psychographics"),
            FieldRule("Platforms", "demographics", "platforms"),
            FieldRule("Unmet Needs", "description"),
            FieldRule("Content Gaps", "demographics", "content_gaps"),
            FieldRule("Differentiation", "demographics", "differentiation"),
            FieldRule("Secret Sauce", "demographics", "secret_sauce"),
            FieldRule("Key Topics", "demographics", "key_topics"),
            FieldRule("Content Formats", "demographics", "content_formats"),
        ),
    ),
    SectionRules(
        start="COMMUNITY ANALYSIS",
        end="PRODUCT ANALYSIS",
        target="customer",
        rules=(
            FieldRule("Primary Platform", "segments", "Primary Platform"),
            FieldRule("Platform Rationale", "segments", "Platform Rationale"),
            FieldRule("Secondary Platforms", "segments", "Secondary Platforms"),
            FieldRule("UGC Strategy", "behaviors", "UGC"),
            FieldRule("Moderation Approach", "behaviors", "Moderation"),
            FieldRule("Transparency", "behaviors", "Transparency"),
            FieldRule("Community Rituals", "behaviors", "Rituals"),
            FieldRule("Content Calendar", "behaviors", "Calendar"),
            FieldRule("Interaction Methods", "behaviors", "Interaction"),
        ),
    ),
    SectionRules(
        start="PRODUCT ANALYSIS",
        end="EXECUTION PLAN",
        target="problem",
        rules=(
            FieldRule("Description", "description"),
            FieldRule("Key Features", "pain_points", "Features"),
            FieldRule("Value Proposition", "pain_points", "Value"),
            FieldRule("MVP", "current_solutions", "MVP"),
            FieldRule("Future Iterations", "current_solutions", "Future"),
            FieldRule("Community Integration", "current_solutions", "Integration"),
            FieldRule("Network Effects", "pain_points", "Network Effects"),
            FieldRule("Sticky Features", "pain_points", "Sticky Features"),
            FieldRule("Usage Frequency", "pain_points", "Usage"),
        ),
    ),
)

COMMUNITY_SUMMARY = (
    "Community-focused platform strategy with emphasis on engagement and trust building"
)


def extract_acp_details(html: str) -> ACPDetails:
    """Audience / customer / problem narrative from the ACP page."""
    details = ACPDetails()
    if not has_heading(html, ACP_HEADING):
        return details

    for section_rules in ACP_SECTIONS:
        section = extract_between(html, section_rules.start, section_rules.end)
        if section:
            _apply_rules(section, section_rules.rules, getattr(details, section_rules.target))

    if details.customer.segments or details.customer.behaviors:
        details.customer.description = COMMUNITY_SUMMARY

    execution = extract_between(html, "EXECUTION PLAN", SECTION_CLOSE)
    plan = _labelled_value(execution, "90-Day Plan") if execution else ""
    if plan and not details.audience.size:
        details.audience.size = f"90-Day Plan: {plan}"

    return details


def _labelled_value(section: str, label: str) -> str:
    """Text of the paragraph following a ``<p>Label</p>`` caption."""
    return clean_html_text(extract_between(section, f"{label}</p>", "</p>"))


def _apply_rules(section: str, rules: tuple[FieldRule, ...], target: Any) -> None:
    for rule in rules:
        value = _labelled_value(section, rule.label)
        if not value:
            continue
        current = getattr(target, rule.field)
        if isinstance(current, list):
            current.append(f"{rule.key}: {value}")
        elif isinstance(current, dict):
            current[rule.key] = value
        else:
            setattr(target, rule.field, value)


# --- ACP page: scores ---

ACP_DIMENSIONS = (
    ("Audience", "audience_score"),
    ("Community", "community_score"),
    ("Product", "product_score"),
)


def _acp_score_patterns(name: str) -> tuple[re.Pattern[str], ...]:
    escaped = re.escape(name)
    return (
        re.compile(
            rf"<span[^>]*>{escaped}</span>.*?<span[^>]*>(\d+)<!-- -->/10</span>", re.ASCII
        ),
        re.compile(rf"{escaped}</span>.*?(\d+)<!-- -->/10", re.ASCII),
        re.compile(rf"{escaped}.*?(\d+)/10", re.ASCII),
    )


_ACP_SCORE_PATTERNS = {name: _acp_score_patterns(name) for name, _ in ACP_DIMENSIONS}


def extract_acp_scores(html: str) -> ACPScores:
    """Audience/community/product scores plus their composite."""
    scores = ACPScores()
    if not has_heading(html, ACP_HEADING):
        return scores

    for name, attr in ACP_DIMENSIONS:
        for pattern in _ACP_SCORE_PATTERNS[name]:
            match = pattern.search(html)
            if match:
                setattr(scores, attr, int(match.group(1)))
                break

    scores.overall_score = composite_score(
        scores.audience_score, scores.community_score, scores.product_score
    )
    return scores


# --- value-equation page ---

_OVERALL_RATING_RE = re.compile(r"Overall Rating</p>.*?<div[^>]+>(\d+)</div>", re.ASCII)


class ValueComponent(NamedTuple):
    label: str
    short_label: str
    pattern: re.Pattern[str]


def _component(label: str, short_label: str, heading: str | None = None) -> ValueComponent:
    heading = heading or label
    pattern = re.compile(
        rf"{re.escape(heading)}</h1>.*?(\d+)<!-- -->/10</div>"
        r".*?<p[^>]*text-gray-600[^>]*>([^<]+)</p>",
        re.DOTALL | re.ASCII,
    )
    return ValueComponent(label, short_label, pattern)


VALUE_COMPONENTS = (
    _component("Dream Outcome", "Dream"),
    _component("Perceived Likelihood", "Likelihood"),
    _component("Time Delay", "Time"),
    _component("Effort & Sacrifice", "Effort", heading="Effort &amp; Sacrifice"),
)


def extract_value_equation(html: str) -> ValueEquation:
    """Overall score, its band, and the four component scores as narrative."""
    equation = ValueEquation()
    if not has_heading(html, VALUE_EQUATION_HEADING):
        return equation

    equation.score = parse_score(_OVERALL_RATING_RE, html)
    equation.rating = rating_band(equation.score)

    scores: list[str] = []
    narratives: list[str] = []
    for component in VALUE_COMPONENTS:
        match = component.pattern.search(html)
        score = match.group(1) if match else ""
        scores.append(f"{component.short_label}: {score}/10")
        text = clean_html_text(match.group(2)) if match else ""
        if text:
            narratives.append(f"{component.label}: {text}")

    equation.description = "\n\n".join([", ".join(scores), *narratives])
    return equation


# --- value-matrix page ---

QUADRANTS = ("Category King", "Tech Novelty", "Commodity Play", "Low Impact")

_UNIQUENESS_RE = re.compile(r"Uniqueness</p>.*?(\d+)<!-- -->/10", re.ASCII)
_MATRIX_VALUE_RE = re.compile(r"Value</p>.*?(\d+)<!-- -->/10", re.ASCII)
_MATRIX_ANALYSIS_RE = re.compile(
    r"Market Matrix Analysis</h1>.*?<p[^>]*text-gray-600[^>]*>([^<]+)</p>", re.DOTALL
)
_HIGHLIGHTED_QUADRANT_RE = re.compile(r"bg-yellow-50[^>]*>(?:[^>]*>)*[^>]*>([^<]+)</h3>")
_POSITION_BADGE_RE = re.compile(r'text-amber-700">([^<]+)</span>')


def extract_market_matrix(html: str) -> MarketMatrix:
    """Quadrant position, uniqueness/value scores and the analysis text."""
    matrix = MarketMatrix()
    if not has_heading(html, MARKET_MATRIX_HEADING):
        return matrix

    uniqueness = first_group(_UNIQUENESS_RE, html)
    if uniqueness:
        matrix.uniqueness = f"{int(uniqueness)}/10"
    value = first_group(_MATRIX_VALUE_RE, html)
    if value:
        matrix.value = f"{int(value)}/10"

    matrix.description = clean_html_text(first_group(_MATRIX_ANALYSIS_RE, html))
    matrix.position = clean_html_text(first_group(_HIGHLIGHTED_QUADRANT_RE, html))
    if not matrix.position:
        matrix.position = _position_from_badge(html)

    if matrix.position and matrix.description:
        explain_re = re.compile(rf"{re.escape(matrix.position)}</span>.*?<p[^>]*>([^<]+)</p>")
        explanation = first_group(explain_re, html)
        if explanation:
            matrix.description += f"\n\nPosition Analysis: {clean_html_text(explanation)}"

    quadrant_section = extract_between(html, "Understanding the Quadrants", SECTION_CLOSE)
    if quadrant_section and matrix.description:
        for name in QUADRANTS:
            text = clean_html_text(extract_between(quadrant_section, f"{name}</h1>", "</p>"))
            if text:
                matrix.description += f"\n\n{name}: {text}"

    return matrix


def _position_from_badge(html: str) -> str:
    section = extract_between(html, "Position Analysis", "Understanding the Quadrants")
    if not section:
        return ""
    position = clean_html_text(first_group(_POSITION_BADGE_RE, section))
    if any(name in position for name in QUADRANTS):
        return position
    return ""


# --- value-ladder page ---

LADDER_STAGES = (
    ("LEAD MAGNET", "Lead Magnet"),
    ("FRONTEND OFFER", "Frontend"),
    ("CORE OFFER", "Core"),
    ("CONTINUITY PROGRAM", "Continuity"),
    ("BACKEND OFFER", "Backend"),
)

_STAGE_TITLE_RE = re.compile(r"<h1[^>]*>([^<]+)</h1>")
_STAGE_PRICE_RE = re.compile(r"<span[^>]*bg-blue-50[^>]*>([^<]+)</span>")
_STAGE_DESCRIPTION_RE = re.compile(r"</h1>.*?<p[^>]*text-gray-600[^>]*>([^<]+)</p>")
_STAGE_VALUE_RE = re.compile(r"Value Provided</p>.*?<p[^>]*>([^<]+)</p>")
_STAGE_GOAL_RE = re.compile(r"Goal</p>.*?<p[^>]*>([^<]+)</p>")


def extract_value_ladder_stages(html: str) -> list[str]:
    """Render the five offer stages as "Stage: Title (Price)" plus detail lines."""
    if not has_heading(html, VALUE_LADDER_HEADING):
        return []

    lines: list[str] = []
    for index, (marker, display) in enumerate(LADDER_STAGES):
        if index + 1 < len(LADDER_STAGES):
            end = LADDER_STAGES[index + 1][0]
        else:
            end = SECTION_CLOSE
        section = extract_between(html, marker, end)
        if not section:
            continue

        title = _cleaned_group(_STAGE_TITLE_RE, section)
        price = _cleaned_group(_STAGE_PRICE_RE, section)
        lines.append(f"{display}: {title} ({price})" if price else f"{display}: {title}")

        for label, pattern in (
            ("Description", _STAGE_DESCRIPTION_RE),
            ("Value", _STAGE_VALUE_RE),
            ("Goal", _STAGE_GOAL_RE),
        ):
            text = _cleaned_group(pattern, section)
            if text:
                lines.append(f"  - {label}: {text}")

    return lines


def _cleaned_group(pattern: re.Pattern[str], section: str) -> str:
    return clean_html_text(first_group(pattern, section))
