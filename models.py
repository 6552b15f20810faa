"""Shared typed models for the scraper."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime

EPOCH = datetime.fromtimestamp(0, tz=UTC)


@dataclass(frozen=True, slots=True)
class TokenState:
    """Bearer credentials as returned by the identity endpoint.

    Replaced wholesale on every login or refresh; never mutated in place.
    """

    access_token: str
    refresh_token: str
    expires_at: datetime

    def is_expired(self, now: datetime) -> bool:
        return now >= self.expires_at

    @classmethod
    def from_refresh_token(cls, refresh_token: str) -> TokenState:
        """State seeded from a persisted refresh token; always already expired."""
        return cls(access_token="", refresh_token=refresh_token, expires_at=EPOCH)


@dataclass(frozen=True, slots=True)
class PageSpec:
    """One entry of the fixed page list fetched per run."""

    key: str
    path: str
    protected: bool


@dataclass(slots=True)
class ValueEquation:
    score: int = 0
    rating: str = ""
    description: str = ""


@dataclass(slots=True)
class MarketMatrix:
    position: str = ""
    uniqueness: str = ""
    value: str = ""
    description: str = ""


@dataclass(slots=True)
class ACPScores:
    audience_score: int = 0
    community_score: int = 0
    product_score: int = 0
    overall_score: int = 0


@dataclass(slots=True)
class FrameworkFit:
    value_equation: ValueEquation = field(default_factory=ValueEquation)
    market_matrix: MarketMatrix = field(default_factory=MarketMatrix)
    acp_framework: ACPScores = field(default_factory=ACPScores)
    value_ladder_stages: list[str] = field(default_factory=list)


@dataclass(slots=True)
class Audience:
    description: str = ""
    size: str = ""
    demographics: dict[str, str] = field(default_factory=dict)


@dataclass(slots=True)
class Customer:
    description: str = ""
    segments: list[str] = field(default_factory=list)
    behaviors: list[str] = field(default_factory=list)


@dataclass(slots=True)
class Problem:
    description: str = ""
    pain_points: list[str] = field(default_factory=list)
    current_solutions: list[str] = field(default_factory=list)


@dataclass(slots=True)
class ACPDetails:
    """Audience / customer / problem narrative pulled from the ACP page."""

    audience: Audience = field(default_factory=Audience)
    customer: Customer = field(default_factory=Customer)
    problem: Problem = field(default_factory=Problem)


@dataclass(slots=True)
class IdeaRecord:
    """Aggregate record for one idea; serialized once per run."""

    slug: str
    title: str = ""
    description: str = ""
    date: str = ""
    tags: list[str] = field(default_factory=list)
    framework_fit: FrameworkFit = field(default_factory=FrameworkFit)
    acp: ACPDetails = field(default_factory=ACPDetails)
    build_info: dict[str, str] = field(default_factory=dict)
    founder_fit: dict[str, str] = field(default_factory=dict)
    value_ladder: dict[str, str] = field(default_factory=dict)
    why_now: dict[str, str] = field(default_factory=dict)
    proof_signals: dict[str, str] = field(default_factory=dict)
    market_gap: dict[str, str] = field(default_factory=dict)
    execution_plan: dict[str, str] = field(default_factory=dict)
