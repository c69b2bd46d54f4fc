"""Analyzer result types."""

from dataclasses import asdict, dataclass, field
from decimal import ROUND_HALF_UP, Decimal
from enum import Enum
from typing import Any

from assessment.analyzers.weights import MAX_PILLAR_SCORE


def round_score(value: float, places: int = 1) -> float:
    """Round half-up, ignoring binary float noise below 1e-6."""
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(str(round(value, 6))).quantize(quantum, rounding=ROUND_HALF_UP))


def round_half_up(value: float) -> int:
    """Nearest integer with .5 rounded up (1500.5 -> 1501)."""
    return int(round_score(value, 0))


class Pillar(str, Enum):
    """Scoring dimension."""

    CONTENT = "Content"
    TECHNICAL = "Technical"
    AUTHORITY = "Authority"
    MEASUREMENT = "Measurement"


PILLAR_ORDER = (Pillar.CONTENT, Pillar.TECHNICAL, Pillar.AUTHORITY, Pillar.MEASUREMENT)


@dataclass
class Strength:
    """A passed check, paired with the points it awarded."""

    category: Pillar
    title: str
    description: str

    def to_dict(self) -> dict:
        return {
            "category": self.category.value,
            "title": self.title,
            "description": self.description,
        }


@dataclass
class Recommendation:
    """A failed (or undetectable) check, with the reason it matters."""

    category: Pillar
    title: str
    description: str
    why: str | None = None
    priority: int | None = None

    def to_dict(self) -> dict:
        return {
            "category": self.category.value,
            "title": self.title,
            "description": self.description,
            "why": self.why,
            "priority": self.priority,
        }


@dataclass
class ContentDetails:
    readability_score: float | None = None
    readability_grade: float | None = None
    image_alt_coverage: int | None = None
    main_content_word_count: int | None = None
    internal_link_count: int | None = None
    section_density: int | None = None
    data_point_count: int | None = None
    answer_first_ratio: int | None = None
    extractable_ratio: int | None = None
    page_types: dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class TechnicalDetails:
    performance_score: int | None = None
    accessibility_score: int | None = None
    seo_score: int | None = None
    core_web_vitals: dict[str, float] | None = None
    ssl_valid: bool | None = None
    ssl_days_remaining: int | None = None
    sitemap_found: bool | None = None
    sitemap_url_count: int | None = None
    robots_txt_found: bool | None = None
    llms_txt_found: bool | None = None
    ai_bots_crawlable: bool | None = None
    blocked_ai_bots: list[str] = field(default_factory=list)
    schema_types: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class AuthorityDetails:
    knowledge_graph_found: bool | None = None
    knowledge_graph_type: str | None = None
    social_platform_count: int | None = None
    social_platforms: list[str] = field(default_factory=list)
    external_citation_count: int | None = None
    reddit_mentions: int | None = None
    reddit_subreddits: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class MeasurementDetails:
    analytics_tools: list[str] = field(default_factory=list)
    tag_manager: str | None = None
    crm: str | None = None
    heatmap_tool: str | None = None
    cookie_consent: str | None = None
    ab_test_tool: str | None = None
    performance_monitor: str | None = None
    ai_referral_tracking: bool | None = None
    utm_discipline: int | None = None
    search_console_verified: bool | None = None

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class PillarAnalysis:
    """One pillar's score (0-5), strengths, recommendations and raw details."""

    pillar: Pillar
    score: float
    strengths: list[Strength] = field(default_factory=list)
    recommendations: list[Recommendation] = field(default_factory=list)
    details: Any = None


class Scorecard:
    """
    Accumulates points for one pillar.

    ``award`` is the only way to add points and always records the matching
    strength, so a score fragment can never appear without its justification.
    """

    def __init__(self, pillar: Pillar):
        self.pillar = pillar
        self.score = 0.0
        self.strengths: list[Strength] = []
        self.recommendations: list[Recommendation] = []

    def award(self, points: float, title: str, description: str) -> None:
        self.score += points
        self.strengths.append(Strength(self.pillar, title, description))

    def recommend(self, title: str, description: str, why: str | None = None) -> None:
        self.recommendations.append(Recommendation(self.pillar, title, description, why))

    def result(self, details: Any) -> PillarAnalysis:
        # Rounded to drop float noise from fractional point values
        score = round_score(min(max(self.score, 0.0), MAX_PILLAR_SCORE), 2)
        return PillarAnalysis(
            pillar=self.pillar,
            score=score,
            strengths=self.strengths,
            recommendations=self.recommendations,
            details=details,
        )
