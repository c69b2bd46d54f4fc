"""Overall score, maturity level, pillar summaries and top priorities."""

from dataclasses import dataclass, replace

from assessment.analyzers import weights as w
from assessment.analyzers.models import (
    PILLAR_ORDER,
    Pillar,
    Recommendation,
    Strength,
    round_half_up,
    round_score,
)
from assessment.crawler.url import get_brand_hostname


@dataclass(frozen=True)
class MaturityLevel:
    """Named maturity band for an overall score."""

    level: str
    description: str

    def to_dict(self) -> dict:
        return {"level": self.level, "description": self.description}


@dataclass
class PillarSummary:
    """One-sentence verdict and coverage for a pillar."""

    findings: str
    coverage_percent: int
    checks_pass: int
    checks_total: int

    def to_dict(self) -> dict:
        return {
            "findings": self.findings,
            "coverage_percent": self.coverage_percent,
            "checks_pass": self.checks_pass,
            "checks_total": self.checks_total,
        }


def calculate_overall_score(
    content: float,
    technical: float,
    authority: float,
    measurement: float,
) -> float:
    """Weighted pillar average on the 0-5 scale, one decimal."""
    weighted = (
        content * w.PILLAR_WEIGHTS[Pillar.CONTENT.value]
        + technical * w.PILLAR_WEIGHTS[Pillar.TECHNICAL.value]
        + authority * w.PILLAR_WEIGHTS[Pillar.AUTHORITY.value]
        + measurement * w.PILLAR_WEIGHTS[Pillar.MEASUREMENT.value]
    )
    return round_score(weighted, 1)


def get_maturity_level(score: float) -> MaturityLevel:
    for lower_bound, level, description in w.MATURITY_LEVELS:
        if score >= lower_bound:
            return MaturityLevel(level, description)
    # Negative scores fall into the lowest band
    _, level, description = w.MATURITY_LEVELS[-1]
    return MaturityLevel(level, description)


def _findings(host: str, pillar: Pillar, score: float) -> str:
    name = pillar.value.lower()
    if score >= 4:
        return f"{host} demonstrates excellent {name} optimization for AI search."
    if score >= 3:
        return (
            f"{host} shows moderate {name} maturity for AI search. Some best practices "
            "are in place, but there are opportunities for improvement."
        )
    if score >= 2:
        return f"{host} has basic {name} foundations but needs improvement for AI visibility."
    return f"{host} requires substantial {name} improvements to be visible to AI search engines."


def generate_pillar_summaries(
    scores: dict[Pillar, float],
    strengths: list[Strength],
    url: str,
) -> dict[Pillar, PillarSummary]:
    """
    Summarize each pillar.

    Args:
        scores: Pillar score (0-5) per pillar
        strengths: Merged strengths of every pillar
        url: Analyzed URL, named in the findings sentence

    Returns:
        Summary per pillar, in pillar order
    """
    host = get_brand_hostname(url) or url
    summaries: dict[Pillar, PillarSummary] = {}
    for pillar in PILLAR_ORDER:
        score = scores.get(pillar, 0.0)
        summaries[pillar] = PillarSummary(
            findings=_findings(host, pillar, score),
            coverage_percent=round_half_up(score / w.MAX_PILLAR_SCORE * 100),
            checks_pass=sum(1 for s in strengths if s.category == pillar),
            checks_total=w.CHECKS_TOTAL[pillar.value],
        )
    return summaries


def _is_high_priority(title: str) -> bool:
    lowered = title.lower()
    return any(marker.lower() in lowered for marker in w.HIGH_PRIORITY_TITLES)


def recommendation_weight(recommendation: Recommendation) -> float:
    weight = w.PRIORITY_CATEGORY_WEIGHTS[recommendation.category.value]
    if _is_high_priority(recommendation.title):
        weight *= w.HIGH_PRIORITY_MULTIPLIER
    return weight


def generate_top_priorities(
    recommendations_by_pillar: dict[Pillar, list[Recommendation]],
) -> list[Recommendation]:
    """
    Pick the most impactful recommendations.

    Recommendations are weighted by pillar and doubled for high-priority
    titles, then stably sorted so ties keep pillar order. The first
    ``TOP_PRIORITIES_COUNT`` are returned as copies numbered 1, 2, 3.
    """
    merged = [
        rec for pillar in PILLAR_ORDER for rec in recommendations_by_pillar.get(pillar, [])
    ]
    ranked = sorted(merged, key=recommendation_weight, reverse=True)
    return [
        replace(rec, priority=index)
        for index, rec in enumerate(ranked[: w.TOP_PRIORITIES_COUNT], start=1)
    ]
