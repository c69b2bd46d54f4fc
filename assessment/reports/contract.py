"""Report JSON contract and data structures.

Defines the stable report format returned by ``analyze_website`` and
serialized by the API and CLI.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

from assessment.analyzers.models import (
    PILLAR_ORDER,
    AuthorityDetails,
    ContentDetails,
    MeasurementDetails,
    Pillar,
    Recommendation,
    Strength,
    TechnicalDetails,
)
from assessment.scoring.aggregate import PillarSummary


class ReportVersion(str, Enum):
    """Report schema versions."""

    V2_0 = "2.0"


# Current version
CURRENT_VERSION = ReportVersion.V2_0


@dataclass(frozen=True)
class AEOScores:
    """Pillar scores (0-5, two decimals) and the weighted overall (one decimal)."""

    content: float
    technical: float
    authority: float
    measurement: float
    overall: float

    def to_dict(self) -> dict:
        return {
            "content": self.content,
            "technical": self.technical,
            "authority": self.authority,
            "measurement": self.measurement,
            "overall": self.overall,
        }


@dataclass(frozen=True)
class AEOReport:
    """Complete result of one website assessment."""

    url: str
    scores: AEOScores
    maturity_level: str
    maturity_description: str
    analyzed_at: datetime

    # All pillars merged, in pillar order
    strengths: list[Strength] = field(default_factory=list)
    recommendations_by_pillar: dict[Pillar, list[Recommendation]] = field(default_factory=dict)
    pillar_summaries: dict[Pillar, PillarSummary] = field(default_factory=dict)
    top_priorities: list[Recommendation] = field(default_factory=list)

    content_details: ContentDetails | None = None
    technical_details: TechnicalDetails | None = None
    authority_details: AuthorityDetails | None = None
    measurement_details: MeasurementDetails | None = None

    version: ReportVersion = CURRENT_VERSION

    @property
    def recommendations(self) -> list[Recommendation]:
        """Every recommendation, in pillar order."""
        return [
            rec for pillar in PILLAR_ORDER for rec in self.recommendations_by_pillar.get(pillar, [])
        ]

    def to_dict(self) -> dict:
        """Convert to a JSON-serializable dictionary."""
        return {
            "version": self.version.value,
            "url": self.url,
            "scores": self.scores.to_dict(),
            "maturity_level": self.maturity_level,
            "maturity_description": self.maturity_description,
            "strengths": [s.to_dict() for s in self.strengths],
            "recommendations_by_pillar": {
                pillar.value: [r.to_dict() for r in self.recommendations_by_pillar.get(pillar, [])]
                for pillar in PILLAR_ORDER
            },
            "pillar_summaries": {
                pillar.value: summary.to_dict() for pillar, summary in self.pillar_summaries.items()
            },
            "top_priorities": [r.to_dict() for r in self.top_priorities],
            "analyzed_at": self.analyzed_at.isoformat(),
            "content_details": self.content_details.to_dict() if self.content_details else None,
            "technical_details": (
                self.technical_details.to_dict() if self.technical_details else None
            ),
            "authority_details": (
                self.authority_details.to_dict() if self.authority_details else None
            ),
            "measurement_details": (
                self.measurement_details.to_dict() if self.measurement_details else None
            ),
        }
