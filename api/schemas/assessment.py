"""Assessment request and response schemas."""

import ipaddress
from typing import Any
from urllib.parse import urlparse

from pydantic import BaseModel, Field, field_validator

MAX_URL_LENGTH = 2048
BLOCKED_HOSTS = frozenset({"localhost", "metadata.google.internal", "metadata.internal"})


def _is_private_address(hostname: str) -> bool:
    """True for literal private/loopback/reserved IPs and known internal hostnames."""
    if hostname in BLOCKED_HOSTS:
        return True
    try:
        addr = ipaddress.ip_address(hostname)
    except ValueError:
        return False
    return addr.is_private or addr.is_loopback or addr.is_reserved or addr.is_link_local


class AssessmentRequest(BaseModel):
    """Request to assess a website."""

    url: str = Field(..., description="Website URL; https:// is assumed when no scheme is given")

    @field_validator("url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("URL is required")
        if len(v) > MAX_URL_LENGTH:
            raise ValueError(f"URL too long (max {MAX_URL_LENGTH} characters)")

        candidate = v if v.lower().startswith(("http://", "https://")) else f"https://{v}"
        try:
            parsed = urlparse(candidate)
            hostname = (parsed.hostname or "").lower()
            has_credentials = bool(parsed.username or parsed.password)
        except ValueError as e:
            raise ValueError("Invalid URL") from e

        if not hostname or ("." not in hostname and hostname not in BLOCKED_HOSTS):
            raise ValueError("Invalid URL")
        if has_credentials:
            raise ValueError("URLs with credentials are not allowed")
        if _is_private_address(hostname):
            raise ValueError("Cannot assess local or private addresses")
        return v


class ScoresResponse(BaseModel):
    content: float
    technical: float
    authority: float
    measurement: float
    overall: float


class StrengthResponse(BaseModel):
    category: str
    title: str
    description: str


class RecommendationResponse(BaseModel):
    category: str
    title: str
    description: str
    why: str | None = None
    priority: int | None = None


class PillarSummaryResponse(BaseModel):
    findings: str
    coverage_percent: int
    checks_pass: int
    checks_total: int


class AssessmentResponse(BaseModel):
    """Full assessment report."""

    version: str
    url: str
    scores: ScoresResponse
    maturity_level: str
    maturity_description: str
    strengths: list[StrengthResponse]
    recommendations_by_pillar: dict[str, list[RecommendationResponse]]
    pillar_summaries: dict[str, PillarSummaryResponse]
    top_priorities: list[RecommendationResponse]
    analyzed_at: str
    content_details: dict[str, Any] | None = None
    technical_details: dict[str, Any] | None = None
    authority_details: dict[str, Any] | None = None
    measurement_details: dict[str, Any] | None = None
