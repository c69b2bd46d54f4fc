"""Google PageSpeed Insights (Lighthouse) lookup."""

from dataclasses import dataclass, field
from typing import Any

import httpx
import structlog

from api.config import get_settings

logger = structlog.get_logger(__name__)

PAGESPEED_ENDPOINT = "https://www.googleapis.com/pagespeedonline/v5/runPagespeed"
PAGESPEED_CATEGORIES = ("performance", "accessibility", "seo", "best-practices")


@dataclass
class CoreWebVitals:
    """Lab metrics in milliseconds (CLS is unitless)."""

    fcp: float = 0.0
    lcp: float = 0.0
    cls: float = 0.0
    tbt: float = 0.0
    speed_index: float = 0.0


@dataclass
class PageSpeedAudits:
    """Pass/fail for the Lighthouse audits the analyzers use."""

    viewport: bool = False
    document_title: bool = False
    meta_description: bool = False
    is_indexable: bool = False
    canonical: bool = False
    image_alt_score: float = 0.0
    link_text_score: float = 0.0


@dataclass
class PageSpeedResult:
    """Lighthouse category scores (0-100), metrics and audits."""

    performance_score: int
    accessibility_score: int
    seo_score: int
    best_practices_score: int
    metrics: CoreWebVitals = field(default_factory=CoreWebVitals)
    audits: PageSpeedAudits = field(default_factory=PageSpeedAudits)


def _category_score(categories: dict[str, Any], name: str) -> int:
    score = (categories.get(name) or {}).get("score") or 0
    return round(score * 100)


def _audit_passed(audits: dict[str, Any], name: str) -> bool:
    return (audits.get(name) or {}).get("score") == 1


def _numeric(audits: dict[str, Any], name: str) -> float:
    return float((audits.get(name) or {}).get("numericValue") or 0)


def parse_pagespeed_response(data: dict[str, Any]) -> PageSpeedResult | None:
    """Build a PageSpeedResult from a runPagespeed response body."""
    lhr = data.get("lighthouseResult")
    if not lhr:
        return None

    categories = lhr.get("categories") or {}
    audits = lhr.get("audits") or {}

    return PageSpeedResult(
        performance_score=_category_score(categories, "performance"),
        accessibility_score=_category_score(categories, "accessibility"),
        seo_score=_category_score(categories, "seo"),
        best_practices_score=_category_score(categories, "best-practices"),
        metrics=CoreWebVitals(
            fcp=_numeric(audits, "first-contentful-paint"),
            lcp=_numeric(audits, "largest-contentful-paint"),
            cls=_numeric(audits, "cumulative-layout-shift"),
            tbt=_numeric(audits, "total-blocking-time"),
            speed_index=_numeric(audits, "speed-index"),
        ),
        audits=PageSpeedAudits(
            viewport=_audit_passed(audits, "viewport"),
            document_title=_audit_passed(audits, "document-title"),
            meta_description=_audit_passed(audits, "meta-description"),
            is_indexable=_audit_passed(audits, "is-crawlable"),
            canonical=_audit_passed(audits, "canonical"),
            image_alt_score=float((audits.get("image-alt") or {}).get("score") or 0),
            link_text_score=float((audits.get("link-text") or {}).get("score") or 0),
        ),
    )


async def call_pagespeed_insights(url: str, timeout: float | None = None) -> PageSpeedResult | None:
    """
    Run a mobile PageSpeed Insights audit for ``url``.

    Works without an API key (at a lower quota); returns None on any failure.
    """
    settings = get_settings()
    timeout = timeout if timeout is not None else settings.pagespeed_timeout

    params: list[tuple[str, str]] = [("url", url), ("strategy", "mobile")]
    if settings.pagespeed_api_key:
        params.append(("key", settings.pagespeed_api_key))
    params.extend(("category", category) for category in PAGESPEED_CATEGORIES)

    try:
        async with httpx.AsyncClient(timeout=timeout) as client:
            response = await client.get(PAGESPEED_ENDPOINT, params=params)
    except httpx.HTTPError as e:
        logger.warning("pagespeed_request_failed", url=url, error=str(e))
        return None

    if not response.is_success:
        logger.warning("pagespeed_bad_status", url=url, status_code=response.status_code)
        return None

    try:
        data = response.json()
    except ValueError as e:
        logger.warning("pagespeed_invalid_json", url=url, error=str(e))
        return None

    result = parse_pagespeed_response(data)
    if result:
        logger.info(
            "pagespeed_complete",
            url=url,
            performance=result.performance_score,
            accessibility=result.accessibility_score,
        )
    return result
