"""End-to-end website assessment."""

import asyncio
from datetime import UTC, datetime
from urllib.parse import urlparse

import structlog

from api.config import get_settings
from assessment.analyzers.authority import analyze_authority
from assessment.analyzers.content import analyze_content
from assessment.analyzers.measurement import analyze_measurement
from assessment.analyzers.models import PILLAR_ORDER, Pillar, PillarAnalysis
from assessment.analyzers.technical import analyze_technical
from assessment.crawler.fetcher import FetchResult, fetch_multiple_pages, fetch_website
from assessment.crawler.links import extract_internal_links
from assessment.crawler.url import ensure_scheme, get_brand_hostname, get_origin, normalize_url
from assessment.exceptions import AnalysisFailedError, FetchError
from assessment.extraction.parser import ParsedPage, parse_page
from assessment.reports.contract import AEOReport, AEOScores
from assessment.scoring.aggregate import (
    calculate_overall_score,
    generate_pillar_summaries,
    generate_top_priorities,
    get_maturity_level,
)
from assessment.signals.bundle import ExternalSignals
from assessment.signals.knowledge_graph import search_knowledge_graph
from assessment.signals.llms_txt import LlmsTxtResult, fetch_llms_txt
from assessment.signals.pagespeed import call_pagespeed_insights
from assessment.signals.reddit import RedditResult, search_reddit_mentions
from assessment.signals.robots import RobotsResult, fetch_robots_txt
from assessment.signals.settle import settle
from assessment.signals.sitemap import SitemapResult, fetch_sitemap_xml
from assessment.signals.ssl_check import check_ssl_certificate

logger = structlog.get_logger(__name__)


async def _gather_homepage_and_signals(url: str) -> tuple[FetchResult, ExternalSignals]:
    """
    Fetch the homepage and every external signal in one round.

    The signal lookups run as tasks beside the homepage fetch; if the fetch
    fails they are cancelled before the error propagates.
    """
    origin = get_origin(url)
    hostname = urlparse(url).hostname or ""
    brand = get_brand_hostname(url)

    signal_tasks = [
        asyncio.create_task(settle(call_pagespeed_insights(url), None, name="pagespeed")),
        asyncio.create_task(settle(fetch_robots_txt(origin), RobotsResult.absent(), name="robots_txt")),
        asyncio.create_task(settle(fetch_sitemap_xml(origin), SitemapResult.absent(), name="sitemap")),
        asyncio.create_task(settle(fetch_llms_txt(origin), LlmsTxtResult.absent(), name="llms_txt")),
        asyncio.create_task(settle(check_ssl_certificate(hostname), None, name="ssl")),
        asyncio.create_task(settle(search_knowledge_graph(brand), None, name="knowledge_graph")),
        asyncio.create_task(settle(search_reddit_mentions(brand), RedditResult.empty(), name="reddit")),
    ]

    try:
        fetched = await fetch_website(url)
    except BaseException:
        for task in signal_tasks:
            task.cancel()
        await asyncio.gather(*signal_tasks, return_exceptions=True)
        raise

    pagespeed, robots, sitemap, llms_txt, ssl, knowledge_graph, reddit = await asyncio.gather(
        *signal_tasks
    )
    return fetched, ExternalSignals(
        pagespeed=pagespeed,
        ssl=ssl,
        sitemap=sitemap,
        robots=robots,
        llms_txt=llms_txt,
        knowledge_graph=knowledge_graph,
        reddit=reddit,
    )


async def _crawl_additional_pages(homepage: ParsedPage) -> dict[str, ParsedPage]:
    settings = get_settings()
    links = extract_internal_links(homepage.soup, homepage.url, limit=settings.max_additional_pages)
    if not links:
        return {}

    bodies = await fetch_multiple_pages(links)
    return {page_url: parse_page(html, page_url) for page_url, html in bodies.items()}


async def analyze_website(url: str) -> AEOReport:
    """
    Run a full AEO assessment of a website.

    The homepage fetch is the only fatal step. External signals degrade to
    their defaults and failed secondary pages are skipped.

    Args:
        url: Website URL, with or without a scheme

    Returns:
        The assessment report

    Raises:
        AnalysisFailedError: The homepage could not be fetched
    """
    normalized = normalize_url(ensure_scheme(url))
    logger.info("assessment_started", url=normalized)

    try:
        fetched, signals = await _gather_homepage_and_signals(normalized)
    except FetchError as e:
        logger.warning("assessment_failed", url=normalized, reason=e.message)
        raise AnalysisFailedError(normalized, e.message) from e

    homepage = parse_page(fetched.html, fetched.url)
    additional_pages = await _crawl_additional_pages(homepage)

    analyses: dict[Pillar, PillarAnalysis] = {
        analysis.pillar: analysis
        for analysis in (
            analyze_content(homepage, additional_pages),
            analyze_technical(homepage, fetched.url, signals),
            analyze_authority(homepage, additional_pages, signals, fetched.url),
            analyze_measurement(homepage),
        )
    }
    report = build_report(fetched.url, analyses)

    logger.info(
        "assessment_complete",
        url=report.url,
        overall=report.scores.overall,
        maturity_level=report.maturity_level,
        pages_analyzed=1 + len(additional_pages),
    )
    return report


def build_report(url: str, analyses: dict[Pillar, PillarAnalysis]) -> AEOReport:
    """Combine the four pillar analyses into a report."""
    ordered: list[PillarAnalysis] = [analyses[pillar] for pillar in PILLAR_ORDER]
    content, technical, authority, measurement = ordered

    overall = calculate_overall_score(
        content.score, technical.score, authority.score, measurement.score
    )
    maturity = get_maturity_level(overall)
    strengths = [strength for analysis in ordered for strength in analysis.strengths]
    recommendations_by_pillar = {a.pillar: list(a.recommendations) for a in ordered}

    return AEOReport(
        url=url,
        scores=AEOScores(
            content=content.score,
            technical=technical.score,
            authority=authority.score,
            measurement=measurement.score,
            overall=overall,
        ),
        maturity_level=maturity.level,
        maturity_description=maturity.description,
        analyzed_at=datetime.now(UTC),
        strengths=strengths,
        recommendations_by_pillar=recommendations_by_pillar,
        pillar_summaries=generate_pillar_summaries(
            {a.pillar: a.score for a in ordered}, strengths, url
        ),
        top_priorities=generate_top_priorities(recommendations_by_pillar),
        content_details=content.details,
        technical_details=technical.details,
        authority_details=authority.details,
        measurement_details=measurement.details,
    )
