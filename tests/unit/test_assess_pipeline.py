"""Tests for the end-to-end assessment pipeline with all network I/O mocked."""

import asyncio
from collections.abc import Iterator
from unittest.mock import AsyncMock, patch

import httpx
import pytest

from assessment.crawler.fetcher import FetchResult
from assessment.exceptions import AnalysisFailedError, FetchFailedError
from assessment.signals.llms_txt import LlmsTxtResult
from assessment.signals.reddit import RedditResult
from assessment.signals.robots import RobotsResult
from assessment.signals.sitemap import SitemapResult
from assessment.tasks.assess import analyze_website
from tests.fixtures import load_html

FAQ_PAGE = """
<html><head><title>FAQ</title></head><body><main>
<h1>Frequently asked questions</h1>
<h2>What does Acme cost?</h2><p>Acme plans are priced from $49 per month for small teams.</p>
</main></body></html>
"""


@pytest.fixture
def mocked_io() -> Iterator[dict[str, AsyncMock]]:
    """Patch the homepage fetch, every signal provider and the secondary crawl."""
    mocks = {
        "fetch_website": AsyncMock(
            return_value=FetchResult(
                html=load_html("rich_homepage.html"),
                url="https://acme.example/",
                load_time_ms=120,
                status_code=200,
            )
        ),
        "call_pagespeed_insights": AsyncMock(return_value=None),
        "fetch_robots_txt": AsyncMock(
            return_value=RobotsResult(exists=True, has_sitemap_directive=True)
        ),
        "fetch_sitemap_xml": AsyncMock(
            return_value=SitemapResult(exists=True, url_count=24, has_lastmod=True)
        ),
        "fetch_llms_txt": AsyncMock(return_value=LlmsTxtResult.absent()),
        "check_ssl_certificate": AsyncMock(return_value=None),
        "search_knowledge_graph": AsyncMock(return_value=None),
        "search_reddit_mentions": AsyncMock(return_value=RedditResult.empty()),
        "fetch_multiple_pages": AsyncMock(
            return_value={"https://acme.example/faq": FAQ_PAGE}
        ),
    }
    with patch.multiple("assessment.tasks.assess", **mocks):
        yield mocks


class TestAnalyzeWebsite:
    """Tests for analyze_website."""

    @pytest.mark.asyncio
    async def test_full_report(self, mocked_io: dict[str, AsyncMock]) -> None:
        report = await analyze_website("acme.example")

        mocked_io["fetch_website"].assert_awaited_once_with("https://acme.example/")
        assert report.url == "https://acme.example/"
        assert 0.0 <= report.scores.overall <= 5.0
        assert report.maturity_level in {"Leader", "Advanced", "Developing", "Emerging", "Foundation"}
        assert len(report.top_priorities) == 3
        assert [r.priority for r in report.top_priorities] == [1, 2, 3]
        assert report.technical_details.sitemap_url_count == 24
        assert "https://acme.example/faq" in report.content_details.page_types

    @pytest.mark.asyncio
    async def test_providers_receive_origin_and_brand(self, mocked_io: dict[str, AsyncMock]) -> None:
        await analyze_website("https://www.acme.example/?utm_source=newsletter")

        mocked_io["fetch_website"].assert_awaited_once_with("https://www.acme.example/")
        mocked_io["fetch_robots_txt"].assert_awaited_once_with("https://www.acme.example")
        mocked_io["check_ssl_certificate"].assert_awaited_once_with("www.acme.example")
        mocked_io["search_reddit_mentions"].assert_awaited_once_with("acme.example")
        mocked_io["search_knowledge_graph"].assert_awaited_once_with("acme.example")

    @pytest.mark.asyncio
    async def test_crawls_priority_links(self, mocked_io: dict[str, AsyncMock]) -> None:
        await analyze_website("acme.example")

        links = mocked_io["fetch_multiple_pages"].call_args.args[0]
        assert 0 < len(links) <= 5
        assert all(link.startswith("https://acme.example/") for link in links)

    @pytest.mark.asyncio
    async def test_homepage_failure_is_fatal(self, mocked_io: dict[str, AsyncMock]) -> None:
        mocked_io["fetch_website"].side_effect = FetchFailedError(
            "https://down.example/", "Failed to fetch website: connection refused"
        )

        with pytest.raises(AnalysisFailedError) as exc_info:
            await analyze_website("down.example")

        assert exc_info.value.url == "https://down.example/"
        assert isinstance(exc_info.value.__cause__, FetchFailedError)
        mocked_io["fetch_multiple_pages"].assert_not_called()

    @pytest.mark.asyncio
    async def test_provider_crash_uses_default(self, mocked_io: dict[str, AsyncMock]) -> None:
        mocked_io["fetch_sitemap_xml"].side_effect = RuntimeError("unexpected")
        mocked_io["search_reddit_mentions"].side_effect = KeyError("data")

        report = await analyze_website("acme.example")

        assert report.technical_details.sitemap_found is False
        assert report.authority_details.reddit_mentions == 0
        assert "Create XML Sitemap" in [r.title for r in report.recommendations]

    @pytest.mark.asyncio
    async def test_redirect_target_is_reported(self, mocked_io: dict[str, AsyncMock]) -> None:
        mocked_io["fetch_website"].return_value = FetchResult(
            html=load_html("bare_homepage.html"),
            url="https://www.bobs.example/home",
            load_time_ms=80,
            status_code=200,
        )
        mocked_io["fetch_multiple_pages"].return_value = {}

        report = await analyze_website("bobs.example")

        assert report.url == "https://www.bobs.example/home"
        assert report.scores.content == 0.0

    @pytest.mark.asyncio
    async def test_homepage_failure_cancels_pending_signals(
        self, mocked_io: dict[str, AsyncMock]
    ) -> None:
        started = asyncio.Event()
        cancelled = asyncio.Event()

        async def slow_reddit(brand: str) -> RedditResult:
            started.set()
            try:
                await asyncio.sleep(30)
            except asyncio.CancelledError:
                cancelled.set()
                raise
            return RedditResult.empty()

        async def failing_fetch(url: str) -> FetchResult:
            await started.wait()
            raise FetchFailedError(url, "Failed to fetch website: connection refused")

        mocked_io["search_reddit_mentions"].side_effect = slow_reddit
        mocked_io["fetch_website"].side_effect = failing_fetch

        with pytest.raises(AnalysisFailedError):
            await asyncio.wait_for(analyze_website("down.example"), timeout=5)

        assert cancelled.is_set()

    @pytest.mark.asyncio
    async def test_pagespeed_network_error(self, mocked_io: dict[str, AsyncMock]) -> None:
        """The report is still built and the viewport check falls back to the meta tag."""
        mocked_io["call_pagespeed_insights"].side_effect = httpx.ConnectError("unreachable")

        report = await analyze_website("acme.example")

        assert report.technical_details.performance_score is None
        titles = [s.title for s in report.strengths]
        assert "Excellent Page Speed" not in titles
        assert "Acceptable Page Speed" not in titles
        assert "Mobile-Responsive" in titles
