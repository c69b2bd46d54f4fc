"""HTTP fetching for the homepage and priority pages."""

import asyncio
import time
from dataclasses import dataclass, field

import httpx
import structlog

from api.config import get_settings
from assessment.exceptions import FetchFailedError, FetchTimeoutError

logger = structlog.get_logger(__name__)


@dataclass
class FetchResult:
    """Result of fetching the homepage."""

    html: str
    url: str  # After redirects
    load_time_ms: int
    status_code: int
    headers: dict[str, str] = field(default_factory=dict)

    @property
    def success(self) -> bool:
        return 200 <= self.status_code < 300


def _browser_headers(user_agent: str) -> dict[str, str]:
    return {
        "User-Agent": user_agent,
        "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
        "Accept-Language": "en-US,en;q=0.5",
        "Cache-Control": "no-cache",
    }


async def fetch_website(url: str, timeout: float | None = None) -> FetchResult:
    """
    Fetch a page's HTML, following redirects.

    Args:
        url: The URL to fetch
        timeout: Hard timeout in seconds (defaults to settings.fetch_timeout)

    Returns:
        FetchResult with the body, final URL, load time and headers

    Raises:
        FetchTimeoutError: No response within the timeout
        FetchFailedError: Any other transport failure
    """
    settings = get_settings()
    timeout = timeout if timeout is not None else settings.fetch_timeout
    start = time.perf_counter()

    try:
        async with httpx.AsyncClient(timeout=timeout, follow_redirects=True) as client:
            response = await client.get(url, headers=_browser_headers(settings.user_agent))
    except httpx.TimeoutException as e:
        logger.warning("homepage_fetch_timeout", url=url, timeout=timeout)
        raise FetchTimeoutError(url, timeout) from e
    except httpx.HTTPError as e:
        logger.warning("homepage_fetch_failed", url=url, error=str(e))
        raise FetchFailedError(url, f"Failed to fetch website: {e}") from e

    load_time_ms = int((time.perf_counter() - start) * 1000)
    result = FetchResult(
        html=response.text,
        url=str(response.url),
        load_time_ms=load_time_ms,
        status_code=response.status_code,
        headers=dict(response.headers),
    )

    if not result.success:
        logger.warning("homepage_non_success_status", url=url, status_code=response.status_code)

    logger.info(
        "homepage_fetched",
        url=url,
        final_url=result.url,
        status_code=result.status_code,
        load_time_ms=load_time_ms,
    )
    return result


async def _fetch_page(client: httpx.AsyncClient, url: str, user_agent: str) -> str | None:
    """Fetch one secondary page; None when it fails or is not 2xx."""
    try:
        response = await client.get(
            url,
            headers={
                "User-Agent": user_agent,
                "Accept": "text/html,application/xhtml+xml",
            },
        )
    except httpx.HTTPError as e:
        logger.info("page_crawl_failed", url=url, error=str(e))
        return None

    if not response.is_success:
        logger.info("page_crawl_skipped", url=url, status_code=response.status_code)
        return None
    return response.text


async def fetch_multiple_pages(urls: list[str], timeout: float | None = None) -> dict[str, str]:
    """
    Fetch secondary pages concurrently, each with its own timeout.

    Failed and non-2xx pages are excluded. The returned mapping keeps the
    order of ``urls``.
    """
    if not urls:
        return {}

    settings = get_settings()
    timeout = timeout if timeout is not None else settings.page_timeout

    async with httpx.AsyncClient(timeout=timeout, follow_redirects=True) as client:
        bodies = await asyncio.gather(
            *(_fetch_page(client, url, settings.user_agent) for url in urls)
        )

    pages = {url: html for url, html in zip(urls, bodies, strict=True) if html is not None}
    logger.info("pages_crawled", requested=len(urls), fetched=len(pages))
    return pages
