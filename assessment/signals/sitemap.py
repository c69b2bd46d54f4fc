"""sitemap.xml presence check."""

import re
from dataclasses import dataclass

import httpx
import structlog

from api.config import get_settings

logger = structlog.get_logger(__name__)

URL_ENTRY = re.compile(r"<url>", re.IGNORECASE)


@dataclass
class SitemapResult:
    """Whether /sitemap.xml exists and what it lists."""

    exists: bool = False
    url_count: int | None = None
    has_lastmod: bool | None = None

    @classmethod
    def absent(cls) -> "SitemapResult":
        return cls()


def parse_sitemap_xml(text: str) -> SitemapResult:
    """Count <url> entries in a urlset or sitemap index body."""
    if "<urlset" not in text and "<sitemapindex" not in text:
        return SitemapResult.absent()
    return SitemapResult(
        exists=True,
        url_count=len(URL_ENTRY.findall(text)),
        has_lastmod="<lastmod>" in text,
    )


async def fetch_sitemap_xml(origin: str, timeout: float | None = None) -> SitemapResult:
    """Fetch {origin}/sitemap.xml; absent on any failure."""
    settings = get_settings()
    timeout = timeout if timeout is not None else settings.file_check_timeout
    sitemap_url = f"{origin}/sitemap.xml"

    try:
        async with httpx.AsyncClient(timeout=timeout, follow_redirects=True) as client:
            response = await client.get(
                sitemap_url, headers={"User-Agent": settings.signal_user_agent}
            )
    except httpx.HTTPError as e:
        logger.warning("sitemap_fetch_error", url=sitemap_url, error=str(e))
        return SitemapResult.absent()

    if not response.is_success:
        return SitemapResult.absent()

    result = parse_sitemap_xml(response.text)
    logger.info("sitemap_checked", url=sitemap_url, exists=result.exists, url_count=result.url_count)
    return result
