"""llms.txt detection.

llms.txt is a plain-text index that points language models at a site's
most useful content (https://llmstxt.org).
"""

from dataclasses import dataclass

import httpx
import structlog

from api.config import get_settings

logger = structlog.get_logger(__name__)

MIN_LLMS_TXT_LENGTH = 10


@dataclass
class LlmsTxtResult:
    """Whether /llms.txt exists."""

    exists: bool = False
    content: str | None = None

    @classmethod
    def absent(cls) -> "LlmsTxtResult":
        return cls()


def validate_llms_txt(content: str) -> LlmsTxtResult:
    """Reject HTML error pages and near-empty bodies."""
    if "<html" in content.lower() or len(content) < MIN_LLMS_TXT_LENGTH:
        return LlmsTxtResult.absent()
    return LlmsTxtResult(exists=True, content=content)


async def fetch_llms_txt(origin: str, timeout: float | None = None) -> LlmsTxtResult:
    """Fetch {origin}/llms.txt; absent on any failure."""
    settings = get_settings()
    timeout = timeout if timeout is not None else settings.file_check_timeout
    llms_url = f"{origin}/llms.txt"

    try:
        async with httpx.AsyncClient(timeout=timeout, follow_redirects=True) as client:
            response = await client.get(llms_url, headers={"User-Agent": settings.signal_user_agent})
    except httpx.HTTPError as e:
        logger.warning("llms_txt_fetch_error", url=llms_url, error=str(e))
        return LlmsTxtResult.absent()

    if not response.is_success:
        logger.info("llms_txt_not_found", url=llms_url, status_code=response.status_code)
        return LlmsTxtResult.absent()

    return validate_llms_txt(response.text)
