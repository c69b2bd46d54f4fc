"""Reddit brand mention search via the public JSON endpoint."""

import time
from dataclasses import dataclass, field
from typing import Any

import httpx
import structlog

from api.config import get_settings

logger = structlog.get_logger(__name__)

REDDIT_SEARCH_ENDPOINT = "https://www.reddit.com/search.json"
MAX_SUBREDDITS = 5
RECENT_WINDOW_SECONDS = 6 * 30 * 24 * 60 * 60


@dataclass
class RedditResult:
    """Brand mentions in Reddit posts from the past year."""

    has_mentions: bool = False
    post_count: int = 0
    subreddits: list[str] = field(default_factory=list)
    recent_mentions: int = 0

    @classmethod
    def empty(cls) -> "RedditResult":
        return cls()


def parse_reddit_search(data: dict[str, Any], now: float | None = None) -> RedditResult:
    """Summarize a search.json listing."""
    posts = ((data or {}).get("data") or {}).get("children") or []
    if not posts:
        return RedditResult.empty()

    cutoff = (now if now is not None else time.time()) - RECENT_WINDOW_SECONDS
    subreddits: dict[str, None] = {}
    recent = 0

    for post in posts:
        post_data = (post or {}).get("data") or {}
        subreddit = post_data.get("subreddit")
        if subreddit:
            subreddits.setdefault(subreddit, None)
        if (post_data.get("created_utc") or 0) > cutoff:
            recent += 1

    return RedditResult(
        has_mentions=True,
        post_count=len(posts),
        subreddits=list(subreddits)[:MAX_SUBREDDITS],
        recent_mentions=recent,
    )


async def search_reddit_mentions(brand: str, timeout: float | None = None) -> RedditResult:
    """Search Reddit for ``brand``; the empty result on any failure."""
    settings = get_settings()
    timeout = timeout if timeout is not None else settings.reddit_timeout
    params = {"q": brand, "sort": "relevance", "limit": "10", "t": "year"}

    try:
        async with httpx.AsyncClient(timeout=timeout, follow_redirects=True) as client:
            response = await client.get(
                REDDIT_SEARCH_ENDPOINT,
                params=params,
                headers={"User-Agent": settings.signal_user_agent},
            )
    except httpx.HTTPError as e:
        logger.warning("reddit_search_failed", brand=brand, error=str(e))
        return RedditResult.empty()

    if not response.is_success:
        logger.warning("reddit_search_bad_status", brand=brand, status_code=response.status_code)
        return RedditResult.empty()

    try:
        result = parse_reddit_search(response.json())
    except ValueError as e:
        logger.warning("reddit_invalid_json", brand=brand, error=str(e))
        return RedditResult.empty()

    logger.info("reddit_search_complete", brand=brand, posts=result.post_count)
    return result
