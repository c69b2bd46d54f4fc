"""robots.txt retrieval and AI crawler block detection."""

import re
from dataclasses import dataclass, field

import httpx
import structlog

from api.config import get_settings

logger = structlog.get_logger(__name__)

# AI crawlers checked for an explicit blanket disallow
AI_BOT_NAMES = (
    "GPTBot",
    "ChatGPT-User",
    "OAI-SearchBot",
    "ClaudeBot",
    "Claude-Web",
    "anthropic-ai",
    "PerplexityBot",
    "Google-Extended",
    "CCBot",
    "cohere-ai",
)

SITEMAP_DIRECTIVE = re.compile(r"^sitemap:", re.IGNORECASE | re.MULTILINE)
DISALLOW_ALL = re.compile(r"Disallow:\s*/\s*$", re.MULTILINE)


@dataclass
class RobotsResult:
    """What robots.txt says about AI crawlers."""

    exists: bool = False
    has_sitemap_directive: bool = False
    blocked_bots: list[str] = field(default_factory=list)
    allows_all_crawlers: bool = True
    content: str = ""

    @classmethod
    def absent(cls) -> "RobotsResult":
        return cls()


def _agent_section(content: str, agent_pattern: str) -> str | None:
    """Text from an agent's User-agent line up to the next User-agent line."""
    match = re.search(
        rf"User-agent:\s*{agent_pattern}[\s\S]*?(?=User-agent:|\Z)",
        content,
        re.IGNORECASE,
    )
    return match.group(0) if match else None


def _blocks_everything(section: str | None) -> bool:
    return bool(section and DISALLOW_ALL.search(section))


def parse_robots_txt(content: str) -> RobotsResult:
    """
    Detect AI crawler blocks in robots.txt content.

    A bot counts as blocked when its own User-agent section contains
    ``Disallow: /``. Grouped user-agent lines are not merged.
    """
    if "user-agent" not in content.lower():
        return RobotsResult.absent()

    blocked = [
        bot for bot in AI_BOT_NAMES if _blocks_everything(_agent_section(content, re.escape(bot)))
    ]
    wildcard_blocks_all = _blocks_everything(_agent_section(content, r"\*"))

    return RobotsResult(
        exists=True,
        has_sitemap_directive=bool(SITEMAP_DIRECTIVE.search(content)),
        blocked_bots=blocked,
        allows_all_crawlers=not blocked and not wildcard_blocks_all,
        content=content,
    )


async def fetch_robots_txt(origin: str, timeout: float | None = None) -> RobotsResult:
    """Fetch and parse {origin}/robots.txt; absent on any failure."""
    settings = get_settings()
    timeout = timeout if timeout is not None else settings.file_check_timeout
    robots_url = f"{origin}/robots.txt"

    try:
        async with httpx.AsyncClient(timeout=timeout, follow_redirects=True) as client:
            response = await client.get(
                robots_url, headers={"User-Agent": settings.signal_user_agent}
            )
    except httpx.HTTPError as e:
        logger.warning("robots_txt_fetch_error", url=robots_url, error=str(e))
        return RobotsResult.absent()

    if not response.is_success:
        logger.info("robots_txt_not_found", url=robots_url, status_code=response.status_code)
        return RobotsResult.absent()

    result = parse_robots_txt(response.text)
    logger.info(
        "robots_txt_checked",
        url=robots_url,
        exists=result.exists,
        blocked_bots=result.blocked_bots,
    )
    return result
