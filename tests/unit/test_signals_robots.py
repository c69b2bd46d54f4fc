"""Tests for robots.txt AI crawler detection."""

from unittest.mock import AsyncMock, patch

import httpx
import pytest

from assessment.signals.robots import RobotsResult, fetch_robots_txt, parse_robots_txt


class TestParseRobotsTxt:
    """Tests for parse_robots_txt."""

    def test_empty_content_is_absent(self) -> None:
        result = parse_robots_txt("")
        assert result.exists is False
        assert result.allows_all_crawlers is True

    def test_html_error_page_is_absent(self) -> None:
        assert parse_robots_txt("<html><body>Not found</body></html>").exists is False

    def test_allow_all(self) -> None:
        content = """
User-agent: *
Disallow:
Sitemap: https://example.com/sitemap.xml
"""
        result = parse_robots_txt(content)
        assert result.exists is True
        assert result.blocked_bots == []
        assert result.allows_all_crawlers is True
        assert result.has_sitemap_directive is True

    def test_gptbot_only_block(self) -> None:
        """Only the named bot is blocked; the wildcard still allows everything."""
        content = """
User-agent: GPTBot
Disallow: /

User-agent: *
Allow: /
"""
        result = parse_robots_txt(content)
        assert result.blocked_bots == ["GPTBot"]
        assert result.allows_all_crawlers is False
        assert result.has_sitemap_directive is False

    def test_partial_disallow_is_not_a_block(self) -> None:
        content = """
User-agent: ClaudeBot
Disallow: /private

User-agent: *
Disallow: /admin
"""
        result = parse_robots_txt(content)
        assert result.blocked_bots == []
        assert result.allows_all_crawlers is True

    def test_wildcard_block_all(self) -> None:
        content = "User-agent: *\nDisallow: /\n"
        result = parse_robots_txt(content)
        assert result.blocked_bots == []
        assert result.allows_all_crawlers is False

    def test_multiple_ai_bots_blocked(self) -> None:
        content = """
User-agent: CCBot
Disallow: /

User-agent: PerplexityBot
Disallow: /
"""
        result = parse_robots_txt(content)
        assert result.blocked_bots == ["PerplexityBot", "CCBot"]

    def test_user_agent_match_is_case_insensitive(self) -> None:
        result = parse_robots_txt("user-agent: gptbot\nDisallow: /\n")
        assert result.blocked_bots == ["GPTBot"]


class TestFetchRobotsTxt:
    """Tests for fetch_robots_txt."""

    @pytest.mark.asyncio
    async def test_missing_file(self) -> None:
        response = httpx.Response(404, request=httpx.Request("GET", "https://e.com/robots.txt"))
        with patch.object(httpx.AsyncClient, "get", new=AsyncMock(return_value=response)) as mock:
            result = await fetch_robots_txt("https://e.com")

        assert result == RobotsResult.absent()
        assert mock.call_args.args[0] == "https://e.com/robots.txt"

    @pytest.mark.asyncio
    async def test_network_error_is_absent(self) -> None:
        mock_get = AsyncMock(side_effect=httpx.ConnectTimeout("slow"))
        with patch.object(httpx.AsyncClient, "get", new=mock_get):
            result = await fetch_robots_txt("https://e.com")

        assert result.exists is False

    @pytest.mark.asyncio
    async def test_parses_body(self) -> None:
        response = httpx.Response(
            200,
            text="User-agent: GPTBot\nDisallow: /\n",
            request=httpx.Request("GET", "https://e.com/robots.txt"),
        )
        with patch.object(httpx.AsyncClient, "get", new=AsyncMock(return_value=response)):
            result = await fetch_robots_txt("https://e.com")

        assert result.exists is True
        assert result.blocked_bots == ["GPTBot"]
