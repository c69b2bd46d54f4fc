"""Shared HTML fixtures and builders for analyzer tests."""

from pathlib import Path

from assessment.extraction.parser import ParsedPage, parse_page

FIXTURES_DIR = Path(__file__).parent


def load_html(name: str) -> str:
    return (FIXTURES_DIR / name).read_text(encoding="utf-8")


def page_from_fixture(name: str, url: str = "https://example.com/") -> ParsedPage:
    return parse_page(load_html(name), url)


def page_from_html(body: str, url: str = "https://example.com/", head: str = "") -> ParsedPage:
    """Wrap a body fragment in a minimal document and parse it."""
    html = f"<html><head><title>Test</title>{head}</head><body>{body}</body></html>"
    return parse_page(html, url)
