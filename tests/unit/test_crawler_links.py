"""Tests for priority internal link discovery."""

from bs4 import BeautifulSoup

from assessment.crawler.links import extract_internal_links, link_priority


def _soup(links: list[str]) -> BeautifulSoup:
    anchors = "".join(f'<a href="{href}">link</a>' for href in links)
    return BeautifulSoup(f"<html><body>{anchors}</body></html>", "html.parser")


class TestLinkPriority:
    """Tests for link_priority."""

    def test_priority_bands(self) -> None:
        assert link_priority("https://example.com/faq") == 0
        assert link_priority("https://example.com/about-us") == 1
        assert link_priority("https://example.com/blog/post") == 2
        assert link_priority("https://example.com/services") == 3
        assert link_priority("https://example.com/pricing") == 10


class TestExtractInternalLinks:
    """Tests for extract_internal_links."""

    def test_orders_faq_about_blog(self) -> None:
        """FAQ sorts before About, which sorts before Blog."""
        soup = _soup(["/blog", "/about", "/pricing", "/faq"])
        links = extract_internal_links(soup, "https://example.com/")
        assert links == [
            "https://example.com/faq",
            "https://example.com/about",
            "https://example.com/blog",
            "https://example.com/pricing",
        ]

    def test_same_host_only(self) -> None:
        soup = _soup(["https://other.com/about", "https://blog.example.com/blog", "/about"])
        links = extract_internal_links(soup, "https://example.com/")
        assert links == ["https://example.com/about"]

    def test_skips_fragments_and_special_schemes(self) -> None:
        soup = _soup(["#faq", "javascript:void(0)", "mailto:a@example.com", "tel:123"])
        assert extract_internal_links(soup, "https://example.com/") == []

    def test_ignores_non_priority_paths(self) -> None:
        soup = _soup(["/login", "/cart", "/"])
        assert extract_internal_links(soup, "https://example.com/") == []

    def test_deduplicates_on_path(self) -> None:
        """Query strings and fragments collapse onto one URL."""
        soup = _soup(["/about?x=1", "/about#team", "https://example.com/about"])
        assert extract_internal_links(soup, "https://example.com/") == ["https://example.com/about"]

    def test_limited_to_five(self) -> None:
        soup = _soup(
            ["/faq", "/about", "/blog", "/services", "/team", "/contact", "/pricing", "/news"]
        )
        links = extract_internal_links(soup, "https://example.com/")
        assert len(links) == 5
        assert links[0] == "https://example.com/faq"

    def test_resolves_relative_links(self) -> None:
        soup = _soup(["about"])
        links = extract_internal_links(soup, "https://example.com/")
        assert links == ["https://example.com/about"]
