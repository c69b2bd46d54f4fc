"""Unit tests for the Authority pillar checks."""

from assessment.analyzers.authority import (
    analyze_authority,
    author_schema_depth,
    count_external_citations,
    has_author_attribution,
    has_expert_quotes,
    has_press_mentions,
    social_platforms_linked,
)
from assessment.analyzers.models import Pillar
from assessment.signals.bundle import ExternalSignals
from assessment.signals.knowledge_graph import KnowledgeGraphResult
from assessment.signals.reddit import RedditResult
from tests.fixtures import page_from_fixture, page_from_html


def _titles(items) -> list[str]:
    return [item.title for item in items]


# ==============================================================================
# Predicates
# ==============================================================================


class TestAuthorAttribution:
    """Tests for author detection."""

    def test_byline(self):
        page = page_from_html("<p>Guide by Jane Smith</p>")
        assert has_author_attribution([page.soup], [], "Guide by Jane Smith")

    def test_lowercase_by_is_not_a_byline(self):
        page = page_from_html("<p>Made by the team</p>")
        assert not has_author_attribution([page.soup], [], "Made by the team")

    def test_schema_author(self):
        blocks = [{"@type": "Article", "author": {"@type": "Person", "name": "Jane"}}]
        assert has_author_attribution([page_from_html("").soup], blocks, "")

    def test_meta_author(self):
        page = page_from_html("", head='<meta name="author" content="Jane">')
        assert has_author_attribution([page.soup], [], "")


class TestSocialPlatforms:
    """Tests for social profile link detection."""

    def test_platforms_in_fixed_order(self):
        page = page_from_html(
            '<a href="https://www.youtube.com/@acme">YT</a>'
            '<a href="https://x.com/acme">X</a>'
            '<a href="https://twitter.com/acme">Twitter</a>'
        )
        assert social_platforms_linked([page.soup]) == ["Twitter/X", "YouTube"]

    def test_lookalike_domain_is_ignored(self):
        page = page_from_html('<a href="https://notlinkedin.com/acme">Fake</a>')
        assert social_platforms_linked([page.soup]) == []


class TestExternalCitations:
    """Tests for outbound citation counting."""

    def test_excludes_own_site_and_social(self):
        page = page_from_html(
            '<a href="https://acme.example/about">Own</a>'
            '<a href="https://blog.acme.example/post">Own subdomain</a>'
            '<a href="https://linkedin.com/company/acme">Social</a>'
            '<a href="https://research.example/paper">Paper</a>'
            '<a href="/relative">Relative</a>'
        )
        assert count_external_citations([page.soup], "acme.example") == 1


class TestPressMentions:
    def test_major_outlet(self):
        assert has_press_mentions("We were covered by Bloomberg last year.")

    def test_no_mentions(self):
        assert not has_press_mentions("We fix pipes.")


class TestExpertQuotes:
    def test_single_attributed_quote(self):
        page = page_from_html("<blockquote>Great<cite>Ann</cite></blockquote>")
        assert has_expert_quotes([page.soup])

    def test_single_bare_quote(self):
        page = page_from_html("<blockquote>Great</blockquote><div>x</div>")
        assert not has_expert_quotes([page.soup])


class TestAuthorSchemaDepth:
    def test_person_block(self):
        blocks = [{"@type": "Person", "jobTitle": "CTO", "sameAs": ["https://x.com/a"]}]
        assert author_schema_depth(blocks) == 2

    def test_nested_author(self):
        blocks = [{"@type": "Article", "author": {"name": "A", "affiliation": "Acme"}}]
        assert author_schema_depth(blocks) == 1

    def test_no_author(self):
        assert author_schema_depth([{"@type": "Organization"}]) == 0


# ==============================================================================
# Analyzer
# ==============================================================================


class TestAnalyzeAuthority:
    """Tests for the full Authority analysis."""

    def test_bare_page(self):
        page = page_from_fixture("bare_homepage.html", url="https://bobs.example/")
        result = analyze_authority(page, None, ExternalSignals())

        assert result.pillar == Pillar.AUTHORITY
        assert result.score == 0.0
        assert result.strengths == []
        titles = _titles(result.recommendations)
        assert "Add Author Information" in titles
        assert "Build Reddit Presence" in titles
        assert "Build Wikipedia Presence" in titles

    def test_rich_page(self):
        page = page_from_fixture("rich_homepage.html", url="https://acme.example/")
        result = analyze_authority(page, None, ExternalSignals(), url="https://acme.example/")

        titles = _titles(result.strengths)
        for expected in (
            "Author Attribution",
            "About Page Present",
            "Contact Information",
            "Community Engagement",
            "Social Media Presence",
            "Content Citations",
            "Reviews Present",
            "Testimonials Present",
            "Case Studies/Results",
            "Expert Quotes",
            "Rich Author Schema",
        ):
            assert expected in titles
        assert result.details.social_platforms == ["Twitter/X", "LinkedIn", "YouTube"]
        assert result.details.external_citation_count == 4
        assert 4.0 <= result.score <= 5.0

    def test_additional_pages_contribute(self):
        home = page_from_html("<p>Home</p>")
        contact = page_from_html(
            '<a href="mailto:hi@example.com">Email</a>', url="https://example.com/contact"
        )
        result = analyze_authority(home, {contact.url: contact}, ExternalSignals())

        assert "Contact Information" in _titles(result.strengths)

    def test_reddit_strong_presence(self):
        signals = ExternalSignals(
            reddit=RedditResult(
                has_mentions=True, post_count=3, subreddits=["marketing", "SEO"], recent_mentions=1
            )
        )
        result = analyze_authority(page_from_html(""), None, signals)

        strength = next(s for s in result.strengths if s.title == "Reddit Brand Presence")
        assert strength.description == (
            "Found 3 Reddit posts mentioning your brand across subreddits: r/marketing, r/SEO."
        )
        assert result.details.reddit_mentions == 3
        assert result.score == 0.5

    def test_reddit_some_presence(self):
        signals = ExternalSignals(
            reddit=RedditResult(has_mentions=True, post_count=1, subreddits=["SEO"])
        )
        result = analyze_authority(page_from_html(""), None, signals)

        assert "Some Reddit Presence" in _titles(result.strengths)
        assert result.score == 0.25

    def test_knowledge_graph_found(self):
        signals = ExternalSignals(
            knowledge_graph=KnowledgeGraphResult(found=True, name="Acme", type="Corporation")
        )
        result = analyze_authority(page_from_html(""), None, signals)

        strength = next(s for s in result.strengths if s.title == "Knowledge Graph Presence")
        assert '"Corporation"' in strength.description
        assert "Build Wikipedia Presence" not in _titles(result.recommendations)
        assert result.details.knowledge_graph_found is True

    def test_knowledge_graph_not_found(self):
        signals = ExternalSignals(knowledge_graph=KnowledgeGraphResult(found=False))
        result = analyze_authority(page_from_html(""), None, signals)

        assert result.details.knowledge_graph_found is False
        assert "Build Wikipedia Presence" in _titles(result.recommendations)
