"""Tests for the Content pillar."""

import json
from dataclasses import replace
from unittest.mock import patch

import pytest

from assessment.analyzers.content import (
    PageType,
    analyze_content,
    classify_page,
    content_length_points,
    count_data_points,
    has_faq,
    is_answer_first,
    is_extractable,
    measure_readability,
    readability_points,
)
from assessment.analyzers.models import Pillar
from assessment.extraction.cleaner import content_area
from assessment.extraction.parser import count_words
from tests.fixtures import page_from_fixture, page_from_html


def _titles(items) -> list[str]:
    return [item.title for item in items]


class TestContentLengthPoints:
    """Length tiers are exclusive lower bounds."""

    @pytest.mark.parametrize(
        ("words", "expected"),
        [(800, 0.0), (801, 0.5), (1500, 0.5), (1501, 1.0)],
    )
    def test_tiers(self, words: int, expected: float) -> None:
        assert content_length_points(words) == expected


class TestReadabilityPoints:
    """Tests for the Flesch reading ease bands."""

    def test_optimal(self) -> None:
        assert readability_points(65.0) == 0.5

    def test_good(self) -> None:
        assert readability_points(55.0) == 0.25
        assert readability_points(78.0) == 0.25

    def test_outside(self) -> None:
        assert readability_points(30.0) == 0.0


class TestAnswerFirst:
    """Tests for section opening detection."""

    def test_definition(self) -> None:
        assert is_answer_first("Answer engine optimization is the practice of structuring content.")

    def test_starts_with_number(self) -> None:
        assert is_answer_first("42 percent of buyers ask an assistant first.")

    def test_yes_no(self) -> None:
        assert is_answer_first("Yes, schema markup helps assistants parse pages.")

    def test_meta_intro(self) -> None:
        assert not is_answer_first("In this section, we explore what AEO is and why it matters.")

    def test_question(self) -> None:
        assert not is_answer_first("What is AEO and why should you care about it?")

    def test_too_short(self) -> None:
        assert not is_answer_first("AEO is good.")


class TestExtractable:
    """Tests for self-contained paragraph detection."""

    def test_standalone(self) -> None:
        assert is_extractable("Acme tracks citations across four assistants every day.")

    def test_backward_reference(self) -> None:
        assert not is_extractable("As mentioned above, schema markup matters.")
        assert not is_extractable("This means your pages are easier to cite.")

    def test_pronoun_start(self) -> None:
        assert not is_extractable("They also publish a weekly report.")


class TestDataPoints:
    def test_counts_each_form(self) -> None:
        text = "Up 35% this year, 1,000,000 visits, plans from $49, and 3x faster."
        assert count_data_points(text) == 4


class TestClassifyPage:
    """Tests for page type classification."""

    def test_blog_path_is_editorial(self) -> None:
        page = page_from_html("<p>Post</p>", url="https://e.com/blog/launch")
        assert classify_page(page) == PageType.EDITORIAL

    def test_article_schema_is_editorial(self) -> None:
        head = '<script type="application/ld+json">{"@type": "BlogPosting"}</script>'
        page = page_from_html("<p>Post</p>", url="https://e.com/x", head=head)
        assert classify_page(page) == PageType.EDITORIAL

    def test_product_path(self) -> None:
        page = page_from_html("<p>Widget</p>", url="https://e.com/products/widget")
        assert classify_page(page) == PageType.PRODUCT

    def test_add_to_cart_buttons(self) -> None:
        body = "<button>Add to cart</button><button>Add to Cart</button>"
        assert classify_page(page_from_html(body, url="https://e.com/x")) == PageType.PRODUCT

    def test_informational(self) -> None:
        page = page_from_html("<p>About us</p>", url="https://e.com/about")
        assert classify_page(page) == PageType.INFORMATIONAL


class TestHasFaq:
    def test_details_disclosures(self) -> None:
        page = page_from_html(
            "<details><summary>Q1</summary>A1</details><details><summary>Q2</summary>A2</details>"
        )
        assert has_faq(page.soup, content_area(page.soup), page.json_ld_blocks)

    def test_plain_page(self) -> None:
        page = page_from_html("<p>Nothing to see</p>")
        assert not has_faq(page.soup, content_area(page.soup), page.json_ld_blocks)


class TestAnalyzeContent:
    """Tests for the full Content analysis."""

    def test_bare_page(self) -> None:
        result = analyze_content(page_from_fixture("bare_homepage.html"))

        assert result.pillar == Pillar.CONTENT
        assert 0.0 <= result.score <= 5.0
        assert result.strengths == []
        titles = _titles(result.recommendations)
        assert "Add an FAQ Section" in titles
        assert "Improve Heading Hierarchy" in titles
        assert "Add Meta Descriptions" in titles
        assert "Start a Blog or Resources Section" in titles
        assert all(r.category == Pillar.CONTENT for r in result.recommendations)

    def test_rich_page(self) -> None:
        page = page_from_fixture("rich_homepage.html", url="https://acme.example/")
        result = analyze_content(page)

        titles = _titles(result.strengths)
        assert "FAQ Section Found" in titles
        assert "Good Heading Structure" in titles
        assert "Meta Description Present" in titles
        assert "Question-Based Content" in titles
        assert "Summary Sections" in titles
        assert "Content Freshness Signals" in titles
        assert "Structured Lists" in titles
        assert "Data-Backed Content" in titles
        assert "Image Alt Text Coverage" in titles
        assert "Blog Section Present" in titles
        assert result.details.image_alt_coverage == 100
        assert result.details.page_types == {"https://acme.example/": "informational"}
        assert 0.0 < result.score <= 5.0

    def test_every_strength_has_a_matching_check(self) -> None:
        page = page_from_fixture("rich_homepage.html", url="https://acme.example/")
        result = analyze_content(page)
        assert set(_titles(result.strengths)).isdisjoint(_titles(result.recommendations))

    def test_answer_first_sections(self) -> None:
        body = (
            "<main>"
            "<h2>What is AEO?</h2><p>AEO is the practice of optimizing content for AI answers.</p>"
            "<h2>Why now?</h2><p>Assistants are now a primary discovery channel for buyers.</p>"
            "</main>"
        )
        result = analyze_content(page_from_html(body))

        assert "Answer-First Content Structure" in _titles(result.strengths)
        assert result.details.answer_first_ratio == 100

    def test_product_pages_excluded_from_averages(self) -> None:
        home = page_from_html("<main><p>" + "word " * 900 + "</p></main>")
        product = page_from_html("<p>Buy</p>", url="https://example.com/products/a")
        result = analyze_content(home, {product.url: product})

        assert result.details.main_content_word_count == count_words(home.main_content)
        assert result.details.page_types[product.url] == "product"

    def test_editorial_page_found(self) -> None:
        home = page_from_html("<p>Home</p>")
        post = page_from_html("<p>Post</p>", url="https://example.com/blog/hello")
        result = analyze_content(home, {post.url: post})

        assert "Blog/Editorial Content" in _titles(result.strengths)

    def test_word_average_rounds_half_up_past_comprehensive(self) -> None:
        """An average of 1500.5 words counts as more than 1500."""
        home = replace(page_from_html("<p>Home</p>"), main_content="word " * 1500)
        about = replace(
            page_from_html("<p>About</p>", url="https://example.com/about"),
            main_content="word " * 1501,
        )
        result = analyze_content(home, {about.url: about})

        assert result.details.main_content_word_count == 1501
        assert "Comprehensive Content" in _titles(result.strengths)
        assert "Good Content Length" not in _titles(result.strengths)

    def test_word_average_rounds_half_up_past_good(self) -> None:
        home = replace(page_from_html("<p>Home</p>"), main_content="word " * 800)
        about = replace(
            page_from_html("<p>About</p>", url="https://example.com/about"),
            main_content="word " * 801,
        )
        result = analyze_content(home, {about.url: about})

        assert result.details.main_content_word_count == 801
        assert "Good Content Length" in _titles(result.strengths)

    def test_faq_schema_long_structured_page(self) -> None:
        """FAQ schema, one H1, three H2s, ~2000 words and a 140-char description."""
        faq = {
            "@context": "https://schema.org",
            "@type": "FAQPage",
            "mainEntity": [
                {
                    "@type": "Question",
                    "name": "What is Acme?",
                    "acceptedAnswer": {"@type": "Answer", "text": "Acme is a publishing tool."},
                }
            ],
        }
        description = "A" * 140
        head = (
            f'<meta name="description" content="{description}">'
            f'<script type="application/ld+json">{json.dumps(faq)}</script>'
        )
        section = "<p>" + "Acme helps teams publish answers quickly. " * 112 + "</p>"
        body = (
            "<main><h1>Acme publishing</h1>"
            f"<h2>Getting started</h2>{section}"
            f"<h2>Working with teams</h2>{section}"
            f"<h2>Publishing answers</h2>{section}"
            "</main>"
        )
        page = page_from_html(body, url="https://acme.example/", head=head)

        result = analyze_content(page)

        titles = _titles(result.strengths)
        assert "FAQ Section Found" in titles
        assert "Good Heading Structure" in titles
        assert "Comprehensive Content" in titles
        assert "Meta Description Present" in titles
        assert result.details.main_content_word_count > 1500
        assert result.score >= 3.25


class TestReadabilityUnavailable:
    """textstat failures leave readability unscored instead of failing the pillar."""

    def test_measure_readability_lookup_error(self) -> None:
        with patch(
            "assessment.analyzers.content.textstat.flesch_reading_ease",
            side_effect=LookupError("Resource cmudict not found."),
        ):
            assert measure_readability("Plain words in a sentence. " * 20) is None

    def test_analyze_content_without_readability(self) -> None:
        page = page_from_fixture("rich_homepage.html", url="https://acme.example/")

        with patch(
            "assessment.analyzers.content.textstat.flesch_kincaid_grade",
            side_effect=OSError("corpus unreadable"),
        ):
            result = analyze_content(page)

        assert result.details.readability_score is None
        assert result.details.readability_grade is None
        titles = _titles(result.strengths) + _titles(result.recommendations)
        assert not any("Readability" in title for title in titles)
        assert "FAQ Section Found" in _titles(result.strengths)
