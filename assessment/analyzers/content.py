"""Content pillar: how well pages are structured for AI extraction and citation.

Each heuristic is a standalone predicate over a parsed page (or its text) so
it can be tested on its own; ``analyze_content`` only combines their results
with the point values in ``weights``.
"""

import re
from dataclasses import dataclass
from enum import Enum
from urllib.parse import urljoin, urlparse

import structlog
import textstat
from bs4 import BeautifulSoup

from assessment.analyzers import weights as w
from assessment.analyzers.models import (
    ContentDetails,
    Pillar,
    PillarAnalysis,
    Scorecard,
    round_half_up,
    round_score,
)
from assessment.crawler.links import SKIP_HREF_PREFIXES
from assessment.extraction.cleaner import container_text, content_area, content_area_text
from assessment.extraction.parser import JsonLdBlock, ParsedPage, count_words, has_schema_type

logger = structlog.get_logger(__name__)


class PageType(str, Enum):
    """Coarse page classification used to keep product listings out of content metrics."""

    EDITORIAL = "editorial"
    PRODUCT = "product"
    INFORMATIONAL = "informational"


ARTICLE_TYPES = ("Article", "BlogPosting", "NewsArticle", "TechArticle", "ScholarlyArticle")
PRODUCT_TYPES = ("Product", "ItemList", "OfferCatalog")
EDITORIAL_PATHS = ("/blog", "/article", "/news", "/post", "/guide", "/learn", "/resource")
PRODUCT_PATHS = ("/product", "/shop", "/store", "/collection", "/catalog", "/item")
BLOG_SECTION_PATHS = ("/blog", "/articles", "/news", "/resources", "/learn")

ADD_TO_CART_PHRASES = ("add to cart", "add to bag", "buy now")
PRICE_SELECTOR = "[class*='price'], [data-price], .money, .Price"
PRODUCT_GRID_SELECTOR = (
    "[class*='product-grid'], [class*='product-list'], [class*='product-card'], [class*='ProductCard']"
)
MAIN_SCOPES = ("main", "article", "[role='main']")

FAQ_HEADING_PHRASES = ("faq", "frequently asked", "common questions")
SUMMARY_PHRASES = ("in summary", "key takeaway", "tl;dr", "tldr", "bottom line")
TOC_CLASS = re.compile(r"\btoc\b|table-of-contents", re.IGNORECASE)
TOC_HEADING = re.compile(r"table of contents|contents|in this article", re.IGNORECASE)
LAST_UPDATED = re.compile(r"last updated|updated on|modified", re.IGNORECASE)
WHAT_IS = re.compile(r"what is", re.IGNORECASE)
HOW_TO = re.compile(r"how (to|do|does)", re.IGNORECASE)
STEPS = re.compile(r"step \d|step-by-step", re.IGNORECASE)
COMPARISONS = re.compile(r"vs\.?\s|versus|compared to|comparison", re.IGNORECASE)

DATA_POINT = re.compile(
    r"\b\d+(?:\.\d+)?%"  # percentages
    r"|\b\d{1,3}(?:,\d{3}){2,}\b"  # 1,000,000+
    r"|[$€£]\s?\d[\d,]*(?:\.\d+)?(?:\s?(?:[kmb]n?\b|million|billion))?"  # currency
    r"|\b\d+x\b",  # multipliers
    re.IGNORECASE,
)

META_INTRO = re.compile(
    r"^(in this (section|article|guide|post))"
    r"|^(let's (talk|discuss|explore|look|dive))"
    r"|^(we('ll| will) (discuss|explore|cover|look))",
    re.IGNORECASE,
)
DIRECT_ANSWER_VERB = re.compile(
    r"\bis\b|\bare\b|\bcan\b|\bshould\b|\bmeans?\b|\brefers?\sto\b|\binvolves?\b", re.IGNORECASE
)
YES_NO_START = re.compile(r"^(yes|no)\b", re.IGNORECASE)

BACKWARD_REFERENCE = re.compile(
    r"^(as (mentioned|noted|discussed|stated|described) (above|earlier|previously|before))"
    r"|^(this (is|means|refers|shows|demonstrates|indicates))"
    r"|^(the (above|aforementioned|previous|preceding))"
    r"|^(these |those )"
    r"|^(such |said )"
    r"|^(it (is|was|has|can|should|will) )",
    re.IGNORECASE,
)
PRONOUN_START = re.compile(r"^(he |she |they |we |it )", re.IGNORECASE)
SELF_CONTAINED_IT = re.compile(r"^(it is |it's |it can |it should )", re.IGNORECASE)


# =============================================================================
# Page classification
# =============================================================================


def _url_path(url: str) -> str:
    try:
        return urlparse(url).path.lower()
    except ValueError:
        return ""


def classify_page(page: ParsedPage) -> PageType:
    """Editorial, product or informational, from schema, URL path and commerce markup."""
    path = _url_path(page.url)

    if has_schema_type(page.json_ld_blocks, *ARTICLE_TYPES) or any(
        p in path for p in EDITORIAL_PATHS
    ):
        return PageType.EDITORIAL

    soup = page.soup
    add_to_cart = sum(
        1
        for el in soup.find_all(["button", "a"])
        if any(phrase in el.get_text(" ").lower() for phrase in ADD_TO_CART_PHRASES)
    )
    if (
        has_schema_type(page.json_ld_blocks, *PRODUCT_TYPES)
        or any(p in path for p in PRODUCT_PATHS)
        or add_to_cart >= 2
        or len(soup.select(PRICE_SELECTOR)) >= 5
        or soup.select_one(PRODUCT_GRID_SELECTOR) is not None
    ):
        return PageType.PRODUCT

    return PageType.INFORMATIONAL


# =============================================================================
# Predicates
# =============================================================================


def _scoped(area: BeautifulSoup, tag_selector: str) -> list:
    """Elements inside main/article containers, else anywhere in the content area."""
    scoped = area.select(", ".join(f"{scope} {tag_selector}" for scope in MAIN_SCOPES))
    return scoped or area.select(tag_selector)


def has_faq(soup: BeautifulSoup, area: BeautifulSoup, blocks: list[JsonLdBlock]) -> bool:
    """FAQ/QA schema, an FAQ heading or section, or at least two <details> disclosures."""
    if has_schema_type(blocks, "FAQPage", "QAPage"):
        return True
    for heading in area.select("h1, h2, h3, h4"):
        text = heading.get_text(" ").lower()
        if any(phrase in text for phrase in FAQ_HEADING_PHRASES):
            return True
    if len(soup.select("details summary")) >= 2:
        return True
    for el in area.select("section, div"):
        marker = f"{el.get('id') or ''} {' '.join(el.get('class') or [])}".lower()
        if "faq" in marker:
            return True
    return False


def has_table_of_contents(soup: BeautifulSoup, area: BeautifulSoup) -> bool:
    for el in area.find_all(True):
        if el.get("id") == "toc" or TOC_CLASS.search(" ".join(el.get("class") or [])):
            return True
    if any(TOC_HEADING.search(h.get_text(" ")) for h in area.select("h2, h3, h4")):
        return True
    return len(soup.select('a[href^="#"]')) >= w.TOC_ANCHOR_LINKS_MIN


def has_summary(area: BeautifulSoup) -> bool:
    for el in area.select("h1, h2, h3, h4, p"):
        text = el.get_text(" ").lower()
        if any(phrase in text for phrase in SUMMARY_PHRASES):
            return True
    return False


def has_freshness_signal(soup: BeautifulSoup, blocks: list[JsonLdBlock], text: str) -> bool:
    if any(block.get("dateModified") or block.get("datePublished") for block in blocks):
        return True
    if soup.select_one("time[datetime]") is not None:
        return True
    return bool(LAST_UPDATED.search(text))


def count_data_points(text: str) -> int:
    """Percentages, large numbers, currency amounts and multipliers."""
    return len(DATA_POINT.findall(text))


def count_internal_links(area: BeautifulSoup, url: str) -> int:
    """In-content links resolving to the page's own hostname."""
    host = (urlparse(url).hostname or "").lower()
    count = 0
    for anchor in _scoped(area, "a[href]"):
        href = anchor["href"].strip()
        if not href or href.lower().startswith(SKIP_HREF_PREFIXES):
            continue
        try:
            target = urlparse(urljoin(url, href))
        except ValueError:
            continue
        if host and (target.hostname or "").lower() == host:
            count += 1
    return count


def is_answer_first(paragraph: str) -> bool:
    """Whether a section's opening paragraph states its answer directly."""
    paragraph = paragraph.strip()
    words = paragraph.split()
    if not 5 <= len(words) <= 120:
        return False
    if paragraph.endswith("?") or META_INTRO.search(paragraph):
        return False
    return bool(
        DIRECT_ANSWER_VERB.search(" ".join(words[:8]))
        or paragraph[:1].isdigit()
        or YES_NO_START.search(paragraph)
    )


def is_extractable(paragraph: str) -> bool:
    """Whether a paragraph reads on its own without earlier context."""
    paragraph = paragraph.strip()
    if BACKWARD_REFERENCE.search(paragraph):
        return False
    return not (PRONOUN_START.search(paragraph) and not SELF_CONTAINED_IT.search(paragraph))


def section_openings(area: BeautifulSoup) -> tuple[int, int]:
    """(sections, answer-first sections) over H2/H3 headings in the content area."""
    sections = 0
    answer_first = 0
    for heading in area.select("h2, h3"):
        sections += 1
        following = heading.find_next_sibling()
        if following is not None and following.name == "p":
            if is_answer_first(following.get_text(" ")):
                answer_first += 1
    return sections, answer_first


def paragraph_extractability(area: BeautifulSoup) -> tuple[int, int]:
    """(paragraphs, self-contained paragraphs) of at least EXTRACTABLE_MIN_CHARS."""
    total = 0
    extractable = 0
    for p in _scoped(area, "p"):
        text = p.get_text(" ").strip()
        if len(text) < w.EXTRACTABLE_MIN_CHARS:
            continue
        total += 1
        if is_extractable(text):
            extractable += 1
    return total, extractable


def content_length_points(word_count: int) -> float:
    """Points for average main-content length."""
    if word_count > w.CONTENT_LENGTH_COMPREHENSIVE:
        return w.CONTENT_POINTS["length_comprehensive"]
    if word_count > w.CONTENT_LENGTH_GOOD:
        return w.CONTENT_POINTS["length_good"]
    return 0.0


def measure_readability(text: str) -> tuple[float, float] | None:
    """Flesch reading ease and Flesch-Kincaid grade, or None when textstat cannot run.

    Newer textstat releases load the NLTK cmudict corpus on first use, which
    fails on hosts without it or without network access.
    """
    try:
        flesch = float(textstat.flesch_reading_ease(text))
        grade = float(textstat.flesch_kincaid_grade(text))
    except (LookupError, OSError) as e:
        logger.warning("readability_unavailable", error=str(e), error_type=type(e).__name__)
        return None
    return flesch, grade


def readability_points(flesch: float) -> float:
    low, high = w.READABILITY_OPTIMAL
    if low <= flesch <= high:
        return w.CONTENT_POINTS["readability_optimal"]
    low, high = w.READABILITY_GOOD
    if low <= flesch <= high:
        return w.CONTENT_POINTS["readability_good"]
    return 0.0


def links_to_blog_section(soup: BeautifulSoup) -> bool:
    for anchor in soup.find_all("a", href=True):
        href = anchor["href"].lower()
        if any(p in href for p in BLOG_SECTION_PATHS):
            return True
    return False


# =============================================================================
# Per-page metrics
# =============================================================================


@dataclass
class PageMetrics:
    """Raw content measurements for one page."""

    url: str
    type: PageType
    word_count: int
    h1_count: int
    h2_count: int
    h3_count: int
    image_count: int
    images_with_alt: int
    internal_link_count: int
    question_headings: int
    list_count: int
    data_points: int
    has_faq: bool
    has_table_of_contents: bool
    has_summary: bool
    has_freshness: bool
    has_tables: bool
    has_steps: bool
    has_comparisons: bool
    sections: int
    answer_first_sections: int
    paragraphs: int
    extractable_paragraphs: int

    @property
    def is_product(self) -> bool:
        return self.type == PageType.PRODUCT


def measure_page(page: ParsedPage) -> PageMetrics:
    soup = page.soup
    area = content_area(soup)
    text = container_text(area)
    images = _scoped(area, "img")
    sections, answer_first = section_openings(area)
    paragraphs, extractable = paragraph_extractability(area)

    return PageMetrics(
        url=page.url,
        type=classify_page(page),
        word_count=count_words(page.main_content),
        h1_count=len(_scoped(area, "h1")),
        h2_count=len(_scoped(area, "h2")),
        h3_count=len(_scoped(area, "h3")),
        image_count=len(images),
        images_with_alt=sum(1 for img in images if (img.get("alt") or "").strip()),
        internal_link_count=count_internal_links(area, page.url),
        question_headings=sum(1 for h in area.select("h1, h2, h3, h4") if "?" in h.get_text()),
        list_count=len(area.select("ul, ol")),
        data_points=count_data_points(text),
        has_faq=has_faq(soup, area, page.json_ld_blocks),
        has_table_of_contents=has_table_of_contents(soup, area),
        has_summary=has_summary(area),
        has_freshness=has_freshness_signal(soup, page.json_ld_blocks, text),
        has_tables=area.select_one("table") is not None,
        has_steps=bool(STEPS.search(text)),
        has_comparisons=len(_scoped(area, "table th")) >= 2 or bool(COMPARISONS.search(text)),
        sections=sections,
        answer_first_sections=answer_first,
        paragraphs=paragraphs,
        extractable_paragraphs=extractable,
    )


def _rounded_hundreds(value: float) -> int:
    return round_half_up(value / 100) * 100


# =============================================================================
# Analyzer
# =============================================================================


def analyze_content(
    page: ParsedPage,
    additional_pages: dict[str, ParsedPage] | None = None,
) -> PillarAnalysis:
    """
    Score the Content pillar over the homepage and crawled pages.

    Product listing pages are left out of averaged metrics unless every
    analyzed page is a product page.
    """
    card = Scorecard(Pillar.CONTENT)
    details = ContentDetails()
    points = w.CONTENT_POINTS

    home = measure_page(page)
    extra = [measure_page(p) for p in (additional_pages or {}).values()]
    all_pages = [home, *extra]
    non_product = [m for m in all_pages if not m.is_product]
    scoring = non_product or all_pages
    editorial = [m for m in all_pages if m.type == PageType.EDITORIAL]
    details.page_types = {m.url: m.type.value for m in all_pages}

    # FAQ
    if any(m.has_faq for m in all_pages):
        card.award(
            points["faq"],
            "FAQ Section Found",
            "Your site has FAQ content that AI systems love to cite when answering questions.",
        )
    else:
        card.recommend(
            "Add an FAQ Section",
            "Create a dedicated FAQ section answering the top 10 questions your customers ask. "
            "Use <details>/<summary> elements or FAQPage schema markup.",
            "95% of ChatGPT citations point to pages with well-structured Q&A content.",
        )

    # Headings
    h1 = sum(m.h1_count for m in all_pages)
    h2 = sum(m.h2_count for m in all_pages)
    h3 = sum(m.h3_count for m in all_pages)
    if h1 >= 1 and h2 >= 2:
        card.award(
            points["headings"],
            "Good Heading Structure",
            f"Found {h1} H1, {h2} H2 and {h3} H3 headings across analyzed pages, "
            "which helps AI understand your content hierarchy.",
        )
    else:
        card.recommend(
            "Improve Heading Hierarchy",
            "Use a clear heading structure (H1 -> H2 -> H3) to organize your content. "
            "Each heading should describe the section below it.",
            "Clear headings help AI systems extract and cite specific sections of your content.",
        )

    # Content length
    avg_words = round_half_up(sum(m.word_count for m in scoring) / len(scoring))
    details.main_content_word_count = avg_words
    length_points = content_length_points(avg_words)
    if length_points == points["length_comprehensive"]:
        card.award(
            length_points,
            "Comprehensive Content",
            f"Your pages average ~{_rounded_hundreds(avg_words)} words of main content, "
            "which signals depth and authority to AI systems.",
        )
    elif length_points:
        card.award(
            length_points,
            "Good Content Length",
            f"Your pages average ~{_rounded_hundreds(avg_words)} words of main content. "
            "Expanding to 1500+ words can improve AI citation rates.",
        )
    else:
        card.recommend(
            "Add More Quality Content",
            "Your pages need more substantial content. Answer the full set of questions "
            "a visitor is likely to have.",
            "Thin pages rarely get cited by AI. Aim for at least 1000 words of useful information per page.",
        )

    # Meta description (homepage only)
    meta = page.soup.select_one('meta[name="description"]')
    description = (meta.get("content") or "").strip() if meta else ""
    if description:
        length = len(description)
        low, high = w.META_DESCRIPTION_RANGE
        if low <= length <= high:
            note = f"within the recommended {low}-{high} character range."
        elif length < low:
            note = f"Consider expanding to {low}-{high} chars."
        else:
            note = f"Consider trimming to under {high} chars."
        card.award(
            points["meta_description"],
            "Meta Description Present",
            f"Meta description found ({length} chars), {note}",
        )
    else:
        card.recommend(
            "Add Meta Descriptions",
            "Add a clear meta description (120-160 characters) summarizing what each page covers.",
            "Meta descriptions help AI systems quickly understand what your page covers.",
        )

    # Question-format headings
    home_text = content_area_text(page.soup)
    question_format = sum(m.question_headings for m in scoring) > 0 or bool(
        WHAT_IS.search(home_text) and HOW_TO.search(home_text)
    )
    if question_format:
        card.award(
            points["question_headings"],
            "Question-Based Content",
            "Your content uses question-and-answer formatting that matches how people ask AI assistants.",
        )
    else:
        card.recommend(
            "Use Question-Format Headings",
            "Phrase some headings as questions (e.g. 'What is AEO?', 'How does it work?').",
            "AI systems look for content that directly answers the questions users are asking.",
        )

    # Bonus-only structure signals
    if any(m.has_table_of_contents for m in all_pages):
        card.award(
            points["table_of_contents"],
            "Table of Contents",
            "Your site includes a table of contents, helping readers and AI navigate your content.",
        )

    if any(m.has_summary for m in all_pages):
        card.award(
            points["summary"],
            "Summary Sections",
            "Your content includes summary sections that AI can easily extract and cite.",
        )

    # Freshness
    if any(m.has_freshness for m in all_pages):
        card.award(
            points["freshness"],
            "Content Freshness Signals",
            "Your content shows when it was last updated. AI systems prefer fresh content.",
        )
    else:
        card.recommend(
            "Show Last Updated Dates",
            "Add visible 'Last Updated' dates and dateModified in schema markup.",
            "65% of AI citations go to content published in the last year.",
        )

    if any(m.list_count > 0 for m in scoring):
        card.award(
            points["lists"],
            "Structured Lists",
            "Your content uses bulleted or numbered lists that AI can easily parse and cite.",
        )

    # Readability (homepage)
    scores = measure_readability(home_text) if len(home_text) > w.READABILITY_MIN_CHARS else None
    if scores is not None:
        flesch, grade = scores
        details.readability_score = round_score(flesch, 1)
        details.readability_grade = round_score(grade, 1)
        summary = f"Flesch Reading Ease: {round_half_up(flesch)} (Grade {round_half_up(grade)})."
        readability = readability_points(flesch)

        if readability == points["readability_optimal"]:
            card.award(
                readability,
                "Optimal Readability",
                f"{summary} This is the sweet spot for AI citation: clear, accessible writing.",
            )
        elif readability:
            hint = (
                "Simplifying slightly could improve AI citation rates."
                if flesch < w.READABILITY_OPTIMAL[0]
                else "Slightly more technical depth could help."
            )
            card.award(readability, "Good Readability", f"{summary} {hint}")
        else:
            hint = (
                "Use shorter sentences and simpler words to make content more AI-friendly."
                if flesch < w.READABILITY_GOOD[0]
                else "Your content may be too simple; add more depth and technical detail."
            )
            card.recommend(
                "Improve Readability",
                f"{summary} {hint}",
                "Content in the Flesch 60-75 range is the easiest for AI to extract and quote.",
            )

    # Image alt coverage
    total_images = sum(m.image_count for m in scoring)
    images_with_alt = sum(m.images_with_alt for m in scoring)
    if total_images > 0:
        coverage = round_half_up(images_with_alt / total_images * 100)
        details.image_alt_coverage = coverage
        if coverage >= w.IMAGE_ALT_COVERAGE_MIN:
            card.award(
                points["image_alt"],
                "Image Alt Text Coverage",
                f"{coverage}% of content images have alt text ({images_with_alt}/{total_images}).",
            )
        else:
            card.recommend(
                "Add Alt Text to Images",
                f"Only {coverage}% of content images ({images_with_alt}/{total_images}) have alt text. "
                "Add descriptive alt text to every image.",
                "Alt text helps AI systems understand and contextualize your visual content.",
            )

    # Internal linking
    avg_links = sum(m.internal_link_count for m in scoring) / len(scoring)
    details.internal_link_count = round_half_up(avg_links)
    if avg_links >= w.INTERNAL_LINKS_MIN:
        card.award(
            points["internal_links"],
            "Internal Linking",
            f"Your pages average {round_half_up(avg_links)} internal links in content areas, "
            "helping AI understand your site structure.",
        )
    else:
        card.recommend(
            "Improve Internal Linking",
            "Add more internal links between related pages with descriptive anchor text.",
            "Internal links help AI systems discover how your content fits together.",
        )

    # Data density
    data_points = sum(m.data_points for m in scoring)
    details.data_point_count = data_points
    if data_points >= w.DATA_POINTS_MIN:
        card.award(
            points["data_points"],
            "Data-Backed Content",
            f"Your content includes {data_points} data points or statistics.",
        )
    else:
        card.recommend(
            "Add Statistics and Data",
            "Back up claims with specific numbers, percentages and statistics. Aim for 5+ per page.",
            "Pages with data points average 5.4 AI citations vs 2.8 without.",
        )

    # Structured formats
    formats = []
    if any(m.has_tables for m in scoring):
        formats.append("tables")
    if any(m.has_steps for m in scoring):
        formats.append("step-by-step guides")
    if any(m.has_comparisons for m in scoring):
        formats.append("comparisons")
    if formats:
        card.award(
            points["structured_formats"],
            "Structured Content Formats",
            f"Your content uses {', '.join(formats)}, formats that AI answers quote readily.",
        )

    # Section density (homepage)
    home_headings = home.h2_count + home.h3_count
    if home_headings >= w.SECTION_DENSITY_MIN_HEADINGS and home.word_count > w.SECTION_DENSITY_MIN_WORDS:
        per_section = round_half_up(home.word_count / (home_headings + 1))
        details.section_density = per_section
        low, high = w.SECTION_DENSITY_RANGE
        if low <= per_section <= high:
            card.award(
                points["section_density"],
                "Optimal Section Length",
                f"Average section length is ~{per_section} words, easy for AI to extract.",
            )

    # Answer-first and extractability: homepage plus non-product crawled pages
    checked = [home, *(m for m in extra if not m.is_product)]

    sections = sum(m.sections for m in checked)
    if sections >= w.ANSWER_FIRST_MIN_SECTIONS:
        ratio = sum(m.answer_first_sections for m in checked) / sections
        percent = round_half_up(ratio * 100)
        details.answer_first_ratio = percent
        if ratio >= w.ANSWER_FIRST_FULL:
            card.award(
                points["answer_first_full"],
                "Answer-First Content Structure",
                f"{percent}% of sections lead with a direct answer.",
            )
        elif ratio >= w.ANSWER_FIRST_PARTIAL:
            card.award(
                points["answer_first_partial"],
                "Some Answer-First Content",
                f"{percent}% of sections lead with answers. Aim for 50%+.",
            )
        else:
            card.recommend(
                "Use Answer-First Formatting",
                "Open each section with a direct, concise answer before adding context. "
                "Lead with 'X is...' rather than 'In this section, we explore...'.",
                "AI models extract the first sentences of a section, so answer-first content is quoted more often.",
            )

    paragraphs = sum(m.paragraphs for m in checked)
    if paragraphs >= w.EXTRACTABLE_MIN_PARAGRAPHS:
        ratio = sum(m.extractable_paragraphs for m in checked) / paragraphs
        percent = round_half_up(ratio * 100)
        details.extractable_ratio = percent
        if ratio >= w.EXTRACTABLE_FULL:
            card.award(
                points["extractable_full"],
                "Highly Extractable Content",
                f"{percent}% of paragraphs can be understood without surrounding context.",
            )
        elif ratio >= w.EXTRACTABLE_PARTIAL:
            card.award(
                points["extractable_partial"],
                "Mostly Extractable Content",
                f"{percent}% of paragraphs are self-contained. Fewer backward references would help.",
            )
        else:
            card.recommend(
                "Make Paragraphs Self-Contained",
                "Rewrite paragraphs that open with 'As mentioned above', 'This means', 'It is' "
                "or similar references. Each paragraph should stand on its own.",
                "AI systems lift individual paragraphs; ones that depend on earlier context can't be cited accurately.",
            )

    # Editorial content
    if editorial or has_schema_type(page.json_ld_blocks, *ARTICLE_TYPES[:4]):
        plural = "" if len(editorial) == 1 else "s"
        card.award(
            points["editorial_content"],
            "Blog/Editorial Content",
            f"Your site has editorial content ({len(editorial)} blog/article page{plural} found).",
        )
    elif links_to_blog_section(page.soup):
        card.award(
            points["blog_link"],
            "Blog Section Present",
            "Your site links to a blog section. Publishing informative articles regularly boosts AI visibility.",
        )
    else:
        card.recommend(
            "Start a Blog or Resources Section",
            "Publish informative articles about your industry, 1-2 per month, covering questions customers ask.",
            "Editorial content signals expertise and supplies the in-depth answers AI models need.",
        )

    return card.result(details)
