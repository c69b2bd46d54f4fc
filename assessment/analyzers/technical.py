"""Technical pillar: machine readability and crawlability."""

from bs4 import BeautifulSoup

from assessment.analyzers import weights as w
from assessment.analyzers.models import Pillar, PillarAnalysis, Scorecard, TechnicalDetails
from assessment.extraction.parser import ParsedPage, get_schema_types
from assessment.signals.bundle import ExternalSignals

# Schema families counted toward the diversity bonus
SCHEMA_FAMILIES: dict[str, tuple[str, ...]] = {
    "faq": ("FAQPage", "QAPage"),
    "article": ("Article", "BlogPosting", "NewsArticle"),
    "organization": ("Organization", "LocalBusiness"),
    "website": ("WebSite",),
    "breadcrumb": ("BreadcrumbList",),
}

OPEN_GRAPH_PROPERTIES = ("og:title", "og:description", "og:image")


def schema_families_present(schema_types: list[str]) -> set[str]:
    present = set(schema_types)
    return {name for name, types in SCHEMA_FAMILIES.items() if present.intersection(types)}


def has_microdata(soup: BeautifulSoup) -> bool:
    return soup.select_one("[itemscope]") is not None


def has_viewport_meta(soup: BeautifulSoup) -> bool:
    return soup.select_one('meta[name="viewport"]') is not None


def canonical_href(soup: BeautifulSoup) -> str | None:
    link = soup.select_one('link[rel="canonical"]')
    href = (link.get("href") or "").strip() if link else ""
    return href or None


def open_graph_count(soup: BeautifulSoup) -> int:
    count = 0
    for prop in OPEN_GRAPH_PROPERTIES:
        tag = soup.select_one(f'meta[property="{prop}"]')
        if tag is not None and (tag.get("content") or "").strip():
            count += 1
    return count


def analyze_technical(page: ParsedPage, url: str, signals: ExternalSignals) -> PillarAnalysis:
    """Score the Technical pillar from the homepage DOM and external signals."""
    card = Scorecard(Pillar.TECHNICAL)
    points = w.TECHNICAL_POINTS
    soup = page.soup
    robots = signals.robots
    sitemap = signals.sitemap
    psi = signals.pagespeed

    schema_types = get_schema_types(page.json_ld_blocks)
    details = TechnicalDetails(schema_types=schema_types)

    # Schema markup
    if page.json_ld_blocks or has_microdata(soup):
        type_list = ", ".join(schema_types) if schema_types else "detected"
        card.award(
            points["schema_markup"],
            "Schema Markup Implemented",
            f"Your site uses structured data ({type_list}) that helps AI understand your content.",
        )

        families = schema_families_present(schema_types)
        if len(families) >= w.SCHEMA_DIVERSITY_MIN:
            card.award(
                points["schema_diversity"],
                "Rich Schema Coverage",
                f"{len(families)} different schema types found, giving comprehensive structured data coverage.",
            )
        elif "faq" not in families and "article" not in families:
            card.recommend(
                "Add More Schema Types",
                "Add FAQ schema to Q&A content and Article schema to blog posts.",
                "Multiple schema types improve how well AI understands your content.",
            )
    else:
        card.recommend(
            "Implement Schema Markup",
            "Add Schema.org structured data in JSON-LD format. Start with Organization, FAQ and Article schemas.",
            "Schema markup tells AI systems what your content is and how it relates. Sites with schema are cited more often.",
        )

    # HTTPS and certificate health
    if url.lower().startswith("https://"):
        card.award(
            points["https"],
            "Secure HTTPS Connection",
            "Your site uses HTTPS, essential for trust with both users and AI systems.",
        )

        ssl = signals.ssl
        if ssl is not None:
            details.ssl_valid = ssl.is_valid
            details.ssl_days_remaining = ssl.days_remaining
            if ssl.is_valid and ssl.days_remaining > w.SSL_EXPIRY_WARNING_DAYS:
                card.award(
                    points["ssl_health"],
                    "Valid SSL Certificate",
                    f"Your SSL certificate is valid for another {ssl.days_remaining} days.",
                )
            elif not ssl.is_valid:
                card.recommend(
                    "Fix SSL Certificate",
                    "Your SSL certificate failed verification. Install a certificate issued for this hostname.",
                    "Browsers and crawlers treat an unverifiable certificate as untrusted.",
                )
            else:
                card.recommend(
                    "SSL Certificate Expiring Soon",
                    f"Your SSL certificate expires in {ssl.days_remaining} days. Renew it immediately.",
                    "An expired certificate breaks trust signals and may stop AI systems from reaching your site.",
                )
    else:
        card.recommend(
            "Enable HTTPS",
            "Your site is not using HTTPS. Secure it with an SSL certificate.",
            "AI systems prioritize secure, trustworthy sources. HTTP sites may be skipped entirely.",
        )

    # Mobile viewport: Lighthouse audit when available, else the meta tag
    viewport = psi.audits.viewport if psi is not None else has_viewport_meta(soup)
    if viewport:
        card.award(points["viewport"], "Mobile-Responsive", "Your site is configured for mobile devices.")
    else:
        card.recommend(
            "Add Mobile Viewport",
            "Add a viewport meta tag so pages display properly on all devices.",
            "AI systems favor accessible sites that work well for all users.",
        )

    # Sitemap
    details.sitemap_found = sitemap.exists
    details.sitemap_url_count = sitemap.url_count
    if sitemap.exists:
        url_info = f" with {sitemap.url_count} URLs" if sitemap.url_count else ""
        lastmod_info = " and lastmod dates" if sitemap.has_lastmod else ""
        card.award(
            points["sitemap"],
            "XML Sitemap Found",
            f"Your site has an XML sitemap{url_info}{lastmod_info}, helping AI crawlers discover your content.",
        )
    else:
        card.recommend(
            "Create XML Sitemap",
            "Publish an XML sitemap at /sitemap.xml with lastmod dates and reference it in robots.txt.",
            "Sitemaps help AI crawlers discover and prioritize your content.",
        )

    # robots.txt
    details.robots_txt_found = robots.exists
    if robots.exists:
        directive = (
            " with a Sitemap directive" if robots.has_sitemap_directive else ", but has no Sitemap directive"
        )
        card.award(points["robots_txt"], "Robots.txt Configured", f"Your site publishes a robots.txt{directive}.")
    else:
        card.recommend(
            "Create a robots.txt File",
            "Publish a robots.txt that explicitly allows AI crawlers and points to your sitemap.",
            "robots.txt is the first file crawlers read when deciding what they may index.",
        )

    # AI crawler access
    details.ai_bots_crawlable = robots.allows_all_crawlers
    details.blocked_ai_bots = list(robots.blocked_bots)
    if robots.exists and robots.blocked_bots:
        card.recommend(
            "AI Bots Are Blocked",
            f"Your robots.txt blocks these AI crawlers: {', '.join(robots.blocked_bots)}. "
            "This prevents AI systems from indexing your content.",
            "Blocked AI crawlers can't make your content available for citation. "
            "Consider allowing GPTBot, ClaudeBot and PerplexityBot.",
        )
    elif robots.exists and robots.allows_all_crawlers:
        card.award(
            points["ai_bots_allowed"],
            "AI Bots Allowed",
            "Your robots.txt allows AI crawlers (GPTBot, ClaudeBot, PerplexityBot) to access your content.",
        )
    elif robots.exists:
        card.recommend(
            "Robots.txt Blocks All Crawlers",
            "Your robots.txt disallows every crawler under 'User-agent: *'. Allow at least the AI and search crawlers.",
            "A blanket disallow hides your whole site from AI crawlers that follow the wildcard rules.",
        )

    # Canonical
    if canonical_href(soup):
        card.award(
            points["canonical"],
            "Canonical Tags",
            "Your site uses canonical tags to prevent duplicate content issues.",
        )

    # Open Graph
    og_count = open_graph_count(soup)
    if og_count >= w.OPEN_GRAPH_MIN_TAGS:
        card.award(
            points["open_graph"],
            "Open Graph Tags",
            f"{og_count}/3 essential OG tags present (title, description, image).",
        )
    elif og_count > 0:
        card.recommend(
            "Complete Open Graph Tags",
            "Add the missing OG tags (og:title, og:description, og:image) for complete content metadata.",
        )

    # llms.txt
    details.llms_txt_found = signals.llms_txt.exists
    if signals.llms_txt.exists:
        card.award(
            points["llms_txt"],
            "LLMs.txt File Found",
            "Your site has an llms.txt file, an emerging standard that helps AI systems understand your site.",
        )
    else:
        card.recommend(
            "Consider Adding llms.txt",
            "Create an llms.txt file at your site root summarizing your site for AI systems, "
            "like a robots.txt for LLMs.",
            "Early adopters of llms.txt gain an advantage as AI systems begin to recognize it.",
        )

    # PageSpeed Insights
    if psi is not None:
        details.performance_score = psi.performance_score
        details.accessibility_score = psi.accessibility_score
        details.seo_score = psi.seo_score
        details.core_web_vitals = {
            "lcp": psi.metrics.lcp,
            "fcp": psi.metrics.fcp,
            "cls": psi.metrics.cls,
            "tbt": psi.metrics.tbt,
        }

        performance = psi.performance_score
        if performance >= w.PAGE_SPEED_EXCELLENT:
            card.award(
                points["page_speed_excellent"],
                "Excellent Page Speed",
                f"Performance score: {performance}/100. Fast pages are prioritized by AI systems.",
            )
        elif performance >= w.PAGE_SPEED_ACCEPTABLE:
            card.award(
                points["page_speed_acceptable"],
                "Acceptable Page Speed",
                f"Performance score: {performance}/100. Reaching 90+ would strengthen AI visibility.",
            )
        else:
            card.recommend(
                "Improve Page Speed",
                f"Performance score: {performance}/100. Optimize images, reduce JavaScript "
                "and improve server response time.",
                "Slow pages may time out when AI systems crawl them.",
            )

        if psi.accessibility_score >= w.ACCESSIBILITY_STRONG:
            card.award(
                points["accessibility"],
                "Strong Accessibility",
                f"Accessibility score: {psi.accessibility_score}/100.",
            )

    return card.result(details)
