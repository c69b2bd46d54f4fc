"""Authority pillar: E-E-A-T style trust and credibility signals."""

import re
from urllib.parse import urlparse

from bs4 import BeautifulSoup

from assessment.analyzers import weights as w
from assessment.analyzers.models import AuthorityDetails, Pillar, PillarAnalysis, Scorecard
from assessment.extraction.parser import JsonLdBlock, ParsedPage, find_schema_by_type, schema_types_of
from assessment.signals.bundle import ExternalSignals

SOCIAL_PLATFORMS: dict[str, tuple[str, ...]] = {
    "Twitter/X": ("twitter.com", "x.com"),
    "LinkedIn": ("linkedin.com",),
    "Facebook": ("facebook.com",),
    "Instagram": ("instagram.com",),
    "YouTube": ("youtube.com",),
}
SOCIAL_DOMAINS = tuple(domain for domains in SOCIAL_PLATFORMS.values() for domain in domains)

MAJOR_MEDIA = (
    "forbes",
    "techcrunch",
    "wired",
    "entrepreneur",
    "inc.com",
    "business insider",
    "wall street journal",
    "new york times",
    "bloomberg",
    "cnbc",
    "bbc",
)

AUTHOR_BYLINE = re.compile(r"(?i:written by|author:)\s*[A-Z]|\bby\s+[A-Z][a-z]+\s+[A-Z][a-z]+")
ABOUT_LANGUAGE = re.compile(r"about us|our story|our team|who we are|our mission", re.IGNORECASE)
PRESS_LANGUAGE = re.compile(
    r"as (seen|featured) (in|on)|press|media|featured in|in the news", re.IGNORECASE
)
DIGITAL_PR_LANGUAGE = re.compile(
    r"podcast|webinar|speaking|keynote|conference|summit|appeared on"
    r"|guest (on|post|author)|featured (guest|speaker)|interview",
    re.IGNORECASE,
)
COMMUNITY_LANGUAGE = re.compile(r"community|forum|discuss", re.IGNORECASE)
COMMUNITY_DOMAINS = ("reddit.com", "quora.com", "stackoverflow.com")
CREDENTIALS_LANGUAGE = re.compile(
    r"certified|certification|credential|accredited|licensed|award-winning"
    r"|years of experience|\d+\+?\s*years",
    re.IGNORECASE,
)
CITATION_LANGUAGE = re.compile(
    r"source:|according to|research (shows|indicates|suggests)|study (shows|found|by)"
    r"|data from|published in",
    re.IGNORECASE,
)
REVIEW_PLATFORMS = ("trustpilot", "g2.com", "capterra")
STAR_RATING = re.compile(r"★|(\d+(\.\d+)?)\s*(out of|/)\s*5\s*(star)?", re.IGNORECASE)
CLIENT_SAYS = re.compile(
    r"what (our|the) (client|customer)s? say|client feedback|customer stories", re.IGNORECASE
)
CASE_STUDY_HEADING = re.compile(r"case.stud", re.IGNORECASE)
SUCCESS_STORY = re.compile(
    r"success stor(y|ies)|client results|how we helped|results we.ve delivered", re.IGNORECASE
)
AUTHOR_DEPTH_FIELDS = ("jobTitle", "sameAs", "affiliation")


def _select_any(soups: list[BeautifulSoup], selector: str) -> bool:
    return any(soup.select_one(selector) is not None for soup in soups)


def _hrefs(soups: list[BeautifulSoup]) -> list[str]:
    return [a["href"].strip() for soup in soups for a in soup.find_all("a", href=True)]


def _host_matches(host: str, domain: str) -> bool:
    return host == domain or host.endswith(f".{domain}")


def _link_host(href: str) -> str:
    try:
        return (urlparse(href).hostname or "").lower()
    except ValueError:
        return ""


def has_author_attribution(soups: list[BeautifulSoup], blocks: list[JsonLdBlock], text: str) -> bool:
    if any(isinstance(block.get("author"), dict | list) for block in blocks):
        return True
    if _select_any(soups, 'meta[name="author"]') or _select_any(soups, '[rel="author"]'):
        return True
    return bool(AUTHOR_BYLINE.search(text))


def has_about_page(soups: list[BeautifulSoup], text: str) -> bool:
    return _select_any(soups, 'a[href*="/about"]') or bool(ABOUT_LANGUAGE.search(text))


def has_contact_info(soups: list[BeautifulSoup]) -> bool:
    return any(
        _select_any(soups, selector)
        for selector in ('a[href*="/contact"]', 'a[href^="mailto:"]', 'a[href^="tel:"]')
    )


def has_press_mentions(text: str) -> bool:
    lowered = text.lower()
    return bool(PRESS_LANGUAGE.search(text)) or any(outlet in lowered for outlet in MAJOR_MEDIA)


def has_community_presence(soups: list[BeautifulSoup], text: str) -> bool:
    for href in _hrefs(soups):
        host = _link_host(href)
        if any(_host_matches(host, domain) for domain in COMMUNITY_DOMAINS):
            return True
    return bool(COMMUNITY_LANGUAGE.search(text))


def social_platforms_linked(soups: list[BeautifulSoup]) -> list[str]:
    """Distinct social platforms linked from any page, in a fixed order."""
    hosts = {_link_host(href) for href in _hrefs(soups)}
    return [
        name
        for name, domains in SOCIAL_PLATFORMS.items()
        if any(_host_matches(host, domain) for host in hosts for domain in domains)
    ]


def count_external_citations(soups: list[BeautifulSoup], site_host: str) -> int:
    """Outbound absolute links that are neither social profiles nor the site itself."""
    count = 0
    for soup in soups:
        for anchor in soup.select('a[href^="http"]'):
            host = _link_host(anchor["href"])
            if not host or _host_matches(host, site_host):
                continue
            if any(_host_matches(host, domain) for domain in SOCIAL_DOMAINS):
                continue
            count += 1
    return count


def has_reviews(soups: list[BeautifulSoup], blocks: list[JsonLdBlock], text: str) -> bool:
    for block in blocks:
        if block.get("aggregateRating") or {"Review", "AggregateRating"}.intersection(
            schema_types_of(block)
        ):
            return True
    hrefs = [href.lower() for href in _hrefs(soups)]
    if any(platform in href for href in hrefs for platform in REVIEW_PLATFORMS):
        return True
    return bool(STAR_RATING.search(text))


def has_testimonials(soups: list[BeautifulSoup], text: str) -> bool:
    return (
        _select_any(soups, '[class*="testimonial"], [id*="testimonial"]')
        or _select_any(soups, "blockquote")
        or bool(CLIENT_SAYS.search(text))
    )


def has_case_studies(soups: list[BeautifulSoup], text: str) -> bool:
    if _select_any(soups, 'a[href*="case-stud"], a[href*="case_stud"]'):
        return True
    for soup in soups:
        if any(CASE_STUDY_HEADING.search(h.get_text(" ")) for h in soup.select("h1, h2, h3, h4")):
            return True
    return bool(SUCCESS_STORY.search(text))


def has_expert_quotes(soups: list[BeautifulSoup]) -> bool:
    blockquotes = sum(len(soup.find_all("blockquote")) for soup in soups)
    return blockquotes >= w.EXPERT_QUOTES_MIN_BLOCKQUOTES or _select_any(
        soups, "blockquote cite, blockquote footer, blockquote + p"
    )


def author_schema_depth(blocks: list[JsonLdBlock]) -> int:
    """How many of jobTitle/sameAs/affiliation the author entity declares."""
    author = find_schema_by_type(blocks, "Person")
    if author is None:
        author = next((b["author"] for b in blocks if isinstance(b.get("author"), dict)), None)
    if author is None:
        return 0
    return sum(1 for key in AUTHOR_DEPTH_FIELDS if author.get(key))


def analyze_authority(
    page: ParsedPage,
    additional_pages: dict[str, ParsedPage] | None,
    signals: ExternalSignals,
    url: str | None = None,
) -> PillarAnalysis:
    """Score the Authority pillar across all analyzed pages plus Knowledge Graph and Reddit."""
    card = Scorecard(Pillar.AUTHORITY)
    points = w.AUTHORITY_POINTS
    details = AuthorityDetails()

    pages = [page, *(additional_pages or {}).values()]
    soups = [p.soup for p in pages]
    text = " ".join(p.main_content for p in pages)
    blocks = [block for p in pages for block in p.json_ld_blocks]
    site_host = (urlparse(url or page.url).hostname or "").lower()

    if has_author_attribution(soups, blocks, text):
        card.award(
            points["author"],
            "Author Attribution",
            "Your content includes author information, which builds E-E-A-T "
            "(Experience, Expertise, Authority, Trust).",
        )
    else:
        card.recommend(
            "Add Author Information",
            "Include author names and bios showing credentials and expertise. Add Person schema markup.",
            "E-E-A-T signals help AI systems judge content quality.",
        )

    if has_about_page(soups, text):
        card.award(
            points["about_page"],
            "About Page Present",
            "Your site has an About page that establishes company credibility.",
        )
    else:
        card.recommend(
            "Create Comprehensive About Page",
            "Create a detailed About page covering team expertise, company history and qualifications.",
            "AI systems look for signals that content comes from legitimate, expert sources.",
        )

    if has_contact_info(soups):
        card.award(
            points["contact_info"],
            "Contact Information",
            "Your site displays contact information, building trust and legitimacy.",
        )
    else:
        card.recommend(
            "Display Contact Information",
            "Make your email, phone number or contact form easy to find.",
            "Clear contact details are a basic legitimacy signal.",
        )

    if has_press_mentions(text):
        card.award(
            points["press_mentions"],
            "Press/Media Mentions",
            "Your site showcases press or media coverage, demonstrating external validation.",
        )
    else:
        card.recommend(
            "Pursue Press Coverage",
            "Seek media coverage and add an 'As Seen In' section. Pitch industry publications and podcasts.",
            "Third-party media mentions are strong authority signals for AI systems.",
        )

    if DIGITAL_PR_LANGUAGE.search(text):
        card.award(
            points["digital_pr"],
            "Digital PR Presence",
            "Your site shows evidence of podcasts, webinars or speaking engagements.",
        )
    else:
        card.recommend(
            "Build Digital PR Presence",
            "Appear on podcasts, host webinars and speak at conferences, then document it on your site.",
            "Active digital PR signals that you're a recognized voice in your industry.",
        )

    if has_community_presence(soups, text):
        card.award(
            points["community"],
            "Community Engagement",
            "Your site references community platforms where you engage with your audience.",
        )
    else:
        card.recommend(
            "Engage on Community Platforms",
            "Build a presence on Reddit, Quora and industry forums by answering questions.",
            "Perplexity cites Reddit more than any other source.",
        )

    platforms = social_platforms_linked(soups)
    details.social_platform_count = len(platforms)
    details.social_platforms = platforms
    if len(platforms) >= w.SOCIAL_PLATFORMS_MIN:
        card.award(
            points["social_profiles"],
            "Social Media Presence",
            f"Found links to {len(platforms)} social platforms ({', '.join(platforms)}).",
        )
    else:
        card.recommend(
            "Add Social Media Links",
            "Link to your active social profiles (LinkedIn, Twitter/X, YouTube).",
            "AI systems aggregate information across the web, so social presence adds to authority.",
        )

    if CREDENTIALS_LANGUAGE.search(text):
        card.award(
            points["credentials"],
            "Credentials Displayed",
            "Your site showcases credentials, certifications or experience that establish expertise.",
        )

    citations = count_external_citations(soups, site_host)
    details.external_citation_count = min(citations, w.EXTERNAL_CITATIONS_CAP)
    if CITATION_LANGUAGE.search(text) or citations >= w.EXTERNAL_CITATIONS_MIN:
        card.award(
            points["citations"],
            "Content Citations",
            "Your content cites external sources and research, demonstrating credibility.",
        )
    else:
        card.recommend(
            "Cite Authoritative Sources",
            "Back claims with links to research, studies and authoritative publications.",
            "Content that cites credible sources is more likely to be trusted and cited by AI.",
        )

    if has_reviews(soups, blocks, text):
        card.award(
            points["reviews"],
            "Reviews Present",
            "Your site displays reviews or ratings, providing strong social proof.",
        )
    else:
        card.recommend(
            "Add Customer Reviews",
            "Display customer reviews or link to review platforms (Google Reviews, Trustpilot, G2). Add Review schema.",
            "AI systems often cite businesses with verified customer feedback.",
        )

    if has_testimonials(soups, text):
        card.award(
            points["testimonials"],
            "Testimonials Present",
            "Your site includes testimonials that provide social proof.",
        )
    else:
        card.recommend(
            "Add Customer Testimonials",
            "Feature testimonials from customers with names, titles and companies.",
            "Testimonials demonstrate real-world success.",
        )

    if has_case_studies(soups, text):
        card.award(
            points["case_studies"],
            "Case Studies/Results",
            "Your site features case studies or results, demonstrating real-world expertise.",
        )
    else:
        card.recommend(
            "Create Case Studies",
            "Document client success stories with specific metrics and outcomes.",
            "AI systems prioritize content backed by real results.",
        )

    if has_expert_quotes(soups):
        card.award(
            points["expert_quotes"],
            "Expert Quotes",
            "Your content includes attributed quotes, adding credibility and depth.",
        )

    if author_schema_depth(blocks) >= w.AUTHOR_SCHEMA_MIN_SIGNALS:
        card.award(
            points["author_schema"],
            "Rich Author Schema",
            "Author schema includes detailed credentials (job title, affiliations, social profiles).",
        )

    kg = signals.knowledge_graph
    if kg is not None:
        details.knowledge_graph_found = kg.found
        details.knowledge_graph_type = kg.type
        if kg.found:
            card.award(
                points["knowledge_graph"],
                "Knowledge Graph Presence",
                f'Your brand is recognized in Google\'s Knowledge Graph as "{kg.type or "Entity"}".',
            )

    reddit = signals.reddit
    details.reddit_mentions = reddit.post_count
    details.reddit_subreddits = list(reddit.subreddits)
    if reddit.has_mentions and reddit.post_count >= w.REDDIT_STRONG_POSTS:
        subreddit_info = (
            " across subreddits: " + ", ".join(f"r/{name}" for name in reddit.subreddits)
            if reddit.subreddits
            else ""
        )
        card.award(
            points["reddit_strong"],
            "Reddit Brand Presence",
            f"Found {reddit.post_count} Reddit posts mentioning your brand{subreddit_info}.",
        )
    elif reddit.has_mentions:
        card.award(
            points["reddit_some"],
            "Some Reddit Presence",
            f"Found {reddit.post_count} Reddit mention(s). More community engagement would strengthen AI visibility.",
        )
    else:
        card.recommend(
            "Build Reddit Presence",
            "Answer questions in relevant subreddits and take part in discussions.",
            "Reddit is among the most cited sources in Perplexity and Google AI Overviews.",
        )

    if not (kg and kg.found):
        card.recommend(
            "Build Wikipedia Presence",
            "Work toward citations in relevant Wikipedia articles through sustained coverage and notability.",
            "Page HTML can't confirm Wikipedia coverage, and Wikipedia is cited disproportionately by all major LLMs.",
        )

    return card.result(details)
