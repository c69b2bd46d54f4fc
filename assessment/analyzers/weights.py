"""Point values, pillar weights and thresholds.

Every number that decides a score lives here; detection code only
references these names.
"""

MAX_PILLAR_SCORE = 5.0

# =============================================================================
# CONTENT
# =============================================================================
CONTENT_POINTS: dict[str, float] = {
    "faq": 1.0,
    "headings": 0.75,
    "length_comprehensive": 1.0,
    "length_good": 0.5,
    "meta_description": 0.5,
    "question_headings": 0.5,
    "table_of_contents": 0.25,
    "summary": 0.25,
    "freshness": 0.25,
    "lists": 0.25,
    "readability_optimal": 0.5,
    "readability_good": 0.25,
    "image_alt": 0.25,
    "internal_links": 0.25,
    "data_points": 0.25,
    "structured_formats": 0.25,
    "section_density": 0.25,
    "answer_first_full": 0.5,
    "answer_first_partial": 0.25,
    "extractable_full": 0.5,
    "extractable_partial": 0.25,
    "editorial_content": 0.75,
    "blog_link": 0.25,
}

CONTENT_LENGTH_COMPREHENSIVE = 1500  # words, exclusive
CONTENT_LENGTH_GOOD = 800
META_DESCRIPTION_RANGE = (120, 160)
READABILITY_OPTIMAL = (60.0, 75.0)
READABILITY_GOOD = (50.0, 80.0)
READABILITY_MIN_CHARS = 200  # shorter text is not scored
IMAGE_ALT_COVERAGE_MIN = 90  # percent
INTERNAL_LINKS_MIN = 5  # average per scoring page
DATA_POINTS_MIN = 5
TOC_ANCHOR_LINKS_MIN = 5
SECTION_DENSITY_RANGE = (100, 200)  # words per section
SECTION_DENSITY_MIN_HEADINGS = 3
SECTION_DENSITY_MIN_WORDS = 300
ANSWER_FIRST_MIN_SECTIONS = 2
ANSWER_FIRST_FULL = 0.5
ANSWER_FIRST_PARTIAL = 0.25
EXTRACTABLE_MIN_PARAGRAPHS = 3
EXTRACTABLE_MIN_CHARS = 30
EXTRACTABLE_FULL = 0.8
EXTRACTABLE_PARTIAL = 0.6

# =============================================================================
# TECHNICAL
# =============================================================================
TECHNICAL_POINTS: dict[str, float] = {
    "schema_markup": 0.75,
    "schema_diversity": 0.5,
    "https": 0.5,
    "ssl_health": 0.25,
    "viewport": 0.25,
    "sitemap": 0.5,
    "robots_txt": 0.25,
    "ai_bots_allowed": 0.5,
    "canonical": 0.25,
    "open_graph": 0.25,
    "llms_txt": 0.5,
    "page_speed_excellent": 0.5,
    "page_speed_acceptable": 0.25,
    "accessibility": 0.25,
}

SCHEMA_DIVERSITY_MIN = 3
SSL_EXPIRY_WARNING_DAYS = 30
OPEN_GRAPH_MIN_TAGS = 2
PAGE_SPEED_EXCELLENT = 90
PAGE_SPEED_ACCEPTABLE = 50
ACCESSIBILITY_STRONG = 90

# =============================================================================
# AUTHORITY
# =============================================================================
AUTHORITY_POINTS: dict[str, float] = {
    "author": 0.5,
    "about_page": 0.4,
    "contact_info": 0.35,
    "press_mentions": 0.6,
    "digital_pr": 0.5,
    "community": 0.25,
    "social_profiles": 0.25,
    "credentials": 0.25,
    "citations": 0.4,
    "reviews": 0.5,
    "testimonials": 0.5,
    "case_studies": 0.5,
    "expert_quotes": 0.25,
    "author_schema": 0.25,
    "knowledge_graph": 0.5,
    "reddit_strong": 0.5,
    "reddit_some": 0.25,
}

SOCIAL_PLATFORMS_MIN = 2
EXTERNAL_CITATIONS_MIN = 3
EXTERNAL_CITATIONS_CAP = 50  # reported in details
EXPERT_QUOTES_MIN_BLOCKQUOTES = 2
AUTHOR_SCHEMA_MIN_SIGNALS = 2
REDDIT_STRONG_POSTS = 3

# =============================================================================
# MEASUREMENT
# =============================================================================
MEASUREMENT_POINTS: dict[str, float] = {
    "analytics": 1.0,
    "multi_analytics": 0.25,
    "event_tracking": 0.5,
    "tag_manager": 0.5,
    "crm": 0.25,
    "heatmap": 0.25,
    "cookie_consent": 0.25,
    "ab_testing": 0.25,
    "performance_monitoring": 0.25,
    "ad_pixels": 0.25,
}

MULTI_ANALYTICS_MIN = 2

# Tiered checks share one slot in the checks count
_TIERED_CHECKS = {
    "length_good",
    "readability_good",
    "answer_first_partial",
    "extractable_partial",
    "blog_link",
    "page_speed_acceptable",
    "reddit_some",
}


def count_checks(points: dict[str, float]) -> int:
    """Number of distinct checks in a points table."""
    return sum(1 for key in points if key not in _TIERED_CHECKS)


# =============================================================================
# AGGREGATION
# =============================================================================
PILLAR_WEIGHTS: dict[str, float] = {
    "Content": 0.30,
    "Technical": 0.25,
    "Authority": 0.25,
    "Measurement": 0.20,
}

CHECKS_TOTAL: dict[str, int] = {
    "Content": count_checks(CONTENT_POINTS),
    "Technical": count_checks(TECHNICAL_POINTS),
    "Authority": count_checks(AUTHORITY_POINTS),
    "Measurement": count_checks(MEASUREMENT_POINTS),
}

# Lower bounds, checked from the top
MATURITY_LEVELS: tuple[tuple[float, str, str], ...] = (
    (
        4.5,
        "Leader",
        "Your site is optimized for AI-driven discovery. Focus on maintaining and expanding your presence.",
    ),
    (
        3.5,
        "Advanced",
        "You're well-positioned for AI search. A few improvements will help you reach leader status.",
    ),
    (
        2.5,
        "Developing",
        "You have a good foundation. Focus on the recommendations below to improve AI visibility.",
    ),
    (
        1.5,
        "Emerging",
        "You're starting to optimize for AI search. There's significant room for improvement.",
    ),
    (
        0.0,
        "Foundation",
        "Your site is optimized for traditional SEO but needs work for AI-driven discovery.",
    ),
)

PRIORITY_CATEGORY_WEIGHTS: dict[str, float] = {
    "Content": 1.3,
    "Technical": 1.2,
    "Authority": 1.1,
    "Measurement": 1.0,
}

HIGH_PRIORITY_MULTIPLIER = 2.0

HIGH_PRIORITY_TITLES = (
    "Add an FAQ Section",
    "Implement Schema Markup",
    "Add Meta Descriptions",
    "Improve Heading Hierarchy",
    "Add Author Information",
    "Install Analytics Tracking",
    "Enable HTTPS",
    "AI Bots Are Blocked",
)

TOP_PRIORITIES_COUNT = 3
