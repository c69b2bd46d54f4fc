"""Priority internal page discovery."""

from urllib.parse import urljoin, urlparse

from bs4 import BeautifulSoup

# Paths worth crawling for content and authority signals
PRIORITY_PATHS = (
    "/about",
    "/about-us",
    "/company",
    "/blog",
    "/articles",
    "/news",
    "/resources",
    "/faq",
    "/faqs",
    "/help",
    "/support",
    "/contact",
    "/contact-us",
    "/services",
    "/solutions",
    "/products",
    "/team",
    "/leadership",
    "/our-team",
    "/case-studies",
    "/customers",
    "/testimonials",
    "/pricing",
)

# Lower sorts first; unmatched paths get DEFAULT_LINK_PRIORITY
LINK_PRIORITIES = (
    ("faq", 0),
    ("about", 1),
    ("blog", 2),
    ("service", 3),
)
DEFAULT_LINK_PRIORITY = 10

MAX_PRIORITY_LINKS = 5

SKIP_HREF_PREFIXES = ("#", "javascript:", "mailto:", "tel:")


def link_priority(url: str) -> int:
    """Crawl priority of a URL based on its path."""
    path = urlparse(url).path.lower()
    for keyword, priority in LINK_PRIORITIES:
        if keyword in path:
            return priority
    return DEFAULT_LINK_PRIORITY


def extract_internal_links(
    soup: BeautifulSoup,
    base_url: str,
    limit: int = MAX_PRIORITY_LINKS,
) -> list[str]:
    """
    Find same-host links to priority pages (about, FAQ, blog...).

    Args:
        soup: Parsed homepage
        base_url: URL the page was served from
        limit: Maximum number of URLs returned

    Returns:
        Up to ``limit`` origin+path URLs, FAQ first, then About, Blog, Services
    """
    base = urlparse(base_url)
    base_host = (base.hostname or "").lower()
    found: list[str] = []
    seen: set[str] = set()

    for anchor in soup.find_all("a", href=True):
        href = anchor["href"].strip()
        if not href or href.lower().startswith(SKIP_HREF_PREFIXES):
            continue

        try:
            resolved = urlparse(urljoin(base_url, href))
        except ValueError:
            continue

        if (resolved.hostname or "").lower() != base_host:
            continue

        path = resolved.path.lower()
        if not any(priority_path in path for priority_path in PRIORITY_PATHS):
            continue

        clean = f"{resolved.scheme}://{resolved.netloc}{resolved.path}"
        if clean not in seen:
            seen.add(clean)
            found.append(clean)

    # sorted() is stable, so document order is kept within a band
    return sorted(found, key=link_priority)[:limit]
