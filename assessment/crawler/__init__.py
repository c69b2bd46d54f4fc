"""Crawler package: homepage fetch, URL helpers and priority page discovery."""

# Use explicit imports when needed:
# from assessment.crawler.fetcher import fetch_website, fetch_multiple_pages
# from assessment.crawler.links import extract_internal_links
# from assessment.crawler.url import normalize_url, ensure_scheme

__all__ = [
    "FetchResult",
    "fetch_website",
    "fetch_multiple_pages",
    "extract_internal_links",
    "normalize_url",
    "ensure_scheme",
    "get_origin",
    "get_brand_hostname",
]
