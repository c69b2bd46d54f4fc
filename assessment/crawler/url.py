"""URL normalization and utilities."""

from urllib.parse import parse_qsl, urlencode, urlparse, urlunparse

# Query parameters to strip besides the utm_ family
STRIP_PARAMS = frozenset(["ref"])


def _is_tracking_param(key: str) -> bool:
    return key.lower().startswith("utm_") or key.lower() in STRIP_PARAMS


def ensure_scheme(url: str) -> str:
    """Prefix https:// to a bare hostname."""
    url = url.strip()
    if not url.lower().startswith(("http://", "https://")):
        return f"https://{url}"
    return url


def normalize_url(url: str) -> str:
    """
    Normalize a URL for analysis.

    - Forces the https scheme
    - Strips the trailing slash (root path keeps "/")
    - Removes tracking parameters (utm_*, ref)

    Returns the input unchanged if it cannot be parsed.
    """
    try:
        parsed = urlparse(url)
        if not parsed.netloc:
            return url

        path = parsed.path or "/"
        if path != "/" and path.endswith("/"):
            path = path.rstrip("/") or "/"

        query = ""
        if parsed.query:
            params = [
                (k, v)
                for k, v in parse_qsl(parsed.query, keep_blank_values=True)
                if not _is_tracking_param(k)
            ]
            query = urlencode(params)

        return urlunparse(("https", parsed.netloc, path, parsed.params, query, parsed.fragment))
    except ValueError:
        return url


def get_origin(url: str) -> str:
    """Get scheme://host[:port] for a URL."""
    parsed = urlparse(url)
    return f"{parsed.scheme}://{parsed.netloc}"


def get_brand_hostname(url: str) -> str:
    """Hostname with a leading www. removed, used as the brand query."""
    hostname = (urlparse(url).hostname or "").lower()
    if hostname.startswith("www."):
        hostname = hostname[4:]
    return hostname
