"""Tests for URL normalization and utilities."""

from assessment.crawler.url import ensure_scheme, get_brand_hostname, get_origin, normalize_url


class TestEnsureScheme:
    """Tests for ensure_scheme function."""

    def test_adds_https_to_bare_host(self) -> None:
        assert ensure_scheme("example.com") == "https://example.com"

    def test_keeps_existing_scheme(self) -> None:
        assert ensure_scheme("http://example.com") == "http://example.com"
        assert ensure_scheme("HTTPS://example.com") == "HTTPS://example.com"

    def test_strips_whitespace(self) -> None:
        assert ensure_scheme("  example.com/page ") == "https://example.com/page"


class TestNormalizeUrl:
    """Tests for normalize_url function."""

    def test_forces_https(self) -> None:
        """Test http is upgraded to https."""
        assert normalize_url("http://example.com/") == "https://example.com/"

    def test_removes_trailing_slash(self) -> None:
        """Test trailing slash removal from non-root paths."""
        assert normalize_url("https://example.com/page/") == "https://example.com/page"
        assert normalize_url("https://example.com/") == "https://example.com/"  # Root keeps slash

    def test_empty_path_becomes_root(self) -> None:
        assert normalize_url("https://example.com") == "https://example.com/"

    def test_strips_tracking_params(self) -> None:
        """Test utm_* and ref parameters are removed, others kept."""
        result = normalize_url("https://example.com/page?utm_source=google&id=123&ref=nav")
        assert result == "https://example.com/page?id=123"

    def test_keeps_www(self) -> None:
        assert normalize_url("https://www.example.com/") == "https://www.example.com/"

    def test_unparseable_returns_input(self) -> None:
        assert normalize_url("not a url") == "not a url"


class TestOriginAndBrand:
    """Tests for get_origin and get_brand_hostname."""

    def test_origin(self) -> None:
        assert get_origin("https://example.com/about?x=1") == "https://example.com"
        assert get_origin("https://example.com:8443/a") == "https://example.com:8443"

    def test_brand_hostname_strips_www(self) -> None:
        assert get_brand_hostname("https://www.Example.com/page") == "example.com"
        assert get_brand_hostname("https://blog.example.com/") == "blog.example.com"
