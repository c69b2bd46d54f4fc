"""Content-area isolation: strips page chrome and commerce widgets."""

import copy
import re

from bs4 import BeautifulSoup

# Elements that never carry main content
NON_CONTENT_SELECTOR = (
    "script, style, nav, header, footer, aside, noscript, svg, iframe, form, "
    "[role='navigation'], [role='banner'], [role='complementary'], [aria-hidden='true']"
)

# Product grids, carts and prices inflate word and data counts
COMMERCE_SELECTOR = (
    "[class*='product-grid'], [class*='product-list'], [class*='product-card'], "
    "[class*='ProductCard'], [class*='ProductGrid'], [class*='ProductList'], "
    "[class*='collection-grid'], [class*='CollectionGrid'], "
    "[class*='cart'], [class*='Cart'], "
    "[class*='shopify-section-'], "
    "[class*='price'], [data-price], .money, .Price"
)

MAIN_CONTAINER_SELECTOR = "main, article, [role='main'], .content, #content"

# Below this many characters a container is treated as empty
MIN_CONTAINER_CHARS = 100


def collapse_whitespace(text: str) -> str:
    """Collapse runs of whitespace to single spaces."""
    return re.sub(r"\s+", " ", text).strip()


def _remove(soup: BeautifulSoup, selector: str) -> None:
    for tag in soup.select(selector):
        if not tag.decomposed:
            tag.decompose()


def strip_chrome(soup: BeautifulSoup) -> BeautifulSoup:
    """Copy of the document without scripts, navigation and other chrome."""
    clean = copy.copy(soup)
    _remove(clean, NON_CONTENT_SELECTOR)
    return clean


def content_area(soup: BeautifulSoup) -> BeautifulSoup:
    """Copy of the document without chrome, product grids, carts and prices."""
    clean = strip_chrome(soup)
    _remove(clean, COMMERCE_SELECTOR)
    return clean


def container_text(soup: BeautifulSoup) -> str:
    """Text of the main containers, falling back to the body (or whole document)."""
    text = collapse_whitespace(
        " ".join(tag.get_text(" ") for tag in soup.select(MAIN_CONTAINER_SELECTOR))
    )
    if len(text) > MIN_CONTAINER_CHARS:
        return text

    body = soup.body or soup
    return collapse_whitespace(body.get_text(" "))


def content_area_text(soup: BeautifulSoup) -> str:
    """Main-content text with chrome and commerce elements filtered out."""
    return container_text(content_area(soup))
