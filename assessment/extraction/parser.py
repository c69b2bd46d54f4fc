"""Page parsing: DOM handle, main content text and JSON-LD blocks."""

import json
from dataclasses import dataclass, field
from typing import Any

import structlog
from bs4 import BeautifulSoup
from readability import Document

from assessment.extraction.cleaner import (
    MAIN_CONTAINER_SELECTOR,
    MIN_CONTAINER_CHARS,
    collapse_whitespace,
    container_text,
    strip_chrome,
)

logger = structlog.get_logger(__name__)

JsonLdBlock = dict[str, Any]


@dataclass
class ParsedPage:
    """A fetched page ready for analysis."""

    url: str
    soup: BeautifulSoup
    main_content: str
    main_content_html: str
    json_ld_blocks: list[JsonLdBlock] = field(default_factory=list)

    @property
    def schema_types(self) -> list[str]:
        return get_schema_types(self.json_ld_blocks)


def parse_page(html: str, url: str) -> ParsedPage:
    """
    Parse raw HTML into a ParsedPage.

    Never raises: content extraction degrades through readability,
    semantic containers and finally the full body text.
    """
    soup = BeautifulSoup(html, "html.parser")
    return ParsedPage(
        url=url,
        soup=soup,
        main_content=extract_main_content(html, soup, url),
        main_content_html=extract_main_content_html(soup),
        json_ld_blocks=extract_json_ld(soup),
    )


def _readability_text(html: str, url: str) -> str:
    try:
        summary = Document(html, url=url).summary(html_partial=True)
    except Exception as e:
        # readability raises its own Unparseable as well as lxml errors
        logger.debug("readability_failed", url=url, error=str(e))
        return ""
    return collapse_whitespace(BeautifulSoup(summary, "html.parser").get_text(" "))


def extract_main_content(html: str, soup: BeautifulSoup, url: str = "") -> str:
    """Main readable text: readability, then semantic containers, then body."""
    text = _readability_text(html, url) if html.strip() else ""
    if len(text) >= MIN_CONTAINER_CHARS:
        return text
    return container_text(strip_chrome(soup))


def extract_main_content_html(soup: BeautifulSoup) -> str:
    """Inner HTML of the first substantial content container, else the stripped body."""
    for selector in MAIN_CONTAINER_SELECTOR.split(", "):
        tag = soup.select_one(selector)
        if tag is not None:
            inner = tag.decode_contents()
            if len(inner.strip()) > MIN_CONTAINER_CHARS:
                return inner

    clean = strip_chrome(soup)
    body = clean.body
    return body.decode_contents() if body is not None else ""


def extract_json_ld(soup: BeautifulSoup) -> list[JsonLdBlock]:
    """
    Parse every JSON-LD script on the page.

    Top-level arrays are flattened, @graph members follow their container
    and malformed blocks are skipped.
    """
    blocks: list[JsonLdBlock] = []

    for script in soup.find_all("script", type="application/ld+json"):
        raw = script.string or script.get_text()
        if not raw or not raw.strip():
            continue
        try:
            data = json.loads(raw)
        except (json.JSONDecodeError, TypeError) as e:
            logger.debug("json_ld_parse_failed", error=str(e))
            continue

        if isinstance(data, list):
            blocks.extend(item for item in data if isinstance(item, dict))
        elif isinstance(data, dict):
            blocks.append(data)
            graph = data.get("@graph")
            if isinstance(graph, list):
                blocks.extend(item for item in graph if isinstance(item, dict))

    return blocks


def schema_types_of(block: JsonLdBlock) -> list[str]:
    """Normalize a block's @type (string or list) to a list of strings."""
    value = block.get("@type")
    if isinstance(value, str):
        return [value]
    if isinstance(value, list):
        return [t for t in value if isinstance(t, str)]
    return []


def get_schema_types(blocks: list[JsonLdBlock]) -> list[str]:
    """Distinct @type values in first-seen order."""
    types: dict[str, None] = {}
    for block in blocks:
        for schema_type in schema_types_of(block):
            types.setdefault(schema_type, None)
    return list(types)


def find_schema_by_type(blocks: list[JsonLdBlock], schema_type: str) -> JsonLdBlock | None:
    """First block whose @type contains ``schema_type``."""
    for block in blocks:
        if schema_type in schema_types_of(block):
            return block
    return None


def has_schema_type(blocks: list[JsonLdBlock], *schema_types: str) -> bool:
    """Whether any block declares one of ``schema_types``."""
    wanted = set(schema_types)
    return any(wanted.intersection(schema_types_of(block)) for block in blocks)


def count_words(text: str) -> int:
    """Count whitespace-separated tokens longer than two characters."""
    return sum(1 for word in text.split() if len(word) > 2)
