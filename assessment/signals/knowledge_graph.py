"""Google Knowledge Graph entity lookup."""

from dataclasses import dataclass
from typing import Any

import httpx
import structlog

from api.config import get_settings

logger = structlog.get_logger(__name__)

KNOWLEDGE_GRAPH_ENDPOINT = "https://kgsearch.googleapis.com/v1/entities:search"

# Matches scoring below this are too weak to count as the brand's entity
MIN_RESULT_SCORE = 10


@dataclass
class KnowledgeGraphResult:
    """Whether the brand resolves to a Knowledge Graph entity."""

    found: bool
    name: str | None = None
    type: str | None = None
    description: str | None = None


def _entity_type(value: Any) -> str | None:
    if isinstance(value, list):
        specific = [t for t in value if isinstance(t, str) and t != "Thing"]
        if specific:
            return specific[0]
        return value[0] if value else None
    return value if isinstance(value, str) else None


def parse_knowledge_graph_response(data: dict[str, Any]) -> KnowledgeGraphResult:
    """Interpret an entities:search response body."""
    items = data.get("itemListElement") or []
    if not items:
        return KnowledgeGraphResult(found=False)

    top = items[0] or {}
    entity = top.get("result")
    if not entity:
        return KnowledgeGraphResult(found=False)

    if (top.get("resultScore") or 0) < MIN_RESULT_SCORE:
        return KnowledgeGraphResult(found=False)

    return KnowledgeGraphResult(
        found=True,
        name=entity.get("name"),
        type=_entity_type(entity.get("@type")),
        description=entity.get("description"),
    )


async def search_knowledge_graph(
    query: str,
    timeout: float | None = None,
) -> KnowledgeGraphResult | None:
    """Look ``query`` up in the Knowledge Graph; None without an API key or on failure."""
    settings = get_settings()
    if not settings.google_knowledge_graph_key:
        logger.debug("knowledge_graph_skipped", reason="no_api_key")
        return None

    timeout = timeout if timeout is not None else settings.knowledge_graph_timeout
    params = {
        "query": query,
        "key": settings.google_knowledge_graph_key,
        "limit": "1",
        "indent": "false",
    }

    try:
        async with httpx.AsyncClient(timeout=timeout) as client:
            response = await client.get(KNOWLEDGE_GRAPH_ENDPOINT, params=params)
    except httpx.HTTPError as e:
        logger.warning("knowledge_graph_request_failed", query=query, error=str(e))
        return None

    if not response.is_success:
        logger.warning("knowledge_graph_bad_status", query=query, status_code=response.status_code)
        return None

    try:
        return parse_knowledge_graph_response(response.json())
    except ValueError as e:
        logger.warning("knowledge_graph_invalid_json", query=query, error=str(e))
        return None
