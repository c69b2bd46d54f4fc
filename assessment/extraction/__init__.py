"""Extraction package: HTML parsing, main content and JSON-LD."""

# Use explicit imports when needed:
# from assessment.extraction.parser import ParsedPage, parse_page
# from assessment.extraction.cleaner import content_area, content_area_text

__all__ = [
    "ParsedPage",
    "parse_page",
    "extract_json_ld",
    "get_schema_types",
    "find_schema_by_type",
    "schema_types_of",
    "count_words",
    "content_area",
    "content_area_text",
]
