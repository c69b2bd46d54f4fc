"""AEO Assessment - multi-pillar website analysis engine."""

from typing import Any

__all__ = [
    "AEOReport",
    "analyze_website",
]


def __getattr__(name: str) -> Any:
    """Lazy import for the public entry points."""
    if name == "analyze_website":
        from assessment.tasks.assess import analyze_website

        return analyze_website
    elif name == "AEOReport":
        from assessment.reports.contract import AEOReport

        return AEOReport
    raise AttributeError(f"module 'assessment' has no attribute '{name}'")
