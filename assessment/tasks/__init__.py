"""Assessment task entry points."""

from assessment.tasks.assess import analyze_website, build_report

__all__ = [
    "analyze_website",
    "build_report",
]
