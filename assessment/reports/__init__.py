"""AEO report contract.

Use explicit imports:
    from assessment.reports.contract import AEOReport, AEOScores
"""

__all__ = [
    "ReportVersion",
    "AEOScores",
    "AEOReport",
]
