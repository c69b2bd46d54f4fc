"""Pillar analyzers: pure functions from parsed pages and signals to a PillarAnalysis."""

# Use explicit imports when needed:
# from assessment.analyzers.content import analyze_content
# from assessment.analyzers.technical import analyze_technical
# from assessment.analyzers.authority import analyze_authority
# from assessment.analyzers.measurement import analyze_measurement

__all__ = [
    "Pillar",
    "Strength",
    "Recommendation",
    "PillarAnalysis",
    "analyze_content",
    "analyze_technical",
    "analyze_authority",
    "analyze_measurement",
]
