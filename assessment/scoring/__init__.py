"""Aggregation of pillar scores into the overall AEO maturity picture."""

# Use explicit imports when needed:
# from assessment.scoring.aggregate import calculate_overall_score, get_maturity_level

__all__ = [
    "MaturityLevel",
    "PillarSummary",
    "calculate_overall_score",
    "get_maturity_level",
    "generate_pillar_summaries",
    "generate_top_priorities",
]
