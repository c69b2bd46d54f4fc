"""External signal providers.

Each provider returns a typed result or a safe "absent" value; none of them
raise into the assessment pipeline.
"""

# Use explicit imports when needed:
# from assessment.signals.bundle import ExternalSignals
# from assessment.signals.settle import settle
# from assessment.signals.robots import fetch_robots_txt, parse_robots_txt

__all__ = [
    "ExternalSignals",
    "settle",
    "call_pagespeed_insights",
    "check_ssl_certificate",
    "fetch_sitemap_xml",
    "fetch_robots_txt",
    "fetch_llms_txt",
    "search_knowledge_graph",
    "search_reddit_mentions",
]
