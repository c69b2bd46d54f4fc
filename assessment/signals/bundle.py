"""The external signals handed to the analyzers."""

from dataclasses import dataclass, field

from assessment.signals.knowledge_graph import KnowledgeGraphResult
from assessment.signals.llms_txt import LlmsTxtResult
from assessment.signals.pagespeed import PageSpeedResult
from assessment.signals.reddit import RedditResult
from assessment.signals.robots import RobotsResult
from assessment.signals.sitemap import SitemapResult
from assessment.signals.ssl_check import SSLResult


@dataclass
class ExternalSignals:
    """Results of every provider, already defaulted on failure."""

    pagespeed: PageSpeedResult | None = None
    ssl: SSLResult | None = None
    sitemap: SitemapResult = field(default_factory=SitemapResult.absent)
    robots: RobotsResult = field(default_factory=RobotsResult.absent)
    llms_txt: LlmsTxtResult = field(default_factory=LlmsTxtResult.absent)
    knowledge_graph: KnowledgeGraphResult | None = None
    reddit: RedditResult = field(default_factory=RedditResult.empty)
