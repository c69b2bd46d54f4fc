"""Measurement pillar: analytics and tracking maturity from static script inspection."""

import re
from typing import NamedTuple
from urllib.parse import parse_qsl, urlparse

from bs4 import BeautifulSoup

from assessment.analyzers import weights as w
from assessment.analyzers.models import (
    MeasurementDetails,
    Pillar,
    PillarAnalysis,
    Scorecard,
    round_half_up,
)
from assessment.extraction.parser import ParsedPage


class Detector(NamedTuple):
    """A named tool recognized by its script src and/or inline script body."""

    name: str
    src_pattern: str | None
    content_pattern: str | None


ANALYTICS_PLATFORMS = (
    Detector("Google Analytics 4", r"gtag|google-analytics", r"gtag.*config|google-analytics|googletagmanager\.com/gtag"),
    Detector("Plausible", r"plausible", r"plausible"),
    Detector("Mixpanel", r"mixpanel", r"mixpanel\.init"),
    Detector("Amplitude", r"amplitude", r"amplitude\.getInstance"),
    Detector("Heap", r"heap", r"heap\.load"),
    Detector("Segment", r"segment\.com|cdn\.segment", r"analytics\.load"),
    Detector("Fathom", r"fathom", r"fathom"),
    Detector("PostHog", r"posthog", r"posthog"),
    Detector("Matomo", r"matomo|piwik", r"matomo|piwik"),
)

TAG_MANAGERS = (
    Detector("Google Tag Manager", r"googletagmanager\.com/gtm", r"GTM-[A-Z0-9]+"),
    Detector("Segment", r"cdn\.segment\.com", r"analytics\.load\("),
    Detector("Tealium", r"tealium", r"utag"),
    Detector("Adobe Launch", r"assets\.adobedtm|launch-", r"adobe"),
)

CRM_TOOLS = (
    Detector("HubSpot", r"js\.hs-scripts\.com|hs-analytics|hubspot", r"hubspot"),
    Detector("Salesforce", r"salesforce\.com|pardot", r"pardot"),
    Detector("Intercom", r"intercom\.io", r"intercomSettings"),
    Detector("Drift", r"drift\.com|driftt", r"driftt"),
    Detector("Zendesk", r"zendesk\.com|zopim", r"zendesk|zopim"),
    Detector("Freshdesk", r"freshdesk|freshchat", r"freshdesk|freshchat"),
    Detector("Crisp", r"crisp\.chat", r"crisp\.chat"),
    Detector("Klaviyo", r"klaviyo", r"klaviyo"),
)

HEATMAP_TOOLS = (
    Detector("Hotjar", r"hotjar", r"hotjar|hj\("),
    Detector("Microsoft Clarity", r"clarity\.ms", r"clarity\.ms"),
    Detector("Lucky Orange", r"luckyorange", r"luckyorange"),
    Detector("FullStory", r"fullstory", r"fullstory"),
    Detector("LogRocket", r"logrocket", r"logrocket"),
    Detector("Mouseflow", r"mouseflow", r"mouseflow"),
)

CONSENT_PLATFORMS = (
    Detector("OneTrust", r"onetrust|optanon|cookielaw\.org", r"onetrust|optanon"),
    Detector("CookieBot", r"cookiebot|cookieconsent", r"cookiebot"),
    Detector("CookieYes", r"cookieyes", r"cookieyes"),
    Detector("Osano", r"osano", r"osano"),
    Detector("Termly", r"termly\.io", r"termly"),
    Detector("iubenda", r"iubenda", r"iubenda"),
)

AB_TESTING_TOOLS = (
    Detector("Optimizely", r"optimizely", r"optimizely"),
    Detector("VWO", r"vwo\.com|visualwebsiteoptimizer", r"_vwo_code|visualwebsiteoptimizer"),
    Detector("Convert", r"convert\.com", None),
    Detector("AB Tasty", r"abtasty", r"abtasty"),
    Detector("LaunchDarkly", r"launchdarkly", r"launchdarkly"),
)

MONITORING_TOOLS = (
    Detector("Sentry", r"sentry\.io|@sentry|sentry-cdn", r"Sentry\.init"),
    Detector("DataDog", r"datadoghq", r"DD_RUM|datadoghq"),
    Detector("New Relic", r"newrelic|nr-data", r"NREUM|newrelic"),
    Detector("Bugsnag", r"bugsnag", r"bugsnag"),
    Detector("Rollbar", r"rollbar", r"rollbar"),
)

AD_PIXELS = (
    Detector("Facebook Pixel", None, r"fbq\s*\("),
    Detector("LinkedIn Insight", r"linkedin.*insight|lnkd\.in|snap\.licdn", None),
    Detector("Google Ads", r"ads\.google|googleadservices|gtag.*conversion", r"googleadservices|gtag.*conversion"),
)

EVENT_TRACKING_CALLS = (
    r"gtag\s*\(\s*['\"]event['\"]",
    r"ga\s*\(\s*['\"]send['\"]\s*,\s*['\"]event['\"]",
    r"fbq\s*\(\s*['\"]track['\"]",
    r"analytics\.track\s*\(",
    r"mixpanel\.track\s*\(",
    r"dataLayer\.push\s*\(\s*\{[^}]*['\"]event['\"]",
)

AI_REFERRER_HOSTS = re.compile(
    r"chatgpt\.com|chat\.openai\.com|perplexity\.ai|claude\.ai|gemini\.google\.com|copilot\.microsoft\.com",
    re.IGNORECASE,
)


class ScriptInventory(NamedTuple):
    """Script sources and inline bodies of a page."""

    srcs: str
    content: str

    @classmethod
    def of(cls, soup: BeautifulSoup) -> "ScriptInventory":
        srcs: list[str] = []
        bodies: list[str] = []
        for script in soup.find_all("script"):
            src = script.get("src")
            if src:
                srcs.append(src)
            elif script.string:
                bodies.append(script.string)
        return cls("\n".join(srcs), "\n".join(bodies))


def _matches(detector: Detector, scripts: ScriptInventory) -> bool:
    if detector.src_pattern and re.search(detector.src_pattern, scripts.srcs, re.IGNORECASE):
        return True
    if detector.content_pattern and re.search(detector.content_pattern, scripts.content, re.IGNORECASE):
        return True
    return False


def detect_all(detectors: tuple[Detector, ...], scripts: ScriptInventory) -> list[str]:
    return [d.name for d in detectors if _matches(d, scripts)]


def detect_first(detectors: tuple[Detector, ...], scripts: ScriptInventory) -> str | None:
    return next((d.name for d in detectors if _matches(d, scripts)), None)


def has_event_tracking(scripts: ScriptInventory) -> bool:
    return any(re.search(pattern, scripts.content, re.IGNORECASE) for pattern in EVENT_TRACKING_CALLS)


def has_ai_referral_tracking(scripts: ScriptInventory) -> bool:
    return bool(AI_REFERRER_HOSTS.search(scripts.content))


def utm_discipline(soup: BeautifulSoup, url: str) -> int | None:
    """Percentage of outbound links tagged with utm_ parameters, None without outbound links."""
    site_host = (urlparse(url).hostname or "").lower()
    outbound = 0
    tagged = 0
    for anchor in soup.select('a[href^="http"]'):
        try:
            parsed = urlparse(anchor["href"].strip())
        except ValueError:
            continue
        host = (parsed.hostname or "").lower()
        if not host or host == site_host:
            continue
        outbound += 1
        if any(key.lower().startswith("utm_") for key, _ in parse_qsl(parsed.query)):
            tagged += 1
    if outbound == 0:
        return None
    return round_half_up(tagged / outbound * 100)


def has_search_console_verification(soup: BeautifulSoup) -> bool:
    return soup.select_one('meta[name="google-site-verification"]') is not None


def analyze_measurement(page: ParsedPage) -> PillarAnalysis:
    """Score the Measurement pillar from the homepage's scripts."""
    card = Scorecard(Pillar.MEASUREMENT)
    points = w.MEASUREMENT_POINTS
    scripts = ScriptInventory.of(page.soup)

    analytics = detect_all(ANALYTICS_PLATFORMS, scripts)
    details = MeasurementDetails(
        analytics_tools=analytics,
        tag_manager=detect_first(TAG_MANAGERS, scripts),
        crm=detect_first(CRM_TOOLS, scripts),
        heatmap_tool=detect_first(HEATMAP_TOOLS, scripts),
        cookie_consent=detect_first(CONSENT_PLATFORMS, scripts),
        ab_test_tool=detect_first(AB_TESTING_TOOLS, scripts),
        performance_monitor=detect_first(MONITORING_TOOLS, scripts),
        ai_referral_tracking=has_ai_referral_tracking(scripts),
        utm_discipline=utm_discipline(page.soup, page.url),
        search_console_verified=has_search_console_verification(page.soup),
    )

    if analytics:
        card.award(
            points["analytics"],
            "Analytics Tracking Installed",
            f"Detected {', '.join(analytics)}. You can measure how visitors find and use your site.",
        )
        if len(analytics) >= w.MULTI_ANALYTICS_MIN:
            card.award(
                points["multi_analytics"],
                "Multi-Platform Analytics",
                f"{len(analytics)} analytics platforms give you cross-checked traffic data.",
            )
    else:
        card.recommend(
            "Install Analytics Tracking",
            "Install an analytics platform such as Google Analytics 4, Plausible or PostHog.",
            "Without analytics you can't see whether AI platforms are sending you traffic.",
        )

    if has_event_tracking(scripts):
        card.award(
            points["event_tracking"],
            "Event Tracking Configured",
            "Your site tracks custom events, so conversions from AI referrals can be measured.",
        )
    else:
        card.recommend(
            "Set Up Event Tracking",
            "Track key actions (form submissions, signups, purchases) as analytics events.",
            "Pageviews alone don't show whether AI-referred visitors convert.",
        )

    if details.tag_manager:
        card.award(
            points["tag_manager"],
            "Tag Manager Detected",
            f"{details.tag_manager} makes it easy to add and adjust tracking without code changes.",
        )

    if details.crm:
        card.award(
            points["crm"],
            "CRM Integration",
            f"{details.crm} connects site visitors to your customer pipeline.",
        )

    if details.heatmap_tool:
        card.award(
            points["heatmap"],
            "User Behavior Analytics",
            f"{details.heatmap_tool} shows how visitors actually interact with your pages.",
        )

    if details.cookie_consent:
        card.award(
            points["cookie_consent"],
            "Cookie Consent Platform",
            f"{details.cookie_consent} manages consent so tracking stays compliant.",
        )

    if details.ab_test_tool:
        card.award(
            points["ab_testing"],
            "A/B Testing Platform",
            f"{details.ab_test_tool} lets you test which content converts best.",
        )

    if details.performance_monitor:
        card.award(
            points["performance_monitoring"],
            "Performance Monitoring",
            f"{details.performance_monitor} monitors errors and performance for real users.",
        )

    pixels = detect_all(AD_PIXELS, scripts)
    if pixels:
        card.award(
            points["ad_pixels"],
            "Conversion Tracking Pixels",
            f"Detected {', '.join(pixels)} for attributing conversions.",
        )

    # Not observable in page HTML, so always recommended
    card.recommend(
        "Track AI Platform Traffic",
        "Create a GA4 custom channel group for AI referrers using a source regex such as "
        "chatgpt\\.com|perplexity\\.ai|claude\\.ai|gemini\\.google\\.com|copilot\\.microsoft\\.com.",
        "This can't be detected from HTML. AI referrals are otherwise lumped into generic referral traffic.",
    )
    card.recommend(
        "Monitor AI Mentions",
        "Use an AI visibility tool (Profound, Peec.ai, Otterly) to track when AI assistants mention your brand.",
        "This can't be detected from HTML. AI answers often mention brands without sending a click.",
    )
    card.recommend(
        "Track AI Share of Voice",
        "Benchmark how often AI assistants cite you versus competitors for your key queries.",
        "This can't be detected from HTML. Share of voice shows whether AEO work is paying off.",
    )

    return card.result(details)
