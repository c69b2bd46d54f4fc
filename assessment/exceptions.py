"""Exceptions raised by the assessment engine."""


class AssessmentError(Exception):
    """Base exception for assessment failures."""


class FetchError(AssessmentError):
    """The homepage could not be retrieved."""

    def __init__(self, url: str, message: str):
        self.url = url
        self.message = message
        super().__init__(message)


class FetchTimeoutError(FetchError):
    """The homepage did not respond within the fetch timeout."""

    def __init__(self, url: str, timeout: float):
        self.timeout = timeout
        super().__init__(url, f"Request timeout after {timeout:g} seconds")


class FetchFailedError(FetchError):
    """Transport-level failure while fetching the homepage."""


class AnalysisFailedError(AssessmentError):
    """Fatal failure: the assessment cannot produce a report."""

    def __init__(self, url: str, reason: str):
        self.url = url
        self.reason = reason
        super().__init__(f"Failed to analyze {url}: {reason}")
