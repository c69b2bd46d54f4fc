"""API exceptions rendered as ``{"error": {...}}`` payloads."""

from typing import Any

from fastapi import status


class AppError(Exception):
    """Base exception for the assessment API."""

    def __init__(
        self,
        message: str,
        code: str = "error",
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: dict[str, Any] | None = None,
    ):
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}
        super().__init__(message)

    def to_payload(self) -> dict[str, Any]:
        error: dict[str, Any] = {"code": self.code, "message": self.message}
        if self.details:
            error["details"] = self.details
        return {"error": error}


class AnalysisError(AppError):
    """The website could not be analyzed (homepage unreachable)."""

    def __init__(self, url: str | None = None):
        self.url = url
        super().__init__(
            message="Could not analyze website. Please check the URL is accessible.",
            code="analysis_failed",
            status_code=status.HTTP_400_BAD_REQUEST,
        )
