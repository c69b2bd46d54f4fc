"""Application configuration using pydantic-settings."""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Environment
    env: Literal["development", "production", "test"] = "development"
    debug: bool = False
    log_level: str = "INFO"

    # API Server
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    cors_origins: list[str] = Field(default_factory=lambda: ["http://localhost:3000"])

    # Fetching
    user_agent: str = (
        "Mozilla/5.0 (compatible; AEOAssessmentBot/2.0; +https://aeo-assessment.dev/bot)"
    )
    signal_user_agent: str = "AEOAssessmentBot/2.0"
    fetch_timeout: float = 30.0  # Homepage; failure is fatal
    page_timeout: float = 15.0  # Each secondary page
    max_additional_pages: int = 5

    # External signal timeouts (seconds)
    file_check_timeout: float = 5.0  # robots.txt, sitemap.xml, llms.txt
    reddit_timeout: float = 8.0
    pagespeed_timeout: float = 25.0
    knowledge_graph_timeout: float = 5.0
    ssl_timeout: float = 10.0

    # External API keys (optional, signals degrade without them)
    pagespeed_api_key: str | None = None
    google_knowledge_graph_key: str | None = None

    @property
    def is_production(self) -> bool:
        """Check if running in production."""
        return self.env == "production"

    @property
    def is_test(self) -> bool:
        """Check if running in test mode."""
        return self.env == "test"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
