"""Configuration management using Pydantic Settings."""

from enum import Enum

from pydantic_settings import BaseSettings


class LogFormat(str, Enum):
    """Log output format."""
    JSON = "json"
    CONSOLE = "console"


class VerifierConfig(BaseSettings):
    """Configuration for the profile verification pipeline."""

    # Pacing
    rate_limit_interval_ms: int = 2000
    batch_pause_cap_ms: int = 1500
    batch_pause_per_profile_ms: int = 50

    # Deadline for a single scrape call
    scrape_timeout_seconds: float = 60.0

    # Normalization
    max_recent_posts: int = 5

    # Browser settings (X/Twitter adapter)
    headless: bool = True
    browser_timeout_ms: int = 30000
    user_agent: str | None = None
    proxy_url: str | None = None

    # Logging
    log_level: str = "INFO"
    log_format: LogFormat = LogFormat.CONSOLE

    model_config = {
        "env_prefix": "PROFILECHECK_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }
