"""
Application configuration.

Loads settings from environment variables and .env file.
All configuration is centralized here — no scattered magic strings.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        debug: Enable debug mode (exposes /docs). Must be False in production.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        rate_limit_default: Rate limit applied to every endpoint.
        rate_limit_enabled: Turn rate limiting on or off.
        seed_data: Pre-populate the resource stores with sample entries.
        boat_service_url: Base URL of the boat service used by the aggregator.
        brand_service_url: Base URL of the brand service used by the aggregator.
        downstream_timeout_seconds: Timeout of a single downstream attempt.
        downstream_max_attempts: Attempts per downstream call, first included.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    project_name: str = "Vehicle Services"
    version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"
    rate_limit_default: str = "60/minute"
    rate_limit_enabled: bool = True
    seed_data: bool = True

    boat_service_url: str = "http://localhost:4000"
    brand_service_url: str = "http://localhost:5000"
    downstream_timeout_seconds: float = 1.25
    downstream_max_attempts: int = 3


settings = Settings()
