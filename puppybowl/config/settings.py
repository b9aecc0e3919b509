import logging
from typing import Optional

from pydantic import Field, HttpUrl
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """Application settings loaded from environment variables or .env file."""

    # Roster API Configuration
    api_base_url: HttpUrl = Field(
        "https://fsa-puppy-bowl.herokuapp.com/api",
        description="Base URL of the Puppy Bowl API, without the cohort segment.",
    )
    cohort_name: str = Field(
        "2402-FTB-MT-WEB-PT",
        description="Cohort (tenant) segment appended to the base URL.",
    )
    request_timeout: Optional[float] = Field(
        None,  # No timeout unless explicitly configured
        gt=0,
        description="Timeout in seconds for API requests.",
    )

    # Logging Configuration
    log_level: str = Field(
        "INFO", description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)."
    )
    log_file: Optional[str] = Field(
        None, description="Optional path of a rotating log file."
    )

    # Output Configuration
    render_output: Optional[str] = Field(
        None, description="Optional path to write the rendered page to."
    )

    # Pydantic Settings Configuration
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    @property
    def api_url(self) -> str:
        """Base URL for roster requests, including the cohort segment."""
        return f"{str(self.api_base_url).rstrip('/')}/{self.cohort_name}"


VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def load_settings() -> AppSettings:
    """Builds the roster client settings, normalizing the log level."""
    try:
        settings = AppSettings()
    except Exception as e:
        logging.exception(f"Invalid roster client configuration: {e}")
        raise SystemExit("Roster client configuration is invalid. Exiting.")

    level = settings.log_level.upper()
    if level not in VALID_LOG_LEVELS:
        logging.warning(f"Unknown LOG_LEVEL '{settings.log_level}', using INFO.")
        level = "INFO"
    settings.log_level = level
    return settings


settings: AppSettings = load_settings()
