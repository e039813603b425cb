"""Configuration management for the award search proxy."""

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings

USASPENDING_SEARCH_URL = "https://api.usaspending.gov/api/v2/search/spending_by_award/"


class Config(BaseSettings):
    """Application configuration from environment variables.

    Nothing is required; every field has a working default.
    """

    usaspending_url: str = USASPENDING_SEARCH_URL
    default_limit: int = Field(default=50, gt=0)
    log_level: str = "INFO"

    # Hosting
    host: str = Field(default="0.0.0.0", validation_alias="API_HOST")
    port: int = Field(default=8000, validation_alias="API_PORT")

    model_config = {
        "env_file": ".env",
        "case_sensitive": False,
        "extra": "ignore",
    }


def validate_config() -> Config:
    """Load and validate configuration from environment.

    Raises ValueError naming ALL invalid variables (not just the first one).
    """
    try:
        return Config()
    except ValidationError as exc:
        bad = sorted({str(err["loc"][0]).upper() for err in exc.errors() if err.get("loc")})
        names = ", ".join(bad) or "unknown"
        raise ValueError(
            f"Invalid environment variable(s): {names}. "
            "Please fix them in your .env file or environment."
        ) from exc


def load_config() -> Config:
    """Load configuration from environment (startup entry point)."""
    return validate_config()
