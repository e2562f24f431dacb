"""Application configuration.

Loads settings from environment variables with sensible defaults.
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # API
    api_version: str = "0.1.0"
    debug: bool = False

    # Authentication
    console_api_key: str = "dev-api-key-change-in-production"

    # Product catalog backend (sample catalog is used when unset)
    product_backend_url: str | None = None
    product_backend_timeout: float = 10.0

    # Drafts
    validate_prices: bool = True
    category_placeholder_image: str = "/placeholder.svg"
    id_strategy: str = "timestamp"
    draft_session_ttl_minutes: int = 120

    # Logging
    log_level: str = "INFO"
    log_json: bool = True

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


settings = Settings()
