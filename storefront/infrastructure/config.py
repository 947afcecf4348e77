"""Application configuration.

Loads settings from environment variables with sensible defaults.
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # API
    api_version: str = "0.1.0"
    debug: bool = False

    # Database
    database_url: str = "postgresql+asyncpg://storefront:storefront_dev_password@db:5432/storefront"

    # Catalog queries
    default_page_limit: int = 12
    max_page_limit: int = 100
    featured_limit: int = 4
    store_timeout_seconds: float = 5.0

    # Presentation client
    api_base_url: str = "http://localhost:8000"
    client_timeout_seconds: float = 10.0

    # Logging
    log_level: str = "INFO"

    class Config:
        """Pydantic configuration."""

        env_file = ".env"
        env_file_encoding = "utf-8"


settings = Settings()
