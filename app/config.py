"""
Configuration management.
Simple .env based config for VPS deployment.
"""

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    # Server
    host: str = "0.0.0.0"
    port: int = 8080

    # Shopify Admin API
    shopify_api_version: str = "2025-07"
    request_timeout: float = 60.0  # seconds, per call
    connect_timeout: float = 10.0

    # Delete a partially created product when a later step fails
    delete_on_failure: bool = False

    # Defaults for scripts/create_product.py
    shopify_shop_domain: Optional[str] = None
    shopify_access_token: Optional[str] = None

    # Logging
    log_level: str = "INFO"


# Global settings instance
settings = Settings()
