"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    fdc_api_key: str
    fdc_base_url: str = "https://api.nal.usda.gov/fdc/v1"
    fdc_timeout_seconds: float = 10
    fdc_page_size: int = 25
    api_tokens: str | None = None
    rate_limit_requests: int = 10
    rate_limit_window_seconds: int = 60
    cors_origin: str = "http://localhost:3000"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def parse_api_tokens(raw: str | None) -> set[str] | None:
    """Parse accepted API bearer tokens from env.

    Returns None when authentication is disabled.
    """
    if raw is None:
        return None
    cleaned = raw.strip()
    if cleaned in {"", "*"}:
        return None
    tokens = {chunk.strip() for chunk in cleaned.split(",")}
    tokens.discard("")
    return tokens or None


def parse_cors_origins(raw: str) -> list[str]:
    """Parse allowed CORS origins from a comma-separated value."""
    return [origin.strip() for origin in raw.split(",") if origin.strip()]
