"""Application configuration using pydantic-settings."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """HTTP service settings loaded from environment variables.

    Attributes:
        log_level: Minimum structlog level ("DEBUG", "INFO", ...)
        log_json: Render logs as JSON instead of console output
        subtitle_encoding: Encoding used to decode uploaded subtitle files
        max_upload_bytes: Upper bound for uploaded subtitle files
        fetch_timeout_seconds: Timeout for fetching subtitles by URL
    """

    log_level: str = "INFO"
    log_json: bool = False

    subtitle_encoding: str = "utf-8-sig"
    max_upload_bytes: int = 5 * 1024 * 1024
    fetch_timeout_seconds: float = 30.0

    model_config = SettingsConfigDict(
        env_prefix="SUBVTT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings.

    Note:
        Settings are cached. Use get_settings.cache_clear() to reload
        settings in tests.
    """
    return Settings()
