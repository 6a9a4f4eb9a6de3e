"""Core configuration settings for Signed Store.

Settings are loaded from environment variables (prefix ``SIGNED_STORE_``)
with .env file support via pydantic-settings.

Environment variables:
    SIGNED_STORE_NOW_OVERRIDE: Fixed clock value in microseconds, used by
        document stores instead of wall-clock time (deterministic runs).
    SIGNED_STORE_LOG_LEVEL: Default log level for the ``signed_store`` logger.

Example:
    >>> from signed_store.settings import settings
    >>> settings.log_level
    'INFO'

Note:
    Settings are loaded once at module import and frozen. The process must be
    restarted to pick up changes to environment variables or .env file.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Configuration for Signed Store components.

    Attributes:
        now_override: When set, document stores read this value (microseconds
            since epoch) as "now" unless a store-level override is given.
        log_level: Level applied to the ``signed_store`` logger by default.
    """

    model_config = SettingsConfigDict(
        env_prefix="SIGNED_STORE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    now_override: int | None = None
    log_level: str = "INFO"


settings = Settings()
"""Global settings instance, created at import time."""
