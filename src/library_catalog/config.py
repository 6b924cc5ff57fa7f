"""Configuration management for the library catalog.

Settings are read from the environment (prefix ``LIBRARY_CATALOG_``) or a
local ``.env`` file:
1. Circulation policy - overdue threshold and duplicate handling
2. Text utilities - minimum count for repeated words
3. Logging - level and debug flag for the console driver
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class CatalogConfig(BaseSettings):
    """Library catalog configuration."""

    model_config = SettingsConfigDict(
        # Use LIBRARY_CATALOG_ prefix for all env vars
        env_prefix="LIBRARY_CATALOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # === Circulation Policy ===

    overdue_threshold_days: int = Field(
        default=14,
        description="Days an item may stay borrowed before it counts as overdue",
        ge=0,
    )

    reject_duplicate_ids: bool = Field(
        default=True,
        description="Raise on add when an item or member identifier is already taken",
    )

    # === Text Utilities ===

    repeated_word_min_count: int = Field(
        default=2,
        description="Minimum occurrences for a word to be reported as repeated",
        ge=1,
    )

    # === Development Configuration ===

    debug: bool = Field(
        default=False,
        description="Enable debug logging",
    )

    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR)",
        pattern=r"^(DEBUG|INFO|WARNING|ERROR)$",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Accept log levels in any case."""
        if isinstance(v, str):
            return v.strip().upper()
        return v

    @property
    def effective_log_level(self) -> str:
        """Log level after applying the debug flag."""
        return "DEBUG" if self.debug else self.log_level


class _ConfigStore:
    """Internal storage for configuration singleton."""

    _instance: CatalogConfig | None = None


def get_config() -> CatalogConfig:
    """Get or create the global configuration instance."""
    if _ConfigStore._instance is None:  # type: ignore[reportPrivateUsage]
        _ConfigStore._instance = CatalogConfig()  # type: ignore[reportPrivateUsage]
    return _ConfigStore._instance  # type: ignore[reportPrivateUsage]


def reset_config() -> None:
    """Reset configuration (useful for testing)."""
    _ConfigStore._instance = None  # type: ignore[reportPrivateUsage]
