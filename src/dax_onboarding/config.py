"""Configuration management service with Pydantic Settings.

This module provides centralized configuration management for the
Dax onboarding engine, loading and validating environment variables
at startup.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from dax_onboarding.trackers.entity_data import MAJOR_TRACKER_DOMAINS


class StoreSettings(BaseSettings):
    """Onboarding state store settings."""

    model_config = SettingsConfigDict(
        env_prefix="ONBOARDING_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    backend: Literal["memory", "redis"] = Field(
        default="memory",
        alias="ONBOARDING_STORE",
        description="Where onboarding flags are persisted",
    )
    key_prefix: str = Field(
        default="dax:onboarding:",
        alias="ONBOARDING_KEY_PREFIX",
        description="Key prefix for the Redis store",
    )

    @field_validator("key_prefix")
    @classmethod
    def validate_key_prefix(cls, v: str) -> str:
        """Validate the key prefix is not blank."""
        if not v.strip():
            raise ValueError("ONBOARDING_KEY_PREFIX must not be empty")
        return v


class RedisSettings(BaseSettings):
    """Redis connection settings."""

    model_config = SettingsConfigDict(
        env_prefix="",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    url: str = Field(
        default="redis://localhost:6379",
        alias="REDIS_URL",
        description="Redis connection string",
    )

    @field_validator("url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        """Validate Redis URL format."""
        if not v.startswith(("redis://", "rediss://")):
            raise ValueError("REDIS_URL must start with redis:// or rediss://")
        return v


class TrackerSettings(BaseSettings):
    """Tracker classification settings."""

    model_config = SettingsConfigDict(
        env_prefix="",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    major_tracker_domains: str = Field(
        default=",".join(MAJOR_TRACKER_DOMAINS),
        alias="MAJOR_TRACKER_DOMAINS",
        description="Comma-separated list of major tracker domains",
    )
    entity_data_path: Path | None = Field(
        default=None,
        alias="ENTITY_DATA_PATH",
        description="Optional JSON file with tracker entity data",
    )

    @field_validator("major_tracker_domains")
    @classmethod
    def validate_major_tracker_domains(cls, v: str) -> str:
        """Normalize the domain list and reject an empty one."""
        domains = [d.strip().lower() for d in v.split(",") if d.strip()]
        if not domains:
            raise ValueError("MAJOR_TRACKER_DOMAINS must name at least one domain")
        return ",".join(domains)

    @property
    def major_domains(self) -> tuple[str, ...]:
        """Return the major tracker domains as a tuple."""
        return tuple(self.major_tracker_domains.split(","))


class Settings(BaseSettings):
    """Main application settings.

    Loads configuration from environment variables with support for
    .env files via python-dotenv.

    Example:
        ```python
        from dax_onboarding.config import get_settings

        settings = get_settings()
        print(settings.store.backend)
        print(settings.log_level)
        ```
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Nested configuration groups
    store: StoreSettings = Field(default_factory=StoreSettings)
    redis: RedisSettings = Field(default_factory=RedisSettings)
    trackers: TrackerSettings = Field(default_factory=TrackerSettings)

    # Application settings
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="WARNING",
        alias="LOG_LEVEL",
        description="Logging level",
    )

    def redacted_summary(self) -> dict[str, str]:
        """Get a summary of settings with secrets redacted.

        Returns:
            Dictionary of settings with sensitive values masked.
        """
        return {
            "store": self.store.backend,
            "key_prefix": self.store.key_prefix,
            "redis_url": self._redact_url(self.redis.url),
            "major_tracker_domains": ", ".join(self.trackers.major_domains),
            "entity_data": str(self.trackers.entity_data_path or "(bundled)"),
            "log_level": self.log_level,
        }

    @staticmethod
    def _redact_url(url: str) -> str:
        """Redact password from URL if present."""
        if "@" in url and "://" in url:
            protocol_end = url.index("://") + 3
            at_pos = url.index("@")
            creds_part = url[protocol_end:at_pos]
            if ":" in creds_part:
                username = creds_part.split(":")[0]
                return f"{url[:protocol_end]}{username}:***@{url[at_pos + 1 :]}"
        return url


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get the application settings singleton.

    Uses LRU cache to ensure settings are loaded only once and
    reused across the application.

    Returns:
        The Settings instance.

    Raises:
        ValidationError: If environment variables have invalid values.
    """
    return Settings()


def clear_settings_cache() -> None:
    """Clear the settings cache.

    Useful for testing when you need to reload settings with
    different environment variables.
    """
    get_settings.cache_clear()
