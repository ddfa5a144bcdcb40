"""
Configuration Management for LifeManager

Uses pydantic-settings for type-safe configuration from environment variables.

DESIGN DECISION: All configuration is centralized here.
Defaults reproduce the behaviour of the browser mock (pm_ keys,
no field validation) with artificial latency switched off.
"""

from functools import lru_cache
from pathlib import Path
from typing import Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class StorageSettings(BaseSettings):
    """Blob storage and record store configuration."""

    model_config = SettingsConfigDict(
        env_prefix="LIFEMANAGER_STORAGE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    backend: Literal["memory", "file"] = Field(
        default="memory",
        description="Which blob storage backend to use"
    )
    data_dir: Path = Field(
        default=Path(".lifemanager"),
        description="Directory holding one JSON file per key (file backend)"
    )
    key_prefix: str = Field(
        default="pm_",
        description="Prefix for every persisted key"
    )
    corrupt_blob_policy: Literal["raise", "empty"] = Field(
        default="raise",
        description="What to do when a persisted blob cannot be parsed"
    )

    # Artificial latency, emulating a remote document store
    simulate_latency: bool = Field(
        default=False,
        description="Sleep before every store and session operation"
    )
    default_latency_ms: int = Field(
        default=500,
        ge=0,
        le=10000,
        description="Latency of record store operations"
    )
    login_latency_ms: int = Field(
        default=800,
        ge=0,
        le=10000,
        description="Latency of login"
    )
    logout_latency_ms: int = Field(
        default=300,
        ge=0,
        le=10000,
        description="Latency of logout"
    )

    @field_validator('key_prefix')
    @classmethod
    def validate_key_prefix(cls, v: str) -> str:
        """Keys become file names, so no path separators."""
        if "/" in v or "\\" in v:
            raise ValueError(f"key_prefix must not contain path separators: {v!r}")
        return v


class AuthSettings(BaseSettings):
    """Mock authentication configuration."""

    model_config = SettingsConfigDict(
        env_prefix="LIFEMANAGER_AUTH_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    dev_auto_login_email: Optional[str] = Field(
        default=None,
        description="Sign this user in on start-up when nobody is signed in"
    )
    display_name: Optional[str] = Field(
        default=None,
        description="Display name for fabricated identities (derived from email if unset)"
    )


class AppSettings(BaseSettings):
    """
    Main application settings.

    Loads configuration from environment variables and .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    # Environment
    app_environment: str = Field(
        default="development",
        description="Application environment"
    )
    debug_mode: bool = Field(
        default=False,
        description="Enable debug mode"
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Root log level"
    )
    log_json: bool = Field(
        default=True,
        description="Render logs as JSON (console renderer otherwise)"
    )

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {v}")
        return level


class Settings(BaseSettings):
    """
    Root settings container.

    Aggregates all sub-settings for easy access.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    @property
    def storage(self) -> StorageSettings:
        return StorageSettings()

    @property
    def auth(self) -> AuthSettings:
        return AuthSettings()

    @property
    def app(self) -> AppSettings:
        return AppSettings()


@lru_cache()
def get_settings() -> Settings:
    """
    Get application settings (cached).

    Call get_settings.cache_clear() to reload if needed.
    """
    return Settings()


def validate_all_settings() -> dict[str, bool]:
    """
    Validate all settings are properly configured.

    Returns a dict of {setting_name: is_valid}, plus an
    "<name>_error" entry for every section that failed.
    """
    results = {}

    settings = get_settings()

    for name in ("storage", "auth", "app"):
        try:
            getattr(settings, name)
            results[name] = True
        except Exception as e:
            results[name] = False
            results[f"{name}_error"] = str(e)

    return results
