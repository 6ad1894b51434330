"""
ambari_discovery.tier0_core.config
────────────────────────────────────
Typed settings with env layering. Reads from .env → environment variables.
All fields are typed via Pydantic. Invalid values raise ConfigurationError
the first time the config is loaded.

Minimal stack: pydantic-settings + python-dotenv
"""
from __future__ import annotations

from functools import lru_cache

from pydantic import Field, ValidationError as PydanticValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ambari_discovery.tier0_core.errors import ConfigurationError


class DiscoveryConfig(BaseSettings):
    """
    Typed discovery settings. All env vars are prefixed with DISCOVERY_.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # ── Application ───────────────────────────────────────────────────────────
    app_name: str = Field(default="ambari-discovery", alias="DISCOVERY_APP_NAME")
    environment: str = Field(default="development", alias="DISCOVERY_ENV")

    # ── Logging ───────────────────────────────────────────────────────────────
    log_level: str = Field(default="INFO", alias="DISCOVERY_LOG_LEVEL")
    log_format: str = Field(default="json", alias="DISCOVERY_LOG_FORMAT")

    @field_validator("environment")
    @classmethod
    def validate_env(cls, v: str) -> str:
        allowed = {"development", "staging", "production", "test"}
        if v.lower() not in allowed:
            raise ValueError(f"environment must be one of {allowed}, got {v!r}")
        return v.lower()

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        allowed = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in allowed:
            raise ValueError(f"log_level must be one of {allowed}, got {v!r}")
        return v.upper()

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        if v.lower() not in {"json", "console"}:
            raise ValueError(f"log_format must be 'json' or 'console', got {v!r}")
        return v.lower()

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @property
    def is_test(self) -> bool:
        return self.environment == "test"


@lru_cache(maxsize=1)
def get_config() -> DiscoveryConfig:
    """
    Return the singleton discovery config. Cached after first call.
    Call _reset_config() in tests to pick up new env vars.
    """
    try:
        return DiscoveryConfig()
    except PydanticValidationError as exc:
        raise ConfigurationError(
            user_message="Invalid discovery configuration.",
            detail=str(exc),
        ) from exc


def _reset_config() -> None:
    """For tests: clear the config cache."""
    get_config.cache_clear()


__sdk_export__ = {
    "exports": ["get_config", "DiscoveryConfig"],
    "description": "Typed settings loaded from .env and DISCOVERY_* environment variables",
    "tier": "tier0_core",
    "module": "config",
}
