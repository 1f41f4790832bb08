"""Environment-driven settings for spine-fp.

The library itself is configuration-free: containers and adapters behave
the same everywhere. What varies per deployment is how the adapters' debug
events are logged, so that is what lives here.

Examples:
    >>> from spinefp.core.settings import get_settings
    >>> settings = get_settings()
    >>> settings.log_level
    'WARNING'

Environment variables (``SPINE_FP_`` prefix, ``.env`` supported)::

    SPINE_FP_LOG_LEVEL=DEBUG
    SPINE_FP_JSON_LOGS=true
    SPINE_FP_SERVICE_NAME=my-service

Tags:
    settings, configuration, pydantic, environment, spine-fp
"""

from __future__ import annotations

import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class SpineFPSettings(BaseSettings):
    """Settings for spine-fp.

    Fields
    ──────
    log_level    : Level for configure_logging (validated, upper-cased)
    json_logs    : JSON output; None auto-detects from the TTY
    service_name : ``service.name`` attached to every log event
    """

    model_config = SettingsConfigDict(
        env_prefix="SPINE_FP_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ── Observability ────────────────────────────────────────────
    log_level: str = "WARNING"
    json_logs: bool | None = None
    service_name: str = Field(default="spine-fp", min_length=1)

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level: {value!r}")
        return level


# ── Settings factory with caching ────────────────────────────────────────

_settings_cache: dict[str, SpineFPSettings] = {}


def get_settings(*, _force_reload: bool = False) -> SpineFPSettings:
    """Load, validate, and cache the process-wide settings."""
    if not _force_reload and "default" in _settings_cache:
        return _settings_cache["default"]
    settings = SpineFPSettings()
    _settings_cache["default"] = settings
    return settings


def clear_settings_cache() -> None:
    """Clear the settings cache (primarily for testing)."""
    _settings_cache.clear()


__all__ = ["SpineFPSettings", "get_settings", "clear_settings_cache"]
