"""Settings for docspine.

Manifesto:
    Configuration should be explicit, validated, and environment-driven.
    docspine has very little of it: how loud to log, whether logs are JSON,
    and how repeated appends behave.

    - **Pydantic validation:** Type-checked at startup, not at append time
    - **Environment-driven:** ``DOCSPINE_*`` env vars and ``.env`` files
    - **Sensible defaults:** Works out of the box

Examples:
    >>> from docspine.core.settings import get_settings
    >>> get_settings().append_mode
    <AppendMode.IDEMPOTENT: 'idempotent'>

Tags:
    settings, configuration, pydantic, environment, docspine
"""

from __future__ import annotations

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from docspine.core.enums import AppendMode


class DocSpineSettings(BaseSettings):
    """docspine runtime settings.

    Fields
    ──────
    log_level    : Structlog log level
    json_logs    : Force JSON (True) or console (False) logs; None = auto
    append_mode  : Behavior of repeated appends to the same key
    """

    model_config = SettingsConfigDict(
        env_prefix="DOCSPINE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ── Observability ────────────────────────────────────────────
    log_level: str = "INFO"
    json_logs: bool | None = None

    # ── Augmentation ─────────────────────────────────────────────
    append_mode: AppendMode = Field(
        default=AppendMode.IDEMPOTENT,
        description="accumulate repeats text on re-application; idempotent does not",
    )

    @field_validator("log_level")
    @classmethod
    def _normalize_level(cls, value: str) -> str:
        level = value.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"invalid log level: {value}")
        return level


# ── Settings factory with caching ────────────────────────────────────────

_settings_cache: dict[str, DocSpineSettings] = {}


def get_settings(*, _force_reload: bool = False) -> DocSpineSettings:
    """Load, validate, and cache a :class:`DocSpineSettings` instance."""
    if not _force_reload and "default" in _settings_cache:
        return _settings_cache["default"]

    settings = DocSpineSettings()
    _settings_cache["default"] = settings
    return settings


def clear_settings_cache() -> None:
    """Clear the settings cache (primarily for testing)."""
    _settings_cache.clear()
