"""Configuration loading from environment variables."""

from __future__ import annotations

import os

from fielddiff.engine.messages import LOCALES
from fielddiff.models.config import (
    DEFAULT_DATE_FORMAT,
    AuditConfig,
    FieldDiffConfig,
    FormatConfig,
    LogConfig,
)
from fielddiff.observability.logging import setup_logging


def _env(key: str, default: str = "") -> str:
    return os.environ.get(f"FIELDDIFF_{key}", default)


def _env_bool(key: str, default: bool = False) -> bool:
    val = _env(key, str(default).lower())
    return val.lower() in ("true", "1", "yes")


def _validate_date_format(value: str) -> str:
    if "%" not in value:
        raise ValueError(f"Invalid date format: {value!r}. Expected strftime directives such as %Y")
    return value


def _validate_locale(value: str) -> str:
    if value.lower() not in LOCALES:
        raise ValueError(f"Invalid locale: {value}. Must be one of {sorted(LOCALES)}")
    return value.lower()


def _validate_log_level(value: str) -> str:
    valid = {"debug", "info", "warning", "error"}
    if value.lower() not in valid:
        raise ValueError(f"Invalid log level: {value}. Must be one of {valid}")
    return value.lower()


def load_config() -> FieldDiffConfig:
    """Load configuration from FIELDDIFF_* environment variables."""
    return FieldDiffConfig(
        format=FormatConfig(
            date_format=_validate_date_format(_env("DATE_FORMAT", DEFAULT_DATE_FORMAT)),
            locale=_validate_locale(_env("LOCALE", "en")),
        ),
        audit=AuditConfig(
            enabled=_env_bool("AUDIT_ENABLED", True),
        ),
        log=LogConfig(
            level=_validate_log_level(_env("LOG_LEVEL", "info")),
        ),
    )


def configure(config: FieldDiffConfig | None = None) -> FieldDiffConfig:
    """Load configuration (unless given) and apply its logging settings.

    Call once at process start-up, before building engines or audit trails.
    """
    config = config if config is not None else load_config()
    setup_logging(config.log.level)
    return config
