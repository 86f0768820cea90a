"""Configuration data structures."""

from __future__ import annotations

from dataclasses import dataclass, field

DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


@dataclass
class FormatConfig:
    """Value formatting and message configuration."""

    date_format: str = DEFAULT_DATE_FORMAT
    locale: str = "en"


@dataclass
class AuditConfig:
    """Audit sink configuration."""

    enabled: bool = True


@dataclass
class LogConfig:
    """Logging configuration."""

    level: str = "info"


@dataclass
class FieldDiffConfig:
    """Top-level fielddiff configuration."""

    format: FormatConfig = field(default_factory=FormatConfig)
    audit: AuditConfig = field(default_factory=AuditConfig)
    log: LogConfig = field(default_factory=LogConfig)
