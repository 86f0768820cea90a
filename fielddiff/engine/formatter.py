"""Render field values as display text for change messages."""

from __future__ import annotations

from enum import Enum
from typing import Any

from fielddiff.engine.classifier import TEMPORAL_TYPES
from fielddiff.models.config import DEFAULT_DATE_FORMAT
from fielddiff.observability.logging import get_logger
from fielddiff.schema.access import MISSING, read_field
from fielddiff.schema.resolver import SchemaResolver, default_resolver

_logger = get_logger("engine.formatter")


class Formatter:
    """Formats scalars, dates, lists and described objects.

    Args:
        resolver:            Schema source used by :meth:`describe`.
        default_date_format: ``strftime`` pattern for date/time values whose
                             field declares no pattern of its own.
        logger:              Diagnostic sink; defaults to the module logger.
    """

    def __init__(
        self,
        resolver: SchemaResolver | None = None,
        default_date_format: str = DEFAULT_DATE_FORMAT,
        logger: Any = None,
    ) -> None:
        self._resolver = resolver if resolver is not None else default_resolver
        self._default_date_format = default_date_format
        self._log = logger if logger is not None else _logger

    @property
    def default_date_format(self) -> str:
        return self._default_date_format

    def format(self, value: Any, date_format: str | None = None) -> str:
        """Render *value*; ``None`` renders as empty text."""
        if value is None:
            return ""
        if isinstance(value, TEMPORAL_TYPES):
            return value.strftime(date_format or self._default_date_format)
        if isinstance(value, Enum):
            return str(value.value)
        if isinstance(value, (list, tuple)):
            return "[" + ", ".join(self.format(item, date_format) for item in value) + "]"
        if self._resolver.has_schema(type(value)):
            return self.describe(value, date_format)
        return str(value)

    def describe(self, obj: Any, date_format: str | None = None) -> str:
        """Render *obj* as ``{label=value, ...}`` over its comparable fields.

        Each value uses its own field's date pattern, falling back to
        *date_format*.  Nested lists and objects are described recursively.
        """
        if obj is None:
            return ""
        parts = []
        for fd in self._resolver.comparable_fields(type(obj)):
            value = read_field(obj, fd, self._log)
            if value is MISSING:
                continue
            parts.append(f"{fd.label}={self.format(value, fd.date_format or date_format)}")
        return "{" + ", ".join(parts) + "}"


_default_formatter = Formatter()


def format_value(value: Any, date_format: str | None = None) -> str:
    """Render *value* with the default formatter."""
    return _default_formatter.format(value, date_format)


def describe(obj: Any, date_format: str | None = None) -> str:
    """Describe *obj* with the default formatter."""
    return _default_formatter.describe(obj, date_format)
