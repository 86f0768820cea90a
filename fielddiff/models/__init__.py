"""Core data structures for fielddiff."""

from fielddiff.models.changes import ChangeKind, ChangeRecord
from fielddiff.models.config import (
    DEFAULT_DATE_FORMAT,
    AuditConfig,
    FieldDiffConfig,
    FormatConfig,
    LogConfig,
)
from fielddiff.models.schema import FieldDescriptor, FieldSpec

__all__ = [
    "DEFAULT_DATE_FORMAT",
    "AuditConfig",
    "ChangeKind",
    "ChangeRecord",
    "FieldDescriptor",
    "FieldDiffConfig",
    "FieldSpec",
    "FormatConfig",
    "LogConfig",
]
