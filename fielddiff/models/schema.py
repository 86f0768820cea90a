"""Diff-schema data structures."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class FieldSpec:
    """Hand-written schema entry for :func:`fielddiff.schema.register_schema`.

    ``type`` is the declared type of the attribute; it drives classification
    exactly like a dataclass annotation would.
    """

    name: str
    label: str = ""
    type: Any = Any
    date_format: str | None = None
    identity: bool = False
    comparable: bool = True


@dataclass(frozen=True)
class FieldDescriptor:
    """Resolved diff metadata for one attribute of a type."""

    name: str
    label: str
    declared_type: Any
    date_format: str | None = None
    identity: bool = False
    comparable: bool = True
