"""Change record data structures."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class ChangeKind(StrEnum):
    """What happened to a field or list element."""

    CHANGED = "changed"
    ADDED = "added"
    REMOVED = "removed"


@dataclass(frozen=True)
class ChangeRecord:
    """One detected difference between two versions of a record.

    Produced by the comparison engine, consumed by the caller.
    Immutable: ``message`` is rendered once, when the record is created.

    ``old`` / ``new`` are populated for CHANGED records, ``key`` and
    ``description`` for ADDED / REMOVED list elements.
    """

    kind: ChangeKind
    path: str
    message: str
    old: str = ""
    new: str = ""
    key: str = ""
    description: str = ""

    def __str__(self) -> str:
        return self.message
