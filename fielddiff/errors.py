"""Exception types raised by fielddiff."""

from __future__ import annotations


class FieldDiffError(Exception):
    """Base class for all fielddiff errors."""


class SchemaError(FieldDiffError):
    """Raised when diff metadata is declared or registered incorrectly."""


class UnresolvedElementTypeError(FieldDiffError):
    """Raised when a list field's element type cannot be read from its declaration."""

    def __init__(self, declared_type: object) -> None:
        super().__init__(f"Cannot resolve list element type of {declared_type!r}")
        self.declared_type = declared_type


class DiffTypeMismatchError(FieldDiffError, TypeError):
    """Raised when the old and new values of a comparison are of different types."""

    def __init__(self, path: str, old_type: type, new_type: type) -> None:
        where = path or "<root>"
        super().__init__(
            f"Cannot compare {old_type.__qualname__} with {new_type.__qualname__} at '{where}'"
        )
        self.path = path
        self.old_type = old_type
        self.new_type = new_type
