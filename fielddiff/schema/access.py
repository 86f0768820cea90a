"""Read-only field access for diffed objects."""

from __future__ import annotations

from typing import Any

from fielddiff.models.schema import FieldDescriptor

MISSING: Any = object()


def read_field(obj: object, descriptor: FieldDescriptor, log: Any) -> Any:
    """Return ``obj.<descriptor.name>``, or :data:`MISSING` if it cannot be read.

    Access failures are logged and never raised; callers treat a MISSING
    value as "no change detected" for the field.
    """
    try:
        return getattr(obj, descriptor.name)
    except AttributeError as exc:
        log.error(
            "field_access_failed",
            type=type(obj).__qualname__,
            field=descriptor.name,
            error=str(exc),
        )
        return MISSING
