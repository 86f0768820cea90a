"""Diff-schema declaration and resolution.

Submodules:
    markers  -- diff_field / diff_id dataclass field markers.
    resolver -- SchemaResolver: comparable fields and identity key per type,
                plus an explicit registration table.
"""

from fielddiff.schema.markers import DIFF_METADATA_KEY, DiffMarker, diff_field, diff_id
from fielddiff.schema.resolver import (
    SchemaResolver,
    comparable_fields,
    default_resolver,
    has_schema,
    identity_field,
    register_schema,
)

__all__ = [
    "DIFF_METADATA_KEY",
    "DiffMarker",
    "SchemaResolver",
    "comparable_fields",
    "default_resolver",
    "diff_field",
    "diff_id",
    "has_schema",
    "identity_field",
    "register_schema",
]
