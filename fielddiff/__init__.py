"""fielddiff: metadata-driven field-level diffs of dataclass records.

Declare which fields take part with ``diff_field`` / ``diff_id`` (or
``register_schema`` for classes you cannot edit), then::

    >>> compare(old_user, new_user)
    ['Name changed from [Ann] to [Anna]']
"""

from fielddiff.audit import AuditTrail
from fielddiff.config import configure, load_config
from fielddiff.engine.compare import DiffEngine, compare
from fielddiff.engine.formatter import Formatter, describe, format_value
from fielddiff.errors import (
    DiffTypeMismatchError,
    FieldDiffError,
    SchemaError,
    UnresolvedElementTypeError,
)
from fielddiff.models.changes import ChangeKind, ChangeRecord
from fielddiff.models.schema import FieldDescriptor, FieldSpec
from fielddiff.schema.markers import diff_field, diff_id
from fielddiff.schema.resolver import (
    SchemaResolver,
    comparable_fields,
    identity_field,
    register_schema,
)

__version__ = "0.1.0"

__all__ = [
    "AuditTrail",
    "ChangeKind",
    "ChangeRecord",
    "DiffEngine",
    "DiffTypeMismatchError",
    "FieldDescriptor",
    "FieldDiffError",
    "FieldSpec",
    "Formatter",
    "SchemaError",
    "SchemaResolver",
    "UnresolvedElementTypeError",
    "__version__",
    "comparable_fields",
    "compare",
    "configure",
    "describe",
    "diff_field",
    "diff_id",
    "format_value",
    "identity_field",
    "load_config",
    "register_schema",
]
