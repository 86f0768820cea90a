"""Recursive field-level comparison of two versions of a record.

Produces an ordered list of :class:`~fielddiff.models.changes.ChangeRecord`
objects, one per detected difference.  Paths are built from display labels:
nested objects extend the path with ``.label``, matched list elements with
``[key]`` where *key* is the element's identity value.

Only fields carrying diff metadata are visited.  The engine never mutates the
objects it compares and holds no per-call state, so one instance can serve
concurrent callers.

Object graphs must be acyclic: there is no cycle guard, and a cyclic
annotated structure recurses until Python raises ``RecursionError``.
"""

from __future__ import annotations

import math
from decimal import Decimal
from itertools import chain
from typing import Any

from fielddiff.engine.classifier import (
    TEMPORAL_TYPES,
    element_type,
    is_list_type,
    is_scalar_type,
    is_unresolved,
)
from fielddiff.engine.formatter import Formatter
from fielddiff.engine.messages import MessageTemplates, templates_for
from fielddiff.errors import DiffTypeMismatchError, UnresolvedElementTypeError
from fielddiff.models.changes import ChangeKind, ChangeRecord
from fielddiff.models.config import DEFAULT_DATE_FORMAT, FieldDiffConfig
from fielddiff.models.schema import FieldDescriptor
from fielddiff.observability.logging import get_logger
from fielddiff.schema.access import MISSING, read_field
from fielddiff.schema.resolver import SchemaResolver, default_resolver

_logger = get_logger("engine.compare")


def _is_list(value: object) -> bool:
    return isinstance(value, (list, tuple))


def _join(path: str, label: str) -> str:
    return f"{path}.{label}" if path else label


def _is_nan(value: object) -> bool:
    if isinstance(value, float):
        return math.isnan(value)
    if isinstance(value, Decimal):
        return value.is_nan()
    return False


def _same_value(old: object, new: object) -> bool:
    """Equality for scalars, with NaN equal to NaN."""
    return old is new or old == new or (_is_nan(old) and _is_nan(new))


class DiffEngine:
    """Compares two objects of the same type and reports field changes.

    Args:
        resolver:            Diff-schema source; defaults to the shared resolver
                             that ``diff_field`` / ``register_schema`` populate.
        locale:              Message template locale (``en`` or ``zh``).
        default_date_format: Pattern for date/time fields without their own.
        logger:              Diagnostic sink for recovered failures.
    """

    def __init__(
        self,
        resolver: SchemaResolver | None = None,
        *,
        locale: str = "en",
        default_date_format: str = DEFAULT_DATE_FORMAT,
        logger: Any = None,
    ) -> None:
        self._resolver = resolver if resolver is not None else default_resolver
        self._log = logger if logger is not None else _logger
        self._messages: MessageTemplates = templates_for(locale)
        self._formatter = Formatter(
            resolver=self._resolver,
            default_date_format=default_date_format,
            logger=self._log,
        )

    @classmethod
    def from_config(
        cls,
        config: FieldDiffConfig,
        resolver: SchemaResolver | None = None,
        logger: Any = None,
    ) -> DiffEngine:
        """Build an engine from a loaded :class:`FieldDiffConfig`."""
        return cls(
            resolver=resolver,
            locale=config.format.locale,
            default_date_format=config.format.date_format,
            logger=logger,
        )

    @property
    def formatter(self) -> Formatter:
        return self._formatter

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def compare(self, old: Any, new: Any) -> list[str]:
        """Return the change messages between *old* and *new*, in field order."""
        return [record.message for record in self.changes(old, new)]

    def changes(self, old: Any, new: Any, path: str = "") -> list[ChangeRecord]:
        """Return the change records between *old* and *new*.

        Args:
            old:  Earlier version of the record (or None).
            new:  Later version of the record (or None).
            path: Label prefix for every emitted record.

        Raises:
            DiffTypeMismatchError: *old* and *new* (or two nested values
                compared as objects) are instances of different types.
        """
        records: list[ChangeRecord] = []
        self._diff_objects(old, new, path, records)
        return records

    # ------------------------------------------------------------------
    # Comparison helpers
    # ------------------------------------------------------------------

    def _diff_objects(self, old: Any, new: Any, path: str, out: list[ChangeRecord]) -> None:
        if old is None and new is None:
            return
        if old is None or new is None:
            out.append(self._changed(path, self._formatter.format(old), self._formatter.format(new)))
            return
        if type(old) is not type(new):
            raise DiffTypeMismatchError(path, type(old), type(new))

        for fd in self._resolver.comparable_fields(type(old)):
            old_val = read_field(old, fd, self._log)
            new_val = read_field(new, fd, self._log)
            if old_val is MISSING or new_val is MISSING:
                continue
            self._diff_field(fd, old_val, new_val, _join(path, fd.label), out)

    def _diff_field(
        self,
        fd: FieldDescriptor,
        old: Any,
        new: Any,
        path: str,
        out: list[ChangeRecord],
    ) -> None:
        declared = fd.declared_type
        if is_list_type(declared) or _is_list(old) or _is_list(new):
            self._diff_lists(fd, old, new, path, out)
        elif is_unresolved(declared):
            # No static type: decide from the runtime values.
            sample = old if old is not None else new
            if sample is not None and self._resolver.has_schema(type(sample)):
                self._diff_objects(old, new, path, out)
            else:
                self._diff_scalars(fd, old, new, path, out)
        elif is_scalar_type(declared):
            self._diff_scalars(fd, old, new, path, out)
        else:
            self._diff_objects(old, new, path, out)

    def _diff_scalars(
        self,
        fd: FieldDescriptor,
        old: Any,
        new: Any,
        path: str,
        out: list[ChangeRecord],
    ) -> None:
        if _same_value(old, new):
            return
        old_text = self._formatter.format(old, fd.date_format)
        new_text = self._formatter.format(new, fd.date_format)
        # Dates are only as precise as the field's display pattern.
        if isinstance(old, TEMPORAL_TYPES) and isinstance(new, TEMPORAL_TYPES) and old_text == new_text:
            return
        out.append(self._changed(path, old_text, new_text))

    def _diff_lists(
        self,
        fd: FieldDescriptor,
        old: Any,
        new: Any,
        path: str,
        out: list[ChangeRecord],
    ) -> None:
        old_items = list(old) if old is not None else []
        new_items = list(new) if new is not None else []
        if not old_items and not new_items:
            return

        try:
            item_type = element_type(fd.declared_type)
        except UnresolvedElementTypeError:
            sample = next((item for item in chain(old_items, new_items) if item is not None), None)
            if sample is not None and self._resolver.identity_field(type(sample)) is not None:
                self._diff_keyed_lists(fd, old_items, new_items, path, out)
            else:
                self._log.warning(
                    "list_element_type_unresolved",
                    field=path,
                    declared_type=repr(fd.declared_type),
                )
            return

        if is_scalar_type(item_type):
            if len(old_items) != len(new_items) or not all(map(_same_value, old_items, new_items)):
                out.append(
                    self._changed(
                        path,
                        self._items_text(old_items, fd.date_format),
                        self._items_text(new_items, fd.date_format),
                    )
                )
            return
        self._diff_keyed_lists(fd, old_items, new_items, path, out)

    def _diff_keyed_lists(
        self,
        fd: FieldDescriptor,
        old_items: list[Any],
        new_items: list[Any],
        path: str,
        out: list[ChangeRecord],
    ) -> None:
        """Match elements by identity key and diff each pair.

        Keys are visited in first-seen order: old elements first, then
        elements only present in the new list.
        """
        old_index = self._index(old_items, path)
        new_index = self._index(new_items, path)

        for key in dict.fromkeys(chain(old_index, new_index)):
            key_text = self._formatter.format(key)
            element_path = f"{path}[{key_text}]"
            if key not in old_index:
                out.append(self._added(path, key_text, self._formatter.describe(new_index[key], fd.date_format)))
            elif key not in new_index:
                out.append(self._removed(path, key_text, self._formatter.describe(old_index[key], fd.date_format)))
            else:
                self._diff_objects(old_index[key], new_index[key], element_path, out)

    def _index(self, items: list[Any], path: str) -> dict[Any, Any]:
        """Map identity value -> element; unkeyed elements are left out."""
        index: dict[Any, Any] = {}
        for item in items:
            if item is None:
                continue
            id_field = self._resolver.identity_field(type(item))
            if id_field is None:
                self._log.debug("list_element_without_identity", field=path, type=type(item).__qualname__)
                continue
            key = read_field(item, id_field, self._log)
            if key is MISSING or key is None:
                continue
            try:
                index[key] = item
            except TypeError:
                self._log.warning(
                    "identity_value_unhashable",
                    field=path,
                    type=type(item).__qualname__,
                    identity=id_field.name,
                )
        return index

    # ------------------------------------------------------------------
    # Record construction
    # ------------------------------------------------------------------

    def _items_text(self, items: list[Any], date_format: str | None) -> str:
        # The message template supplies the surrounding brackets.
        return ", ".join(self._formatter.format(item, date_format) for item in items)

    def _changed(self, path: str, old_text: str, new_text: str) -> ChangeRecord:
        return ChangeRecord(
            kind=ChangeKind.CHANGED,
            path=path,
            old=old_text,
            new=new_text,
            message=self._messages.changed.format(path=path, old=old_text, new=new_text),
        )

    def _added(self, path: str, key: str, description: str) -> ChangeRecord:
        return ChangeRecord(
            kind=ChangeKind.ADDED,
            path=f"{path}[{key}]",
            key=key,
            description=description,
            message=self._messages.added.format(path=path, key=key, desc=description),
        )

    def _removed(self, path: str, key: str, description: str) -> ChangeRecord:
        return ChangeRecord(
            kind=ChangeKind.REMOVED,
            path=f"{path}[{key}]",
            key=key,
            description=description,
            message=self._messages.removed.format(path=path, key=key, desc=description),
        )


_default_engine = DiffEngine()


def compare(old: Any, new: Any) -> list[str]:
    """Compare *old* and *new* with the default engine.

    Returns the human-readable change messages in field order; an empty list
    means no annotated field differs.
    """
    return _default_engine.compare(old, new)
