"""Metadata resolver: which fields of a type take part in diffing.

Two metadata sources are consulted, in order:

1. the explicit registration table filled by :meth:`SchemaResolver.register`
   (for classes that are not dataclasses, or that cannot be edited);
2. :func:`~fielddiff.schema.markers.diff_field` / ``diff_id`` markers in
   dataclass field metadata.

Resolved schemas are cached per type.  The cache is filled under a lock and
each entry is computed once, so concurrent first use from several threads is
safe.
"""

from __future__ import annotations

import dataclasses
import inspect
import sys
import threading
import types
import typing
from collections.abc import Iterable
from typing import Any

from fielddiff.errors import SchemaError
from fielddiff.models.schema import FieldDescriptor, FieldSpec
from fielddiff.observability.logging import get_logger
from fielddiff.schema.markers import DIFF_METADATA_KEY, DiffMarker

_logger = get_logger("schema.resolver")


@dataclasses.dataclass(frozen=True)
class _Schema:
    fields: tuple[FieldDescriptor, ...]
    comparable: tuple[FieldDescriptor, ...]
    identity: FieldDescriptor | None


_EMPTY = _Schema(fields=(), comparable=(), identity=None)


class SchemaResolver:
    """Resolves and caches the diff schema of types."""

    def __init__(self, logger: Any = None) -> None:
        self._log = logger if logger is not None else _logger
        self._lock = threading.Lock()
        self._registry: dict[type, tuple[FieldDescriptor, ...]] = {}
        self._cache: dict[type, _Schema] = {}

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def register(self, cls: type, fields: Iterable[FieldSpec]) -> type:
        """Register an explicit diff schema for *cls*.

        Entries keep their declaration order.  When a name is listed twice
        the last entry wins, in the position of the first.

        Raises:
            SchemaError: *cls* is not a class, or names an attribute that
                the dataclass *cls* does not declare.
        """
        if not isinstance(cls, type):
            raise SchemaError(f"Can only register a schema for a class, got {cls!r}")

        by_name: dict[str, FieldSpec] = {}
        for spec in fields:
            if not spec.name:
                raise SchemaError(f"Schema entry for {cls.__qualname__} has an empty name")
            by_name[spec.name] = spec

        if dataclasses.is_dataclass(cls):
            known = {f.name for f in dataclasses.fields(cls)}
            unknown = sorted(set(by_name) - known)
            if unknown:
                raise SchemaError(f"{cls.__qualname__} has no fields named {', '.join(unknown)}")

        descriptors = tuple(
            FieldDescriptor(
                name=spec.name,
                label=spec.label or spec.name,
                declared_type=spec.type,
                date_format=spec.date_format,
                identity=spec.identity,
                comparable=spec.comparable,
            )
            for spec in by_name.values()
        )
        with self._lock:
            self._registry[cls] = descriptors
            # Subclasses may have cached a schema inherited from cls.
            self._cache.clear()
        return cls

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def comparable_fields(self, cls: type) -> tuple[FieldDescriptor, ...]:
        """Return the comparable fields of *cls* in declaration order."""
        return self._schema(cls).comparable

    def identity_field(self, cls: type) -> FieldDescriptor | None:
        """Return the field used as list-element identity key, if any."""
        return self._schema(cls).identity

    def has_schema(self, cls: type) -> bool:
        """Return True if *cls* carries any diff metadata."""
        return bool(self._schema(cls).fields)

    def clear(self) -> None:
        """Drop cached schemas (registrations are kept)."""
        with self._lock:
            self._cache.clear()

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _schema(self, cls: type) -> _Schema:
        schema = self._cache.get(cls)
        if schema is not None:
            return schema
        with self._lock:
            schema = self._cache.get(cls)
            if schema is None:
                schema = self._build(cls)
                self._cache[cls] = schema
        return schema

    def _build(self, cls: type) -> _Schema:
        fields = self._registered(cls)
        if fields is None:
            fields = self._from_dataclass(cls) if dataclasses.is_dataclass(cls) else ()
        if not fields:
            return _EMPTY

        identities = [f for f in fields if f.identity]
        if len(identities) > 1:
            self._log.warning(
                "duplicate_identity_marker",
                type=cls.__qualname__,
                fields=[f.name for f in identities],
                using=identities[0].name,
            )
        return _Schema(
            fields=fields,
            comparable=tuple(f for f in fields if f.comparable),
            identity=identities[0] if identities else None,
        )

    def _registered(self, cls: type) -> tuple[FieldDescriptor, ...] | None:
        for klass in cls.__mro__:
            if klass in self._registry:
                return self._registry[klass]
        return None

    def _from_dataclass(self, cls: type) -> tuple[FieldDescriptor, ...]:
        try:
            hints = typing.get_type_hints(cls)
        except (NameError, TypeError) as exc:
            self._log.warning("type_hints_unresolved", type=cls.__qualname__, error=str(exc))
            hints = None

        descriptors = []
        for f in dataclasses.fields(cls):
            marker = f.metadata.get(DIFF_METADATA_KEY)
            if not isinstance(marker, DiffMarker):
                continue
            declared = hints[f.name] if hints is not None and f.name in hints else _field_hint(cls, f)
            descriptors.append(
                FieldDescriptor(
                    name=f.name,
                    label=marker.label or f.name,
                    declared_type=declared,
                    date_format=marker.date_format,
                    identity=marker.identity,
                    comparable=marker.comparable,
                )
            )
        return tuple(descriptors)


def _field_hint(cls: type, f: dataclasses.Field) -> Any:
    """Resolve one field's annotation, or return it raw if it cannot be resolved."""
    owner = next((k for k in cls.__mro__ if f.name in inspect.get_annotations(k)), cls)
    module = sys.modules.get(owner.__module__)
    holder = types.SimpleNamespace(__annotations__={f.name: f.type})
    try:
        return typing.get_type_hints(
            holder,
            globalns=vars(module) if module is not None else {},
            localns=dict(vars(owner)),
        )[f.name]
    except (NameError, TypeError):
        return f.type


default_resolver = SchemaResolver()


def register_schema(cls: type, fields: Iterable[FieldSpec]) -> type:
    """Register an explicit diff schema for *cls* on the default resolver."""
    return default_resolver.register(cls, fields)


def comparable_fields(cls: type) -> tuple[FieldDescriptor, ...]:
    """Return the comparable fields of *cls* from the default resolver."""
    return default_resolver.comparable_fields(cls)


def identity_field(cls: type) -> FieldDescriptor | None:
    """Return the identity field of *cls* from the default resolver."""
    return default_resolver.identity_field(cls)


def has_schema(cls: type) -> bool:
    """Return True if *cls* carries any diff metadata on the default resolver."""
    return default_resolver.has_schema(cls)
