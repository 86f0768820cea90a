"""Value classifier: how a field's declared type is compared.

Classification reads the *declared* type only.  A list field's element type
comes from its annotation (``list[Prize]``), so an empty list is classified
the same way as a populated one.
"""

from __future__ import annotations

import collections.abc
import datetime as dt
import types
import typing
import uuid
from decimal import Decimal
from enum import Enum, StrEnum
from fractions import Fraction
from typing import Any, ForwardRef, TypeVar

from fielddiff.errors import UnresolvedElementTypeError


class ValueKind(StrEnum):
    """Comparison strategy for a field."""

    SCALAR = "scalar"
    LIST_OF_SCALAR = "list_of_scalar"
    LIST_OF_COMPLEX = "list_of_complex"
    COMPLEX = "complex"


_SCALAR_TYPES: tuple[type, ...] = (
    bool,
    int,
    float,
    complex,
    Decimal,
    Fraction,
    str,
    bytes,
    dt.date,  # also covers datetime
    dt.time,
    dt.timedelta,
    uuid.UUID,
    Enum,
    type(None),
)

TEMPORAL_TYPES: tuple[type, ...] = (dt.date, dt.time)

_LIST_ORIGINS = (list, tuple, collections.abc.Sequence, collections.abc.MutableSequence)


def is_scalar_type(tp: Any) -> bool:
    """Return True if *tp* is compared directly by equality."""
    tp = _unwrap_optional(tp)
    origin = typing.get_origin(tp)
    if origin is typing.Literal:
        return True
    if _is_union(tp):
        return all(is_scalar_type(arg) for arg in typing.get_args(tp))
    if origin is not None:
        return False
    return isinstance(tp, type) and issubclass(tp, _SCALAR_TYPES)


def is_unresolved(tp: Any) -> bool:
    """Return True if *tp* carries no usable static type information."""
    return tp is Any or isinstance(tp, (str, ForwardRef, TypeVar))


def is_list_type(tp: Any) -> bool:
    """Return True if *tp* declares a list-like collection."""
    tp = _unwrap_optional(tp)
    origin = typing.get_origin(tp) or tp
    if origin is str or origin is bytes:
        return False
    return isinstance(origin, type) and issubclass(origin, _LIST_ORIGINS)


def element_type(tp: Any) -> Any:
    """Return the declared element type of the list type *tp*.

    Raises:
        UnresolvedElementTypeError: the declaration has no usable element type
            (bare ``list``, ``list[Any]``, ``list[T]``, a forward reference
            that could not be resolved, or a heterogeneous tuple).
    """
    tp = _unwrap_optional(tp)
    args = typing.get_args(tp)
    if typing.get_origin(tp) is tuple:
        if len(args) == 2 and args[1] is Ellipsis:
            args = args[:1]
        elif len(set(args)) == 1:
            args = args[:1]
    if len(args) != 1 or is_unresolved(args[0]):
        raise UnresolvedElementTypeError(tp)
    return args[0]


def classify(tp: Any) -> ValueKind:
    """Classify the declared type *tp*.

    Raises:
        UnresolvedElementTypeError: *tp* is a list type whose element type
            cannot be resolved from the declaration.
    """
    if is_list_type(tp):
        item = element_type(tp)
        return ValueKind.LIST_OF_SCALAR if is_scalar_type(item) else ValueKind.LIST_OF_COMPLEX
    if is_scalar_type(tp):
        return ValueKind.SCALAR
    return ValueKind.COMPLEX


def _is_union(tp: Any) -> bool:
    return typing.get_origin(tp) in (typing.Union, types.UnionType)


def _unwrap_optional(tp: Any) -> Any:
    """``X | None`` -> ``X``; other types are returned unchanged."""
    if not _is_union(tp):
        return tp
    args = [arg for arg in typing.get_args(tp) if arg is not type(None)]
    if len(args) == 1:
        return args[0]
    return tp
