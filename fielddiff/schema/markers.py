"""Dataclass field markers that declare diff metadata.

Usage::

    @dataclass
    class Prize:
        prize_id: int = diff_id()
        name: str = diff_field("Prize name")
        starts_at: datetime | None = diff_field("Starts at", date_format="%Y-%m-%d", default=None)

The marker is stored in the dataclass field's ``metadata`` mapping under
:data:`DIFF_METADATA_KEY`, so it survives ``dataclasses.replace`` and
inheritance like any other field metadata.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any

DIFF_METADATA_KEY = "fielddiff"


@dataclass(frozen=True)
class DiffMarker:
    """Diff metadata attached to a single dataclass field."""

    label: str = ""
    date_format: str | None = None
    identity: bool = False
    comparable: bool = True


def diff_field(
    label: str = "",
    *,
    date_format: str | None = None,
    identity: bool = False,
    metadata: dict[str, Any] | None = None,
    **kwargs: Any,
) -> Any:
    """Declare a dataclass field that participates in diffing.

    Args:
        label:       Display label used in change messages. Defaults to the
                     attribute name.
        date_format: ``strftime`` pattern for date/time values of this field.
        identity:    Also mark the field as the list-element identity key.
        metadata:    Extra field metadata, merged with the diff marker.
        **kwargs:    Passed through to :func:`dataclasses.field`
                     (``default``, ``default_factory``, ``repr``, ...).
    """
    marker = DiffMarker(label=label, date_format=date_format, identity=identity)
    return dataclasses.field(metadata={**(metadata or {}), DIFF_METADATA_KEY: marker}, **kwargs)


def diff_id(label: str = "", *, metadata: dict[str, Any] | None = None, **kwargs: Any) -> Any:
    """Declare the identity field used to match list elements.

    The field is not itself compared; combine ``diff_field(..., identity=True)``
    when the key should also show up in change messages.
    """
    marker = DiffMarker(label=label, identity=True, comparable=False)
    return dataclasses.field(metadata={**(metadata or {}), DIFF_METADATA_KEY: marker}, **kwargs)
