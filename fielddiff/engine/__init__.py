"""Comparison engine for fielddiff.

Submodules:
    classifier -- Declared-type classification (scalar / list / complex).
    formatter  -- Value and object rendering for change messages.
    messages   -- Message templates per locale.
    compare    -- DiffEngine: the recursive comparison itself.
"""

from fielddiff.engine.classifier import ValueKind, classify
from fielddiff.engine.compare import DiffEngine, compare
from fielddiff.engine.formatter import Formatter, describe, format_value

__all__ = [
    "DiffEngine",
    "Formatter",
    "ValueKind",
    "classify",
    "compare",
    "describe",
    "format_value",
]
