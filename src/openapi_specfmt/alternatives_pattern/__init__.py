"""Alternatives composition exports."""

from .alternatives_rewrite import handle_alternatives_pattern
from .composite_schema_builder import (
    ALTERNATIVES_DESCRIPTION,
    COMPOSITE_SUFFIX,
    build_composite_schema,
)
from .pattern_detection import find_alternatives_composition, is_alternatives_composition

__all__ = [
    "ALTERNATIVES_DESCRIPTION",
    "COMPOSITE_SUFFIX",
    "build_composite_schema",
    "find_alternatives_composition",
    "handle_alternatives_pattern",
    "is_alternatives_composition",
]
