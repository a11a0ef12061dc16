"""Schema naming exports."""

from .name_derivation import (
    VERB_PREFIXES,
    derive_name_from_path_and_method,
    derive_response_name,
    derive_schema_name,
    to_pascal_case,
)
from .naming_models import ResponseSite

__all__ = [
    "ResponseSite",
    "VERB_PREFIXES",
    "derive_name_from_path_and_method",
    "derive_response_name",
    "derive_schema_name",
    "to_pascal_case",
]
