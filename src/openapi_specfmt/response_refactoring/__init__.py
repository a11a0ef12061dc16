"""Response schema refactoring exports."""

from .response_walker import (
    HTTP_METHODS,
    JSON_CONTENT_TYPES,
    process_response_schema,
    refactor_inline_response_schemas,
)

__all__ = [
    "HTTP_METHODS",
    "JSON_CONTENT_TYPES",
    "process_response_schema",
    "refactor_inline_response_schemas",
]
