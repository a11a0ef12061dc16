"""Schema registry exports."""

from .component_registry import DEFAULT_NAME_HINT, SchemaRegistry

__all__ = ["DEFAULT_NAME_HINT", "SchemaRegistry"]
