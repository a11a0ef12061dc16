"""Configuration domain exports."""

from .runtime_settings import FormatOptions

__all__ = ["FormatOptions"]
