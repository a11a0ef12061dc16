"""Format run exports."""

from .format_contracts import FormatOutcome, FormatRequest
from .format_use_case import format_file

__all__ = ["FormatOutcome", "FormatRequest", "format_file"]
