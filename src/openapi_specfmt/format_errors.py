"""Failures that abort a format run."""

from __future__ import annotations


class SpecFormatError(Exception):
    """Base class for every failure that aborts a format run."""


class SpecReadError(SpecFormatError):
    """Raised when the input document cannot be read."""


class SpecWriteError(SpecFormatError):
    """Raised when the output document cannot be created or written."""


class SpecDecodeError(SpecFormatError):
    """Raised when the input is not well-formed YAML."""


class SpecStructureError(SpecFormatError):
    """Raised when the parsed document lacks the shape needed for traversal."""


class SpecEncodeError(SpecFormatError):
    """Raised when the rewritten document cannot be serialized."""
