"""Format run entities."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from openapi_specfmt.configuration.runtime_settings import FormatOptions


@dataclass(frozen=True)
class FormatRequest:
    """Input contract for formatting one document."""

    input_path: str
    output_path: str | None = None
    options: FormatOptions = field(default_factory=FormatOptions)

    @property
    def resolved_output_path(self) -> Path:
        """Return the destination, defaulting to rewriting the input in place."""
        return Path(self.output_path or self.input_path)


@dataclass(frozen=True)
class FormatOutcome:
    """Output contract for one completed format run."""

    changed: bool
    written: bool
    output_path: Path
    dry_run: bool
