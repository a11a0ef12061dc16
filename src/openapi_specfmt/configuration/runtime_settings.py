"""Runtime settings entities."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class FormatOptions:
    """Runtime switches for one format run."""

    dry_run: bool = False
    verbose: bool = False
