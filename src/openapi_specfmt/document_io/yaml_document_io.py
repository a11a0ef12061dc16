"""YAML reading and writing of OpenAPI documents as representation trees."""

from __future__ import annotations

from pathlib import Path

import yaml

from openapi_specfmt.format_errors import (
    SpecDecodeError,
    SpecEncodeError,
    SpecReadError,
    SpecWriteError,
)

_INDENT = 2
# Wide enough that long descriptions are never re-wrapped.
_LINE_WIDTH = 1 << 16


def parse_document(text: str) -> yaml.Node | None:
    """Compose YAML text into a node tree, or None for an empty document."""
    try:
        return yaml.compose(text, Loader=yaml.SafeLoader)
    except yaml.YAMLError as exc:
        raise SpecDecodeError(f"Failed to decode YAML: {exc}") from exc


def read_document(input_path: Path | str) -> yaml.Node | None:
    path = Path(input_path)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise SpecReadError(f"Failed to read input file {path}: {exc}") from exc
    return parse_document(text)


def render_document(root: yaml.Node) -> str:
    """Serialize a node tree with stable block formatting and original key order."""
    try:
        return yaml.serialize(
            root,
            Dumper=yaml.SafeDumper,
            indent=_INDENT,
            width=_LINE_WIDTH,
            allow_unicode=True,
        )
    except yaml.YAMLError as exc:
        raise SpecEncodeError(f"Failed to encode YAML: {exc}") from exc


def write_document(output_path: Path | str, text: str) -> Path:
    """Write rendered YAML text and return the resolved destination path."""
    destination = Path(output_path)
    try:
        destination.write_text(text, encoding="utf-8")
    except OSError as exc:
        raise SpecWriteError(f"Failed to write output file {destination}: {exc}") from exc
    return destination.resolve()
