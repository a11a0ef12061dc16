"""Format use-case service."""

from __future__ import annotations

import logging

from openapi_specfmt.document_io import read_document, render_document, write_document
from openapi_specfmt.response_refactoring import refactor_inline_response_schemas

from .format_contracts import FormatOutcome, FormatRequest

_LOGGER = logging.getLogger(__name__)


def format_file(request: FormatRequest) -> FormatOutcome:
    """Refactor inline response schemas of one OpenAPI YAML file.

    The document is rendered completely in memory before the destination is
    opened, so a failed run never leaves a partially written output file. An
    unchanged document is never rewritten.

    Raises:
      SpecFormatError: If reading, decoding, traversal, encoding or writing fails.
    """
    options = request.options
    output_path = request.resolved_output_path

    root = read_document(request.input_path)
    changed = refactor_inline_response_schemas(root, options)

    if options.dry_run:
        if options.verbose:
            _LOGGER.info("Dry-run: changes detected = %s", str(changed).lower())
        return FormatOutcome(changed=changed, written=False, output_path=output_path, dry_run=True)

    if not changed:
        if options.verbose:
            _LOGGER.info("No changes needed")
        return FormatOutcome(
            changed=False, written=False, output_path=output_path, dry_run=False
        )

    resolved_output = write_document(output_path, render_document(root))
    if options.verbose:
        _LOGGER.info("Wrote refactored spec to %s", resolved_output)
    return FormatOutcome(changed=True, written=True, output_path=resolved_output, dry_run=False)
