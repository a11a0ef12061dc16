"""Document I/O exports."""

from .yaml_document_io import parse_document, read_document, render_document, write_document

__all__ = ["parse_document", "read_document", "render_document", "write_document"]
