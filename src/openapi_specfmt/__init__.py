"""Refactor inline OpenAPI response schemas into named components."""

import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())
