"""Registry of `components.schemas` entries keyed by name and fingerprint."""

from __future__ import annotations

import logging

import yaml

from openapi_specfmt.configuration.runtime_settings import FormatOptions
from openapi_specfmt.document_tree import (
    AliasSlots,
    append_map_entry,
    clone_node,
    get_map_value,
    is_ref_only_schema,
    make_ref_only_schema,
    schema_fingerprint,
)

_LOGGER = logging.getLogger(__name__)

DEFAULT_NAME_HINT = "InlineSchema"


class SchemaRegistry:
    """Name-keyed index over the single `components.schemas` mapping of one document.

    The registry never holds schema nodes itself. It records which name each
    fingerprint was assigned and which names are taken, and resolves
    everything else through the schemas mapping it was created with.
    """

    def __init__(
        self, schemas_node: yaml.MappingNode, aliases: AliasSlots | None = None
    ) -> None:
        self._schemas_node = schemas_node
        self._aliases = aliases if aliases is not None else AliasSlots(None)
        self.by_fingerprint: dict[str, str] = {}
        self.existing_names: set[str] = set()
        for index, (name_node, schema_node) in enumerate(schemas_node.value):
            name = name_node.value
            self.existing_names.add(name)
            # An aliased entry shares its node with another site and never matches.
            if not self._aliases.is_alias_slot(schemas_node, index):
                self.by_fingerprint[schema_fingerprint(schema_node)] = name

    @property
    def schemas_node(self) -> yaml.MappingNode:
        return self._schemas_node

    def has_schema(self, name: str) -> bool:
        """Return True when an entry named `name` is present in the schemas mapping."""
        return get_map_value(self._schemas_node, name) is not None

    def register(self, name: str, schema_node: yaml.Node, options: FormatOptions) -> None:
        """Append `schema_node` under `name` and record its name and fingerprint."""
        append_map_entry(self._schemas_node, name, schema_node)
        self.existing_names.add(name)
        self.by_fingerprint[schema_fingerprint(schema_node)] = name
        if options.verbose:
            _LOGGER.info("  Created components/schemas/%s", name)

    def componentize(
        self, schema_node: yaml.Node | None, name_hint: str, options: FormatOptions
    ) -> tuple[str, bool]:
        """Move an inline schema into `components.schemas` and leave a reference behind.

        Args:
          schema_node: Use-site schema, rewritten in place.
          name_hint: Candidate component name; `InlineSchema` when empty.
          options: Run options, consulted for narration.

        Returns:
          The assigned component name and whether the document changed. A
          non-mapping or reference-only schema yields `("", False)`.
        """
        if not isinstance(schema_node, yaml.MappingNode) or is_ref_only_schema(schema_node):
            return "", False

        fingerprint = schema_fingerprint(schema_node)
        existing_name = self.by_fingerprint.get(fingerprint)
        if existing_name is not None:
            make_ref_only_schema(schema_node, existing_name)
            if options.verbose:
                _LOGGER.info("  Reusing existing schema %s (fingerprint match)", existing_name)
            return existing_name, True

        name = self.ensure_unique_name(name_hint or DEFAULT_NAME_HINT, fingerprint)
        self.register(name, clone_node(schema_node), options)
        make_ref_only_schema(schema_node, name)
        return name, True

    def ensure_unique_name(self, base: str, fingerprint: str) -> str:
        """Return `base` or the first free `base2`, `base3`, ... name."""
        existing = self._aliases.direct_value(self._schemas_node, base)
        if existing is not None and schema_fingerprint(existing) == fingerprint:
            return base

        name = base
        suffix = 2
        while name in self.existing_names:
            name = f"{base}{suffix}"
            suffix += 1
        return name
