"""Detection of the `allOf` object-plus-alternatives composition."""

from __future__ import annotations

from collections.abc import Callable

import yaml

from openapi_specfmt.document_tree import AliasSlots, get_map_value

_Lookup = Callable[[yaml.Node | None, str], yaml.Node | None]


def find_alternatives_composition(
    schema_node: yaml.Node, aliases: AliasSlots | None = None
) -> yaml.MappingNode | None:
    """Return the base object of a two-element alternatives `allOf`, if `schema_node` is one.

    Parts written as YAML aliases never match.
    """
    lookup = _lookup_for(aliases)
    all_of = lookup(schema_node, "allOf")
    if not isinstance(all_of, yaml.SequenceNode) or len(all_of.value) != 2:
        return None
    if aliases is not None and (
        aliases.is_alias_slot(all_of, 0) or aliases.is_alias_slot(all_of, 1)
    ):
        return None
    base_node, extension_node = all_of.value
    if not is_alternatives_composition(base_node, extension_node, aliases):
        return None
    return base_node


def is_alternatives_composition(
    base_node: yaml.Node, extension_node: yaml.Node, aliases: AliasSlots | None = None
) -> bool:
    """Check for this shape:

        allOf:
          - type: object            # base_node
            ...
          - type: object            # extension_node
            properties:
              alternatives:
                type: array
                items:
                  type: object
                  ...
    """
    if not isinstance(base_node, yaml.MappingNode) or not isinstance(
        extension_node, yaml.MappingNode
    ):
        return False
    lookup = _lookup_for(aliases)
    if not _has_type(base_node, "object", lookup) or not _has_type(
        extension_node, "object", lookup
    ):
        return False

    properties = lookup(extension_node, "properties")
    alternatives = lookup(properties, "alternatives")
    if not isinstance(alternatives, yaml.MappingNode) or not _has_type(
        alternatives, "array", lookup
    ):
        return False

    items = lookup(alternatives, "items")
    return isinstance(items, yaml.MappingNode) and _has_type(items, "object", lookup)


def _lookup_for(aliases: AliasSlots | None) -> _Lookup:
    return aliases.direct_value if aliases is not None else get_map_value


def _has_type(node: yaml.MappingNode, expected: str, lookup: _Lookup) -> bool:
    type_node = lookup(node, "type")
    return isinstance(type_node, yaml.ScalarNode) and type_node.value == expected
