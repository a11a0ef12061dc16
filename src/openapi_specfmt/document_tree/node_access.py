"""Helpers for reading and mutating PyYAML representation nodes in place."""

from __future__ import annotations

import copy

import yaml

REF_KEY = "$ref"
STR_TAG = "tag:yaml.org,2002:str"
MAP_TAG = "tag:yaml.org,2002:map"
SEQ_TAG = "tag:yaml.org,2002:seq"

_SCHEMA_REF_PREFIX = "#/components/schemas/"


def scalar_node(value: str) -> yaml.ScalarNode:
    """Build a plain string scalar."""
    return yaml.ScalarNode(tag=STR_TAG, value=value)


def mapping_node(pairs: list[tuple[yaml.Node, yaml.Node]] | None = None) -> yaml.MappingNode:
    return yaml.MappingNode(tag=MAP_TAG, value=list(pairs or []))


def sequence_node(items: list[yaml.Node] | None = None) -> yaml.SequenceNode:
    return yaml.SequenceNode(tag=SEQ_TAG, value=list(items or []))


def schema_ref(name: str) -> str:
    """Return the component reference pointer for a schema name."""
    return _SCHEMA_REF_PREFIX + name


def get_map_value(node: yaml.Node | None, key: str) -> yaml.Node | None:
    """Return the value stored under the first scalar key equal to `key`."""
    if not isinstance(node, yaml.MappingNode):
        return None
    for key_node, value_node in node.value:
        if isinstance(key_node, yaml.ScalarNode) and key_node.value == key:
            return value_node
    return None


def ensure_map_value(node: yaml.MappingNode, key: str) -> yaml.MappingNode:
    """Return the mapping under `key`, creating or replacing it with an empty mapping.

    A value that exists but is not a mapping (for example an empty `components:`
    entry, which parses as a null scalar) is replaced in place so the entry keeps
    its position in the document.
    """
    for index, (key_node, value_node) in enumerate(node.value):
        if isinstance(key_node, yaml.ScalarNode) and key_node.value == key:
            if isinstance(value_node, yaml.MappingNode):
                return value_node
            replacement = mapping_node()
            node.value[index] = (key_node, replacement)
            return replacement
    created = mapping_node()
    node.value.append((scalar_node(key), created))
    return created


def append_map_entry(node: yaml.MappingNode, key: str, value: yaml.Node) -> None:
    node.value.append((scalar_node(key), value))


def clone_node(node: yaml.Node) -> yaml.Node:
    """Deep-copy a node so the copy shares no children with the original."""
    return copy.deepcopy(node)


def is_ref_only_schema(node: yaml.Node | None) -> bool:
    """Return True for a mapping holding exactly one entry keyed `$ref`."""
    if not isinstance(node, yaml.MappingNode) or len(node.value) != 1:
        return False
    key_node = node.value[0][0]
    return isinstance(key_node, yaml.ScalarNode) and key_node.value == REF_KEY


def make_ref_only_schema(node: yaml.MappingNode, name: str) -> None:
    """Rewrite `node` in place into a reference to `#/components/schemas/<name>`."""
    node.value[:] = [(scalar_node(REF_KEY), scalar_node(schema_ref(name)))]
