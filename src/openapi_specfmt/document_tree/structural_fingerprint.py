"""Structural fingerprints used as the schema deduplication key."""

from __future__ import annotations

import json
from collections.abc import Iterator

import yaml


def schema_fingerprint(node: yaml.Node | None) -> str:
    """Return an order-sensitive structural digest of `node`.

    Two nodes share a fingerprint only when they have the same kind, tag and
    scalar value at every position, with children in the same order. Mapping
    children are visited as key, value, key, value.
    """
    parts: list[str] = []
    _write_node_fingerprint(parts, node)
    return "".join(parts)


def _write_node_fingerprint(parts: list[str], node: yaml.Node | None) -> None:
    if node is None:
        parts.append("nil;")
        return
    scalar_value = node.value if isinstance(node, yaml.ScalarNode) else ""
    parts.append(f"K:{node.id};T:{node.tag};V:{json.dumps(scalar_value)};")
    children = list(_iter_children(node))
    if children:
        parts.append("[")
        for child in children:
            _write_node_fingerprint(parts, child)
            parts.append("|")
        parts.append("]")


def _iter_children(node: yaml.Node) -> Iterator[yaml.Node]:
    if isinstance(node, yaml.MappingNode):
        for key_node, value_node in node.value:
            yield key_node
            yield value_node
    elif isinstance(node, yaml.SequenceNode):
        yield from node.value
