"""Positions in a composed node tree that were written as YAML aliases."""

from __future__ import annotations

from collections.abc import Iterator

import yaml


class AliasSlots:
    """Index of the mapping values and sequence items written as `*alias`.

    Composing resolves an alias to the very node object carrying the anchor,
    and an anchor always precedes its aliases in the text. An alias is
    therefore every appearance of a node after its first one in document
    order. Slots are recorded before the tree is mutated; containers are kept
    referenced so their ids stay valid.
    """

    def __init__(self, root: yaml.Node | None) -> None:
        self._containers: dict[int, yaml.Node] = {}
        self._slots: set[tuple[int, int]] = set()
        if root is not None:
            self._collect(root, {id(root)})

    def _collect(self, node: yaml.Node, seen: set[int]) -> None:
        for index, child in _indexed_children(node):
            if id(child) in seen:
                if index is not None:
                    self._containers[id(node)] = node
                    self._slots.add((id(node), index))
                continue
            seen.add(id(child))
            self._collect(child, seen)

    def is_alias_slot(self, container: yaml.Node, index: int) -> bool:
        """Return True when entry `index` of `container` was written as an alias."""
        return (id(container), index) in self._slots

    def direct_value(self, node: yaml.Node | None, key: str) -> yaml.Node | None:
        """Like `get_map_value`, but None when the value was written as an alias."""
        if not isinstance(node, yaml.MappingNode):
            return None
        for index, (key_node, value_node) in enumerate(node.value):
            if isinstance(key_node, yaml.ScalarNode) and key_node.value == key:
                return None if self.is_alias_slot(node, index) else value_node
        return None


def _indexed_children(node: yaml.Node) -> Iterator[tuple[int | None, yaml.Node]]:
    # Keys carry no index; only values and items are addressable slots.
    if isinstance(node, yaml.MappingNode):
        for index, (key_node, value_node) in enumerate(node.value):
            yield None, key_node
            yield index, value_node
    elif isinstance(node, yaml.SequenceNode):
        yield from enumerate(node.value)
