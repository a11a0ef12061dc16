"""Structural fingerprint tests."""

from __future__ import annotations

import yaml
from openapi_specfmt.document_tree import scalar_node, schema_fingerprint


def _compose(text: str) -> yaml.Node:
    return yaml.compose(text, Loader=yaml.SafeLoader)


def test_scalar_fingerprint_format() -> None:
    assert schema_fingerprint(scalar_node("a")) == 'K:scalar;T:tag:yaml.org,2002:str;V:"a";'


def test_missing_node_has_distinct_marker() -> None:
    assert schema_fingerprint(None) == "nil;"


def test_container_fingerprint_brackets_children_in_order() -> None:
    fingerprint = schema_fingerprint(_compose("type: object"))

    assert fingerprint == (
        'K:mapping;T:tag:yaml.org,2002:map;V:"";['
        'K:scalar;T:tag:yaml.org,2002:str;V:"type";|'
        'K:scalar;T:tag:yaml.org,2002:str;V:"object";|'
        "]"
    )


def test_structurally_equal_documents_share_fingerprint_regardless_of_formatting() -> None:
    block = _compose(
        """
type: object
properties:
  id:
    type: string
"""
    )
    flow = _compose("{type: object, properties: {id: {type: string}}}")

    assert schema_fingerprint(block) == schema_fingerprint(flow)


def test_key_order_changes_fingerprint() -> None:
    first = _compose("{type: object, description: pet}")
    second = _compose("{description: pet, type: object}")

    assert schema_fingerprint(first) != schema_fingerprint(second)


def test_scalar_tag_changes_fingerprint() -> None:
    assert schema_fingerprint(_compose("maxLength: 10")) != schema_fingerprint(
        _compose("maxLength: '10'")
    )


def test_child_count_and_kind_change_fingerprint() -> None:
    assert schema_fingerprint(_compose("[a, b]")) != schema_fingerprint(_compose("[a, b, c]"))
    assert schema_fingerprint(_compose("[]")) != schema_fingerprint(_compose("{}"))


def test_ref_and_inline_equivalent_are_not_equal() -> None:
    assert schema_fingerprint(_compose("$ref: '#/components/schemas/Pet'")) != schema_fingerprint(
        _compose("type: object")
    )
