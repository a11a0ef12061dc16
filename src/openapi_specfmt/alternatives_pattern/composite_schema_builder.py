"""Builder for the `<Name>WithAlternatives` composite schema."""

from __future__ import annotations

import yaml

from openapi_specfmt.document_tree import (
    REF_KEY,
    mapping_node,
    scalar_node,
    schema_ref,
    sequence_node,
)

COMPOSITE_SUFFIX = "WithAlternatives"
ALTERNATIVES_DESCRIPTION = "An array of other possible matches"


def build_composite_schema(base_name: str) -> yaml.MappingNode:
    """Build the composite schema for `base_name`:

        allOf:
          - $ref: '#/components/schemas/<base_name>'
          - type: object
            properties:
              alternatives:
                type: array
                description: An array of other possible matches
                items:
                  $ref: '#/components/schemas/<base_name>'
    """
    alternatives = mapping_node(
        [
            (scalar_node("type"), scalar_node("array")),
            (scalar_node("description"), scalar_node(ALTERNATIVES_DESCRIPTION)),
            (scalar_node("items"), _ref_mapping(base_name)),
        ]
    )
    extension = mapping_node(
        [
            (scalar_node("type"), scalar_node("object")),
            (
                scalar_node("properties"),
                mapping_node([(scalar_node("alternatives"), alternatives)]),
            ),
        ]
    )
    return mapping_node(
        [(scalar_node("allOf"), sequence_node([_ref_mapping(base_name), extension]))]
    )


def _ref_mapping(name: str) -> yaml.MappingNode:
    return mapping_node([(scalar_node(REF_KEY), scalar_node(schema_ref(name)))])
