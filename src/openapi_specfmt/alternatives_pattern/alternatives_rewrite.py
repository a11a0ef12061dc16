"""Rewrite of an alternatives composition into two named components."""

from __future__ import annotations

import logging

import yaml

from openapi_specfmt.configuration.runtime_settings import FormatOptions
from openapi_specfmt.document_tree import clone_node, make_ref_only_schema
from openapi_specfmt.schema_naming import ResponseSite, derive_schema_name
from openapi_specfmt.schema_registry import SchemaRegistry

from .composite_schema_builder import COMPOSITE_SUFFIX, build_composite_schema

_LOGGER = logging.getLogger(__name__)


def handle_alternatives_pattern(
    site: ResponseSite,
    schema_node: yaml.MappingNode,
    base_node: yaml.MappingNode,
    registry: SchemaRegistry,
    options: FormatOptions,
) -> bool:
    """Replace an alternatives `allOf` with a reference to `<Name>WithAlternatives`.

    `<Name>` comes from the operationId alone. Without one the whole `allOf`
    is componentized like any other inline schema. Both components are only
    created when no entry of that name exists yet.
    """
    base_name = derive_schema_name(site.operation_id)
    if not base_name:
        name_hint = site.response_name()
        if options.verbose:
            _LOGGER.info(
                "Found inline schema at %s %s %s -> creating %s",
                site.method,
                site.path,
                site.status,
                name_hint,
            )
        _, changed = registry.componentize(schema_node, name_hint, options)
        return changed

    composite_name = base_name + COMPOSITE_SUFFIX
    if options.verbose:
        _LOGGER.info(
            "Found inline allOf pattern at %s %s %s -> creating %s and %s",
            site.method,
            site.path,
            site.status,
            base_name,
            composite_name,
        )

    if not registry.has_schema(base_name):
        registry.register(base_name, clone_node(base_node), options)
    if not registry.has_schema(composite_name):
        registry.register(composite_name, build_composite_schema(base_name), options)

    make_ref_only_schema(schema_node, composite_name)
    return True
