"""Traversal of `paths` that moves inline JSON response schemas into components."""

from __future__ import annotations

import logging

import yaml

from openapi_specfmt.alternatives_pattern import (
    find_alternatives_composition,
    handle_alternatives_pattern,
)
from openapi_specfmt.configuration.runtime_settings import FormatOptions
from openapi_specfmt.document_tree import (
    AliasSlots,
    ensure_map_value,
    get_map_value,
    is_ref_only_schema,
)
from openapi_specfmt.format_errors import SpecStructureError
from openapi_specfmt.schema_naming import ResponseSite
from openapi_specfmt.schema_registry import SchemaRegistry

_LOGGER = logging.getLogger(__name__)

HTTP_METHODS = frozenset({"get", "post", "put", "delete", "patch", "options", "head"})

# First present key wins.
JSON_CONTENT_TYPES = (
    "application/json; charset=UTF-8",
    "application/json",
    "application/json; charset=utf-8",
)


def refactor_inline_response_schemas(root: yaml.Node | None, options: FormatOptions) -> bool:
    """Walk every operation response and componentize its inline JSON schema.

    Values written as YAML aliases are shared with their anchor and are left
    as they are, at every level from path items down to schemas.

    Args:
      root: Composed document root, mutated in place.
      options: Run options.

    Returns:
      True when at least one schema was rewritten.

    Raises:
      SpecStructureError: If the root is not a mapping or `paths` is missing
        or not a mapping.
    """
    if not isinstance(root, yaml.MappingNode):
        raise SpecStructureError("Expected a YAML document with a top-level mapping.")

    aliases = AliasSlots(root)
    components_node = ensure_map_value(root, "components")
    schemas_node = ensure_map_value(components_node, "schemas")
    registry = SchemaRegistry(schemas_node, aliases)

    paths_node = aliases.direct_value(root, "paths")
    if not isinstance(paths_node, yaml.MappingNode):
        raise SpecStructureError("Missing or invalid 'paths' section.")

    changed = False
    for path_index, (path_key, path_item) in enumerate(paths_node.value):
        if not isinstance(path_item, yaml.MappingNode):
            continue
        if aliases.is_alias_slot(paths_node, path_index):
            continue
        for method_index, (method_key, operation) in enumerate(path_item.value):
            if not isinstance(method_key, yaml.ScalarNode) or method_key.value not in HTTP_METHODS:
                continue
            if not isinstance(operation, yaml.MappingNode):
                continue
            if aliases.is_alias_slot(path_item, method_index):
                continue
            method = method_key.value
            if _process_operation(path_key.value, method, operation, registry, aliases, options):
                changed = True
    return changed


def _process_operation(
    path: str,
    method: str,
    operation: yaml.MappingNode,
    registry: SchemaRegistry,
    aliases: AliasSlots,
    options: FormatOptions,
) -> bool:
    operation_id_node = aliases.direct_value(operation, "operationId")
    operation_id = (
        operation_id_node.value if isinstance(operation_id_node, yaml.ScalarNode) else ""
    )

    responses_node = aliases.direct_value(operation, "responses")
    if not isinstance(responses_node, yaml.MappingNode):
        return False

    changed = False
    for status_index, (status_key, response_node) in enumerate(responses_node.value):
        if aliases.is_alias_slot(responses_node, status_index):
            continue
        site = ResponseSite(
            path=path, method=method, operation_id=operation_id, status=status_key.value
        )
        if process_response_schema(site, response_node, registry, options, aliases):
            changed = True
    return changed


def process_response_schema(
    site: ResponseSite,
    response_node: yaml.Node,
    registry: SchemaRegistry,
    options: FormatOptions,
    aliases: AliasSlots | None = None,
) -> bool:
    """Componentize the JSON schema of one response, returning True when it changed."""
    if aliases is None:
        aliases = AliasSlots(None)
    content_node = aliases.direct_value(response_node, "content")
    if not isinstance(content_node, yaml.MappingNode):
        return False

    media_node = _find_json_media_type(content_node, aliases)
    if not isinstance(media_node, yaml.MappingNode):
        return False

    schema_node = aliases.direct_value(media_node, "schema")
    if not isinstance(schema_node, yaml.MappingNode) or is_ref_only_schema(schema_node):
        return False

    base_node = find_alternatives_composition(schema_node, aliases)
    if base_node is not None:
        return handle_alternatives_pattern(site, schema_node, base_node, registry, options)

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


def _find_json_media_type(
    content_node: yaml.MappingNode, aliases: AliasSlots
) -> yaml.Node | None:
    for content_type in JSON_CONTENT_TYPES:
        if get_map_value(content_node, content_type) is not None:
            return aliases.direct_value(content_node, content_type)
    return None
