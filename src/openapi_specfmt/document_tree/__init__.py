"""Document tree exports."""

from .alias_slots import AliasSlots
from .node_access import (
    REF_KEY,
    append_map_entry,
    clone_node,
    ensure_map_value,
    get_map_value,
    is_ref_only_schema,
    make_ref_only_schema,
    mapping_node,
    scalar_node,
    schema_ref,
    sequence_node,
)
from .structural_fingerprint import schema_fingerprint

__all__ = [
    "AliasSlots",
    "REF_KEY",
    "append_map_entry",
    "clone_node",
    "ensure_map_value",
    "get_map_value",
    "is_ref_only_schema",
    "make_ref_only_schema",
    "mapping_node",
    "scalar_node",
    "schema_fingerprint",
    "schema_ref",
    "sequence_node",
]
