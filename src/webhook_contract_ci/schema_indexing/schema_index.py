"""Schema indexing service."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from webhook_contract_ci.schema_normalization import declared_type_names, declares_type

from .schema_models import ELEMENT_SEGMENT, ROOT_ADDRESS, FieldDescriptor, SchemaIndex


def escape_address_segment(name: str) -> str:
    """Escape a property name the way RFC 6901 escapes pointer tokens."""
    return name.replace("~", "~0").replace("/", "~1")


def join_address(parent: str, segment: str) -> str:
    """Append an already escaped *segment* to *parent*."""
    if parent == ROOT_ADDRESS:
        return f"{ROOT_ADDRESS}{segment}"
    return f"{parent}/{segment}"


def index_schema(schema: Any) -> SchemaIndex:
    """Flatten a normalized schema into a mapping of address to field descriptor.

    Containers get descriptors too, so a type change on a whole object or
    array is visible. All elements of an array share the address
    ``<array>/items``.
    """
    index: SchemaIndex = {}
    _visit(schema, address=ROOT_ADDRESS, required=True, index=index)
    return index


def _visit(node: Any, *, address: str, required: bool, index: SchemaIndex) -> None:
    index[address] = FieldDescriptor(
        address=address,
        declared_type=declared_type_names(node),
        is_required=required,
    )
    if not isinstance(node, Mapping):
        return

    properties = node.get("properties")
    if declares_type(node, "object") and isinstance(properties, Mapping):
        required_names = _required_names(node)
        for name, child in properties.items():
            _visit(
                child,
                address=join_address(address, escape_address_segment(str(name))),
                required=name in required_names,
                index=index,
            )

    items = node.get("items")
    if declares_type(node, "array") and isinstance(items, Mapping):
        # Element presence follows the array's own presence.
        _visit(
            items,
            address=join_address(address, ELEMENT_SEGMENT),
            required=required,
            index=index,
        )


def _required_names(node: Mapping[str, Any]) -> frozenset[str]:
    value = node.get("required")
    if not isinstance(value, list):
        return frozenset()
    return frozenset(name for name in value if isinstance(name, str))
