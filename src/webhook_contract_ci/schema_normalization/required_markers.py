"""Required-marker normalization service.

Inference libraries may flag a mandatory property with a per-property
``required: true`` boolean. Standard JSON Schema lists mandatory property
names on the parent object instead. :func:`normalize_schema` folds the
boolean hints into the parent's list, merging them with any list that is
already there.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .schema_nodes import declares_type

_NESTED_SCHEMA_KEYS = ("items", "additionalProperties", "anyOf", "oneOf", "allOf")


def normalize_schema(node: Any) -> Any:
    """Return a copy of *node* that uses only object-level `required` name lists.

    Scalars pass through unchanged and lists are normalized element-wise.
    The input is never mutated.
    """
    if isinstance(node, list):
        return [normalize_schema(item) for item in node]
    if not isinstance(node, Mapping):
        return node

    normalized = dict(node)
    for key in _NESTED_SCHEMA_KEYS:
        nested = normalized.get(key)
        if isinstance(nested, Mapping | list):
            normalized[key] = normalize_schema(nested)

    properties = normalized.get("properties")
    if declares_type(normalized, "object") and isinstance(properties, Mapping):
        _fold_required_markers(normalized, properties)

    # A bare boolean is never valid outside a property position.
    if normalized.get("required") is True:
        del normalized["required"]
    return normalized


def _fold_required_markers(normalized: dict[str, Any], properties: Mapping[str, Any]) -> None:
    hinted: list[str] = []
    normalized_properties: dict[str, Any] = {}
    for name in sorted(properties):
        child = properties[name]
        if isinstance(child, Mapping) and child.get("required") is True:
            hinted.append(name)
        normalized_properties[name] = normalize_schema(child)
    normalized["properties"] = normalized_properties

    own_required = normalized.get("required")
    explicit = _explicit_required(own_required, normalized_properties)

    if hinted and explicit is not None:
        normalized["required"] = sorted(set(explicit) | set(hinted))
    elif hinted:
        normalized["required"] = hinted
    elif explicit is not None:
        normalized["required"] = explicit
    elif own_required is True:
        normalized["required"] = list(normalized_properties)
    else:
        normalized.pop("required", None)


def _explicit_required(value: Any, properties: Mapping[str, Any]) -> list[str] | None:
    if not isinstance(value, list):
        return None
    names: list[str] = []
    for name in value:
        if isinstance(name, str) and name in properties and name not in names:
            names.append(name)
    return names
