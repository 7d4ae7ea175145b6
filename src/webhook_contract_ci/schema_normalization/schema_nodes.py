"""Helpers for reading raw schema nodes."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any


def as_type_names(value: Any) -> tuple[str, ...] | None:
    """Return a `type` keyword value as a tuple of names, or None when unconstrained."""
    if isinstance(value, str):
        return (value,)
    if isinstance(value, Sequence) and not isinstance(value, str | bytes):
        names = tuple(item for item in value if isinstance(item, str))
        return names or None
    return None


def declared_type_names(node: Any) -> tuple[str, ...] | None:
    """Return the type names a schema node declares."""
    if not isinstance(node, Mapping):
        return None
    return as_type_names(node.get("type"))


def declares_type(node: Any, type_name: str) -> bool:
    """Return True when the node's `type` is *type_name* or a union containing it."""
    names = declared_type_names(node)
    return names is not None and type_name in names
