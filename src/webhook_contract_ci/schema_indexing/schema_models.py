"""Schema indexing entities."""

from __future__ import annotations

from dataclasses import dataclass

ROOT_ADDRESS = "/"
ELEMENT_SEGMENT = "items"


@dataclass(frozen=True)
class FieldDescriptor:
    """Declared type and requiredness of one structural address."""

    address: str
    declared_type: tuple[str, ...] | None
    is_required: bool


SchemaIndex = dict[str, FieldDescriptor]
