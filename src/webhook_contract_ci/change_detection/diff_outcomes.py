"""Change detection entities."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any


def _render_type(declared_type: tuple[str, ...] | None) -> str:
    if declared_type is None:
        return json.dumps(None)
    if len(declared_type) == 1:
        return json.dumps(declared_type[0])
    return json.dumps(list(declared_type))


@dataclass(frozen=True)
class TypeChange:
    """Incompatible type declarations found at one shared address."""

    address: str
    base_type: tuple[str, ...] | None
    next_type: tuple[str, ...] | None

    def render(self) -> str:
        """Render as ``<address> (<old> -> <new>)``."""
        return f"{self.address} ({_render_type(self.base_type)} -> {_render_type(self.next_type)})"


@dataclass(frozen=True)
class BreakingChanges:
    """Changes that can break existing consumers."""

    removed_required: tuple[str, ...] = ()
    required_became_optional: tuple[str, ...] = ()
    type_changed: tuple[TypeChange, ...] = ()


@dataclass(frozen=True)
class NonBreakingChanges:
    """Informational changes that never count as breaking."""

    added: tuple[str, ...] = ()
    removed_optional: tuple[str, ...] = ()


@dataclass(frozen=True)
class DiffReport:
    """Classified field-level differences between two schema versions."""

    breaking: BreakingChanges
    non_breaking: NonBreakingChanges

    @property
    def breaking_count(self) -> int:
        return (
            len(self.breaking.removed_required)
            + len(self.breaking.required_became_optional)
            + len(self.breaking.type_changed)
        )

    @property
    def is_breaking(self) -> bool:
        return self.breaking_count > 0

    def to_dict(self, *, include_non_breaking: bool = True) -> dict[str, Any]:
        """Return the JSON-ready report shape used by machine-readable output."""
        payload: dict[str, Any] = {
            "breaking": {
                "removedRequired": list(self.breaking.removed_required),
                "requiredBecameOptional": list(self.breaking.required_became_optional),
                "typeChanged": [change.render() for change in self.breaking.type_changed],
            },
            "breakingCount": self.breaking_count,
        }
        if include_non_breaking:
            payload["nonBreaking"] = {
                "added": list(self.non_breaking.added),
                "removedOptional": list(self.non_breaking.removed_optional),
            }
        return payload
