"""Diff summarizer service."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from webhook_contract_ci.schema_indexing import FieldDescriptor, index_schema
from webhook_contract_ci.schema_normalization import normalize_schema

from .diff_outcomes import BreakingChanges, DiffReport, NonBreakingChanges, TypeChange
from .type_compatibility import is_type_compatible

_LOGGER = logging.getLogger(__name__)


def summarize_diff(
    base_index: Mapping[str, FieldDescriptor],
    next_index: Mapping[str, FieldDescriptor],
) -> DiffReport:
    """Classify every address-level difference between two schema indexes."""
    removed_required: list[str] = []
    removed_optional: list[str] = []
    required_became_optional: list[str] = []
    type_changed: list[TypeChange] = []

    for address, base_field in base_index.items():
        next_field = next_index.get(address)
        if next_field is None:
            if base_field.is_required:
                removed_required.append(address)
            else:
                removed_optional.append(address)
            continue

        if base_field.is_required and not next_field.is_required:
            required_became_optional.append(address)
        if not is_type_compatible(base_field.declared_type, next_field.declared_type):
            type_changed.append(
                TypeChange(
                    address=address,
                    base_type=base_field.declared_type,
                    next_type=next_field.declared_type,
                )
            )

    added = [address for address in next_index if address not in base_index]

    report = DiffReport(
        breaking=BreakingChanges(
            removed_required=tuple(sorted(removed_required)),
            required_became_optional=tuple(sorted(required_became_optional)),
            type_changed=tuple(sorted(type_changed, key=lambda change: change.address)),
        ),
        non_breaking=NonBreakingChanges(
            added=tuple(sorted(added)),
            removed_optional=tuple(sorted(removed_optional)),
        ),
    )
    _LOGGER.debug(
        "Compared %d base and %d next addresses: %d breaking",
        len(base_index),
        len(next_index),
        report.breaking_count,
    )
    return report


def diff_schemas(base_schema: Any, next_schema: Any) -> DiffReport:
    """Normalize, index and summarize two schema versions."""
    return summarize_diff(
        index_schema(normalize_schema(base_schema)),
        index_schema(normalize_schema(next_schema)),
    )
