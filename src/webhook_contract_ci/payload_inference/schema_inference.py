"""Payload-to-schema inference boundary."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import Any

from genson import SchemaBuilder

from webhook_contract_ci.schema_normalization import normalize_schema

_LOGGER = logging.getLogger(__name__)

RawSchemaInferrer = Callable[[Sequence[Any]], Any]


def infer_raw_schema(samples: Sequence[Any]) -> dict[str, Any]:
    """Infer one raw schema covering every payload sample.

    genson merges all elements of a list into a single ``items`` schema and
    lists a property as required when every observed object carries it.
    """
    builder = SchemaBuilder(schema_uri=None)
    for sample in samples:
        builder.add_object(sample)
    return builder.to_schema()


def infer_schema_from_samples(
    samples: Sequence[Any],
    *,
    inferrer: RawSchemaInferrer | None = None,
) -> Any:
    """Infer and normalize a schema from one or more payload samples."""
    if not samples:
        raise ValueError("At least one payload sample is required for inference.")
    resolved_inferrer = inferrer or infer_raw_schema
    raw_schema = resolved_inferrer(list(samples))
    _LOGGER.debug("Inferred raw schema from %d sample(s)", len(samples))
    return normalize_schema(raw_schema)


def infer_schema_from_payload(payload: Any, *, inferrer: RawSchemaInferrer | None = None) -> Any:
    """Infer and normalize a schema from a single payload."""
    return infer_schema_from_samples([payload], inferrer=inferrer)
