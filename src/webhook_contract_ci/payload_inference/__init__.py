"""Payload inference exports."""

from .schema_inference import (
    RawSchemaInferrer,
    infer_raw_schema,
    infer_schema_from_payload,
    infer_schema_from_samples,
)

__all__ = [
    "RawSchemaInferrer",
    "infer_raw_schema",
    "infer_schema_from_payload",
    "infer_schema_from_samples",
]
