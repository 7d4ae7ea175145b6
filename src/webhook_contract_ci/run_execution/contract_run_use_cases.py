"""Run execution use-case services for infer, check and diff."""

from __future__ import annotations

import logging
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

from jsonschema.exceptions import SchemaError

from webhook_contract_ci.change_detection import summarize_diff
from webhook_contract_ci.payload_inference import RawSchemaInferrer, infer_schema_from_samples
from webhook_contract_ci.payload_validation import (
    SchemaValidator,
    format_validation_errors,
    validate_against_schema,
)
from webhook_contract_ci.results_writing import DiffMetadata, write_diff_workbook
from webhook_contract_ci.schema_indexing import index_schema
from webhook_contract_ci.schema_normalization import normalize_schema

from .json_documents import DocumentError, read_json_document, write_json_document
from .run_contracts import (
    CheckOutcome,
    CheckRequest,
    DiffOutcome,
    DiffRequest,
    InferOutcome,
    InferRequest,
)

_LOGGER = logging.getLogger(__name__)


class RunExecutionError(Exception):
    """Raised when a run use case cannot be completed."""


def execute_infer_run(
    request: InferRequest,
    *,
    inferrer: RawSchemaInferrer | None = None,
) -> InferOutcome:
    """Infer a normalized schema from payload samples and write it to disk."""
    if not request.input_paths:
        raise RunExecutionError("At least one payload file is required for inference.")
    samples = [_read_document(path) for path in request.input_paths]
    schema = infer_schema_from_samples(samples, inferrer=inferrer)
    try:
        output_path = write_json_document(request.output_path, schema)
    except OSError as exc:
        raise RunExecutionError(str(exc)) from exc
    _LOGGER.debug("Wrote inferred schema to %s", output_path)
    return InferOutcome(output_path=output_path, schema=schema)


def execute_check_run(
    request: CheckRequest,
    *,
    validator: SchemaValidator | None = None,
) -> CheckOutcome:
    """Validate one payload file against one (normalized) schema file."""
    resolved_validator = validator or validate_against_schema
    schema = normalize_schema(_read_document(request.schema_path))
    payload = _read_document(request.input_path)
    try:
        result = resolved_validator(schema, payload)
    except SchemaError as exc:
        raise RunExecutionError(f"Invalid schema {request.schema_path}: {exc.message}") from exc
    return CheckOutcome(result=result, formatted_errors=format_validation_errors(result.errors))


def execute_diff_run(
    request: DiffRequest,
    *,
    inferrer: RawSchemaInferrer | None = None,
) -> DiffOutcome:
    """Compare a base schema with the schema of a next payload sample or schema file."""
    base_schema = normalize_schema(_read_document(request.base_path))
    next_document = _read_document(request.next_path)
    if request.next_kind == "payload":
        next_schema = infer_schema_from_samples([next_document], inferrer=inferrer)
    elif request.next_kind == "schema":
        next_schema = normalize_schema(next_document)
    else:
        raise RunExecutionError(f"Unsupported next document kind: {request.next_kind}")

    report = summarize_diff(index_schema(base_schema), index_schema(next_schema))

    report_path = None
    if request.report_path:
        metadata = DiffMetadata(
            generated_at=datetime.now(UTC),
            base_path=Path(request.base_path).resolve(),
            next_path=Path(request.next_path).resolve(),
            next_kind=request.next_kind,
        )
        try:
            report_path = write_diff_workbook(report, request.report_path, metadata)
        except OSError as exc:
            raise RunExecutionError(str(exc)) from exc
    return DiffOutcome(report=report, report_path=report_path)


def _read_document(path: str) -> Any:
    try:
        document = read_json_document(path)
    except DocumentError as exc:
        raise RunExecutionError(str(exc)) from exc
    _LOGGER.debug("Loaded JSON document %s", path)
    return document
