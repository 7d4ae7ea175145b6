"""Run execution entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from webhook_contract_ci.change_detection import DiffReport
from webhook_contract_ci.payload_validation import ValidationResult


@dataclass(frozen=True)
class InferRequest:
    """Input contract for inferring a schema from payload samples."""

    input_paths: tuple[str, ...]
    output_path: str


@dataclass(frozen=True)
class InferOutcome:
    """Output contract for one inference run."""

    output_path: Path
    schema: Any


@dataclass(frozen=True)
class CheckRequest:
    """Input contract for validating one payload against one schema."""

    schema_path: str
    input_path: str


@dataclass(frozen=True)
class CheckOutcome:
    """Output contract for one validation run."""

    result: ValidationResult
    formatted_errors: str


@dataclass(frozen=True)
class DiffRequest:
    """Input contract for comparing a base schema with a next payload or schema."""

    base_path: str
    next_path: str
    next_kind: str = "payload"
    report_path: str | None = None


@dataclass(frozen=True)
class DiffOutcome:
    """Output contract for one diff run."""

    report: DiffReport
    report_path: Path | None
