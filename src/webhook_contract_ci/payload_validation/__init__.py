"""Payload validation exports."""

from .schema_validation import (
    SchemaValidator,
    format_validation_errors,
    validate_against_schema,
)
from .validation_outcomes import ValidationIssue, ValidationResult

__all__ = [
    "SchemaValidator",
    "ValidationIssue",
    "ValidationResult",
    "format_validation_errors",
    "validate_against_schema",
]
