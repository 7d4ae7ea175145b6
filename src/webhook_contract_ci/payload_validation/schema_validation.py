"""Schema validation boundary backed by jsonschema."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping, Sequence
from typing import Any

from jsonschema import Draft202012Validator
from jsonschema.exceptions import ValidationError
from jsonschema.validators import validator_for

from webhook_contract_ci.schema_indexing import ROOT_ADDRESS, escape_address_segment

from .validation_outcomes import ValidationIssue, ValidationResult

_LOGGER = logging.getLogger(__name__)

SchemaValidator = Callable[[Any, Any], ValidationResult]


def validate_against_schema(schema: Mapping[str, Any] | bool, payload: Any) -> ValidationResult:
    """Validate *payload* against *schema*, collecting every error.

    Unknown keywords are ignored. A structurally invalid schema raises
    :class:`jsonschema.exceptions.SchemaError`.
    """
    validator_cls = validator_for(schema, default=Draft202012Validator)
    validator_cls.check_schema(schema)
    validator = validator_cls(schema)
    issues = tuple(_to_issue(error) for error in validator.iter_errors(payload))
    _LOGGER.debug("Validation finished with %d error(s)", len(issues))
    if not issues:
        return ValidationResult(ok=True, errors=None)
    return ValidationResult(ok=False, errors=issues)


def format_validation_errors(errors: Sequence[ValidationIssue] | None) -> str:
    """Render one ``- <location> <message>`` line per error."""
    if not errors:
        return ""
    return "\n".join(
        f"- {error.instance_location or ROOT_ADDRESS} {error.message or 'invalid'}"
        for error in errors
    )


def _to_issue(error: ValidationError) -> ValidationIssue:
    location = "".join(f"/{escape_address_segment(str(part))}" for part in error.absolute_path)
    return ValidationIssue(instance_location=location, message=error.message)
