"""Payload validation boundary tests."""

from __future__ import annotations

import pytest
from jsonschema.exceptions import SchemaError
from webhook_contract_ci.payload_validation import (
    ValidationIssue,
    ValidationResult,
    format_validation_errors,
    validate_against_schema,
)

_SCHEMA = {
    "type": "object",
    "properties": {
        "id": {"type": "string"},
        "lines": {"type": "array", "items": {"type": "object", "required": ["sku"]}},
    },
    "required": ["id"],
}


def test_valid_payload_passes_without_errors() -> None:
    result = validate_against_schema(_SCHEMA, {"id": "a", "lines": [{"sku": "x"}]})

    assert result == ValidationResult(ok=True, errors=None)


def test_all_errors_are_collected_with_pointer_locations() -> None:
    result = validate_against_schema(_SCHEMA, {"lines": [{"sku": "x"}, {}]})

    assert result.ok is False
    assert result.errors is not None
    locations = sorted(error.instance_location for error in result.errors)
    assert locations == ["", "/lines/1"]
    assert all(error.message for error in result.errors)


def test_unknown_keywords_are_ignored() -> None:
    schema = {"type": "string", "x-owner": "payments", "required": ["unused"]}

    assert validate_against_schema(schema, "hello").ok is True


def test_structurally_invalid_schema_propagates_schema_error() -> None:
    with pytest.raises(SchemaError):
        validate_against_schema({"type": 12}, {})


def test_format_renders_one_line_per_error() -> None:
    errors = (
        ValidationIssue(instance_location="", message="'id' is a required property"),
        ValidationIssue(instance_location="/lines/0", message=None),
    )

    assert format_validation_errors(errors) == (
        "- / 'id' is a required property\n- /lines/0 invalid"
    )


def test_format_returns_empty_string_without_errors() -> None:
    assert format_validation_errors(None) == ""
    assert format_validation_errors(()) == ""


def test_location_segments_are_escaped() -> None:
    schema = {"type": "object", "properties": {"a/b": {"type": "string"}}}

    result = validate_against_schema(schema, {"a/b": 1})

    assert result.errors is not None
    assert result.errors[0].instance_location == "/a~1b"
