"""Normalize-index-summarize flow tests over raw schemas."""

from __future__ import annotations

from webhook_contract_ci.change_detection import diff_schemas, summarize_diff
from webhook_contract_ci.schema_indexing import index_schema
from webhook_contract_ci.schema_normalization import normalize_schema


def _raw_schema(**properties) -> dict:
    return {"type": "object", "properties": properties}


def test_raw_hints_and_standard_lists_compare_equal() -> None:
    hinted = _raw_schema(
        id={"type": "string", "required": True},
        nested={
            "type": "object",
            "required": True,
            "properties": {"value": {"type": "number", "required": True}},
        },
    )
    standard = {
        "type": "object",
        "properties": {
            "id": {"type": "string"},
            "nested": {
                "type": "object",
                "properties": {"value": {"type": "number"}},
                "required": ["value"],
            },
        },
        "required": ["id", "nested"],
    }

    assert diff_schemas(hinted, standard).breaking_count == 0
    assert diff_schemas(standard, hinted).breaking_count == 0


def test_nested_changes_are_classified_together() -> None:
    base = _raw_schema(
        id={"type": "string", "required": True},
        opt={"type": "string"},
        nested={
            "type": "object",
            "required": True,
            "properties": {"value": {"type": "number", "required": True}},
        },
    )
    next_schema = _raw_schema(
        nested={
            "type": "object",
            "properties": {
                "value": {"type": ["number", "null"]},
                "newField": {"type": "boolean"},
            },
        },
        addedTop={"type": "string"},
    )
    next_schema["required"] = ["nested"]

    report = diff_schemas(base, next_schema)

    assert report.breaking.removed_required == ("/id",)
    assert report.breaking.required_became_optional == ("/nested/value",)
    assert report.breaking.type_changed == ()
    assert report.non_breaking.added == ("/addedTop", "/nested/newField")
    assert report.non_breaking.removed_optional == ("/opt",)
    assert report.breaking_count == 2


def test_object_replaced_by_scalar_reports_container_type_change() -> None:
    base = _raw_schema(
        customer={"type": "object", "properties": {"name": {"type": "string"}}, "required": True},
    )
    next_schema = _raw_schema(customer={"type": "string", "required": True})

    report = diff_schemas(base, next_schema)

    assert [change.address for change in report.breaking.type_changed] == ["/customer"]
    assert report.breaking.removed_required == ("/customer/name",)


def test_summary_is_independent_of_property_order() -> None:
    first = normalize_schema(_raw_schema(a={"type": "string"}, b={"type": "integer"}))
    second = normalize_schema(_raw_schema(b={"type": "string"}, a={"type": "string"}))
    reversed_first = dict(first, properties=dict(reversed(list(first["properties"].items()))))

    assert summarize_diff(index_schema(first), index_schema(second)) == summarize_diff(
        index_schema(reversed_first), index_schema(second)
    )
