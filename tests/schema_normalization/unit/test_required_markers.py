"""Required-marker normalization tests."""

from __future__ import annotations

import copy

from webhook_contract_ci.schema_normalization import normalize_schema


def test_property_hints_fold_into_parent_required_list() -> None:
    raw = {
        "type": "object",
        "properties": {
            "name": {"type": "string", "required": True},
            "age": {"type": "integer", "required": True},
        },
    }

    normalized = normalize_schema(raw)

    assert normalized["required"] == ["age", "name"]
    assert "required" not in normalized["properties"]["name"]
    assert "required" not in normalized["properties"]["age"]


def test_hints_merge_with_existing_required_list_as_union() -> None:
    raw = {
        "type": "object",
        "properties": {
            "a": {"type": "string"},
            "b": {"type": "string", "required": True},
        },
        "required": ["a"],
    }

    normalized = normalize_schema(raw)

    assert sorted(normalized["required"]) == ["a", "b"]


def test_union_has_no_duplicates_when_hint_and_list_overlap() -> None:
    raw = {
        "type": "object",
        "properties": {
            "a": {"type": "string", "required": True},
            "b": {"type": "string", "required": True},
        },
        "required": ["b", "a"],
    }

    assert normalize_schema(raw)["required"] == ["a", "b"]


def test_explicit_required_list_is_kept_without_hints() -> None:
    raw = {
        "type": "object",
        "properties": {"zzz": {"type": "string"}, "aaa": {"type": "string"}},
        "required": ["zzz", "aaa"],
    }

    normalized = normalize_schema(raw)

    assert normalized["required"] == ["zzz", "aaa"]
    assert list(normalized["properties"]) == ["aaa", "zzz"]


def test_required_names_without_matching_property_are_dropped() -> None:
    raw = {
        "type": "object",
        "properties": {"a": {"type": "string"}},
        "required": ["a", "ghost"],
    }

    assert normalize_schema(raw)["required"] == ["a"]


def test_boolean_required_on_object_means_every_property_is_required() -> None:
    raw = {
        "type": "object",
        "required": True,
        "properties": {"b": {"type": "string"}, "a": {"type": "number"}},
    }

    assert normalize_schema(raw)["required"] == ["a", "b"]


def test_boolean_required_without_properties_is_dropped() -> None:
    assert normalize_schema({"type": "string", "required": True}) == {"type": "string"}
    assert normalize_schema({"type": "object", "required": True}) == {"type": "object"}


def test_object_without_any_required_marker_has_no_required_key() -> None:
    normalized = normalize_schema({"type": "object", "properties": {"a": {"type": "string"}}})

    assert "required" not in normalized


def test_nested_objects_and_array_items_are_normalized() -> None:
    raw = {
        "type": "object",
        "required": True,
        "properties": {
            "orders": {
                "type": "array",
                "required": True,
                "items": {
                    "type": "object",
                    "properties": {
                        "sku": {"type": "string", "required": True},
                        "qty": {"type": "integer"},
                    },
                },
            },
        },
    }

    normalized = normalize_schema(raw)

    assert normalized["required"] == ["orders"]
    orders = normalized["properties"]["orders"]
    assert "required" not in orders
    assert orders["items"]["required"] == ["sku"]
    assert "required" not in orders["items"]["properties"]["sku"]


def test_union_typed_object_is_normalized() -> None:
    raw = {
        "type": ["object", "null"],
        "properties": {"a": {"type": "string", "required": True}},
    }

    assert normalize_schema(raw)["required"] == ["a"]


def test_scalars_and_lists_pass_through() -> None:
    assert normalize_schema(3) == 3
    assert normalize_schema("string") == "string"
    assert normalize_schema(None) is None
    assert normalize_schema(True) is True
    assert normalize_schema([{"type": "string", "required": True}, 1]) == [{"type": "string"}, 1]


def test_normalization_does_not_mutate_input() -> None:
    raw = {
        "type": "object",
        "properties": {"a": {"type": "string", "required": True}},
        "required": ["a"],
    }
    snapshot = copy.deepcopy(raw)

    normalize_schema(raw)

    assert raw == snapshot


def test_normalization_is_idempotent() -> None:
    raw = {
        "type": "object",
        "required": True,
        "properties": {
            "z": {"type": "string", "required": True},
            "a": {
                "type": "object",
                "properties": {"x": {"type": "number"}, "y": {"type": "number"}},
                "required": ["y"],
            },
            "list": {
                "type": "array",
                "items": {
                    "type": "object",
                    "required": True,
                    "properties": {"k": {"type": "string"}},
                },
            },
        },
    }

    once = normalize_schema(raw)

    assert normalize_schema(once) == once


def test_root_boolean_required_never_survives() -> None:
    for raw in (
        {"required": True},
        {"type": "array", "required": True, "items": {"type": "string"}},
        {"type": "object", "required": True, "properties": {}},
    ):
        assert normalize_schema(raw).get("required") is not True
