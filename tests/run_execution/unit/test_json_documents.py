"""JSON document helper tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from webhook_contract_ci.run_execution.json_documents import (
    DocumentError,
    read_json_document,
    write_json_document,
)


def test_write_then_read_document(tmp_path: Path) -> None:
    target = tmp_path / "nested" / "schema.json"

    written = write_json_document(target, {"type": "object", "title": "Zahlung €"})

    assert written == target.resolve()
    text = target.read_text(encoding="utf-8")
    assert text.endswith("\n")
    assert "€" in text
    assert read_json_document(target) == {"type": "object", "title": "Zahlung €"}


def test_missing_document_raises(tmp_path: Path) -> None:
    with pytest.raises(DocumentError, match="Document not found"):
        read_json_document(tmp_path / "absent.json")


def test_invalid_json_raises(tmp_path: Path) -> None:
    path = tmp_path / "broken.json"
    path.write_text("{not-json}", encoding="utf-8")

    with pytest.raises(DocumentError, match="Invalid JSON"):
        read_json_document(path)


def test_scalar_documents_are_allowed(tmp_path: Path) -> None:
    path = tmp_path / "value.json"
    path.write_text(json.dumps([1, 2]), encoding="utf-8")

    assert read_json_document(path) == [1, 2]
