"""JSON document reading and writing helpers."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any


class DocumentError(Exception):
    """Raised when a JSON document cannot be read."""


def read_json_document(path: Path | str) -> Any:
    """Read and parse a JSON document, raising crisp errors on failure."""
    document_path = Path(path)
    try:
        text = document_path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise DocumentError(f"Document not found: {document_path}") from exc
    except OSError as exc:
        raise DocumentError(f"Failed to read {document_path}: {exc}") from exc
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise DocumentError(f"Invalid JSON in {document_path}: {exc}") from exc


def write_json_document(path: Path | str, value: Any) -> Path:
    """Write *value* as indented JSON with a trailing newline; return the resolved path."""
    document_path = Path(path)
    document_path.parent.mkdir(parents=True, exist_ok=True)
    document_path.write_text(
        json.dumps(value, indent=2, ensure_ascii=False) + "\n",
        encoding="utf-8",
    )
    return document_path.resolve()
