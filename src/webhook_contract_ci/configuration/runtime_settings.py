"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

NEXT_KINDS: tuple[str, ...] = ("payload", "schema")
OUTPUT_FORMATS: tuple[str, ...] = ("text", "json")


@dataclass(frozen=True)
class DiffSettings:
    """How the next document is read and which changes are listed."""

    show_nonbreaking: bool = False
    next_kind: str = "payload"


@dataclass(frozen=True)
class OutputSettings:
    """Rendering of check and diff results."""

    format: str = "text"
    report_path: Path | None = None


@dataclass(frozen=True)
class Configuration:
    """Top-level configuration aggregate."""

    path: Path | None
    diff: DiffSettings
    output: OutputSettings
