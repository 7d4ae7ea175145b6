"""Configuration loader service."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from .runtime_settings import (
    NEXT_KINDS,
    OUTPUT_FORMATS,
    Configuration,
    DiffSettings,
    OutputSettings,
)


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def default_configuration() -> Configuration:
    """Return the settings used when no configuration file is given."""
    return Configuration(path=None, diff=DiffSettings(), output=OutputSettings())


def load_configuration(config_path: Path | str) -> Configuration:
    """Load and validate the configuration file."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    diff = _parse_diff_section(parsed.get("diff"))
    output = _parse_output_section(parsed.get("output"), path.parent)
    return Configuration(path=path, diff=diff, output=output)


def _parse_diff_section(value: Any) -> DiffSettings:
    section = _optional_mapping(value, "diff")
    show_nonbreaking = _optional_bool(
        section.get("show_nonbreaking", False), "diff.show_nonbreaking"
    )
    next_kind = _require_choice(section.get("next_kind", "payload"), "diff.next_kind", NEXT_KINDS)
    return DiffSettings(show_nonbreaking=show_nonbreaking, next_kind=next_kind)


def _parse_output_section(value: Any, base_path: Path) -> OutputSettings:
    section = _optional_mapping(value, "output")
    output_format = _require_choice(section.get("format", "text"), "output.format", OUTPUT_FORMATS)
    report_value = section.get("report_path")
    report_path = None
    if report_value is not None:
        if not isinstance(report_value, str) or not report_value.strip():
            raise ConfigurationError("output.report_path must be a non-empty string.")
        report_path = _resolve_path(base_path, report_value.strip())
    return OutputSettings(format=output_format, report_path=report_path)


def _resolve_path(base_path: Path, raw_path: str) -> Path:
    candidate = Path(raw_path)
    if not candidate.is_absolute():
        return (base_path / candidate).resolve()
    return candidate


def _optional_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' must be a mapping.")
    return value


def _optional_bool(value: Any, field_name: str) -> bool:
    if not isinstance(value, bool):
        raise ConfigurationError(f"{field_name} must be a boolean.")
    return value


def _require_choice(value: Any, field_name: str, choices: tuple[str, ...]) -> str:
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    normalized = value.strip().lower()
    if normalized not in choices:
        raise ConfigurationError(f"{field_name} must be one of: {', '.join(choices)}.")
    return normalized
