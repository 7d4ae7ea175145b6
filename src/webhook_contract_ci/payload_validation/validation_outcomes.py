"""Payload validation entities."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ValidationIssue:
    """One validation error reported for a payload location."""

    instance_location: str
    message: str | None


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating one payload against one schema."""

    ok: bool
    errors: tuple[ValidationIssue, ...] | None = None
