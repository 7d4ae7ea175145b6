"""Results writing entities."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from pathlib import Path


class ChangeClassification(str, Enum):
    """Rendered classification in the report Changes sheet."""

    BREAKING = "BREAKING"
    NON_BREAKING = "NON_BREAKING"


@dataclass(frozen=True)
class DiffMetadata:
    """Metadata rendered into the RunInfo sheet."""

    generated_at: datetime
    base_path: Path
    next_path: Path
    next_kind: str
