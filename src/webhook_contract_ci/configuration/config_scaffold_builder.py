"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "wcci.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Configuration template for webhook-contract-ci (wcci).
# Every setting is optional; command line flags override the values below.

diff:
  # List added paths and removed optional paths next to the breaking changes.
  show_nonbreaking: false
  # How --next is read: payload (infer a schema from a sample) or schema.
  next_kind: payload

output:
  # Choose text or json for check and diff results.
  format: text
  # Optional spreadsheet report, resolved relative to this file.
  # report_path: "reports/diff.xlsx"
"""


def build_placeholder_configuration() -> str:
    """Build a YAML configuration template with defaults and inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the configuration template to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Configuration file already exists: {destination.resolve()}")
    destination.parent.mkdir(parents=True, exist_ok=True)
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
