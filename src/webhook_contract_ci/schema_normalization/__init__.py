"""Schema normalization exports."""

from .required_markers import normalize_schema
from .schema_nodes import as_type_names, declared_type_names, declares_type

__all__ = [
    "as_type_names",
    "declared_type_names",
    "declares_type",
    "normalize_schema",
]
