"""Schema indexing exports."""

from .schema_index import escape_address_segment, index_schema, join_address
from .schema_models import ELEMENT_SEGMENT, ROOT_ADDRESS, FieldDescriptor, SchemaIndex

__all__ = [
    "ELEMENT_SEGMENT",
    "ROOT_ADDRESS",
    "FieldDescriptor",
    "SchemaIndex",
    "escape_address_segment",
    "index_schema",
    "join_address",
]
