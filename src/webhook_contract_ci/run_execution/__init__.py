"""Run execution domain exports."""

from .contract_run_use_cases import (
    RunExecutionError,
    execute_check_run,
    execute_diff_run,
    execute_infer_run,
)
from .json_documents import DocumentError, read_json_document, write_json_document
from .run_contracts import (
    CheckOutcome,
    CheckRequest,
    DiffOutcome,
    DiffRequest,
    InferOutcome,
    InferRequest,
)

__all__ = [
    "CheckOutcome",
    "CheckRequest",
    "DiffOutcome",
    "DiffRequest",
    "DocumentError",
    "InferOutcome",
    "InferRequest",
    "RunExecutionError",
    "execute_check_run",
    "execute_diff_run",
    "execute_infer_run",
    "read_json_document",
    "write_json_document",
]
