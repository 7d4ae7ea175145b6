"""Results writing domain exports."""

from .diff_report_writer import CHANGES_SHEET_NAME, RUN_INFO_SHEET_NAME, write_diff_workbook
from .report_models import ChangeClassification, DiffMetadata

__all__ = [
    "CHANGES_SHEET_NAME",
    "RUN_INFO_SHEET_NAME",
    "ChangeClassification",
    "DiffMetadata",
    "write_diff_workbook",
]
