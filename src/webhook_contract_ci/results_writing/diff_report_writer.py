"""Diff report workbook writer service."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

from openpyxl import Workbook
from openpyxl.utils import get_column_letter
from openpyxl.worksheet.worksheet import Worksheet

from webhook_contract_ci.change_detection import DiffReport

from .report_models import ChangeClassification, DiffMetadata

CHANGES_SHEET_NAME = "Changes"
RUN_INFO_SHEET_NAME = "RunInfo"

_CHANGE_COLUMNS: tuple[str, ...] = ("Classification", "Category", "Address", "Detail")
_COLUMN_WIDTHS: tuple[int, ...] = (16, 26, 40, 50)


def write_diff_workbook(
    report: DiffReport,
    output_path: Path | str,
    metadata: DiffMetadata,
) -> Path:
    """Write one row per classified change plus a RunInfo sheet; return the resolved path."""
    workbook = Workbook()
    sheet = workbook.active
    if sheet is None:
        raise RuntimeError("Workbook active sheet is not available.")
    assert isinstance(sheet, Worksheet)
    sheet.title = CHANGES_SHEET_NAME

    for column_index, name in enumerate(_CHANGE_COLUMNS, start=1):
        sheet.cell(row=1, column=column_index, value=name)
        sheet.cell(row=1, column=column_index).style = "Headline 1"
        sheet.column_dimensions[get_column_letter(column_index)].width = _COLUMN_WIDTHS[
            column_index - 1
        ]

    for row_index, row in enumerate(_change_rows(report), start=2):
        for column_index, value in enumerate(row, start=1):
            sheet.cell(row=row_index, column=column_index, value=value)

    _write_run_info_sheet(workbook, report, metadata)

    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)
    workbook.save(output)
    return output.resolve()


def _change_rows(report: DiffReport) -> Iterator[tuple[str, str, str, str]]:
    breaking = ChangeClassification.BREAKING.value
    non_breaking = ChangeClassification.NON_BREAKING.value
    for address in report.breaking.removed_required:
        yield breaking, "removed required", address, ""
    for address in report.breaking.required_became_optional:
        yield breaking, "required became optional", address, ""
    for change in report.breaking.type_changed:
        yield breaking, "type changed", change.address, change.render()
    for address in report.non_breaking.added:
        yield non_breaking, "added", address, ""
    for address in report.non_breaking.removed_optional:
        yield non_breaking, "removed optional", address, ""


def _write_run_info_sheet(workbook: Workbook, report: DiffReport, metadata: DiffMetadata) -> None:
    sheet = workbook.create_sheet(RUN_INFO_SHEET_NAME)
    entries = (
        ("generated_at", metadata.generated_at.isoformat()),
        ("base_path", str(metadata.base_path)),
        ("next_path", str(metadata.next_path)),
        ("next_kind", metadata.next_kind),
        ("breaking_count", report.breaking_count),
        ("added", len(report.non_breaking.added)),
        ("removed_optional", len(report.non_breaking.removed_optional)),
    )
    for row, (key, value) in enumerate(entries, start=1):
        sheet.cell(row=row, column=1, value=key)
        sheet.cell(row=row, column=2, value=value)
