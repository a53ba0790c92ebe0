"""Excel template generation service."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from pathlib import Path

from openpyxl import Workbook
from openpyxl.styles import Font, PatternFill
from openpyxl.utils import get_column_letter
from openpyxl.worksheet.datavalidation import DataValidation
from openpyxl.worksheet.worksheet import Worksheet

from .constants import (
    CATEGORY_COLUMNS,
    CATEGORY_SHEET_NAME,
    DATA_TYPE_OPTIONS,
    FOCUS_GROUP_OPTIONS,
    HEADER_FILL_COLOR,
    TABLE_METADATA_COLUMNS,
    TABLE_METADATA_SHEET_NAME,
    VAR_CATEGORY_OPTIONS,
    VAR_TYPE_OPTIONS,
    VARIABLE_METADATA_COLUMNS,
    VARIABLE_METADATA_SHEET_NAME,
)
from .metadata_records import (
    TableMetadataRecord,
    VariableMetadataRecord,
    build_category_reference_rows,
)

HEADER_FONT = Font(bold=True)
HEADER_FILL = PatternFill(
    fill_type="solid", start_color=HEADER_FILL_COLOR, end_color=HEADER_FILL_COLOR
)

_MIN_COLUMN_WIDTH = 10
_MAX_COLUMN_WIDTH = 80


class FileWriteError(OSError):
    """Raised when a template workbook cannot be written."""


def build_table_metadata_workbook(
    record: TableMetadataRecord, column_names: Sequence[str]
) -> Workbook:
    """Create the single-sheet table metadata template.

    `species_var` and `population_var` share one dropdown source built from
    `column_names`; no dropdown is attached to them when there are no columns.
    """
    workbook = Workbook()
    sheet = _activate_first_sheet(workbook, TABLE_METADATA_SHEET_NAME)

    _write_header(sheet, TABLE_METADATA_COLUMNS)
    sheet.append(list(record.as_row()))

    column_options = tuple(column_names)
    validations = {
        "focus_group": FOCUS_GROUP_OPTIONS,
        "data_type": DATA_TYPE_OPTIONS,
        "species_var": column_options,
        "population_var": column_options,
    }
    for column_name, options in validations.items():
        if not options:
            continue
        letter = _column_letter(TABLE_METADATA_COLUMNS, column_name)
        _add_list_validation(sheet, options, f"{letter}2")

    _autosize_columns(sheet)
    return workbook


def build_variable_metadata_workbook(records: Sequence[VariableMetadataRecord]) -> Workbook:
    """Create the variable metadata template plus the category reference sheet."""
    workbook = Workbook()
    sheet = _activate_first_sheet(workbook, VARIABLE_METADATA_SHEET_NAME)

    _write_header(sheet, VARIABLE_METADATA_COLUMNS)
    for record in records:
        sheet.append(list(record.as_row()))

    if records:
        last_row = len(records) + 1
        for column_name, options in (
            ("var_category", VAR_CATEGORY_OPTIONS),
            ("var_type", VAR_TYPE_OPTIONS),
        ):
            letter = _column_letter(VARIABLE_METADATA_COLUMNS, column_name)
            _add_list_validation(sheet, options, f"{letter}2:{letter}{last_row}")

    _autosize_columns(sheet)
    _write_category_sheet(workbook)
    return workbook


def save_workbook(workbook: Workbook, output_path: Path | str) -> Path:
    """Write the workbook, replacing any existing file."""
    output = Path(output_path)
    try:
        output.parent.mkdir(parents=True, exist_ok=True)
        workbook.save(output)
    except OSError as exc:
        raise FileWriteError(f"Failed to write {output}: {exc}") from exc
    return output


def list_validation_formula(options: Iterable[str]) -> str:
    """Inline list source as Excel expects it: one quoted, comma-joined string."""
    joined = ",".join(options)
    return '"' + joined.replace('"', '""') + '"'


def _write_category_sheet(workbook: Workbook) -> None:
    sheet = workbook.create_sheet(CATEGORY_SHEET_NAME)
    _write_header(sheet, CATEGORY_COLUMNS)
    for row in build_category_reference_rows():
        sheet.append(list(row.as_row()))
    _autosize_columns(sheet)


def _activate_first_sheet(workbook: Workbook, title: str) -> Worksheet:
    sheet = workbook.active
    if sheet is None:
        raise RuntimeError("Workbook active sheet is not available.")
    assert isinstance(sheet, Worksheet)
    sheet.title = title
    return sheet


def _write_header(sheet: Worksheet, columns: Sequence[str]) -> None:
    for column_index, name in enumerate(columns, start=1):
        cell = sheet.cell(row=1, column=column_index, value=name)
        cell.font = HEADER_FONT
        cell.fill = HEADER_FILL


def _add_list_validation(sheet: Worksheet, options: Sequence[str], cell_range: str) -> None:
    validation = DataValidation(
        type="list",
        formula1=list_validation_formula(options),
        allow_blank=True,
    )
    sheet.add_data_validation(validation)
    validation.add(cell_range)


def _column_letter(columns: Sequence[str], name: str) -> str:
    return get_column_letter(columns.index(name) + 1)


def _autosize_columns(sheet: Worksheet) -> None:
    for column_cells in sheet.iter_cols(min_row=1, max_row=sheet.max_row):
        longest = max(
            (len(str(cell.value)) for cell in column_cells if cell.value is not None),
            default=0,
        )
        letter = get_column_letter(column_cells[0].column)
        sheet.column_dimensions[letter].width = max(
            _MIN_COLUMN_WIDTH, min(longest + 2, _MAX_COLUMN_WIDTH)
        )
