"""Template generation service tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from openpyxl import Workbook, load_workbook
from obm_metadata_templates.template_generation import (
    CATEGORY_SHEET_NAME,
    TABLE_METADATA_COLUMNS,
    TABLE_METADATA_SHEET_NAME,
    VARIABLE_METADATA_COLUMNS,
    VARIABLE_METADATA_SHEET_NAME,
    FileWriteError,
    build_table_metadata_record,
    build_table_metadata_workbook,
    build_variable_metadata_records,
    build_variable_metadata_workbook,
    list_validation_formula,
    save_workbook,
)

COLUMNS = ("species", "year", "habitat")


def _validations_by_range(sheet) -> dict[str, str]:
    return {str(dv.sqref): dv.formula1 for dv in sheet.data_validations.dataValidation}


def _roundtrip(workbook: Workbook, tmp_path: Path, name: str) -> Workbook:
    path = save_workbook(workbook, tmp_path / name)
    return load_workbook(path)


def test_table_metadata_sheet_has_fixed_headers_and_one_row(tmp_path: Path) -> None:
    record = build_table_metadata_record("Behaviour")
    workbook = _roundtrip(build_table_metadata_workbook(record, COLUMNS), tmp_path, "t.xlsx")

    assert workbook.sheetnames == [TABLE_METADATA_SHEET_NAME]
    sheet = workbook[TABLE_METADATA_SHEET_NAME]
    assert [cell.value for cell in sheet[1]] == list(TABLE_METADATA_COLUMNS)
    assert sheet.max_row == 2
    row = {
        name: sheet.cell(row=2, column=idx).value
        for idx, name in enumerate(TABLE_METADATA_COLUMNS, start=1)
    }
    assert row.pop("table_name") == "Behaviour"
    assert set(row.values()) == {None}


def test_table_metadata_dropdowns(tmp_path: Path) -> None:
    record = build_table_metadata_record("Behaviour")
    workbook = _roundtrip(build_table_metadata_workbook(record, COLUMNS), tmp_path, "t.xlsx")

    validations = _validations_by_range(workbook[TABLE_METADATA_SHEET_NAME])

    assert validations == {
        "D2": (
            '"mammals,birds,reptiles,amphibians,fish,mixed_tetrapoda,mixed_amniote,'
            'mixed_vertebrate,mixed_other,mixed_animals"'
        ),
        "E2": '"species,population,mixed"',
        "G2": '"species,year,habitat"',
        "H2": '"species,year,habitat"',
    }
    for validation in workbook[TABLE_METADATA_SHEET_NAME].data_validations.dataValidation:
        assert validation.type == "list"


def test_table_metadata_without_columns_skips_column_dropdowns() -> None:
    workbook = build_table_metadata_workbook(build_table_metadata_record("Empty"), ())

    validations = _validations_by_range(workbook[TABLE_METADATA_SHEET_NAME])

    assert set(validations) == {"D2", "E2"}


def test_header_cells_are_bold_with_light_blue_fill() -> None:
    workbook = build_variable_metadata_workbook(build_variable_metadata_records(COLUMNS))

    for sheet_name in (VARIABLE_METADATA_SHEET_NAME, CATEGORY_SHEET_NAME):
        for cell in workbook[sheet_name][1]:
            assert cell.font.bold is True
            assert cell.fill.fill_type == "solid"
            assert cell.fill.fgColor.rgb.endswith("DCE6F1")


def test_variable_metadata_sheet_has_one_row_per_column(tmp_path: Path) -> None:
    records = build_variable_metadata_records(COLUMNS)
    workbook = _roundtrip(build_variable_metadata_workbook(records), tmp_path, "v.xlsx")

    assert workbook.sheetnames == [VARIABLE_METADATA_SHEET_NAME, CATEGORY_SHEET_NAME]
    sheet = workbook[VARIABLE_METADATA_SHEET_NAME]
    assert [cell.value for cell in sheet[1]] == list(VARIABLE_METADATA_COLUMNS)
    assert sheet.max_row == len(COLUMNS) + 1
    assert [sheet.cell(row=row, column=1).value for row in range(2, 5)] == list(COLUMNS)
    assert _validations_by_range(sheet) == {
        "B2:B4": (
            '"Behaviour,Climate,Geography,Demography,Ecology,LifeHistory,Morphology,'
            'Taxonomy,Metadata,Method"'
        ),
        "D2:D4": '"character,numeric,factor,date,logical"',
    }


def test_variable_metadata_without_columns_has_no_dropdowns() -> None:
    workbook = build_variable_metadata_workbook(())

    sheet = workbook[VARIABLE_METADATA_SHEET_NAME]
    assert sheet.max_row == 1
    assert _validations_by_range(sheet) == {}


def test_category_sheet_lists_all_options_with_descriptions(tmp_path: Path) -> None:
    workbook = _roundtrip(build_variable_metadata_workbook(()), tmp_path, "v.xlsx")

    sheet = workbook[CATEGORY_SHEET_NAME]
    rows = [tuple(cell.value for cell in row) for row in sheet.iter_rows(min_row=1)]
    assert rows[0] == ("header", "categories", "description")
    assert len(rows) == 16
    assert [row[0] for row in rows[1:]] == ["var_category"] * 10 + ["var_type"] * 5
    described = {row[1] for row in rows[1:] if row[2]}
    assert described == {"Taxonomy", "Metadata", "Method"}
    assert rows[8][2].startswith("Any variable that contains information on taxonomy")


def test_column_widths_fit_contents() -> None:
    workbook = build_variable_metadata_workbook(build_variable_metadata_records(COLUMNS))

    category = workbook[CATEGORY_SHEET_NAME]
    assert category.column_dimensions["A"].width == len("var_category") + 2
    assert category.column_dimensions["C"].width == 80
    table = build_table_metadata_workbook(build_table_metadata_record("t"), COLUMNS)
    assert table[TABLE_METADATA_SHEET_NAME].column_dimensions["I"].width == len(
        "date_end_datacollection"
    ) + 2


def test_save_workbook_overwrites_existing_file(tmp_path: Path) -> None:
    target = tmp_path / "nested" / "table_metadata.xlsx"
    save_workbook(
        build_table_metadata_workbook(build_table_metadata_record("first"), COLUMNS), target
    )
    save_workbook(
        build_table_metadata_workbook(build_table_metadata_record("second"), COLUMNS), target
    )

    sheet = load_workbook(target)[TABLE_METADATA_SHEET_NAME]
    assert sheet["C2"].value == "second"


def test_save_workbook_wraps_os_errors(tmp_path: Path) -> None:
    blocker = tmp_path / "not-a-directory"
    blocker.write_text("", encoding="utf-8")

    with pytest.raises(FileWriteError) as exc_info:
        save_workbook(Workbook(), blocker / "table_metadata.xlsx")

    assert isinstance(exc_info.value, OSError)


def test_list_validation_formula_quotes_options() -> None:
    assert list_validation_formula(["a", "b"]) == '"a,b"'
    assert list_validation_formula(['say "hi"']) == '"say ""hi"""'
