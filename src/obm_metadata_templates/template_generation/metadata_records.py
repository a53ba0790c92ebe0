"""Metadata record entities written into the templates."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import astuple, dataclass

from .constants import (
    VAR_CATEGORY_DESCRIPTIONS,
    VAR_CATEGORY_OPTIONS,
    VAR_TYPE_OPTIONS,
)


@dataclass(frozen=True)
class TableMetadataRecord:  # pylint: disable=too-many-instance-attributes
    """One table-level metadata row; fields follow `TABLE_METADATA_COLUMNS`."""

    table_owner: str | None = None
    date_uploading: str | None = None
    table_name: str | None = None
    focus_group: str | None = None
    data_type: str | None = None
    data_type_var: str | None = None
    species_var: str | None = None
    population_var: str | None = None
    date_end_datacollection: str | None = None
    comment: str | None = None

    def as_row(self) -> tuple[str | None, ...]:
        return astuple(self)


@dataclass(frozen=True)
class VariableMetadataRecord:
    """One variable-level metadata row; fields follow `VARIABLE_METADATA_COLUMNS`."""

    variable_name: str
    var_category: str | None = None
    var_unit: str | None = None
    var_type: str | None = None
    var_description: str | None = None

    def as_row(self) -> tuple[str | None, ...]:
        return astuple(self)


@dataclass(frozen=True)
class CategoryReferenceRow:
    """One documentary row of the category sheet."""

    header: str
    categories: str
    description: str

    def as_row(self) -> tuple[str, ...]:
        return astuple(self)


def build_table_metadata_record(table_name: str) -> TableMetadataRecord:
    """Blank table metadata with only the table name filled in."""
    return TableMetadataRecord(table_name=table_name)


def build_variable_metadata_records(
    column_names: Sequence[str],
) -> tuple[VariableMetadataRecord, ...]:
    """One blank variable record per column, in column order."""
    return tuple(VariableMetadataRecord(variable_name=name) for name in column_names)


def build_category_reference_rows() -> tuple[CategoryReferenceRow, ...]:
    """All allowed var_category values followed by all var_type values."""
    category_rows = [
        CategoryReferenceRow(
            header="var_category",
            categories=option,
            description=VAR_CATEGORY_DESCRIPTIONS.get(option, ""),
        )
        for option in VAR_CATEGORY_OPTIONS
    ]
    type_rows = [
        CategoryReferenceRow(header="var_type", categories=option, description="")
        for option in VAR_TYPE_OPTIONS
    ]
    return tuple(category_rows + type_rows)
