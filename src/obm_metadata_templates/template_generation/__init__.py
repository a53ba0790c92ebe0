"""Template generation exports."""

from .constants import (
    CATEGORY_COLUMNS,
    CATEGORY_SHEET_NAME,
    DATA_TYPE_OPTIONS,
    FOCUS_GROUP_OPTIONS,
    TABLE_METADATA_COLUMNS,
    TABLE_METADATA_FILENAME,
    TABLE_METADATA_SHEET_NAME,
    VAR_CATEGORY_DESCRIPTIONS,
    VAR_CATEGORY_OPTIONS,
    VAR_TYPE_OPTIONS,
    VARIABLE_METADATA_COLUMNS,
    VARIABLE_METADATA_FILENAME,
    VARIABLE_METADATA_SHEET_NAME,
)
from .metadata_records import (
    CategoryReferenceRow,
    TableMetadataRecord,
    VariableMetadataRecord,
    build_category_reference_rows,
    build_table_metadata_record,
    build_variable_metadata_records,
)
from .template_workbook_builder import (
    FileWriteError,
    build_table_metadata_workbook,
    build_variable_metadata_workbook,
    list_validation_formula,
    save_workbook,
)

__all__ = [
    "CATEGORY_COLUMNS",
    "CATEGORY_SHEET_NAME",
    "DATA_TYPE_OPTIONS",
    "FOCUS_GROUP_OPTIONS",
    "TABLE_METADATA_COLUMNS",
    "TABLE_METADATA_FILENAME",
    "TABLE_METADATA_SHEET_NAME",
    "VAR_CATEGORY_DESCRIPTIONS",
    "VAR_CATEGORY_OPTIONS",
    "VAR_TYPE_OPTIONS",
    "VARIABLE_METADATA_COLUMNS",
    "VARIABLE_METADATA_FILENAME",
    "VARIABLE_METADATA_SHEET_NAME",
    "CategoryReferenceRow",
    "TableMetadataRecord",
    "VariableMetadataRecord",
    "build_category_reference_rows",
    "build_table_metadata_record",
    "build_variable_metadata_records",
    "FileWriteError",
    "build_table_metadata_workbook",
    "build_variable_metadata_workbook",
    "list_validation_formula",
    "save_workbook",
]
