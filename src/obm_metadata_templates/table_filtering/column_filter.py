"""Removal of OBM bookkeeping columns."""

from __future__ import annotations

from .table_models import RemoteTable

EXCLUDED_FIELDS: frozenset[str] = frozenset(
    {
        "obm_id",
        "obm_uploading_id",
        "obm_modifier_id",
        "obm_validation",
        "obm_comments",
        "obm_geometry",
    }
)


def filter_excluded_columns(table: RemoteTable) -> RemoteTable:
    """Drop every column named in `EXCLUDED_FIELDS`, keeping the remaining order."""
    kept_columns = tuple(column for column in table.columns if column not in EXCLUDED_FIELDS)
    kept_rows = tuple(
        {key: value for key, value in row.items() if key not in EXCLUDED_FIELDS}
        for row in table.rows
    )
    return RemoteTable(columns=kept_columns, rows=kept_rows)
