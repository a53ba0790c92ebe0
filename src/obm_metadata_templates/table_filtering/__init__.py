"""Remote table model and column filtering exports."""

from .column_filter import EXCLUDED_FIELDS, filter_excluded_columns
from .table_models import RemoteTable, remote_table_from_records

__all__ = [
    "EXCLUDED_FIELDS",
    "RemoteTable",
    "filter_excluded_columns",
    "remote_table_from_records",
]
