"""Remote table domain entities."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class RemoteTable:
    """Rectangular result of one `get_data` query.

    `columns` keeps the order in which the server reported the fields.
    Each row maps column names to values; absent keys read as missing values.
    """

    columns: tuple[str, ...]
    rows: tuple[Mapping[str, Any], ...]

    @property
    def row_count(self) -> int:
        return len(self.rows)


def remote_table_from_records(records: Iterable[Mapping[str, Any]]) -> RemoteTable:
    """Build a table from JSON records, collecting columns in first-seen order."""
    columns: dict[str, None] = {}
    rows: list[Mapping[str, Any]] = []
    for record in records:
        if not isinstance(record, Mapping):
            raise TypeError(f"Table records must be mappings, got {type(record).__name__}.")
        for key in record:
            columns.setdefault(str(key), None)
        rows.append({str(key): value for key, value in record.items()})
    return RemoteTable(columns=tuple(columns), rows=tuple(rows))
