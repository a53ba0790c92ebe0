"""Metadata generation entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from obm_metadata_templates.template_generation.metadata_records import (
    TableMetadataRecord,
    VariableMetadataRecord,
)


@dataclass(frozen=True)
class GeneratedTemplates:
    """Records written by one generation run and where they were written."""

    table_metadata: TableMetadataRecord
    variable_metadata: tuple[VariableMetadataRecord, ...]
    column_names: tuple[str, ...]
    table_metadata_path: Path
    variable_metadata_path: Path
