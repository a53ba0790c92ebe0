"""Shared template generation constants."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

TABLE_METADATA_FILENAME = "table_metadata.xlsx"
VARIABLE_METADATA_FILENAME = "variable_metadata.xlsx"

TABLE_METADATA_SHEET_NAME = "metadata"
VARIABLE_METADATA_SHEET_NAME = "variable_metadata"
CATEGORY_SHEET_NAME = "category"

HEADER_FILL_COLOR = "DCE6F1"

TABLE_METADATA_COLUMNS: tuple[str, ...] = (
    "table_owner",
    "date_uploading",
    "table_name",
    "focus_group",
    "data_type",
    "data_type_var",
    "species_var",
    "population_var",
    "date_end_datacollection",
    "comment",
)

VARIABLE_METADATA_COLUMNS: tuple[str, ...] = (
    "variable_name",
    "var_category",
    "var_unit",
    "var_type",
    "var_description",
)

CATEGORY_COLUMNS: tuple[str, ...] = ("header", "categories", "description")

FOCUS_GROUP_OPTIONS: tuple[str, ...] = (
    "mammals",
    "birds",
    "reptiles",
    "amphibians",
    "fish",
    "mixed_tetrapoda",
    "mixed_amniote",
    "mixed_vertebrate",
    "mixed_other",
    "mixed_animals",
)

DATA_TYPE_OPTIONS: tuple[str, ...] = ("species", "population", "mixed")

VAR_CATEGORY_OPTIONS: tuple[str, ...] = (
    "Behaviour",
    "Climate",
    "Geography",
    "Demography",
    "Ecology",
    "LifeHistory",
    "Morphology",
    "Taxonomy",
    "Metadata",
    "Method",
)

VAR_TYPE_OPTIONS: tuple[str, ...] = ("character", "numeric", "factor", "date", "logical")

# Options without an entry get an empty description.
VAR_CATEGORY_DESCRIPTIONS: Mapping[str, str] = MappingProxyType(
    {
        "Taxonomy": (
            "Any variable that contains information on taxonomy, e.g. species names, "
            "scientific names, order, family"
        ),
        "Metadata": (
            "Any variable that helps identify the observations in your data, e.g. IDs, "
            "references or any additional information regarding your observations."
        ),
        "Method": (
            "Variables that are related to the methods with which an observation was "
            "collected, e.g. method of data collection, data quality, sample size, year of "
            "data collection, duration of data collection."
        ),
    }
)
