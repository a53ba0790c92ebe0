"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "obm-metadata.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Connection configuration template for obm-metadata-templates.
# Every value is optional; removed keys fall back to the defaults shown here.
# Replace <OPTIONAL> placeholders or delete them.

connection:
  url: "https://openbiomaps.org"
  project: "sex_ratio_evolution"
  # Default schema used to qualify the requested table name.
  schema: "sex_ratio_evolution"
  api_version: 2.3
  timeout_seconds: 60
  client_id: "R"

# Leave credentials out to be prompted interactively.
# credentials:
#   username: "<OPTIONAL>"
#   password: "<OPTIONAL>"

output:
  # Directory receiving table_metadata.xlsx and variable_metadata.xlsx.
  directory: "."
"""


def build_placeholder_configuration() -> str:
    """Build a YAML configuration template with defaults and inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the placeholder configuration template to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Configuration file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
