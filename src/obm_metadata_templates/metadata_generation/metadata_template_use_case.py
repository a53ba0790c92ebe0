"""Metadata template generation use-case service."""

from __future__ import annotations

import logging
from pathlib import Path

from obm_metadata_templates.configuration.runtime_settings import (
    DEFAULT_API_VERSION,
    DEFAULT_CLIENT_ID,
    DEFAULT_PROJECT,
    DEFAULT_SCHEMA,
    DEFAULT_TIMEOUT_SECONDS,
    DEFAULT_URL,
    Credentials,
)
from obm_metadata_templates.obm_connection import (
    HttpClient,
    RequestsHttpClient,
    authenticate,
    fetch_table,
    init_session,
    prompt_credentials,
)
from obm_metadata_templates.table_filtering import filter_excluded_columns
from obm_metadata_templates.template_generation import (
    TABLE_METADATA_FILENAME,
    VARIABLE_METADATA_FILENAME,
    build_table_metadata_record,
    build_table_metadata_workbook,
    build_variable_metadata_records,
    build_variable_metadata_workbook,
    save_workbook,
)

from .generation_contracts import GeneratedTemplates

_LOGGER = logging.getLogger("obm_metadata_templates.metadata_generation")


# pylint: disable=too-many-arguments
def generate_obm_metadata(
    table_name: str,
    schema_name: str = DEFAULT_SCHEMA,
    url: str = DEFAULT_URL,
    project: str = DEFAULT_PROJECT,
    *,
    credentials: Credentials | None = None,
    output_dir: Path | str = ".",
    api_version: float = DEFAULT_API_VERSION,
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
    client_id: str = DEFAULT_CLIENT_ID,
    http_client: HttpClient | None = None,
) -> GeneratedTemplates:
    """Fetch an OBM table and write its table- and variable-level metadata templates.

    Writes `table_metadata.xlsx` and `variable_metadata.xlsx` into `output_dir`,
    overwriting earlier copies. Nothing is written when connecting,
    authenticating or querying fails; a failure while writing the second
    workbook leaves the first one in place.

    Args:
      table_name: Table to query, without schema.
      schema_name: Schema qualifying `table_name`.
      url: OBM server URL.
      project: OBM project name.
      credentials: Username/password; prompted for interactively when omitted.
      output_dir: Directory receiving both workbooks.
      api_version: OBM API version used in the PDS endpoint.
      timeout_seconds: Per-request HTTP timeout.
      client_id: OAuth client id sent with the password grant.
      http_client: Transport override, mainly for tests.

    Returns:
      The constructed records and the written file paths.

    Raises:
      ValueError: If `table_name` or `schema_name` is empty.
      ObmConnectionError: If the server cannot be reached.
      AuthError: If authentication or table access is refused.
      QueryError: If the table query is rejected.
      FileWriteError: If a workbook cannot be written.
    """
    table_name = _require_identifier(table_name, "table_name")
    schema_name = _require_identifier(schema_name, "schema_name")
    client = http_client or RequestsHttpClient()

    session = init_session(project, url, api_version)
    authenticated = authenticate(
        session,
        credentials or prompt_credentials(),
        http_client=client,
        client_id=client_id,
        timeout_seconds=timeout_seconds,
    )

    _LOGGER.info("Querying table: %s", table_name)
    remote_table = fetch_table(
        authenticated,
        f"{schema_name}.{table_name}",
        http_client=client,
        timeout_seconds=timeout_seconds,
    )
    column_names = filter_excluded_columns(remote_table).columns

    output_directory = Path(output_dir)
    table_record = build_table_metadata_record(table_name)
    table_path = save_workbook(
        build_table_metadata_workbook(table_record, column_names),
        output_directory / TABLE_METADATA_FILENAME,
    )
    _LOGGER.info("Created %s with dropdown lists.", TABLE_METADATA_FILENAME)

    variable_records = build_variable_metadata_records(column_names)
    variable_path = save_workbook(
        build_variable_metadata_workbook(variable_records),
        output_directory / VARIABLE_METADATA_FILENAME,
    )
    _LOGGER.info("Created %s", VARIABLE_METADATA_FILENAME)

    return GeneratedTemplates(
        table_metadata=table_record,
        variable_metadata=variable_records,
        column_names=column_names,
        table_metadata_path=table_path,
        variable_metadata_path=variable_path,
    )


# pylint: enable=too-many-arguments


def _require_identifier(value: str, field_name: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"{field_name} must be a non-empty string.")
    return value
