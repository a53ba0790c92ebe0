"""Configuration loader service."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from .runtime_settings import (
    DEFAULT_API_VERSION,
    DEFAULT_CLIENT_ID,
    DEFAULT_PROJECT,
    DEFAULT_SCHEMA,
    DEFAULT_TIMEOUT_SECONDS,
    DEFAULT_URL,
    Configuration,
    ConnectionSettings,
    Credentials,
    OutputSettings,
)


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def default_configuration() -> Configuration:
    """Configuration used when no file is given."""
    return Configuration(
        path=None,
        connection=ConnectionSettings(),
        credentials=None,
        output=OutputSettings(),
    )


def load_configuration(config_path: Path | str) -> Configuration:
    """Load and validate the configuration file."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    connection = _parse_connection_section(parsed.get("connection"))
    credentials = _parse_credentials_section(parsed.get("credentials"))
    output = _parse_output_section(parsed.get("output"), path.parent)

    return Configuration(
        path=path,
        connection=connection,
        credentials=credentials,
        output=output,
    )


def _parse_connection_section(value: Any) -> ConnectionSettings:
    section = _optional_mapping(value, "connection")
    url = _require_non_empty_string(section.get("url", DEFAULT_URL), "connection.url")
    project = _require_non_empty_string(
        section.get("project", DEFAULT_PROJECT), "connection.project"
    )
    schema = _require_non_empty_string(section.get("schema", DEFAULT_SCHEMA), "connection.schema")
    api_version = _require_positive_number(
        section.get("api_version", DEFAULT_API_VERSION), "connection.api_version"
    )
    timeout_seconds = _require_positive_int(
        section.get("timeout_seconds", DEFAULT_TIMEOUT_SECONDS), "connection.timeout_seconds"
    )
    client_id = _require_non_empty_string(
        section.get("client_id", DEFAULT_CLIENT_ID), "connection.client_id"
    )
    return ConnectionSettings(
        url=url,
        project=project,
        schema=schema,
        api_version=api_version,
        timeout_seconds=timeout_seconds,
        client_id=client_id,
    )


def _parse_credentials_section(value: Any) -> Credentials | None:
    if value is None:
        return None
    section = _optional_mapping(value, "credentials")
    username = _optional_string(section.get("username"), "credentials.username")
    password = _optional_string(section.get("password"), "credentials.password")
    if username is None and password is None:
        return None
    if username is None or password is None:
        raise ConfigurationError(
            "credentials.username and credentials.password must be provided together."
        )
    return Credentials(username=username, password=password)


def _parse_output_section(value: Any, base_path: Path) -> OutputSettings:
    section = _optional_mapping(value, "output")
    directory = section.get("directory")
    if directory is None:
        return OutputSettings()
    raw = _require_non_empty_string(directory, "output.directory")
    return OutputSettings(directory=_resolve_path(base_path, raw))


def _resolve_path(base_path: Path, raw_path: str) -> Path:
    candidate = Path(raw_path)
    if not candidate.is_absolute():
        return (base_path / candidate).resolve()
    return candidate


def _optional_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' must be a mapping.")
    return value


def _require_non_empty_string(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    if not stripped:
        raise ConfigurationError(f"{field_name} must not be empty.")
    return stripped


def _optional_string(value: Any, field_name: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    return stripped or None


def _require_positive_int(value: Any, field_name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if value <= 0:
        raise ConfigurationError(f"{field_name} must be greater than zero.")
    return value


def _require_positive_number(value: Any, field_name: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ConfigurationError(f"{field_name} must be a number.")
    if value <= 0:
        raise ConfigurationError(f"{field_name} must be greater than zero.")
    return float(value)
