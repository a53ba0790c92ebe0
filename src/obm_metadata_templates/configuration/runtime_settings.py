"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

DEFAULT_URL = "https://openbiomaps.org"
DEFAULT_PROJECT = "sex_ratio_evolution"
DEFAULT_SCHEMA = "sex_ratio_evolution"
DEFAULT_API_VERSION = 2.3
DEFAULT_TIMEOUT_SECONDS = 60
DEFAULT_CLIENT_ID = "R"


@dataclass(frozen=True)
class ConnectionSettings:
    """OpenBioMaps server connectivity configuration."""

    url: str = DEFAULT_URL
    project: str = DEFAULT_PROJECT
    schema: str = DEFAULT_SCHEMA
    api_version: float = DEFAULT_API_VERSION
    timeout_seconds: int = DEFAULT_TIMEOUT_SECONDS
    client_id: str = DEFAULT_CLIENT_ID


@dataclass(frozen=True)
class Credentials:
    """OAuth password-grant credentials."""

    username: str
    password: str

    def __repr__(self) -> str:
        return f"Credentials(username={self.username!r}, password='***')"


@dataclass(frozen=True)
class OutputSettings:
    """Where the generated templates are written."""

    directory: Path = Path(".")


@dataclass(frozen=True)
class Configuration:
    """Top-level configuration aggregate."""

    path: Path | None
    connection: ConnectionSettings
    credentials: Credentials | None
    output: OutputSettings
