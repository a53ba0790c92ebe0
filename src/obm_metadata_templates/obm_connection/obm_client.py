"""OpenBioMaps session setup, authentication and data queries."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any
from urllib.parse import urlsplit

from obm_metadata_templates.configuration.runtime_settings import (
    DEFAULT_API_VERSION,
    DEFAULT_CLIENT_ID,
    DEFAULT_TIMEOUT_SECONDS,
    Credentials,
)
from obm_metadata_templates.table_filtering.table_models import (
    RemoteTable,
    remote_table_from_records,
)

from .http_transport import HttpClient, HttpResponse, RequestsHttpClient
from .session_models import AuthenticatedSession, ObmSession

_LOGGER = logging.getLogger("obm_metadata_templates.obm_connection")

DEFAULT_AUTH_SCOPE = "get_data"
_AUTH_REJECTED_STATUS_CODES = frozenset({400, 401, 403})


class AuthError(Exception):
    """Raised when the OBM server refuses the credentials or the session token."""


class QueryError(Exception):
    """Raised when the OBM server rejects a data query."""


def init_session(
    project: str, url: str, api_version: float = DEFAULT_API_VERSION
) -> ObmSession:
    """Resolve the OAuth and PDS endpoints of an OBM project."""
    if not project or not project.strip():
        raise ValueError("OBM project name must not be empty.")
    server_url = _normalize_server_url(url)
    project = project.strip()
    return ObmSession(
        project=project,
        server_url=server_url,
        api_version=api_version,
        token_url=f"{server_url}/oauth/token.php",
        pds_url=f"{server_url}/projects/{project}/v{api_version:g}/pds.php",
    )


def authenticate(
    session: ObmSession,
    credentials: Credentials,
    *,
    http_client: HttpClient | None = None,
    client_id: str = DEFAULT_CLIENT_ID,
    scope: str = DEFAULT_AUTH_SCOPE,
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
) -> AuthenticatedSession:
    """Exchange username/password for an access token (OAuth password grant)."""
    client = http_client or RequestsHttpClient()
    response = client.post_form(
        session.token_url,
        {
            "grant_type": "password",
            "username": credentials.username,
            "password": credentials.password,
            "client_id": client_id,
            "scope": scope,
        },
        timeout_seconds,
    )
    payload = response.payload if isinstance(response.payload, Mapping) else {}
    if response.status_code in _AUTH_REJECTED_STATUS_CODES or "error" in payload:
        raise AuthError(
            f"Authentication against {session.server_url} failed: {_describe_failure(response)}"
        )
    if not response.ok:
        raise AuthError(
            f"Authentication against {session.server_url} failed with HTTP "
            f"{response.status_code}."
        )
    access_token = payload.get("access_token")
    if not isinstance(access_token, str) or not access_token:
        raise AuthError(f"Token response from {session.server_url} contains no access_token.")

    _LOGGER.debug("Authenticated %s on project %s", credentials.username, session.project)
    refresh_token = payload.get("refresh_token")
    return AuthenticatedSession(
        session=session,
        access_token=access_token,
        refresh_token=refresh_token if isinstance(refresh_token, str) else None,
        expires_in=_optional_int(payload.get("expires_in")),
    )


def fetch_table(
    authenticated: AuthenticatedSession,
    table: str,
    *,
    http_client: HttpClient | None = None,
    projection: str = "*",
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
) -> RemoteTable:
    """Run a `get_data` query for a schema-qualified table and return its rows."""
    client = http_client or RequestsHttpClient()
    response = client.post_form(
        authenticated.session.pds_url,
        {
            "access_token": authenticated.access_token,
            "scope": "get_data",
            "value": projection,
            "table": table,
        },
        timeout_seconds,
    )
    if response.status_code in (401, 403):
        raise AuthError(f"Access to table '{table}' was denied: {_describe_failure(response)}")
    if not response.ok:
        raise QueryError(
            f"Query for table '{table}' failed with HTTP {response.status_code}: "
            f"{_describe_failure(response)}"
        )

    payload = response.payload
    if not isinstance(payload, Mapping):
        raise QueryError(f"Query for table '{table}' returned a malformed response.")
    if payload.get("status") != "success":
        raise QueryError(f"Query for table '{table}' was rejected: {_describe_failure(response)}")

    return _records_to_table(payload.get("data"), table)


def _records_to_table(data: Any, table: str) -> RemoteTable:
    if data is None or data == "":
        return RemoteTable(columns=(), rows=())
    if isinstance(data, Mapping):
        data = [data]
    if not isinstance(data, list):
        raise QueryError(f"Query for table '{table}' returned non-tabular data.")
    try:
        return remote_table_from_records(data)
    except TypeError as exc:
        raise QueryError(f"Query for table '{table}' returned non-tabular data: {exc}") from exc


def _normalize_server_url(url: str) -> str:
    candidate = (url or "").strip()
    if not candidate:
        raise ValueError("OBM server url must not be empty.")
    if not urlsplit(candidate).scheme:
        candidate = f"https://{candidate}"
    return candidate.rstrip("/")


def _optional_int(value: Any) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.isdigit():
        return int(value)
    return None


def _describe_failure(response: HttpResponse) -> str:
    payload = response.payload
    if isinstance(payload, Mapping):
        for key in ("error_description", "message", "error", "data"):
            value = payload.get(key)
            if value:
                return str(value)
    text = response.text.strip()
    return text[:200] if text else f"HTTP {response.status_code}"
