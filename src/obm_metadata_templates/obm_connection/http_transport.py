"""HTTP transport used to talk to the OBM server."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Protocol

import requests

_LOGGER = logging.getLogger("obm_metadata_templates.obm_connection.http")


class ObmConnectionError(ConnectionError):
    """Raised when the OBM server cannot be reached."""


@dataclass(frozen=True)
class HttpResponse:
    """Transport-neutral view of one HTTP response."""

    status_code: int
    payload: Any
    text: str = ""

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300


class HttpClient(Protocol):  # pylint: disable=too-few-public-methods
    """Protocol for form-posting HTTP clients used by the OBM client."""

    def post_form(
        self, url: str, form: Mapping[str, str], timeout_seconds: float
    ) -> HttpResponse: ...


class RequestsHttpClient:  # pylint: disable=too-few-public-methods
    """Real HTTP client implementation using requests."""

    def __init__(self, session: requests.Session | None = None) -> None:
        self._session = session or requests.Session()

    def post_form(
        self, url: str, form: Mapping[str, str], timeout_seconds: float
    ) -> HttpResponse:
        _LOGGER.debug("POST %s", url)
        try:
            response = self._session.post(url, data=dict(form), timeout=timeout_seconds)
        except requests.Timeout as exc:
            raise ObmConnectionError(
                f"Timed out after {timeout_seconds}s waiting for {url}"
            ) from exc
        except requests.RequestException as exc:
            raise ObmConnectionError(f"Failed to reach {url}: {exc}") from exc

        try:
            payload = response.json()
        except ValueError:
            payload = None
        return HttpResponse(status_code=response.status_code, payload=payload, text=response.text)
