"""OBM connection exports."""

from .credential_prompt import prompt_credentials
from .http_transport import HttpClient, HttpResponse, ObmConnectionError, RequestsHttpClient
from .obm_client import (
    DEFAULT_AUTH_SCOPE,
    AuthError,
    QueryError,
    authenticate,
    fetch_table,
    init_session,
)
from .session_models import AuthenticatedSession, ObmSession

__all__ = [
    "AuthError",
    "AuthenticatedSession",
    "DEFAULT_AUTH_SCOPE",
    "HttpClient",
    "HttpResponse",
    "ObmConnectionError",
    "ObmSession",
    "QueryError",
    "RequestsHttpClient",
    "authenticate",
    "fetch_table",
    "init_session",
    "prompt_credentials",
]
