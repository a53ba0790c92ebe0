"""OBM session entities."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ObmSession:
    """Resolved server endpoints for one OBM project."""

    project: str
    server_url: str
    api_version: float
    token_url: str
    pds_url: str


@dataclass(frozen=True)
class AuthenticatedSession:
    """Session plus the OAuth tokens issued for it."""

    session: ObmSession
    access_token: str
    refresh_token: str | None = None
    expires_in: int | None = None

    def __repr__(self) -> str:
        return (
            f"AuthenticatedSession(project={self.session.project!r}, "
            f"server_url={self.session.server_url!r}, access_token='***')"
        )
