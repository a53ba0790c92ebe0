"""Interactive credential prompting."""

from __future__ import annotations

import click

from obm_metadata_templates.configuration.runtime_settings import Credentials


def prompt_credentials(username: str | None = None) -> Credentials:
    """Ask for the OBM username (unless given) and a hidden password."""
    resolved_username = username or click.prompt("OBM username", type=str, err=True)
    password = click.prompt("OBM password", type=str, hide_input=True, err=True)
    return Credentials(username=resolved_username.strip(), password=password)
