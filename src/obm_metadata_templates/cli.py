"""Command line interface entry point."""

from __future__ import annotations

import logging
import sys

import click

from obm_metadata_templates.configuration import (
    DEFAULT_CONFIG_FILENAME,
    Configuration,
    ConfigurationError,
    Credentials,
    default_configuration,
    load_configuration,
    write_placeholder_configuration,
)
from obm_metadata_templates.metadata_generation import generate_obm_metadata
from obm_metadata_templates.obm_connection import (
    AuthError,
    ObmConnectionError,
    QueryError,
    prompt_credentials,
)
from obm_metadata_templates.template_generation import FileWriteError

_PACKAGE_LOGGER_NAME = "obm_metadata_templates"


class CliError(Exception):
    """Custom CLI error."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="obm-metadata-templates")
def cli() -> None:
    """OpenBioMaps metadata template generator."""


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML connection configuration template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a placeholder YAML configuration with guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="generate")
@click.argument("table_name")
@click.option("--schema", "schema_name", help="Schema qualifying TABLE_NAME")
@click.option("--url", help="OBM server URL")
@click.option("--project", help="OBM project name")
@click.option(
    "--config",
    "config_path",
    required=False,
    type=click.Path(path_type=str),
    help="Path to YAML connection configuration file",
)
@click.option(
    "--output-dir",
    "output_dir",
    required=False,
    type=click.Path(file_okay=False, path_type=str),
    help="Directory for table_metadata.xlsx and variable_metadata.xlsx",
)
@click.option("--username", help="OBM username; the password is always prompted for")
@click.option("--timeout", "timeout_seconds", type=click.IntRange(min=1), help="HTTP timeout")
# pylint: disable=too-many-arguments,too-many-positional-arguments
def generate(
    table_name: str,
    schema_name: str | None,
    url: str | None,
    project: str | None,
    config_path: str | None,
    output_dir: str | None,
    username: str | None,
    timeout_seconds: int | None,
) -> None:
    """Write metadata templates for one OBM table."""
    try:
        configuration = load_configuration(config_path) if config_path else default_configuration()
    except ConfigurationError as exc:
        raise CliError(str(exc)) from exc

    connection = configuration.connection
    try:
        generated = generate_obm_metadata(
            table_name,
            schema_name or connection.schema,
            url or connection.url,
            project or connection.project,
            credentials=_resolve_credentials(configuration, username),
            output_dir=output_dir or configuration.output.directory,
            api_version=connection.api_version,
            timeout_seconds=timeout_seconds or connection.timeout_seconds,
            client_id=connection.client_id,
        )
    except (ObmConnectionError, AuthError, QueryError, FileWriteError, ValueError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(generated.table_metadata_path.resolve()))
    click.echo(str(generated.variable_metadata_path.resolve()))


# pylint: enable=too-many-arguments,too-many-positional-arguments


def _resolve_credentials(configuration: Configuration, username: str | None) -> Credentials:
    configured = configuration.credentials
    if configured is not None and username in (None, configured.username):
        return configured
    return prompt_credentials(username)


class _ClickEchoHandler(logging.Handler):
    """Send log records to the current stderr through click."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            click.echo(self.format(record), err=True)
        except Exception:  # pylint: disable=broad-except
            self.handleError(record)


def _configure_logging() -> None:
    logger = logging.getLogger(_PACKAGE_LOGGER_NAME)
    if any(isinstance(handler, _ClickEchoHandler) for handler in logger.handlers):
        return
    handler = _ClickEchoHandler()
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.setLevel(logging.INFO)


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    _configure_logging()
    try:
        cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
