"""Command-line interface for envloader."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import click
from pydantic import ValidationError

from envloader.core.config import LOG_LEVELS, load_cli_settings
from envloader.core.logging import setup_logging
from envloader.errors import EnvLoadError
from envloader.loader import load_env, load_env_with_schema
from envloader.schema import ConfigValue, LoadOptions

logger = logging.getLogger(__name__)

# Undecodable files and unreadable paths surface as OSError or UnicodeDecodeError
LOAD_ERRORS = (EnvLoadError, OSError, UnicodeDecodeError)


def _format_value(value: ConfigValue) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _echo_config(config: dict[str, ConfigValue], json_output: bool) -> None:
    if json_output:
        click.echo(json.dumps(config, indent=2, sort_keys=True))
        return
    for key, value in config.items():
        click.echo(f"{key}={_format_value(value)}")


def _prepare(env_file: str | None, log_level: str | None) -> str:
    try:
        settings = load_cli_settings()
    except ValueError as exc:
        raise click.ClickException(str(exc)) from exc
    if log_level:
        settings = settings.model_copy(update={"log_level": log_level.upper()})
    setup_logging(settings)
    return env_file or settings.env_file


def _read_schema(schema_path: Path, prefix: str | None) -> LoadOptions:
    try:
        options = LoadOptions.model_validate_json(schema_path.read_text(encoding="utf-8"))
    except (ValidationError, OSError, UnicodeDecodeError) as exc:
        raise click.ClickException(f"Invalid schema file {schema_path}: {exc}") from exc
    if prefix is not None:
        options = options.model_copy(update={"prefix": prefix})
    return options


env_file_option = click.option(
    "--env-file",
    default=None,
    help="Environment file to load (default: ENVLOADER_ENV_FILE or .env)",
)
json_option = click.option(
    "--json",
    "json_output",
    is_flag=True,
    default=False,
    help="Print the loaded variables as JSON",
)
log_level_option = click.option(
    "--log-level",
    default=None,
    type=click.Choice(list(LOG_LEVELS), case_sensitive=False),
    help="Logging level (default: ENVLOADER_LOG_LEVEL or WARNING)",
)


@click.group()
@click.version_option(version="0.1.0")
def cli() -> None:
    """envloader: load and validate .env files.

    Values are printed, never exported to the calling environment.
    """


@cli.command("show")
@env_file_option
@json_option
@log_level_option
def show(env_file: str | None, json_output: bool, log_level: str | None) -> None:
    """Parse an environment file strictly and print its variables."""
    path = _prepare(env_file, log_level)
    try:
        config = load_env(path)
    except LOAD_ERRORS as exc:
        raise click.ClickException(str(exc)) from exc

    _echo_config(dict(config), json_output)


@cli.command("check")
@env_file_option
@click.option(
    "--schema",
    "schema_path",
    required=True,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="JSON file with the prefix and variable declarations",
)
@click.option("--prefix", default=None, help="Override the prefix declared in the schema")
@json_option
@log_level_option
def check(
    env_file: str | None,
    schema_path: Path,
    prefix: str | None,
    json_output: bool,
    log_level: str | None,
) -> None:
    """Validate an environment file against a schema and print typed values."""
    path = _prepare(env_file, log_level)
    options = _read_schema(schema_path, prefix)
    try:
        config = load_env_with_schema(path, options=options)
    except LOAD_ERRORS as exc:
        raise click.ClickException(str(exc)) from exc

    logger.info("Validated %d variables from %s", len(config), path)
    _echo_config(config, json_output)


if __name__ == "__main__":
    cli()
