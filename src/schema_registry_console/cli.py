"""Command line interface entry point."""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass

import click

from schema_registry_console.command_outcomes import (
    CommandOutcome,
    fetch_listing,
    fetch_schema_to_file,
)
from schema_registry_console.configuration import (
    DEFAULT_CONFIG_FILENAME,
    ConfigurationError,
    load_registry_settings,
    write_placeholder_configuration,
)
from schema_registry_console.registry_access import (
    ConfluentSchemaRegistryApi,
    SchemaDecodeError,
    SchemaRegistryApi,
)

_PACKAGE_LOGGER_NAME = "schema_registry_console"
_VERBOSE_HANDLER_NAME = "schema_registry_console.verbose"


class CliError(Exception):
    """Custom CLI error."""


@dataclass
class CliState:
    """Per-invocation state shared between the command group and its commands."""

    registry_api: SchemaRegistryApi | None = None
    config_path: str | None = None
    registry_url: str | None = None
    username: str | None = None
    password: str | None = None


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="schema-registry-console")
@click.option(
    "--config",
    "config_path",
    required=False,
    type=click.Path(path_type=str),
    help="Path to a YAML schema registry connection configuration",
)
@click.option(
    "--registry-url",
    envvar="KAFKA_SCHEMA_REGISTRY_URL",
    help="Schema registry base URL (overrides schema_registry.url)",
)
@click.option(
    "--username",
    envvar="KAFKA_SCHEMA_REGISTRY_USERNAME",
    help="Schema registry basic-auth username",
)
@click.option(
    "--password",
    envvar="KAFKA_SCHEMA_REGISTRY_PASSWORD",
    help="Schema registry basic-auth password",
)
@click.option("--verbose", is_flag=True, default=False, help="Log registry calls to stderr.")
@click.pass_context
def cli(
    ctx: click.Context,
    config_path: str | None,
    registry_url: str | None,
    username: str | None,
    password: str | None,
    verbose: bool,
) -> None:
    """Fetch Avro schemas from a Kafka schema registry."""
    state = ctx.ensure_object(CliState)
    state.config_path = config_path
    state.registry_url = registry_url
    state.username = username
    state.password = password
    _configure_verbose_logging(verbose)


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
    """Generate a placeholder YAML connection configuration with guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="get-latest-schema")
@click.argument("schema_name")
@click.argument("output_file", type=click.Path(path_type=str))
@click.pass_obj
def get_latest_schema(state: CliState, schema_name: str, output_file: str) -> None:
    """Write the latest version of SCHEMA_NAME to OUTPUT_FILE as JSON."""
    registry_api = _registry_api(state)
    try:
        outcome = fetch_schema_to_file(
            lambda: registry_api.get_latest_definition(schema_name),
            schema_name=schema_name,
            output_path=output_file,
            encode_as_json=True,
        )
    except SchemaDecodeError as exc:
        raise CliError(str(exc)) from exc
    _finish(outcome)


@cli.command(name="get-schema-by-version")
@click.argument("schema_name")
@click.argument("schema_version", type=click.IntRange(min=1))
@click.argument("output_file", type=click.Path(path_type=str))
@click.pass_obj
def get_schema_by_version(
    state: CliState, schema_name: str, schema_version: int, output_file: str
) -> None:
    """Write version SCHEMA_VERSION of SCHEMA_NAME to OUTPUT_FILE as stored by the registry."""
    registry_api = _registry_api(state)
    _finish(
        fetch_schema_to_file(
            lambda: registry_api.get_definition_by_version(schema_name, schema_version),
            schema_name=schema_name,
            output_path=output_file,
            encode_as_json=False,
        )
    )


@cli.command(name="list-versions")
@click.argument("schema_name")
@click.pass_obj
def list_versions(state: CliState, schema_name: str) -> None:
    """List all registered versions of SCHEMA_NAME."""
    registry_api = _registry_api(state)
    _finish(fetch_listing(lambda: registry_api.get_all_versions(schema_name)))


@cli.command(name="list-schemas")
@click.pass_obj
def list_schemas(state: CliState) -> None:
    """List all schema names known to the registry."""
    registry_api = _registry_api(state)
    _finish(fetch_listing(registry_api.get_all_schema_names))


def _registry_api(state: CliState) -> SchemaRegistryApi:
    if state.registry_api is not None:
        return state.registry_api
    try:
        settings = load_registry_settings(
            state.config_path,
            url=state.registry_url,
            username=state.username,
            password=state.password,
        )
    except ConfigurationError as exc:
        raise CliError(str(exc)) from exc
    state.registry_api = ConfluentSchemaRegistryApi(settings)
    return state.registry_api


def _finish(outcome: CommandOutcome) -> None:
    if outcome.message:
        click.echo(outcome.message)
    if outcome.exit_code:
        click.get_current_context().exit(outcome.exit_code)


def _configure_verbose_logging(verbose: bool) -> None:
    logger = logging.getLogger(_PACKAGE_LOGGER_NAME)
    # At most one verbose handler, bound to the current stderr.
    previous = [h for h in logger.handlers if h.get_name() == _VERBOSE_HANDLER_NAME]
    for existing in previous:
        logger.removeHandler(existing)
    if not verbose:
        if previous:
            logger.setLevel(logging.NOTSET)
        return
    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(_VERBOSE_HANDLER_NAME)
    handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)


def main(argv: list[str] | None = None, *, registry_api: SchemaRegistryApi | None = None) -> int:
    """CLI entry point for console_scripts wiring.

    Registry failures other than a missing schema are not handled here and
    terminate the process with their original message.
    """
    argv = argv if argv is not None else sys.argv[1:]
    try:
        exit_code = cli.main(
            args=list(argv),
            standalone_mode=False,
            obj=CliState(registry_api=registry_api),
        )
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return exit_code if isinstance(exit_code, int) else 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
