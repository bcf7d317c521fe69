"""Command line interface entry point."""

from __future__ import annotations

import logging
import sys

import click

from action_sequence_checker.check_execution import (
    CheckExecutionError,
    CheckRequest,
    execute_check,
)
from action_sequence_checker.configuration import (
    DEFAULT_CONFIG_FILENAME,
    write_placeholder_configuration,
)


class CliError(Exception):
    """Custom CLI error."""


class CheckFailedError(CliError):
    """Raised when a check ran but its assertion did not hold."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="action-sequence-checker")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """Assert recorded action sequences against expectations."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML check configuration template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a placeholder YAML check configuration with guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="check")
@click.option(
    "--config",
    "config_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to YAML/JSON check configuration file",
)
@click.option(
    "--events",
    "events_path",
    required=False,
    type=click.Path(path_type=str),
    help="Path to a YAML/JSON list of recorded actions; overrides recorded_events",
)
def check(config_path: str, events_path: str | None) -> None:
    """Check recorded actions against the configured expectations."""
    try:
        outcome = execute_check(CheckRequest(config_path=config_path, events_path=events_path))
    except CheckExecutionError as exc:
        raise CliError(str(exc)) from exc
    if not outcome.passed:
        raise CheckFailedError(f"FAIL: {outcome.report}")
    click.echo(f"PASS: {outcome.report}")


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
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
