"""Command line interface entry point."""

from __future__ import annotations

import logging
import sys

import click

from openapi_specfmt.configuration import FormatOptions
from openapi_specfmt.format_errors import SpecFormatError
from openapi_specfmt.spec_formatting import FormatRequest, format_file

_PACKAGE_LOGGER = logging.getLogger("openapi_specfmt")


class CliError(Exception):
    """Custom CLI error."""


class _EchoHandler(logging.Handler):
    """Forward narration records to click's current stdout."""

    def emit(self, record: logging.LogRecord) -> None:
        click.echo(self.format(record))


def _configure_logging(verbose: bool) -> None:
    for handler in list(_PACKAGE_LOGGER.handlers):
        if isinstance(handler, _EchoHandler):
            _PACKAGE_LOGGER.removeHandler(handler)
    if verbose:
        _PACKAGE_LOGGER.addHandler(_EchoHandler())
        _PACKAGE_LOGGER.setLevel(logging.INFO)


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="openapi-specfmt")
def cli() -> None:
    """OpenAPI spec formatter for better code generation."""


@cli.command(name="format")
@click.argument(
    "input_path",
    metavar="INPUT",
    type=click.Path(exists=True, dir_okay=False, path_type=str),
)
@click.option(
    "-o",
    "--output",
    "output_path",
    required=False,
    type=click.Path(dir_okay=False, path_type=str),
    help="Output file (defaults to INPUT for in-place)",
)
@click.option(
    "--dry-run",
    is_flag=True,
    default=False,
    help="Do not write file, only validate and report changes.",
)
@click.option("-v", "--verbose", is_flag=True, default=False, help="Verbose logging.")
def format_spec(input_path: str, output_path: str | None, dry_run: bool, verbose: bool) -> None:
    """Refactor inline response schemas into components/schemas."""
    _configure_logging(verbose)
    try:
        outcome = format_file(
            FormatRequest(
                input_path=input_path,
                output_path=output_path,
                options=FormatOptions(dry_run=dry_run, verbose=verbose),
            )
        )
    except SpecFormatError as exc:
        raise CliError(str(exc)) from exc

    if outcome.dry_run:
        click.echo(f"changes detected: {'yes' if outcome.changed else 'no'}")
    elif outcome.written:
        click.echo(str(outcome.output_path))
    else:
        click.echo("no changes needed")


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), prog_name="specfmt", standalone_mode=False)
    except CliError as exc:
        click.echo(f"Error: {exc}", err=True)
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
