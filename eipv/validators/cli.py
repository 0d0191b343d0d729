#!/usr/bin/env python3
"""
cli.py
------
Command-line entry point for the EIP preamble validator.

Validates one EIP file or every `.md` file in a directory, prints each
surfaced error as `file:line:<TAB>message`, then the status/type/category
counts of the valid documents and the valid/invalid totals.

Exit codes:
    0 - every checked document is valid
    1 - at least one document is invalid
    2 - bad usage (unknown token, unreadable config, missing path)

Usage:
    eipv EIPS/
    eipv EIPS/eip-1559.md
    eipv EIPS/ --ignore title_max_length,missing_discussions_to
    eipv EIPS/ --skip eip-20.md --config eipv.yaml
    eipv --list-tokens
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from pathlib import Path
from typing import Optional, Tuple

# --- Third party imports ---
import click

# --- Local imports ---
from eipv.core.cli_utils import load_config, setup_logger
from eipv.core.exceptions import ConfigurationError, EipvError
from eipv.core.logging_manager import handle_cli_error
from eipv.core.paths import LOG_DIR
from eipv.validators.context import SuppressionContext
from eipv.validators.errors import ErrorKind


def _build_context(
    ignore: Tuple[str, ...], skip: Tuple[str, ...], config: Optional[str]
) -> SuppressionContext:
    """Merge config-file and command-line suppression settings."""
    ignore_tokens = list(ignore)
    skip_files = list(skip)

    if config:
        try:
            settings = load_config(Path(config))
        except ConfigurationError as e:
            raise click.BadParameter(str(e), param_hint="'--config'") from e
        ignore_tokens = settings["ignore"] + ignore_tokens
        skip_files = settings["skip"] + skip_files

    try:
        return SuppressionContext.from_options(ignore=ignore_tokens, skip=skip_files)
    except ConfigurationError as e:
        raise click.BadParameter(str(e), param_hint="'--ignore'") from e


def _print_tokens() -> None:
    tokens = ErrorKind.tokens()
    width = max(len(token) for token in tokens)
    for token in tokens:
        click.echo(f"{token:<{width}}  {ErrorKind(token).message}")


@click.command()
@click.argument("path", type=click.Path(exists=True), required=False)
@click.option(
    "-i",
    "--ignore",
    multiple=True,
    metavar="TOKENS",
    help="Comma-separated error tokens to suppress (repeatable)",
)
@click.option(
    "-s",
    "--skip",
    multiple=True,
    metavar="FILES",
    help="Comma-separated file names to skip (repeatable)",
)
@click.option(
    "-c",
    "--config",
    type=click.Path(exists=True, dir_okay=False),
    help="YAML file with 'ignore' and 'skip' lists",
)
@click.option(
    "--list-tokens", is_flag=True, help="List suppression tokens and exit"
)
@click.option(
    "--log-dir", type=click.Path(), default=str(LOG_DIR), help="Directory for log files"
)
@click.option("-v", "--verbose", is_flag=True, help="Show tracebacks on failure")
@click.pass_context
def cli(
    ctx: click.Context,
    path: Optional[str],
    ignore: Tuple[str, ...],
    skip: Tuple[str, ...],
    config: Optional[str],
    list_tokens: bool,
    log_dir: str,
    verbose: bool,
) -> None:
    """
    Validate the preamble of EIP documents.

    PATH is a single EIP file or a directory of `.md` files.
    """
    if list_tokens:
        _print_tokens()
        return

    if path is None:
        raise click.UsageError("Missing argument 'PATH'.")

    suppression = _build_context(ignore, skip, config)

    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["logger"] = setup_logger(Path(log_dir), "validate")

    from eipv.validators.runner import EipValidator, format_eip_report

    try:
        validator = EipValidator(Path(path), suppression, ctx.obj["logger"])
        report = validator.validate_all()
    except EipvError as e:
        handle_cli_error(ctx, e, "validate", {"path": path})

    click.echo(format_eip_report(report))

    if report.has_errors:
        raise click.ClickException(f"Found {report.invalid} invalid document(s)")


if __name__ == "__main__":
    cli()
