"""Detect command implementation.

Identifies which package manager installed a command.
"""

from enum import Enum
from pathlib import Path
from typing import Annotated

import typer

from whichpm.cli.display import print_json_result, print_short_result, print_text_result
from whichpm.core.config import ConfigError, load_config_or_default
from whichpm.core.errors import CommandNotFoundError
from whichpm.core.orchestrator import detect_command
from whichpm.detectors.registry import DetectorRegistry
from whichpm.models.platform import current_platform
from whichpm.utils.formatting import print_error


class OutputFormat(str, Enum):
    """Output format options."""

    TEXT = "text"
    JSON = "json"
    SHORT = "short"


def detect(
    ctx: typer.Context,
    command: Annotated[
        str,
        typer.Argument(help="The command to investigate."),
    ],
    output_format: Annotated[
        OutputFormat | None,
        typer.Option(
            "--format",
            "-f",
            help="Output format: text, json, or short.",
            case_sensitive=False,
        ),
    ] = None,
    as_json: Annotated[
        bool,
        typer.Option(
            "--json",
            help="Output as JSON (shortcut for --format json).",
        ),
    ] = False,
    no_verify: Annotated[
        bool,
        typer.Option(
            "--no-verify",
            help="Skip package database verification queries.",
        ),
    ] = False,
    config_path: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Path to a config file.",
        ),
    ] = None,
) -> None:
    """Identify which package manager installed COMMAND.

    Examples:
        whichpm detect git                  # Human-readable answer
        whichpm detect tsc --json           # Full result as JSON
        whichpm detect rg --format short    # Only the manager id
        whichpm detect ls --no-verify       # Skip dpkg/snap queries
    """
    if as_json and output_format not in (None, OutputFormat.JSON):
        print_error("--json cannot be combined with --format.")
        raise typer.Exit(code=1)

    try:
        config = load_config_or_default(config_path)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    if as_json:
        fmt = OutputFormat.JSON
    elif output_format is not None:
        fmt = output_format
    else:
        fmt = OutputFormat(config.output_format)

    verbose = bool(ctx.obj and ctx.obj.get("verbose"))
    platform = current_platform()
    registry = DetectorRegistry(
        platform=platform,
        verify=config.verify and not no_verify,
        disabled=config.disabled_detectors,
        timeout=config.query_timeout,
    )

    try:
        result = detect_command(command, verbose, platform=platform, registry=registry)
    except CommandNotFoundError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    if fmt == OutputFormat.JSON:
        print_json_result(result)
    elif fmt == OutputFormat.SHORT:
        print_short_result(result)
    else:
        print_text_result(result)
