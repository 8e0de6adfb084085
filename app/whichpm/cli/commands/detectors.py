"""Detectors command implementation.

Lists the detectors in the order they are tried.
"""

from typing import Annotated

import typer

from whichpm.cli.display import create_detectors_table
from whichpm.detectors.registry import DetectorRegistry
from whichpm.models.platform import Platform, current_platform
from whichpm.utils.formatting import console


def list_detectors(
    platform: Annotated[
        Platform | None,
        typer.Option(
            "--platform",
            "-p",
            help="Platform to list detectors for (default: this system).",
            case_sensitive=False,
        ),
    ] = None,
) -> None:
    """List the package manager detectors in evaluation order."""
    target = platform if platform is not None else current_platform()
    registry = DetectorRegistry(platform=target, verify=False)

    title = f"Detectors ({target.display_name})"
    console.print(create_detectors_table(registry.detectors, title))
