"""CLI package for whichpm.

This package contains the Typer application and all subcommands.
"""

from whichpm.cli.main import app

__all__ = ["app"]
