"""CLI commands for whichpm.

This package contains all subcommand implementations.
"""

from whichpm.cli.commands import config, detect, detectors

__all__ = ["config", "detect", "detectors"]
