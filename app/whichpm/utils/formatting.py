"""Rich consoles for CLI output.

Results go to ``console`` (stdout); messages and log records go to
``err_console`` (stderr) so piped output stays parseable.
"""

import sys
from typing import TextIO

from rich.console import Console

from whichpm.core.theme import get_theme


def _color_system(stream: TextIO) -> str:
    """Use truecolor for a terminal stream, else let Rich detect support."""
    return "truecolor" if stream.isatty() else "auto"


def _make_console(*, stderr: bool) -> Console:
    stream = sys.stderr if stderr else sys.stdout
    return Console(theme=get_theme(), stderr=stderr, color_system=_color_system(stream))


console = _make_console(stderr=False)
err_console = _make_console(stderr=True)


def print_info(message: str) -> None:
    """Print an info message to stdout."""
    console.print(f"[info]{message}[/]")


def print_success(message: str) -> None:
    """Print a success message to stdout."""
    console.print(f"[success]{message}[/]")


def print_error(message: str) -> None:
    """Print an error message to stderr."""
    err_console.print(f"[error]Error:[/] {message}")
