"""Subprocess helpers for package database queries.

Queries are read-only, run with captured output and a hard timeout, and
are decoded leniently: a stray non-UTF-8 byte in a package description or
an error message must not abort a detection run.
"""

import os
import shutil
import subprocess
from dataclasses import dataclass

# Untranslated, stable output for the parsers
_QUERY_ENV_OVERRIDES: dict[str, str] = {"LC_ALL": "C"}


@dataclass(frozen=True, slots=True)
class CommandResult:
    """Captured outcome of a query command.

    Attributes:
        stdout: Decoded standard output.
        stderr: Decoded standard error.
        returncode: Exit code of the command.
    """

    stdout: str
    stderr: str
    returncode: int

    @property
    def success(self) -> bool:
        """Check if the command exited with status 0."""
        return self.returncode == 0

    @property
    def stdout_lines(self) -> list[str]:
        """Return the non-blank lines of stdout."""
        return [line for line in self.stdout.splitlines() if line.strip()]


def run_command(args: list[str], *, timeout: float | None = 60.0) -> CommandResult:
    """Run a query command and capture its output.

    Undecodable bytes are replaced with U+FFFD instead of raising.

    Args:
        args: Command and arguments to execute.
        timeout: Seconds to wait before the command is killed.

    Returns:
        CommandResult with decoded output and the exit code.

    Raises:
        subprocess.TimeoutExpired: If the command exceeds the timeout.
        OSError: If the executable cannot be started.
    """
    completed = subprocess.run(
        args,
        capture_output=True,
        encoding="utf-8",
        errors="replace",
        check=False,
        timeout=timeout,
        env={**os.environ, **_QUERY_ENV_OVERRIDES},
    )
    return CommandResult(
        stdout=completed.stdout,
        stderr=completed.stderr,
        returncode=completed.returncode,
    )


def command_exists(name: str) -> bool:
    """Check if a command can be found on PATH."""
    return shutil.which(name) is not None
