"""Abstract base class for package database verifiers.

A verifier asks a package manager's own database which package owns a
file. It is the only source of HIGH confidence evidence besides store
paths whose layout embeds the package name and version.
"""

import logging
import subprocess
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path

from whichpm.utils.shell import CommandResult, command_exists, run_command

logger = logging.getLogger(__name__)

# Default per-query timeout in seconds
DEFAULT_QUERY_TIMEOUT: float = 10.0


@dataclass(frozen=True, slots=True)
class PackageInfo:
    """Package ownership reported by a package database.

    Attributes:
        name: Package that owns the queried file.
        version: Installed version of that package (if reported).
    """

    name: str
    version: str | None = field(default=None)

    def __post_init__(self) -> None:
        """Validate package data after initialization."""
        if not self.name:
            msg = "Package name cannot be empty"
            raise ValueError(msg)


class Verifier(ABC):
    """Abstract base class for all package database verifiers.

    Verifiers never raise for a missing tool, a failing query, or a
    timeout: every such case is reported as ``None`` (no evidence).

    Example:
        >>> verifier = DpkgVerifier()
        >>> info = verifier.query(Path("/usr/bin/ls"))
        >>> if info is not None:
        ...     print(f"{info.name} {info.version}")
    """

    def __init__(self, timeout: float | None = DEFAULT_QUERY_TIMEOUT) -> None:
        self.timeout = timeout

    @property
    @abstractmethod
    def tool(self) -> str:
        """Return the executable this verifier runs.

        Returns:
            Command name looked up on PATH.
        """

    @abstractmethod
    def query(self, path: Path) -> PackageInfo | None:
        """Look up which package owns a file.

        Args:
            path: Absolute path of the file to look up.

        Returns:
            PackageInfo if the database knows the file, None otherwise.
        """

    def is_available(self) -> bool:
        """Check if the query tool is available on the system.

        Returns:
            True if the tool can be used, False otherwise.
        """
        return command_exists(self.tool)

    def _run(self, args: list[str]) -> CommandResult | None:
        """Run a query command, treating every failure as no evidence.

        Args:
            args: Command and arguments to execute.

        Returns:
            CommandResult on success, None if the command failed to run,
            timed out, or exited non-zero.
        """
        try:
            result = run_command(args, timeout=self.timeout)
        except subprocess.TimeoutExpired:
            logger.debug("%s timed out after %ss", args[0], self.timeout)
            return None
        except OSError as e:
            logger.debug("%s could not be run: %s", args[0], e)
            return None

        if not result.success:
            logger.debug(
                "%s exited with %d: %s",
                args[0],
                result.returncode,
                result.stderr.strip()[:200],
            )
            return None

        return result
