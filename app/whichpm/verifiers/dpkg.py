"""dpkg package database verifier.

Looks up file ownership with ``dpkg -S`` and the owning package's
version with ``dpkg-query``.
"""

import logging
from pathlib import Path

from whichpm.verifiers.base import PackageInfo, Verifier

logger = logging.getLogger(__name__)

# Directory pairs merged by usrmerge; dpkg may list a file under either
_USRMERGE_PAIRS: tuple[tuple[str, str], ...] = (
    ("/usr/bin/", "/bin/"),
    ("/usr/sbin/", "/sbin/"),
)


class DpkgVerifier(Verifier):
    """Verifier backed by the dpkg database (Debian, Ubuntu, Pop!_OS)."""

    @property
    def tool(self) -> str:
        """Return dpkg as the query tool."""
        return "dpkg"

    def query(self, path: Path) -> PackageInfo | None:
        """Find the dpkg package that owns a file.

        Args:
            path: Absolute path of the file to look up.

        Returns:
            PackageInfo with name and version, or None if dpkg does not
            know the file or is not installed.
        """
        if not self.is_available():
            logger.debug("dpkg is not available, skipping verification")
            return None

        for candidate in _candidate_paths(str(path)):
            package = self._search(candidate)
            if package is not None:
                return PackageInfo(name=package, version=self._version(package))

        return None

    def _search(self, path: str) -> str | None:
        """Run ``dpkg -S`` for a single path.

        Args:
            path: File path to search for.

        Returns:
            Owning package name, or None if not found.
        """
        result = self._run(["dpkg", "-S", path])
        if result is None:
            return None

        for line in result.stdout_lines:
            package = parse_dpkg_search_line(line)
            if package is not None:
                return package

        return None

    def _version(self, package: str) -> str | None:
        """Query the installed version of a package.

        Args:
            package: Package name.

        Returns:
            Version string, or None if dpkg-query fails.
        """
        result = self._run(["dpkg-query", "-W", "-f=${Version}", package])
        if result is None:
            return None
        return result.stdout.strip() or None


def parse_dpkg_search_line(line: str) -> str | None:
    """Parse one line of ``dpkg -S`` output.

    Lines look like ``coreutils: /usr/bin/ls`` or, for multi-arch and
    shared files, ``libc6:amd64, libc6-dev:amd64: /usr/lib/...``. Diversion
    notices are skipped.

    Args:
        line: A line of dpkg -S output.

    Returns:
        First owning package name without architecture qualifier, or None.
    """
    if ": " not in line or line.startswith("diversion "):
        return None

    owners = line.split(": ", 1)[0]
    first = owners.split(",")[0].strip()
    name = first.split(":")[0].strip()
    return name or None


def _candidate_paths(path: str) -> list[str]:
    """Return the path plus its usrmerge alias, if it has one.

    Args:
        path: Absolute file path.

    Returns:
        List of paths to try, original first.
    """
    candidates = [path]
    for merged, legacy in _USRMERGE_PAIRS:
        if path.startswith(merged):
            candidates.append(legacy + path[len(merged) :])
        elif path.startswith(legacy):
            candidates.append(merged + path[len(legacy) :])
    return candidates
