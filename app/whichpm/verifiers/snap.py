"""Snap verifier.

Asks snapd for the installed revision of the snap a path belongs to.
"""

import logging
from pathlib import Path

from whichpm.utils.patterns import extract_snap_launcher, extract_snap_name
from whichpm.verifiers.base import PackageInfo, Verifier

logger = logging.getLogger(__name__)


class SnapVerifier(Verifier):
    """Verifier backed by ``snap list``."""

    @property
    def tool(self) -> str:
        """Return snap as the query tool."""
        return "snap"

    def query(self, path: Path) -> PackageInfo | None:
        """Find the installed snap that a path belongs to.

        Only paths inside a snap mount (``/snap/{name}/{revision}/...``)
        name their snap; ``/snap/bin/{snap}.{app}`` launchers are looked up
        by the part before the first dot.

        Args:
            path: Path inside a snap or a snap launcher.

        Returns:
            PackageInfo with name and version, or None if snapd does not
            list the snap or is not installed.
        """
        text = str(path)
        name = extract_snap_name(text) or extract_snap_launcher(text) or path.name
        if not name:
            return None

        if not self.is_available():
            logger.debug("snap is not available, skipping verification")
            return None

        result = self._run(["snap", "list", name])
        if result is None:
            return None

        return parse_snap_list(result.stdout, name)


def parse_snap_list(output: str, name: str) -> PackageInfo | None:
    """Parse ``snap list <name>`` output.

    Args:
        output: Command output including the header line.
        name: Snap name that was queried.

    Returns:
        PackageInfo for the matching row, or None if it is missing.
    """
    # Skip header line ("Name  Version  Rev  Tracking  Publisher  Notes")
    for line in output.strip().split("\n")[1:]:
        parts = line.split()
        if len(parts) < 2:
            logger.debug("Skipping malformed snap line: %r", line[:100])
            continue
        if parts[0] == name:
            return PackageInfo(name=parts[0], version=parts[1])
    return None
