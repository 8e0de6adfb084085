"""n (Node version manager) detector."""

import filecmp
from pathlib import Path

from whichpm.detectors.base import POSIX_PLATFORMS, Detector
from whichpm.models.detection import DetectionContext, DetectionResult

# Commands n installs into {prefix}/bin
_NODE_COMMANDS: frozenset[str] = frozenset({"node", "npm", "npx", "corepack"})


class NDetector(Detector):
    """Detector for Node.js installed by ``n``.

    n copies the active node version into a regular prefix such as
    ``/usr/local/bin/node``, so the path alone looks like any other
    install. The evidence is n's cache at ``{prefix}/n/versions/node``.
    """

    platforms = POSIX_PLATFORMS

    @property
    def id(self) -> str:
        """Return n as the manager id."""
        return "n"

    @property
    def name(self) -> str:
        """Return the n display name."""
        return "n (Node version manager)"

    @property
    def priority(self) -> int:
        """Checked before mise and npm."""
        return 95

    def detect(self, context: DetectionContext) -> DetectionResult | None:
        """Detect node binaries in a prefix that has an n version cache."""
        command = self._command_base(context)
        if command not in _NODE_COMMANDS:
            return None

        prefix = n_prefix(context.command_path) or n_prefix(context.resolved_path)
        if prefix is None:
            return None

        versions_dir = prefix / "n" / "versions" / "node"
        if not versions_dir.is_dir():
            return None

        return self._result(
            context,
            package_name=command,
            version=installed_version(versions_dir, prefix / "bin" / "node"),
        )


def n_prefix(path: Path) -> Path | None:
    """Return the install prefix of a ``{prefix}/bin/<cmd>`` path.

    Args:
        path: Path to a binary.

    Returns:
        The prefix, or None if the binary is not directly in a bin directory.
    """
    parent = path.parent
    if parent.name != "bin" or parent.parent == parent:
        return None
    return parent.parent


def installed_version(versions_dir: Path, active_node: Path | None = None) -> str | None:
    """Return the node version n has installed into the prefix.

    n copies the selected version into ``{prefix}/bin/node``, so the cached
    version whose ``bin/node`` has the same contents is the active one.
    Without a match the highest cached version is reported.

    Args:
        versions_dir: The ``n/versions/node`` directory.
        active_node: The ``{prefix}/bin/node`` binary, if it exists.

    Returns:
        Version directory name, or None if the cache holds no versions.
    """
    try:
        versions = sorted(
            (entry for entry in versions_dir.iterdir() if entry.is_dir()),
            key=lambda entry: _version_key(entry.name),
            reverse=True,
        )
    except OSError:
        return None
    if not versions:
        return None

    if active_node is not None and active_node.is_file():
        for entry in versions:
            if _same_contents(entry / "bin" / "node", active_node):
                return entry.name
    return versions[0].name


def _version_key(name: str) -> tuple[int, ...]:
    # Numeric comparison so 10.0.0 sorts above 9.11.0
    return tuple(int(part) if part.isdigit() else -1 for part in name.lstrip("v").split("."))


def _same_contents(first: Path, second: Path) -> bool:
    try:
        return filecmp.cmp(first, second, shallow=False)
    except OSError:
        return False
