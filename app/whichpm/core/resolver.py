"""Command-to-path resolution.

Maps a command name to the first matching executable on the search path,
the same way a shell would pick it.
"""

import logging
import shutil
from pathlib import Path

from whichpm.core.errors import CommandNotFoundError

logger = logging.getLogger(__name__)


def resolve_command(name: str, search_path: str | None = None) -> Path:
    """Resolve a command name to an absolute executable path.

    Search locations are tried in their configured order. A name that
    already contains a directory separator is checked directly. Symlinks
    are not followed: the path is returned as listed by the search.

    Args:
        name: Command name or path to resolve.
        search_path: Search path to use instead of the PATH environment
            variable (os.pathsep-separated).

    Returns:
        Absolute path to the first executable match.

    Raises:
        CommandNotFoundError: If no executable matches.
    """
    if not name:
        raise CommandNotFoundError(name)

    found = shutil.which(name, path=search_path)
    if found is None:
        logger.debug("No executable named %r on search path", name)
        raise CommandNotFoundError(name)

    return Path(found).absolute()
