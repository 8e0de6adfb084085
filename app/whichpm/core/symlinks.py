"""Symlink chain traversal.

Follows symlink indirection from a starting path and records every path
visited on the way to the final target.
"""

import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)


def follow_symlinks(path: str | Path) -> tuple[Path, ...]:
    """Follow a symlink chain and return every path visited.

    The first element is always the input path and the last element is the
    final target. Traversal stops at the first path that is not a symlink
    (or cannot be read), and before revisiting a path already in the chain.
    This function never raises.

    Args:
        path: Starting path. It does not need to exist.

    Returns:
        Tuple of paths with at least one element.
    """
    current = Path(path)
    chain: list[Path] = [current]
    seen: set[Path] = {current}

    while True:
        try:
            target = os.readlink(current)
        except (OSError, ValueError):
            # Not a symlink, missing, or unreadable: the chain ends here
            break

        resolved = _normalize(current.parent / target)
        if resolved in seen:
            logger.debug("Symlink cycle detected at %s", resolved)
            break

        chain.append(resolved)
        seen.add(resolved)
        current = resolved

    return tuple(chain)


def _normalize(path: Path) -> Path:
    """Remove '.' and '..' segments without following the final component.

    The parent directory is resolved on disk where possible so that '..'
    after a symlinked directory lands where the filesystem says it does.
    The final component is kept as-is so intermediate links stay visible
    in the chain.

    Args:
        path: Joined link target.

    Returns:
        Normalized path.
    """
    lexical = Path(os.path.normpath(path))
    if not lexical.name:
        return lexical

    try:
        parent = path.parent.resolve(strict=True)
    except (OSError, RuntimeError):
        return lexical

    return parent / path.name if path.name not in (".", "..") else lexical
