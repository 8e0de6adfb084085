"""Detection context builder.

Composes path resolution, symlink traversal, and platform identification
into the immutable DetectionContext that detectors inspect.
"""

import logging

from whichpm.core.resolver import resolve_command
from whichpm.core.symlinks import follow_symlinks
from whichpm.models.detection import DetectionContext
from whichpm.models.platform import Platform, current_platform

logger = logging.getLogger(__name__)


def build_context(
    command: str,
    verbose: bool = False,
    *,
    platform: Platform | None = None,
    search_path: str | None = None,
) -> DetectionContext:
    """Build the detection context for a command.

    Args:
        command: Command name (or path) to investigate.
        verbose: Log resolution steps at INFO instead of DEBUG.
        platform: Platform to detect for. Defaults to the running OS.
        search_path: Search path to use instead of PATH.

    Returns:
        DetectionContext for the command.

    Raises:
        CommandNotFoundError: If the command does not resolve to an executable.
    """
    level = logging.INFO if verbose else logging.DEBUG

    logger.log(level, "Resolving path for '%s'...", command)
    command_path = resolve_command(command, search_path=search_path)
    logger.log(level, "Found at %s", command_path)

    context = DetectionContext.from_chain(
        command_name=command,
        chain=follow_symlinks(command_path) or (command_path,),
        platform=platform if platform is not None else current_platform(),
    )
    if context.has_symlinks:
        logger.log(level, "Following symlink to %s", context.resolved_path)

    return context
