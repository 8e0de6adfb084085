"""Detection orchestrator.

Builds the detection context for a command, runs it through the detector
registry, and falls back to an "unknown" result when no detector matches.
"""

import logging

from whichpm.core.context import build_context
from whichpm.detectors.registry import DetectorRegistry
from whichpm.models.detection import DetectionResult
from whichpm.models.platform import Platform

logger = logging.getLogger(__name__)


class DetectionOrchestrator:
    """Runs the full detection flow for commands.

    The orchestrator holds a registry and can be reused for any number of
    commands. It never raises for a command that resolves: the worst
    outcome is an UNCERTAIN "unknown" result.

    Example:
        >>> orchestrator = DetectionOrchestrator()
        >>> result = orchestrator.detect("git")
        >>> result.manager_id
        'homebrew'
    """

    def __init__(
        self,
        registry: DetectorRegistry | None = None,
        platform: Platform | None = None,
    ) -> None:
        """Initialize the orchestrator.

        Args:
            registry: Detector registry to use. Defaults to the full catalogue
                for the platform.
            platform: Platform to detect for. Defaults to the running OS.
        """
        self._platform = platform
        self._registry = registry if registry is not None else DetectorRegistry(platform=platform)

    @property
    def registry(self) -> DetectorRegistry:
        """Return the detector registry."""
        return self._registry

    def detect(
        self,
        command: str,
        verbose: bool = False,
        *,
        search_path: str | None = None,
    ) -> DetectionResult:
        """Detect which package manager installed a command.

        Args:
            command: Command name to investigate.
            verbose: Log each step at INFO instead of DEBUG.
            search_path: Search path to use instead of PATH.

        Returns:
            The first matching DetectionResult, or the unknown result.

        Raises:
            CommandNotFoundError: If the command is not on the search path.
        """
        context = build_context(
            command,
            verbose,
            platform=self._platform,
            search_path=search_path,
        )

        result = self._registry.detect(context, verbose=verbose)
        if result is not None:
            return result

        logger.log(
            logging.INFO if verbose else logging.DEBUG,
            "No package manager matched %s",
            context.resolved_path,
        )
        return DetectionResult.unknown(context)


def detect_command(
    command: str,
    verbose: bool = False,
    *,
    platform: Platform | None = None,
    registry: DetectorRegistry | None = None,
    search_path: str | None = None,
) -> DetectionResult:
    """Detect which package manager installed a command.

    Args:
        command: Command name to investigate.
        verbose: Log each step at INFO instead of DEBUG.
        platform: Platform to detect for. Defaults to the running OS.
        registry: Detector registry to use. Defaults to the full catalogue.
        search_path: Search path to use instead of PATH.

    Returns:
        DetectionResult for the command; never None.

    Raises:
        CommandNotFoundError: If the command is not on the search path.
    """
    orchestrator = DetectionOrchestrator(registry=registry, platform=platform)
    return orchestrator.detect(command, verbose, search_path=search_path)
