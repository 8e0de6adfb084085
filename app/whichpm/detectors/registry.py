"""Detector registry.

Holds the ordered set of detectors and runs them against a detection
context, first match wins.
"""

import logging
from collections.abc import Iterable

from whichpm.detectors.apt import AptDetector
from whichpm.detectors.base import Detector
from whichpm.detectors.bun import BunGlobalDetector
from whichpm.detectors.cargo import CargoDetector
from whichpm.detectors.chocolatey import ChocolateyDetector
from whichpm.detectors.flatpak import FlatpakDetector
from whichpm.detectors.gem import GemDetector
from whichpm.detectors.go import GoDetector
from whichpm.detectors.homebrew import HomebrewDetector
from whichpm.detectors.mise import MiseDetector
from whichpm.detectors.n import NDetector
from whichpm.detectors.nix import NixDetector
from whichpm.detectors.npm import NpmGlobalDetector
from whichpm.detectors.pipx import PipxDetector
from whichpm.detectors.pnpm import PnpmGlobalDetector
from whichpm.detectors.scoop import ScoopDetector
from whichpm.detectors.snap import SnapDetector
from whichpm.detectors.system import SystemDetector
from whichpm.detectors.winget import WingetDetector
from whichpm.detectors.yarn import YarnGlobalDetector
from whichpm.models.detection import DetectionContext, DetectionResult
from whichpm.models.platform import Platform
from whichpm.verifiers import DEFAULT_QUERY_TIMEOUT, DpkgVerifier, SnapVerifier

logger = logging.getLogger(__name__)


def default_detectors(
    verify: bool = True,
    timeout: float = DEFAULT_QUERY_TIMEOUT,
) -> list[Detector]:
    """Create the full detector catalogue.

    Args:
        verify: Attach package database verifiers to apt and snap.
        timeout: Seconds allowed per verification query.

    Returns:
        List of detector instances, unordered.
    """
    dpkg = DpkgVerifier(timeout=timeout) if verify else None
    snap = SnapVerifier(timeout=timeout) if verify else None

    return [
        HomebrewDetector(),
        NixDetector(),
        BunGlobalDetector(),
        NDetector(),
        PnpmGlobalDetector(),
        YarnGlobalDetector(),
        MiseDetector(),
        NpmGlobalDetector(),
        CargoDetector(),
        GemDetector(),
        GoDetector(),
        PipxDetector(),
        ScoopDetector(),
        WingetDetector(),
        ChocolateyDetector(),
        FlatpakDetector(),
        SnapDetector(verifier=snap),
        AptDetector(verifier=dpkg),
        SystemDetector(),
    ]


KNOWN_DETECTOR_IDS: frozenset[str] = frozenset(d.id for d in default_detectors(verify=False))


class DetectorRegistry:
    """Ordered, immutable collection of detectors.

    Detectors are sorted by descending priority, ties broken by id, so
    the evaluation order is fully deterministic.

    Example:
        >>> registry = DetectorRegistry(platform=Platform.LINUX)
        >>> result = registry.detect(context)
    """

    def __init__(
        self,
        detectors: Iterable[Detector] | None = None,
        platform: Platform | None = None,
        verify: bool = True,
        disabled: Iterable[str] = (),
        timeout: float = DEFAULT_QUERY_TIMEOUT,
    ) -> None:
        """Initialize the registry.

        Args:
            detectors: Detectors to register. Defaults to the full catalogue.
            platform: Host platform. Detectors that cannot apply to it are
                left out. None keeps every detector.
            verify: Attach verifiers to the default catalogue.
            disabled: Detector ids to leave out.
            timeout: Seconds allowed per verification query.
        """
        if detectors is None:
            detectors = default_detectors(verify=verify, timeout=timeout)

        skip = frozenset(disabled)
        kept = [
            d
            for d in detectors
            if d.id not in skip and (platform is None or d.supports_platform(platform))
        ]
        self._detectors: tuple[Detector, ...] = tuple(
            sorted(kept, key=lambda d: (-d.priority, d.id))
        )

    @property
    def detectors(self) -> tuple[Detector, ...]:
        """Return the detectors in evaluation order."""
        return self._detectors

    def __len__(self) -> int:
        return len(self._detectors)

    def detect(self, context: DetectionContext, verbose: bool = False) -> DetectionResult | None:
        """Run the detectors in order and return the first match.

        Detectors that do not support the context's platform are skipped
        without being invoked.

        Args:
            context: Context of the command under investigation.
            verbose: Log each attempt at INFO instead of DEBUG.

        Returns:
            First matching DetectionResult, or None if nothing matched.
        """
        level = logging.INFO if verbose else logging.DEBUG

        for detector in self._detectors:
            if not detector.supports_platform(context.platform):
                continue

            logger.log(level, "Trying %s...", detector.name)
            result = detector.detect(context)
            if result is not None:
                logger.log(level, "Matched: %s", detector.name)
                return result

        return None
