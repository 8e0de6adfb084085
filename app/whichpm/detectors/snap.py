"""Snap package detector."""

import logging

from whichpm.detectors.base import Detector
from whichpm.models.detection import Confidence, DetectionContext, DetectionResult
from whichpm.models.platform import Platform
from whichpm.utils.patterns import extract_snap_launcher, extract_snap_name
from whichpm.verifiers.base import Verifier

logger = logging.getLogger(__name__)

_MARKERS: tuple[str, ...] = ("/snap/bin/", "/snapd/snap/")


class SnapDetector(Detector):
    """Detector for snaps.

    Launchers live in ``/snap/bin`` and point at ``/usr/bin/snap``; the
    snap itself is mounted at ``/snap/{name}/{revision}``. With a verifier
    the installed version is read from ``snap list`` and the result is
    upgraded to HIGH confidence.
    """

    platforms = frozenset({Platform.LINUX})

    def __init__(self, verifier: Verifier | None = None) -> None:
        """Initialize the detector.

        Args:
            verifier: Optional snap database verifier.
        """
        self._verifier = verifier

    @property
    def id(self) -> str:
        """Return snap as the manager id."""
        return "snap"

    @property
    def name(self) -> str:
        """Return Snap as the display name."""
        return "Snap"

    @property
    def priority(self) -> int:
        """Distribution package tier."""
        return 80

    def detect(self, context: DetectionContext) -> DetectionResult | None:
        """Detect snap launchers and snap mount paths."""
        matched = self._matching_path(
            context,
            _MARKERS,
            predicate=lambda text: text.startswith("/snap/"),
        )
        if matched is None:
            return None

        # The mount names the snap; otherwise the launcher closest to snap does
        target = next(
            (p for p in context.symlink_chain if extract_snap_name(str(p)) is not None),
            None,
        )
        if target is None:
            launchers = [
                p for p in context.symlink_chain if extract_snap_launcher(str(p)) is not None
            ]
            target = launchers[-1] if launchers else context.command_path

        text = str(target)
        package = (
            extract_snap_name(text) or extract_snap_launcher(text) or self._command_base(context)
        )

        if self._verifier is not None:
            info = self._verifier.query(target)
            if info is not None:
                return self._result(
                    context,
                    confidence=Confidence.HIGH,
                    package_name=info.name,
                    version=info.version,
                )
            logger.debug("snap list has no entry for %s", package)

        return self._result(context, package_name=package)
