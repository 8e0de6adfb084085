"""Chocolatey package detector."""

from whichpm.detectors.base import Detector
from whichpm.models.detection import DetectionContext, DetectionResult
from whichpm.models.platform import Platform

# C:\ProgramData\chocolatey\bin\ and lib\, or a custom Chocolatey root
_MARKERS: tuple[str, ...] = ("\\ProgramData\\chocolatey\\", "\\Chocolatey\\")


class ChocolateyDetector(Detector):
    """Detector for packages installed with Chocolatey."""

    platforms = frozenset({Platform.WINDOWS})

    @property
    def id(self) -> str:
        """Return chocolatey as the manager id."""
        return "chocolatey"

    @property
    def name(self) -> str:
        """Return Chocolatey as the display name."""
        return "Chocolatey"

    @property
    def priority(self) -> int:
        """Distribution package tier."""
        return 80

    def detect(self, context: DetectionContext) -> DetectionResult | None:
        """Detect binaries under a Chocolatey install root."""
        if self._matching_path(context, _MARKERS) is None:
            return None
        return self._result(context, package_name=self._command_base(context))
