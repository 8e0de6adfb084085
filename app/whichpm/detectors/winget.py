"""Winget package detector."""

from whichpm.detectors.base import Detector
from whichpm.models.detection import DetectionContext, DetectionResult
from whichpm.models.platform import Platform

# %LOCALAPPDATA%\Microsoft\WinGet\Packages\ (portable packages)
_MARKERS: tuple[str, ...] = ("\\WinGet\\Packages\\",)


class WingetDetector(Detector):
    """Detector for portable packages installed with winget."""

    platforms = frozenset({Platform.WINDOWS})

    @property
    def id(self) -> str:
        """Return winget as the manager id."""
        return "winget"

    @property
    def name(self) -> str:
        """Return Winget as the display name."""
        return "Winget"

    @property
    def priority(self) -> int:
        """Language tool tier."""
        return 85

    def detect(self, context: DetectionContext) -> DetectionResult | None:
        """Detect binaries in the winget packages directory."""
        if self._matching_path(context, _MARKERS) is None:
            return None
        return self._result(context, package_name=self._command_base(context))
