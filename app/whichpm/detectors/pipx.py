"""pipx application detector.

Only pipx virtualenvs are recognized. ``pip install --user`` shares
``~/.local/bin`` with too many other tools to be told apart by path.
"""

from whichpm.detectors.base import Detector
from whichpm.models.detection import DetectionContext, DetectionResult
from whichpm.utils.patterns import first_segment_after, with_windows_forms

# ~/.local/pipx/venvs/{package}/bin/ (venvs\{package}\Scripts\ on Windows)
_MARKERS: tuple[str, ...] = with_windows_forms("/pipx/venvs/")


class PipxDetector(Detector):
    """Detector for applications installed with ``pipx install``."""

    @property
    def id(self) -> str:
        """Return pipx as the manager id."""
        return "pipx"

    @property
    def name(self) -> str:
        """Return pipx as the display name."""
        return "pipx"

    @property
    def priority(self) -> int:
        """Language tool tier."""
        return 85

    def detect(self, context: DetectionContext) -> DetectionResult | None:
        """Detect binaries inside a pipx virtualenv."""
        matched = self._matching_path(context, _MARKERS)
        if matched is None:
            return None
        return self._result(context, package_name=first_segment_after(matched, _MARKERS))
