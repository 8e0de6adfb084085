"""bun global package detector."""

from whichpm.detectors.base import Detector
from whichpm.models.detection import DetectionContext, DetectionResult
from whichpm.utils.patterns import with_windows_forms

# ~/.bun/bin/ or ~/.bun/install/global/
_MARKERS: tuple[str, ...] = with_windows_forms("/.bun/bin/", "/.bun/install/global/")


class BunGlobalDetector(Detector):
    """Detector for packages installed with ``bun add -g``."""

    @property
    def id(self) -> str:
        """Return bun_global as the manager id."""
        return "bun_global"

    @property
    def name(self) -> str:
        """Return the bun display name."""
        return "bun (global)"

    @property
    def priority(self) -> int:
        """Checked before npm, since bun's global tree holds node_modules."""
        return 95

    def detect(self, context: DetectionContext) -> DetectionResult | None:
        """Detect bun's bin directory and global install tree."""
        if self._matching_path(context, _MARKERS) is None:
            return None
        return self._result(context, package_name=self._command_base(context))
