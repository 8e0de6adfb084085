"""npm global package detector."""

from whichpm.detectors.base import Detector
from whichpm.models.detection import DetectionContext, DetectionResult
from whichpm.utils.patterns import extract_node_package, with_windows_forms

_MARKERS: tuple[str, ...] = with_windows_forms("/node_modules/", "/.npm-global/")


class NpmGlobalDetector(Detector):
    """Detector for packages installed with ``npm install -g``.

    Matches any node_modules tree or ``~/.npm-global`` prefix in the
    symlink chain. The package name (including its scope) is read from
    the node_modules segment of the matching path.
    """

    @property
    def id(self) -> str:
        """Return npm_global as the manager id."""
        return "npm_global"

    @property
    def name(self) -> str:
        """Return the npm display name."""
        return "npm (global)"

    @property
    def priority(self) -> int:
        """Below yarn, pnpm and bun, whose trees also contain node_modules."""
        return 90

    def detect(self, context: DetectionContext) -> DetectionResult | None:
        """Detect node_modules and npm-global paths."""
        if self._matching_path(context, _MARKERS) is None:
            return None
        package = self._first_extracted(context, extract_node_package)
        return self._result(context, package_name=package)
