"""Yarn global package detector."""

from whichpm.detectors.base import Detector
from whichpm.models.detection import DetectionContext, DetectionResult
from whichpm.utils.patterns import ends_with_any, extract_node_package

# Unix: ~/.yarn/bin/, ~/.config/yarn/global/node_modules/
# Windows: %LOCALAPPDATA%\Yarn\bin\, %LOCALAPPDATA%\Yarn\Data\global\node_modules\
_MARKERS: tuple[str, ...] = (
    "/.yarn/bin/",
    "/yarn/global/node_modules/",
    "\\Yarn\\bin\\",
    "\\Yarn\\Data\\global\\node_modules\\",
)
_SUFFIXES: tuple[str, ...] = ("/.yarn/bin", "\\Yarn\\bin")


class YarnGlobalDetector(Detector):
    """Detector for packages installed with ``yarn global add``.

    Yarn links its launchers from ``~/.yarn/bin`` into its own global
    node_modules tree, so the package name is usually found on a later
    element of the symlink chain.
    """

    @property
    def id(self) -> str:
        """Return yarn_global as the manager id."""
        return "yarn_global"

    @property
    def name(self) -> str:
        """Return the yarn display name."""
        return "yarn (global)"

    @property
    def priority(self) -> int:
        """Above npm, whose node_modules signature also matches yarn trees."""
        return 91

    def detect(self, context: DetectionContext) -> DetectionResult | None:
        """Detect yarn global launchers and its global node_modules tree."""
        matched = self._matching_path(
            context,
            _MARKERS,
            predicate=lambda text: ends_with_any(text, _SUFFIXES),
        )
        if matched is None:
            return None

        package = self._first_extracted(context, extract_node_package)
        return self._result(context, package_name=package or self._command_base(context))
