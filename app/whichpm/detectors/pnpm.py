"""pnpm global package detector."""

from functools import partial

from whichpm.detectors.base import Detector
from whichpm.models.detection import DetectionContext, DetectionResult
from whichpm.utils.patterns import NODE_INFRA_SEGMENTS, ends_with_any, extract_node_package

# Unix: ~/.local/share/pnpm/ ($PNPM_HOME), .../pnpm/global/5/node_modules/
# Windows: %LOCALAPPDATA%\pnpm\, %APPDATA%\pnpm\
_MARKERS: tuple[str, ...] = (
    "/.local/share/pnpm/",
    "/pnpm/global/",
    "\\pnpm\\",
    "\\AppData\\Local\\pnpm",
    "\\AppData\\Roaming\\pnpm",
)
_SUFFIXES: tuple[str, ...] = ("/.local/share/pnpm",)

# pnpm's content-addressed virtual store lives in node_modules/.pnpm
_PNPM_SKIP: frozenset[str] = NODE_INFRA_SEGMENTS | {".pnpm"}

_extract_pnpm_package = partial(extract_node_package, skip=_PNPM_SKIP)


class PnpmGlobalDetector(Detector):
    """Detector for packages installed with ``pnpm add -g``."""

    @property
    def id(self) -> str:
        """Return pnpm_global as the manager id."""
        return "pnpm_global"

    @property
    def name(self) -> str:
        """Return the pnpm display name."""
        return "pnpm (global)"

    @property
    def priority(self) -> int:
        """Above npm and yarn."""
        return 92

    def detect(self, context: DetectionContext) -> DetectionResult | None:
        """Detect PNPM_HOME launchers and pnpm's global store."""
        matched = self._matching_path(
            context,
            _MARKERS,
            predicate=lambda text: ends_with_any(text, _SUFFIXES),
        )
        if matched is None:
            return None

        package = self._first_extracted(context, _extract_pnpm_package)
        return self._result(context, package_name=package or self._command_base(context))
