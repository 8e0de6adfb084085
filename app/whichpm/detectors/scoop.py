"""Scoop package detector."""

from whichpm.detectors.base import Detector
from whichpm.models.detection import DetectionContext, DetectionResult
from whichpm.models.platform import Platform
from whichpm.utils.patterns import segments_after

# %USERPROFILE%\scoop\ (user) or %ProgramData%\scoop\ (global)
_APPS_MARKER = "\\scoop\\apps\\"
_MARKERS: tuple[str, ...] = (_APPS_MARKER, "\\scoop\\shims\\")

# Scoop links the active version as apps\{name}\current
_CURRENT_VERSION = "current"


class ScoopDetector(Detector):
    """Detector for apps installed with Scoop.

    App paths follow ``scoop\\apps\\{name}\\{version}\\...``. Shims carry
    no package information, so the command name stands in.
    """

    platforms = frozenset({Platform.WINDOWS})

    @property
    def id(self) -> str:
        """Return scoop as the manager id."""
        return "scoop"

    @property
    def name(self) -> str:
        """Return Scoop as the display name."""
        return "Scoop"

    @property
    def priority(self) -> int:
        """Language tool tier."""
        return 85

    def detect(self, context: DetectionContext) -> DetectionResult | None:
        """Detect Scoop app and shim paths."""
        if self._matching_path(context, _MARKERS) is None:
            return None

        for path in context.symlink_chain:
            name, version = extract_scoop_app(str(path))
            if name is not None:
                return self._result(context, package_name=name, version=version)

        return self._result(context, package_name=self._command_base(context))


def extract_scoop_app(text: str) -> tuple[str | None, str | None]:
    """Extract app name and version from a Scoop app path.

    Args:
        text: Path such as ``C:\\Users\\u\\scoop\\apps\\git\\2.43.0\\bin\\git.exe``.

    Returns:
        Tuple of (name, version); the version is None for the ``current``
        link, and both are None outside ``scoop\\apps``.
    """
    parts = segments_after(text, _APPS_MARKER)
    if not parts or not parts[0]:
        return None, None
    # apps\{name}\{version}\... needs a segment after the version
    if len(parts) < 3 or parts[1] in ("", _CURRENT_VERSION):
        return parts[0], None
    return parts[0], parts[1]
