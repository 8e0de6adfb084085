"""OS standard location fallback detector."""

from whichpm.detectors.base import Detector
from whichpm.models.detection import DetectionContext, DetectionResult
from whichpm.models.platform import Platform
from whichpm.utils.patterns import contains_any, starts_with_any

_POSIX_PREFIXES: tuple[str, ...] = ("/bin/", "/sbin/", "/usr/bin/", "/usr/sbin/")

_SYSTEM_PREFIXES: dict[Platform, tuple[str, ...]] = {
    Platform.MACOS: (*_POSIX_PREFIXES, "/System/"),
    Platform.LINUX: _POSIX_PREFIXES,
}

# Compared lowercased; PATH usually spells it C:\WINDOWS\system32
_WINDOWS_MARKERS: tuple[str, ...] = ("\\windows\\system32\\", "\\windows\\syswow64\\")


class SystemDetector(Detector):
    """Fallback for binaries in the operating system's own directories.

    Runs last. The result names no package: the path only shows that the
    binary ships with (or was placed into) the OS.
    """

    @property
    def id(self) -> str:
        """Return system as the manager id."""
        return "system"

    @property
    def name(self) -> str:
        """Return the system display name."""
        return "System (OS Standard)"

    @property
    def priority(self) -> int:
        """Lowest priority of all detectors."""
        return 10

    def detect(self, context: DetectionContext) -> DetectionResult | None:
        """Detect resolved paths inside the platform's system directories."""
        resolved = str(context.resolved_path)
        if context.platform.is_posix:
            is_system = starts_with_any(resolved, _SYSTEM_PREFIXES[context.platform])
        else:
            is_system = contains_any(resolved.lower(), _WINDOWS_MARKERS)
        return self._result(context) if is_system else None
