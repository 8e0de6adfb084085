"""APT (dpkg) package detector."""

from whichpm.detectors.base import Detector
from whichpm.models.detection import Confidence, DetectionContext, DetectionResult
from whichpm.models.platform import Platform
from whichpm.utils.patterns import starts_with_any
from whichpm.verifiers.base import Verifier

# Directories dpkg-managed binaries are installed into
_SYSTEM_PREFIXES: tuple[str, ...] = ("/usr/bin/", "/usr/sbin/", "/bin/", "/sbin/")


class AptDetector(Detector):
    """Detector for packages installed with apt.

    The system bin directories are shared with manual installs and other
    tools, so a path match alone proves nothing. A match needs the dpkg
    database to confirm ownership; without a verifier this detector never
    matches and the command falls through to the system fallback.
    """

    platforms = frozenset({Platform.LINUX})

    def __init__(self, verifier: Verifier | None = None) -> None:
        """Initialize the detector.

        Args:
            verifier: dpkg ownership verifier. None disables the detector.
        """
        self._verifier = verifier

    @property
    def id(self) -> str:
        """Return apt as the manager id."""
        return "apt"

    @property
    def name(self) -> str:
        """Return apt as the display name."""
        return "apt"

    @property
    def priority(self) -> int:
        """Below every path-based detector, above the system fallback."""
        return 50

    def detect(self, context: DetectionContext) -> DetectionResult | None:
        """Detect dpkg-owned binaries in the system directories."""
        if self._verifier is None:
            return None
        if not starts_with_any(str(context.resolved_path), _SYSTEM_PREFIXES):
            return None

        info = self._verifier.query(context.resolved_path)
        if info is None:
            return None
        return self._result(
            context,
            confidence=Confidence.HIGH,
            package_name=info.name,
            version=info.version,
        )
