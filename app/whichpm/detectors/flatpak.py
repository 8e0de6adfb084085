"""Flatpak application detector."""

from whichpm.detectors.base import Detector
from whichpm.models.detection import DetectionContext, DetectionResult
from whichpm.models.platform import Platform
from whichpm.utils.patterns import first_segment_after

# /var/lib/flatpak/exports/bin/{app id} and ~/.local/share/flatpak/exports/bin/{app id}
_EXPORTS_MARKER = "/flatpak/exports/bin/"
# /var/lib/flatpak/app/{app id}/{arch}/{branch}/...
_APP_MARKER = "/flatpak/app/"


class FlatpakDetector(Detector):
    """Detector for Flatpak applications.

    Flatpak exports a launcher named after the application id (for example
    ``org.gnome.Calculator``) and symlinks it into the app's deployment.
    """

    platforms = frozenset({Platform.LINUX})

    @property
    def id(self) -> str:
        """Return flatpak as the manager id."""
        return "flatpak"

    @property
    def name(self) -> str:
        """Return Flatpak as the display name."""
        return "Flatpak"

    @property
    def priority(self) -> int:
        """Distribution package tier."""
        return 80

    def detect(self, context: DetectionContext) -> DetectionResult | None:
        """Detect Flatpak export launchers and app deployments."""
        if self._matching_path(context, (_EXPORTS_MARKER, _APP_MARKER)) is None:
            return None
        app_id = self._first_extracted(context, extract_flatpak_app_id)
        return self._result(context, package_name=app_id or self._command_base(context))


def extract_flatpak_app_id(text: str) -> str | None:
    """Extract the application id from a Flatpak path.

    Args:
        text: Path string to search.

    Returns:
        Application id, or None.
    """
    return first_segment_after(text, (_EXPORTS_MARKER, _APP_MARKER))
