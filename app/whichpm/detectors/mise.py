"""mise (formerly rtx) runtime detector."""

from whichpm.detectors.base import Detector
from whichpm.models.detection import DetectionContext, DetectionResult
from whichpm.utils.patterns import ends_with_any, segments_after, with_windows_forms

# ~/.local/share/mise/installs/{tool}/{version}/ ($XDG_DATA_HOME/mise on Linux,
# %LOCALAPPDATA%\mise on Windows), plus the shims directory
_INSTALL_MARKERS: tuple[str, ...] = with_windows_forms("/mise/installs/")
_SHIM_MARKERS: tuple[str, ...] = with_windows_forms("/mise/shims/")
_SHIM_SUFFIXES: tuple[str, ...] = with_windows_forms("/mise/shims")


class MiseDetector(Detector):
    """Detector for runtimes and tools managed by mise.

    Install paths follow ``installs/{tool}/{version}/...`` and name both
    the tool and its version. Shims carry neither.
    """

    @property
    def id(self) -> str:
        """Return mise as the manager id."""
        return "mise"

    @property
    def name(self) -> str:
        """Return mise as the display name."""
        return "mise"

    @property
    def priority(self) -> int:
        """Checked before npm so node_modules inside a mise install match here."""
        return 90

    def detect(self, context: DetectionContext) -> DetectionResult | None:
        """Detect mise install trees and shims."""
        matched = self._matching_path(
            context,
            _INSTALL_MARKERS + _SHIM_MARKERS,
            predicate=lambda text: ends_with_any(text, _SHIM_SUFFIXES),
        )
        if matched is None:
            return None

        tool, version = extract_mise_install(matched)
        return self._result(context, package_name=tool, version=version)


def extract_mise_install(text: str) -> tuple[str | None, str | None]:
    """Extract tool and version from a mise install path.

    Args:
        text: Path such as ``~/.local/share/mise/installs/node/20.10.0/bin/node``.

    Returns:
        Tuple of (tool, version); both are None for shim paths.
    """
    for marker in _INSTALL_MARKERS:
        parts = segments_after(text, marker)
        if parts and parts[0]:
            version = parts[1] if len(parts) >= 2 and parts[1] else None
            return parts[0], version
    return None, None
