"""Homebrew detector implementation.

Recognizes formulae installed into a Homebrew Cellar, on both macOS
(``/opt/homebrew``, ``/usr/local``) and Linux (``/home/linuxbrew``).
"""

from whichpm.detectors.base import POSIX_PLATFORMS, Detector
from whichpm.models.detection import Confidence, DetectionContext, DetectionResult
from whichpm.utils.patterns import contains_any, extract_cellar_package

# Homebrew prefixes outside the Cellar (casks, linked kegs, brew itself)
_PREFIX_MARKERS: tuple[str, ...] = (
    "/opt/homebrew/",
    "/usr/local/Homebrew/",
    "/home/linuxbrew/.linuxbrew/",
)


class HomebrewDetector(Detector):
    """Detector for Homebrew formulae.

    A Cellar path (``{prefix}/Cellar/{formula}/{version}/...``) anywhere
    in the symlink chain names the formula and its version, which is
    treated as verified. A resolved path elsewhere under a Homebrew
    prefix is only a likely match.
    """

    platforms = POSIX_PLATFORMS

    @property
    def id(self) -> str:
        """Return homebrew as the manager id."""
        return "homebrew"

    @property
    def name(self) -> str:
        """Return Homebrew as the display name."""
        return "Homebrew"

    @property
    def priority(self) -> int:
        """Cellar paths are the most specific signature of all."""
        return 100

    def detect(self, context: DetectionContext) -> DetectionResult | None:
        """Detect Cellar formulae and other Homebrew-prefixed binaries."""
        for path in context.symlink_chain:
            cellar = extract_cellar_package(str(path))
            if cellar is not None:
                formula, version = cellar
                return self._result(
                    context,
                    confidence=Confidence.HIGH,
                    package_name=formula,
                    version=version,
                )

        resolved = str(context.resolved_path)
        if contains_any(resolved, _PREFIX_MARKERS):
            return self._result(context)

        return None
