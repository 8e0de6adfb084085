"""RubyGems executable detector."""

from whichpm.detectors.base import Detector
from whichpm.models.detection import DetectionContext, DetectionResult
from whichpm.utils.patterns import contains_any, ends_with_any, with_windows_forms

# ~/.gem/ruby/*/bin/, /usr/local/lib/ruby/gems/*/bin/, /var/lib/gems/*/bin/
_GEM_ROOTS: tuple[str, ...] = with_windows_forms("/.gem/ruby/", "/ruby/gems/", "/var/lib/gems/")
_BIN_MARKERS: tuple[str, ...] = with_windows_forms("/bin/")
_BIN_SUFFIXES: tuple[str, ...] = with_windows_forms("/bin")


class GemDetector(Detector):
    """Detector for executables installed with ``gem install``."""

    @property
    def id(self) -> str:
        """Return gem as the manager id."""
        return "gem"

    @property
    def name(self) -> str:
        """Return RubyGems as the display name."""
        return "RubyGems"

    @property
    def priority(self) -> int:
        """Language tool tier."""
        return 85

    def detect(self, context: DetectionContext) -> DetectionResult | None:
        """Detect executables in a gem installation's bin directory."""
        matched = self._matching_path(context, predicate=_is_gem_bin)
        if matched is None:
            return None
        return self._result(context, package_name=self._command_base(context))


def _is_gem_bin(text: str) -> bool:
    """Check if a path is inside a gem root and a bin directory."""
    if not contains_any(text, _GEM_ROOTS):
        return False
    return contains_any(text, _BIN_MARKERS) or ends_with_any(text, _BIN_SUFFIXES)
