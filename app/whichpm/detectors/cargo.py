"""Cargo installed binary detector."""

from whichpm.detectors.base import Detector
from whichpm.models.detection import DetectionContext, DetectionResult
from whichpm.utils.patterns import ends_with_any, with_windows_forms

# ~/.cargo/bin/ or $CARGO_HOME/bin/ (%USERPROFILE%\.cargo\bin\ on Windows)
_MARKERS: tuple[str, ...] = with_windows_forms("/.cargo/bin/")
_SUFFIXES: tuple[str, ...] = with_windows_forms("/.cargo/bin")


class CargoDetector(Detector):
    """Detector for binaries installed with ``cargo install``.

    Cargo does not record which crate a binary came from in its path, so
    the command name stands in for the package.
    """

    @property
    def id(self) -> str:
        """Return cargo as the manager id."""
        return "cargo"

    @property
    def name(self) -> str:
        """Return Cargo as the display name."""
        return "Cargo"

    @property
    def priority(self) -> int:
        """Language tool tier."""
        return 85

    def detect(self, context: DetectionContext) -> DetectionResult | None:
        """Detect binaries in Cargo's bin directory."""
        matched = self._matching_path(
            context,
            _MARKERS,
            predicate=lambda text: ends_with_any(text, _SUFFIXES),
        )
        if matched is None:
            return None
        return self._result(context, package_name=self._command_base(context))
