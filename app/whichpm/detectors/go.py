"""go install binary detector."""

from whichpm.detectors.base import Detector
from whichpm.models.detection import DetectionContext, DetectionResult
from whichpm.utils.patterns import contains_any, ends_with_any, with_windows_forms

# ~/go/bin/, $GOPATH/bin/ (%USERPROFILE%\go\bin\ on Windows)
_MARKERS: tuple[str, ...] = with_windows_forms("/go/bin/")
_SUFFIXES: tuple[str, ...] = with_windows_forms("/go/bin")

# Binaries shipped with the Go distribution itself ($GOROOT/bin)
_TOOLCHAIN_BINARIES: frozenset[str] = frozenset({"go", "gofmt"})


class GoDetector(Detector):
    """Detector for binaries installed with ``go install``.

    The Go toolchain keeps its own ``go`` and ``gofmt`` in a ``go/bin``
    directory too (e.g. ``/usr/local/go/bin/go``). Those are part of the
    Go distribution, not packages installed by ``go install``, and are
    not reported.
    """

    @property
    def id(self) -> str:
        """Return go as the manager id."""
        return "go"

    @property
    def name(self) -> str:
        """Return the go install display name."""
        return "go install"

    @property
    def priority(self) -> int:
        """Language tool tier."""
        return 85

    def detect(self, context: DetectionContext) -> DetectionResult | None:
        """Detect binaries in a GOPATH bin directory."""
        matched = self._matching_path(
            context,
            predicate=lambda text: _in_go_bin(text) and not _is_toolchain_binary(text),
        )
        if matched is None:
            return None
        return self._result(context, package_name=self._command_base(context))


def _in_go_bin(text: str) -> bool:
    """Check if a path lies in (or is) a go/bin directory."""
    return contains_any(text, _MARKERS) or ends_with_any(text, _SUFFIXES)


def _is_toolchain_binary(text: str) -> bool:
    """Check if a path is a Go distribution binary directly inside go/bin.

    Args:
        text: Path string.

    Returns:
        True for paths like ``/usr/local/go/bin/go`` or ``C:\\Go\\bin\\gofmt.exe``.
    """
    normalized = text.replace("\\", "/")
    parent, _, filename = normalized.rpartition("/")
    stem = filename.rsplit(".", 1)[0] if filename.lower().endswith(".exe") else filename
    return parent.lower().endswith("/go/bin") and stem in _TOOLCHAIN_BINARIES
