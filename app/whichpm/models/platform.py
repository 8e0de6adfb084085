"""Operating system family detection.

The platform is computed once at startup and passed explicitly to the
context builder and registry, so tests can inject any value without
depending on the host OS.
"""

import sys
from enum import Enum


class Platform(Enum):
    """Operating system families supported by the detectors."""

    MACOS = "macos"
    LINUX = "linux"
    WINDOWS = "windows"

    @property
    def display_name(self) -> str:
        """Return the human-readable platform name."""
        return _DISPLAY_NAMES[self]

    @property
    def is_posix(self) -> bool:
        """Check if the platform uses POSIX paths."""
        return self is not Platform.WINDOWS


_DISPLAY_NAMES: dict[Platform, str] = {
    Platform.MACOS: "macOS",
    Platform.LINUX: "Linux",
    Platform.WINDOWS: "Windows",
}


def current_platform(system: str | None = None) -> Platform:
    """Detect the operating system family of the running process.

    Other Unix-like systems (BSDs, Solaris, ...) are reported as Linux,
    since their binaries live in the same standard directories.

    Args:
        system: Value to classify instead of ``sys.platform``.

    Returns:
        Platform enum value.
    """
    value = (system if system is not None else sys.platform).lower()

    if value.startswith("darwin"):
        return Platform.MACOS
    if value.startswith(("win32", "cygwin", "msys")):
        return Platform.WINDOWS
    return Platform.LINUX
