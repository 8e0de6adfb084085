"""Nix package detector."""

from whichpm.detectors.base import POSIX_PLATFORMS, Detector
from whichpm.models.detection import DetectionContext, DetectionResult
from whichpm.utils.patterns import ends_with_any, extract_nix_store_package

# Store paths plus the profile links pointing into the store
_MARKERS: tuple[str, ...] = (
    "/nix/store/",
    "/.nix-profile/bin/",
    "/nix/var/nix/profiles/",
    "/current-system/sw/bin/",
    "/profiles/per-user/",
)
_SUFFIXES: tuple[str, ...] = ("/.nix-profile/bin",)


class NixDetector(Detector):
    """Detector for packages installed with Nix.

    Store paths embed the package, e.g.
    ``/nix/store/{hash}-ripgrep-14.1.0/bin/rg``. Nix outranks the language
    tools because a store path can also contain ``go/bin`` or
    ``node_modules`` segments.
    """

    platforms = POSIX_PLATFORMS

    @property
    def id(self) -> str:
        """Return nix as the manager id."""
        return "nix"

    @property
    def name(self) -> str:
        """Return Nix as the display name."""
        return "Nix"

    @property
    def priority(self) -> int:
        """Checked right after Homebrew."""
        return 98

    def detect(self, context: DetectionContext) -> DetectionResult | None:
        """Detect Nix store paths and Nix profile links."""
        matched = self._matching_path(
            context,
            _MARKERS,
            predicate=lambda text: ends_with_any(text, _SUFFIXES),
        )
        if matched is None:
            return None

        for path in context.symlink_chain:
            found = extract_nix_store_package(str(path))
            if found is not None:
                name, version = found
                return self._result(context, package_name=name, version=version)

        return self._result(context, package_name=self._command_base(context))
