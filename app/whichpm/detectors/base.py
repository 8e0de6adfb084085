"""Abstract base class for package manager detectors.

This module defines the Detector interface that all package manager
detectors must implement.
"""

from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable
from pathlib import Path

from whichpm.models.detection import Confidence, DetectionContext, DetectionResult
from whichpm.models.platform import Platform
from whichpm.utils.patterns import contains_any

ALL_PLATFORMS: frozenset[Platform] = frozenset(Platform)
POSIX_PLATFORMS: frozenset[Platform] = frozenset({Platform.MACOS, Platform.LINUX})


class Detector(ABC):
    """Abstract base class for all package manager detectors.

    A detector inspects a DetectionContext and decides whether the command
    was installed by its package manager. Detectors may run read-only
    queries (filesystem checks, package database lookups) but never change
    system state, and treat a missing query tool as "not this manager".

    Example:
        >>> detector = HomebrewDetector()
        >>> if detector.supports_platform(context.platform):
        ...     result = detector.detect(context)
    """

    #: Platforms this detector applies to. Override in subclasses.
    platforms: frozenset[Platform] = ALL_PLATFORMS

    @property
    @abstractmethod
    def id(self) -> str:
        """Return the stable short key of the package manager.

        Returns:
            Machine-readable identifier (e.g., 'homebrew', 'npm_global').
        """

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the human display name of the package manager."""

    @property
    @abstractmethod
    def priority(self) -> int:
        """Return the evaluation priority. Higher values run earlier."""

    @abstractmethod
    def detect(self, context: DetectionContext) -> DetectionResult | None:
        """Check whether the context matches this package manager.

        Args:
            context: Snapshot of the command under investigation.

        Returns:
            DetectionResult if the command belongs to this manager,
            None otherwise.
        """

    def supports_platform(self, platform: Platform) -> bool:
        """Check if this detector should be tried on a platform.

        Args:
            platform: Platform of the detection context.

        Returns:
            True if the package manager exists on that platform.
        """
        return platform in self.platforms

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self.id!r}, priority={self.priority})"

    def _result(
        self,
        context: DetectionContext,
        *,
        confidence: Confidence = Confidence.MEDIUM,
        package_name: str | None = None,
        version: str | None = None,
    ) -> DetectionResult:
        """Build a result bound to this detector's identity.

        Args:
            context: Context the detection ran against.
            confidence: Trust level of the evidence.
            package_name: Package the command belongs to (if known).
            version: Installed version (if known).

        Returns:
            DetectionResult carrying the context's paths.
        """
        return DetectionResult(
            manager_id=self.id,
            manager_name=self.name,
            confidence=confidence,
            command_path=context.command_path,
            resolved_path=context.resolved_path,
            package_name=package_name,
            version=version,
        )

    @staticmethod
    def _matching_path(
        context: DetectionContext,
        markers: Iterable[str] = (),
        predicate: Callable[[str], bool] | None = None,
    ) -> str | None:
        """Find the first chain path containing a marker or passing a predicate.

        Args:
            context: Context whose symlink chain is scanned.
            markers: Substrings that identify the package manager.
            predicate: Extra test applied to each path string.

        Returns:
            The matching path as a string, or None.
        """
        markers = tuple(markers)
        for path in context.symlink_chain:
            text = str(path)
            if markers and contains_any(text, markers):
                return text
            if predicate is not None and predicate(text):
                return text
        return None

    @staticmethod
    def _first_extracted(
        context: DetectionContext,
        extract: Callable[[str], str | None],
    ) -> str | None:
        """Return the first value an extractor finds along the chain.

        Args:
            context: Context whose symlink chain is scanned.
            extract: Function pulling a value out of a path string.

        Returns:
            First non-None extracted value, or None.
        """
        for path in context.symlink_chain:
            value = extract(str(path))
            if value is not None:
                return value
        return None

    @staticmethod
    def _command_base(context: DetectionContext) -> str:
        """Return the bare command name, without directories or extension."""
        name = context.command_name.replace("\\", "/").rsplit("/", 1)[-1]
        return Path(name).stem if name.lower().endswith((".exe", ".cmd", ".bat")) else name
