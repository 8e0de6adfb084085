"""Detection models.

This module defines the immutable values that flow through the detection
pipeline: the context snapshot built for a command, the confidence scale,
and the final detection result.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum
from functools import total_ordering
from pathlib import Path
from typing import Any

from whichpm.models.platform import Platform


@total_ordering
class Confidence(Enum):
    """How trustworthy a detector's evidence is.

    Members compare by trust level, so ``Confidence.HIGH > Confidence.LOW``.
    """

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"
    UNCERTAIN = "uncertain"

    @property
    def rank(self) -> int:
        """Return the numeric trust level (higher is more trusted)."""
        return _RANKS[self]

    @property
    def label(self) -> str:
        """Return the short label used in text output."""
        return _LABELS[self]

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Confidence):
            return NotImplemented
        return self.rank < other.rank


_RANKS: dict[Confidence, int] = {
    Confidence.HIGH: 3,
    Confidence.MEDIUM: 2,
    Confidence.LOW: 1,
    Confidence.UNCERTAIN: 0,
}

_LABELS: dict[Confidence, str] = {
    Confidence.HIGH: "verified",
    Confidence.MEDIUM: "likely",
    Confidence.LOW: "possible",
    Confidence.UNCERTAIN: "uncertain",
}


@dataclass(frozen=True, slots=True)
class DetectionContext:
    """Snapshot of everything known about the command under investigation.

    Attributes:
        command_name: Command name as given by the caller.
        command_path: Path the command resolved to, before following links.
        symlink_chain: Paths visited while following symlinks. The first
            element is ``command_path``, the last is the final target.
        resolved_path: Final target of the symlink chain.
        platform: Operating system family the detection runs for.
    """

    command_name: str
    command_path: Path
    symlink_chain: tuple[Path, ...]
    resolved_path: Path
    platform: Platform

    def __post_init__(self) -> None:
        """Validate the symlink chain invariants."""
        if not self.symlink_chain:
            msg = "Symlink chain cannot be empty"
            raise ValueError(msg)
        if self.symlink_chain[0] != self.command_path:
            msg = "Symlink chain must start with the command path"
            raise ValueError(msg)
        if self.symlink_chain[-1] != self.resolved_path:
            msg = "Resolved path must be the last element of the symlink chain"
            raise ValueError(msg)

    @classmethod
    def from_chain(
        cls,
        command_name: str,
        chain: Iterable[str | Path],
        platform: Platform,
    ) -> DetectionContext:
        """Create a context from a symlink chain.

        Args:
            command_name: Command name as given by the caller.
            chain: Paths from the resolved command to its final target.
            platform: Operating system family.

        Returns:
            DetectionContext with command and resolved paths taken from
            the ends of the chain.

        Raises:
            ValueError: If the chain is empty.
        """
        paths = tuple(Path(p) for p in chain)
        if not paths:
            msg = "Symlink chain cannot be empty"
            raise ValueError(msg)
        return cls(
            command_name=command_name,
            command_path=paths[0],
            symlink_chain=paths,
            resolved_path=paths[-1],
            platform=platform,
        )

    @property
    def has_symlinks(self) -> bool:
        """Check if the command path is a symlink to another file."""
        return len(self.symlink_chain) > 1


@dataclass(frozen=True, slots=True)
class DetectionResult:
    """Outcome of a detection run.

    Attributes:
        manager_id: Short machine key (e.g., 'homebrew', 'npm_global').
        manager_name: Human display name of the package manager.
        package_name: Package the command belongs to (if known).
        version: Installed package version (if known).
        confidence: Trust level of the evidence behind this result.
        command_path: Path the command resolved to.
        resolved_path: Final target after following symlinks.
    """

    manager_id: str
    manager_name: str
    confidence: Confidence
    command_path: Path
    resolved_path: Path
    package_name: str | None = field(default=None)
    version: str | None = field(default=None)

    def __post_init__(self) -> None:
        """Validate result data after initialization."""
        if not self.manager_id:
            msg = "Manager id cannot be empty"
            raise ValueError(msg)

    @property
    def is_unknown(self) -> bool:
        """Check if no detector matched."""
        return self.manager_id == UNKNOWN_MANAGER_ID

    @property
    def command(self) -> str:
        """Return the file name of the command path."""
        return self.command_path.name or str(self.command_path)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "manager_id": self.manager_id,
            "manager_name": self.manager_name,
            "package_name": self.package_name,
            "version": self.version,
            "confidence": self.confidence.value,
            "command_path": str(self.command_path),
            "resolved_path": str(self.resolved_path),
        }

    @classmethod
    def unknown(cls, context: DetectionContext) -> DetectionResult:
        """Create the fallback result used when no detector matched.

        Args:
            context: Context the detection ran against.

        Returns:
            DetectionResult with UNCERTAIN confidence and no package data.
        """
        return cls(
            manager_id=UNKNOWN_MANAGER_ID,
            manager_name="Unknown",
            confidence=Confidence.UNCERTAIN,
            command_path=context.command_path,
            resolved_path=context.resolved_path,
        )


UNKNOWN_MANAGER_ID = "unknown"
