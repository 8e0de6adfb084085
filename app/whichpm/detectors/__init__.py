"""Package manager detectors.

This module provides the detector interface, the concrete detectors for
each supported package manager, and the registry that orders them.
"""

from whichpm.detectors.base import ALL_PLATFORMS, POSIX_PLATFORMS, Detector
from whichpm.detectors.registry import KNOWN_DETECTOR_IDS, DetectorRegistry, default_detectors

__all__ = [
    "ALL_PLATFORMS",
    "KNOWN_DETECTOR_IDS",
    "POSIX_PLATFORMS",
    "Detector",
    "DetectorRegistry",
    "default_detectors",
]
