"""Data models for whichpm.

This module exports the core data structures used throughout the application.
"""

from whichpm.models.detection import (
    UNKNOWN_MANAGER_ID,
    Confidence,
    DetectionContext,
    DetectionResult,
)
from whichpm.models.platform import Platform, current_platform

__all__ = [
    "UNKNOWN_MANAGER_ID",
    "Confidence",
    "DetectionContext",
    "DetectionResult",
    "Platform",
    "current_platform",
]
