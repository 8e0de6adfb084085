"""Package database verifiers.

This module exports the verifiers detectors use to confirm file ownership.
"""

from whichpm.verifiers.base import DEFAULT_QUERY_TIMEOUT, PackageInfo, Verifier
from whichpm.verifiers.dpkg import DpkgVerifier
from whichpm.verifiers.snap import SnapVerifier

__all__ = ["DEFAULT_QUERY_TIMEOUT", "DpkgVerifier", "PackageInfo", "SnapVerifier", "Verifier"]
