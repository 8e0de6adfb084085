"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

from collections.abc import Callable

import pytest
from whichpm.models.detection import DetectionContext
from whichpm.models.platform import Platform

ContextFactory = Callable[..., DetectionContext]


@pytest.fixture
def make_context() -> ContextFactory:
    """Factory for detection contexts built from a synthetic symlink chain.

    The command name defaults to the file name of the first path.
    """

    def _make(
        *chain: str,
        platform: Platform = Platform.LINUX,
        command: str | None = None,
    ) -> DetectionContext:
        name = command
        if name is None:
            name = chain[0].replace("\\", "/").rsplit("/", 1)[-1]
        return DetectionContext.from_chain(command_name=name, chain=chain, platform=platform)

    return _make


@pytest.fixture
def mock_dpkg_search_output() -> str:
    """Sample dpkg -S output for testing."""
    return "coreutils: /usr/bin/ls\n"


@pytest.fixture
def mock_dpkg_multiarch_output() -> str:
    """Sample dpkg -S output with multi-arch owners and a diversion notice."""
    return """diversion by dash from: /bin/sh
libc-bin:amd64, libc6:amd64: /usr/bin/ldd"""


@pytest.fixture
def mock_snap_list_output() -> str:
    """Sample snap list output for testing."""
    return """Name     Version    Rev   Tracking         Publisher   Notes
firefox  128.0-2    4650  latest/stable    mozilla**   -"""
