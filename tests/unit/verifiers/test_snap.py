"""Unit tests for SnapVerifier."""

from pathlib import Path
from unittest.mock import patch

import pytest
from whichpm.utils.shell import CommandResult
from whichpm.verifiers.base import PackageInfo
from whichpm.verifiers.snap import SnapVerifier, parse_snap_list


class TestSnapVerifier:
    """Tests for SnapVerifier class."""

    @pytest.fixture
    def verifier(self) -> SnapVerifier:
        """Create SnapVerifier instance."""
        return SnapVerifier()

    def test_tool(self, verifier: SnapVerifier) -> None:
        """The query tool is snap."""
        assert verifier.tool == "snap"

    def test_launcher(self, verifier: SnapVerifier, mock_snap_list_output: str) -> None:
        """Launchers are looked up by file name."""
        with (
            patch("whichpm.verifiers.base.command_exists", return_value=True),
            patch("whichpm.verifiers.base.run_command") as mock_run,
        ):
            mock_run.return_value = CommandResult(
                stdout=mock_snap_list_output, stderr="", returncode=0
            )

            info = verifier.query(Path("/snap/bin/firefox"))

        assert info == PackageInfo(name="firefox", version="128.0-2")
        assert mock_run.call_args.args[0] == ["snap", "list", "firefox"]

    def test_mount_path(self, verifier: SnapVerifier, mock_snap_list_output: str) -> None:
        """Mount paths are looked up by snap name."""
        with (
            patch("whichpm.verifiers.base.command_exists", return_value=True),
            patch("whichpm.verifiers.base.run_command") as mock_run,
        ):
            mock_run.return_value = CommandResult(
                stdout=mock_snap_list_output, stderr="", returncode=0
            )

            info = verifier.query(Path("/snap/firefox/4650/usr/lib/firefox/firefox-bin"))

        assert info is not None
        assert mock_run.call_args.args[0] == ["snap", "list", "firefox"]

    def test_app_launcher(self, verifier: SnapVerifier) -> None:
        """{snap}.{app} launchers are looked up by snap name."""
        output = (
            "Name  Version  Rev    Tracking       Publisher   Notes\n"
            "lxd   5.21.1   28463  5.21/stable/…  canonical✓  -"
        )
        with (
            patch("whichpm.verifiers.base.command_exists", return_value=True),
            patch("whichpm.verifiers.base.run_command") as mock_run,
        ):
            mock_run.return_value = CommandResult(stdout=output, stderr="", returncode=0)

            info = verifier.query(Path("/snap/bin/lxd.lxc"))

        assert info == PackageInfo(name="lxd", version="5.21.1")
        assert mock_run.call_args.args[0] == ["snap", "list", "lxd"]

    def test_not_installed_snap(self, verifier: SnapVerifier) -> None:
        """snap list fails for unknown snaps."""
        with (
            patch("whichpm.verifiers.base.command_exists", return_value=True),
            patch(
                "whichpm.verifiers.base.run_command",
                return_value=CommandResult(
                    stdout="", stderr="error: no matching snaps installed", returncode=1
                ),
            ),
        ):
            assert verifier.query(Path("/snap/bin/ghost")) is None

    def test_snapd_missing(self, verifier: SnapVerifier) -> None:
        """Without snapd there is no evidence."""
        with patch("whichpm.verifiers.base.command_exists", return_value=False):
            assert verifier.query(Path("/snap/bin/firefox")) is None


class TestParseSnapList:
    """Tests for parse_snap_list function."""

    def test_parses_row(self, mock_snap_list_output: str) -> None:
        """The matching row yields name and version."""
        assert parse_snap_list(mock_snap_list_output, "firefox") == PackageInfo(
            name="firefox", version="128.0-2"
        )

    def test_other_name(self, mock_snap_list_output: str) -> None:
        """Rows for other snaps are ignored."""
        assert parse_snap_list(mock_snap_list_output, "chromium") is None

    def test_header_only(self) -> None:
        """Output without rows yields None."""
        assert parse_snap_list("Name  Version  Rev  Tracking  Publisher  Notes", "x") is None
