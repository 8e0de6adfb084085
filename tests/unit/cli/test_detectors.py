"""Unit tests for the detectors command."""

from unittest.mock import patch

from typer.testing import CliRunner
from whichpm.cli.main import app
from whichpm.models.platform import Platform

runner = CliRunner()


class TestDetectorsCommand:
    """Tests for whichpm detectors."""

    def test_lists_current_platform(self) -> None:
        """Without --platform the running OS is listed."""
        with patch(
            "whichpm.cli.commands.detectors.current_platform", return_value=Platform.LINUX
        ):
            result = runner.invoke(app, ["detectors"])

        assert result.exit_code == 0
        assert "Detectors (Linux)" in result.output
        assert "homebrew" in result.output
        assert "apt" in result.output
        assert "scoop" not in result.output

    def test_windows_platform(self) -> None:
        """--platform windows lists the Windows managers."""
        result = runner.invoke(app, ["detectors", "--platform", "windows"])

        assert result.exit_code == 0
        assert "Detectors (Windows)" in result.output
        assert "scoop" in result.output
        assert "winget" in result.output
        assert "chocolatey" in result.output
        assert "nix" not in result.output

    def test_evaluation_order(self) -> None:
        """Detectors are listed from highest to lowest priority."""
        result = runner.invoke(app, ["detectors", "-p", "macos"])

        assert result.exit_code == 0
        assert result.output.index("homebrew") < result.output.index("system")

    def test_invalid_platform(self) -> None:
        """Unknown platforms are rejected."""
        result = runner.invoke(app, ["detectors", "--platform", "beos"])

        assert result.exit_code != 0
