"""Unit tests for config CLI commands."""

import tomllib
from pathlib import Path

from typer.testing import CliRunner
from whichpm.cli.main import app

runner = CliRunner()


class TestConfigShow:
    """Tests for whichpm config show."""

    def test_defaults_without_file(self, tmp_path: Path) -> None:
        """A missing file shows the defaults with a notice."""
        path = tmp_path / "config.toml"

        result = runner.invoke(app, ["config", "show", "--config", str(path)])

        assert result.exit_code == 0
        assert "No config file at" in result.output
        assert "verify" in result.output
        assert "query_timeout" in result.output

    def test_values_from_file(self, tmp_path: Path) -> None:
        """Values from the file are displayed."""
        path = tmp_path / "config.toml"
        path.write_text('output_format = "json"\ndisabled_detectors = ["gem"]\n')

        result = runner.invoke(app, ["config", "show", "-c", str(path)])

        assert result.exit_code == 0
        assert "No config file at" not in result.output
        assert "json" in result.output
        assert "gem" in result.output

    def test_invalid_file(self, tmp_path: Path) -> None:
        """Schema errors exit with code 1."""
        path = tmp_path / "config.toml"
        path.write_text('disabled_detectors = ["yum"]\n')

        result = runner.invoke(app, ["config", "show", "--config", str(path)])

        assert result.exit_code == 1
        assert "unknown detector" in result.output
        assert "yum" in result.output

    def test_no_subcommand_shows_help(self) -> None:
        """config without a subcommand prints its help."""
        result = runner.invoke(app, ["config"])

        assert "show" in result.output
        assert "init" in result.output


class TestConfigInit:
    """Tests for whichpm config init."""

    def test_writes_file(self, tmp_path: Path) -> None:
        """init creates a loadable config file."""
        path = tmp_path / "nested" / "config.toml"

        result = runner.invoke(app, ["config", "init", "--config", str(path)])

        assert result.exit_code == 0
        assert "Config written to" in result.output
        assert path.exists()
        with path.open("rb") as f:
            assert tomllib.load(f) == {}

    def test_refuses_overwrite(self, tmp_path: Path) -> None:
        """An existing file is kept without --force."""
        path = tmp_path / "config.toml"
        path.write_text("verify = false\n")

        result = runner.invoke(app, ["config", "init", "--config", str(path)])

        assert result.exit_code == 1
        assert "--force" in result.output
        assert path.read_text() == "verify = false\n"

    def test_force_overwrites(self, tmp_path: Path) -> None:
        """--force replaces an existing file with the defaults."""
        path = tmp_path / "config.toml"
        path.write_text("verify = false\n")

        result = runner.invoke(app, ["config", "init", "--config", str(path), "--force"])

        assert result.exit_code == 0
        assert "verify" not in path.read_text()
