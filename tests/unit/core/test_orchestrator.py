"""Unit tests for the detection orchestrator.

End-to-end scenarios with synthetic symlink chains; path resolution and
symlink traversal are patched so no real files are needed.
"""

from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from pathlib import Path
from unittest.mock import patch

import pytest
from whichpm.core.errors import CommandNotFoundError
from whichpm.core.orchestrator import DetectionOrchestrator, detect_command
from whichpm.detectors.registry import DetectorRegistry
from whichpm.models.detection import Confidence
from whichpm.models.platform import Platform


@contextmanager
def _chain(paths: Sequence[str]) -> Iterator[None]:
    """Make every command resolve to the given symlink chain."""
    chain = tuple(Path(p) for p in paths)
    with (
        patch("whichpm.core.context.resolve_command", return_value=chain[0]),
        patch("whichpm.core.context.follow_symlinks", return_value=chain),
    ):
        yield


def _registry(platform: Platform) -> DetectorRegistry:
    return DetectorRegistry(platform=platform, verify=False)


class TestDetectCommand:
    """Tests for detect_command function."""

    def test_homebrew_cellar(self) -> None:
        """A Cellar chain on macOS is a verified Homebrew formula."""
        with _chain(["/opt/homebrew/bin/git", "/opt/homebrew/Cellar/git/2.51.2/bin/git"]):
            result = detect_command(
                "git", platform=Platform.MACOS, registry=_registry(Platform.MACOS)
            )

        assert result.manager_id == "homebrew"
        assert result.package_name == "git"
        assert result.version == "2.51.2"
        assert result.confidence is Confidence.HIGH

    def test_system_fallback(self) -> None:
        """/usr/bin/ls on Linux without a specific match is a system binary."""
        with _chain(["/usr/bin/ls"]):
            result = detect_command(
                "ls", platform=Platform.LINUX, registry=_registry(Platform.LINUX)
            )

        assert result.manager_id == "system"
        assert result.package_name is None
        assert result.confidence is Confidence.MEDIUM

    def test_yarn_global(self) -> None:
        """A yarn bin link into yarn's global tree names the package."""
        chain = [
            "/home/u/.yarn/bin/tsc",
            "/home/u/.config/yarn/global/node_modules/typescript/bin/tsc",
        ]
        with _chain(chain):
            result = detect_command(
                "tsc", platform=Platform.LINUX, registry=_registry(Platform.LINUX)
            )

        assert result.manager_id == "yarn_global"
        assert result.package_name == "typescript"

    def test_npm_scoped_package(self) -> None:
        """npm global installs report scoped package names."""
        chain = [
            "/usr/local/bin/ng",
            "/usr/local/lib/node_modules/@angular/cli/bin/ng.js",
        ]
        with _chain(chain):
            result = detect_command(
                "ng", platform=Platform.LINUX, registry=_registry(Platform.LINUX)
            )

        assert result.manager_id == "npm_global"
        assert result.package_name == "@angular/cli"

    def test_nix_store_beats_go_bin(self) -> None:
        """Store paths win over language-tool markers inside them."""
        chain = [
            "/home/u/.nix-profile/bin/gopls",
            "/nix/store/0123456789abcdfghijklmnpqrsvwxyz-gopls-0.15.3/go/bin/gopls",
        ]
        with _chain(chain):
            result = detect_command(
                "gopls", platform=Platform.LINUX, registry=_registry(Platform.LINUX)
            )

        assert result.manager_id == "nix"
        assert result.package_name == "gopls"
        assert result.version == "0.15.3"

    def test_mise_beats_npm(self) -> None:
        """Node packages inside a mise install belong to mise."""
        chain = [
            "/home/u/.local/share/mise/installs/node/20.10.0/bin/tsc",
            "/home/u/.local/share/mise/installs/node/20.10.0/lib/node_modules/typescript/bin/tsc",
        ]
        with _chain(chain):
            result = detect_command(
                "tsc", platform=Platform.LINUX, registry=_registry(Platform.LINUX)
            )

        assert result.manager_id == "mise"
        assert result.package_name == "node"
        assert result.version == "20.10.0"

    def test_windows_scoop(self) -> None:
        """Scoop shims are recognized on Windows."""
        with _chain(["C:\\Users\\u\\scoop\\shims\\rg.exe"]):
            result = detect_command(
                "rg", platform=Platform.WINDOWS, registry=_registry(Platform.WINDOWS)
            )

        assert result.manager_id == "scoop"
        assert result.package_name == "rg"

    def test_unknown(self) -> None:
        """An unrecognized path falls back to the unknown result."""
        with _chain(["/home/u/projects/tool/target/tool"]):
            result = detect_command(
                "tool", platform=Platform.LINUX, registry=_registry(Platform.LINUX)
            )

        assert result.manager_id == "unknown"
        assert result.manager_name == "Unknown"
        assert result.confidence is Confidence.UNCERTAIN
        assert result.package_name is None
        assert result.resolved_path == Path("/home/u/projects/tool/target/tool")

    def test_command_not_found(self, tmp_path: Path) -> None:
        """A missing command raises and produces no result."""
        with pytest.raises(CommandNotFoundError):
            detect_command(
                "doesnotexist123",
                platform=Platform.LINUX,
                registry=_registry(Platform.LINUX),
                search_path=str(tmp_path),
            )

    def test_uses_default_registry(self) -> None:
        """Without a registry the full catalogue for the platform is used."""
        with (
            _chain(["/home/u/.cargo/bin/rg"]),
            patch("whichpm.core.orchestrator.DetectorRegistry") as mock_registry_cls,
        ):
            mock_registry_cls.return_value.detect.return_value = None
            result = detect_command("rg", platform=Platform.LINUX)

        mock_registry_cls.assert_called_once_with(platform=Platform.LINUX)
        assert result.is_unknown


class TestDetectionOrchestrator:
    """Tests for DetectionOrchestrator class."""

    def test_reusable_for_many_commands(self) -> None:
        """One orchestrator handles several commands."""
        orchestrator = DetectionOrchestrator(
            registry=_registry(Platform.LINUX), platform=Platform.LINUX
        )

        with _chain(["/home/u/.cargo/bin/rg"]):
            first = orchestrator.detect("rg")
        with _chain(["/home/u/.local/pipx/venvs/black/bin/black"]):
            second = orchestrator.detect("black")

        assert first.manager_id == "cargo"
        assert second.manager_id == "pipx"
        assert second.package_name == "black"

    def test_exposes_registry(self) -> None:
        """The registry in use is accessible."""
        registry = _registry(Platform.LINUX)
        assert DetectionOrchestrator(registry=registry).registry is registry
