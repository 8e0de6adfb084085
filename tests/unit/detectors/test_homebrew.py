"""Unit tests for HomebrewDetector."""

import pytest
from whichpm.detectors.homebrew import HomebrewDetector
from whichpm.models.detection import Confidence
from whichpm.models.platform import Platform


class TestHomebrewDetector:
    """Tests for HomebrewDetector class."""

    @pytest.fixture
    def detector(self) -> HomebrewDetector:
        """Create HomebrewDetector instance."""
        return HomebrewDetector()

    def test_identity(self, detector: HomebrewDetector) -> None:
        """Detector exposes its id, name and priority."""
        assert detector.id == "homebrew"
        assert detector.name == "Homebrew"
        assert detector.priority == 100

    def test_platforms(self, detector: HomebrewDetector) -> None:
        """Homebrew runs on macOS and Linux only."""
        assert detector.supports_platform(Platform.MACOS)
        assert detector.supports_platform(Platform.LINUX)
        assert not detector.supports_platform(Platform.WINDOWS)

    def test_apple_silicon_cellar(self, detector: HomebrewDetector, make_context) -> None:
        """Cellar paths name the formula and version with HIGH confidence."""
        ctx = make_context(
            "/opt/homebrew/bin/git",
            "/opt/homebrew/Cellar/git/2.51.2/bin/git",
            platform=Platform.MACOS,
        )

        result = detector.detect(ctx)

        assert result is not None
        assert result.manager_id == "homebrew"
        assert result.package_name == "git"
        assert result.version == "2.51.2"
        assert result.confidence is Confidence.HIGH

    def test_intel_cellar(self, detector: HomebrewDetector, make_context) -> None:
        """The /usr/local prefix is recognized."""
        ctx = make_context(
            "/usr/local/bin/wget",
            "/usr/local/Cellar/wget/1.24.5/bin/wget",
            platform=Platform.MACOS,
        )

        result = detector.detect(ctx)

        assert result is not None
        assert result.package_name == "wget"
        assert result.version == "1.24.5"

    def test_linuxbrew_cellar(self, detector: HomebrewDetector, make_context) -> None:
        """Linuxbrew Cellar paths are recognized."""
        ctx = make_context(
            "/home/linuxbrew/.linuxbrew/bin/jq",
            "/home/linuxbrew/.linuxbrew/Cellar/jq/1.7.1/bin/jq",
        )

        result = detector.detect(ctx)

        assert result is not None
        assert result.package_name == "jq"
        assert result.confidence is Confidence.HIGH

    def test_prefix_without_cellar(self, detector: HomebrewDetector, make_context) -> None:
        """Other paths under a Homebrew prefix are a MEDIUM match."""
        ctx = make_context(
            "/opt/homebrew/bin/code",
            "/opt/homebrew/Caskroom/visual-studio-code/1.90/code",
            platform=Platform.MACOS,
        )

        result = detector.detect(ctx)

        assert result is not None
        assert result.confidence is Confidence.MEDIUM
        assert result.package_name is None

    def test_plain_usr_local_is_not_homebrew(
        self, detector: HomebrewDetector, make_context
    ) -> None:
        """/usr/local/bin alone is not Homebrew evidence."""
        ctx = make_context("/usr/local/bin/tool", platform=Platform.MACOS)
        assert detector.detect(ctx) is None

    def test_system_path(self, detector: HomebrewDetector, make_context) -> None:
        """System binaries are not matched."""
        assert detector.detect(make_context("/usr/bin/ls", platform=Platform.MACOS)) is None
