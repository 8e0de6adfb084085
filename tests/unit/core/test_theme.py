"""Unit tests for theme module.

Tests for theme file reading, override validation, and Rich theme generation.
"""

import logging
from pathlib import Path

import pytest
from pydantic import ValidationError
from rich.theme import Theme
from whichpm.core.theme import (
    ThemeColors,
    get_bundled_theme_path,
    get_theme,
    load_theme,
    read_theme_file,
)


class TestThemeColors:
    """Tests for ThemeColors Pydantic model."""

    def test_bundled_file_matches_defaults(self) -> None:
        """The shipped theme.toml and the model defaults agree."""
        assert ThemeColors.model_validate(read_theme_file(get_bundled_theme_path())) == (
            ThemeColors()
        )

    @pytest.mark.parametrize("color", ["#AABBCC", "#abc", "  #0ec1c8 "])
    def test_accepts_hex(self, color: str) -> None:
        """Short and long hex codes are accepted, surrounding blanks stripped."""
        assert ThemeColors(package=color).package == color.strip()

    @pytest.mark.parametrize("color", ["ffffff", "#ff", "#gggggg", "red", "#12345"])
    def test_rejects_non_hex(self, color: str) -> None:
        """Anything but #RGB or #RRGGBB is rejected."""
        with pytest.raises(ValidationError, match="package"):
            ThemeColors(package=color)

    def test_unknown_style_rejected(self) -> None:
        """Typos in style names are reported, not silently ignored."""
        with pytest.raises(ValidationError):
            ThemeColors(packge="#ffffff")  # type: ignore[call-arg]


class TestToRichTheme:
    """Tests for ThemeColors.to_rich_theme."""

    def test_style_per_color(self) -> None:
        """Every color becomes a style of the same name."""
        theme = ThemeColors().to_rich_theme()

        assert isinstance(theme, Theme)
        for name in ThemeColors.model_fields:
            assert name in theme.styles
        assert "bold_header" in theme.styles

    def test_bold_styles(self) -> None:
        """Manager names and errors stand out in bold."""
        theme = ThemeColors(manager="#112233").to_rich_theme()

        assert theme.styles["manager"].bold
        assert theme.styles["error"].bold
        assert theme.styles["bold_header"].bold
        assert not theme.styles["package"].bold


class TestReadThemeFile:
    """Tests for read_theme_file function."""

    def test_reads_colors_table(self, tmp_path: Path) -> None:
        """The [colors] table is returned as is."""
        theme_file = tmp_path / "theme.toml"
        theme_file.write_text('[colors]\ntext = "#000000"\nmanager = "#aabbcc"\n')

        assert read_theme_file(theme_file) == {"text": "#000000", "manager": "#aabbcc"}

    def test_missing_file_is_empty(self, tmp_path: Path) -> None:
        """A missing file reads as no overrides."""
        assert read_theme_file(tmp_path / "nonexistent.toml") == {}

    def test_malformed_toml_logged(self, tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
        """Malformed TOML is logged and ignored."""
        theme_file = tmp_path / "theme.toml"
        theme_file.write_text("not valid [ toml syntax")

        with caplog.at_level(logging.WARNING, logger="whichpm.core.theme"):
            assert read_theme_file(theme_file) == {}

        assert "Ignoring theme file" in caplog.text

    def test_colors_not_a_table(self, tmp_path: Path) -> None:
        """A scalar colors key carries no overrides."""
        theme_file = tmp_path / "theme.toml"
        theme_file.write_text('colors = "#ffffff"\n')

        assert read_theme_file(theme_file) == {}


class TestLoadTheme:
    """Tests for load_theme function."""

    def test_bundled_theme_exists(self) -> None:
        """The default theme ships with the package."""
        assert get_bundled_theme_path().is_file()

    def test_without_user_file(self, tmp_path: Path) -> None:
        """Without overrides the bundled colors are used."""
        assert load_theme(tmp_path / "missing.toml") == ThemeColors()

    def test_partial_override(self, tmp_path: Path) -> None:
        """User colors replace only the styles they name."""
        user_theme = tmp_path / "theme.toml"
        user_theme.write_text('[colors]\nconfidence_high = "#00ff00"\n')

        colors = load_theme(user_theme)

        assert colors.confidence_high == "#00ff00"
        assert colors.text == "#ffffff"

    def test_invalid_override_ignored(
        self, tmp_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        """An invalid override file falls back to the bundled colors as a whole."""
        user_theme = tmp_path / "theme.toml"
        user_theme.write_text('[colors]\nheader = "red"\nmanager = "#000000"\n')

        with caplog.at_level(logging.WARNING, logger="whichpm.core.theme"):
            colors = load_theme(user_theme)

        assert colors == ThemeColors()
        assert "Ignoring invalid colors" in caplog.text

    def test_default_user_path(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """The override file is looked up in the config directory."""
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
        (tmp_path / "whichpm").mkdir()
        (tmp_path / "whichpm" / "theme.toml").write_text('[colors]\npackage = "#123456"\n')

        assert load_theme().package == "#123456"


class TestGetTheme:
    """Tests for get_theme caching."""

    def test_caches_theme(self) -> None:
        """get_theme returns the same instance on repeated calls."""
        get_theme.cache_clear()
        try:
            assert get_theme() is get_theme()
        finally:
            get_theme.cache_clear()
