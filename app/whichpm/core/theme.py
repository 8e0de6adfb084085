"""Color theme for the whichpm CLI.

Colors come from the bundled ``data/theme.toml``. A ``theme.toml`` in the
user config directory may override any subset of them; an override that
does not validate is ignored as a whole and the bundled colors are used.
"""

import logging
import tomllib
from functools import cache
from importlib import resources
from pathlib import Path
from typing import Annotated

from pydantic import BaseModel, ConfigDict, StringConstraints, ValidationError
from rich.theme import Theme

from whichpm.core.paths import get_user_theme_path

logger = logging.getLogger(__name__)

HexColor = Annotated[
    str,
    StringConstraints(strip_whitespace=True, pattern=r"^#(?:[0-9a-fA-F]{3}){1,2}$"),
]

# Styles rendered bold on top of their color
_BOLD_STYLES = frozenset({"error", "manager"})


class ThemeColors(BaseModel):
    """Hex colors (#RGB or #RRGGBB) for each named output style."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    text: HexColor = "#ffffff"
    muted: HexColor = "#b2bec3"
    header: HexColor = "#69B9A1"
    border: HexColor = "#29526d"

    success: HexColor = "#03b971"
    warning: HexColor = "#f5b332"
    error: HexColor = "#f53263"
    info: HexColor = "#0ec1c8"

    manager: HexColor = "#0ec1c8"
    package: HexColor = "#69B9A1"

    confidence_high: HexColor = "#03b971"
    confidence_medium: HexColor = "#faf870"
    confidence_low: HexColor = "#d44ebc"
    confidence_uncertain: HexColor = "#f53263"

    def to_rich_theme(self) -> Theme:
        """Build the Rich theme, one style per color plus the header variant."""
        styles = {
            name: f"bold {color}" if name in _BOLD_STYLES else color
            for name, color in self.model_dump().items()
        }
        styles["bold_header"] = f"bold {self.header}"
        return Theme(styles)


def get_bundled_theme_path() -> Path:
    """Return the path of the theme shipped in ``whichpm.data``."""
    return Path(str(resources.files("whichpm.data").joinpath("theme.toml")))


def read_theme_file(path: Path) -> dict[str, object]:
    """Read the ``[colors]`` table of a theme file.

    A missing file reads as empty. Unreadable files and files without a
    usable ``[colors]`` table are logged and read as empty too.

    Args:
        path: Theme TOML file.

    Returns:
        Raw color values keyed by style name.
    """
    try:
        with path.open("rb") as f:
            data = tomllib.load(f)
    except FileNotFoundError:
        return {}
    except (tomllib.TOMLDecodeError, OSError) as e:
        logger.warning("Ignoring theme file %s: %s", path, e)
        return {}

    colors = data.get("colors", {})
    if not isinstance(colors, dict):
        logger.warning("Ignoring theme file %s: [colors] is not a table", path)
        return {}
    return colors


def load_theme(user_path: Path | None = None) -> ThemeColors:
    """Load the bundled colors with the user's overrides applied.

    Args:
        user_path: Override file; defaults to ``theme.toml`` in the config dir.

    Returns:
        Validated theme colors.
    """
    try:
        bundled = ThemeColors.model_validate(read_theme_file(get_bundled_theme_path()))
    except ValidationError as e:
        logger.error("Bundled theme is invalid, using built-in colors: %s", e)
        bundled = ThemeColors()

    path = user_path if user_path is not None else get_user_theme_path()
    overrides = read_theme_file(path)
    if not overrides:
        return bundled

    try:
        colors = ThemeColors.model_validate({**bundled.model_dump(), **overrides})
    except ValidationError as e:
        logger.warning("Ignoring invalid colors in %s: %s", path, e)
        return bundled
    logger.debug("Applied %d theme override(s) from %s", len(overrides), path)
    return colors


@cache
def get_theme() -> Theme:
    """Return the Rich theme of this process, loaded on first use."""
    return load_theme().to_rich_theme()
