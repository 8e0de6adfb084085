"""whichpm configuration and settings.

This module provides the configuration model and I/O functions for the
CLI. Configuration is stored in ~/.config/whichpm/config.toml; every key
is optional and a missing file means defaults.
"""

import os
import tomllib
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Annotated, Literal

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from whichpm.core.errors import WhichpmError
from whichpm.core.paths import get_config_path
from whichpm.detectors.registry import KNOWN_DETECTOR_IDS
from whichpm.verifiers.base import DEFAULT_QUERY_TIMEOUT

OutputFormat = Literal["text", "json", "short"]


class WhichpmConfig(BaseModel):
    """Configuration for detection runs.

    Attributes:
        verify: Run package database queries (dpkg, snap) to confirm matches.
        query_timeout: Seconds allowed per verification query.
        disabled_detectors: Detector ids to leave out of the registry.
        output_format: Default output format of ``whichpm detect``.
    """

    model_config = ConfigDict(extra="forbid")

    verify: Annotated[
        bool,
        Field(description="Confirm matches against package databases"),
    ] = True
    query_timeout: Annotated[
        float,
        Field(ge=0.5, le=300, description="Verification timeout in seconds (0.5-300)"),
    ] = DEFAULT_QUERY_TIMEOUT
    disabled_detectors: Annotated[
        list[str],
        Field(description="Detector ids to skip"),
    ] = []
    output_format: Annotated[
        OutputFormat,
        Field(description="Default output format"),
    ] = "text"

    @field_validator("disabled_detectors")
    @classmethod
    def validate_detector_ids(cls, v: list[str]) -> list[str]:
        """Reject detector ids that are not part of the catalogue."""
        unknown = sorted(set(v) - KNOWN_DETECTOR_IDS)
        if unknown:
            msg = f"unknown detector id(s): {', '.join(unknown)}"
            raise ValueError(msg)
        return v


class ConfigError(WhichpmError):
    """Base exception for configuration errors."""


class ConfigNotFoundError(ConfigError):
    """Raised when the config file is not found."""


class ConfigParseError(ConfigError):
    """Raised when the config file cannot be parsed."""


def load_config(path: Path | None = None) -> WhichpmConfig:
    """Load configuration from a TOML file.

    Args:
        path: Path to the config file. If None, uses the default config path.

    Returns:
        Validated WhichpmConfig object.

    Raises:
        ConfigNotFoundError: If the config file doesn't exist.
        ConfigParseError: If the TOML syntax is invalid.
        ConfigError: If the content doesn't match the schema.
    """
    config_path = path or get_config_path()

    if not config_path.exists():
        raise ConfigNotFoundError(f"Config not found: {config_path}")

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(f"Invalid TOML syntax: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read config: {e}") from e

    try:
        return WhichpmConfig.model_validate(data)
    except (ValueError, ValidationError) as e:
        raise ConfigError(f"Invalid config content: {e}") from e


def load_config_or_default(path: Path | None = None) -> WhichpmConfig:
    """Load configuration, falling back to defaults if the file is missing.

    Args:
        path: Path to the config file. If None, uses the default config path.

    Returns:
        Loaded or default WhichpmConfig.

    Raises:
        ConfigParseError: If the TOML syntax is invalid.
        ConfigError: If the content doesn't match the schema.
    """
    try:
        return load_config(path)
    except ConfigNotFoundError:
        return get_default_config()


def save_config(config: WhichpmConfig, path: Path | None = None) -> Path:
    """Save configuration to a TOML file.

    The file is written atomically by first writing to a temporary file
    and then using os.replace() for atomic rename.

    Args:
        config: The WhichpmConfig object to save.
        path: Path to save the config. If None, uses the default config path.

    Returns:
        Path where the config was saved.

    Raises:
        ConfigError: If the file cannot be written.
    """
    config_path = path or get_config_path()
    data = _config_to_dict(config)

    tmp_path: Path | None = None
    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        with NamedTemporaryFile(
            mode="wb",
            dir=config_path.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            tomli_w.dump(data, f)
        os.replace(str(tmp_path), str(config_path))
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise ConfigError(f"Failed to write config: {e}") from e

    return config_path


def _config_to_dict(config: WhichpmConfig) -> dict[str, object]:
    """Convert WhichpmConfig to a dictionary for TOML serialization.

    Only non-default values are included to keep the file clean.

    Args:
        config: The WhichpmConfig to convert.

    Returns:
        Dictionary ready for TOML serialization.
    """
    return config.model_dump(exclude_defaults=True)


def get_default_config() -> WhichpmConfig:
    """Create a default WhichpmConfig.

    Returns:
        WhichpmConfig with default settings.
    """
    return WhichpmConfig()
