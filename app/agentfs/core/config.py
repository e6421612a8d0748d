"""agentfs settings.

Configuration model and I/O functions for the optional settings file
read by the CLI. The library functions never read it; callers pass
explicit arguments instead.

Configuration is stored in ~/.config/agentfs/config.toml
"""

import tomllib
from pathlib import Path
from typing import Annotated, Literal

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from agentfs.core.paths import ensure_config_dir, get_config_path
from agentfs.paths.relative import PathStyle

PathStyleName = Literal["auto", "windows", "posix"]


class AgentFsConfig(BaseModel):
    """Settings for the agentfs command line.

    Attributes:
        path_style: Path convention for relpath ("auto", "windows" or "posix").
        continue_on_error: Keep deleting siblings when an entry cannot be removed.
        timeout_seconds: Cancel a deletion after this many seconds (None = never).
    """

    model_config = ConfigDict(extra="forbid")

    path_style: Annotated[
        PathStyleName,
        Field(description="Path convention used by relpath"),
    ] = "auto"
    continue_on_error: Annotated[
        bool,
        Field(description="Skip entries that cannot be deleted and keep going"),
    ] = False
    timeout_seconds: Annotated[
        float | None,
        Field(ge=0, description="Cancel deletions after this many seconds"),
    ] = None

    @property
    def style(self) -> PathStyle:
        """Get the configured path style as an enum."""
        return PathStyle(self.path_style)


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigNotFoundError(ConfigError):
    """Raised when the config file is not found."""


class ConfigParseError(ConfigError):
    """Raised when the config file cannot be parsed."""


def load_config(path: Path | None = None) -> AgentFsConfig:
    """Load configuration from a TOML file.

    Args:
        path: Path to the config file. If None, uses the default config path.

    Returns:
        Validated AgentFsConfig object.

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
        return AgentFsConfig.model_validate(data)
    except (ValueError, ValidationError) as e:
        raise ConfigError(f"Invalid config content: {e}") from e


def load_config_or_default(path: Path | None = None) -> AgentFsConfig:
    """Load configuration, falling back to defaults when no file exists.

    Raises:
        ConfigError: If the file exists but is invalid.
    """
    try:
        return load_config(path)
    except ConfigNotFoundError:
        return AgentFsConfig()


def save_config(config: AgentFsConfig, path: Path | None = None) -> Path:
    """Save configuration to a TOML file.

    Args:
        config: The configuration to save.
        path: Target path. If None, uses the default config path.

    Returns:
        Path where the config was written.

    Raises:
        ConfigError: If the file cannot be written.
    """
    if path is None:
        ensure_config_dir()
        config_path = get_config_path()
    else:
        config_path = path
        config_path.parent.mkdir(parents=True, exist_ok=True)

    try:
        with open(config_path, "wb") as f:
            tomli_w.dump(_config_to_dict(config), f)
    except OSError as e:
        raise ConfigError(f"Failed to write config: {e}") from e

    return config_path


def _config_to_dict(config: AgentFsConfig) -> dict[str, object]:
    """Convert AgentFsConfig to a dictionary for TOML serialization.

    TOML has no null, so an unset timeout is omitted.
    """
    result: dict[str, object] = {
        "path_style": config.path_style,
        "continue_on_error": config.continue_on_error,
    }
    if config.timeout_seconds is not None:
        result["timeout_seconds"] = config.timeout_seconds
    return result
