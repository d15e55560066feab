"""Configuration loading for pcparse."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from pcparse.exceptions import ConfigError

CONFIG_FILENAME = "pcparse.yaml"
PKG_CONFIG_PATH_ENV = "PKG_CONFIG_PATH"


@dataclass
class LoggingConfig:
    """Logging settings applied by the CLI."""

    level: str = "INFO"
    dir: str | None = None


@dataclass
class PcParseConfig:
    """pcparse configuration.

    Search paths listed here are consulted after any PKG_CONFIG_PATH entries
    when packages are looked up by name.
    """

    search_paths: list[str] = field(default_factory=list)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    root_path: Path = field(default_factory=Path)

    @classmethod
    def from_dict(cls, data: dict[str, Any], root_path: Path) -> PcParseConfig:
        """Create config from dictionary.

        Args:
            data: Configuration dictionary from YAML.
            root_path: Root directory containing the config file.

        Returns:
            Parsed configuration object.

        Raises:
            ConfigError: If a field has the wrong type.
        """
        search_paths = data.get("search_paths") or []
        if not isinstance(search_paths, list) or not all(isinstance(p, str) for p in search_paths):
            raise ConfigError("search_paths must be a list of strings")

        logging_data = data.get("logging") or {}
        if not isinstance(logging_data, dict):
            raise ConfigError("logging must be a mapping")
        level = logging_data.get("level", "INFO")
        if not isinstance(level, str):
            raise ConfigError("logging.level must be a string")
        log_dir = logging_data.get("dir")
        if log_dir is not None and not isinstance(log_dir, str):
            raise ConfigError("logging.dir must be a string")
        logging_config = LoggingConfig(level=level, dir=log_dir)

        return cls(
            search_paths=search_paths,
            logging=logging_config,
            root_path=root_path,
        )

    def get_search_paths(self, environ: Mapping[str, str] | None = None) -> list[Path]:
        """Get the ordered directories to look packages up in.

        Args:
            environ: Environment to read PKG_CONFIG_PATH from. Defaults to os.environ.

        Returns:
            PKG_CONFIG_PATH entries followed by configured search paths,
            relative entries resolved against the config's root_path.
        """
        if environ is None:
            environ = os.environ

        paths = [Path(p) for p in environ.get(PKG_CONFIG_PATH_ENV, "").split(os.pathsep) if p]
        paths.extend(self.root_path / p for p in self.search_paths)
        return paths

    def get_log_path(self) -> Path | None:
        """Get absolute path to the log directory, if file logging is configured."""
        if self.logging.dir is None:
            return None
        return self.root_path / self.logging.dir


def load_config(config_path: Path | str) -> PcParseConfig:
    """Load pcparse configuration from a YAML file.

    Args:
        config_path: Path to pcparse.yaml file.

    Returns:
        Parsed configuration object.

    Raises:
        ConfigError: If file doesn't exist or is invalid.
    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise ConfigError(f"Configuration file not found: {config_path}")

    try:
        with open(config_path) as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {config_path}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"Configuration must be a YAML mapping, got {type(data).__name__}")

    return PcParseConfig.from_dict(data, config_path.parent)


def find_config(start_path: Path | str | None = None) -> Path:
    """Find pcparse.yaml by walking up directory tree.

    Args:
        start_path: Starting directory. Defaults to current directory.

    Returns:
        Path to pcparse.yaml file.

    Raises:
        ConfigError: If no config file is found.
    """
    if start_path is None:
        start_path = Path.cwd()
    else:
        start_path = Path(start_path)

    current = start_path.resolve()

    while current != current.parent:
        config_path = current / CONFIG_FILENAME
        if config_path.exists():
            return config_path
        current = current.parent

    # Check root
    config_path = current / CONFIG_FILENAME
    if config_path.exists():
        return config_path

    raise ConfigError(f"No {CONFIG_FILENAME} found in {start_path} or any parent directory")
