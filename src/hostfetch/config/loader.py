"""YAML configuration file loading with Pydantic validation."""

import os
from pathlib import Path

import yaml
from pydantic import ValidationError

from .models import HostfetchConfig


class ConfigError(Exception):
    """Raised when configuration loading or validation fails."""


def default_config_path() -> Path:
    """Return ``$XDG_CONFIG_HOME/hostfetch/config.yaml`` (``~/.config`` by default)."""
    base = os.environ.get("XDG_CONFIG_HOME") or str(Path.home() / ".config")
    return Path(base) / "hostfetch" / "config.yaml"


def load_yaml(path: Path) -> dict:
    """Load a YAML file and return its contents as a dict.

    Args:
        path: Path to the YAML file.

    Returns:
        Parsed YAML contents.

    Raises:
        ConfigError: If the file cannot be read or parsed.
    """
    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except FileNotFoundError:
        raise ConfigError(f"Configuration file not found: {path}") from None
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Expected a mapping at the top of {path}")
    return data


def load_config(path: Path) -> HostfetchConfig:
    """Load and validate a hostfetch config file.

    Raises:
        ConfigError: If validation fails.
    """
    data = load_yaml(path)
    try:
        return HostfetchConfig(**data)
    except ValidationError as e:
        raise ConfigError(f"Configuration validation failed for {path}: {e}") from e
