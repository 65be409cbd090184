"""YAML config loader with default-path discovery and dotted-key lookup."""

import os
from pathlib import Path
from typing import Any

import yaml

from meteocli.config.schema import CliConfig

CONFIG_ENV_VAR = "METEOCLI_CONFIG"
DEFAULT_CONFIG_PATH = Path("~/.config/meteocli/config.yaml")


class ConfigError(Exception):
    """Raised when a config file cannot be read."""


def load_config(path: str | Path | None = None) -> CliConfig:
    """Load and validate config from a YAML file.

    With no explicit path, ``$METEOCLI_CONFIG`` is used if set, then the
    default user config if it exists; otherwise built-in defaults apply.
    An explicit path that does not exist is an error.
    """
    if path is None:
        env_path = os.environ.get(CONFIG_ENV_VAR)
        if env_path:
            path = env_path
        else:
            default = DEFAULT_CONFIG_PATH.expanduser()
            if not default.is_file():
                return CliConfig()
            path = default

    path = Path(path)
    try:
        with open(path) as f:
            raw = yaml.safe_load(f) or {}
    except OSError as e:
        raise ConfigError(f"cannot read config {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"invalid YAML in {path}: {e}") from e

    if not isinstance(raw, dict):
        raise ConfigError(f"config {path} must be a mapping")

    return CliConfig(**raw)


def get_config_value(config: CliConfig, dotted_key: str) -> Any:
    """Get a config value by dotted key path. E.g. 'rain.default_within_minutes'."""
    obj: Any = config
    for part in dotted_key.split("."):
        if hasattr(obj, part):
            obj = getattr(obj, part)
        elif isinstance(obj, dict):
            obj = obj[part]
        else:
            raise KeyError(f"Config key not found: {dotted_key}")
    return obj
