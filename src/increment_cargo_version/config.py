"""Configuration loading and validation."""

from dataclasses import dataclass, field
from pathlib import Path

import yaml

DEFAULT_MANIFEST_PATH = "Cargo.toml"
DEFAULT_LOCK_PATH = "Cargo.lock"


class ConfigError(Exception):
    """Raised when configuration is invalid."""


@dataclass
class Config:
    """Paths of the files whose version is kept in sync."""

    manifest_path: Path = field(default_factory=lambda: Path(DEFAULT_MANIFEST_PATH))
    lock_path: Path = field(default_factory=lambda: Path(DEFAULT_LOCK_PATH))


def get_config_path() -> Path:
    """Return the default configuration file path, relative to the working directory."""
    return Path("increment-cargo-version.yaml")


def _read_path(data: dict, key: str, default: str) -> Path:
    value = data.get(key, default)
    if not isinstance(value, str) or not value.strip():
        raise ConfigError(f"{key} must be a non-empty string")
    return Path(value)


def load_config(config_path: Path) -> Config:
    """Load and validate configuration from a YAML file.

    Args:
        config_path: Path to the configuration file.

    Returns:
        Validated Config object. Defaults are used when the file doesn't exist.

    Raises:
        ConfigError: If the config file is invalid.
    """
    if not config_path.exists():
        return Config()

    try:
        with config_path.open(encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        # PyYAML messages span several lines
        raise ConfigError(f"Invalid YAML: {' '.join(str(e).split())}")

    # An empty file means "all defaults"
    if data is None:
        return Config()

    if not isinstance(data, dict):
        raise ConfigError("Config must be a YAML mapping")

    unknown = sorted(set(data) - {"manifest_path", "lock_path"})
    if unknown:
        raise ConfigError(f"Unknown config fields: {', '.join(map(str, unknown))}")

    return Config(
        manifest_path=_read_path(data, "manifest_path", DEFAULT_MANIFEST_PATH),
        lock_path=_read_path(data, "lock_path", DEFAULT_LOCK_PATH),
    )
