"""Configuration loading for huelights."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field


class BridgeConfig(BaseModel):
    """Where the bridge lives on the network."""

    ip: str
    port: int | None = None
    use_https: bool = False


class HueLightsConfig(BaseModel):
    """Main configuration model."""

    bridge: BridgeConfig
    parallel_requests: int = Field(default=5, ge=1)
    timeout: float = Field(default=10.0, gt=0)


class SecretsConfig(BaseModel):
    """Secrets configuration model."""

    username: str | None = None


def find_config_dir() -> Path:
    """Find the config directory.

    Looks for config directory in the following order:
    1. ./config (relative to cwd)
    2. ../config (parent of cwd)
    3. ~/.config/huelights
    """
    cwd = Path.cwd()

    if (cwd / "config").is_dir():
        return cwd / "config"

    if (cwd.parent / "config").is_dir():
        return cwd.parent / "config"

    home_config = Path.home() / ".config" / "huelights"
    if home_config.is_dir():
        return home_config

    return cwd / "config"


def load_yaml(path: Path) -> dict[str, Any]:
    """Load a YAML file, returning empty dict if not found."""
    if not path.exists():
        return {}
    with open(path) as f:
        return yaml.safe_load(f) or {}


def load_config(config_dir: Path | None = None) -> HueLightsConfig:
    """Load the main configuration."""
    if config_dir is None:
        config_dir = find_config_dir()

    config_path = config_dir / "config.yaml"
    data = load_yaml(config_path)
    return HueLightsConfig.model_validate(data)


def load_secrets(config_dir: Path | None = None) -> SecretsConfig:
    """Load the secrets configuration."""
    if config_dir is None:
        config_dir = find_config_dir()

    secrets_path = config_dir / "secrets.yaml"
    data = load_yaml(secrets_path)
    return SecretsConfig.model_validate(data)
