"""
jump.config — Global config management.

~/.cargo-jump/config.yaml:

    git: git            # git executable
    cargo: cargo        # cargo executable
    log_level: info     # info | debug

Every key is optional. A missing file means defaults.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import yaml

from jump.errors import ConfigError


JUMP_HOME = Path.home() / ".cargo-jump"

LOG_LEVELS = ("info", "debug")


@dataclass
class JumpConfig:
    """Global cargo-jump config."""
    git: str = "git"
    cargo: str = "cargo"
    log_level: str = "info"

    @property
    def debug(self) -> bool:
        return self.log_level == "debug"


def config_path() -> Path:
    return JUMP_HOME / "config.yaml"


def load_config(path: str | Path | None = None) -> JumpConfig:
    """Read the config file (default: ~/.cargo-jump/config.yaml).

    Raises:
        ConfigError: File is unreadable, not a mapping, or has a bad log_level
    """
    cp = Path(path) if path else config_path()
    if not cp.exists():
        return JumpConfig()

    try:
        with open(cp) as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"Cannot read config {cp}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Config must be a YAML mapping: {cp}")

    cfg = JumpConfig()
    cfg.git = str(data.get("git", cfg.git))
    cfg.cargo = str(data.get("cargo", cfg.cargo))

    level = str(data.get("log_level", cfg.log_level)).lower()
    if level not in LOG_LEVELS:
        raise ConfigError(
            f"Unknown log_level '{level}' in {cp} "
            f"(expected one of: {', '.join(LOG_LEVELS)})"
        )
    cfg.log_level = level

    return cfg
