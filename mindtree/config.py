"""
Configuration for mindtree.

Loaded from:
1. Defaults (this file)
2. Config file (~/.config/mindtree/config.toml) if exists
3. Environment variables (MINDTREE_*) override file
"""

from __future__ import annotations

import logging
import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass
class SheetConfig:
    """Defaults applied when a sheet is created."""
    structure_class: str = "org.xmind.ui.logic.right"


@dataclass
class TopicsConfig:
    """Topic insertion settings."""
    auto_title_prefix: str = "Topic"  # untitled topics become "<prefix> <n>"


@dataclass
class Config:
    """Root config with all settings."""
    sheet: SheetConfig = field(default_factory=SheetConfig)
    topics: TopicsConfig = field(default_factory=TopicsConfig)


def get_config_path() -> Path:
    """Get config file path, respecting XDG."""
    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "mindtree" / "config.toml"
    return Path.home() / ".config" / "mindtree" / "config.toml"


def load_config() -> Config:
    """Load config from file if exists, else return defaults."""
    config = Config()
    path = get_config_path()

    if path.exists():
        try:
            with open(path, "rb") as f:
                data = tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError) as e:
            logger.warning("Ignoring unreadable config %s: %s", path, e)
        else:
            config = _apply_toml(config, data)

    # env var overrides
    config = _apply_env(config)

    return config


def _apply_toml(config: Config, data: dict) -> Config:
    """Apply toml data to config."""
    s = _section(data, "sheet")
    if s is not None:
        if "structure_class" in s:
            config.sheet.structure_class = str(s["structure_class"])

    t = _section(data, "topics")
    if t is not None:
        if "auto_title_prefix" in t:
            config.topics.auto_title_prefix = str(t["auto_title_prefix"])

    return config


def _section(data: dict, name: str) -> dict | None:
    """Return the [name] table, or None if it is missing or not a table."""
    section = data.get(name)
    if section is None:
        return None
    if not isinstance(section, dict):
        logger.warning("Ignoring config section %r: expected a table", name)
        return None
    return section


def _apply_env(config: Config) -> Config:
    """Apply environment variable overrides."""
    env_map: dict[str, tuple[str, str]] = {
        "MINDTREE_STRUCTURE_CLASS": ("sheet", "structure_class"),
        "MINDTREE_AUTO_TITLE_PREFIX": ("topics", "auto_title_prefix"),
    }

    for env_key, (section, attr) in env_map.items():
        val = os.environ.get(env_key)
        if val is not None:
            setattr(getattr(config, section), attr, val)

    return config


# Module-level config instance, loaded on first use
_config: Config | None = None


def get_config() -> Config:
    """Get the global config instance."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def reset_config() -> None:
    """Drop the cached config so the next ``get_config`` reloads it."""
    global _config
    _config = None
