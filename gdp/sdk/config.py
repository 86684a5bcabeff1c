"""YAML settings for gdp.

The file holds the auth mode used to reach Drive and, optionally, where the
tracked projects registry lives. Keys are addressed with dots, e.g.
``auth.token_file``.
"""

import os
import copy
import yaml
import logging
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

DEFAULT_CONFIG = {
    "auth": {
        "mode": None,
        "token_file": None,
    },
    "projects": {
        "file": None,
    },
}


def get_config_dir() -> Path:
    env_path = os.getenv("GDP_CONFIG_DIR")
    if env_path:
        return Path(env_path)
    return Path.home() / ".config" / "gdrive-projects"


def get_config_file_path() -> Path:
    """GDP_CONFIG_FILE wins over GDP_CONFIG_DIR."""
    env_path = os.getenv("GDP_CONFIG_FILE")
    if env_path:
        return Path(env_path)
    return get_config_dir() / "config.yaml"


def load_config() -> dict:
    """Return the settings with unset keys filled from DEFAULT_CONFIG."""
    settings = copy.deepcopy(DEFAULT_CONFIG)
    config_file = get_config_file_path()
    if not config_file.exists():
        logger.debug(f"No settings at {config_file}, using defaults.")
        return settings

    try:
        with open(config_file, 'r') as f:
            stored = yaml.safe_load(f)
    except yaml.YAMLError as e:
        logger.error(f"Ignoring unreadable settings file {config_file}: {e}")
        return settings

    if isinstance(stored, dict):
        _deep_merge(settings, stored)
    return settings


def save_config(config_data: dict):
    config_file = get_config_file_path()
    config_file.parent.mkdir(parents=True, exist_ok=True)
    with open(config_file, 'w') as f:
        yaml.safe_dump(config_data, f, default_flow_style=False)
    logger.debug(f"Settings written to {config_file}")


def get_config_value(key: str, default: Any = None) -> Any:
    """Look up a dotted key. Unset (None) values fall back to `default`."""
    value = load_config()
    for part in key.split('.'):
        if not isinstance(value, dict) or part not in value:
            return default
        value = value[part]
    return default if value is None else value


def set_config_value(key: str, value: Any):
    """Store a dotted key, creating intermediate sections as needed."""
    settings = load_config()
    *sections, leaf = key.split('.')
    section = settings
    for part in sections:
        if not isinstance(section.get(part), dict):
            section[part] = {}
        section = section[part]
    section[leaf] = value
    save_config(settings)


def _deep_merge(base: dict, new: dict) -> dict:
    for k, v in new.items():
        if isinstance(base.get(k), dict) and isinstance(v, dict):
            _deep_merge(base[k], v)
        else:
            base[k] = v
    return base
