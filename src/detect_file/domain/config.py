from __future__ import annotations

"""
Configuration Domain Management.

Handles the default option set and its persistent storage as JSON in the
user data directory. Missing or corrupt files fall back to defaults.
"""

import json
import logging
import os
from typing import Any, Dict, Optional

from detect_file.infra.fs import get_user_data_dir

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Constants & Defaults
# -----------------------------------------------------------------------------
CONFIG_FILE_NAME = "config.json"
CURRENT_CONFIG_VERSION = "1.0.0"
NOCASE_ENV_VAR = "DETECT_FILE_NOCASE"

CONFIG_KEYS = ("nocase", "log_level", "json_output", "locale")


def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        "nocase": False,
        "log_level": "INFO",
        "json_output": False,
        "locale": "en",
    }


def get_config_path() -> str:
    """Absolute path of the persisted configuration file."""
    return os.path.join(get_user_data_dir(), CONFIG_FILE_NAME)


# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------
def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load the persisted configuration merged over the defaults.

    Args:
        path: Optional explicit config file. Defaults to the user data dir.

    Returns:
        Dict[str, Any]: Configuration dictionary (unvalidated).
    """
    config = get_default_config()
    config_path = path or get_config_path()

    if not os.path.exists(config_path):
        logger.debug(f"Config file not found at '{config_path}'. Using defaults.")
        return config

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning(f"Failed to load config '{config_path}': {e}. Using defaults.")
        return config

    if not isinstance(data, dict):
        logger.warning("Corrupted config file. Using defaults.")
        return config

    settings = data.get("settings", data)
    if isinstance(settings, dict):
        for key in CONFIG_KEYS:
            if key in settings:
                config[key] = settings[key]
    return config


def save_config(config: Dict[str, Any], path: Optional[str] = None) -> bool:
    """
    Persist the known configuration keys to disk.

    Args:
        config: Configuration to save.
        path: Optional explicit config file. Defaults to the user data dir.

    Returns:
        bool: True if the file was written.
    """
    config_path = path or get_config_path()
    payload = {
        "version": CURRENT_CONFIG_VERSION,
        "settings": {k: config[k] for k in CONFIG_KEYS if k in config},
    }
    try:
        os.makedirs(os.path.dirname(os.path.abspath(config_path)), exist_ok=True)
        with open(config_path, "w", encoding="utf-8") as f:
            json.dump(payload, f, ensure_ascii=False, indent=4)
    except OSError as e:
        logger.error(f"Failed to save configuration: {e}")
        return False

    logger.debug(f"Configuration saved to {config_path}")
    return True


def apply_env_overrides(config: Dict[str, Any]) -> Dict[str, Any]:
    """
    Overlay environment-provided settings on a configuration copy.

    Args:
        config: Base configuration.

    Returns:
        Dict[str, Any]: New configuration with environment values applied.
    """
    out = dict(config)
    env_nocase = os.environ.get(NOCASE_ENV_VAR)
    if env_nocase is not None and env_nocase.strip():
        out["nocase"] = env_nocase.strip()
    return out
