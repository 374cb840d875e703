from __future__ import annotations

"""
Configuration Domain Management.

Handles persistent storage of the last CLI session using JSON in the user
data directory, with default fallback on missing or corrupted files.
"""

import json
import logging
import os
from typing import Any, Dict

from fswalker.domain.constants import CURRENT_CONFIG_VERSION, HIDDEN_MARKER
from fswalker.infra.fs import get_user_data_dir

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = "config.json"


def get_config_file() -> str:
    """Absolute path of the persisted configuration file."""
    return os.path.join(get_user_data_dir(), CONFIG_FILE_NAME)

# -----------------------------------------------------------------------------
# Configuration Models (Dict-based)
# -----------------------------------------------------------------------------
def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration (Session State).

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        # Traversal
        "root_paths": [os.getcwd()],
        "hidden_marker": HIDDEN_MARKER,

        # Search targets
        "target_file": "",
        "target_dir": "",

        # Output
        "output_format": "text",

        # Diagnostics
        "log_level": "WARNING",
        "save_error_log": False,
    }


def get_default_app_state() -> Dict[str, Any]:
    """
    Generate the complete default application state structure.

    Returns:
        Dict[str, Any]: The full JSON structure for config.json.
    """
    return {
        "version": CURRENT_CONFIG_VERSION,
        "last_session": get_default_config(),
    }

# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------
def load_app_state() -> Dict[str, Any]:
    """
    Load application state from disk.

    Returns:
        Dict[str, Any]: The loaded state or a default structure on failure.
    """
    default_state = get_default_app_state()
    config_file = get_config_file()

    if not os.path.exists(config_file):
        logger.debug("Config file not found. Returning defaults.")
        return default_state

    try:
        with open(config_file, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.error(f"Failed to load config: {e}. Using defaults.")
        return default_state

    if not isinstance(data, dict):
        logger.warning("Corrupted config file. Resetting to defaults.")
        return default_state

    session = data.get("last_session")
    if isinstance(session, dict):
        default_state["last_session"].update(session)

    default_state["version"] = CURRENT_CONFIG_VERSION
    return default_state


def save_app_state(state: Dict[str, Any]) -> bool:
    """
    Persist application state to disk.

    Args:
        state: The state dictionary to save.

    Returns:
        bool: True if the file was written.
    """
    config_file = get_config_file()
    try:
        os.makedirs(os.path.dirname(config_file), exist_ok=True)
        state["version"] = CURRENT_CONFIG_VERSION
        with open(config_file, "w", encoding="utf-8") as f:
            json.dump(state, f, ensure_ascii=False, indent=4)
        logger.debug(f"Configuration saved to {config_file}")
        return True
    except OSError as e:
        logger.error(f"Failed to save configuration: {e}")
        return False

# -----------------------------------------------------------------------------
# Facade API
# -----------------------------------------------------------------------------
def load_config() -> Dict[str, Any]:
    """Retrieve the active configuration (Last Session) merged over defaults."""
    state = load_app_state()
    defaults = get_default_config()
    defaults.update(state.get("last_session", {}))
    return defaults


def save_config(config: Dict[str, Any]) -> bool:
    """Save the provided config as the 'last_session'."""
    state = load_app_state()
    state["last_session"] = config
    return save_app_state(state)
