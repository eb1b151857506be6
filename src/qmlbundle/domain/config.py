from __future__ import annotations

"""
Configuration Domain Management.

Handles persistent storage of the last deployment session using JSON and
provides the default runtime configuration consumed by the pipeline.
"""

import json
import logging
import os
import platform
from typing import Any, Dict

from qmlbundle.domain.constants import CURRENT_CONFIG_VERSION, DEFAULT_RESOURCE_DIR
from qmlbundle.infra.fs import DEFAULT_OUTPUT_SUBDIR, get_user_data_dir

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Constants & Defaults
# -----------------------------------------------------------------------------
CONFIG_FILE = os.path.join(get_user_data_dir(), "config.json")
DEFAULT_QMAKE = "qmake"


def host_platform() -> str:
    """Identity of the running platform ('windows', 'linux', 'darwin', ...)."""
    return platform.system().lower()


# -----------------------------------------------------------------------------
# Configuration Models (Dict-based)
# -----------------------------------------------------------------------------
def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration (Session State).
    This dictionary drives the behavior of the deployment pipeline.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    base = os.getcwd()
    return {
        # IO Paths
        "project_dir": base,
        "output_dir": os.path.join(base, DEFAULT_OUTPUT_SUBDIR),
        "resource_dir_name": DEFAULT_RESOURCE_DIR,

        # Toolkit Location (empty qml_dir means: ask qmake)
        "qml_dir": "",
        "qmake_path": DEFAULT_QMAKE,

        # Target
        "target_os": host_platform(),

        # Execution
        "dry_run": False,
        "copy_workers": 1,
    }


def get_default_app_state() -> Dict[str, Any]:
    """
    Generate the complete default application state structure.

    Returns:
        Dict[str, Any]: Version stamp plus the last active session.
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

    if not os.path.exists(CONFIG_FILE):
        logger.debug("Config file not found. Returning defaults.")
        return default_state

    try:
        with open(CONFIG_FILE, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.error(f"Failed to load config: {e}. Using defaults.")
        return default_state

    if not isinstance(data, dict):
        logger.warning("Corrupted config file. Resetting to defaults.")
        return default_state

    # Merge with defaults to ensure new keys exist
    state = default_state
    session = data.get("last_session")
    if isinstance(session, dict):
        state["last_session"].update(session)

    state["version"] = CURRENT_CONFIG_VERSION
    return state


def save_app_state(state: Dict[str, Any]) -> None:
    """
    Persist application state to disk.

    Args:
        state: The state dictionary to save.
    """
    try:
        os.makedirs(os.path.dirname(CONFIG_FILE), exist_ok=True)
        state["version"] = CURRENT_CONFIG_VERSION
        with open(CONFIG_FILE, "w", encoding="utf-8") as f:
            json.dump(state, f, ensure_ascii=False, indent=4)
        logger.debug(f"Configuration saved to {CONFIG_FILE}")
    except OSError as e:
        logger.error(f"Failed to save configuration: {e}")


# -----------------------------------------------------------------------------
# Facade API
# -----------------------------------------------------------------------------
def load_config() -> Dict[str, Any]:
    """
    Retrieve the active configuration (Last Session) directly.
    """
    state = load_app_state()
    defaults = get_default_config()
    defaults.update(state.get("last_session", {}))
    return defaults


def save_config(config: Dict[str, Any]) -> None:
    """
    Save the provided config as the 'last_session'.
    """
    state = load_app_state()
    state["last_session"] = config
    save_app_state(state)
