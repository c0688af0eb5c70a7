from __future__ import annotations

"""
Configuration Domain Management.

Defines the runtime configuration dictionary shared by the CLI, the tree
client and the HTTP service, and loads user overrides from the JSON file
in the application data directory.
"""

import json
import logging
import os
from typing import Any, Dict, Optional

from repotree.domain.constants import (
    DEFAULT_BRANCH,
    DEFAULT_DOWNLOAD_TIMEOUT,
    DEFAULT_HOST,
    DEFAULT_LOCALE,
    DEFAULT_PORT,
    DEFAULT_SERVER_URL,
)
from repotree.infra.fs import get_config_path

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Configuration Models (Dict-based)
# -----------------------------------------------------------------------------
def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        # Client
        "server_url": DEFAULT_SERVER_URL,
        "request_timeout": None,
        "max_depth": None,
        "locale": DEFAULT_LOCALE,

        # Server
        "host": DEFAULT_HOST,
        "port": DEFAULT_PORT,
        "branch": DEFAULT_BRANCH,
        "download_timeout": DEFAULT_DOWNLOAD_TIMEOUT,

        # Diagnostics
        "log_level": "INFO",
        "log_file": None,
    }


# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------
def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load the user configuration merged over the defaults.

    Unknown keys are dropped. A missing or unreadable file yields the
    defaults unchanged.

    Args:
        path: Explicit config file. Defaults to the user data directory file.

    Returns:
        Dict[str, Any]: The merged configuration.
    """
    config = get_default_config()
    config_file = path or get_config_path()

    if not os.path.exists(config_file):
        logger.debug(f"Config file not found at {config_file}. Using defaults.")
        return config

    try:
        with open(config_file, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning(f"Failed to load config from {config_file}: {e}. Using defaults.")
        return config

    if not isinstance(data, dict):
        logger.warning("Corrupted config file (root is not an object). Using defaults.")
        return config

    for key, value in data.items():
        if key in config:
            config[key] = value
        else:
            logger.debug(f"Ignoring unknown config key '{key}'.")

    return config
