from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Provides cross-platform resolution of the per-user data directory and the
small path helpers shared by logging and the snapshot service.
"""

import os

# -----------------------------------------------------------------------------
# GLOBAL CONSTANTS
# -----------------------------------------------------------------------------

APP_DIR_NAME = "RepoTree"
UNIX_APP_DIR_NAME = ".repotree"
CONFIG_FILE_NAME = "config.json"

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def get_user_data_dir() -> str:
    """
    Resolve the standard OS-specific directory for persistent application data.

    Standards:
    - Windows: %LOCALAPPDATA%/RepoTree
    - Linux/Mac: ~/.repotree

    The directory is not created; readers treat a missing directory as
    an empty one.

    Returns:
        str: Absolute path to the application data directory.
    """
    path: str = ""

    if os.name == "nt":
        base = os.environ.get("LOCALAPPDATA") or os.environ.get("APPDATA")
        if base:
            path = os.path.join(base, APP_DIR_NAME)

    if not path:
        path = os.path.join(os.path.expanduser("~"), UNIX_APP_DIR_NAME)

    return os.path.abspath(path)


def get_config_path() -> str:
    """Absolute path of the user configuration file."""
    return os.path.join(get_user_data_dir(), CONFIG_FILE_NAME)


def ensure_parent_dir(path: str) -> None:
    """
    Create the parent directory hierarchy for a target file if missing.

    Args:
        path: Path to the target file.
    """
    parent = os.path.dirname(os.path.abspath(path))
    if parent and not os.path.exists(parent):
        os.makedirs(parent, exist_ok=True)
