from __future__ import annotations

"""
Domain Constants.

Centralizes the display symbols, fixed status strings, and network defaults
shared by the tree client, the renderer and the snapshot service.
"""

from typing import Dict

APP_VERSION = "1.0.0"

# -----------------------------------------------------------------------------
# RENDERING
# -----------------------------------------------------------------------------
INDENT_UNIT = "  "
FOLDER_ICON = "📁 "
FILE_ICON = "📄 "

# -----------------------------------------------------------------------------
# DISPLAY STATES
# -----------------------------------------------------------------------------
LOADING_TEXT = "Loading..."
ERROR_PREFIX = "Error: "

# Locale of user-facing messages
DEFAULT_LOCALE = "id"

# -----------------------------------------------------------------------------
# ENDPOINTS
# -----------------------------------------------------------------------------
TREE_ENDPOINT = "/tree"
TREE_QUERY_PARAM = "url"

DEFAULT_SERVER_URL = "http://localhost:8080"
DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8080

GITHUB_PREFIX = "https://github.com/"
GITHUB_ARCHIVE_TEMPLATE = "https://github.com/{owner}/{repo}/archive/refs/heads/{branch}.zip"
DEFAULT_BRANCH = "main"
DEFAULT_DOWNLOAD_TIMEOUT = 60

ARCHIVE_FILE_NAME = "repo.zip"
EXTRACT_DIR_NAME = "unzipped"

# Plain-text bodies returned by the /tree endpoint on failure
SERVER_MESSAGES: Dict[str, str] = {
    "missing_url": "Missing 'url' parameter",
    "invalid_url": "Invalid GitHub URL",
    "temp_dir": "Failed to create temp dir",
    "download": "Failed to download repo",
    "unzip": "Failed to unzip repo",
    "empty": "Empty or invalid repo content",
    "too_deep": "Repository tree too deep to serialize",
}
