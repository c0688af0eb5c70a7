from __future__ import annotations

"""
HTTP Service.

Exposes `GET /tree?url=<github repository url>`, answering with the TreeNode
JSON of the repository's default branch. Failures are answered with a fixed
plain-text body and a 400 or 500 status.
"""

import logging
from typing import Any, Dict, Optional

from fastapi import FastAPI
from fastapi.responses import JSONResponse, PlainTextResponse

from repotree.core.services import snapshot
from repotree.domain.config import get_default_config
from repotree.domain.constants import APP_VERSION, SERVER_MESSAGES, TREE_ENDPOINT
from repotree.domain.errors import (
    ArchiveExtractionError,
    EmptyRepositoryError,
    InvalidRepositoryURL,
    RepositoryDownloadError,
    WorkspaceError,
)

logger = logging.getLogger(__name__)

# Exception type -> (status code, message key)
_ERROR_RESPONSES = {
    InvalidRepositoryURL: (400, "invalid_url"),
    WorkspaceError: (500, "temp_dir"),
    RepositoryDownloadError: (500, "download"),
    ArchiveExtractionError: (500, "unzip"),
    EmptyRepositoryError: (500, "empty"),
}


def create_app(config: Optional[Dict[str, Any]] = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        config: Validated configuration; `branch` and `download_timeout`
            are read from it. Defaults are used when omitted.
    """
    cfg = config or get_default_config()
    branch = cfg["branch"]
    download_timeout = cfg["download_timeout"]

    app = FastAPI(title="RepoTree", version=APP_VERSION)

    @app.get(TREE_ENDPOINT)
    def repo_tree(url: Optional[str] = None):
        """Describe the repository at `url` as a TreeNode tree."""
        if not url:
            return PlainTextResponse(SERVER_MESSAGES["missing_url"], status_code=400)

        logger.info(f"Tree requested for {url}")
        try:
            tree = snapshot.snapshot_repository(url, branch=branch, timeout=download_timeout)
        except tuple(_ERROR_RESPONSES) as e:
            status_code, key = _ERROR_RESPONSES[type(e)]
            logger.warning(f"Tree request for {url} failed ({status_code}): {e}")
            return PlainTextResponse(SERVER_MESSAGES[key], status_code=status_code)

        # json encoding recurses once per nesting level
        try:
            return JSONResponse(tree.to_dict())
        except RecursionError as e:
            logger.error(f"Tree for {url} is too deep to serialize: {e}")
            return PlainTextResponse(SERVER_MESSAGES["too_deep"], status_code=500)

    return app


def serve(config: Dict[str, Any]) -> None:
    """Run the HTTP service with uvicorn until interrupted."""
    import uvicorn

    host, port = config["host"], config["port"]
    logger.info(f"Server running at http://{host}:{port}")
    # log_config=None keeps the handlers installed by configure_logging
    uvicorn.run(create_app(config), host=host, port=port, log_config=None)
