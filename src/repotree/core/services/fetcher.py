from __future__ import annotations

"""
Tree Fetch Service.

Drives the loading, success and error display states of one tree request:
show the placeholder, fetch the tree from the server, render it and write the
result to the output sink. Every failure ends as an `Error: <message>` line
in the sink instead of an exception.
"""

import logging
from typing import Optional

import requests

from repotree.core.analysis.tree_renderer import render_tree
from repotree.domain.constants import ERROR_PREFIX, LOADING_TEXT
from repotree.domain.errors import RepoTreeError
from repotree.domain.output import OutputSink
from repotree.domain.tree_models import TreeNode
from repotree.infra import network

logger = logging.getLogger(__name__)


def fetch_and_render(
        repo_url: str,
        output: OutputSink,
        *,
        server_url: str,
        timeout: Optional[float] = None,
        max_depth: Optional[int] = None,
        session: Optional[requests.Session] = None,
) -> bool:
    """
    Fetch the tree of `repo_url` and display it in `output`.

    The URL is passed through untouched; rejecting bad URLs is left to the
    server. There is no retry and no cancellation of earlier calls.

    Args:
        repo_url: Repository URL entered by the user.
        output: Sink that displays the current state.
        server_url: Base URL of the tree server.
        timeout: Request timeout in seconds; None waits indefinitely.
        max_depth: Optional rendering depth bound.
        session: Optional requests session to reuse.

    Returns:
        bool: True if the final state shown is the rendered tree.
    """
    output.write(LOADING_TEXT, transient=True)

    try:
        data = network.fetch_tree(repo_url, server_url=server_url, timeout=timeout, session=session)
        tree = TreeNode.from_dict(data)
        text = render_tree(tree, 0, max_depth=max_depth)
    except RepoTreeError as e:
        logger.warning(f"Tree request for '{repo_url}' failed: {e}")
        output.write(f"{ERROR_PREFIX}{e}")
        return False
    except Exception as e:
        logger.error(f"Unexpected failure rendering tree for '{repo_url}': {e}", exc_info=True)
        output.write(f"{ERROR_PREFIX}{e}")
        return False

    logger.debug(f"Rendered tree for '{repo_url}' ({len(text.splitlines())} lines).")
    output.write(text)
    return True
