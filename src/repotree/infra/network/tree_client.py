from __future__ import annotations

import logging
from typing import Any, Optional

import requests

from repotree.domain.constants import TREE_ENDPOINT, TREE_QUERY_PARAM
from repotree.domain.errors import FetchError, TreeFormatError
from repotree.infra.network.common import USER_AGENT
from repotree.utils.i18n import i18n

logger = logging.getLogger(__name__)


def fetch_tree(
        repo_url: str,
        *,
        server_url: str,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
) -> Any:
    """
    Request the tree of `repo_url` from the tree server and decode the body.

    The repository URL travels as the percent-encoded `url` query parameter.
    Transport failures and non-2xx statuses are reported with the same fixed
    localized message, whatever the status or body.

    Args:
        repo_url: Repository URL exactly as the user entered it.
        server_url: Base URL of the tree server.
        timeout: Seconds to wait for the server; None waits indefinitely.
        session: Optional requests session to reuse.

    Returns:
        Any: The decoded JSON body.

    Raises:
        FetchError: On network failure or a non-2xx status.
        TreeFormatError: If the body is not valid JSON or nests too deeply
            for the decoder.
    """
    endpoint = server_url.rstrip("/") + TREE_ENDPOINT
    headers = {"User-Agent": USER_AGENT}
    http = session or requests

    logger.debug(f"Requesting tree for '{repo_url}' from {endpoint}")

    try:
        response = http.get(
            endpoint,
            params={TREE_QUERY_PARAM: repo_url},
            headers=headers,
            timeout=timeout,
        )
    except requests.exceptions.RequestException as e:
        logger.error(f"Network: Communication error while fetching tree: {e}")
        raise FetchError(i18n.t("errors.fetch_failed")) from e

    if not 200 <= response.status_code < 300:
        logger.error(f"Network: Tree server answered HTTP {response.status_code}.")
        raise FetchError(i18n.t("errors.fetch_failed"))

    try:
        data = response.json()
    except (ValueError, RecursionError) as e:
        logger.error(f"Network: Tree server returned malformed JSON: {e}")
        raise TreeFormatError(str(e)) from e

    size_kb = len(response.content) / 1024
    logger.info(f"Network: Tree received ({size_kb:.1f} KB).")
    return data
