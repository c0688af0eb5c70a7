from __future__ import annotations

import logging
from typing import Optional

import requests

from repotree.domain.errors import RepositoryDownloadError
from repotree.infra.network.common import CHUNK_SIZE, USER_AGENT

logger = logging.getLogger(__name__)


def download_file(url: str, dest_path: str, timeout: Optional[float] = None) -> int:
    """
    Stream a remote file to disk.

    Args:
        url: Source URL.
        dest_path: Local file to create or overwrite.
        timeout: Seconds to wait between bytes; None waits indefinitely.

    Returns:
        int: Number of bytes written.

    Raises:
        RepositoryDownloadError: On network failure, non-2xx status or a
            local write error.
    """
    headers = {"User-Agent": USER_AGENT}
    written = 0

    logger.debug(f"Downloading archive from {url}")
    try:
        with requests.get(url, headers=headers, stream=True, timeout=timeout) as response:
            response.raise_for_status()
            with open(dest_path, "wb") as f:
                for chunk in response.iter_content(chunk_size=CHUNK_SIZE):
                    if chunk:
                        f.write(chunk)
                        written += len(chunk)
    except (requests.exceptions.RequestException, OSError) as e:
        logger.error(f"Network: Archive download failed for {url}: {e}")
        raise RepositoryDownloadError(str(e)) from e

    logger.info(f"Network: Archive downloaded ({written / 1024:.1f} KB).")
    return written
