from __future__ import annotations

"""
Repository Snapshot Service.

Turns a GitHub repository URL into a TreeNode tree: resolve the branch archive
URL, download it into a private temporary directory, extract it and describe
the top-level folder of the archive. The temporary directory is removed
whatever the outcome.
"""

import logging
import os
import shutil
import tempfile
import zipfile
from typing import Optional

from repotree.core.analysis.tree_builder import build_tree
from repotree.domain.constants import (
    ARCHIVE_FILE_NAME,
    DEFAULT_BRANCH,
    EXTRACT_DIR_NAME,
    GITHUB_ARCHIVE_TEMPLATE,
    GITHUB_PREFIX,
)
from repotree.domain.errors import (
    ArchiveExtractionError,
    EmptyRepositoryError,
    InvalidRepositoryURL,
    WorkspaceError,
)
from repotree.domain.tree_models import TreeNode
from repotree.infra import network

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def convert_github_to_zip_url(url: str, branch: str = DEFAULT_BRANCH) -> str:
    """
    Map a GitHub repository URL to the archive URL of one of its branches.

    Only the owner and repository segments are kept, so links to sub-pages
    (`/tree/dev/src`, `/issues`, ...) resolve to the same archive.

    Args:
        url: URL of the form https://github.com/<owner>/<repo>[/...].
        branch: Branch whose archive is requested.

    Returns:
        str: The archive download URL.

    Raises:
        InvalidRepositoryURL: If the URL is not an owner/repository URL on github.com.
    """
    if not url.startswith(GITHUB_PREFIX):
        raise InvalidRepositoryURL(f"Not a GitHub URL: {url!r}")

    parts = url[len(GITHUB_PREFIX):].split("/")
    if len(parts) < 2 or not parts[0] or not parts[1]:
        raise InvalidRepositoryURL(f"Missing owner or repository in {url!r}")

    return GITHUB_ARCHIVE_TEMPLATE.format(owner=parts[0], repo=parts[1], branch=branch)


def extract_archive(zip_path: str, dest_dir: str) -> None:
    """
    Extract a zip archive into `dest_dir`.

    Member names are sanitized by zipfile, so absolute paths and `..`
    components cannot escape the destination.

    Raises:
        ArchiveExtractionError: If the file is not a readable zip archive.
    """
    os.makedirs(dest_dir, exist_ok=True)
    try:
        with zipfile.ZipFile(zip_path, "r") as zf:
            zf.extractall(dest_dir)
    except (zipfile.BadZipFile, zipfile.LargeZipFile, OSError) as e:
        logger.error(f"Failed to extract archive '{zip_path}': {e}")
        raise ArchiveExtractionError(str(e)) from e


def snapshot_repository(
        repo_url: str,
        *,
        branch: str = DEFAULT_BRANCH,
        timeout: Optional[float] = None,
) -> TreeNode:
    """
    Download a repository archive and build the tree of its contents.

    GitHub archives contain a single `<repo>-<branch>` folder; the tree is
    rooted at the first extracted entry in name order.

    Args:
        repo_url: GitHub repository URL.
        branch: Branch to download.
        timeout: Download timeout in seconds; None waits indefinitely.

    Returns:
        TreeNode: Tree of the extracted repository.

    Raises:
        InvalidRepositoryURL, WorkspaceError, RepositoryDownloadError,
        ArchiveExtractionError, EmptyRepositoryError.
    """
    zip_url = convert_github_to_zip_url(repo_url, branch)

    try:
        work_dir = tempfile.mkdtemp(prefix="repotree-")
    except OSError as e:
        logger.error(f"Cannot create temporary directory: {e}")
        raise WorkspaceError(str(e)) from e

    try:
        zip_path = os.path.join(work_dir, ARCHIVE_FILE_NAME)
        network.download_file(zip_url, zip_path, timeout=timeout)

        extract_dir = os.path.join(work_dir, EXTRACT_DIR_NAME)
        extract_archive(zip_path, extract_dir)

        entries = sorted(os.listdir(extract_dir))
        if not entries:
            raise EmptyRepositoryError(f"Archive from {zip_url} is empty")

        tree = build_tree(os.path.join(extract_dir, entries[0]))
        logger.info(f"Snapshot of {repo_url} built (root: {tree.name}).")
        return tree
    finally:
        shutil.rmtree(work_dir, ignore_errors=True)
