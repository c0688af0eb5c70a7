from __future__ import annotations

"""
Network Communication Infrastructure.

Facade over the HTTP clients: the tree client used by the CLI and the
archive client used by the snapshot service.
"""

from repotree.infra.network.archive_client import download_file
from repotree.infra.network.tree_client import fetch_tree

__all__ = [
    "download_file",
    "fetch_tree",
]
