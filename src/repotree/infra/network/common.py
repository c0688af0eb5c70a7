from __future__ import annotations

from repotree.domain.constants import APP_VERSION

USER_AGENT = f"RepoTree-Client/{APP_VERSION}"
CHUNK_SIZE = 8192
