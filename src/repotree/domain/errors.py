from __future__ import annotations

"""
Domain Exception Hierarchy.

Every failure the client or the snapshot service reports to a user derives
from RepoTreeError, so interface layers can catch one type and display its
message verbatim.
"""


class RepoTreeError(Exception):
    """Base class for all expected RepoTree failures."""


# -----------------------------------------------------------------------------
# CLIENT SIDE
# -----------------------------------------------------------------------------

class FetchError(RepoTreeError):
    """Transport failure or non-2xx status while requesting a tree."""


class TreeFormatError(RepoTreeError):
    """Response body is not valid JSON or does not have the TreeNode shape."""


class TreeDepthExceeded(RepoTreeError):
    """A tree nests deeper than the configured rendering bound."""

    def __init__(self, max_depth: int):
        super().__init__(f"Tree exceeds maximum depth of {max_depth} levels")
        self.max_depth = max_depth


# -----------------------------------------------------------------------------
# SNAPSHOT SERVICE
# -----------------------------------------------------------------------------

class InvalidRepositoryURL(RepoTreeError):
    """URL does not point to a GitHub owner/repository pair."""


class RepositoryDownloadError(RepoTreeError):
    """The repository archive could not be downloaded."""


class ArchiveExtractionError(RepoTreeError):
    """The downloaded archive could not be extracted."""


class EmptyRepositoryError(RepoTreeError):
    """The extracted archive holds no entries."""


class WorkspaceError(RepoTreeError):
    """The temporary working directory could not be created."""
