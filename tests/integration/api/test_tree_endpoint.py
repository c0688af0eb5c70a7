from __future__ import annotations

"""
Integration tests for the /tree HTTP endpoint.

Drives the FastAPI application through TestClient with the snapshot
service patched, checking status codes and bodies for every failure kind.
"""

import sys
from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from repotree.domain.config import get_default_config
from repotree.domain.errors import (
    ArchiveExtractionError,
    EmptyRepositoryError,
    InvalidRepositoryURL,
    RepositoryDownloadError,
    WorkspaceError,
)
from repotree.domain.tree_models import TreeNode
from repotree.interface.api.app import create_app

SNAPSHOT = "repotree.interface.api.app.snapshot.snapshot_repository"


@pytest.fixture
def client() -> TestClient:
    """Create a test client that returns HTTP responses instead of raising exceptions."""
    config = dict(get_default_config(), branch="trunk", download_timeout=12)
    return TestClient(create_app(config), raise_server_exceptions=False)


def test_tree_success(client: TestClient, nested_tree_dict) -> None:
    tree = TreeNode.from_dict(nested_tree_dict)

    with patch(SNAPSHOT, return_value=tree) as mock_snapshot:
        response = client.get("/tree", params={"url": "https://github.com/octo/hello"})

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("application/json")
    assert response.json() == nested_tree_dict
    mock_snapshot.assert_called_once_with("https://github.com/octo/hello", branch="trunk", timeout=12)


@pytest.mark.parametrize("query", ["", "?url="])
def test_tree_missing_url(client: TestClient, query: str) -> None:
    with patch(SNAPSHOT) as mock_snapshot:
        response = client.get("/tree" + query)

    assert response.status_code == 400
    assert response.text == "Missing 'url' parameter"
    mock_snapshot.assert_not_called()


@pytest.mark.parametrize("error, status, body", [
    (InvalidRepositoryURL("x"), 400, "Invalid GitHub URL"),
    (WorkspaceError("x"), 500, "Failed to create temp dir"),
    (RepositoryDownloadError("x"), 500, "Failed to download repo"),
    (ArchiveExtractionError("x"), 500, "Failed to unzip repo"),
    (EmptyRepositoryError("x"), 500, "Empty or invalid repo content"),
])
def test_tree_failures(client: TestClient, error: Exception, status: int, body: str) -> None:
    with patch(SNAPSHOT, side_effect=error):
        response = client.get("/tree", params={"url": "https://github.com/octo/hello"})

    assert response.status_code == status
    assert response.text == body
    assert response.headers["content-type"].startswith("text/plain")


def test_client_and_server_agree_on_invalid_url(client: TestClient) -> None:
    """A non-GitHub URL is rejected by the real resolver before any download."""
    with patch("repotree.core.services.snapshot.network.download_file") as mock_dl:
        response = client.get("/tree", params={"url": "https://example.com/a/b"})

    assert response.status_code == 400
    assert response.text == "Invalid GitHub URL"
    mock_dl.assert_not_called()


def test_tree_too_deep_to_serialize(client: TestClient) -> None:
    tree = TreeNode("leaf")
    for _ in range(5000):
        tree = TreeNode("d", is_dir=True, children=(tree,))

    with patch(SNAPSHOT, return_value=tree):
        with patch("repotree.interface.api.app.JSONResponse", side_effect=RecursionError("too deep")):
            response = client.get("/tree", params={"url": "https://github.com/octo/hello"})

    assert response.status_code == 500
    assert response.text == "Repository tree too deep to serialize"


def test_deep_tree_always_gets_an_answer(client: TestClient) -> None:
    tree = TreeNode("leaf")
    for _ in range(max(5000, sys.getrecursionlimit() + 100)):
        tree = TreeNode("d", is_dir=True, children=(tree,))

    with patch(SNAPSHOT, return_value=tree):
        response = client.get("/tree", params={"url": "https://github.com/octo/hello"})

    assert response.status_code in (200, 500)
    if response.status_code == 500:
        assert response.text == "Repository tree too deep to serialize"
