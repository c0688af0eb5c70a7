from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared fixtures for tree payloads and mocked HTTP responses.
"""

import os
import sys
from typing import Any, Callable, Dict, Iterator, Optional
from unittest.mock import MagicMock

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from repotree.domain.constants import DEFAULT_LOCALE  # noqa: E402
from repotree.utils.i18n import i18n  # noqa: E402


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture(autouse=True)
def restore_locale() -> Iterator[None]:
    """Reset the translation singleton after tests that switch locale."""
    yield
    if i18n.locale != DEFAULT_LOCALE:
        i18n.load_locale(DEFAULT_LOCALE)


@pytest.fixture
def nested_tree_dict() -> Dict[str, Any]:
    """
    Return a three-level tree payload as served by /tree.

    Structure:
    repo-main/
      README.md
      src/
        pkg/
          core.py
        main.py
    """
    return {
        "name": "repo-main",
        "is_dir": True,
        "children": [
            {"name": "README.md", "is_dir": False},
            {
                "name": "src",
                "is_dir": True,
                "children": [
                    {
                        "name": "pkg",
                        "is_dir": True,
                        "children": [{"name": "core.py", "is_dir": False}],
                    },
                    {"name": "main.py", "is_dir": False},
                ],
            },
        ],
    }


@pytest.fixture
def make_response() -> Callable[..., MagicMock]:
    """
    Factory for mocked `requests.Response` objects.

    Args (of the returned callable):
        status_code: HTTP status to report.
        json_data: Value returned by `.json()`.
        json_error: Exception raised by `.json()` instead.
    """
    def _make(
            status_code: int = 200,
            json_data: Any = None,
            json_error: Optional[Exception] = None,
    ) -> MagicMock:
        response = MagicMock()
        response.status_code = status_code
        response.content = b"{}"
        if json_error is not None:
            response.json.side_effect = json_error
        else:
            response.json.return_value = json_data
        return response

    return _make
