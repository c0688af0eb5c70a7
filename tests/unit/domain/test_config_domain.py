from __future__ import annotations

"""
Unit tests for Configuration loading.

Verifies default values, merging of the user config file, and tolerance
to corrupt or non-object files.
"""

import json
from pathlib import Path

import pytest

from repotree.domain.config import get_default_config, load_config
from repotree.utils.i18n import I18n


def test_defaults() -> None:
    cfg = get_default_config()

    assert cfg["server_url"] == "http://localhost:8080"
    assert cfg["locale"] == "id"
    assert cfg["locale"] == I18n().locale
    assert cfg["request_timeout"] is None
    assert cfg["max_depth"] is None
    assert cfg["port"] == 8080
    assert cfg["branch"] == "main"


def test_load_config_missing_file(tmp_path: Path) -> None:
    assert load_config(str(tmp_path / "config.json")) == get_default_config()


def test_load_config_merges_known_keys(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"server_url": "http://tree.local", "unknown": 1}), encoding="utf-8")

    cfg = load_config(str(path))

    assert cfg["server_url"] == "http://tree.local"
    assert "unknown" not in cfg
    assert cfg["locale"] == "id"
    assert cfg["locale"] == I18n().locale


@pytest.mark.parametrize("content", ["{not json", "[1, 2, 3]"])
def test_load_config_corrupt_file(tmp_path: Path, content: str) -> None:
    path = tmp_path / "config.json"
    path.write_text(content, encoding="utf-8")

    assert load_config(str(path)) == get_default_config()
