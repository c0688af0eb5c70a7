from __future__ import annotations

"""
Unit tests for the Directory Tree Builder.

Verifies name-ordered listing, directory/file flags, empty directories,
symlink handling and the missing-root error.
"""

import os
from pathlib import Path

import pytest

from repotree.core.analysis.tree_builder import build_tree


@pytest.fixture
def project_structure(tmp_path: Path) -> Path:
    """
    Creates a temporary directory structure for testing tree building.

    Structure:
    /repo-main
      /docs            (empty)
      /src
        b.py
        a.py
      README.md
    """
    root = tmp_path / "repo-main"
    root.mkdir()
    (root / "docs").mkdir()

    src = root / "src"
    src.mkdir()
    (src / "b.py").write_text("b = 2", encoding="utf-8")
    (src / "a.py").write_text("a = 1", encoding="utf-8")

    (root / "README.md").write_text("# Repo", encoding="utf-8")
    return root


def test_build_tree_structure(project_structure: Path) -> None:
    tree = build_tree(str(project_structure))

    assert tree.name == "repo-main"
    assert tree.is_dir is True
    assert [c.name for c in tree.children] == ["README.md", "docs", "src"]

    readme, docs, src = tree.children
    assert readme.is_dir is False
    assert docs.is_dir is True and docs.children == ()
    assert [c.name for c in src.children] == ["a.py", "b.py"]


def test_build_tree_on_single_file(project_structure: Path) -> None:
    node = build_tree(str(project_structure / "README.md"))

    assert node.name == "README.md"
    assert node.is_dir is False
    assert node.children == ()


def test_build_tree_wire_shape(project_structure: Path) -> None:
    """Empty directories serialize without a children key."""
    data = build_tree(str(project_structure)).to_dict()

    assert data["children"][1] == {"name": "docs", "is_dir": True}
    assert data["children"][2]["children"][0] == {"name": "a.py", "is_dir": False}


@pytest.mark.skipif(not hasattr(os, "symlink") or os.name == "nt", reason="symlinks unavailable")
def test_directory_symlinks_are_leaves(project_structure: Path) -> None:
    (project_structure / "loop").symlink_to(project_structure, target_is_directory=True)

    tree = build_tree(str(project_structure))
    loop = next(c for c in tree.children if c.name == "loop")

    assert loop.is_dir is False
    assert loop.children == ()


def test_missing_root_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        build_tree(str(tmp_path / "nope"))
