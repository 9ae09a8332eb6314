from __future__ import annotations

"""
Unit tests for the directory adapter.

Uses the shared `sample_project` fixture (see conftest.py).
"""

import logging
import os
from pathlib import Path

import pytest

from printree.adapters.directory import directory_mapping, generate_directory_tree
from printree.core.transformer import transform
from printree.domain.config import GLYPH_PRESETS
from printree.domain.tree_models import make_leaf as leaf, make_parent as parent


def test_directory_tree_default(sample_project: Path, expected) -> None:
    assert generate_directory_tree(str(sample_project)) == expected(
        """
        project
        ├─ README.md
        ├─ src
        │  ├─ main.py
        │  └─ utils.py
        └─ tests
           └─ test_main.py
        """
    )


def test_directory_tree_dirs_first(sample_project: Path, expected) -> None:
    assert generate_directory_tree(str(sample_project), dirs_first=True) == expected(
        """
        project
        ├─ src
        │  ├─ main.py
        │  └─ utils.py
        ├─ tests
        │  └─ test_main.py
        └─ README.md
        """
    )


def test_directory_tree_without_root(sample_project: Path, expected) -> None:
    out = generate_directory_tree(str(sample_project), show_root=False, exclude_patterns=[r"^\.git$", r"^src$"])

    assert out == expected(
        """
        ├─ README.md
        └─ tests
           └─ test_main.py
        """
    )


def test_directory_tree_no_exclusions_shows_dot_entries(sample_project: Path) -> None:
    out = generate_directory_tree(str(sample_project), exclude_patterns=[])

    assert "├─ .git" in out
    assert "│  └─ HEAD" in out


def test_directory_tree_custom_glyphs(sample_project: Path) -> None:
    out = generate_directory_tree(str(sample_project / "src"), glyphs=GLYPH_PRESETS["ascii"])

    assert out == "src\n+-- main.py\n+-- utils.py"


def test_empty_directory_renders_as_root_only(tmp_path: Path) -> None:
    empty = tmp_path / "empty"
    empty.mkdir()

    assert generate_directory_tree(str(empty)) == "empty"
    assert generate_directory_tree(str(empty), show_root=False) == ""


def test_directory_mapping_transform(sample_project: Path) -> None:
    mapping = directory_mapping(exclude_patterns=[r"^\."])

    tree = transform(str(sample_project / "tests"), mapping)

    assert tree == parent("tests", [leaf("test_main.py")])


def test_directory_mapping_file_is_leaf(sample_project: Path) -> None:
    mapping = directory_mapping()

    assert mapping.get_children(str(sample_project / "README.md")) is None


def test_directory_mapping_trailing_separator(sample_project: Path) -> None:
    mapping = directory_mapping()
    path = str(sample_project / "src") + os.sep

    assert transform(path, mapping).text == "src"


def _link_dir(target: Path, link: Path) -> None:
    try:
        os.symlink(target, link, target_is_directory=True)
    except (OSError, NotImplementedError):
        pytest.skip("symlinks not supported here")


def test_symlinked_directory_is_not_followed(tmp_path: Path, expected) -> None:
    root = tmp_path / "proj"
    (root / "sub").mkdir(parents=True)
    _link_dir(root, root / "sub" / "loop")

    assert generate_directory_tree(str(root)) == expected(
        """
        proj
        └─ sub
           └─ loop
        """
    )


def test_symlinked_directory_sorts_with_files(tmp_path: Path, expected) -> None:
    root = tmp_path / "proj"
    (root / "zdir").mkdir(parents=True)
    (root / "b.txt").write_text("", encoding="utf-8")
    _link_dir(root / "zdir", root / "alink")

    assert generate_directory_tree(str(root), dirs_first=True) == expected(
        """
        proj
        ├─ zdir
        ├─ alink
        └─ b.txt
        """
    )


def test_unreadable_directory_renders_childless(tmp_path: Path, monkeypatch, caplog) -> None:
    locked = tmp_path / "locked"
    locked.mkdir()
    (locked / "secret.txt").write_text("", encoding="utf-8")

    def deny(path):
        raise PermissionError(13, "Permission denied", path)

    monkeypatch.setattr("printree.adapters.directory.os.listdir", deny)
    with caplog.at_level(logging.WARNING, logger="printree.adapters.directory"):
        out = generate_directory_tree(str(locked))

    assert out == "locked"
    assert "Cannot list directory" in caplog.text
