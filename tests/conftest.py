from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

1. Path manipulation to ensure the 'src' directory is importable.
2. Shared fixtures: expected-output helper and a sample directory tree.
"""

import os
import sys
import textwrap
from pathlib import Path
from typing import Callable

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def expected() -> Callable[[str], str]:
    """
    Return a helper turning an indented triple-quoted block into the exact
    rendered text (common indentation and surrounding blank lines removed).
    """
    def _expected(block: str) -> str:
        return textwrap.dedent(block).strip("\n")
    return _expected


@pytest.fixture
def sample_project(tmp_path: Path) -> Path:
    """
    Create a small directory structure.

    Structure:
    /project
      /src
        main.py
        utils.py
      /tests
        test_main.py
      /.git
        HEAD
      README.md
    """
    root = tmp_path / "project"
    root.mkdir()

    src = root / "src"
    src.mkdir()
    (src / "main.py").write_text("def main(): pass", encoding="utf-8")
    (src / "utils.py").write_text("def helper(): pass", encoding="utf-8")

    tests = root / "tests"
    tests.mkdir()
    (tests / "test_main.py").write_text("def test_one(): pass", encoding="utf-8")

    git = root / ".git"
    git.mkdir()
    (git / "HEAD").write_text("ref: refs/heads/main", encoding="utf-8")

    (root / "README.md").write_text("# Docs", encoding="utf-8")

    return root
