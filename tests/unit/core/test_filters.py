from __future__ import annotations

"""
Unit tests for entry name filtering.
"""

from printree.core.filters import compile_patterns, default_exclude_patterns, matches_any


def test_compile_patterns_discards_malformed_regex() -> None:
    compiled = compile_patterns([r"^ok$", r"([unclosed"])

    assert len(compiled) == 1
    assert compiled[0].pattern == r"^ok$"


def test_default_exclusions() -> None:
    rx = compile_patterns(default_exclude_patterns())

    assert matches_any(".git", rx)
    assert matches_any("__pycache__", rx)
    assert matches_any("module.pyc", rx)
    assert matches_any(".env", rx)
    assert not matches_any("src", rx)
    assert not matches_any("main.py", rx)


def test_matches_any_with_no_patterns() -> None:
    assert not matches_any("anything", [])
