from __future__ import annotations

"""
Unit tests for CLI Argument Parsing.

Verifies:
1. Mapping of CLI flags to configuration keys.
2. CSV string parsing logic.
3. Configuration merge precedence.
"""

from printree.interface.cli.app import _merge_config
from printree.interface.cli.args import args_to_overrides, build_parser
from printree.domain.config import get_default_config


def parse_args(arg_list):
    """Helper to simulate CLI argument parsing."""
    parser = build_parser()
    return parser.parse_args(arg_list)


def test_cli_flags_mapping() -> None:
    args = parse_args(["some/dir", "--style", "ascii", "--dirs-first", "--no-root", "-o", "tree.txt"])

    overrides = args_to_overrides(args)

    assert args.input_path == "some/dir"
    assert overrides["style"] == "ascii"
    assert overrides["dirs_first"] is True
    assert overrides["show_root"] is False
    assert overrides["output_path"] == "tree.txt"


def test_cli_csv_exclude_parsing() -> None:
    args = parse_args(["--exclude", r"^build$, ^dist$,"])

    assert args_to_overrides(args)["exclude_patterns"] == ["^build$", "^dist$"]


def test_cli_defaults() -> None:
    args = parse_args([])
    overrides = args_to_overrides(args)

    assert args.input_path == "."
    assert args.config_file is None
    assert overrides["style"] is None
    assert "exclude_patterns" not in overrides
    assert "dirs_first" not in overrides


def test_merge_ignores_none_and_unknown_keys() -> None:
    base = get_default_config()
    merged = _merge_config(base, {"style": None, "dirs_first": True, "unknown": 1})

    assert merged["style"] == "default"
    assert merged["dirs_first"] is True
    assert "unknown" not in merged
