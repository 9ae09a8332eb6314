from __future__ import annotations

"""
Unit tests for the Configuration Domain.

Verifies:
1. Default configuration shape and glyph presets.
2. JSON loading with fallback on missing/corrupted files.
3. Glyph resolution from style + per-field overrides.
"""

import json
from pathlib import Path

from printree.domain.config import (
    GLYPH_PRESETS,
    get_default_config,
    load_config,
    resolve_glyphs,
)
from printree.domain.tree_models import DEFAULT_GLYPHS, Glyphs


def test_default_config_is_fresh_copy() -> None:
    a = get_default_config()
    a["exclude_patterns"].append("x")

    b = get_default_config()
    assert "x" not in b["exclude_patterns"]
    assert b["style"] == "default"
    assert b["show_root"] is True
    assert b["dirs_first"] is False


def test_default_preset_matches_default_glyphs() -> None:
    assert GLYPH_PRESETS["default"] == DEFAULT_GLYPHS
    assert set(GLYPH_PRESETS) == {"default", "double", "ascii", "simple"}


def test_load_config_merges_over_defaults(tmp_path: Path) -> None:
    cfg_file = tmp_path / "printree.json"
    cfg_file.write_text(json.dumps({"style": "ascii", "dirs_first": True}), encoding="utf-8")

    cfg = load_config(str(cfg_file))

    assert cfg["style"] == "ascii"
    assert cfg["dirs_first"] is True
    assert cfg["show_root"] is True


def test_load_config_missing_file_returns_defaults(tmp_path: Path) -> None:
    assert load_config(str(tmp_path / "nope.json")) == get_default_config()


def test_load_config_corrupted_file_returns_defaults(tmp_path: Path) -> None:
    cfg_file = tmp_path / "broken.json"
    cfg_file.write_text("{not json", encoding="utf-8")

    assert load_config(str(cfg_file)) == get_default_config()


def test_load_config_non_object_returns_defaults(tmp_path: Path) -> None:
    cfg_file = tmp_path / "list.json"
    cfg_file.write_text("[1, 2]", encoding="utf-8")

    assert load_config(str(cfg_file)) == get_default_config()


def test_resolve_glyphs_uses_preset() -> None:
    cfg = get_default_config()
    cfg["style"] = "double"

    assert resolve_glyphs(cfg) == GLYPH_PRESETS["double"]


def test_resolve_glyphs_applies_field_overrides() -> None:
    cfg = get_default_config()
    cfg["style"] = "ascii"
    cfg["glyphs"] = {"corner": "`-- "}

    assert resolve_glyphs(cfg) == Glyphs(corner="`-- ", branch="+-- ", vertical="|   ", indent="    ")


def test_resolve_glyphs_unknown_style_falls_back_to_default() -> None:
    assert resolve_glyphs({"style": "fancy"}) == DEFAULT_GLYPHS
