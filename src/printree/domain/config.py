from __future__ import annotations

"""
Configuration Domain Management.

Defines the glyph presets and the dict-based runtime configuration used by
the command line interface. Supports loading overrides from a JSON file
with default fallback.
"""

import json
import logging
import os
from typing import Any, Dict

from printree.core.filters import default_exclude_patterns
from printree.domain.tree_models import DEFAULT_GLYPHS, Glyphs

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Constants & Defaults
# -----------------------------------------------------------------------------
DEFAULT_STYLE = "default"

GLYPH_PRESETS: Dict[str, Glyphs] = {
    "default": DEFAULT_GLYPHS,
    "double": Glyphs(corner="└── ", branch="├── ", vertical="│   ", indent="    "),
    "ascii": Glyphs(corner="+-- ", branch="+-- ", vertical="|   ", indent="    "),
    "simple": Glyphs(corner="\\_ ", branch="|- ", vertical="|  ", indent="   "),
}

GLYPH_FIELDS = ("corner", "branch", "vertical", "indent")


# -----------------------------------------------------------------------------
# Configuration Models (Dict-based)
# -----------------------------------------------------------------------------
def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        # Appearance
        "style": DEFAULT_STYLE,
        "glyphs": {},

        # Directory scanning
        "exclude_patterns": default_exclude_patterns(),
        "dirs_first": False,
        "show_root": True,

        # Output ("" writes to stdout)
        "output_path": "",
    }


# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------
def load_config(path: str) -> Dict[str, Any]:
    """
    Load configuration overrides from a JSON file, merged over the defaults.

    Args:
        path: Location of the JSON config file.

    Returns:
        Dict[str, Any]: The merged configuration, or the defaults on failure.
    """
    config = get_default_config()

    if not os.path.exists(path):
        logger.warning(f"Config file not found: {path}. Using defaults.")
        return config

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning(f"Failed to load config '{path}': {e}. Using defaults.")
        return config

    if not isinstance(data, dict):
        logger.warning(f"Config file '{path}' does not hold a JSON object. Using defaults.")
        return config

    config.update(data)
    logger.debug(f"Configuration loaded from {path}")
    return config


# -----------------------------------------------------------------------------
# Glyph Resolution
# -----------------------------------------------------------------------------
def resolve_glyphs(config: Dict[str, Any]) -> Glyphs:
    """
    Build the effective glyph set: the named preset, then per-field overrides.

    Args:
        config: A validated configuration dictionary.

    Returns:
        Glyphs: The glyph set to render with.
    """
    base = GLYPH_PRESETS.get(config.get("style") or DEFAULT_STYLE, DEFAULT_GLYPHS)
    overrides = config.get("glyphs") or {}
    return Glyphs(**{f: overrides.get(f, getattr(base, f)) for f in GLYPH_FIELDS})
