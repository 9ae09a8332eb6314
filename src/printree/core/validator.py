from __future__ import annotations

"""
Configuration Validation Service.

Ensures that the configuration dictionary conforms to the expected schema.
Handles type coercion and default value injection. Glyph strings are only
type-checked: any string, including an empty one, is a legal glyph.
"""

import logging
from typing import Any, Dict, List, Tuple

from printree.domain.config import GLYPH_FIELDS, GLYPH_PRESETS, DEFAULT_STYLE, get_default_config

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def validate_config(
        config: Any,
        *,
        strict: bool = False,
) -> Tuple[Dict[str, Any], List[str]]:
    """
    Validate and normalize the provided configuration dictionary.

    Args:
        config: Raw configuration data (usually a dictionary).
        strict: If True, raises exceptions on type mismatch instead of coercing.

    Returns:
        Tuple[Dict[str, Any], List[str]]: The normalized configuration and
                                          a list of warnings.
    """
    warnings: List[str] = []
    defaults = get_default_config()

    if not isinstance(config, dict):
        msg = f"Invalid config type: expected dict, received {type(config).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using defaults.")
        logger.warning(msg)
        return defaults, warnings

    merged: Dict[str, Any] = dict(defaults)
    merged.update(config)

    string_fields = ["style", "output_path"]
    bool_fields = ["dirs_first", "show_root"]
    list_fields = ["exclude_patterns"]

    for field in string_fields:
        merged[field] = _as_str(merged.get(field), defaults[field], field, warnings, strict)

    for field in bool_fields:
        merged[field] = _as_bool(merged.get(field), defaults[field], field, warnings, strict)

    for field in list_fields:
        merged[field] = _as_list_str(merged.get(field), defaults[field], field, warnings, strict)

    merged["style"] = _normalize_style(merged["style"], warnings, strict)
    merged["glyphs"] = _as_glyphs(merged.get("glyphs"), warnings, strict)

    return merged, warnings


# -----------------------------------------------------------------------------
# PRIVATE HELPERS: TYPE COERCION
# -----------------------------------------------------------------------------

def _as_str(value: Any, fallback: str, field: str, warnings: List[str], strict: bool) -> str:
    """Validate and sanitize string inputs."""
    if value is None:
        return fallback
    if isinstance(value, str):
        return value.strip()

    msg = f"Invalid field '{field}': expected str, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


def _as_bool(value: Any, fallback: bool, field: str, warnings: List[str], strict: bool) -> bool:
    """Coerce various input types into native booleans."""
    if isinstance(value, bool):
        return value
    if value is None:
        return fallback

    if not strict:
        if isinstance(value, (int, float)) and value in (0, 1):
            warnings.append(f"Field '{field}' converted from number {value} to bool.")
            return bool(value)
        if isinstance(value, str):
            s = value.strip().lower()
            if s in ("true", "1", "yes", "y", "on"):
                warnings.append(f"Field '{field}' converted from '{value}' to True.")
                return True
            if s in ("false", "0", "no", "n", "off"):
                warnings.append(f"Field '{field}' converted from '{value}' to False.")
                return False

    msg = f"Invalid field '{field}': expected bool, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


def _as_list_str(value: Any, fallback: List[str], field: str, warnings: List[str], strict: bool) -> List[str]:
    """Ensure input is a list of strings, supporting CSV parsing."""
    if value is None:
        return list(fallback)

    if isinstance(value, str) and not strict:
        items = [x.strip() for x in value.split(",") if x.strip()]
        warnings.append(f"Field '{field}' converted from CSV string to list.")
        return items

    if isinstance(value, list):
        out: List[str] = []
        for i, item in enumerate(value):
            if isinstance(item, str):
                # Kept verbatim, spaces may be part of a regex
                if item:
                    out.append(item)
            else:
                msg = f"Invalid item in '{field}[{i}]': expected str."
                if strict:
                    raise TypeError(msg)
                warnings.append(f"{msg} Item discarded.")
        return out

    msg = f"Invalid field '{field}': expected list[str], received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return list(fallback)


def _as_glyphs(value: Any, warnings: List[str], strict: bool) -> Dict[str, str]:
    """Keep only known glyph fields holding strings."""
    if value is None:
        return {}
    if not isinstance(value, dict):
        msg = f"Invalid field 'glyphs': expected dict, received {type(value).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using preset.")
        return {}

    out: Dict[str, str] = {}
    for key, glyph in value.items():
        if key not in GLYPH_FIELDS:
            msg = f"Unknown glyph '{key}'."
            if strict:
                raise ValueError(msg)
            warnings.append(f"{msg} Discarded.")
            continue
        if not isinstance(glyph, str):
            msg = f"Invalid glyph '{key}': expected str, received {type(glyph).__name__}."
            if strict:
                raise TypeError(msg)
            warnings.append(f"{msg} Discarded.")
            continue
        # Glyphs are kept verbatim, surrounding spaces are significant
        out[key] = glyph
    return out


# -----------------------------------------------------------------------------
# PRIVATE HELPERS: DOMAIN NORMALIZATION
# -----------------------------------------------------------------------------

def _normalize_style(style: str, warnings: List[str], strict: bool) -> str:
    """Map the style name onto a known preset."""
    name = style.lower()
    if name in GLYPH_PRESETS:
        return name
    msg = f"Unknown style '{style}'. Available: {', '.join(sorted(GLYPH_PRESETS))}."
    if strict:
        raise ValueError(msg)
    warnings.append(f"{msg} Using '{DEFAULT_STYLE}'.")
    return DEFAULT_STYLE
