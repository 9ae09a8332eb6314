from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line interface schema and translates the parsed
namespace into configuration overrides.
"""

import argparse
from typing import Any, Dict, List, Optional

from printree.domain.config import GLYPH_PRESETS

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the printree CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="printree",
        description="Print a directory hierarchy as an ASCII-art tree.",
    )

    # --- Input ---
    p.add_argument(
        "input_path",
        nargs="?",
        default=".",
        help="Directory to render (default: current directory).",
    )
    p.add_argument(
        "--config",
        dest="config_file",
        default=None,
        help="JSON file with configuration overrides.",
    )

    # --- Appearance ---
    p.add_argument(
        "--style",
        default=None,
        help=f"Glyph preset: {', '.join(sorted(GLYPH_PRESETS))}.",
    )
    p.add_argument(
        "--no-root",
        action="store_true",
        help="Render the entries of the directory without the root line.",
    )

    # --- Scanning ---
    p.add_argument(
        "--exclude",
        dest="exclude_patterns",
        default=None,
        help="Comma-separated regexes for entry names to skip.",
    )
    p.add_argument(
        "--dirs-first",
        action="store_true",
        help="List sub-directories before files.",
    )

    # --- Output ---
    p.add_argument(
        "-o", "--output",
        dest="output_path",
        default=None,
        help="Write the tree to this file instead of stdout.",
    )
    p.add_argument(
        "--dump-config",
        action="store_true",
        help="Print the effective configuration as JSON and exit.",
    )

    # --- Diagnostics ---
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help="Also write logs to this rotating file.",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into a configuration dictionary.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset.
    """
    overrides: Dict[str, Any] = {}

    overrides["style"] = args.style
    overrides["output_path"] = args.output_path

    if args.exclude_patterns is not None:
        overrides["exclude_patterns"] = _split_csv(args.exclude_patterns)
    if args.dirs_first:
        overrides["dirs_first"] = True
    if args.no_root:
        overrides["show_root"] = False

    return overrides

# -----------------------------------------------------------------------------
# HELPERS
# -----------------------------------------------------------------------------

def _split_csv(value: Optional[str]) -> Optional[List[str]]:
    """Convert a comma-separated string into a list of stripped items."""
    if value is None:
        return None
    parts = [x.strip() for x in value.split(",")]
    return [x for x in parts if x]
