from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: logging setup, configuration loading and
merging (defaults, config file, CLI overrides), tree generation and output.
"""

import json
import os
import sys
from typing import Any, Dict, List, Optional

from printree.adapters.directory import generate_directory_tree
from printree.core.validator import validate_config
from printree.domain.config import get_default_config, load_config, resolve_glyphs
from printree.infra.logging import LoggingConfig, configure_logging, get_logger
from printree.interface.cli import args as cli_args

logger = get_logger(__name__)

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the CLI workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code (0 success, 1 failure, 2 bad input path).
    """
    if sys.platform == "win32" and hasattr(sys.stdout, "reconfigure"):
        sys.stdout.reconfigure(encoding="utf-8")

    # 1. Argument parsing
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 2. Logging bootstrap
    configure_logging(LoggingConfig.for_cli(debug=args.debug, log_file=args.log_file))

    logger.debug("CLI execution initiated. Resolving configuration...")

    # 3. Configuration hierarchy: defaults < config file < CLI flags
    base_conf = load_config(args.config_file) if args.config_file else get_default_config()
    raw_conf = _merge_config(base_conf, cli_args.args_to_overrides(args))

    clean_conf, warnings = validate_config(raw_conf, strict=False)
    for w in warnings:
        logger.warning(f"Configuration: {w}")

    if args.dump_config:
        print(json.dumps(clean_conf, ensure_ascii=False, indent=2))
        return 0

    # 4. Pre-flight input verification
    input_path = args.input_path
    if not os.path.isdir(input_path):
        msg = f"Input path is not a directory: {input_path}"
        logger.error(msg)
        print(f"ERROR: {msg}", file=sys.stderr)
        return 2

    # 5. Rendering
    try:
        text = generate_directory_tree(
            input_path,
            exclude_patterns=clean_conf["exclude_patterns"],
            dirs_first=clean_conf["dirs_first"],
            show_root=clean_conf["show_root"],
            glyphs=resolve_glyphs(clean_conf),
        )
        _emit(text, clean_conf["output_path"])
    except KeyboardInterrupt:
        logger.warning("Interrupted by user.")
        print("Interrupted.", file=sys.stderr)
        return 130
    except Exception as e:
        msg = f"Tree generation failed: {e}"
        logger.critical(msg, exc_info=True)
        print(f"ERROR: {msg}", file=sys.stderr)
        return 1

    return 0

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING AND OUTPUT
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    Shallow-merge override values into the base configuration.

    Only known keys with a non-None value are merged.
    """
    out = dict(base)
    keys_to_merge = ["style", "exclude_patterns", "dirs_first", "show_root", "output_path"]
    for k in keys_to_merge:
        if k in overrides and overrides[k] is not None:
            out[k] = overrides[k]
    return out


def _emit(text: str, output_path: str) -> None:
    """Print the tree, or persist it when an output path is configured."""
    if not output_path:
        print(text)
        return

    out_dir = os.path.dirname(os.path.abspath(output_path))
    os.makedirs(out_dir, exist_ok=True)
    with open(output_path, "w", encoding="utf-8") as f:
        f.write(text + "\n")
    logger.info(f"Tree saved to file: {output_path}")
