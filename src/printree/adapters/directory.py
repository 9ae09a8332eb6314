from __future__ import annotations

"""
Directory Tree Adapter.

Ready-made mapping that walks a filesystem hierarchy. Nodes are path
strings: directories expose their entries as children, files are leaves.
"""

import logging
import os
from typing import List, Optional

from printree.core.filters import compile_patterns, default_exclude_patterns, matches_any
from printree.core.formatter import FormatOptions, format_tree
from printree.core.renderer import render
from printree.core.transformer import transform
from printree.domain.mapping_models import Context, TreeMapping
from printree.domain.tree_models import Glyphs, RenderOptions

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def directory_mapping(
        exclude_patterns: Optional[List[str]] = None,
        dirs_first: bool = False,
) -> TreeMapping[str]:
    """
    Build a mapping over filesystem paths.

    Args:
        exclude_patterns: Regexes matched against entry base names. None
            selects the default exclusions, an empty list disables them.
        dirs_first: List sub-directories before files.

    Returns:
        TreeMapping[str]: Mapping usable with transform/format_tree.
    """
    patterns = default_exclude_patterns() if exclude_patterns is None else exclude_patterns
    exclude_rx = compile_patterns(patterns)

    def get_children(path: str) -> Optional[List[str]]:
        if not _is_walkable_dir(path):
            return None
        return _list_entries(path, exclude_rx, dirs_first)

    def to_text(path: str, context: Context[str]) -> str:
        return _display_name(path)

    return TreeMapping(get_children=get_children, to_text=to_text)


def generate_directory_tree(
        input_path: str,
        *,
        exclude_patterns: Optional[List[str]] = None,
        dirs_first: bool = False,
        show_root: bool = True,
        glyphs: Optional[Glyphs] = None,
) -> str:
    """
    Render the directory hierarchy rooted at `input_path`.

    Args:
        input_path: Directory to scan.
        exclude_patterns: Regexes for entries to skip (None = defaults).
        dirs_first: List sub-directories before files.
        show_root: Draw the root directory line. When False the root's
            entries are drawn as top-level siblings.
        glyphs: Optional custom connector set.

    Returns:
        str: The rendered tree.
    """
    logger.info(f"Generating directory tree for: {input_path}")
    mapping = directory_mapping(exclude_patterns=exclude_patterns, dirs_first=dirs_first)
    rendering = RenderOptions(glyphs=glyphs)

    if show_root:
        return format_tree(input_path, FormatOptions(mapping=mapping, rendering=rendering))

    entries = mapping.get_children(input_path) or []
    return render(transform(entries, mapping), rendering)

# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _list_entries(path: str, exclude_rx: list, dirs_first: bool) -> List[str]:
    """List the visible entries of a directory as full paths."""
    try:
        names = sorted(os.listdir(path))
    except OSError as e:
        logger.warning(f"Cannot list directory '{path}': {e}")
        return []

    entries = [os.path.join(path, n) for n in names if not matches_any(n, exclude_rx)]
    if dirs_first:
        # sorted() is stable, so names stay ordered within each group
        entries = sorted(entries, key=lambda p: not _is_walkable_dir(p))
    return entries


def _is_walkable_dir(path: str) -> bool:
    """Directories are expanded, symlinks to directories stay leaves."""
    return os.path.isdir(path) and not os.path.islink(path)


def _display_name(path: str) -> str:
    name = os.path.basename(os.path.normpath(path))
    return name or path
