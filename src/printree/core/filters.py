from __future__ import annotations

"""
Entry Name Filtering.

Regex-based exclusion rules applied by the directory adapter while
discovering children.
"""

import re
from typing import Iterable, List

# -----------------------------------------------------------------------------
# CONFIGURATION DEFAULTS
# -----------------------------------------------------------------------------

def default_exclude_patterns() -> List[str]:
    """
    Get the exclusion patterns applied when none are configured.

    Skips VCS metadata, editor folders, caches and dot-entries.

    Returns:
        List[str]: List of regex patterns for common exclusions.
    """
    return [
        r".*\.pyc$",
        r"^(__pycache__|\.git|\.idea|\.vscode|node_modules)$",
        r"^\.",
    ]

# -----------------------------------------------------------------------------
# PATTERN COMPILATION AND MATCHING
# -----------------------------------------------------------------------------

def compile_patterns(patterns: Iterable[str]) -> List[re.Pattern]:
    """
    Transform raw regex strings into compiled Pattern objects.

    Malformed regex strings are discarded.

    Args:
        patterns: Raw regex strings.

    Returns:
        List[re.Pattern]: Compiled regex objects.
    """
    compiled: List[re.Pattern] = []
    for p in patterns:
        try:
            compiled.append(re.compile(p))
        except re.error:
            continue
    return compiled


def matches_any(name: str, compiled_patterns: List[re.Pattern]) -> bool:
    """Return True if at least one pattern matches the name."""
    return any(rx.search(name) for rx in compiled_patterns)
