from __future__ import annotations

"""
Tree Renderer.

Converts uniform render trees into ASCII-art text. Manages the prefix
carried to descendants (vertical bars under unfinished branches, blanks
under finished ones) and the corner/branch choice for last children.
"""

import logging
from typing import List, Optional

from printree.domain.tree_models import DEFAULT_GLYPHS, Glyphs, Node, RenderInput, RenderOptions, is_leaf, is_node

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def render(input: RenderInput, options: Optional[RenderOptions] = None) -> str:
    """
    Render a uniform tree as text with ASCII-art branch connections.

    A single node is drawn as a root: no connector on its own line, and
    trailing whitespace trimmed from the whole result. A sequence of nodes
    is drawn as top-level siblings, every one of them with a connector.

    Args:
        input: A Leaf/Parent, or a sequence of them.
        options: Optional rendering settings (custom glyphs).

    Returns:
        str: The rendered tree, lines joined with "\\n".
    """
    glyphs = options.glyphs if options is not None and options.glyphs is not None else DEFAULT_GLYPHS

    if not is_node(input):
        nodes = list(input)
        logger.debug(f"Rendering {len(nodes)} top-level nodes.")
        total = len(nodes)
        return "\n".join(
            _render_node(node, glyphs, prefix="", is_last=(i == total - 1), is_root=False)
            for i, node in enumerate(nodes)
        )

    logger.debug("Rendering single root node.")
    return _render_node(input, glyphs, prefix="", is_last=True, is_root=True).rstrip()

# -----------------------------------------------------------------------------
# RECURSIVE LAYOUT
# -----------------------------------------------------------------------------

def _render_node(node: Node, glyphs: Glyphs, prefix: str, is_last: bool, is_root: bool) -> str:
    """
    Render a node and its descendants.

    Args:
        node: Node to draw.
        glyphs: Connector set.
        prefix: Margin accumulated from the ancestors.
        is_last: Whether the node closes its parent's child list.
        is_root: Whether the node is the lone top-level root.

    Returns:
        str: Lines for the node and its subtree, without trailing newline.
    """
    if is_root:
        node_prefix = ""
        child_prefix = ""
    else:
        node_prefix = prefix + (glyphs.corner if is_last else glyphs.branch)
        child_prefix = prefix + (glyphs.indent if is_last else glyphs.vertical)

    line = node_prefix + node.text
    if is_leaf(node) or not node.children:
        return line

    children = node.children
    total = len(children)
    lines: List[str] = [line]
    for i, child in enumerate(children):
        lines.append(_render_node(child, glyphs, child_prefix, is_last=(i == total - 1), is_root=False))
    return "\n".join(lines)
