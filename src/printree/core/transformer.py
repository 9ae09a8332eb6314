from __future__ import annotations

"""
Tree Transformer.

Converts an arbitrary caller-defined tree into the uniform render tree
(Leaf/Parent nodes), delegating child discovery and labelling to a mapping
strategy.
"""

import logging
from typing import Any, List, Optional, Sequence, Tuple, Union

from printree.domain.mapping_models import Context, NamedChild, NamedChildren, TreeMapping
from printree.domain.tree_models import Leaf, Node, Parent

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def transform(input: Any, mapping: TreeMapping) -> Union[Node, List[Node]]:
    """
    Transform a domain tree into a renderable uniform tree.

    A list or tuple at the top level is treated as a sequence of sibling
    trees, each transformed at its own index; any other value is a single
    root transformed at index 0.

    Args:
        input: Root domain node, or a list/tuple of domain nodes.
        mapping: Object exposing `get_children(node)` and
            `to_text(node, context)`.

    Returns:
        Union[Node, List[Node]]: A single uniform node, or a list of them
        mirroring the shape of the input.
    """
    if _is_sequence(input):
        logger.debug(f"Transforming {len(input)} top-level nodes.")
        return _from_node_list(input, mapping)

    logger.debug("Transforming single root node.")
    return _from_node(input, mapping, index=0)

# -----------------------------------------------------------------------------
# RECURSIVE CONVERSION
# -----------------------------------------------------------------------------

def _from_node_list(nodes: Sequence[Any], mapping: TreeMapping) -> List[Node]:
    """Transform positional nodes, each receiving its own index and no name."""
    return [_from_node(node, mapping, index=i) for i, node in enumerate(nodes)]


def _from_node(node: Any, mapping: TreeMapping, index: int, name: Optional[str] = None) -> Node:
    """Transform one domain node; the text is computed before the children."""
    children = mapping.get_children(node)
    context = _context_for(index, name, children)
    text = mapping.to_text(node, context)

    if children is None:
        return Leaf(text)

    converted: List[Node] = []
    for i, child in enumerate(children):
        if isinstance(child, NamedChildren):
            # Group label is used verbatim, it never goes through to_text
            converted.append(Parent(child.name, tuple(_from_node_list(child.nodes, mapping))))
        elif isinstance(child, NamedChild):
            converted.append(_from_node(child.node, mapping, index=i, name=child.name))
        else:
            converted.append(_from_node(child, mapping, index=i))

    return Parent(text, tuple(converted))


def _context_for(index: int, name: Optional[str], children: Optional[Sequence[Any]]) -> Context:
    """Build the text-callback context, unwrapping named descriptors."""
    if children is None:
        return Context(index=index, name=name, children=None)

    unwrapped: List[Any] = []
    for child in children:
        if isinstance(child, NamedChildren):
            unwrapped.append(tuple(child.nodes))
        elif isinstance(child, NamedChild):
            unwrapped.append(child.node)
        else:
            unwrapped.append(child)
    return Context(index=index, name=name, children=tuple(unwrapped))


def _is_sequence(value: Any) -> bool:
    return isinstance(value, (list, tuple))
