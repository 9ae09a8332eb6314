from __future__ import annotations

"""
Tree Formatter.

Convenience composition of the transform and render stages.
"""

from dataclasses import dataclass
from typing import Any, Generic, Optional

from printree.core.renderer import render
from printree.core.transformer import transform
from printree.domain.mapping_models import T, TreeMapping
from printree.domain.tree_models import RenderOptions


@dataclass(frozen=True)
class FormatOptions(Generic[T]):
    """
    Settings for format_tree.

    Attributes:
        mapping: How to walk and label the domain tree.
        rendering: Optional appearance settings for the render stage.
    """
    mapping: TreeMapping[T]
    rendering: Optional[RenderOptions] = None


def format_tree(input: Any, options: FormatOptions) -> str:
    """
    Format a domain tree (or a list of them) into an ASCII tree.

    Example:
        >>> tree = {"kind": "root", "children": [{"kind": "leaf", "value": "Hi"}]}
        >>> mapping = TreeMapping(
        ...     get_children=lambda n: n.get("children"),
        ...     to_text=lambda n, ctx: n["kind"] + (": " + n["value"] if "value" in n else ""),
        ... )
        >>> print(format_tree(tree, FormatOptions(mapping=mapping)))
        root
        └─ leaf: Hi
    """
    return render(transform(input, options.mapping), options.rendering)
