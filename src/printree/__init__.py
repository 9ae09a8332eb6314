from __future__ import annotations

"""
printree: render arbitrary trees as ASCII-art text.

The pipeline has two stages. `transform` maps a caller-defined tree onto
uniform Leaf/Parent nodes through a mapping strategy, and `render` draws
those nodes with branch/corner/vertical connector glyphs. `format_tree`
runs both.
"""

from printree.adapters.data import data_mapping
from printree.adapters.directory import directory_mapping, generate_directory_tree
from printree.core.formatter import FormatOptions, format_tree
from printree.core.renderer import render
from printree.core.transformer import transform
from printree.domain.mapping_models import Context, NamedChild, NamedChildren, TreeMapping
from printree.domain.tree_models import (
    DEFAULT_GLYPHS,
    Glyphs,
    Leaf,
    Node,
    Parent,
    RenderOptions,
    is_leaf,
    is_parent,
    make_leaf,
    make_parent,
)

# Short constructor names
leaf = make_leaf
parent = make_parent

__version__ = "1.0.0"

__all__ = [
    "Context",
    "DEFAULT_GLYPHS",
    "FormatOptions",
    "Glyphs",
    "Leaf",
    "NamedChild",
    "NamedChildren",
    "Node",
    "Parent",
    "RenderOptions",
    "TreeMapping",
    "data_mapping",
    "directory_mapping",
    "format_tree",
    "generate_directory_tree",
    "is_leaf",
    "is_parent",
    "leaf",
    "make_leaf",
    "make_parent",
    "parent",
    "render",
    "transform",
]
