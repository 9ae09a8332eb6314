from __future__ import annotations

"""
Render Tree Data Models.

Provides the uniform node types consumed by the renderer, the glyph set
controlling the connector appearance, and the rendering options.
"""

from dataclasses import dataclass
from typing import Iterable, Optional, Sequence, Tuple, Union

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class Leaf:
    """
    Represents a terminal node in the render tree.

    Attributes:
        text: Display text, appended verbatim after the connector.
    """
    text: str

    @property
    def children(self) -> None:
        """A leaf never carries children."""
        return None


@dataclass(frozen=True)
class Parent:
    """
    Represents an internal node in the render tree.

    A parent without children renders exactly like a leaf.

    Attributes:
        text: Display text, appended verbatim after the connector.
        children: Ordered child nodes (stored as a tuple).
    """
    text: str
    children: Tuple["Node", ...] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.children, tuple):
            object.__setattr__(self, "children", tuple(self.children))


Node = Union[Leaf, Parent]

# A single node is rendered as a root, a sequence as top-level siblings
RenderInput = Union[Node, Sequence[Node]]

# -----------------------------------------------------------------------------
# GLYPHS AND OPTIONS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class Glyphs:
    """
    Connector strings used to draw the tree.

    Attributes:
        corner: Connector for the last child of a parent.
        branch: Connector for every other child.
        vertical: Continuation carried below an unfinished branch.
        indent: Blank carried below a finished branch.
    """
    corner: str
    branch: str
    vertical: str
    indent: str


DEFAULT_GLYPHS = Glyphs(
    corner="└─ ",
    branch="├─ ",
    vertical="│  ",
    indent="   ",
)


@dataclass(frozen=True)
class RenderOptions:
    """Optional rendering settings. `glyphs=None` selects DEFAULT_GLYPHS."""
    glyphs: Optional[Glyphs] = None

# -----------------------------------------------------------------------------
# CONSTRUCTORS AND GUARDS
# -----------------------------------------------------------------------------

def make_leaf(text: str) -> Leaf:
    """Create a leaf node with the given text."""
    return Leaf(text)


def make_parent(text: str, children: Iterable[Node]) -> Parent:
    """Create a parent node; the children keep their insertion order."""
    return Parent(text, tuple(children))


def is_leaf(node: Node) -> bool:
    """Return True when the node carries no children field."""
    return node.children is None


def is_parent(node: Node) -> bool:
    """Return True when the node carries a (possibly empty) children field."""
    return node.children is not None


def is_node(value: object) -> bool:
    """Return True for values built with make_leaf or make_parent."""
    return isinstance(value, (Leaf, Parent))
