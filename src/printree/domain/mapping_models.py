from __future__ import annotations

"""
Transform Stage Data Models.

Defines the caller-facing contract of the transform stage: the mapping
strategy, the child descriptors it may return and the context handed to
the text callback.
"""

from dataclasses import dataclass
from typing import Any, Callable, Generic, Optional, Sequence, Tuple, TypeVar, Union

T = TypeVar("T")

# -----------------------------------------------------------------------------
# CHILD DESCRIPTORS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class NamedChild(Generic[T]):
    """
    A single child tagged with a label (e.g. the "value" field of an AST node).

    The label reaches the text callback through `Context.name`; no extra
    tree level is created.
    """
    name: str
    node: T


@dataclass(frozen=True)
class NamedChildren(Generic[T]):
    """
    A group of children collected under a common label (e.g. "body").

    The group becomes one synthetic parent whose text is `name` and whose
    children are the transformed `nodes`.
    """
    name: str
    nodes: Sequence[T]


Child = Union[T, NamedChild[T], NamedChildren[T]]

# -----------------------------------------------------------------------------
# TRANSFORM CONTEXT
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class Context(Generic[T]):
    """
    Metadata about the node being converted to text.

    Attributes:
        index: Zero-based position among siblings (0 for a lone root).
        name: Label when reached through a NamedChild, otherwise None.
        children: Unwrapped child values as returned by `get_children`
            (a group contributes its tuple of nodes), or None for a leaf.
    """
    index: int
    name: Optional[str] = None
    children: Optional[Tuple[Any, ...]] = None

# -----------------------------------------------------------------------------
# MAPPING STRATEGY
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class TreeMapping(Generic[T]):
    """
    Strategy describing how to walk and label a caller-defined tree.

    Attributes:
        get_children: Returns the child descriptors of a node, or None to
            mark the node as a leaf.
        to_text: Produces the display text of a node given its Context.
    """
    get_children: Callable[[T], Optional[Sequence[Child]]]
    to_text: Callable[[T, Context[T]], str]
