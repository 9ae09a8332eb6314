from __future__ import annotations

"""
JSON-like Data Adapter.

Ready-made mapping for nested dict/list/scalar values: dict keys become
labelled children, list items positional children, scalars leaves.
"""

import json
from typing import Any, List, Optional

from printree.domain.mapping_models import Child, Context, NamedChild, TreeMapping


def data_mapping() -> TreeMapping[Any]:
    """
    Build a mapping over JSON-like Python values.

    Containers are labelled `object` / `array`, scalars by their JSON
    literal; a node reached through a dict key is prefixed with `key: `.

    Note that a list passed directly to transform/format_tree is treated
    as a sequence of top-level siblings, not as an `array` root.
    """
    return TreeMapping(get_children=_get_children, to_text=_to_text)


def _get_children(value: Any) -> Optional[List[Child]]:
    if isinstance(value, dict):
        return [NamedChild(name=str(k), node=v) for k, v in value.items()]
    if isinstance(value, (list, tuple)):
        return list(value)
    return None


def _to_text(value: Any, context: Context[Any]) -> str:
    if isinstance(value, dict):
        label = "object"
    elif isinstance(value, (list, tuple)):
        label = "array"
    else:
        label = json.dumps(value, ensure_ascii=False, default=str)
    return f"{context.name}: {label}" if context.name is not None else label
