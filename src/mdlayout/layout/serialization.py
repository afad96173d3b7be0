#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdlayout/layout/serialization.py
"""JSON serialization of render trees.

Render trees are serialized for inspection (the CLI ``json`` output and
snapshot-style tests). Every node becomes an object with a ``node_type``
field followed by its non-empty fields; tap handlers are reduced to their
link target and callbacks are dropped.

"""

from __future__ import annotations

import json
from dataclasses import fields, is_dataclass
from typing import Any, Iterable

from mdlayout.layout.nodes import RenderNode, TapHandler


def _serialize_value(value: Any) -> Any:
    if isinstance(value, TapHandler):
        return {"href": value.href, "title": value.title, "text": value.text}
    if is_dataclass(value) and not isinstance(value, type):
        return render_node_to_dict(value)
    if isinstance(value, (list, tuple)):
        return [_serialize_value(item) for item in value]
    if callable(value):
        return None
    return value


def render_node_to_dict(node: Any) -> dict[str, Any]:
    """Convert a render node (or a style value) to a dictionary.

    Parameters
    ----------
    node : RenderNode or dataclass value
        Node to serialize

    Returns
    -------
    dict
        ``{"node_type": ClassName, ...fields}`` with ``None`` fields omitted

    """
    result: dict[str, Any] = {"node_type": type(node).__name__}
    for f in fields(node):
        value = _serialize_value(getattr(node, f.name))
        if value is not None:
            result[f.name] = value
    return result


def render_tree_to_json(nodes: Iterable[RenderNode], indent: int | None = None) -> str:
    """Serialize top-level render nodes to a JSON array.

    Parameters
    ----------
    nodes : iterable of RenderNode
        Output of a layout build
    indent : int or None, default = None
        Number of spaces for indentation (None for compact format)

    Returns
    -------
    str
        JSON string

    """
    return json.dumps([render_node_to_dict(node) for node in nodes], indent=indent, ensure_ascii=False)


__all__ = ["render_node_to_dict", "render_tree_to_json"]
