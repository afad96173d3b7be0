#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdlayout/ast/serialization.py
"""JSON serialization and deserialization for document trees.

The wire format mirrors the node classes:

    - elements: ``{"tag": "p", "attributes": {...}, "children": [...], "label": "js"}``
      (``attributes``, ``children`` and ``label`` are optional; ``children``
      may be ``null`` for leaf elements)
    - text leaves: ``{"text": "Hello"}``

A document is either a bare JSON array of nodes or an object
``{"schema_version": 1, "nodes": [...]}``.

Examples
--------
    >>> from mdlayout.ast.serialization import json_to_nodes
    >>> nodes = json_to_nodes('[{"tag": "p", "children": [{"text": "Hi"}]}]')
    >>> nodes[0].text_content
    'Hi'

"""

from __future__ import annotations

import json
import logging
from typing import Any, Iterable

from mdlayout.ast.nodes import Element, Node, Text
from mdlayout.exceptions import ValidationError

logger = logging.getLogger(__name__)

SCHEMA_VERSION = 1


def node_to_dict(node: Node) -> dict[str, Any]:
    """Convert a node to its dictionary representation.

    Parameters
    ----------
    node : Node
        Node to serialize

    Returns
    -------
    dict
        Serialized node

    """
    if isinstance(node, Text):
        return {"text": node.content}
    if isinstance(node, Element):
        result: dict[str, Any] = {"tag": node.tag}
        if node.attributes:
            result["attributes"] = dict(node.attributes)
        result["children"] = None if node.children is None else [node_to_dict(c) for c in node.children]
        if node.label is not None:
            result["label"] = node.label
        return result
    raise ValidationError(f"Cannot serialize node of type {type(node).__name__}", parameter_name="node")


def _deserialize_attributes(tag: str, raw: Any) -> dict[str, str]:
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ValidationError(
            f"Attributes of <{tag}> must be an object, got {type(raw).__name__}",
            parameter_name="attributes",
            parameter_value=raw,
        )
    for key, value in raw.items():
        if not isinstance(value, str):
            raise ValidationError(
                f"Attribute '{key}' of <{tag}> must be a string, got {type(value).__name__}",
                parameter_name=key,
                parameter_value=value,
            )
    return dict(raw)


def dict_to_node(data: dict[str, Any]) -> Node:
    """Convert a dictionary representation back to a node.

    Parameters
    ----------
    data : dict
        Serialized node

    Returns
    -------
    Node
        Reconstructed node

    Raises
    ------
    ValidationError
        If the payload is neither a text leaf nor a well-formed element

    """
    if not isinstance(data, dict):
        raise ValidationError(f"Node must be an object, got {type(data).__name__}", parameter_value=data)

    if "text" in data:
        content = data["text"]
        if not isinstance(content, str):
            raise ValidationError("Text content must be a string", parameter_name="text", parameter_value=content)
        return Text(content=content)

    tag = data.get("tag")
    if not isinstance(tag, str) or not tag:
        raise ValidationError("Element must have a non-empty string 'tag'", parameter_name="tag", parameter_value=tag)

    raw_children = data.get("children")
    children: list[Node] | None
    if raw_children is None:
        children = None
    elif isinstance(raw_children, list):
        children = [dict_to_node(child) for child in raw_children]
    else:
        raise ValidationError(
            f"Children of <{tag}> must be a list or null", parameter_name="children", parameter_value=raw_children
        )

    label = data.get("label")
    if label is not None and not isinstance(label, str):
        raise ValidationError(f"Label of <{tag}> must be a string", parameter_name="label", parameter_value=label)

    return Element(
        tag=tag,
        children=children,
        attributes=_deserialize_attributes(tag, data.get("attributes")),
        label=label,
    )


def nodes_to_json(nodes: Iterable[Node], indent: int | None = None) -> str:
    """Serialize a sequence of top-level nodes to a versioned JSON document.

    Parameters
    ----------
    nodes : iterable of Node
        Top-level document nodes
    indent : int or None, default = None
        Number of spaces for indentation (None for compact format)

    Returns
    -------
    str
        JSON string

    """
    payload = {"schema_version": SCHEMA_VERSION, "nodes": [node_to_dict(node) for node in nodes]}
    return json.dumps(payload, indent=indent, ensure_ascii=False)


def json_to_nodes(json_str: str) -> list[Node]:
    """Deserialize a JSON document into top-level nodes.

    Parameters
    ----------
    json_str : str
        A JSON array of nodes or a versioned ``{"nodes": [...]}`` object

    Returns
    -------
    list of Node
        The top-level nodes

    Raises
    ------
    ValidationError
        If the JSON is malformed, nested too deeply to load, has an
        unsupported schema version, or contains an invalid node

    """
    try:
        data = json.loads(json_str)
    except json.JSONDecodeError as e:
        raise ValidationError(f"Invalid JSON document: {e}", original_error=e) from e
    except RecursionError as e:
        raise ValidationError("JSON document is nested too deeply", original_error=e) from e

    if isinstance(data, dict):
        schema_version = data.get("schema_version", SCHEMA_VERSION)
        if schema_version != SCHEMA_VERSION:
            raise ValidationError(
                f"Unsupported schema version: {schema_version}. Supported version is {SCHEMA_VERSION}.",
                parameter_name="schema_version",
                parameter_value=schema_version,
            )
        data = data.get("nodes")

    if not isinstance(data, list):
        raise ValidationError("Document must be a list of nodes", parameter_name="nodes", parameter_value=data)

    try:
        nodes = [dict_to_node(item) for item in data]
    except RecursionError as e:
        raise ValidationError("Document is nested too deeply", original_error=e) from e
    logger.debug(f"Loaded {len(nodes)} top-level nodes")
    return nodes


__all__ = ["node_to_dict", "dict_to_node", "nodes_to_json", "json_to_nodes"]
