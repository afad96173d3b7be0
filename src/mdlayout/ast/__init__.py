#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdlayout/ast/__init__.py
"""Document tree consumed by the layout builder.

- nodes: ``Element`` and ``Text`` node classes
- visitors: the visitor protocol driven by ``Node.accept``
- serialization: JSON wire format for document trees

"""

from __future__ import annotations

from mdlayout.ast.nodes import Element, Node, Text, extract_link_text
from mdlayout.ast.serialization import dict_to_node, json_to_nodes, node_to_dict, nodes_to_json
from mdlayout.ast.visitors import NodeVisitor

__all__ = [
    "Node",
    "Element",
    "Text",
    "extract_link_text",
    "NodeVisitor",
    "node_to_dict",
    "dict_to_node",
    "nodes_to_json",
    "json_to_nodes",
]
