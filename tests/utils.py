"""Helpers for building documents and inspecting render trees in tests."""

from dataclasses import fields
from typing import Iterable, Iterator

from mdlayout.ast import Element, Node
from mdlayout.layout.nodes import RenderNode, RichText, SelectableText, TabsRow

_TREE_TYPES = (RenderNode, TabsRow)


def el(tag: str, *children: Node, label=None, **attributes: str) -> Element:
    """Create an element with the given children and attributes."""
    return Element(tag, list(children), dict(attributes), label=label)


def leaf(tag: str, **attributes: str) -> Element:
    """Create a childless element (``img``, ``br``, ``hr``)."""
    return Element(tag, None, dict(attributes))


def walk(nodes: Iterable) -> Iterator:
    """Yield every render node and tab row below ``nodes``, depth-first in document order."""
    for node in nodes:
        yield node
        for f in fields(node):
            value = getattr(node, f.name)
            if isinstance(value, _TREE_TYPES):
                yield from walk([value])
            elif isinstance(value, list):
                yield from walk(item for item in value if isinstance(item, _TREE_TYPES))


def find_all(nodes: Iterable, node_type: type) -> list:
    """Return every node of ``node_type`` below ``nodes``."""
    return [node for node in walk(nodes) if isinstance(node, node_type)]


def text_runs(nodes: Iterable) -> list:
    """Return every rich or selectable text run below ``nodes``."""
    return [node for node in walk(nodes) if isinstance(node, (RichText, SelectableText))]


def plain_text(nodes: Iterable) -> str:
    """Concatenate the text of every run below ``nodes``."""
    return "".join(run.text.to_plain_text() for run in text_runs(nodes))
