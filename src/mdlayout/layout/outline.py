#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdlayout/layout/outline.py
"""Human-readable outline of a render tree, built with Rich."""

from __future__ import annotations

from dataclasses import fields, is_dataclass
from typing import Iterable

from rich.markup import escape
from rich.tree import Tree

from mdlayout.layout.nodes import ImageRun, RenderNode, RichText, SelectableText, TabGroup, TableGrid, TextSpan

_MAX_LABEL_TEXT = 60


def _shorten(text: str) -> str:
    text = text.replace("\n", "\\n")
    return text if len(text) <= _MAX_LABEL_TEXT else text[: _MAX_LABEL_TEXT - 1] + "…"


def _label(node: RenderNode) -> str:
    name = f"[bold]{type(node).__name__}[/bold]"
    if isinstance(node, (RichText, SelectableText)):
        return f"{name} {escape(repr(_shorten(node.text.to_plain_text())))}"
    if isinstance(node, TextSpan):
        return f"{name} {escape(repr(_shorten(node.to_plain_text())))}"
    if isinstance(node, ImageRun):
        return f"{name} {node.source}:{escape(node.uri)}"
    if isinstance(node, TableGrid):
        return f"{name} columns={node.column_count} policy={node.width_policy}"
    if isinstance(node, TabGroup):
        return f"{name} tabs={escape(', '.join(node.tab_labels))}"
    return name


def _child_nodes(node: RenderNode) -> list[RenderNode]:
    if isinstance(node, (RichText, SelectableText, TextSpan)):
        return []
    children: list[RenderNode] = []
    for f in fields(node):  # type: ignore[arg-type]
        value = getattr(node, f.name)
        if isinstance(value, RenderNode):
            children.append(value)
        elif isinstance(value, list):
            for item in value:
                if isinstance(item, RenderNode):
                    children.append(item)
                elif is_dataclass(item) and isinstance(getattr(item, "child", None), RenderNode):
                    children.append(item.child)
    return children


def _add_branch(tree: Tree, node: RenderNode) -> None:
    branch = tree.add(_label(node))
    for child in _child_nodes(node):
        _add_branch(branch, child)


def render_tree_outline(nodes: Iterable[RenderNode], title: str = "layout") -> Tree:
    """Build a Rich tree showing the structure of a render tree.

    Parameters
    ----------
    nodes : iterable of RenderNode
        Top-level render nodes
    title : str, default "layout"
        Label of the root

    Returns
    -------
    rich.tree.Tree
        Printable tree

    """
    tree = Tree(f"[bold]{title}[/bold]")
    for node in nodes:
        _add_branch(tree, node)
    return tree


__all__ = ["render_tree_outline"]
