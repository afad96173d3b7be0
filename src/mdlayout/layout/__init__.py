#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdlayout/layout/__init__.py
"""Render tree node types, span merging and render tree serialization."""

from __future__ import annotations

from mdlayout.layout.nodes import (
    Column,
    ColumnWidth,
    DecoratedBox,
    DefaultTextStyle,
    Expanded,
    FixedColumnWidth,
    Icon,
    ImageRun,
    IntrinsicColumnWidth,
    MinColumnWidth,
    Padding,
    RenderNode,
    RichText,
    Row,
    Rule,
    ScrollView,
    SelectableText,
    SizedBox,
    TabGroup,
    TableCellNode,
    TableGrid,
    TableRowNode,
    TabsRow,
    Tappable,
    TapHandler,
    TextRun,
    TextSpan,
    Wrap,
)
from mdlayout.layout.serialization import render_node_to_dict, render_tree_to_json
from mdlayout.layout.spans import merge_inline_children, merge_similar_text_spans, merge_spans

__all__ = [
    "Column",
    "ColumnWidth",
    "DecoratedBox",
    "DefaultTextStyle",
    "Expanded",
    "FixedColumnWidth",
    "Icon",
    "ImageRun",
    "IntrinsicColumnWidth",
    "MinColumnWidth",
    "Padding",
    "RenderNode",
    "RichText",
    "Row",
    "Rule",
    "ScrollView",
    "SelectableText",
    "SizedBox",
    "TabGroup",
    "TableCellNode",
    "TableGrid",
    "TableRowNode",
    "TabsRow",
    "Tappable",
    "TapHandler",
    "TextRun",
    "TextSpan",
    "Wrap",
    "render_node_to_dict",
    "render_tree_to_json",
    "merge_spans",
    "merge_similar_text_spans",
    "merge_inline_children",
]
