#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdlayout/__init__.py
"""mdlayout - build renderable layout trees from parsed markdown documents.

mdlayout takes the element/text tree produced by a markdown parser and
compiles it, in a single pass, into a toolkit-neutral render tree: vertical
stacks, wrapping runs of styled text, list rows with bullets, table grids,
tab groups and scrollable code blocks. A rendering surface only has to map
those nodes onto its own widgets.

Key Features
------------
- Stack-based builder with anonymous paragraphs for loose inline content
- Automatic links and images for bare URLs and ``/upload/...`` media paths
- Consecutive labeled code blocks grouped into switchable tabs
- Adjacent text runs merged by style and link target
- Style sheets, layout options and config files (JSON, TOML, YAML)
- Optional Pygments syntax highlighting for code blocks

Examples
--------
    >>> from mdlayout import build_layout, LayoutOptions
    >>> from mdlayout.ast import Element, Text
    >>> doc = [Element("p", [Text("See https://example.com")])]
    >>> layout = build_layout(doc, options=LayoutOptions(selectable=True))

"""

from __future__ import annotations

from mdlayout.api import build_layout, build_layout_from_json
from mdlayout.ast import Element, Node, Text
from mdlayout.builder import BuilderDelegate, BulletStyle, DefaultBuilderDelegate, ElementBuilder, LayoutBuilder
from mdlayout.exceptions import AttributeParseError, MalformedTreeError, MdLayoutError, StyleSheetError, ValidationError
from mdlayout.options import LayoutOptions
from mdlayout.styles import StyleSheet, TextStyle

__version__ = "0.1.0"

__all__ = [
    "build_layout",
    "build_layout_from_json",
    "Node",
    "Element",
    "Text",
    "LayoutBuilder",
    "BuilderDelegate",
    "DefaultBuilderDelegate",
    "ElementBuilder",
    "BulletStyle",
    "LayoutOptions",
    "StyleSheet",
    "TextStyle",
    "MdLayoutError",
    "ValidationError",
    "AttributeParseError",
    "StyleSheetError",
    "MalformedTreeError",
]
