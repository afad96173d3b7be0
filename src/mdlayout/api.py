#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdlayout/api.py
"""High-level entry points for building layouts.

Examples
--------
    >>> from mdlayout import build_layout
    >>> from mdlayout.ast import Element, Text
    >>> layout = build_layout([Element("h1", [Text("Title")]), Element("hr")])
    >>> len(layout)  # heading, spacer, rule
    3

"""

from __future__ import annotations

import logging
from typing import Any, Mapping

from mdlayout.ast.nodes import Node
from mdlayout.ast.serialization import json_to_nodes
from mdlayout.builder.builder import LayoutBuilder
from mdlayout.builder.hooks import BuilderDelegate, BulletBuilder, CheckboxBuilder, ElementBuilder, ImageBuilder
from mdlayout.layout.nodes import RenderNode
from mdlayout.options import LayoutOptions
from mdlayout.styles.style_sheet import StyleSheet

logger = logging.getLogger(__name__)


def build_layout(
    nodes: list[Node],
    *,
    options: LayoutOptions | None = None,
    style_sheet: StyleSheet | None = None,
    delegate: BuilderDelegate | None = None,
    builders: Mapping[str, ElementBuilder] | None = None,
    image_builder: ImageBuilder | None = None,
    checkbox_builder: CheckboxBuilder | None = None,
    bullet_builder: BulletBuilder | None = None,
) -> list[RenderNode]:
    """Build the render tree of a document with a fresh :class:`LayoutBuilder`.

    ``nodes`` is rewritten in place by the reference and tab-group passes.

    Parameters
    ----------
    nodes : list of Node
        Top-level document nodes
    options : LayoutOptions, optional
        Layout flags
    style_sheet : StyleSheet, optional
        Style sheet
    delegate : BuilderDelegate, optional
        Link handler factory and code formatter
    builders : mapping of str to ElementBuilder, optional
        Custom element hooks keyed by tag
    image_builder, checkbox_builder, bullet_builder : callable, optional
        Replacements for the default image, checkbox and bullet nodes

    Returns
    -------
    list of RenderNode
        Top-level render nodes

    Raises
    ------
    MalformedTreeError
        If the document breaks the builder's contract
    AttributeParseError
        If an element attribute cannot be parsed

    """
    builder = LayoutBuilder(
        options=options,
        style_sheet=style_sheet,
        delegate=delegate,
        builders=builders,
        image_builder=image_builder,
        checkbox_builder=checkbox_builder,
        bullet_builder=bullet_builder,
    )
    return builder.build(nodes)


def build_layout_from_json(json_str: str, **kwargs: Any) -> list[RenderNode]:
    """Deserialize a JSON document tree and build its layout.

    Keyword arguments are passed on to :func:`build_layout`.

    Raises
    ------
    ValidationError
        If the JSON is not a valid document tree

    """
    nodes = json_to_nodes(json_str)
    logger.debug(f"Loaded {len(nodes)} top-level document nodes from JSON")
    return build_layout(nodes, **kwargs)


__all__ = ["build_layout", "build_layout_from_json"]
