#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdlayout/builder/frames.py
"""Stack records used by the layout builder while it walks a document.

Each open block element owns a :class:`BlockFrame`, each open inline element
an :class:`InlineFrame`; open tables and tab groups collect their rows in a
:class:`TableFrame` or :class:`TabsFrame`. Frames are pushed on entry and
popped on exit, and a finished frame is composed into render nodes.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from mdlayout.layout.nodes import RenderNode, TableRowNode, TabsRow
from mdlayout.styles.text_style import TextStyle


@dataclass
class BlockFrame:
    """One level of block content.

    Parameters
    ----------
    tag : str or None
        Block tag, ``None`` for the document root
    label : str or None
        Fence label of a code block
    children : list of RenderNode
        Finished block children, with spacers between them
    next_list_index : int
        Zero-based index of the next list item when this frame is a list

    """

    tag: Optional[str]
    label: Optional[str] = None
    children: list[RenderNode] = field(default_factory=list)
    next_list_index: int = 0


@dataclass
class InlineFrame:
    """One level of inline content; ``style`` is inherited by the runs below it."""

    tag: Optional[str]
    style: TextStyle = field(default_factory=TextStyle)
    children: list[RenderNode] = field(default_factory=list)


@dataclass
class TableFrame:
    rows: list[TableRowNode] = field(default_factory=list)


@dataclass
class TabsFrame:
    rows: list[TabsRow] = field(default_factory=list)


__all__ = ["BlockFrame", "InlineFrame", "TableFrame", "TabsFrame"]
