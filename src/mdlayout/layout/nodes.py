#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdlayout/layout/nodes.py
"""Render tree produced by the layout builder.

The render tree is a toolkit-neutral description of what to draw. Primitive
runs (styled text, images, rules, spacers) are composed into containers
(vertical stacks, wrapping flows, rows, tables, tab groups, scroll regions).
A rendering surface walks the tree and maps each node onto its own widgets.

Node Hierarchy
--------------
Runs:
    - TextSpan (styled text, possibly with child spans), RichText,
      SelectableText, ImageRun, Icon, Rule, SizedBox

Containers:
    - Column, Row, Expanded, Wrap, Padding, DecoratedBox, DefaultTextStyle,
      ScrollView, Tappable
    - TableGrid, TableRowNode, TableCellNode
    - TabGroup, TabsRow

"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Optional, Union

from mdlayout.constants import (
    CrossAxisAlignment,
    ImageSourceKind,
    ScrollAxis,
    TableWidthPolicy,
    TextAlign,
    WrapAlignment,
)
from mdlayout.styles.text_style import BoxDecoration, EdgeInsets, TableBorder, TextStyle

LinkCallback = Callable[[str, Optional[str], str], None]


@dataclass(eq=False)
class TapHandler:
    """Tap behavior attached to the runs of a link.

    Handlers compare by identity: two runs are only mergeable when they carry
    the very same handler object.

    Parameters
    ----------
    text : str
        Visible link text
    href : str or None
        Link destination
    title : str
        Link title, empty when absent
    on_tap : callable or None
        Invoked with ``(text, href, title)`` by :meth:`tap`

    """

    text: str
    href: Optional[str]
    title: str = ""
    on_tap: Optional[LinkCallback] = None

    def tap(self) -> None:
        """Fire the tap callback, if any."""
        if self.on_tap is not None:
            self.on_tap(self.text, self.href, self.title)


class RenderNode:
    """Base class of every render tree node."""


@dataclass
class TextSpan(RenderNode):
    """A run of styled text, or a parent bundling child spans.

    Parameters
    ----------
    text : str or None
        Text of this span
    style : TextStyle or None
        Style of this span
    recognizer : TapHandler or None
        Tap behavior, set for link text
    semantics_label : str or None
        Alternative label announced by assistive technology
    children : list of TextSpan or None
        Child spans rendered after ``text``

    """

    text: Optional[str] = None
    style: Optional[TextStyle] = None
    recognizer: Optional[TapHandler] = None
    semantics_label: Optional[str] = None
    children: Optional[list[TextSpan]] = None

    def to_plain_text(self) -> str:
        """Return the text of this span followed by the text of its children."""
        parts = [self.text or ""]
        if self.children:
            parts.extend(child.to_plain_text() for child in self.children)
        return "".join(parts)

    @property
    def is_composite(self) -> bool:
        """True for a span that only bundles children and adds nothing of its own."""
        return (
            bool(self.children)
            and self.text is None
            and self.style is None
            and self.recognizer is None
            and self.semantics_label is None
        )


@dataclass
class RichText(RenderNode):
    """A non-selectable text run."""

    text: TextSpan
    text_align: TextAlign = "start"
    text_scale_factor: float = 1.0


@dataclass
class SelectableText(RenderNode):
    """A selectable text run."""

    text: TextSpan
    text_align: TextAlign = "start"
    text_scale_factor: float = 1.0
    on_tap: Optional[Callable[[], None]] = None


TextRun = Union[RichText, SelectableText]


@dataclass
class ImageRun(RenderNode):
    """An image (or video) reference resolved from an ``img`` element."""

    uri: str
    source: ImageSourceKind = "network"
    width: Optional[float] = None
    height: Optional[float] = None
    title: Optional[str] = None
    alt: Optional[str] = None


@dataclass
class Icon(RenderNode):
    """A named glyph, used for task list checkboxes."""

    name: str
    size: Optional[float] = None
    color: Optional[str] = None


@dataclass
class SizedBox(RenderNode):
    """A fixed-size box; without a child it is a spacer or an empty placeholder."""

    width: Optional[float] = None
    height: Optional[float] = None
    child: Optional[RenderNode] = None


@dataclass
class Rule(RenderNode):
    """A decorative horizontal divider."""

    decoration: BoxDecoration


@dataclass
class Column(RenderNode):
    """Children stacked vertically."""

    children: list[RenderNode] = field(default_factory=list)
    cross_axis_alignment: CrossAxisAlignment = "stretch"


@dataclass
class Row(RenderNode):
    """Children laid out horizontally."""

    children: list[RenderNode] = field(default_factory=list)
    cross_axis_alignment: CrossAxisAlignment = "start"
    text_baseline: Optional[str] = None


@dataclass
class Expanded(RenderNode):
    """Child that fills the remaining space of a row."""

    child: RenderNode


@dataclass
class Wrap(RenderNode):
    """Inline children flowing horizontally and wrapping onto new lines."""

    children: list[RenderNode] = field(default_factory=list)
    alignment: WrapAlignment = "start"
    cross_axis_alignment: CrossAxisAlignment = "center"


@dataclass
class Padding(RenderNode):
    child: RenderNode
    padding: EdgeInsets = field(default_factory=EdgeInsets)


@dataclass
class DecoratedBox(RenderNode):
    child: RenderNode
    decoration: BoxDecoration = field(default_factory=BoxDecoration)


@dataclass
class DefaultTextStyle(RenderNode):
    """Default text style and alignment for the runs below it."""

    child: RenderNode
    style: Optional[TextStyle] = None
    text_align: Optional[TextAlign] = None


@dataclass
class ScrollView(RenderNode):
    """A scrollable region, with a visible scrollbar when ``scrollbar`` is set."""

    child: RenderNode
    axis: ScrollAxis = "horizontal"
    padding: EdgeInsets = field(default_factory=EdgeInsets)
    scrollbar: bool = True


@dataclass
class Tappable(RenderNode):
    """Makes a non-text child (an image) respond to a link tap."""

    child: RenderNode
    handler: TapHandler


@dataclass(frozen=True)
class FixedColumnWidth:
    width: float


@dataclass(frozen=True)
class IntrinsicColumnWidth:
    pass


@dataclass(frozen=True)
class MinColumnWidth:
    """The smaller of two column widths."""

    a: ColumnWidth
    b: ColumnWidth


ColumnWidth = Union[FixedColumnWidth, IntrinsicColumnWidth, MinColumnWidth]


@dataclass
class TableCellNode(RenderNode):
    child: RenderNode


@dataclass
class TableRowNode(RenderNode):
    """One table row; ``decoration`` is set on zebra-striped rows."""

    children: list[RenderNode] = field(default_factory=list)
    decoration: Optional[BoxDecoration] = None


@dataclass
class TableGrid(RenderNode):
    """A table grid.

    Parameters
    ----------
    rows : list of TableRowNode
        Table rows in document order
    column_count : int
        Cell count of the widest row
    width_policy : {"equal", "many_column"}
        Which column width policy was chosen
    default_column_width : ColumnWidth
        Width applied to every column
    border : TableBorder or None
        Cell border
    default_vertical_alignment : str
        Vertical placement of cell content

    """

    rows: list[TableRowNode]
    column_count: int
    width_policy: TableWidthPolicy
    default_column_width: ColumnWidth
    border: Optional[TableBorder] = None
    default_vertical_alignment: str = "middle"


@dataclass
class TabsRow:
    """One labeled tab: the label and the decorated code block it shows."""

    label: str
    child: RenderNode


@dataclass
class TabGroup(RenderNode):
    """Consecutive labeled code blocks presented as switchable tabs."""

    rows: list[TabsRow]
    label_style: Optional[TextStyle] = None
    divider_color: Optional[str] = None
    selected_index: int = 0

    @property
    def tab_labels(self) -> list[str]:
        """Labels as shown in the tab strip: first letter upper case, rest lower case."""
        return [row.label[:1].upper() + row.label[1:].lower() for row in self.rows]

    @property
    def selected(self) -> Optional[RenderNode]:
        """Content of the selected tab."""
        if not self.rows:
            return None
        return self.rows[self.selected_index].child


__all__ = [
    "TapHandler",
    "RenderNode",
    "TextSpan",
    "RichText",
    "SelectableText",
    "TextRun",
    "ImageRun",
    "Icon",
    "SizedBox",
    "Rule",
    "Column",
    "Row",
    "Expanded",
    "Wrap",
    "Padding",
    "DecoratedBox",
    "DefaultTextStyle",
    "ScrollView",
    "Tappable",
    "FixedColumnWidth",
    "IntrinsicColumnWidth",
    "MinColumnWidth",
    "ColumnWidth",
    "TableCellNode",
    "TableRowNode",
    "TableGrid",
    "TabsRow",
    "TabGroup",
]
