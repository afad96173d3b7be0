#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdlayout/builder/builder.py
"""Single-pass builder turning a document tree into a render tree.

The :class:`LayoutBuilder` visits the document once. Block elements push a
:class:`BlockFrame` on entry and are composed into a vertical stack on exit;
inline elements push an :class:`InlineFrame` whose style is inherited by the
text runs created below it. Inline content sitting directly in a block is
flushed into an anonymous wrapping node whenever a nested block starts or
the block ends. Tables, tab groups and links keep their own stacks.

Before the visit two passes rewrite the input in place: bare URLs and media
paths become ``a``/``img`` elements, and runs of labeled code blocks become
``tabs`` elements.

Examples
--------
    >>> from mdlayout.ast import Element, Text
    >>> builder = LayoutBuilder()
    >>> layout = builder.build([Element("p", [Text("Hello "), Element("em", [Text("world")])])])
    >>> type(layout[0]).__name__
    'Column'

"""

from __future__ import annotations

import logging
import re
from typing import Callable, Mapping, Optional

from mdlayout.ast.nodes import Element, Node, Text, extract_link_text
from mdlayout.ast.visitors import NodeVisitor
from mdlayout.builder.frames import BlockFrame, InlineFrame, TableFrame, TabsFrame
from mdlayout.builder.hooks import (
    BuilderDelegate,
    BulletBuilder,
    BulletStyle,
    CheckboxBuilder,
    DefaultBuilderDelegate,
    ElementBuilder,
    ImageBuilder,
)
from mdlayout.builder.images import default_image_builder, parse_image_source
from mdlayout.constants import (
    BLOCK_TAGS,
    CODE_BLOCK_TAG,
    EQUAL_WIDTH_MAX_COLUMNS,
    LIST_TAGS,
    MANY_COLUMN_FIXED_WIDTH,
    TABLE_CELL_TAGS,
    TABLE_COLUMN_GUTTER,
    TABS_TAG,
    UNORDERED_BULLET,
    TextAlign,
)
from mdlayout.exceptions import AttributeParseError, MalformedTreeError
from mdlayout.highlight import PygmentsHighlighter
from mdlayout.layout.nodes import (
    Column,
    ColumnWidth,
    DecoratedBox,
    DefaultTextStyle,
    Expanded,
    FixedColumnWidth,
    Icon,
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
from mdlayout.layout.spans import merge_inline_children
from mdlayout.options import LayoutOptions
from mdlayout.styles.resolver import (
    table_cell_alignment,
    text_align_for_block_tag,
    text_align_for_wrap_alignment,
    wrap_alignment_for_block_tag,
)
from mdlayout.styles.style_sheet import StyleSheet
from mdlayout.styles.text_style import EdgeInsets, TextStyle
from mdlayout.transforms.references import rewrite_references
from mdlayout.transforms.tabs import coalesce_tab_groups

logger = logging.getLogger(__name__)

# Spaces at the start of a line
_LEADING_SPACES_RE = re.compile(r"^ *")

# Trailing space, newline and leading spaces joining two soft-wrapped lines
_SOFT_LINE_BREAK_RE = re.compile(r" ?\n *")


class LayoutBuilder(NodeVisitor):
    """Build render trees from document trees.

    A builder may be reused for several documents; every call to
    :meth:`build` starts from empty stacks. It must not be used for two
    builds at the same time.

    Parameters
    ----------
    options : LayoutOptions or None, default None
        Layout flags; defaults when omitted
    style_sheet : StyleSheet or None, default None
        Styles, alignments, paddings and decorations; defaults when omitted
    delegate : BuilderDelegate or None, default None
        Link handler factory and code formatter. When omitted a
        :class:`DefaultBuilderDelegate` is used, highlighting code with
        Pygments if ``options.code_theme`` is set.
    builders : mapping of str to ElementBuilder or None, default None
        Custom element hooks keyed by tag
    image_builder : callable or None, default None
        ``(uri, title, alt) -> RenderNode`` replacing the default image node
    checkbox_builder : callable or None, default None
        ``(checked) -> RenderNode`` replacing the default checkbox
    bullet_builder : callable or None, default None
        ``(index, BulletStyle) -> RenderNode`` replacing the default bullet
    on_tap_text : callable or None, default None
        Tap callback given to selectable text runs

    """

    def __init__(
        self,
        options: LayoutOptions | None = None,
        style_sheet: StyleSheet | None = None,
        delegate: BuilderDelegate | None = None,
        builders: Mapping[str, ElementBuilder] | None = None,
        image_builder: ImageBuilder | None = None,
        checkbox_builder: CheckboxBuilder | None = None,
        bullet_builder: BulletBuilder | None = None,
        on_tap_text: Callable[[], None] | None = None,
    ):
        self.options = options or LayoutOptions()
        self.style_sheet = style_sheet or StyleSheet()
        if delegate is None:
            highlighter = PygmentsHighlighter(self.options.code_theme) if self.options.code_theme else None
            delegate = DefaultBuilderDelegate(highlighter=highlighter)
        self.delegate = delegate
        self.builders: dict[str, ElementBuilder] = dict(builders or {})
        self.image_builder = image_builder
        self.checkbox_builder = checkbox_builder
        self.bullet_builder = bullet_builder
        self.on_tap_text = on_tap_text
        self._reset()

    def _reset(self) -> None:
        self._list_indents: list[str] = []
        self._blocks: list[BlockFrame] = []
        self._tables: list[TableFrame] = []
        self._tabs: list[TabsFrame] = []
        self._inlines: list[InlineFrame] = []
        self._link_handlers: list[TapHandler] = []
        self._current_block_tag: Optional[str] = None
        self._last_tag: Optional[str] = None
        self._blockquote_depth = 0

    def build(self, nodes: list[Node]) -> list[RenderNode]:
        """Build the render tree of a document.

        ``nodes`` is rewritten in place first: bare references become link
        and image elements and runs of labeled code blocks become tab groups.

        Parameters
        ----------
        nodes : list of Node
            Top-level document nodes

        Returns
        -------
        list of RenderNode
            Top-level render nodes, with spacers between them

        Raises
        ------
        MalformedTreeError
            If the tree breaks the builder's contract (a ``tr`` outside a
            table, a block inside an inline element, excessive nesting or
            unbalanced stacks at the end of the build)
        AttributeParseError
            If a ``start`` or image size attribute cannot be parsed

        """
        self._reset()
        self._check_document_depth(nodes)
        self._blocks.append(BlockFrame(None))

        rewritten = rewrite_references(nodes)
        grouped = coalesce_tab_groups(nodes)
        if rewritten or grouped:
            logger.debug(f"Pre-passes rewrote {rewritten} references and created {grouped} tab groups")

        for node in nodes:
            node.accept(self)

        self._check_balanced()
        children = self._blocks[0].children
        logger.debug(f"Built {len(children)} top-level render nodes from {len(nodes)} document nodes")
        return children

    def _check_balanced(self) -> None:
        problems = []
        if len(self._blocks) != 1:
            problems.append(f"{len(self._blocks)} block frames open")
        if self._inlines:
            problems.append(f"{len(self._inlines)} inline frames open")
        if self._tables:
            problems.append(f"{len(self._tables)} tables open")
        if self._tabs:
            problems.append(f"{len(self._tabs)} tab groups open")
        if self._link_handlers:
            problems.append(f"{len(self._link_handlers)} link handlers active")
        if self._blockquote_depth:
            problems.append(f"block quote depth {self._blockquote_depth}")
        if self._list_indents:
            problems.append(f"{len(self._list_indents)} lists open")
        if problems:
            raise MalformedTreeError("Unbalanced builder state after build: " + ", ".join(problems))

    # ------------------------------------------------------------------
    # Visitor
    # ------------------------------------------------------------------

    def visit_element_before(self, element: Element) -> bool:
        """Enter an element; returns False when the element is skipped."""
        tag = element.tag

        builder = self.builders.get(tag)
        if builder is not None:
            builder.visit_element_before(element)

        if tag in BLOCK_TAGS:
            self._enter_block(element)
            return True
        return self._enter_inline(element)

    def visit_text(self, text: Text) -> None:
        """Append a run for ``text`` to the innermost inline frame."""
        block = self._blocks[-1]
        if block.tag is None:
            return

        self._add_parent_inline_if_needed(block.tag)

        child: Optional[RenderNode]
        builder = self.builders.get(block.tag)
        if builder is not None:
            child = builder.visit_text(text, self.style_sheet.style_for(block.tag))
        elif block.tag == CODE_BLOCK_TAG:
            span = self.delegate.format_text(self.style_sheet, text.content, block.label)
            child = ScrollView(
                child=self._build_text_run(span),
                axis="horizontal",
                padding=self.style_sheet.codeblock_padding,
                scrollbar=True,
            )
        else:
            inline = self._inlines[-1]
            if self._blockquote_depth:
                style = self.style_sheet.blockquote.merge(inline.style)
                content = text.content
            else:
                style = inline.style
                content = self._fold_whitespace(text.content)
            span = TextSpan(
                text=content,
                style=style,
                recognizer=self._link_handlers[-1] if self._link_handlers else None,
            )
            child = self._build_text_run(span, text_align_for_block_tag(self.style_sheet, self._current_block_tag))

        if child is not None:
            self._inlines[-1].children.append(child)

    def visit_element_after(self, element: Element) -> None:
        """Leave an element, composing its frame into its parent."""
        tag = element.tag
        if tag in BLOCK_TAGS:
            self._leave_block(element)
        else:
            self._leave_inline(element)

        if self._current_block_tag == tag:
            self._current_block_tag = None
        self._last_tag = tag

    # ------------------------------------------------------------------
    # Blocks
    # ------------------------------------------------------------------

    def _enter_block(self, element: Element) -> None:
        tag = element.tag
        if self._current_block_tag is None:
            self._current_block_tag = tag
        self._add_anonymous_block_if_needed(tag)

        frame = BlockFrame(tag, label=element.label)
        if tag in LIST_TAGS:
            self._list_indents.append(tag)
            start = self._list_start(element)
            if start is not None:
                frame.next_list_index = start
        elif tag == "blockquote":
            self._blockquote_depth += 1
        elif tag == TABS_TAG:
            self._tabs.append(TabsFrame())
        elif tag == "table":
            self._tables.append(TableFrame())
        elif tag == "tr":
            self._start_table_row()

        self._blocks.append(frame)
        self._check_depth(tag)

    @staticmethod
    def _list_start(element: Element) -> Optional[int]:
        raw = element.attributes.get("start")
        if raw is None:
            return None
        try:
            return int(raw) - 1
        except ValueError as e:
            raise AttributeParseError(element.tag, "start", raw, original_error=e) from e

    def _start_table_row(self) -> None:
        if not self._tables:
            raise MalformedTreeError("<tr> found outside of any <table>", node_tag="tr")
        rows = self._tables[-1].rows
        decoration = self.style_sheet.table_cells_decoration if len(rows) % 2 == 1 else None
        rows.append(TableRowNode(decoration=decoration))

    def _leave_block(self, element: Element) -> None:
        tag = element.tag
        self._add_anonymous_block_if_needed(tag)

        current = self._blocks.pop()
        child = self._compose_block(current)

        if tag in LIST_TAGS:
            self._list_indents.pop()
        elif tag == "li":
            child = self._build_list_item(element, child)
        elif tag == TABS_TAG:
            child = TabGroup(
                self._tabs.pop().rows,
                label_style=self.style_sheet.h3,
                divider_color=self.style_sheet.table_border.color,
            )
        elif tag == "table":
            child = self._build_table(self._tables.pop())
        elif tag == "blockquote":
            self._blockquote_depth -= 1
            child = DecoratedBox(
                Padding(child, self.style_sheet.blockquote_padding),
                self.style_sheet.blockquote_decoration,
            )
        elif tag == CODE_BLOCK_TAG:
            child = DecoratedBox(child, self.style_sheet.codeblock_decoration)
            if element.label and self._tabs:
                self._tabs[-1].rows.append(TabsRow(element.label, child))
                return
        elif tag == "hr":
            child = Rule(self.style_sheet.horizontal_rule_decoration)

        builder = self.builders.get(tag)
        if builder is not None:
            custom = builder.visit_element_after(element, self.style_sheet.style_for(tag))
            if custom is not None:
                child = custom

        self._add_block_child(child)

    def _compose_block(self, frame: BlockFrame) -> RenderNode:
        if not frame.children:
            return SizedBox()
        return Column(frame.children, "start" if self.options.fit_content else "stretch")

    def _add_block_child(self, child: RenderNode) -> None:
        parent = self._blocks[-1]
        if parent.children:
            parent.children.append(SizedBox(height=self.style_sheet.block_spacing))
        parent.children.append(child)
        parent.next_list_index += 1

    def _add_anonymous_block_if_needed(self, tag: str) -> None:
        """Flush inline content of the enclosing block into a wrapping node."""
        if not self._inlines:
            return
        if len(self._inlines) > 1:
            raise MalformedTreeError(
                f"Block element <{tag}> inside inline element <{self._inlines[-1].tag}>", node_tag=tag
            )

        inline = self._inlines.pop()
        if not inline.children:
            return
        alignment = wrap_alignment_for_block_tag(self.style_sheet, self._current_block_tag)
        text_align = text_align_for_wrap_alignment(alignment)
        self._add_block_child(
            Wrap(
                merge_inline_children(inline.children, text_align),
                alignment=alignment,
                cross_axis_alignment="center",
            )
        )

    def _build_list_item(self, element: Element, content: RenderNode) -> RenderNode:
        if not self._list_indents:
            return content

        first = element.children[0] if element.children else None
        if isinstance(first, Element) and first.attributes.get("type") == "checkbox":
            bullet = self._build_checkbox(first.attributes.get("checked") != "false")
        else:
            bullet = self._build_bullet(self._list_indents[-1])

        padding = self.style_sheet.list_bullet_padding
        start_aligned = self.options.list_item_alignment == "start"
        return Row(
            [
                SizedBox(width=self.style_sheet.list_indent + padding.horizontal, child=bullet),
                Expanded(content),
            ],
            cross_axis_alignment="start" if start_aligned else "baseline",
            text_baseline=None if start_aligned else "alphabetic",
        )

    def _build_checkbox(self, checked: bool) -> RenderNode:
        if self.checkbox_builder is not None:
            return self.checkbox_builder(checked)
        style = self.style_sheet.checkbox
        return Padding(
            Icon("check_box" if checked else "check_box_outline_blank", size=style.font_size, color=style.color),
            self.style_sheet.list_bullet_padding,
        )

    def _build_bullet(self, list_tag: str) -> RenderNode:
        index = self._blocks[-1].next_list_index
        unordered = list_tag == "ul"
        padding = self.style_sheet.list_bullet_padding

        if self.bullet_builder is not None:
            kind = BulletStyle.UNORDERED if unordered else BulletStyle.ORDERED
            return Padding(self.bullet_builder(index, kind), padding)

        text = UNORDERED_BULLET if unordered else f"{index + 1}."
        bullet = RichText(
            TextSpan(text=text, style=self.style_sheet.list_bullet),
            text_align="center" if unordered else "right",
            text_scale_factor=self.style_sheet.text_scale_factor,
        )
        return Padding(bullet, padding)

    def _build_table(self, table: TableFrame) -> RenderNode:
        column_count = max([1] + [len(row.children) for row in table.rows])

        width: ColumnWidth
        if column_count <= EQUAL_WIDTH_MAX_COLUMNS:
            available = self.options.max_width - column_count * TABLE_COLUMN_GUTTER
            width = FixedColumnWidth(available / column_count)
            policy = "equal"
        else:
            width = MinColumnWidth(FixedColumnWidth(MANY_COLUMN_FIXED_WIDTH), IntrinsicColumnWidth())
            policy = "many_column"
        logger.debug(f"Table with {len(table.rows)} rows and {column_count} columns uses {policy} column widths")

        grid = TableGrid(
            rows=table.rows,
            column_count=column_count,
            width_policy=policy,  # type: ignore[arg-type]
            default_column_width=width,
            border=self.style_sheet.table_border,
        )
        return ScrollView(grid, axis="horizontal", padding=EdgeInsets(), scrollbar=True)

    # ------------------------------------------------------------------
    # Inlines
    # ------------------------------------------------------------------

    def _enter_inline(self, element: Element) -> bool:
        tag = element.tag
        if self._blocks[-1].tag is None:
            logger.debug(f"Skipping inline element <{tag}> outside of any block")
            return False

        if tag == "a":
            text = extract_link_text(element)
            href = element.attributes.get("href")
            if not text:
                logger.debug(f"Skipping link to {href!r} without text")
                return False
            self._link_handlers.append(self.delegate.create_link(text, href, element.attributes.get("title") or ""))

        if self._current_block_tag is None:
            self._current_block_tag = tag
        self._add_parent_inline_if_needed(self._blocks[-1].tag)

        if tag == "td" and element.children is not None and not element.children:
            element.children.append(Text(""))

        parent_style = self._inlines[-1].style
        self._inlines.append(InlineFrame(tag, parent_style.merge(self.style_sheet.style_for(tag))))
        self._check_depth(tag)
        return True

    def _leave_inline(self, element: Element) -> None:
        tag = element.tag
        current = self._inlines.pop()
        parent = self._inlines[-1]

        builder = self.builders.get(tag)
        if builder is not None:
            custom = builder.visit_element_after(element, self.style_sheet.style_for(tag))
            if custom is not None:
                if current.children:
                    current.children[0] = custom
                else:
                    current.children.append(custom)
        elif tag == "img":
            current.children.append(self._build_image(element))
        elif tag == "br":
            current.children.append(self._build_text_run(TextSpan(text="\n")))
        elif tag in TABLE_CELL_TAGS:
            self._add_table_cell(element, current.children)
            current.children = []

        if tag == "a":
            self._link_handlers.pop()

        parent.children.extend(current.children)

    def _add_table_cell(self, element: Element, children: list[RenderNode]) -> None:
        tag = element.tag
        if not self._tables or not self._tables[-1].rows:
            raise MalformedTreeError(f"<{tag}> found outside of any table row", node_tag=tag)

        align = table_cell_alignment(self.style_sheet, tag, element.attributes.get("style"))
        cell = TableCellNode(
            Padding(
                DefaultTextStyle(
                    Wrap(merge_inline_children(children, align), alignment="start", cross_axis_alignment="start"),
                    style=self.style_sheet.table_body,
                    text_align=align,
                ),
                self.style_sheet.table_cells_padding,
            )
        )
        self._tables[-1].rows[-1].children.append(cell)

    def _build_image(self, element: Element) -> RenderNode:
        src = element.attributes.get("src")
        if not src:
            raise AttributeParseError("img", "src", src or "", "Image element has no 'src' attribute")

        uri, width, height = parse_image_source(src)
        title = element.attributes.get("title")
        alt = element.attributes.get("alt")
        if self.image_builder is not None:
            child = self.image_builder(uri, title, alt)
        else:
            child = default_image_builder(uri, self.options.image_directory, width, height, title, alt)

        if self._link_handlers:
            return Tappable(child, self._link_handlers[-1])
        return child

    def _add_parent_inline_if_needed(self, tag: Optional[str]) -> None:
        if not self._inlines:
            self._inlines.append(InlineFrame(tag, self.style_sheet.style_for(tag) or TextStyle()))

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _fold_whitespace(self, content: str) -> str:
        if self._last_tag == "br":
            content = _LEADING_SPACES_RE.sub("", content)
        if self.options.preserve_soft_line_breaks:
            return content
        return _SOFT_LINE_BREAK_RE.sub(" ", content)

    def _build_text_run(self, span: TextSpan, text_align: Optional[TextAlign] = None) -> TextRun:
        if self.options.selectable:
            return SelectableText(
                span,
                text_align=text_align or "start",
                text_scale_factor=self.style_sheet.text_scale_factor,
                on_tap=self.on_tap_text,
            )
        return RichText(span, text_align=text_align or "start", text_scale_factor=self.style_sheet.text_scale_factor)

    def _check_document_depth(self, nodes: list[Node]) -> None:
        # Depth counts the root frame, as in _check_depth
        pending = [(node, 2) for node in nodes if isinstance(node, Element)]
        while pending:
            element, depth = pending.pop()
            if depth > self.options.max_depth:
                raise MalformedTreeError(
                    f"Document nesting exceeds the limit of {self.options.max_depth}", node_tag=element.tag
                )
            pending.extend((child, depth + 1) for child in element.children or () if isinstance(child, Element))

    def _check_depth(self, tag: str) -> None:
        depth = len(self._blocks) + len(self._inlines)
        if depth > self.options.max_depth:
            raise MalformedTreeError(
                f"Nesting depth {depth} exceeds the limit of {self.options.max_depth}", node_tag=tag
            )


__all__ = ["LayoutBuilder"]
