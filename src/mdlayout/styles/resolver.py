#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdlayout/styles/resolver.py
"""Alignment lookups for block tags and table cells."""

from __future__ import annotations

import re
from typing import Optional

from mdlayout.constants import CELL_ALIGNMENT_PATTERN, TextAlign, WrapAlignment
from mdlayout.exceptions import MalformedTreeError
from mdlayout.styles.style_sheet import StyleSheet

_CELL_ALIGNMENT_RE = re.compile(CELL_ALIGNMENT_PATTERN)

_BLOCK_ALIGN_FIELDS: dict[str, str] = {
    "p": "text_align",
    "h1": "h1_align",
    "h2": "h2_align",
    "h3": "h3_align",
    "h4": "h4_align",
    "h5": "h5_align",
    "h6": "h6_align",
    "ul": "unordered_list_align",
    "ol": "ordered_list_align",
    "blockquote": "blockquote_align",
    "pre": "codeblock_align",
}

_WRAP_TO_TEXT_ALIGN: dict[str, TextAlign] = {
    "start": "start",
    "center": "center",
    "end": "end",
    "space_around": "justify",
    "space_between": "justify",
    "space_evenly": "justify",
}


def wrap_alignment_for_block_tag(style_sheet: StyleSheet, block_tag: Optional[str]) -> WrapAlignment:
    """Return how inline runs of a block are placed horizontally.

    Tags without an alignment setting (``li``, ``hr``, tables) start-align.
    """
    attribute = _BLOCK_ALIGN_FIELDS.get(block_tag or "")
    if attribute is None:
        return "start"
    return getattr(style_sheet, attribute)


def text_align_for_wrap_alignment(alignment: WrapAlignment) -> TextAlign:
    """Translate a wrap alignment into the matching text alignment."""
    return _WRAP_TO_TEXT_ALIGN[alignment]


def text_align_for_block_tag(style_sheet: StyleSheet, block_tag: Optional[str]) -> TextAlign:
    """Return the text alignment of runs inside ``block_tag``."""
    return text_align_for_wrap_alignment(wrap_alignment_for_block_tag(style_sheet, block_tag))


def table_cell_alignment(style_sheet: StyleSheet, tag: str, style_attribute: Optional[str]) -> TextAlign:
    """Resolve the text alignment of a ``th`` or ``td`` cell.

    Parameters
    ----------
    style_sheet : StyleSheet
        Active style sheet
    tag : str
        ``"th"`` or ``"td"``
    style_attribute : str or None
        Raw inline ``style`` attribute of the cell

    Returns
    -------
    TextAlign
        The header default or ``"left"`` without a style attribute, otherwise
        the alignment named by its leading ``text-align`` declaration

    Raises
    ------
    MalformedTreeError
        If the style attribute does not start with a recognized
        ``text-align`` declaration

    """
    if style_attribute is None:
        return style_sheet.table_head_align if tag == "th" else "left"
    match = _CELL_ALIGNMENT_RE.match(style_attribute)
    if match is None:
        raise MalformedTreeError(f"Unrecognized table cell alignment: {style_attribute!r}", node_tag=tag)
    return match.group(1)  # type: ignore[return-value]


__all__ = [
    "wrap_alignment_for_block_tag",
    "text_align_for_wrap_alignment",
    "text_align_for_block_tag",
    "table_cell_alignment",
]
