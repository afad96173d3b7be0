#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdlayout/styles/__init__.py
"""Style sheet, style value types and alignment resolution."""

from __future__ import annotations

from mdlayout.styles.resolver import (
    table_cell_alignment,
    text_align_for_block_tag,
    text_align_for_wrap_alignment,
    wrap_alignment_for_block_tag,
)
from mdlayout.styles.style_sheet import StyleSheet
from mdlayout.styles.text_style import BorderSide, BoxDecoration, EdgeInsets, TableBorder, TextStyle

__all__ = [
    "StyleSheet",
    "TextStyle",
    "EdgeInsets",
    "BorderSide",
    "BoxDecoration",
    "TableBorder",
    "wrap_alignment_for_block_tag",
    "text_align_for_wrap_alignment",
    "text_align_for_block_tag",
    "table_cell_alignment",
]
