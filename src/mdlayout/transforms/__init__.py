#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdlayout/transforms/__init__.py
"""In-place rewriting passes run over a document tree before layout."""

from __future__ import annotations

from mdlayout.transforms.references import is_media_reference, rewrite_references, rewrite_text
from mdlayout.transforms.tabs import coalesce_tab_groups, is_labeled_code_block

__all__ = [
    "is_media_reference",
    "rewrite_text",
    "rewrite_references",
    "is_labeled_code_block",
    "coalesce_tab_groups",
]
