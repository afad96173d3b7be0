#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdlayout/builder/__init__.py
"""Layout builder, its stack frames and its extension points."""

from __future__ import annotations

from mdlayout.builder.builder import LayoutBuilder
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

__all__ = [
    "LayoutBuilder",
    "BlockFrame",
    "InlineFrame",
    "TableFrame",
    "TabsFrame",
    "BuilderDelegate",
    "DefaultBuilderDelegate",
    "ElementBuilder",
    "BulletStyle",
    "ImageBuilder",
    "CheckboxBuilder",
    "BulletBuilder",
    "default_image_builder",
    "parse_image_source",
]
