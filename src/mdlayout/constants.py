#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for the mdlayout library.

This module centralizes tag classifications, reference patterns, layout
defaults and the Literal types shared across the builder, the style sheet and
the configuration layer.

Constants are organized by category:
1. Type Definitions - All Literal types and type aliases
2. Tag Classification - Block, list and structural tags
3. Reference Rewriting - URL and media patterns
4. Layout Defaults - Builder and style sheet defaults
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions - All Literal Types and Type Aliases
# =============================================================================

# Horizontal placement of a wrapped run of inline children
WrapAlignment = Literal["start", "center", "end", "space_around", "space_between", "space_evenly"]

# Horizontal placement of text inside a text run
TextAlign = Literal["left", "right", "center", "justify", "start", "end"]

# Cross axis placement of the children of a vertical stack or a row
CrossAxisAlignment = Literal["start", "end", "center", "stretch", "baseline"]

# Bullet and list item content placement
ListItemAlignment = Literal["baseline", "start"]

# Scroll direction of scroll containers
ScrollAxis = Literal["horizontal", "vertical"]

# Column width policy chosen for a table
TableWidthPolicy = Literal["equal", "many_column"]

# Image source classification used by the default image builder
ImageSourceKind = Literal["network", "data", "resource", "file"]

# CLI output formats
OutputFormat = Literal["json", "tree"]

# =============================================================================
# Tag Classification
# =============================================================================

BLOCK_TAGS: frozenset[str] = frozenset(
    {
        "p",
        "h1",
        "h2",
        "h3",
        "h4",
        "h5",
        "h6",
        "li",
        "blockquote",
        "pre",
        "ol",
        "ul",
        "hr",
        "table",
        "thead",
        "tbody",
        "tr",
        "tabs",
    }
)

LIST_TAGS: frozenset[str] = frozenset({"ul", "ol"})

# Tag of the code fence container whose label drives tab grouping
CODE_BLOCK_TAG = "pre"

# Tag of the synthetic container created for consecutive labeled code blocks
TABS_TAG = "tabs"

# Tag of the synthetic inline wrapper emitted by the reference rewriter
REFERENCE_WRAPPER_TAG = "span"

TABLE_CELL_TAGS: frozenset[str] = frozenset({"th", "td"})

# =============================================================================
# Reference Rewriting
# =============================================================================

IMAGE_TYPES: tuple[str, ...] = ("png", "jpg", "JPEG", "gif", "jpeg")
VIDEO_TYPES: tuple[str, ...] = ("mp4", "flv", "avi")
MEDIA_TYPES: frozenset[str] = frozenset(IMAGE_TYPES + VIDEO_TYPES)

URL_PATTERN = r"http[s]?://(?:[a-zA-Z]|[0-9]|[$-_@.&#+]|[!*\(\),]|(?:%[0-9a-fA-F][0-9a-fA-F]))+"
UPLOAD_MEDIA_PATTERN = r"/upload.*?\.(?:" + "|".join(IMAGE_TYPES + VIDEO_TYPES) + r")"

# Inline style attribute on table cells
CELL_ALIGNMENT_PATTERN = r"text-align: (left|center|right)"

# =============================================================================
# Layout Defaults
# =============================================================================

DEFAULT_MAX_WIDTH = 800.0
DEFAULT_MAX_DEPTH = 200
DEFAULT_LIST_ITEM_ALIGNMENT: ListItemAlignment = "baseline"

# Tables with more columns than this use the many-column width policy
EQUAL_WIDTH_MAX_COLUMNS = 2
# Width reserved per column when splitting the available width equally
TABLE_COLUMN_GUTTER = 10.0
# Width cap for each column under the many-column policy
MANY_COLUMN_FIXED_WIDTH = 180.0

DEFAULT_LIST_INDENT = 24.0
DEFAULT_BLOCK_SPACING = 8.0
DEFAULT_TEXT_SCALE_FACTOR = 1.0

UNORDERED_BULLET = "•"
