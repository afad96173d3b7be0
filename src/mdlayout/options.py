#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Builder options for the mdlayout layout builder.

This module defines the immutable configuration objects honored by the
layout builder, following a frozen-dataclass pattern where modified copies
are produced with :meth:`CloneFrozenMixin.create_updated`.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, fields, replace
from typing import Any, Optional, get_args

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from mdlayout.constants import (
    DEFAULT_LIST_ITEM_ALIGNMENT,
    DEFAULT_MAX_DEPTH,
    DEFAULT_MAX_WIDTH,
    ListItemAlignment,
)


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities.

    This mixin adds the ability to create modified copies of frozen dataclass
    instances, which is useful for immutable configuration objects.
    """

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)


@dataclass(frozen=True)
class LayoutOptions(CloneFrozenMixin):
    """Configuration flags honored by the layout builder.

    Parameters
    ----------
    fit_content : bool, default False
        Shrink block stacks to their content instead of stretching them to
        the available width.
    preserve_soft_line_breaks : bool, default False
        Keep soft line breaks as-is instead of folding them into a space.
    selectable : bool, default False
        Produce selectable text runs instead of plain rich text runs. Only the
        run primitive changes, never the structure.
    list_item_alignment : {"baseline", "start"}, default "baseline"
        How a bullet lines up with its list item content.
    max_width : float, default 800.0
        Available width used to size the columns of narrow tables.
    image_directory : str or None, default None
        Base directory for relative image paths.
    max_depth : int, default 200
        Maximum combined block and inline nesting depth.
    code_theme : str or None, default None
        Pygments style used to highlight labeled code blocks. ``None``
        disables highlighting.

    """

    fit_content: bool = field(
        default=False,
        metadata={"help": "Shrink block stacks to their content instead of stretching them", "importance": "core"},
    )
    preserve_soft_line_breaks: bool = field(
        default=False,
        metadata={"help": "Keep soft line breaks instead of folding them into a single space", "importance": "core"},
    )
    selectable: bool = field(
        default=False,
        metadata={"help": "Emit selectable text runs", "importance": "core"},
    )
    list_item_alignment: ListItemAlignment = field(
        default=DEFAULT_LIST_ITEM_ALIGNMENT,
        metadata={"help": "Bullet alignment next to list item content", "choices": ["baseline", "start"]},
    )
    max_width: float = field(
        default=DEFAULT_MAX_WIDTH,
        metadata={"help": "Available width used to size narrow table columns", "type": float},
    )
    image_directory: Optional[str] = field(
        default=None,
        metadata={"help": "Base directory for relative image paths", "importance": "advanced"},
    )
    max_depth: int = field(
        default=DEFAULT_MAX_DEPTH,
        metadata={"help": "Maximum block and inline nesting depth", "type": int, "importance": "security"},
    )
    code_theme: Optional[str] = field(
        default=None,
        metadata={"help": "Pygments style for code block highlighting", "importance": "advanced"},
    )

    def __post_init__(self) -> None:
        """Validate literal and numeric option values.

        Raises
        ------
        ValueError
            If any field value is outside its valid range.

        """
        if self.list_item_alignment not in get_args(ListItemAlignment):
            raise ValueError(
                f"list_item_alignment must be one of {get_args(ListItemAlignment)}, got {self.list_item_alignment!r}"
            )
        if self.max_width <= 0:
            raise ValueError(f"max_width must be positive, got {self.max_width}")
        if self.max_depth <= 0:
            raise ValueError(f"max_depth must be positive, got {self.max_depth}")

    @classmethod
    def field_names(cls) -> set[str]:
        """Return the names of all option fields."""
        return {f.name for f in fields(cls)}


__all__ = ["CloneFrozenMixin", "LayoutOptions"]
