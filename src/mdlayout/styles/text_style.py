#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdlayout/styles/text_style.py
"""Value types for text styles, spacing and decorations.

All types are frozen dataclasses so that they compare by value: the span
merger relies on style equality to decide whether two runs can be joined.
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import Optional, Union

FontWeight = Union[str, int]


@dataclass(frozen=True)
class TextStyle:
    """Visual attributes of a text run.

    Every field is optional; ``None`` means "inherit". Styles are combined
    with :meth:`merge`, where the fields set on the argument win.

    Parameters
    ----------
    color : str or None
        Foreground color (``#rrggbb``)
    background_color : str or None
        Background color (``#rrggbb``)
    font_size : float or None
        Font size in logical pixels
    font_weight : str, int or None
        ``"normal"``, ``"bold"`` or a numeric weight
    font_style : str or None
        ``"normal"`` or ``"italic"``
    font_family : str or None
        Font family name
    decoration : str or None
        ``"underline"``, ``"line_through"`` or ``"overline"``
    height : float or None
        Line height multiplier

    """

    color: Optional[str] = None
    background_color: Optional[str] = None
    font_size: Optional[float] = None
    font_weight: Optional[FontWeight] = None
    font_style: Optional[str] = None
    font_family: Optional[str] = None
    decoration: Optional[str] = None
    height: Optional[float] = None

    def merge(self, other: Optional[TextStyle]) -> TextStyle:
        """Return a new style with the set fields of ``other`` applied on top.

        Parameters
        ----------
        other : TextStyle or None
            Style to overlay; ``None`` returns ``self`` unchanged

        Returns
        -------
        TextStyle
            The combined style

        """
        if other is None:
            return self
        overrides = {f.name: getattr(other, f.name) for f in fields(other) if getattr(other, f.name) is not None}
        return replace(self, **overrides) if overrides else self


@dataclass(frozen=True)
class EdgeInsets:
    """Padding on the four sides of a box."""

    left: float = 0.0
    top: float = 0.0
    right: float = 0.0
    bottom: float = 0.0

    @classmethod
    def all(cls, value: float) -> EdgeInsets:
        """Return insets with the same value on every side."""
        return cls(value, value, value, value)

    @classmethod
    def symmetric(cls, horizontal: float = 0.0, vertical: float = 0.0) -> EdgeInsets:
        """Return insets with separate horizontal and vertical values."""
        return cls(horizontal, vertical, horizontal, vertical)

    @property
    def horizontal(self) -> float:
        """Total horizontal inset."""
        return self.left + self.right


@dataclass(frozen=True)
class BorderSide:
    """One side of a box border."""

    color: str = "#000000"
    width: float = 1.0


@dataclass(frozen=True)
class BoxDecoration:
    """Background and border of a decorated box.

    Parameters
    ----------
    color : str or None
        Fill color
    border_radius : float
        Corner radius
    border_top, border_right, border_bottom, border_left : BorderSide or None
        Individual border sides

    """

    color: Optional[str] = None
    border_radius: float = 0.0
    border_top: Optional[BorderSide] = None
    border_right: Optional[BorderSide] = None
    border_bottom: Optional[BorderSide] = None
    border_left: Optional[BorderSide] = None


@dataclass(frozen=True)
class TableBorder:
    """Uniform border drawn around and between table cells."""

    color: str = "#bdbdbd"
    width: float = 1.0


__all__ = ["TextStyle", "EdgeInsets", "BorderSide", "BoxDecoration", "TableBorder"]
