#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdlayout/styles/style_sheet.py
"""Style sheet consumed read-only by the layout builder.

A :class:`StyleSheet` maps element tags to text styles and carries the
alignment, padding, decoration and scalar layout settings used when blocks
are composed. It is pure data: theming and style-sheet authoring live
outside the builder, so the only construction helpers here are the defaults
and :meth:`StyleSheet.from_dict` for configuration files.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Mapping, Optional, get_args

from mdlayout.constants import (
    DEFAULT_BLOCK_SPACING,
    DEFAULT_LIST_INDENT,
    DEFAULT_TEXT_SCALE_FACTOR,
    TextAlign,
    WrapAlignment,
)
from mdlayout.exceptions import StyleSheetError
from mdlayout.options import CloneFrozenMixin
from mdlayout.styles.text_style import BorderSide, BoxDecoration, EdgeInsets, TableBorder, TextStyle

_BODY_SIZE = 14.0

# Tag -> StyleSheet attribute holding its text style
_TAG_STYLE_FIELDS: dict[str, str] = {
    "a": "a",
    "p": "p",
    "li": "p",
    "code": "code",
    "h1": "h1",
    "h2": "h2",
    "h3": "h3",
    "h4": "h4",
    "h5": "h5",
    "h6": "h6",
    "em": "em",
    "strong": "strong",
    "del": "del_",
    "blockquote": "blockquote",
    "img": "img",
    "table": "p",
    "th": "table_head",
    "tr": "table_body",
    "td": "table_body",
}


@dataclass(frozen=True)
class StyleSheet(CloneFrozenMixin):
    """Styles and layout settings for every element the builder renders.

    Text styles are looked up per tag with :meth:`style_for`. Alignments use
    the :data:`~mdlayout.constants.WrapAlignment` names, except
    ``table_head_align`` which is a :data:`~mdlayout.constants.TextAlign`.

    """

    a: TextStyle = TextStyle(color="#1e88e5")
    p: TextStyle = TextStyle(font_size=_BODY_SIZE)
    code: TextStyle = TextStyle(font_family="monospace", background_color="#eeeeee", font_size=_BODY_SIZE * 0.85)
    h1: TextStyle = TextStyle(font_size=24.0)
    h2: TextStyle = TextStyle(font_size=20.0, font_weight="bold")
    h3: TextStyle = TextStyle(font_size=16.0, font_weight="bold")
    h4: TextStyle = TextStyle(font_size=_BODY_SIZE, font_weight="bold")
    h5: TextStyle = TextStyle(font_size=_BODY_SIZE)
    h6: TextStyle = TextStyle(font_size=_BODY_SIZE)
    em: TextStyle = TextStyle(font_style="italic")
    strong: TextStyle = TextStyle(font_weight="bold")
    del_: TextStyle = TextStyle(decoration="line_through")
    blockquote: TextStyle = TextStyle(font_size=_BODY_SIZE)
    img: TextStyle = TextStyle(font_size=_BODY_SIZE)
    checkbox: TextStyle = TextStyle(color="#1e88e5", font_size=_BODY_SIZE)
    list_bullet: TextStyle = TextStyle(font_size=_BODY_SIZE)
    table_head: TextStyle = TextStyle(font_weight="bold")
    table_body: TextStyle = TextStyle(font_size=_BODY_SIZE)

    text_align: WrapAlignment = "start"
    h1_align: WrapAlignment = "start"
    h2_align: WrapAlignment = "start"
    h3_align: WrapAlignment = "start"
    h4_align: WrapAlignment = "start"
    h5_align: WrapAlignment = "start"
    h6_align: WrapAlignment = "start"
    unordered_list_align: WrapAlignment = "start"
    ordered_list_align: WrapAlignment = "start"
    blockquote_align: WrapAlignment = "start"
    codeblock_align: WrapAlignment = "start"
    table_head_align: TextAlign = "center"

    blockquote_padding: EdgeInsets = EdgeInsets.all(8.0)
    codeblock_padding: EdgeInsets = EdgeInsets.all(8.0)
    list_bullet_padding: EdgeInsets = EdgeInsets(right=4.0)
    table_cells_padding: EdgeInsets = EdgeInsets.symmetric(horizontal=16.0, vertical=8.0)

    blockquote_decoration: BoxDecoration = BoxDecoration(color="#bbdefb", border_radius=2.0)
    codeblock_decoration: BoxDecoration = BoxDecoration(color="#eeeeee", border_radius=2.0)
    horizontal_rule_decoration: BoxDecoration = BoxDecoration(border_top=BorderSide(color="#bdbdbd", width=5.0))
    table_cells_decoration: BoxDecoration = BoxDecoration(color="#f5f5f5")
    table_border: TableBorder = TableBorder()

    list_indent: float = DEFAULT_LIST_INDENT
    block_spacing: float = DEFAULT_BLOCK_SPACING
    text_scale_factor: float = DEFAULT_TEXT_SCALE_FACTOR

    def __post_init__(self) -> None:
        """Validate alignment names and scalar settings.

        Raises
        ------
        StyleSheetError
            If an alignment is not a recognized name or a scalar is negative

        """
        for f in fields(self):
            value = getattr(self, f.name)
            if f.name == "table_head_align":
                if value not in get_args(TextAlign):
                    raise StyleSheetError(
                        f"Unknown text alignment {value!r} for {f.name}", parameter_name=f.name, parameter_value=value
                    )
            elif f.name.endswith("_align"):
                if value not in get_args(WrapAlignment):
                    raise StyleSheetError(
                        f"Unknown wrap alignment {value!r} for {f.name}", parameter_name=f.name, parameter_value=value
                    )
        for name in ("list_indent", "block_spacing", "text_scale_factor"):
            if getattr(self, name) < 0:
                raise StyleSheetError(f"{name} must not be negative", parameter_name=name)

    def style_for(self, tag: Optional[str]) -> Optional[TextStyle]:
        """Return the text style registered for ``tag``, if any.

        Parameters
        ----------
        tag : str or None
            Element tag

        Returns
        -------
        TextStyle or None
            The tag's style, ``None`` for tags without one

        """
        if tag is None:
            return None
        attribute = _TAG_STYLE_FIELDS.get(tag)
        return getattr(self, attribute) if attribute else None

    @property
    def styles(self) -> dict[str, TextStyle]:
        """Return the full tag to text style mapping."""
        return {tag: getattr(self, attribute) for tag, attribute in _TAG_STYLE_FIELDS.items()}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], base: Optional[StyleSheet] = None) -> StyleSheet:
        """Build a style sheet from configuration data.

        Keys are attribute names (``del`` is accepted for ``del_``). Text
        styles, decorations and borders are given as nested tables which are
        merged over the corresponding value of ``base``; paddings accept
        either a table or a single number for all sides.

        Parameters
        ----------
        data : Mapping
            Configuration values
        base : StyleSheet or None, default None
            Style sheet to start from, the defaults when omitted

        Returns
        -------
        StyleSheet
            The configured style sheet

        Raises
        ------
        StyleSheetError
            If a key is unknown or a value has the wrong shape

        """
        base = base or cls()
        known = {f.name for f in fields(cls)}
        updates: dict[str, Any] = {}
        for raw_key, value in data.items():
            key = "del_" if raw_key == "del" else raw_key
            if key not in known:
                raise StyleSheetError(f"Unknown style sheet key: {raw_key}", parameter_name=raw_key)
            updates[key] = _coerce_value(key, getattr(base, key), value)
        return base.create_updated(**updates)


def _coerce_value(key: str, current: Any, value: Any) -> Any:
    try:
        if isinstance(current, TextStyle):
            return current.merge(TextStyle(**_require_table(key, value)))
        if isinstance(current, EdgeInsets):
            if isinstance(value, (int, float)):
                return EdgeInsets.all(float(value))
            return EdgeInsets(**_require_table(key, value))
        if isinstance(current, BoxDecoration):
            table = dict(_require_table(key, value))
            for side in ("border_top", "border_right", "border_bottom", "border_left"):
                if side in table and table[side] is not None:
                    table[side] = BorderSide(**_require_table(f"{key}.{side}", table[side]))
            return BoxDecoration(**table)
        if isinstance(current, TableBorder):
            return TableBorder(**_require_table(key, value))
        if isinstance(current, float):
            return float(value)
    except TypeError as e:
        raise StyleSheetError(f"Invalid value for style sheet key {key}: {e}", parameter_name=key, original_error=e) from e
    except ValueError as e:
        raise StyleSheetError(
            f"Invalid number for style sheet key {key}: {value!r}", parameter_name=key, parameter_value=value
        ) from e
    return value


def _require_table(key: str, value: Any) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise StyleSheetError(
            f"Style sheet key {key} expects a table, got {type(value).__name__}",
            parameter_name=key,
            parameter_value=value,
        )
    return value


__all__ = ["StyleSheet"]
