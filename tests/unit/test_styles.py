#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Tests for text styles, the style sheet and alignment resolution."""
import pytest

from mdlayout.exceptions import MalformedTreeError, StyleSheetError
from mdlayout.styles import (
    BorderSide,
    BoxDecoration,
    EdgeInsets,
    StyleSheet,
    TableBorder,
    TextStyle,
    table_cell_alignment,
    text_align_for_block_tag,
    text_align_for_wrap_alignment,
    wrap_alignment_for_block_tag,
)


@pytest.mark.unit
class TestTextStyle:
    """Test style merging."""

    def test_set_fields_of_other_win(self):
        base = TextStyle(color="#000000", font_size=14.0)
        merged = base.merge(TextStyle(color="#ff0000", font_weight="bold"))
        assert merged == TextStyle(color="#ff0000", font_size=14.0, font_weight="bold")

    def test_merge_none_returns_self(self):
        style = TextStyle(color="#000000")
        assert style.merge(None) is style
        assert style.merge(TextStyle()) is style

    def test_styles_compare_by_value(self):
        assert TextStyle(font_style="italic") == TextStyle(font_style="italic")
        assert hash(TextStyle(font_style="italic")) == hash(TextStyle(font_style="italic"))

    def test_edge_insets_helpers(self):
        assert EdgeInsets.all(4.0) == EdgeInsets(4.0, 4.0, 4.0, 4.0)
        assert EdgeInsets.symmetric(horizontal=16.0, vertical=8.0) == EdgeInsets(16.0, 8.0, 16.0, 8.0)
        assert EdgeInsets(left=3.0, right=5.0).horizontal == 8.0


@pytest.mark.unit
class TestStyleSheet:
    """Test style sheet lookups, validation and configuration."""

    @pytest.mark.parametrize(
        "tag,attribute",
        [("li", "p"), ("table", "p"), ("th", "table_head"), ("tr", "table_body"), ("td", "table_body"), ("del", "del_")],
    )
    def test_shared_styles(self, tag, attribute):
        sheet = StyleSheet()
        assert sheet.style_for(tag) is getattr(sheet, attribute)

    def test_unstyled_tags(self):
        sheet = StyleSheet()
        assert sheet.style_for("ul") is None
        assert sheet.style_for(None) is None

    def test_styles_mapping(self):
        styles = StyleSheet().styles
        assert styles["del"] == TextStyle(decoration="line_through")
        assert "ul" not in styles

    def test_invalid_alignment(self):
        with pytest.raises(StyleSheetError) as exc_info:
            StyleSheet(h1_align="middle")
        assert exc_info.value.parameter_name == "h1_align"

    def test_head_alignment_uses_text_align_names(self):
        assert StyleSheet(table_head_align="left").table_head_align == "left"
        with pytest.raises(StyleSheetError):
            StyleSheet(table_head_align="space_around")

    def test_negative_spacing_rejected(self):
        with pytest.raises(StyleSheetError):
            StyleSheet(block_spacing=-1.0)

    def test_create_updated(self):
        sheet = StyleSheet().create_updated(block_spacing=0.0)
        assert sheet.block_spacing == 0.0
        assert sheet.h1 == StyleSheet().h1

    def test_from_dict_merges_text_styles(self):
        sheet = StyleSheet.from_dict({"h1": {"color": "#ff0000"}, "del": {"color": "#999999"}})
        assert sheet.h1 == TextStyle(font_size=24.0, color="#ff0000")
        assert sheet.del_ == TextStyle(decoration="line_through", color="#999999")

    def test_from_dict_shapes(self):
        sheet = StyleSheet.from_dict(
            {
                "blockquote_padding": 12,
                "codeblock_padding": {"left": 2, "right": 4},
                "horizontal_rule_decoration": {"border_top": {"color": "#000000", "width": 2}},
                "table_border": {"color": "#cccccc"},
                "block_spacing": "4",
                "text_align": "center",
            }
        )
        assert sheet.blockquote_padding == EdgeInsets.all(12.0)
        assert sheet.codeblock_padding == EdgeInsets(left=2, right=4)
        assert sheet.horizontal_rule_decoration == BoxDecoration(border_top=BorderSide("#000000", 2))
        assert sheet.table_border == TableBorder(color="#cccccc")
        assert sheet.block_spacing == 4.0
        assert sheet.text_align == "center"

    def test_from_dict_starts_from_base(self):
        base = StyleSheet(block_spacing=2.0)
        assert StyleSheet.from_dict({"h2_align": "end"}, base).block_spacing == 2.0

    @pytest.mark.parametrize(
        "data",
        [
            {"unknown": 1},
            {"h1": "red"},
            {"h1": {"colour": "#ff0000"}},
            {"block_spacing": "wide"},
            {"blockquote_padding": "8"},
            {"p_align": "center"},
            {"ul_align": "start"},
            {"unordered_list_align": "middle"},
        ],
    )
    def test_from_dict_rejects(self, data):
        with pytest.raises(StyleSheetError):
            StyleSheet.from_dict(data)


@pytest.mark.unit
class TestAlignmentResolution:
    """Test block and table cell alignment lookups."""

    def test_block_tag_alignment(self):
        sheet = StyleSheet(h2_align="center", ordered_list_align="end", codeblock_align="space_between")
        assert wrap_alignment_for_block_tag(sheet, "h2") == "center"
        assert wrap_alignment_for_block_tag(sheet, "ol") == "end"
        assert text_align_for_block_tag(sheet, "pre") == "justify"

    @pytest.mark.parametrize("tag", [None, "li", "hr", "table", "tabs"])
    def test_tags_without_setting_start_align(self, tag):
        sheet = StyleSheet(text_align="center")
        assert wrap_alignment_for_block_tag(sheet, tag) == "start"

    @pytest.mark.parametrize(
        "wrap,text",
        [
            ("start", "start"),
            ("center", "center"),
            ("end", "end"),
            ("space_around", "justify"),
            ("space_between", "justify"),
            ("space_evenly", "justify"),
        ],
    )
    def test_wrap_to_text_alignment(self, wrap, text):
        assert text_align_for_wrap_alignment(wrap) == text

    def test_cell_defaults(self):
        sheet = StyleSheet()
        assert table_cell_alignment(sheet, "th", None) == "center"
        assert table_cell_alignment(sheet, "td", None) == "left"

    @pytest.mark.parametrize("align", ["left", "center", "right"])
    def test_cell_style_attribute(self, align):
        assert table_cell_alignment(StyleSheet(), "td", f"text-align: {align}") == align

    def test_cell_style_with_trailing_declarations(self):
        assert table_cell_alignment(StyleSheet(), "th", "text-align: right; color: red") == "right"

    @pytest.mark.parametrize("style", ["text-align: justify", "color: red", "text-align:left", ""])
    def test_unrecognized_cell_style(self, style):
        with pytest.raises(MalformedTreeError) as exc_info:
            table_cell_alignment(StyleSheet(), "td", style)
        assert exc_info.value.node_tag == "td"
