#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Tests for merging adjacent text spans and text runs."""
import pytest
from hypothesis import given
from hypothesis import strategies as st

from mdlayout.layout import (
    ImageRun,
    RichText,
    SelectableText,
    TapHandler,
    TextSpan,
    merge_inline_children,
    merge_similar_text_spans,
    merge_spans,
)
from mdlayout.styles import TextStyle

S = TextStyle(font_weight="bold")
T = TextStyle(font_style="italic")
H = TapHandler(text="link", href="https://example.com")


def _signature(span):
    return (span.style, id(span.recognizer) if span.recognizer else None, span.semantics_label)


@pytest.mark.unit
class TestMergeSpans:
    """Test coalescing of adjacent spans."""

    def test_same_style_and_handler_merge(self):
        merged = merge_spans(
            [TextSpan("a", style=S, recognizer=H), TextSpan("b", style=S, recognizer=H), TextSpan("c", style=T)]
        )

        assert [s.text for s in merged] == ["ab", "c"]
        assert merged[0].style == S
        assert merged[0].recognizer is H
        assert merged[1].style == T

    def test_equal_but_distinct_handlers_do_not_merge(self):
        other = TapHandler(text="link", href="https://example.com")
        merged = merge_spans([TextSpan("a", recognizer=H), TextSpan("b", recognizer=other)])
        assert len(merged) == 2

    def test_semantics_label_blocks_merge(self):
        merged = merge_spans([TextSpan("a", semantics_label="x"), TextSpan("b")])
        assert [s.text for s in merged] == ["a", "b"]

    def test_composite_spans_flattened(self):
        parent = TextSpan(children=[TextSpan("a", style=S), TextSpan("b", style=T)])
        merged = merge_spans([parent, TextSpan("c", style=T)])
        assert [(s.text, s.style) for s in merged] == [("a", S), ("bc", T)]

    def test_styled_parent_kept_whole(self):
        parent = TextSpan(style=S, children=[TextSpan("a")])
        merged = merge_spans([parent, TextSpan("b", style=S)])
        assert merged[0] is parent
        assert len(merged) == 2

    def test_empty(self):
        assert merge_spans([]) == []

    @given(
        st.lists(
            st.tuples(st.text(max_size=5), st.sampled_from([None, S, T]), st.sampled_from([None, H])),
            max_size=12,
        )
    )
    def test_text_and_boundaries_preserved(self, items):
        spans = [TextSpan(text, style=style, recognizer=handler) for text, style, handler in items]
        merged = merge_spans(spans)

        assert "".join(s.to_plain_text() for s in merged) == "".join(text for text, _, _ in items)
        assert len(merged) <= len(spans)
        for previous, current in zip(merged, merged[1:]):
            assert _signature(previous) != _signature(current)

    @given(
        st.lists(st.tuples(st.text(max_size=4), st.sampled_from([None, S, T])), max_size=10),
        st.integers(min_value=0, max_value=10),
    )
    def test_associative(self, items, split):
        spans = [TextSpan(text, style=style) for text, style in items]
        split = min(split, len(spans))

        whole = merge_spans(spans)
        in_parts = merge_spans(merge_spans(spans[:split]) + merge_spans(spans[split:]))
        assert [(s.text, s.style) for s in in_parts] == [(s.text, s.style) for s in whole]


@pytest.mark.unit
class TestMergeSimilarTextSpans:
    """Test merging into a single span."""

    def test_single_result_returned_directly(self):
        span = merge_similar_text_spans([TextSpan("a", style=S), TextSpan("b", style=S)])
        assert span.text == "ab"
        assert span.children is None

    def test_several_results_bundled(self):
        span = merge_similar_text_spans([TextSpan("a", style=S), TextSpan("b", style=T)])
        assert span.text is None
        assert [c.text for c in span.children] == ["a", "b"]
        assert span.to_plain_text() == "ab"


@pytest.mark.unit
class TestMergeInlineChildren:
    """Test merging of adjacent text runs."""

    def test_adjacent_rich_text_merged(self):
        merged = merge_inline_children(
            [RichText(TextSpan("a", style=S)), RichText(TextSpan("b", style=S)), RichText(TextSpan("c", style=T))],
            "center",
        )

        assert len(merged) == 1
        assert merged[0].text_align == "center"
        assert [c.text for c in merged[0].text.children] == ["ab", "c"]

    def test_images_break_runs(self):
        image = ImageRun("a.png")
        merged = merge_inline_children([RichText(TextSpan("a")), image, RichText(TextSpan("b"))], None)

        assert merged[1] is image
        assert [type(n) for n in merged] == [RichText, ImageRun, RichText]
        assert merged[2].text_align == "start"

    def test_selectable_runs_keep_tap_callback(self):
        def on_tap():
            return None

        merged = merge_inline_children(
            [SelectableText(TextSpan("a"), on_tap=on_tap), SelectableText(TextSpan("b"), on_tap=on_tap)], "start"
        )
        assert len(merged) == 1
        assert isinstance(merged[0], SelectableText)
        assert merged[0].on_tap is on_tap
        assert merged[0].text.to_plain_text() == "ab"

    def test_mixed_run_types_not_merged(self):
        merged = merge_inline_children([RichText(TextSpan("a")), SelectableText(TextSpan("b"))], "start")
        assert len(merged) == 2
