#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdlayout/layout/spans.py
"""Merging of adjacent text runs.

Each text node of the input produces its own run. Before runs are placed
into a wrap they are coalesced so that, for example, the three runs of
``plain *em* plain`` become one rich text run with three spans, and two
neighbouring spans with the same style, tap handler and semantics label
become one span. Merging only reduces the number of render nodes; the
concatenated text and the style/handler of every character are preserved.

Examples
--------
    >>> from mdlayout.layout.nodes import TextSpan
    >>> from mdlayout.styles import TextStyle
    >>> bold = TextStyle(font_weight="bold")
    >>> [s.text for s in merge_spans([TextSpan("a", bold), TextSpan("b", bold), TextSpan("c")])]
    ['ab', 'c']

"""

from __future__ import annotations

from dataclasses import replace
from typing import Iterable, Iterator, Optional, Sequence

from mdlayout.constants import TextAlign
from mdlayout.layout.nodes import RenderNode, RichText, SelectableText, TextSpan


def _flatten(span: TextSpan) -> Iterator[TextSpan]:
    if span.is_composite:
        for child in span.children or ():
            yield from _flatten(child)
    else:
        yield span


def _mergeable(previous: TextSpan, span: TextSpan) -> bool:
    return (
        not previous.children
        and not span.children
        and previous.recognizer is span.recognizer
        and previous.semantics_label == span.semantics_label
        and previous.style == span.style
    )


def merge_spans(spans: Iterable[TextSpan]) -> list[TextSpan]:
    """Coalesce adjacent spans sharing style, tap handler and semantics label.

    Spans that only bundle children are flattened first, so the result is a
    flat, order-preserving list.

    Parameters
    ----------
    spans : iterable of TextSpan
        Spans in document order

    Returns
    -------
    list of TextSpan
        Merged spans

    """
    merged: list[TextSpan] = []
    for span in (leaf for candidate in spans for leaf in _flatten(candidate)):
        if merged and _mergeable(merged[-1], span):
            previous = merged.pop()
            merged.append(
                TextSpan(
                    text=previous.to_plain_text() + span.to_plain_text(),
                    style=previous.style,
                    recognizer=previous.recognizer,
                    semantics_label=previous.semantics_label,
                )
            )
        else:
            merged.append(span)
    return merged


def merge_similar_text_spans(spans: Sequence[TextSpan]) -> TextSpan:
    """Merge spans and return them as a single span.

    Returns
    -------
    TextSpan
        The only span left after merging, or a parent span bundling the
        merged spans

    """
    merged = merge_spans(spans)
    if len(merged) == 1:
        return merged[0]
    return TextSpan(children=merged)


def merge_inline_children(children: Sequence[RenderNode], text_align: Optional[TextAlign]) -> list[RenderNode]:
    """Merge adjacent text runs of an inline run list.

    Two neighbouring :class:`RichText` runs (or two neighbouring
    :class:`SelectableText` runs) become one run of the same kind whose span
    is the merge of both spans. Images and other nodes are kept in place and
    break merging.

    Parameters
    ----------
    children : sequence of RenderNode
        Inline children in document order
    text_align : TextAlign or None
        Alignment given to merged runs, ``"start"`` when None

    Returns
    -------
    list of RenderNode
        The merged children

    """
    merged: list[RenderNode] = []
    for child in children:
        previous = merged[-1] if merged else None
        if isinstance(child, (RichText, SelectableText)) and type(previous) is type(child):
            merged.pop()
            span = merge_similar_text_spans([previous.text, child.text])  # type: ignore[union-attr]
            merged.append(replace(previous, text=span, text_align=text_align or "start"))  # type: ignore[type-var]
        else:
            merged.append(child)
    return merged


__all__ = ["merge_spans", "merge_similar_text_spans", "merge_inline_children"]
