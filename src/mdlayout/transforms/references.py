#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdlayout/transforms/references.py
"""Rewriting of bare URLs and uploaded media paths into link and image nodes.

Markdown authors often paste plain URLs or upload paths (``/upload/a.png``)
without link syntax. This pass scans the text leaves of a document tree and
replaces every match with a typed node:

    - a media path or URL ending in a recognized image/video extension
      becomes ``img`` with ``src`` set and an empty ``alt``
    - any other URL becomes ``a`` with ``href`` set and the URL as its text

Code blocks (``pre``) and existing links (``a``) are not scanned inside;
instead their whole text is checked and, when it names a media file, the
element itself is replaced by an image.

The pass mutates child lists in place by index, one node for one node, so
sibling positions never shift while a list is being scanned.

Examples
--------
    >>> from mdlayout.ast import Element, Text
    >>> para = Element("p", [Text("See https://example.com now")])
    >>> rewrite_references([para])
    1
    >>> [type(n).__name__ for n in para.children[0].children]
    ['Text', 'Element', 'Text']

"""

from __future__ import annotations

import logging
import re
from typing import Optional

from mdlayout.ast.nodes import Element, Node, Text
from mdlayout.constants import (
    CODE_BLOCK_TAG,
    MEDIA_TYPES,
    REFERENCE_WRAPPER_TAG,
    UPLOAD_MEDIA_PATTERN,
    URL_PATTERN,
)

logger = logging.getLogger(__name__)

_REFERENCE_RE = re.compile(f"({URL_PATTERN})|({UPLOAD_MEDIA_PATTERN})")

# Elements scanned as a whole rather than descended into
_OPAQUE_TAGS = frozenset({CODE_BLOCK_TAG, "a"})


def is_media_reference(value: str) -> bool:
    """Return True when the text after the last ``.`` is an image or video type."""
    return value.rsplit(".", 1)[-1] in MEDIA_TYPES


def _image_element(src: str) -> Element:
    return Element("img", None, {"src": src, "alt": ""})


def rewrite_text(content: str) -> Optional[list[Node]]:
    """Split text around URL and media references.

    Parameters
    ----------
    content : str
        Raw text of a text leaf

    Returns
    -------
    list of Node or None
        Text runs interleaved with ``a``/``img`` elements in document order,
        or None when the text contains no reference

    """
    emitted: list[Node] = []
    index = 0
    for match in _REFERENCE_RE.finditer(content):
        start, end = match.span()
        if index != start:
            emitted.append(Text(content[index:start]))
        reference = match.group(0).replace(" ", "")
        if is_media_reference(reference):
            emitted.append(_image_element(reference))
        else:
            emitted.append(Element("a", [Text(reference)], {"href": reference}))
        index = end

    if not emitted:
        return None
    if len(content) > index:
        emitted.append(Text(content[index:]))
    return emitted


def _rewrite_node(node: Node) -> Optional[Node]:
    """Return the replacement for ``node``, or None to keep it."""
    if isinstance(node, Text):
        emitted = rewrite_text(node.content)
        if emitted is None:
            return None
        if len(emitted) == 1:
            return emitted[0]
        return Element(REFERENCE_WRAPPER_TAG, emitted)

    if isinstance(node, Element) and (node.is_leaf or node.tag in _OPAQUE_TAGS):
        text = node.text_content
        if is_media_reference(text):
            return _image_element(text)
    return None


def rewrite_references(nodes: list[Node]) -> int:
    """Rewrite URL and media references throughout a sibling list, depth-first.

    Parameters
    ----------
    nodes : list of Node
        Sibling list to rewrite in place (typically the top-level document)

    Returns
    -------
    int
        Number of nodes replaced, including those in nested child lists

    """
    replaced = 0
    for index, node in enumerate(nodes):
        if isinstance(node, Element) and not node.is_leaf and node.tag not in _OPAQUE_TAGS:
            replaced += rewrite_references(node.children)  # type: ignore[arg-type]
            continue
        replacement = _rewrite_node(node)
        if replacement is not None:
            nodes[index] = replacement
            replaced += 1
    if replaced:
        logger.debug(f"Rewrote {replaced} references in a list of {len(nodes)} nodes")
    return replaced


__all__ = ["is_media_reference", "rewrite_text", "rewrite_references"]
