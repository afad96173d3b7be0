#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdlayout/transforms/tabs.py
"""Grouping of consecutive labeled code blocks into tab groups.

Documentation often shows the same snippet in several languages as adjacent
fenced code blocks, each with a fence label (```` ```python ````,
```` ```js ````). Two or more such blocks in a row are collapsed into one
``tabs`` element whose children are exactly those blocks; the builder later
renders it as a tab strip. A lone labeled block is left alone.

"""

from __future__ import annotations

import logging

from mdlayout.ast.nodes import Element, Node
from mdlayout.constants import CODE_BLOCK_TAG, TABS_TAG

logger = logging.getLogger(__name__)


def is_labeled_code_block(node: Node) -> bool:
    """Return True for a ``pre`` element carrying a non-empty fence label."""
    return isinstance(node, Element) and node.tag == CODE_BLOCK_TAG and bool(node.label)


def coalesce_tab_groups(nodes: list[Node]) -> int:
    """Collapse runs of labeled code blocks into ``tabs`` elements, in place.

    Child lists of every element are processed before the list itself, so
    nested groups are formed innermost-first.

    Parameters
    ----------
    nodes : list of Node
        Sibling list to rewrite

    Returns
    -------
    int
        Number of tab groups created, including nested ones

    Examples
    --------
        >>> from mdlayout.ast import Element
        >>> nodes = [Element("pre", [], label="js"), Element("pre", [], label="py"), Element("p", [])]
        >>> coalesce_tab_groups(nodes)
        1
        >>> [n.tag for n in nodes]
        ['tabs', 'p']

    """
    created = 0
    for node in nodes:
        if isinstance(node, Element) and node.children:
            created += coalesce_tab_groups(node.children)

    index = 0
    while index < len(nodes):
        end = index
        while end < len(nodes) and is_labeled_code_block(nodes[end]):
            end += 1
        if end - index > 1:
            group = Element(TABS_TAG, nodes[index:end])
            nodes[index:end] = [group]
            created += 1
            logger.debug(f"Grouped {end - index} labeled code blocks into tabs")
        index += 1
    return created


__all__ = ["is_labeled_code_block", "coalesce_tab_groups"]
