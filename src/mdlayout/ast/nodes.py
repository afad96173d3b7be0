#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdlayout/ast/nodes.py
"""Document tree node classes consumed by the layout builder.

The tree is produced by an external markdown parser. It is deliberately
untyped beyond two node kinds:

    - Element: a tagged node with string attributes, optional children and
      an optional fence label (set on labeled code blocks)
    - Text: a leaf carrying raw text

Elements whose ``children`` is ``None`` are leaves (``img``, ``br``, ``hr``);
an empty list means a container that happens to have no content.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Optional


class Node(ABC):
    """Base class for document tree nodes.

    Nodes support the visitor protocol used by the layout builder: see
    :class:`mdlayout.ast.visitors.NodeVisitor`.

    """

    @abstractmethod
    def accept(self, visitor: Any) -> None:
        """Accept a visitor for processing this node.

        Parameters
        ----------
        visitor : Any
            A visitor implementing ``visit_element_before``, ``visit_text``
            and ``visit_element_after``

        """
        pass

    @property
    @abstractmethod
    def text_content(self) -> str:
        """Return the concatenated text of this node and its descendants."""
        pass


@dataclass(eq=False)
class Element(Node):
    """A tagged document node.

    Parameters
    ----------
    tag : str
        Element tag (``p``, ``h1``, ``a``, ``pre``, ...)
    children : list of Node or None, default = None
        Ordered child nodes, ``None`` for leaf elements
    attributes : dict, default = empty dict
        String attributes (``href``, ``src``, ``start``, ``style``, ...)
    label : str or None, default = None
        Fence label of a code block (e.g. ``"python"``), used for tab grouping

    Notes
    -----
    Elements compare by identity: rewriting passes locate a node inside its
    parent's child list by identity, not by structural equality.

    """

    tag: str
    children: Optional[list[Node]] = None
    attributes: dict[str, str] = field(default_factory=dict)
    label: Optional[str] = None

    def accept(self, visitor: Any) -> None:
        """Visit this element and, when the visitor allows it, its children.

        ``visit_element_before`` decides whether the subtree is entered.
        When it returns False neither the children nor
        ``visit_element_after`` are visited.

        Parameters
        ----------
        visitor : Any
            The visitor

        """
        if visitor.visit_element_before(self):
            if self.children is not None:
                for child in self.children:
                    child.accept(visitor)
            visitor.visit_element_after(self)

    @property
    def text_content(self) -> str:
        """Return the concatenated text of all descendant text nodes."""
        if not self.children:
            return ""
        return "".join(child.text_content for child in self.children)

    @property
    def is_leaf(self) -> bool:
        """Return True when the element has no child nodes."""
        return not self.children


@dataclass(eq=False)
class Text(Node):
    """A text leaf.

    Parameters
    ----------
    content : str
        The raw text

    """

    content: str

    def accept(self, visitor: Any) -> None:
        """Visit this text node."""
        visitor.visit_text(self)

    @property
    def text_content(self) -> str:
        """Return the raw text."""
        return self.content


def extract_link_text(node: Node) -> Optional[str]:
    """Derive the visible text of a link element.

    The text of all descendant text nodes is concatenated. A childless element
    with attributes falls back to its ``alt`` attribute (an image used as a
    link), and a bare childless element yields an empty string.

    Parameters
    ----------
    node : Node
        Link element (or any node)

    Returns
    -------
    str or None
        The derived text, ``None`` when an attributed leaf has no ``alt``

    """
    if isinstance(node, Text):
        return node.content
    if isinstance(node, Element):
        if node.children:
            return "".join(extract_link_text(child) or "" for child in node.children)
        if node.attributes:
            return node.attributes.get("alt")
    return ""


__all__ = ["Node", "Element", "Text", "extract_link_text"]
