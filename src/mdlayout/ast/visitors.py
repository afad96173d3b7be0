#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdlayout/ast/visitors.py
"""Visitor protocol for document tree traversal.

Traversal is driven by the nodes themselves (see :meth:`Element.accept`):
an element calls ``visit_element_before``, then visits its children, then
calls ``visit_element_after``. Text nodes call ``visit_text``.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable

from mdlayout.ast.nodes import Element, Node, Text


class NodeVisitor(ABC):
    """Abstract base class for document tree visitors.

    Examples
    --------
    Collecting the text of every link:

        >>> class LinkCollector(NodeVisitor):
        ...     def __init__(self):
        ...         self.links = []
        ...
        ...     def visit_element_before(self, element):
        ...         if element.tag == "a":
        ...             self.links.append(element.text_content)
        ...         return True
        ...
        ...     def visit_text(self, text):
        ...         pass
        ...
        ...     def visit_element_after(self, element):
        ...         pass

    """

    @abstractmethod
    def visit_element_before(self, element: Element) -> bool:
        """Enter an element.

        Parameters
        ----------
        element : Element
            The element being entered

        Returns
        -------
        bool
            True to visit the children and the matching
            ``visit_element_after`` call, False to skip the whole subtree

        """
        pass

    @abstractmethod
    def visit_text(self, text: Text) -> None:
        """Visit a text leaf.

        Parameters
        ----------
        text : Text
            The text node

        """
        pass

    @abstractmethod
    def visit_element_after(self, element: Element) -> None:
        """Leave an element whose ``visit_element_before`` returned True.

        Parameters
        ----------
        element : Element
            The element being left

        """
        pass

    def visit_all(self, nodes: Iterable[Node]) -> None:
        """Visit a sequence of sibling nodes in order.

        Parameters
        ----------
        nodes : iterable of Node
            Nodes to visit

        """
        for node in nodes:
            node.accept(self)


__all__ = ["NodeVisitor"]
